"""
Pydantic data models for API requests and upstream payloads.
"""
from typing import List, Literal, Optional, Union
from pydantic import BaseModel, Field, field_validator


class ProxyChatRequest(BaseModel):
    """Inbound chat request: a prompt plus optional base64 attachments."""

    prompt: str = Field(..., min_length=1)
    image_base64: Optional[str] = Field(None, alias="imageBase64")
    audio_base64: Optional[str] = Field(None, alias="audioBase64")

    @field_validator("image_base64", "audio_base64", mode="before")
    @classmethod
    def drop_non_string_attachment(cls, value):
        # Attachments are optional; a wrongly typed one is treated as absent
        return value if isinstance(value, str) else None


class TextContent(BaseModel):
    """Text content part."""
    type: Literal["text"] = "text"
    text: str


class MediaUrl(BaseModel):
    url: str  # data:<mime>;base64,<payload>


class ImageUrlContent(BaseModel):
    """Inline image content part."""
    type: Literal["image_url"] = "image_url"
    image_url: MediaUrl


class AudioUrlContent(BaseModel):
    """Inline audio content part."""
    type: Literal["audio_url"] = "audio_url"
    audio_url: MediaUrl


ContentPart = Union[TextContent, ImageUrlContent, AudioUrlContent]


class UpstreamMessage(BaseModel):
    """Single chat message in the upstream payload."""
    role: Literal["user", "assistant", "system"]
    content: List[ContentPart]


class UpstreamChatPayload(BaseModel):
    """Chat-completions request body sent to OpenRouter."""
    model: str
    messages: List[UpstreamMessage]
