"""
Payload builder for upstream chat-completion requests.
Turns a validated ProxyChatRequest into a single-message multimodal payload.
"""
import logging
import re
from typing import List, Optional

from config import ProxySettings
from models.api_models import (
    ProxyChatRequest,
    ContentPart,
    TextContent,
    ImageUrlContent,
    AudioUrlContent,
    MediaUrl,
    UpstreamMessage,
    UpstreamChatPayload,
)
from utils.constants import MimePrefixes, Patterns
from utils.logger import DiagnosticLogger, app_logger


class PayloadBuilder:
    """Builds OpenRouter chat payloads. Performs no I/O."""

    _BASE64_RE = re.compile(Patterns.BASE64)

    @staticmethod
    def is_plausible_base64(value: Optional[str], min_length: int) -> bool:
        """Lightweight sanity check: long enough and only base64 alphabet characters."""
        if not isinstance(value, str) or len(value) < min_length:
            return False
        return PayloadBuilder._BASE64_RE.fullmatch(value) is not None

    @staticmethod
    def build_content_parts(
        request: ProxyChatRequest,
        min_attachment_length: int,
        logger: logging.Logger = app_logger,
    ) -> List[ContentPart]:
        """
        Build the ordered content parts for the user message.

        The text part is always first, followed by the image and then the audio
        part when present. Attachments failing the sanity check are dropped.
        """
        logger = DiagnosticLogger.wrap(logger)
        parts: List[ContentPart] = [TextContent(text=request.prompt)]

        attachments = (
            ("image", request.image_base64, MimePrefixes.IMAGE, ImageUrlContent, "image_url"),
            ("audio", request.audio_base64, MimePrefixes.AUDIO, AudioUrlContent, "audio_url"),
        )

        for label, data, prefix, part_cls, field_name in attachments:
            if data is None:
                continue
            if not PayloadBuilder.is_plausible_base64(data, min_attachment_length):
                logger.warning(f"Dropping malformed {label} attachment ({len(data)} chars)")
                continue
            parts.append(part_cls(**{field_name: MediaUrl(url=f"{prefix}{data}")}))
            logger.debug(f"Attached {label} ({len(data)} base64 chars)")

        return parts

    @staticmethod
    def build_payload(
        request: ProxyChatRequest,
        settings: ProxySettings,
        logger: logging.Logger = app_logger,
    ) -> UpstreamChatPayload:
        """Build the upstream payload for a single user turn."""
        content = PayloadBuilder.build_content_parts(
            request,
            settings.min_attachment_length,
            logger,
        )
        return UpstreamChatPayload(
            model=settings.model,
            messages=[UpstreamMessage(role="user", content=content)],
        )
