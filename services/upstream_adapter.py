"""
Adapters that pull the assistant message out of an upstream success body.
"""
from typing import Any


class UpstreamResponseFormatError(ValueError):
    """Raised when a 2xx upstream body does not contain an assistant message."""


class ResponseAdapter:
    """Provider-specific extraction of the assistant message."""

    def extract_assistant_message(self, raw: Any) -> str:
        raise NotImplementedError


class OpenRouterResponseAdapter(ResponseAdapter):
    """Reads `choices[0].message.content` from an OpenAI-compatible response."""

    def extract_assistant_message(self, raw: Any) -> str:
        try:
            content = raw["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise UpstreamResponseFormatError(f"missing choices[0].message.content: {e!r}") from e

        if not isinstance(content, str) or not content:
            raise UpstreamResponseFormatError("assistant message content is empty or not a string")

        return content
