"""
Data models for proxy processing.
Contains the closed outcome type returned by the proxy service.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class ProxyErrorCode(Enum):
    """Fault classes a proxy request can end in."""
    METHOD_NOT_ALLOWED = "method_not_allowed"
    INVALID_JSON = "invalid_json"
    MISSING_PROMPT = "missing_prompt"
    SERVER_MISCONFIGURED = "server_misconfigured"
    UPSTREAM_ERROR = "upstream_error"
    UPSTREAM_SHAPE_ERROR = "upstream_shape_error"


@dataclass(frozen=True)
class ProxySuccess:
    """Assistant message returned by the upstream."""
    message: str
    status_code: int = 200

    def to_content(self) -> dict:
        return {"message": self.message}


@dataclass(frozen=True)
class ProxyFailure:
    """Terminal fault, rendered as the `{error, details?}` envelope."""
    status_code: int
    code: ProxyErrorCode
    error: str
    details: Optional[str] = None

    def to_content(self) -> dict:
        content = {"error": self.error}
        if self.details is not None:
            content["details"] = self.details
        return content


ProxyOutcome = Union[ProxySuccess, ProxyFailure]
