"""
Constants for the Multimodal Chat Proxy.
"""


# Client-facing error strings
class ErrorMessages:
    """Error strings returned in the `error` field of the response envelope."""
    METHOD_NOT_ALLOWED = "Method Not Allowed"
    INVALID_JSON = "Bad Request: Invalid JSON"
    MISSING_PROMPT = "Bad Request: Missing prompt"
    API_KEY_NOT_CONFIGURED = "Internal Server Error: API key not configured"
    INVALID_RESPONSE_FORMAT = "Internal Server Error: Invalid response format from AI service"
    UPSTREAM_ERROR = "OpenRouter API Error: {reason}"
    INTERNAL_SERVER_ERROR = "Internal Server Error"


# Data URI prefixes for inline attachments
class MimePrefixes:
    """Data URI prefixes for each attachment modality."""
    IMAGE = "data:image/jpeg;base64,"
    AUDIO = "data:audio/mp3;base64,"


# Regular expression patterns
class Patterns:
    """Regular expression patterns for attachment sanity checks."""
    BASE64 = r'[A-Za-z0-9+/]+={0,2}'
