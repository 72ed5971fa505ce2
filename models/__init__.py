"""
Models package exports.
"""
from models.api_models import (
    ProxyChatRequest,
    TextContent,
    ImageUrlContent,
    AudioUrlContent,
    MediaUrl,
    ContentPart,
    UpstreamMessage,
    UpstreamChatPayload,
)
from models.chat_models import ProxyErrorCode, ProxySuccess, ProxyFailure, ProxyOutcome

__all__ = [
    'ProxyChatRequest',
    'TextContent',
    'ImageUrlContent',
    'AudioUrlContent',
    'MediaUrl',
    'ContentPart',
    'UpstreamMessage',
    'UpstreamChatPayload',
    'ProxyErrorCode',
    'ProxySuccess',
    'ProxyFailure',
    'ProxyOutcome',
]
