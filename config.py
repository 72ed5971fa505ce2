"""
Configuration module for the Multimodal Chat Proxy.
Handles environment variables and application settings.
"""
import os
from dataclasses import dataclass, field
from typing import Dict

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class ProxySettings:
    """Immutable settings injected into the payload builder and proxy service."""
    model: str
    upstream_url: str
    site_url: str
    app_name: str
    api_key_name: str
    min_attachment_length: int
    cors_headers: Dict[str, str] = field(default_factory=dict)


class Config:
    """Application configuration class."""

    # Secret name looked up in the secret store on every request
    OPENROUTER_API_KEY_NAME: str = "OPENROUTER_API_KEY"

    # API Configuration
    OPENROUTER_URL: str = os.getenv("OPENROUTER_URL", "https://openrouter.ai/api/v1/chat/completions")
    OPENROUTER_MODEL: str = os.getenv("OPENROUTER_MODEL", "deepseek/deepseek-chat-v3")

    # Attribution headers sent to OpenRouter
    SITE_URL: str = os.getenv("SITE_URL", "http://localhost:8081")
    APP_NAME: str = os.getenv("APP_NAME", "FantasyAI")

    # Application Settings
    APP_TITLE: str = "Multimodal Chat Proxy"
    CORS_ALLOW_ORIGIN: str = os.getenv("CORS_ALLOW_ORIGIN", "*")
    CORS_ALLOW_HEADERS: str = "authorization, x-client-info, apikey, content-type"
    CORS_ALLOW_METHODS: str = "POST, OPTIONS"

    # Attachments shorter than this are dropped before reaching the upstream
    MIN_ATTACHMENT_BASE64_LENGTH: int = 100

    # Timeouts (in seconds)
    UPSTREAM_TIMEOUT: float = float(os.getenv("UPSTREAM_TIMEOUT", "60"))

    @classmethod
    def cors_headers(cls) -> Dict[str, str]:
        """Fixed CORS headers attached to every response."""
        return {
            "Access-Control-Allow-Origin": cls.CORS_ALLOW_ORIGIN,
            "Access-Control-Allow-Headers": cls.CORS_ALLOW_HEADERS,
            "Access-Control-Allow-Methods": cls.CORS_ALLOW_METHODS,
        }

    @classmethod
    def proxy_settings(cls) -> ProxySettings:
        """Freeze the current configuration into a ProxySettings instance."""
        return ProxySettings(
            model=cls.OPENROUTER_MODEL,
            upstream_url=cls.OPENROUTER_URL,
            site_url=cls.SITE_URL,
            app_name=cls.APP_NAME,
            api_key_name=cls.OPENROUTER_API_KEY_NAME,
            min_attachment_length=cls.MIN_ATTACHMENT_BASE64_LENGTH,
            cors_headers=cls.cors_headers(),
        )

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and print warnings for missing secrets."""
        if not os.getenv(cls.OPENROUTER_API_KEY_NAME):
            print(f"   WARNING: {cls.OPENROUTER_API_KEY_NAME} not found in environment or .env file")
            print("   Every chat request will fail with 'API key not configured' until it is set.")


Config.validate()
