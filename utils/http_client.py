"""
HTTP client utilities with connection pooling.
Provides a reusable httpx client for upstream chat-completion calls.
"""
import httpx
from config import Config


class HTTPClientManager:
    """Manages the shared httpx client with connection pooling."""

    _upstream_client: httpx.AsyncClient | None = None

    @classmethod
    def get_upstream_client(cls) -> httpx.AsyncClient:
        """
        Get or create a shared httpx client for the OpenRouter API.

        Features:
        - Connection pooling (reuses TCP connections)
        - HTTP/2

        Returns:
            Configured httpx.AsyncClient for upstream calls
        """
        if cls._upstream_client is None:
            limits = httpx.Limits(
                max_connections=50,
                max_keepalive_connections=10,
                keepalive_expiry=60.0
            )

            cls._upstream_client = httpx.AsyncClient(
                timeout=Config.UPSTREAM_TIMEOUT,
                limits=limits,
                http2=True
            )

        return cls._upstream_client

    @classmethod
    async def close_all(cls) -> None:
        """
        Close the managed client and clean up connections.
        """
        if cls._upstream_client is not None:
            await cls._upstream_client.aclose()
            cls._upstream_client = None
