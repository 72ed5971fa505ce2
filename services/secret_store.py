"""
Secret lookup for the upstream API key.
"""
import os
from typing import Optional


class EnvSecretStore:
    """Reads secrets from the process environment (populated by .env at startup)."""

    async def get_secret(self, name: str) -> Optional[str]:
        """Return the secret value, or None when unset or empty."""
        return os.getenv(name) or None
