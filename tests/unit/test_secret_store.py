import pytest

from services.secret_store import EnvSecretStore


@pytest.mark.anyio
async def test_get_secret_returns_configured_value(monkeypatch):
    """Given the variable is set, get_secret should return its value."""
    monkeypatch.setenv("OPENROUTER_API_KEY", "sk-or-test")
    assert await EnvSecretStore().get_secret("OPENROUTER_API_KEY") == "sk-or-test"

@pytest.mark.anyio
@pytest.mark.parametrize("value", [None, ""])
async def test_get_secret_returns_none_when_unset_or_empty(monkeypatch, value):
    """Given the variable is missing or empty, get_secret should return None."""
    if value is None:
        monkeypatch.delenv("OPENROUTER_API_KEY", raising=False)
    else:
        monkeypatch.setenv("OPENROUTER_API_KEY", value)
    assert await EnvSecretStore().get_secret("OPENROUTER_API_KEY") is None
