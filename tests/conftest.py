import logging

import pytest
from unittest.mock import AsyncMock, MagicMock

from config import ProxySettings, Config
from tests.fixtures.responses import UPSTREAM_URL, SUCCESS_RESPONSE


@pytest.fixture
def proxy_settings():
    """Settings pointing at a fake upstream."""
    return ProxySettings(
        model="test/vision-model",
        upstream_url=UPSTREAM_URL,
        site_url="https://app.example.com",
        app_name="TestApp",
        api_key_name="OPENROUTER_API_KEY",
        min_attachment_length=100,
        cors_headers=Config.cors_headers(),
    )

@pytest.fixture
def mock_logger():
    """Diagnostic sink stand-in."""
    return MagicMock(spec=logging.Logger)

@pytest.fixture
def mock_secret_store():
    """Secret store holding a configured API key."""
    store = MagicMock()
    store.get_secret = AsyncMock(return_value="test-openrouter-key")
    return store

@pytest.fixture
def empty_secret_store():
    """Secret store with nothing configured."""
    store = MagicMock()
    store.get_secret = AsyncMock(return_value=None)
    return store

@pytest.fixture
def upstream_client_builder():
    from tests.fixtures.mock_clients import UpstreamClientBuilder
    return UpstreamClientBuilder()

@pytest.fixture
def mock_upstream_client(upstream_client_builder):
    """Upstream client answering with a healthy completion."""
    return upstream_client_builder.respond_with(200, SUCCESS_RESPONSE).build()

@pytest.fixture
def proxy_service(proxy_settings, mock_secret_store, mock_upstream_client, mock_logger):
    """ProxyService wired to mocks."""
    from services.proxy_service import ProxyService
    from services.upstream_adapter import OpenRouterResponseAdapter
    return ProxyService(
        proxy_settings,
        mock_secret_store,
        mock_upstream_client,
        OpenRouterResponseAdapter(),
        mock_logger,
    )

@pytest.fixture
def build_app(proxy_settings, mock_secret_store, mock_upstream_client, mock_logger):
    """Factory for a pre-configured app; keyword arguments override collaborators."""
    from fastapi import FastAPI
    from fastapi.testclient import TestClient
    from cors import CORSHeadersMiddleware
    from routes import proxy

    def _build(secret_store=None, upstream_client=None, service=None):
        app = FastAPI()
        app.add_middleware(CORSHeadersMiddleware, headers=proxy_settings.cors_headers)
        app.include_router(proxy.router)

        app.dependency_overrides[proxy.get_proxy_settings] = lambda: proxy_settings
        app.dependency_overrides[proxy.get_secret_store] = lambda: secret_store or mock_secret_store
        app.dependency_overrides[proxy.get_http_client] = lambda: upstream_client or mock_upstream_client
        app.dependency_overrides[proxy.get_diagnostic_logger] = lambda: mock_logger
        if service is not None:
            app.dependency_overrides[proxy.get_proxy_service] = lambda: service

        return TestClient(app)

    return _build

@pytest.fixture
def configured_app(build_app):
    """Pre-configured app with all standard mocks."""
    with build_app() as client:
        yield client
