import pytest
from starlette.testclient import TestClient
from starlette.applications import Starlette
from starlette.responses import PlainTextResponse

from cors import CORSHeadersMiddleware

CUSTOM_HEADERS = {
    "Access-Control-Allow-Origin": "https://app.example.com",
    "Access-Control-Allow-Headers": "content-type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}

async def root(request):
    return PlainTextResponse("API Running")

async def explode(request):
    raise ValueError("bad state")

@pytest.fixture
def app_with_middleware():
    app = Starlette()
    app.add_middleware(CORSHeadersMiddleware, headers=CUSTOM_HEADERS)
    app.add_route("/", root, methods=["GET", "POST"])
    app.add_route("/explode", explode, methods=["POST"])
    return app

@pytest.fixture
def client(app_with_middleware):
    return TestClient(app_with_middleware)

def test_preflight_is_answered_before_routing(client):
    """Given an OPTIONS request to any path, the middleware should answer it directly."""
    response = client.request("OPTIONS", "/does-not-exist", content=b"{oops")
    assert response.status_code == 200
    assert response.text == "ok"
    for name, value in CUSTOM_HEADERS.items():
        assert response.headers[name] == value

@pytest.mark.parametrize("method", ["GET", "POST"])
def test_headers_are_attached_to_normal_responses(client, method):
    """Given a routed request, the response should pass through with CORS headers added."""
    response = client.request(method, "/")
    assert response.status_code == 200
    assert response.text == "API Running"
    assert response.headers["Access-Control-Allow-Origin"] == "https://app.example.com"

def test_exception_becomes_json_envelope(client):
    """Given a handler that raises, the middleware should return the generic 500 envelope with headers."""
    response = client.post("/explode")
    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error", "details": "bad state"}
    assert response.headers["Access-Control-Allow-Methods"] == "POST, OPTIONS"

def test_defaults_to_configured_headers():
    """Given no explicit headers, the middleware should use the configured CORS set."""
    from config import Config
    middleware = CORSHeadersMiddleware(Starlette())
    assert middleware.headers == Config.cors_headers()
