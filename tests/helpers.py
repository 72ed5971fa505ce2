from config import Config


def assert_cors_headers(response):
    """Assert that the fixed CORS header set is present on a response."""
    for name, value in Config.cors_headers().items():
        assert response.headers.get(name) == value, f"Header '{name}' missing or wrong: {response.headers.get(name)!r}"


def assert_error_envelope(response, status_code, error, details=None):
    """Assert status code, error string and (optionally) details of an error response."""
    assert response.status_code == status_code, response.text
    body = response.json()
    assert body["error"] == error
    if details is not None:
        assert body["details"] == details
    assert_cors_headers(response)
