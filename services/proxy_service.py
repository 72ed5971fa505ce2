"""
Proxy service containing the request lifecycle.
Validates the inbound request, calls OpenRouter and maps every result to a ProxyOutcome.
"""
import json
import logging

import httpx
from pydantic import ValidationError

from config import ProxySettings
from models.api_models import ProxyChatRequest
from models.chat_models import ProxyErrorCode, ProxyFailure, ProxyOutcome, ProxySuccess
from services.payload_builder import PayloadBuilder
from services.secret_store import EnvSecretStore
from services.upstream_adapter import ResponseAdapter
from utils.constants import ErrorMessages
from utils.logger import DiagnosticLogger


class ProxyService:
    """Single-shot chat proxy. Holds no state between requests."""

    def __init__(
        self,
        settings: ProxySettings,
        secret_store: EnvSecretStore,
        http_client: httpx.AsyncClient,
        adapter: ResponseAdapter,
        logger: logging.Logger,
    ):
        self.settings = settings
        self.secret_store = secret_store
        self.http_client = http_client
        self.adapter = adapter
        self.logger = DiagnosticLogger.wrap(logger)

    async def handle(self, method: str, body: bytes) -> ProxyOutcome:
        """
        Run one request through the proxy.

        Args:
            method: HTTP method of the inbound request
            body: Raw request body

        Returns:
            ProxySuccess with the assistant message, or the first ProxyFailure hit
        """
        self.logger.info(f"Handling {method} request")

        if method != "POST":
            self.logger.error(f"Invalid method: {method}")
            return ProxyFailure(405, ProxyErrorCode.METHOD_NOT_ALLOWED, ErrorMessages.METHOD_NOT_ALLOWED)

        payload = self._parse_body(body)
        if payload is None:
            return ProxyFailure(400, ProxyErrorCode.INVALID_JSON, ErrorMessages.INVALID_JSON)

        try:
            request = ProxyChatRequest.model_validate(payload)
        except ValidationError as e:
            self.logger.error(f"Missing prompt in payload: {[err['loc'] for err in e.errors()]}")
            return ProxyFailure(400, ProxyErrorCode.MISSING_PROMPT, ErrorMessages.MISSING_PROMPT)

        self.logger.info(
            f"Request payload received: prompt={len(request.prompt)} chars, "
            f"image={request.image_base64 is not None}, audio={request.audio_base64 is not None}"
        )

        api_key = await self.secret_store.get_secret(self.settings.api_key_name)
        if not api_key:
            self.logger.error(f"CRITICAL: {self.settings.api_key_name} is not configured")
            return ProxyFailure(500, ProxyErrorCode.SERVER_MISCONFIGURED, ErrorMessages.API_KEY_NOT_CONFIGURED)

        upstream_payload = PayloadBuilder.build_payload(request, self.settings, self.logger)

        return await self._call_upstream(upstream_payload.model_dump(), api_key)

    def _parse_body(self, body: bytes) -> dict | None:
        """Decode the raw body; anything but a JSON object counts as unparseable."""
        try:
            payload = json.loads(body)
        except ValueError as e:
            self.logger.error(f"Failed to parse request body: {e}")
            return None

        if not isinstance(payload, dict):
            self.logger.error(f"Request body is not a JSON object: {type(payload).__name__}")
            return None

        return payload

    def _upstream_headers(self, api_key: str) -> dict:
        return {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            "HTTP-Referer": self.settings.site_url,
            "X-Title": self.settings.app_name,
        }

    async def _call_upstream(self, payload: dict, api_key: str) -> ProxyOutcome:
        """Issue the single upstream call and normalize its result."""
        self.logger.info(f"Calling OpenRouter API at {self.settings.upstream_url} for model {payload['model']}")

        try:
            response = await self.http_client.post(
                self.settings.upstream_url,
                json=payload,
                headers=self._upstream_headers(api_key),
            )
        except httpx.HTTPError as e:
            self.logger.error(f"OpenRouter request failed: {e!r}")
            return ProxyFailure(
                502,
                ProxyErrorCode.UPSTREAM_ERROR,
                ErrorMessages.UPSTREAM_ERROR.format(reason=type(e).__name__),
                details=str(e),
            )

        self.logger.info(f"OpenRouter API response status: {response.status_code}")

        if not 200 <= response.status_code < 300:
            error_body = response.text
            self.logger.error(f"OpenRouter API Error ({response.status_code}): {error_body}")
            return ProxyFailure(
                response.status_code,
                ProxyErrorCode.UPSTREAM_ERROR,
                ErrorMessages.UPSTREAM_ERROR.format(reason=response.reason_phrase),
                details=error_body,
            )

        try:
            message = self.adapter.extract_assistant_message(response.json())
        # UpstreamResponseFormatError, JSONDecodeError and UnicodeDecodeError are all ValueErrors
        except ValueError as e:
            self.logger.error(f"Could not extract assistant message from OpenRouter response: {e}")
            return ProxyFailure(500, ProxyErrorCode.UPSTREAM_SHAPE_ERROR, ErrorMessages.INVALID_RESPONSE_FORMAT)

        self.logger.info(f"Received assistant message ({len(message)} characters)")
        return ProxySuccess(message=message)
