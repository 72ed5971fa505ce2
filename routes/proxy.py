"""
Route handlers for the chat proxy.
Handles the /openrouter-proxy endpoint and wires its dependencies.
"""
import logging

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from config import Config, ProxySettings
from services.proxy_service import ProxyService
from services.secret_store import EnvSecretStore
from services.upstream_adapter import OpenRouterResponseAdapter, ResponseAdapter
from utils.http_client import HTTPClientManager
from utils.logger import app_logger

router = APIRouter()

# OPTIONS never reaches the router; CORSHeadersMiddleware answers it first
PROXY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"]


def get_proxy_settings() -> ProxySettings:
    return Config.proxy_settings()


def get_secret_store() -> EnvSecretStore:
    return EnvSecretStore()


def get_http_client() -> httpx.AsyncClient:
    return HTTPClientManager.get_upstream_client()


def get_response_adapter() -> ResponseAdapter:
    return OpenRouterResponseAdapter()


def get_diagnostic_logger() -> logging.Logger:
    return app_logger


def get_proxy_service(
    settings: ProxySettings = Depends(get_proxy_settings),
    secret_store: EnvSecretStore = Depends(get_secret_store),
    http_client: httpx.AsyncClient = Depends(get_http_client),
    adapter: ResponseAdapter = Depends(get_response_adapter),
    logger: logging.Logger = Depends(get_diagnostic_logger),
) -> ProxyService:
    """Assemble a ProxyService from injectable collaborators."""
    return ProxyService(settings, secret_store, http_client, adapter, logger)


@router.api_route("/openrouter-proxy", methods=PROXY_METHODS)
async def openrouter_proxy(request: Request, service: ProxyService = Depends(get_proxy_service)):
    """
    Chat proxy endpoint: prompt plus optional image/audio in, assistant message out.
    """
    body = await request.body()
    outcome = await service.handle(request.method, body)
    return JSONResponse(status_code=outcome.status_code, content=outcome.to_content())
