"""
CORS middleware attaching a fixed header set to every response.
"""
from typing import Mapping, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware

from config import Config
from utils.constants import ErrorMessages
from utils.logger import app_logger


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """
    Answers preflight requests and decorates all other responses with CORS headers.
    """

    def __init__(self, app, headers: Optional[Mapping[str, str]] = None):
        super().__init__(app)
        self.headers = dict(headers) if headers is not None else Config.cors_headers()

    async def dispatch(self, request: Request, call_next):
        """
        Process each request and attach CORS headers.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/handler in chain

        Returns:
            Response from next handler or error response, always with CORS headers
        """
        if request.method == "OPTIONS":
            app_logger.debug(f"Handling OPTIONS request for {request.url.path}")
            return PlainTextResponse("ok", headers=self.headers)

        try:
            response = await call_next(request)
        except Exception as e:
            app_logger.exception(f"Unhandled error while serving {request.url.path}: {e}")
            response = JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "error": ErrorMessages.INTERNAL_SERVER_ERROR,
                    "details": str(e),
                },
            )

        response.headers.update(self.headers)
        return response
