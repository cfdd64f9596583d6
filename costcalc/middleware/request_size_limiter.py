"""
Request size limiting middleware for FastAPI.
Rejects oversized payloads on calculator endpoints.
"""
from typing import Optional
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.types import ASGIApp

from costcalc.core.config import config

logger = logging.getLogger(__name__)


PROTECTED_PREFIX = "/api/calculator"
BODY_METHODS = {"POST", "PUT", "PATCH"}


class RequestSizeLimiterMiddleware(BaseHTTPMiddleware):
    """
    FastAPI middleware for request size limiting.

    Applies only to calculator requests that carry a body.
    Other routes pass through untouched.
    """

    def __init__(self, app: ASGIApp, max_body_size: Optional[int] = None):
        super().__init__(app)
        self.max_body_size = max_body_size or config.MAX_REQUEST_BODY_SIZE

    def _too_large(self, path: str, body_size: int) -> JSONResponse:
        logger.info(
            "Request body size exceeded for %s: %d bytes (limit: %d)",
            path, body_size, self.max_body_size
        )
        return JSONResponse(
            status_code=413,
            content={
                "status": "error",
                "error": "request_too_large",
                "message": f"Request body size exceeds allowed limit of {self.max_body_size} bytes.",
            }
        )

    async def dispatch(self, request: Request, call_next):
        """
        Process request and apply size limits if applicable.

        Args:
            request: FastAPI request object
            call_next: Next middleware or route handler

        Returns:
            Response object
        """
        path = request.url.path

        if not path.startswith(PROTECTED_PREFIX) or request.method not in BODY_METHODS:
            return await call_next(request)

        # Check Content-Length header if present
        content_length = request.headers.get("Content-Length")
        if content_length:
            try:
                body_size = int(content_length)
            except ValueError:
                # Invalid Content-Length header, fall through to reading the body
                body_size = 0
            if body_size > self.max_body_size:
                return self._too_large(path, body_size)

        body_bytes = await request.body()
        if len(body_bytes) > self.max_body_size:
            return self._too_large(path, len(body_bytes))

        return await call_next(request)
