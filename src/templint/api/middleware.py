"""Middleware: request timing and template size limits."""

from __future__ import annotations

import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

MAX_TEMPLATE_BYTES = 5 * 1024 * 1024
MAX_OTHER_BYTES = 1 * 1024 * 1024


class RequestTimingMiddleware(BaseHTTPMiddleware):
    """Add X-Request-Duration header with processing time."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = (time.monotonic() - start) * 1000
        response.headers["X-Request-Duration-Ms"] = f"{duration_ms:.1f}"
        return response


def _payload_too_large(limit: int) -> JSONResponse:
    return JSONResponse(
        status_code=413,
        content={"detail": f"Template payload exceeds {limit} bytes"},
    )


class TemplateSizeLimitMiddleware(BaseHTTPMiddleware):
    """Cap request payloads: ``template_limit`` on /analyze, ``other_limit`` elsewhere.

    A declared length over the cap is refused before reading.  Otherwise the
    payload is counted while it streams in and refused as soon as it crosses
    the cap; accepted bytes are kept on the request for the endpoint.
    """

    def __init__(
        self,
        app: ASGIApp,
        template_limit: int = MAX_TEMPLATE_BYTES,
        other_limit: int = MAX_OTHER_BYTES,
    ) -> None:
        super().__init__(app)
        self._template_limit = template_limit
        self._other_limit = other_limit

    def _limit_for(self, path: str) -> int:
        return self._template_limit if path.rstrip("/").endswith("/analyze") else self._other_limit

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        limit = self._limit_for(request.url.path)

        declared = request.headers.get("content-length", "")
        if declared.isdigit() and int(declared) > limit:
            return _payload_too_large(limit)

        if request.method in ("POST", "PUT", "PATCH"):
            payload = bytearray()
            async for chunk in request.stream():
                payload += chunk
                if len(payload) > limit:
                    return _payload_too_large(limit)
            request._body = bytes(payload)  # noqa: SLF001

        return await call_next(request)
