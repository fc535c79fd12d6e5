from __future__ import annotations

import secrets

from fastapi import status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from fitcheck.core.config import get_settings

PUBLIC_PATHS = frozenset({"/health"})


def api_key_matches(x_api_key: str | None, expected: str | None) -> bool:
    if not expected:
        return True
    supplied = (x_api_key or "").encode("utf-8")
    return secrets.compare_digest(supplied, expected.encode("utf-8"))


class SharedSecretMiddleware(BaseHTTPMiddleware):
    """Rejects requests without the configured ``X-API-Key`` before any body parsing."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        settings = get_settings(request)
        if (
            not settings.access_policy_enabled
            or request.method == "OPTIONS"
            or request.url.path in PUBLIC_PATHS
        ):
            return await call_next(request)

        if not api_key_matches(request.headers.get("x-api-key"), settings.api_key):
            return JSONResponse(
                {"error": "Please provide a valid API key."},
                status_code=status.HTTP_401_UNAUTHORIZED,
            )
        return await call_next(request)
