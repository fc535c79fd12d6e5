from __future__ import annotations

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from fitcheck.core.config import settings


def client_address(request: Request) -> str:
    if settings.trust_x_forwarded_for:
        forwarded_for = request.headers.get("x-forwarded-for", "").strip()
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()
    return get_remote_address(request)


def current_rate_limit() -> str:
    return settings.rate_limit


limiter = Limiter(
    key_func=client_address,
    strategy="moving-window",
    storage_uri="memory://",
    enabled=settings.access_policy_enabled,
)


def rate_limit():
    # one sliding window per client, shared by every decorated route
    if settings.access_policy_enabled:
        return limiter.shared_limit(current_rate_limit, scope="global")

    def decorator(func):
        return func

    return decorator
