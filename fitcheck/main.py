import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi import _rate_limit_exceeded_handler
from starlette.exceptions import HTTPException as StarletteHTTPException
import sentry_sdk

from fitcheck.api.v1.health import router as health_router
from fitcheck.api.v1.evaluation import router as evaluation_router
from fitcheck.core.rate_limit import limiter
from fitcheck.core.config import settings
from fitcheck.core.security import SharedSecretMiddleware
from fitcheck.core.lifespan import lifespan

logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        {"error": str(exc.detail)},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    location = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body") if errors else ""
    message = f"Invalid request field: {location}" if location else "Invalid request body."
    return JSONResponse({"error": message}, status_code=400)


app = FastAPI(title="Fitcheck API", version="0.1.0", lifespan=lifespan)
app.state.settings = settings

app.add_middleware(SharedSecretMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allowed_origins),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)
app.add_exception_handler(StarletteHTTPException, http_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_handler)

app.include_router(health_router, tags=["Health"])
app.include_router(evaluation_router, tags=["Evaluation"])


def run() -> None:
    import uvicorn

    uvicorn.run("fitcheck.main:app", host="0.0.0.0", port=settings.port, log_level=settings.log_level.lower())
