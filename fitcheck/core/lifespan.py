from contextlib import asynccontextmanager
import logging

from fitcheck.core.config import settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY not set. Scoring and filter requests will fail until it is configured.")
    if settings.access_policy_enabled and not settings.api_key:
        logger.info("API_KEY not set; shared-secret check is disabled.")
    logger.info(
        "fitcheck_started model=%s access_policy=%s rate_limit=%s",
        settings.openai_model,
        settings.access_policy_enabled,
        settings.rate_limit,
    )
    yield
