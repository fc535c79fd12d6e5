from functools import lru_cache

from fitcheck.ai.providers.openai_provider import OpenAIChatClient
from fitcheck.ai.types import CompletionOptions, LLMClient
from fitcheck.core.config import settings


@lru_cache(maxsize=1)
def get_llm_client() -> LLMClient:
    return OpenAIChatClient(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        timeout_s=settings.openai_timeout_s,
    )


def get_completion_options() -> CompletionOptions:
    return CompletionOptions(model=settings.openai_model)
