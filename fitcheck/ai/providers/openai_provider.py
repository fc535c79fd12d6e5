from __future__ import annotations

import logging
from typing import Optional, Sequence

import openai
from openai import AsyncOpenAI

from fitcheck.ai.types import ChatMessage, CompletionOptions
from fitcheck.core.errors import UpstreamError

logger = logging.getLogger(__name__)


class OpenAIChatClient:
    """Chat Completions adapter that asks for a single JSON object per call.

    Every call is attempted exactly once: the SDK's own retry loop is turned
    off and provider failures surface as ``UpstreamError``.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 30.0,
    ):
        self._api_key = (api_key or "").strip()
        self._base_url = base_url or None
        self._timeout_s = timeout_s
        self._client: AsyncOpenAI | None = None

    def _get_client(self) -> AsyncOpenAI:
        if not self._api_key:
            raise UpstreamError("OPENAI_API_KEY is not configured.")
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self._api_key,
                base_url=self._base_url,
                timeout=self._timeout_s,
                max_retries=0,
            )
        return self._client

    async def complete(
        self, messages: Sequence[ChatMessage], options: CompletionOptions
    ) -> str:
        client = self._get_client()
        payload = [{"role": m.role, "content": m.content} for m in messages]

        try:
            completion = await client.chat.completions.create(
                model=options.model,
                messages=payload,
                temperature=options.temperature,
                response_format={"type": "json_object"},
            )
        except openai.APIStatusError as exc:
            logger.warning("llm_completion_failed model=%s status=%s: %s", options.model, exc.status_code, exc)
            raise UpstreamError(_error_message(exc), status_code=exc.status_code) from exc
        except openai.APIError as exc:
            logger.warning("llm_completion_failed model=%s: %s", options.model, exc)
            raise UpstreamError(_error_message(exc)) from exc

        if not completion.choices:
            return "{}"
        return completion.choices[0].message.content or "{}"


def _error_message(exc: openai.APIError) -> str:
    body = exc.body
    if isinstance(body, dict):
        nested = body.get("error") if isinstance(body.get("error"), dict) else body
        message = nested.get("message")
        if isinstance(message, str) and message.strip():
            return message.strip()
    return exc.message or "LLM provider request failed."
