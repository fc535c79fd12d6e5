import asyncio
import unittest
from types import SimpleNamespace

import openai

from fitcheck.ai.providers.openai_provider import OpenAIChatClient
from fitcheck.ai.types import ChatMessage, CompletionOptions
from fitcheck.core.errors import UpstreamError

MESSAGES = [ChatMessage(role="system", content="sys"), ChatMessage(role="user", content="hi")]
OPTIONS = CompletionOptions(model="gpt-test")


class _FakeCompletions:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.result


def _client_with(completions: _FakeCompletions) -> OpenAIChatClient:
    client = OpenAIChatClient(api_key="sk-test")
    client._client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return client


def _completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class OpenAIChatClientTests(unittest.TestCase):
    def test_requests_json_object_at_low_temperature(self):
        completions = _FakeCompletions(result=_completion('{"score": 5}'))
        result = asyncio.run(_client_with(completions).complete(MESSAGES, OPTIONS))

        self.assertEqual(result, '{"score": 5}')
        self.assertEqual(len(completions.calls), 1)
        call = completions.calls[0]
        self.assertEqual(call["model"], "gpt-test")
        self.assertEqual(call["temperature"], 0.2)
        self.assertEqual(call["response_format"], {"type": "json_object"})
        self.assertEqual(
            call["messages"],
            [{"role": "system", "content": "sys"}, {"role": "user", "content": "hi"}],
        )

    def test_empty_content_becomes_empty_object(self):
        completions = _FakeCompletions(result=_completion(None))
        self.assertEqual(asyncio.run(_client_with(completions).complete(MESSAGES, OPTIONS)), "{}")

        completions = _FakeCompletions(result=SimpleNamespace(choices=[]))
        self.assertEqual(asyncio.run(_client_with(completions).complete(MESSAGES, OPTIONS)), "{}")

    def test_status_error_maps_to_upstream_error(self):
        response = SimpleNamespace(status_code=429, headers={}, request=None)
        error = openai.APIStatusError(
            "Error code: 429",
            response=response,
            body={"error": {"message": "Rate limit reached for gpt-test"}},
        )
        completions = _FakeCompletions(error=error)

        with self.assertRaises(UpstreamError) as ctx:
            asyncio.run(_client_with(completions).complete(MESSAGES, OPTIONS))

        self.assertEqual(ctx.exception.status_code, 429)
        self.assertEqual(ctx.exception.message, "Rate limit reached for gpt-test")
        self.assertEqual(ctx.exception.public_message(), "Upstream error 429: Rate limit reached for gpt-test")
        self.assertEqual(len(completions.calls), 1)

    def test_connection_error_maps_to_upstream_error_without_status(self):
        completions = _FakeCompletions(error=openai.APIConnectionError(request=None))

        with self.assertRaises(UpstreamError) as ctx:
            asyncio.run(_client_with(completions).complete(MESSAGES, OPTIONS))

        self.assertIsNone(ctx.exception.status_code)
        self.assertEqual(ctx.exception.public_message(), "Connection error.")

    def test_missing_api_key_fails_at_call_time(self):
        client = OpenAIChatClient(api_key=None)
        with self.assertRaises(UpstreamError) as ctx:
            asyncio.run(client.complete(MESSAGES, OPTIONS))
        self.assertIn("OPENAI_API_KEY", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
