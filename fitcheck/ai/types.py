from dataclasses import dataclass
from typing import Literal, Protocol, Sequence


Role = Literal["system", "user", "assistant"]

DEFAULT_TEMPERATURE = 0.2


@dataclass(frozen=True)
class ChatMessage:
    role: Role
    content: str


@dataclass(frozen=True)
class CompletionOptions:
    model: str
    temperature: float = DEFAULT_TEMPERATURE


class LLMClient(Protocol):
    async def complete(
        self, messages: Sequence[ChatMessage], options: CompletionOptions
    ) -> str: ...
