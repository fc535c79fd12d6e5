from __future__ import annotations

from fastapi import status


class InputValidationError(ValueError):
    """Required request text is missing or unusable."""

    status_code = status.HTTP_400_BAD_REQUEST


class MissingInput(InputValidationError):
    pass


class ExtractionFailure(RuntimeError):
    """An uploaded document could not be turned into text."""


class UpstreamError(RuntimeError):
    """The LLM provider reported a transport or API failure."""

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def public_message(self) -> str:
        if self.status_code:
            return f"Upstream error {self.status_code}: {self.message}"
        return self.message
