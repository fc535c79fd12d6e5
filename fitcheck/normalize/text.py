from __future__ import annotations

import asyncio
import re

from fitcheck.core.errors import MissingInput
from fitcheck.parsing.documents import extract_document_text

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: str | None) -> str:
    return _WHITESPACE_RE.sub(" ", text or "").strip()


async def extract_resume(
    raw_text: str | None = None,
    document: bytes | None = None,
    filename: str | None = None,
) -> str:
    """Merge pasted résumé text with text pulled out of an uploaded document.

    Document text comes after the pasted text. Raises ``MissingInput`` when
    neither source yields any text; extraction errors are not caught here.
    """
    resume_text = normalize_text(raw_text)
    if document:
        extracted = await asyncio.to_thread(extract_document_text, document, filename)
        resume_text = normalize_text(f"{resume_text}\n{normalize_text(extracted)}")

    if not resume_text:
        raise MissingInput("Missing résumé text (provide resumeText or resumeFile)")
    return resume_text
