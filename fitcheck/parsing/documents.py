from __future__ import annotations

import logging
from io import BytesIO

from fitcheck.core.errors import ExtractionFailure

logger = logging.getLogger(__name__)

PDF_MAGIC = b"%PDF-"
ZIP_MAGICS = (b"PK\x03\x04", b"PK\x05\x06", b"PK\x07\x08")
TEXT_EXTENSIONS = {"txt", "md"}


def _extension(filename: str | None) -> str:
    name = (filename or "").strip()
    return name.rsplit(".", 1)[-1].lower() if "." in name else ""


def detect_document_type(content: bytes, filename: str | None = None) -> str:
    if content.startswith(PDF_MAGIC):
        return "pdf"
    ext = _extension(filename)
    if content.startswith(ZIP_MAGICS) and ext in {"", "docx"}:
        return "docx"
    if ext in {"pdf", "docx"}:
        # extension claims a binary format but the signature does not match
        raise ExtractionFailure(f"Uploaded file is not a valid .{ext} document.")
    if ext in TEXT_EXTENSIONS:
        return "txt"
    if ext == "doc":
        raise ExtractionFailure("Legacy .doc is not supported. Convert to .docx or PDF.")
    if not ext:
        # unnamed uploads are treated as PDF
        return "pdf"
    raise ExtractionFailure(f"Unsupported résumé file type '.{ext}'. Use PDF, DOCX or TXT.")


def _extract_pdf(content: bytes) -> str:
    try:
        from pypdf import PdfReader

        reader = PdfReader(BytesIO(content))
        page_chunks: list[str] = []
        for page in reader.pages:
            page_text = page.extract_text() or ""
            if page_text.strip():
                page_chunks.append(page_text)
    except Exception as exc:
        raise ExtractionFailure("Unable to extract text from this PDF file.") from exc
    if not page_chunks:
        logger.info("pdf_without_text_layer pages=%s", len(reader.pages))
    return "\n".join(page_chunks)


def _extract_docx(content: bytes) -> str:
    try:
        from docx import Document

        doc = Document(BytesIO(content))
        return "\n".join(paragraph.text for paragraph in doc.paragraphs if paragraph.text.strip())
    except Exception as exc:
        raise ExtractionFailure("Unable to extract text from this Word document.") from exc


def _extract_txt(content: bytes) -> str:
    for encoding in ("utf-8", "utf-16"):
        try:
            return content.decode(encoding)
        except UnicodeDecodeError:
            continue
    return content.decode("latin-1")


def extract_document_text(content: bytes, filename: str | None = None) -> str:
    document_type = detect_document_type(content, filename)
    if document_type == "pdf":
        return _extract_pdf(content)
    if document_type == "docx":
        return _extract_docx(content)
    return _extract_txt(content)
