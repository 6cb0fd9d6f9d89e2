"""Resume text extraction.

Extractors are keyed by ``DocumentFormat``; adding a format means writing an
extractor and registering it in ``EXTRACTORS``.
"""
from __future__ import annotations

import enum
import logging
import os
from typing import Callable, Dict, List

import docx
import PyPDF2

from portfolio.errors import ClientInputError

logger = logging.getLogger(__name__)


class DocumentFormat(enum.Enum):
    PDF = ".pdf"
    DOCX = ".docx"
    UNSUPPORTED = ""

    @classmethod
    def from_filename(cls, filename: str) -> "DocumentFormat":
        ext = os.path.splitext((filename or "").strip())[1].lower()
        for fmt in cls:
            if fmt is not cls.UNSUPPORTED and fmt.value == ext:
                return fmt
        return cls.UNSUPPORTED


def extract_pdf_text(path: str) -> str:
    reader = PyPDF2.PdfReader(path)
    parts: List[str] = []
    for page in reader.pages:
        parts.append(page.extract_text() or "")
    return "\n".join(parts)


def extract_docx_text(path: str) -> str:
    """Each paragraph's runs joined together, one newline after every paragraph."""
    document = docx.Document(path)
    parts: List[str] = []
    for paragraph in document.paragraphs:
        parts.append("".join(run.text for run in paragraph.runs))
        parts.append("\n")
    return "".join(parts)


EXTRACTORS: Dict[DocumentFormat, Callable[[str], str]] = {
    DocumentFormat.PDF: extract_pdf_text,
    DocumentFormat.DOCX: extract_docx_text,
}


def extract_text(path: str, fmt: DocumentFormat) -> str:
    """Dispatch to the extractor for ``fmt`` and return non-blank text.

    Raises ClientInputError for unsupported formats, extractor failures and
    documents that yield no text (encrypted, corrupt or empty files).
    """
    extractor = EXTRACTORS.get(fmt)
    if extractor is None:
        raise ClientInputError("Unsupported file type. Use .pdf or .docx")

    try:
        text = extractor(path)
    except Exception as e:
        logger.warning("%s extraction failed: %s: %s", fmt.name, type(e).__name__, e)
        raise ClientInputError(f"Failed to extract text: {e}") from e

    if not (text or "").strip():
        raise ClientInputError("Failed to extract text from file")
    return text
