"""
Module: extractor.utils.pdf

Purpose:
    Decode the question PDF to plain text. Pages are read in order and
    joined with newlines; layout is not preserved beyond line breaks.

Key Functions:
    - extract_document_text(): Decode a whole PDF file to text
    - extract_text(): Text of a single page (empty string on error)
    - read_text_file(): Read the solutions transcript

Dependencies:
    - fitz (PyMuPDF): PDF text extraction

Used By:
    - extractor.pipeline: Reads both source documents
"""

from __future__ import annotations

import logging
from pathlib import Path

import fitz

logger = logging.getLogger(__name__)


class DocumentDecodeError(RuntimeError):
    """Raised when a source document exists but cannot be decoded."""


def extract_text(page: fitz.Page) -> str:
    """
    Extract plain text from a PDF page.

    Args:
        page: PyMuPDF page object.

    Returns:
        Extracted text as a string, empty string on error.
    """
    try:
        return page.get_text("text") or ""
    except (RuntimeError, ValueError) as e:
        logger.warning(f"Failed to extract text from page {page.number}: {e}")
        return ""


def extract_document_text(pdf_path: Path) -> str:
    """
    Decode a PDF to plain text.

    Args:
        pdf_path: Path to the question PDF.

    Returns:
        Text of every page, in page order, joined by newlines.

    Raises:
        FileNotFoundError: If pdf_path doesn't exist.
        DocumentDecodeError: If the file can't be opened as a PDF or has no pages.

    Example:
        >>> text = extract_document_text(Path("SAA-C03.pdf"))
        >>> text.splitlines()[0]
        'Topic 1Question #1'
    """
    if not pdf_path.exists():
        raise FileNotFoundError(f"PDF not found: {pdf_path}")

    try:
        doc = fitz.open(pdf_path, filetype="pdf")
    except (fitz.FileDataError, RuntimeError, ValueError) as e:
        raise DocumentDecodeError(f"Cannot open PDF {pdf_path.name}: {e}") from e

    with doc:
        if doc.page_count == 0:
            raise DocumentDecodeError(f"PDF has no pages: {pdf_path.name}")
        pages = [extract_text(page) for page in doc]

    logger.debug(f"Decoded {len(pages)} pages from {pdf_path.name}")
    return "\n".join(pages)


def read_text_file(path: Path) -> str:
    """
    Read a UTF-8 text source.

    Raises:
        FileNotFoundError: If path doesn't exist.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    if not path.exists():
        raise FileNotFoundError(f"Text source not found: {path}")
    return path.read_text(encoding="utf-8")
