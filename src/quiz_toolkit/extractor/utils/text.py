"""
Module: extractor.utils.text

Purpose:
    Whitespace canonicalization used by every other extraction step.
    PDF text and hand-typed transcripts mix tabs, non-breaking spaces and
    CRLF endings; everything downstream assumes single spaces and "\\n".

Key Functions:
    - normalize_inline(): Collapse horizontal whitespace on one line
    - normalize_block(): Canonicalize a multi-line block
    - split_lines(): Unify line endings and split

Used By:
    - extractor.detection: Question segmentation and option parsing
    - extractor.solutions: Solution segmentation and answer extraction
"""

from __future__ import annotations

import re
from typing import List

NBSP = "\u00a0"

_HORIZONTAL_WS = re.compile(r"[\t ]+")
_LINE_BREAKS = re.compile(r"\r\n?")
_SPACES_AROUND_NEWLINE = re.compile(r" *\n *")


def normalize_inline(text: str) -> str:
    """
    Collapse runs of horizontal whitespace to one space and trim.

    Newlines are left alone.

    Example:
        >>> normalize_inline("  Which\\u00a0\\tservice  ")
        'Which service'
    """
    text = text.replace(NBSP, " ")
    return _HORIZONTAL_WS.sub(" ", text).strip()


def normalize_block(text: str) -> str:
    """
    Canonicalize a multi-line block.

    Unifies line endings to "\\n", collapses horizontal whitespace, drops
    spaces next to newlines and trims the whole block.

    Example:
        >>> normalize_block("S3 is  \\r\\n  object storage. ")
        'S3 is\\nobject storage.'
    """
    text = _LINE_BREAKS.sub("\n", text)
    text = text.replace(NBSP, " ")
    text = _HORIZONTAL_WS.sub(" ", text)
    text = _SPACES_AROUND_NEWLINE.sub("\n", text)
    return text.strip()


def split_lines(text: str) -> List[str]:
    """Split text into lines after unifying line endings."""
    return _LINE_BREAKS.sub("\n", text).split("\n")
