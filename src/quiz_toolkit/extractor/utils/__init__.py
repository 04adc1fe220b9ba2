"""
Module: extractor.utils

Purpose:
    Utility subpackage with shared helpers for text normalization and
    source document decoding.

Key Modules:
    - text: Whitespace canonicalization
    - pdf: PDF and transcript reading

Dependencies:
    - fitz (PyMuPDF): PDF text extraction
"""

from .text import normalize_block, normalize_inline, split_lines

__all__ = ["normalize_block", "normalize_inline", "split_lines"]
