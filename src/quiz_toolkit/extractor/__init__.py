"""
Module: extractor

Purpose:
    Extraction pipeline that turns an exam question PDF and a free-form
    solutions transcript into one sorted list of quiz items
    (questions.json).

Key Functions:
    - build_quiz(): Main entry point for extraction
    - build_quiz_from_text(): Pipeline over already-decoded text
    - parse_solutions_only(): Transcript-only quiz items

Key Classes:
    - ExtractionConfig: Configuration for extraction settings
    - ExtractionResult: Container for extraction output

Dependencies:
    - fitz (PyMuPDF): PDF text extraction
    - quiz_toolkit.core: QuizItem model, validation, serialization

Used By:
    - quiz_toolkit.cli: quiz-build / quiz-parse-solutions
"""

from .config import ExtractionConfig
from .pipeline import (
    ExtractionResult,
    build_quiz,
    build_quiz_from_text,
    extract_questions,
    parse_solutions_only,
)

__all__ = [
    "build_quiz",
    "build_quiz_from_text",
    "extract_questions",
    "parse_solutions_only",
    "ExtractionConfig",
    "ExtractionResult",
]
