"""
Core Models Package

Immutable data models shared by the extractor and the output layer.

All models in this package are frozen dataclasses. This ensures:
1. No accidental mutation while records move through the pipeline
2. Records can be compared and hashed in tests
3. Easier to reason about data flow
"""

from .blocks import Block, QuestionRecord, SolutionRecord
from .items import QuizItem, QuestionType, letter_index, option_letter

__all__ = [
    "Block",
    "QuestionRecord",
    "SolutionRecord",
    "QuizItem",
    "QuestionType",
    "letter_index",
    "option_letter",
]
