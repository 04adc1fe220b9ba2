"""
Module: blocks

Purpose:
    Intermediate records produced while segmenting the two source texts.
    A Block is a numbered run of raw lines; QuestionRecord and
    SolutionRecord are what the question and solution sides hand to the
    reconciler. None of these outlive a pipeline run.

Used By:
    - extractor.detection.questions / extractor.detection.options
    - extractor.solutions.segmenter / extractor.solutions.answers
    - extractor.reconcile
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from .items import QuestionType

AnswerTier = Literal["indicator", "inline", "first_line", "none"]


@dataclass(frozen=True)
class Block:
    """
    A contiguous run of source lines that belong to one question number.

    Attributes:
        id: Question number that opened the block
        lines: Body lines in source order (header line excluded)
    """

    id: int
    lines: tuple[str, ...] = ()


@dataclass(frozen=True)
class QuestionRecord:
    """Question side of a quiz item, before reconciliation."""

    id: int
    question: str
    options: Optional[tuple[str, ...]] = None
    type: Optional[QuestionType] = None


@dataclass(frozen=True)
class SolutionRecord:
    """
    Solution side of a quiz item, before reconciliation.

    Attributes:
        answer: Free-text answer (None if nothing usable was found)
        notes: Rationale following the answer line
        letters: Distinct option letters referenced by the solution, sorted
        tier: Which extraction fallback produced the answer
    """

    answer: Optional[str] = None
    notes: Optional[str] = None
    letters: Optional[tuple[str, ...]] = None
    tier: AnswerTier = "none"
