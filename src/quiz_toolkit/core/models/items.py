"""
Module: items

Purpose:
    Provides the QuizItem dataclass - the final output record written to
    questions.json and consumed by the viewer. Immutable, with the
    correct-index bounds checked on construction.

Key Functions:
    - QuizItem.to_dict() / QuizItem.from_dict(): Serialization
    - QuizItem.correct_letters: Letters for the resolved correct options
    - option_letter(index): 0 -> "A", 1 -> "B", ...

Dependencies:
    - dataclasses (std)

Used By:
    - extractor.reconcile
    - extractor.pipeline
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Optional, Sequence

QuestionType = Literal["single", "multi"]
QUESTION_TYPES: tuple[str, ...] = ("single", "multi")


def option_letter(index: int) -> str:
    """Letter label for a zero-based option index."""
    return chr(ord("A") + index)


def letter_index(letter: str) -> int:
    """Zero-based option index for a letter label (case-insensitive)."""
    return ord(letter.upper()[0]) - ord("A")


@dataclass(frozen=True)
class QuizItem:
    """
    One quiz question ready for display (immutable).

    Attributes:
        id: Question number from the source documents (positive)
        question: Normalized question stem
        options: Answer options in letter order (index 0 = "A"), or None
        correct: Sorted indexes into options, or None when unresolved
        answer: Free-text answer from the solutions transcript
        notes: Free-text rationale from the solutions transcript
        type: "single" or "multi"

    Invariants:
        - id > 0
        - every index in correct is within [0, len(options))
        - correct is never set without options

    Example:
        >>> item = QuizItem(id=5, question="Which service provides object storage?",
        ...                 options=("EBS", "S3", "EFS"), correct=(1,))
        >>> item.correct_letters
        ('B',)
    """

    id: int
    question: str
    options: Optional[tuple[str, ...]] = None
    correct: Optional[tuple[int, ...]] = None
    answer: Optional[str] = None
    notes: Optional[str] = None
    type: QuestionType = "single"

    def __post_init__(self) -> None:
        """Validate item on construction."""
        if self.id <= 0:
            raise ValueError(f"id must be positive: {self.id}")
        if self.type not in QUESTION_TYPES:
            raise ValueError(f"Invalid question type: {self.type!r}")
        if self.correct is not None:
            if self.options is None:
                raise ValueError(f"Q{self.id}: correct given without options")
            for idx in self.correct:
                if not 0 <= idx < len(self.options):
                    raise ValueError(
                        f"Q{self.id}: correct index {idx} out of range "
                        f"for {len(self.options)} options"
                    )

    @property
    def correct_letters(self) -> tuple[str, ...]:
        """Letters of the correct options, empty when unresolved."""
        if not self.correct:
            return ()
        return tuple(option_letter(i) for i in self.correct)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize to the questions.json record shape.

        Absent optional fields are omitted rather than written as null,
        which is what the viewer expects.
        """
        d: dict[str, Any] = {"id": self.id, "question": self.question}
        if self.options is not None:
            d["options"] = list(self.options)
        if self.answer is not None:
            d["answer"] = self.answer
        if self.notes is not None:
            d["notes"] = self.notes
        if self.correct is not None:
            d["correct"] = list(self.correct)
        d["type"] = self.type
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QuizItem:
        """Deserialize from a questions.json record."""
        options: Optional[Sequence[str]] = data.get("options")
        correct: Optional[Sequence[int]] = data.get("correct")
        return cls(
            id=data["id"],
            question=data["question"],
            options=tuple(options) if options is not None else None,
            correct=tuple(correct) if correct is not None else None,
            answer=data.get("answer"),
            notes=data.get("notes"),
            type=data.get("type", "single"),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        n_opts = len(self.options) if self.options else 0
        return (
            f"QuizItem({self.id}, options={n_opts}, "
            f"correct={list(self.correct_letters)}, type={self.type!r})"
        )
