"""
Module: extractor.solutions.answers

Purpose:
    Pull the answer, the rationale ("notes") and any referenced option
    letters out of one solution block.

Key Functions:
    - extract_answer(): Block lines -> SolutionRecord
    - collect_letter_candidates(): Option letters referenced by a block

Used By:
    - extractor.reconcile: Builds the id -> SolutionRecord lookup

Algorithm:
    The answer is located with three fallbacks, first hit wins:
    1. An indicator line: "ans-", "Answer:", "Correct answers -", ...
    2. Any line containing "answer:" / "answer -" inline
    3. The first non-blank line of the block
    Letter candidates are collected independently of the tier that matched
    and are not required to agree with the free-text answer.
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence, Set, Tuple

from quiz_toolkit.core.models.blocks import AnswerTier, SolutionRecord
from ..utils.text import normalize_block

# Tier 1: indicator at line start
ANSWER_INDICATOR_PATTERN = re.compile(
    r"^(ans|answer|answers|correct\s+answers?|correct\s+options?)\s*[-:]",
    re.IGNORECASE,
)
# Tier 2: "answer:" / "answer -" anywhere in the line
INLINE_ANSWER_PATTERN = re.compile(r"answer\s*[:\-]", re.IGNORECASE)
INLINE_SEPARATOR_PATTERN = re.compile(r"[:\-]")

# Lines that may name the correct letters
ANSWER_MENTION_PATTERN = re.compile(r"correct|ans|answer", re.IGNORECASE)
LETTER_TOKEN_PATTERN = re.compile(r"\b([A-J])\b")
OPTION_LABEL_PATTERN = re.compile(r"^([A-J])[.)]\s+")


def _or_none(text: str) -> Optional[str]:
    return text or None


def _locate_answer(lines: Sequence[str]) -> Tuple[Optional[str], Optional[str], AnswerTier]:
    """Run the three answer tiers and return (answer, notes, tier)."""
    for i, line in enumerate(lines):
        stripped = line.strip()
        m = ANSWER_INDICATOR_PATTERN.match(stripped)
        if m:
            answer = normalize_block(stripped[m.end():])
            notes = normalize_block("\n".join(lines[i + 1:]))
            return _or_none(answer), _or_none(notes), "indicator"

    for i, line in enumerate(lines):
        if INLINE_ANSWER_PATTERN.search(line):
            pieces = INLINE_SEPARATOR_PATTERN.split(line, maxsplit=1)
            answer = normalize_block(pieces[1] if len(pieces) > 1 else "")
            notes = normalize_block("\n".join(lines[i + 1:]))
            return _or_none(answer), _or_none(notes), "inline"

    first = next((i for i, line in enumerate(lines) if line.strip()), None)
    if first is None:
        return None, None, "none"
    # Last resort: some transcript entries have no answer marker at all
    answer = normalize_block(lines[first])
    notes = normalize_block("\n".join(lines[first + 1:]))
    return _or_none(answer), _or_none(notes), "first_line"


def collect_letter_candidates(lines: Sequence[str], notes: Optional[str]) -> List[str]:
    """
    Collect option letters referenced by a solution block.

    Two sources:
    - isolated letters A-J on any line mentioning "correct"/"ans"/"answer"
      (the line is upper-cased first, so "ans- b" counts as B)
    - the label of any notes line shaped like an option ("C. Use S3 ...")

    Returns:
        Distinct letters, sorted.
    """
    candidates: Set[str] = set()
    for line in lines:
        if ANSWER_MENTION_PATTERN.search(line):
            candidates.update(LETTER_TOKEN_PATTERN.findall(line.upper()))

    if notes:
        for note_line in notes.split("\n"):
            m = OPTION_LABEL_PATTERN.match(note_line.strip())
            if m:
                candidates.add(m.group(1))

    return sorted(candidates)


def extract_answer(lines: Sequence[str]) -> SolutionRecord:
    """
    Extract answer, notes and letter candidates from a solution block.

    Never raises on content: a block with nothing usable yields an empty
    record.

    Args:
        lines: Body lines of a solution block.

    Returns:
        SolutionRecord with the tier that produced the answer.

    Example:
        >>> rec = extract_answer(["ans- B", "S3 is purpose-built object storage."])
        >>> rec.answer, rec.letters, rec.tier
        ('B', ('B',), 'indicator')
    """
    answer, notes, tier = _locate_answer(lines)
    letters = collect_letter_candidates(lines, notes)
    return SolutionRecord(
        answer=answer,
        notes=notes,
        letters=tuple(letters) if letters else None,
        tier=tier,
    )
