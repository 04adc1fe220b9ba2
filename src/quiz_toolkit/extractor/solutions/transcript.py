"""
Module: extractor.solutions.transcript

Purpose:
    Build quiz items from the solutions transcript alone, for when no
    question PDF is available. Each transcript entry carries its own
    question text above the "ans-" line.

Key Functions:
    - parse_solution_transcript(): Transcript text -> list of QuizItem
    - parse_transcript_block(): One Block -> QuizItem
"""

from __future__ import annotations

import re

from quiz_toolkit.core.models.blocks import Block
from quiz_toolkit.core.models.items import QuizItem
from ..utils.text import normalize_block
from .segmenter import segment_solutions

ANSWER_MISSING = "(answer text missing)"
ANSWER_NOT_FOUND = "(answer not found)"

ANS_LINE_PATTERN = re.compile(r"^ans[-:]", re.IGNORECASE)
# A row of 5+ dashes or equals signs ends the notes
NOTES_SEPARATOR_PATTERN = re.compile(r"\n[-=]{5,}\n")
WHICH_QUESTION_PATTERN = re.compile(r"Which .*\?$", re.IGNORECASE)
CHOICE_LINE_PATTERN = re.compile(r"^([A-D])\.")


def parse_transcript_block(block: Block) -> QuizItem:
    """
    Turn one transcript entry into a quiz item without options.

    Layouts handled, in order:
    1. Question lines, then "ans- <answer>", then notes
    2. A "Which ...?" question followed by "A." style choices; the first
       choice is taken as the answer
    3. Anything else: the whole entry is the question
    """
    lines = list(block.lines)

    for i, line in enumerate(lines):
        stripped = line.strip()
        if ANS_LINE_PATTERN.match(stripped):
            question = normalize_block(" ".join(lines[:i]).strip())
            answer = ANS_LINE_PATTERN.sub("", stripped).strip()
            rest = "\n".join(lines[i + 1:])
            stop = NOTES_SEPARATOR_PATTERN.search(rest)
            notes = normalize_block(rest[:stop.start()] if stop else rest)
            return QuizItem(
                id=block.id,
                question=question,
                answer=answer or ANSWER_MISSING,
                notes=notes or None,
            )

    which_idx = next(
        (i for i, line in enumerate(lines) if WHICH_QUESTION_PATTERN.search(line.strip())),
        None,
    )
    if which_idx is not None:
        question = normalize_block(" ".join(lines[:which_idx + 1]))
        choice_idx = next(
            (i for i, line in enumerate(lines) if CHOICE_LINE_PATTERN.match(line.strip())),
            None,
        )
        if choice_idx is not None:
            answer = normalize_block(CHOICE_LINE_PATTERN.sub("", lines[choice_idx].strip()).strip())
            notes = normalize_block("\n".join(lines[choice_idx + 1:]))
        else:
            answer = ANSWER_NOT_FOUND
            notes = normalize_block("\n".join(lines))
        return QuizItem(id=block.id, question=question, answer=answer, notes=notes or None)

    return QuizItem(
        id=block.id,
        question=normalize_block("\n".join(lines)),
        answer=ANSWER_NOT_FOUND,
    )


def parse_solution_transcript(text: str) -> list[QuizItem]:
    """
    Parse a solutions transcript into quiz items, sorted by id.

    Duplicate ids keep the last entry, matching how the full pipeline
    resolves them.
    """
    by_id: dict[int, QuizItem] = {}
    for block in segment_solutions(text):
        by_id[block.id] = parse_transcript_block(block)
    return [by_id[k] for k in sorted(by_id)]
