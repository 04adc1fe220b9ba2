"""
Module: extractor.detection.options

Purpose:
    Option parsing - turns the option lines of a question block into an
    ordered list of answer choices, merging wrapped continuation lines
    into the choice they belong to. Also infers whether a question expects
    one or several correct answers.

Key Functions:
    - parse_options(): Option lines -> list of option strings
    - infer_question_type(): "single" or "multi" from the stem text
    - parse_question_block(): Block -> QuestionRecord
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from quiz_toolkit.core.models.blocks import Block, QuestionRecord
from quiz_toolkit.core.models.items import QuestionType
from ..utils.text import normalize_block
from .questions import OPTION_LABEL_PATTERN, split_question_block

MULTI_ANSWER_PATTERNS = (
    re.compile(r"choose\s+(two|three|all\s+that\s+apply)", re.IGNORECASE),
    re.compile(r"select\s+all\s+that\s+apply", re.IGNORECASE),
)


def parse_options(lines: Sequence[str]) -> Optional[List[str]]:
    """
    Parse labelled answer options.

    A line starting with a label ("A. ", "B) ", ... up to "J") opens a new
    option; other lines are wrapped text of the current option. Lines
    before the first label are ignored.

    Args:
        lines: Option section of a question block.

    Returns:
        Option texts in label order, or None if no option was found.

    Example:
        >>> parse_options(["A. Use an", "S3 bucket", "B. Use EBS"])
        ['Use an S3 bucket', 'Use EBS']
    """
    options: List[str] = []
    buffer: List[str] = []
    in_option = False

    def flush() -> None:
        if in_option:
            options.append(normalize_block(" ".join(buffer)))

    for line in lines:
        stripped = line.strip()
        m = OPTION_LABEL_PATTERN.match(stripped)
        if m:
            flush()
            buffer = [stripped[m.end():]]
            in_option = True
        elif in_option:
            buffer.append(line)
    flush()

    return options or None


def infer_question_type(question: str) -> QuestionType:
    """
    Guess whether a question has several correct options.

    Example:
        >>> infer_question_type("Which steps meet the requirements? (Choose two.)")
        'multi'
    """
    if any(p.search(question) for p in MULTI_ANSWER_PATTERNS):
        return "multi"
    return "single"


def parse_question_block(block: Block) -> QuestionRecord:
    """
    Build the question side of a quiz item from a segmented block.

    The stem is the header lines joined with spaces; options are absent
    when the block has no labelled option lines.
    """
    header_lines, option_lines = split_question_block(block)
    question = normalize_block(" ".join(header_lines))
    options = parse_options(option_lines) if option_lines else None
    return QuestionRecord(
        id=block.id,
        question=question,
        options=tuple(options) if options else None,
        type=infer_question_type(question),
    )
