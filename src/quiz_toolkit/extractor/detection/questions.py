"""
Module: extractor.detection.questions

Purpose:
    Question segmentation - splits the decoded question PDF text into
    numbered blocks, then splits each block into stem lines and option
    lines.

Key Functions:
    - segment_questions(): Split raw text into Blocks sorted by id
    - split_question_block(): Divide a Block into header and option lines
    - match_block_start(): Try each header matcher against one line

Key Classes:
    - BlockStart: Tagged block-start event produced by a matcher
    - HeaderMatcher: One start pattern plus how to treat the rest of the line

Used By:
    - extractor.detection.options: Parses the option lines
    - extractor.pipeline: Question side of the pipeline

Notes:
    Two source layouts are supported without classifying the document
    first. Exam-dump PDFs print "Topic 1 Question #12" on a line of its
    own; typed question lists use "12." / "12)" / "12]" in front of the
    stem. Matchers are tried in order and the first hit wins.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from quiz_toolkit.core.models.blocks import Block
from ..utils.text import normalize_inline, split_lines

logger = logging.getLogger(__name__)

# "Topic 1Question #123" - PDF extraction often drops the space before "Question"; #0 is not an id
TOPIC_HEADER_PATTERN = re.compile(r"^\s*Topic\s+\d+\s*Question\s*#\s*0*([1-9]\d{0,3})\s*$", re.IGNORECASE)
# "1." / "1)" / "1]" at line start, non-zero id up to 4 digits
NUMBERED_START_PATTERN = re.compile(r"^\s*([1-9]\d{0,3})\s*[\]).]\s*(.*)$")
# "A. text" / "B) text"
OPTION_LABEL_PATTERN = re.compile(r"^([A-J])[.)]\s+")


@dataclass(frozen=True)
class BlockStart:
    """
    A line recognised as the start of a question block.

    Attributes:
        kind: Name of the matcher that fired ("topic", "numbered", ...)
        id: Question number
        remainder: Text after the number on the same line, or None if the
            matcher consumes the whole line
    """
    kind: str
    id: int
    remainder: Optional[str] = None


@dataclass(frozen=True)
class HeaderMatcher:
    """A block-start pattern whose first group is the question number."""
    kind: str
    pattern: re.Pattern
    keeps_remainder: bool = False

    def match(self, line: str) -> Optional[BlockStart]:
        m = self.pattern.match(line)
        if not m:
            return None
        remainder = m.group(2) if self.keeps_remainder else None
        return BlockStart(kind=self.kind, id=int(m.group(1)), remainder=remainder)


QUESTION_START_MATCHERS: Tuple[HeaderMatcher, ...] = (
    HeaderMatcher("topic", TOPIC_HEADER_PATTERN),
    HeaderMatcher("numbered", NUMBERED_START_PATTERN, keeps_remainder=True),
)


def match_block_start(
    line: str,
    matchers: Sequence[HeaderMatcher] = QUESTION_START_MATCHERS,
) -> Optional[BlockStart]:
    """Return the first matcher's BlockStart for a line, or None."""
    for matcher in matchers:
        start = matcher.match(line)
        if start is not None:
            return start
    return None


def is_option_line(line: str) -> bool:
    """True if the line starts with an option label (A-J followed by . or ))."""
    return OPTION_LABEL_PATTERN.match(line.strip()) is not None


def segment_questions(
    text: str,
    matchers: Sequence[HeaderMatcher] = QUESTION_START_MATCHERS,
) -> List[Block]:
    """
    Split decoded question text into numbered blocks.

    Each line is whitespace-normalized and blank lines are dropped. A line
    matched by one of the header matchers closes the current block and
    opens a new one; any other line is appended to the current block.
    Lines before the first header are discarded.

    Args:
        text: Decoded question PDF text.
        matchers: Block-start matchers, tried in order.

    Returns:
        Blocks sorted ascending by id (stable for equal ids).

    Example:
        >>> blocks = segment_questions("5] Which service?\\nA. EBS\\nB. S3")
        >>> blocks[0]
        Block(id=5, lines=('Which service?', 'A. EBS', 'B. S3'))
    """
    blocks: List[Block] = []
    current_id: Optional[int] = None
    current_lines: List[str] = []
    dropped = 0

    for raw in split_lines(text):
        line = normalize_inline(raw)
        if not line:
            continue

        start = match_block_start(line, matchers)
        if start is not None:
            if current_id is not None:
                blocks.append(Block(current_id, tuple(current_lines)))
            current_id = start.id
            current_lines = [] if start.remainder is None else [start.remainder]
            continue

        if current_id is not None:
            current_lines.append(line)
        else:
            dropped += 1

    if current_id is not None:
        blocks.append(Block(current_id, tuple(current_lines)))

    if dropped:
        logger.debug(f"Dropped {dropped} lines before the first question header")

    return sorted(blocks, key=lambda b: b.id)


def split_question_block(block: Block) -> Tuple[List[str], List[str]]:
    """
    Divide a block into stem lines and option lines.

    The first line that looks like an option label starts the option
    section. If no such line exists the whole block is stem.

    Returns:
        (header_lines, option_lines)
    """
    for i, line in enumerate(block.lines):
        if is_option_line(line):
            return list(block.lines[:i]), list(block.lines[i:])
    return list(block.lines), []
