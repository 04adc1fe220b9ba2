"""
Module: extractor.solutions.segmenter

Purpose:
    Split the solutions transcript into blocks keyed by question number.
    The transcript uses "<number>] <text>" to open each entry.

Key Functions:
    - segment_solutions(): Split raw transcript text into Blocks

Used By:
    - extractor.pipeline / extractor.reconcile: Solution side of the pipeline
    - extractor.solutions.transcript: Solutions-only parsing
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from quiz_toolkit.core.models.blocks import Block
from ..utils.text import split_lines

logger = logging.getLogger(__name__)

# "12]" at the very start of a line, non-zero id up to 4 digits
SOLUTION_START_PATTERN = re.compile(r"^([1-9]\d{0,3})\]\s*")


def segment_solutions(text: str) -> List[Block]:
    """
    Split a solutions transcript into numbered blocks.

    The text after "<n>]" on the opening line (stripped) becomes the first
    body line; following lines are kept verbatim, blank ones included.
    Text before the first numbered line is dropped. Ids are not checked
    for uniqueness here.

    Args:
        text: Raw transcript text.

    Returns:
        Blocks in source order.

    Example:
        >>> segment_solutions("5] ans- B\\nS3 is object storage.")
        [Block(id=5, lines=('ans- B', 'S3 is object storage.'))]
    """
    blocks: List[Block] = []
    current_id: Optional[int] = None
    current_lines: List[str] = []

    for raw_line in split_lines(text):
        m = SOLUTION_START_PATTERN.match(raw_line)
        if m:
            if current_id is not None:
                blocks.append(Block(current_id, tuple(current_lines)))
            current_id = int(m.group(1))
            current_lines = [raw_line[m.end():].strip()]
        elif current_id is not None:
            current_lines.append(raw_line)

    if current_id is not None:
        blocks.append(Block(current_id, tuple(current_lines)))

    logger.debug(f"Segmented {len(blocks)} solution blocks")
    return blocks
