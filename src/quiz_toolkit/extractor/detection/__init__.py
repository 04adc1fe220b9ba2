"""
Module: extractor.detection

Purpose:
    Detection subpackage for the question side of the pipeline.

Key Modules:
    - questions: Question block segmentation (numbers, stems, option sections)
    - options: Option parsing and question type inference

Used By:
    - extractor.pipeline: Orchestrates detection modules
"""

from .options import infer_question_type, parse_options, parse_question_block
from .questions import (
    QUESTION_START_MATCHERS,
    BlockStart,
    HeaderMatcher,
    is_option_line,
    match_block_start,
    segment_questions,
    split_question_block,
)

__all__ = [
    "QUESTION_START_MATCHERS",
    "BlockStart",
    "HeaderMatcher",
    "infer_question_type",
    "is_option_line",
    "match_block_start",
    "parse_options",
    "parse_question_block",
    "segment_questions",
    "split_question_block",
]
