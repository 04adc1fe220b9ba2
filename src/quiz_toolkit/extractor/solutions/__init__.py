"""
Module: extractor.solutions

Purpose:
    Solution side of the pipeline: splits the solutions transcript into
    numbered entries and extracts answers, notes and option letters.

Key Functions:
    - segment_solutions(): Transcript text -> Blocks
    - extract_answer(): Block lines -> SolutionRecord
    - parse_solution_transcript(): Transcript-only quiz items
"""

from .answers import collect_letter_candidates, extract_answer
from .segmenter import segment_solutions
from .transcript import parse_solution_transcript, parse_transcript_block

__all__ = [
    "collect_letter_candidates",
    "extract_answer",
    "segment_solutions",
    "parse_solution_transcript",
    "parse_transcript_block",
]
