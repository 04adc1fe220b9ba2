"""Centralized threshold and magic number configuration.

This module contains the tuned constants used by the extraction pipeline.
Having these in one place makes tuning easier and documents what each
value controls.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MatchingThresholds:
    """Thresholds for answer-to-option matching."""

    # Token containment score (|answer ∩ option| / |option|) needed to accept
    # a fuzzy match. Empirically tuned against the SAA-C03 source documents.
    fuzzy_match_threshold: float = 0.35

    # Answers shorter than this are replaced by the text of the resolved options
    min_answer_length: int = 2


MATCHING_THRESHOLDS = MatchingThresholds()
