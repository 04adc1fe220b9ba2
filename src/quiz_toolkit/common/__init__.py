"""Shared helpers used by the core and extractor packages."""

from .thresholds import MATCHING_THRESHOLDS, MatchingThresholds

__all__ = [
    "MATCHING_THRESHOLDS",
    "MatchingThresholds",
]
