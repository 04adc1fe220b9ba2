"""
Module: extractor.config

Purpose:
    Configuration dataclass for the extraction pipeline. Built once at
    startup (from CLI options and environment) and passed down explicitly;
    no module reads settings on its own.

Key Classes:
    - ExtractionConfig: Main configuration for extraction

Dependencies:
    - dataclasses: For frozen dataclass support

Used By:
    - extractor.pipeline: Uses ExtractionConfig for pipeline settings
    - cli: Builds the config from arguments
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping, Optional

from quiz_toolkit.common.thresholds import MATCHING_THRESHOLDS

DEBUG_TEXT_ENV = "DEBUG_PDF"
DEBUG_TEXT_PATH_ENV = "QUIZ_DEBUG_TEXT_PATH"
DEFAULT_DEBUG_TEXT_PATH = Path("tmp/pdf.txt")

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ExtractionConfig:
    """
    Configuration for the quiz extraction pipeline.

    Attributes:
        fuzzy_threshold: Minimum token containment score for a fuzzy
            answer-to-option match (default 0.35)
        min_answer_length: Answers shorter than this are replaced by the
            resolved option text (default 2)
        debug_text_path: If set, the decoded question text is dumped here
        run_diagnostics: Collect heuristic misses into a report (default False)
        diagnostics_path: Where to save the diagnostics report
        strict_validation: Validate output against the JSON schema (default False)
    """
    fuzzy_threshold: float = MATCHING_THRESHOLDS.fuzzy_match_threshold
    min_answer_length: int = MATCHING_THRESHOLDS.min_answer_length
    debug_text_path: Optional[Path] = None
    run_diagnostics: bool = False
    diagnostics_path: Optional[Path] = None
    strict_validation: bool = False

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        **overrides: Any,
    ) -> ExtractionConfig:
        """
        Build a config from environment toggles plus explicit overrides.

        DEBUG_PDF (truthy) enables the decoded-text dump; its location
        comes from QUIZ_DEBUG_TEXT_PATH or defaults to tmp/pdf.txt.
        """
        env = os.environ if environ is None else environ
        config = cls()
        if env.get(DEBUG_TEXT_ENV, "").strip().lower() in _TRUTHY:
            debug_path = env.get(DEBUG_TEXT_PATH_ENV)
            config = replace(
                config,
                debug_text_path=Path(debug_path) if debug_path else DEFAULT_DEBUG_TEXT_PATH,
            )
        return replace(config, **overrides) if overrides else config
