"""
Command line entry points.

    quiz-build --pdf <questions.pdf> --solutions <solutions.txt> --output <questions.json>
    quiz-parse-solutions --input <solutions.txt> --output <questions.json>

Set DEBUG_PDF=1 to dump the decoded PDF text (to tmp/pdf.txt, or to
QUIZ_DEBUG_TEXT_PATH) before segmentation.

Exit codes: 0 on success, 1 if the run failed, 2 for usage errors.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from quiz_toolkit import __version__
from quiz_toolkit.extractor import ExtractionConfig, build_quiz, parse_solutions_only

logger = logging.getLogger("quiz_toolkit.cli")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quiz-build",
        description="Build questions.json from an exam PDF and a solutions transcript",
    )
    parser.add_argument("--pdf", required=True, type=Path, help="Question PDF")
    parser.add_argument("--solutions", required=True, type=Path, help="Solutions transcript (UTF-8 text)")
    parser.add_argument("--output", required=True, type=Path, help="Output questions.json")
    parser.add_argument("--diagnostics", type=Path, help="Write a diagnostics report for heuristic misses")
    parser.add_argument("--strict", action="store_true", help="Validate output against the JSON schema")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _build_solutions_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quiz-parse-solutions",
        description="Build questions.json from a solutions transcript alone",
    )
    parser.add_argument("--input", required=True, type=Path, help="Solutions transcript (UTF-8 text)")
    parser.add_argument("--output", required=True, type=Path, help="Output questions.json")
    parser.add_argument("--strict", action="store_true", help="Validate output against the JSON schema")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for quiz-build."""
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    config = ExtractionConfig.from_env(
        run_diagnostics=args.diagnostics is not None,
        diagnostics_path=args.diagnostics,
        strict_validation=args.strict,
    )

    try:
        result = build_quiz(
            args.pdf.resolve(),
            args.solutions.resolve(),
            args.output.resolve(),
            config=config,
        )
    except Exception:
        logger.exception("Quiz build failed")
        return 1

    logger.debug(f"Finished in {result.timing.total:.3f}s")
    return 0


def parse_solutions_main(argv: Optional[List[str]] = None) -> int:
    """Entry point for quiz-parse-solutions."""
    args = _build_solutions_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        parse_solutions_only(
            args.input.resolve(),
            args.output.resolve(),
            config=ExtractionConfig(strict_validation=args.strict),
        )
    except Exception:
        logger.exception("Solution parsing failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
