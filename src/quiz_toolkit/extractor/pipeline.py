"""
Module: extractor.pipeline

Purpose:
    Main pipeline orchestrator. Decodes the question PDF, reads the
    solutions transcript, runs segmentation, answer extraction and
    reconciliation, and writes questions.json.

Key Functions:
    - build_quiz(): Main entry point (files in, questions.json out)
    - build_quiz_from_text(): Same pipeline over already-decoded text
    - extract_questions(): Question side only
    - parse_solutions_only(): Transcript-only quiz items

Key Classes:
    - ExtractionResult: Container for extraction output

Dependencies:
    - fitz (PyMuPDF): PDF decoding, via extractor.utils.pdf

Used By:
    - quiz_toolkit.cli: Command-line extraction
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from quiz_toolkit.core.models.blocks import QuestionRecord
from quiz_toolkit.core.models.items import QuizItem
from quiz_toolkit.core.utils.serialization import save_questions_json
from .config import ExtractionConfig
from .detection.options import parse_question_block
from .detection.questions import segment_questions
from .diagnostics import DiagnosticsCollector
from .reconcile import build_solution_map, reconcile
from .solutions.segmenter import segment_solutions
from .solutions.transcript import parse_solution_transcript
from .timing import TimingLog, timed_phase
from .utils.pdf import extract_document_text, read_text_file

logger = logging.getLogger(__name__)


@dataclass
class ExtractionResult:
    """
    Result of one pipeline run.

    Attributes:
        item_count: Items written to the output document.
        output_path: Where questions.json was written.
        items: The items that were written, in output order.
        timing: Per-phase durations.
        diagnostics_path: Where the diagnostics report was saved, if any.
    """
    item_count: int
    output_path: Path
    items: List[QuizItem] = field(default_factory=list)
    timing: TimingLog = field(default_factory=TimingLog)
    diagnostics_path: Optional[Path] = None


def extract_questions(
    text: str,
    diagnostics: Optional[DiagnosticsCollector] = None,
) -> List[QuestionRecord]:
    """
    Segment decoded question text and parse every block.

    If the same id opens two blocks, the first one is kept.

    Returns:
        Question records sorted ascending by id.
    """
    records: List[QuestionRecord] = []
    seen_ids = set()
    for block in segment_questions(text):
        if block.id in seen_ids:
            logger.debug(f"Skipping duplicate question block {block.id}")
            if diagnostics:
                diagnostics.add_duplicate_question(block.id, " ".join(block.lines))
            continue
        seen_ids.add(block.id)
        records.append(parse_question_block(block))
    return records


def build_quiz_from_text(
    question_text: str,
    solution_text: str,
    *,
    config: Optional[ExtractionConfig] = None,
    diagnostics: Optional[DiagnosticsCollector] = None,
    timing_log: Optional[TimingLog] = None,
) -> List[QuizItem]:
    """
    Run segmentation, answer extraction and reconciliation on decoded text.

    Example:
        >>> items = build_quiz_from_text(
        ...     "5] Which service provides object storage?\\nA. EBS\\nB. S3\\nC. EFS",
        ...     "5] ans- B\\nS3 is purpose-built object storage.",
        ... )
        >>> items[0].correct
        (1,)
    """
    config = config or ExtractionConfig()
    timing_log = timing_log or TimingLog()

    with timed_phase(timing_log, "question_segmentation"):
        questions = extract_questions(question_text, diagnostics)

    with timed_phase(timing_log, "solution_extraction"):
        solutions = build_solution_map(segment_solutions(solution_text), diagnostics)

    with timed_phase(timing_log, "reconciliation"):
        items = reconcile(questions, solutions, config, diagnostics)

    logger.debug(
        f"Reconciled {len(questions)} questions with {len(solutions)} solutions"
    )
    return items


def build_quiz(
    pdf_path: Path,
    solutions_path: Path,
    output_path: Path,
    *,
    config: Optional[ExtractionConfig] = None,
    diagnostics_collector: Optional[DiagnosticsCollector] = None,
) -> ExtractionResult:
    """
    Build questions.json from a question PDF and a solutions transcript.

    Pipeline:
    1. Decode the PDF to text (optionally dumping it for inspection)
    2. Read the solutions transcript
    3. Segment questions, parse options
    4. Segment solutions, extract answers
    5. Reconcile by id, validate, write

    Both sources are fully read before anything is written, and the output
    is written atomically, so a failed run leaves no output behind.

    Args:
        pdf_path: Question PDF.
        solutions_path: Plain-text solutions transcript (UTF-8).
        output_path: Destination for questions.json.
        config: Optional extraction configuration.
        diagnostics_collector: Optional collector shared with the caller.

    Returns:
        ExtractionResult with counts and the written items.

    Raises:
        FileNotFoundError: If either source is missing.
        DocumentDecodeError: If the PDF can't be decoded.
        UnicodeDecodeError: If the transcript isn't UTF-8.
        ValidationError: If the reconciled items break an output invariant.
    """
    config = config or ExtractionConfig()
    timing_log = TimingLog()

    owns_collector = diagnostics_collector is None and config.run_diagnostics
    if owns_collector:
        diagnostics_collector = DiagnosticsCollector(source_name=pdf_path.name)

    logger.info(f"Reading PDF {pdf_path.name}")
    with timed_phase(timing_log, "pdf_decoding"):
        question_text = extract_document_text(pdf_path)

    if config.debug_text_path:
        config.debug_text_path.parent.mkdir(parents=True, exist_ok=True)
        config.debug_text_path.write_text(question_text, encoding="utf-8")
        logger.info(f"Wrote raw PDF text to {config.debug_text_path}")

    with timed_phase(timing_log, "solutions_reading"):
        solution_text = read_text_file(solutions_path)

    items = build_quiz_from_text(
        question_text,
        solution_text,
        config=config,
        diagnostics=diagnostics_collector,
        timing_log=timing_log,
    )
    logger.info(f"Extracted {len(items)} questions from {pdf_path.name}")

    with timed_phase(timing_log, "writing"):
        save_questions_json(items, output_path, strict=config.strict_validation)
    logger.info(f"Wrote {len(items)} questions -> {output_path}")

    diagnostics_path = None
    if owns_collector and diagnostics_collector and diagnostics_collector.issue_count > 0:
        diagnostics_path = config.diagnostics_path or output_path.with_name(
            f"{output_path.stem}_diagnostics.json"
        )
        diagnostics_collector.generate_report().save(diagnostics_path)
        logger.info(f"Extraction diagnostics: {diagnostics_collector.issue_count} issues found")

    logger.debug(timing_log.summary())

    return ExtractionResult(
        item_count=len(items),
        output_path=output_path,
        items=items,
        timing=timing_log,
        diagnostics_path=diagnostics_path,
    )


def parse_solutions_only(
    input_path: Path,
    output_path: Path,
    *,
    config: Optional[ExtractionConfig] = None,
) -> ExtractionResult:
    """
    Build questions.json from the solutions transcript alone.

    Items carry question, answer and notes; there are no options.
    """
    config = config or ExtractionConfig()
    timing_log = TimingLog()

    with timed_phase(timing_log, "solutions_reading"):
        text = read_text_file(input_path)

    with timed_phase(timing_log, "transcript_parsing"):
        items = parse_solution_transcript(text)

    with timed_phase(timing_log, "writing"):
        save_questions_json(items, output_path, strict=config.strict_validation)
    logger.info(f"Parsed {len(items)} items -> {output_path}")

    return ExtractionResult(
        item_count=len(items),
        output_path=output_path,
        items=items,
        timing=timing_log,
    )
