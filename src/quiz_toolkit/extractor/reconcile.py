"""
Module: extractor.reconcile

Purpose:
    Join question records to solution records by question number and
    resolve which options are correct.

Key Functions:
    - build_solution_map(): Solution blocks -> {id: SolutionRecord}
    - resolve_correct(): Letters first, fuzzy text match second
    - fuzzy_match(): Token containment match of an answer against options
    - reconcile(): Question + solution records -> sorted QuizItem list

Used By:
    - extractor.pipeline: Final step before serialization

Notes:
    The fuzzy score is |answer tokens ∩ option tokens| / |option tokens|,
    i.e. how much of the option's vocabulary appears in the answer. It is
    deliberately asymmetric; a long answer that quotes the option in full
    scores 1.0 against it.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, Iterable, List, Optional, Sequence

from quiz_toolkit.common.thresholds import MATCHING_THRESHOLDS
from quiz_toolkit.core.models.blocks import Block, QuestionRecord, SolutionRecord
from quiz_toolkit.core.models.items import QuizItem, letter_index, option_letter
from .config import ExtractionConfig
from .diagnostics import DiagnosticsCollector
from .solutions.answers import extract_answer

logger = logging.getLogger(__name__)

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def normalize_for_matching(text: str) -> str:
    """Lowercase, replace non-alphanumeric runs with a space, trim."""
    return _NON_ALNUM.sub(" ", text.lower()).strip()


def build_solution_map(
    blocks: Iterable[Block],
    diagnostics: Optional[DiagnosticsCollector] = None,
) -> Dict[int, SolutionRecord]:
    """
    Extract every solution block into an id lookup.

    When two blocks share an id the later one wins; each overwrite is
    logged and recorded as a duplicate_solution_id diagnostic.
    """
    solutions: Dict[int, SolutionRecord] = {}
    for block in blocks:
        record = extract_answer(block.lines)
        previous = solutions.get(block.id)
        if previous is not None:
            logger.warning(f"Duplicate solution id {block.id}: keeping the later block")
            if diagnostics:
                diagnostics.add_duplicate_solution(
                    block.id, previous.answer or "", record.answer or ""
                )
        solutions[block.id] = record
    return solutions


def map_letters_to_indexes(
    letters: Optional[Sequence[str]],
    options: Optional[Sequence[str]],
) -> Optional[List[int]]:
    """
    Map option letters to zero-based indexes.

    Out-of-range letters are dropped; the result is de-duplicated and
    sorted. Returns None if nothing maps.

    Example:
        >>> map_letters_to_indexes(["C", "A", "F"], ["x", "y", "z"])
        [0, 2]
    """
    if not letters or not options:
        return None
    indexes = {letter_index(letter) for letter in letters}
    in_range = sorted(i for i in indexes if 0 <= i < len(options))
    return in_range or None


def fuzzy_match(
    answer: Optional[str],
    options: Optional[Sequence[str]],
    threshold: float = MATCHING_THRESHOLDS.fuzzy_match_threshold,
) -> Optional[List[int]]:
    """
    Find the option whose vocabulary is best covered by the answer text.

    Only a strictly greater score replaces the current best, so ties go to
    the earlier option. Options that normalize to nothing are skipped.

    Args:
        answer: Free-text answer from the solutions transcript.
        options: Option texts in letter order.
        threshold: Minimum score to accept (inclusive).

    Returns:
        [index] of the best option, or None below threshold.

    Example:
        >>> fuzzy_match("Amazon S3 bucket", ["EBS volume", "S3 bucket", "EFS share"])
        [1]
    """
    if not answer or not options:
        return None

    answer_tokens = set(normalize_for_matching(answer).split())
    best_idx = -1
    best_score = 0.0

    for i, option in enumerate(options):
        normalized = normalize_for_matching(option)
        if not normalized:
            continue
        option_tokens = set(normalized.split())
        score = len(option_tokens & answer_tokens) / max(1, len(option_tokens))
        if score > best_score:
            best_score = score
            best_idx = i

    if best_idx >= 0 and best_score >= threshold:
        return [best_idx]
    return None


def resolve_correct(
    solution: Optional[SolutionRecord],
    options: Optional[Sequence[str]],
    threshold: float = MATCHING_THRESHOLDS.fuzzy_match_threshold,
) -> Optional[List[int]]:
    """Resolve correct option indexes: explicit letters, then fuzzy match."""
    if solution is None:
        return None
    correct = map_letters_to_indexes(solution.letters, options)
    if correct is None:
        correct = fuzzy_match(solution.answer, options, threshold)
    return correct


def synthesize_answer(correct: Sequence[int], options: Sequence[str]) -> str:
    """
    Readable answer built from the resolved options.

    Example:
        >>> synthesize_answer([1], ["EBS", "S3"])
        'B. S3'
    """
    return "\n".join(f"{option_letter(i)}. {options[i]}" for i in correct)


def reconcile_item(
    question: QuestionRecord,
    solution: Optional[SolutionRecord],
    config: Optional[ExtractionConfig] = None,
    diagnostics: Optional[DiagnosticsCollector] = None,
) -> QuizItem:
    """Merge one question record with its (possibly missing) solution."""
    config = config or ExtractionConfig()
    options = question.options
    correct = resolve_correct(solution, options, config.fuzzy_threshold)

    question_type = question.type
    if question_type is None:
        question_type = "multi" if correct and len(correct) > 1 else "single"

    answer = solution.answer if solution else None
    if correct and options and (not answer or len(answer) < config.min_answer_length):
        answer = synthesize_answer(correct, options)

    if diagnostics:
        _record_item_issues(question, solution, correct, question_type, diagnostics)

    return QuizItem(
        id=question.id,
        question=question.question,
        options=options,
        correct=tuple(correct) if correct else None,
        answer=answer,
        notes=solution.notes if solution else None,
        type=question_type,
    )


def _record_item_issues(
    question: QuestionRecord,
    solution: Optional[SolutionRecord],
    correct: Optional[List[int]],
    question_type: str,
    diagnostics: DiagnosticsCollector,
) -> None:
    qid = question.id
    if not question.question:
        diagnostics.add("empty_question", qid, "question stem is empty")
    if question.options is None:
        diagnostics.add("no_options", qid, "no labelled options found", question.question)
    if solution is None:
        diagnostics.add("no_solution", qid, "no solution block with this id")
        return
    if solution.tier == "first_line":
        diagnostics.add(
            "first_line_answer", qid,
            "no answer marker, used the first line of the solution",
            solution.answer or "",
        )
    if question.options is not None and not correct:
        diagnostics.add(
            "unresolved_correct", qid,
            "could not identify the correct option",
            solution.answer or "",
        )
    if question_type == "multi" and correct is not None and len(correct) < 2:
        diagnostics.add(
            "multi_without_multiple_correct", qid,
            f"multiple-answer question resolved to {len(correct)} option(s)",
        )


def reconcile(
    questions: Iterable[QuestionRecord],
    solutions: Dict[int, SolutionRecord],
    config: Optional[ExtractionConfig] = None,
    diagnostics: Optional[DiagnosticsCollector] = None,
) -> List[QuizItem]:
    """
    Join question records with solution records by id.

    Every question record yields an item, whether or not a solution was
    found. Solutions without a question are reported and skipped.

    Returns:
        Quiz items sorted ascending by id.
    """
    config = config or ExtractionConfig()
    items = [
        reconcile_item(q, solutions.get(q.id), config, diagnostics)
        for q in questions
    ]

    if diagnostics:
        question_ids = {item.id for item in items}
        for sid in sorted(set(solutions) - question_ids):
            diagnostics.add("orphan_solution", sid, "solution block has no matching question")

    return sorted(items, key=lambda item: item.id)
