"""
Module: extractor.diagnostics

Captures heuristic misses during extraction and generates a diagnostic
report for reviewing the source documents.

None of these issues stop the pipeline: the item is still emitted with the
affected field left out. The report exists so a human can see which
questions need a manual look.

Issue types:
- no_options: question block had no labelled options
- empty_question: question block had no stem text
- duplicate_question_id: question id seen twice in the PDF (first kept)
- no_solution: question id has no solution block
- orphan_solution: solution block id has no question
- duplicate_solution_id: solution id seen twice (last kept)
- first_line_answer: answer fell back to the first line of the block
- unresolved_correct: options exist but no correct option was identified
- multi_without_multiple_correct: "choose two" question resolved to < 2 options
"""

from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class ExtractionIssue:
    """A single heuristic miss with enough context to find it in the sources."""
    issue_type: str
    question_id: int
    message: str
    source_excerpt: str = ""

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "issue_type": self.issue_type,
            "question_id": self.question_id,
            "message": self.message,
        }
        if self.source_excerpt:
            d["source_excerpt"] = self.source_excerpt[:2000]
        return d


class DiagnosticsCollector:
    """
    Thread-safe collector for extraction issues.

    Issues are added with all data including source text; the collector
    never reads the sources itself.
    """

    def __init__(self, source_name: str = ""):
        self.source_name = source_name
        self._issues: List[ExtractionIssue] = []
        self._lock = threading.Lock()

    def add(
        self,
        issue_type: str,
        question_id: int,
        message: str,
        source_excerpt: str = "",
    ) -> None:
        """Record an issue of any type."""
        issue = ExtractionIssue(
            issue_type=issue_type,
            question_id=question_id,
            message=f"Q{question_id}: {message}",
            source_excerpt=source_excerpt,
        )
        with self._lock:
            self._issues.append(issue)

    def add_duplicate_solution(self, question_id: int, previous: str, replacement: str) -> None:
        """Record a solution id that appeared twice; the later block wins."""
        self.add(
            "duplicate_solution_id",
            question_id,
            "solution id appears more than once, keeping the last block",
            source_excerpt=f"previous answer: {previous!r}\nkept answer: {replacement!r}",
        )

    def add_duplicate_question(self, question_id: int, dropped_text: str) -> None:
        """Record a question id that appeared twice; the first block wins."""
        self.add(
            "duplicate_question_id",
            question_id,
            "question id appears more than once, keeping the first block",
            source_excerpt=dropped_text,
        )

    def issues_of_type(self, issue_type: str) -> List[ExtractionIssue]:
        with self._lock:
            return [i for i in self._issues if i.issue_type == issue_type]

    def generate_report(self) -> "ExtractionDiagnosticsReport":
        with self._lock:
            return ExtractionDiagnosticsReport.from_issues(list(self._issues), self.source_name)

    @property
    def issue_count(self) -> int:
        with self._lock:
            return len(self._issues)


@dataclass
class ExtractionDiagnosticsReport:
    """Complete diagnostics report."""
    generated_at: str
    source_name: str
    total_issues: int
    summary_by_type: Dict[str, int]
    issues: List[ExtractionIssue]

    @classmethod
    def from_issues(
        cls,
        issues: List[ExtractionIssue],
        source_name: str = "",
        generated_at: Optional[str] = None,
    ) -> "ExtractionDiagnosticsReport":
        summary_by_type: Dict[str, int] = {}
        for issue in issues:
            summary_by_type[issue.issue_type] = summary_by_type.get(issue.issue_type, 0) + 1

        return cls(
            generated_at=generated_at or datetime.now(timezone.utc).isoformat(),
            source_name=source_name,
            total_issues=len(issues),
            summary_by_type=summary_by_type,
            issues=issues,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generated_at": self.generated_at,
            "source_name": self.source_name,
            "total_issues": self.total_issues,
            "summary_by_type": self.summary_by_type,
            "issues": [issue.to_dict() for issue in self.issues],
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json(), encoding="utf-8")
        logger.info(f"Extraction diagnostics saved: {path}")
