"""
Tests for the extraction diagnostics collector and report.
"""

import json
import threading

from quiz_toolkit.extractor.diagnostics import (
    DiagnosticsCollector,
    ExtractionDiagnosticsReport,
    ExtractionIssue,
)


class TestDiagnosticsCollector:

    def test_add_prefixes_question_id(self):
        collector = DiagnosticsCollector("questions.pdf")

        collector.add("no_options", 12, "no labelled options found", "Describe IAM.")

        issue = collector.issues_of_type("no_options")[0]
        assert issue.message == "Q12: no labelled options found"
        assert issue.source_excerpt == "Describe IAM."
        assert collector.issue_count == 1

    def test_duplicate_helpers(self):
        collector = DiagnosticsCollector()

        collector.add_duplicate_solution(4, "A", "C")
        collector.add_duplicate_question(6, "second copy")

        solution_issue = collector.issues_of_type("duplicate_solution_id")[0]
        assert "keeping the last block" in solution_issue.message
        assert "'C'" in solution_issue.source_excerpt
        assert collector.issues_of_type("duplicate_question_id")[0].question_id == 6

    def test_concurrent_adds(self):
        """Collector can be shared between threads."""
        collector = DiagnosticsCollector()

        def add_many(offset):
            for i in range(100):
                collector.add("no_solution", offset + i + 1, "missing")

        threads = [threading.Thread(target=add_many, args=(n * 100,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert collector.issue_count == 400


class TestDiagnosticsReport:

    def test_summary_by_type(self):
        # Arrange
        issues = [
            ExtractionIssue("no_solution", 1, "Q1: x"),
            ExtractionIssue("no_solution", 2, "Q2: x"),
            ExtractionIssue("orphan_solution", 9, "Q9: x"),
        ]

        # Act
        report = ExtractionDiagnosticsReport.from_issues(issues, "exam.pdf", generated_at="2025-01-01T00:00:00")

        # Assert
        assert report.total_issues == 3
        assert report.summary_by_type == {"no_solution": 2, "orphan_solution": 1}
        assert report.to_dict()["generated_at"] == "2025-01-01T00:00:00"

    def test_excerpt_truncated_and_omitted_when_empty(self):
        long_issue = ExtractionIssue("no_options", 1, "Q1: m", "x" * 5000)
        bare_issue = ExtractionIssue("no_solution", 2, "Q2: m")

        assert len(long_issue.to_dict()["source_excerpt"]) == 2000
        assert "source_excerpt" not in bare_issue.to_dict()

    def test_save_writes_json(self, tmp_path):
        collector = DiagnosticsCollector("exam.pdf")
        collector.add("unresolved_correct", 3, "could not identify the correct option", "purple")
        path = tmp_path / "reports" / "diag.json"

        collector.generate_report().save(path)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["source_name"] == "exam.pdf"
        assert data["issues"][0]["issue_type"] == "unresolved_correct"
