"""
Tests for question/solution reconciliation.

Test Coverage:
- Letter mapping (range filtering, de-duplication, sorting)
- Fuzzy token containment matching and its threshold
- Answer synthesis for short or missing answers
- Type fallback, missing solutions, orphan and duplicate solutions
"""

import pytest

from quiz_toolkit.core.models.blocks import Block, QuestionRecord, SolutionRecord
from quiz_toolkit.extractor.config import ExtractionConfig
from quiz_toolkit.extractor.diagnostics import DiagnosticsCollector
from quiz_toolkit.extractor.reconcile import (
    build_solution_map,
    fuzzy_match,
    map_letters_to_indexes,
    normalize_for_matching,
    reconcile,
    reconcile_item,
    resolve_correct,
    synthesize_answer,
)

OPTIONS = ("EBS volume", "S3 bucket", "EFS share")


class TestLetterMapping:

    def test_maps_sorts_and_dedupes(self):
        assert map_letters_to_indexes(["C", "A", "C"], OPTIONS) == [0, 2]

    def test_out_of_range_dropped(self):
        assert map_letters_to_indexes(["B", "F"], OPTIONS) == [1]

    def test_nothing_in_range(self):
        assert map_letters_to_indexes(["J"], OPTIONS) is None

    def test_missing_inputs(self):
        assert map_letters_to_indexes(None, OPTIONS) is None
        assert map_letters_to_indexes(["A"], None) is None


class TestFuzzyMatch:
    """Tests for the asymmetric token containment score."""

    def test_normalize_for_matching(self):
        assert normalize_for_matching("  Amazon S3 (Standard-IA)! ") == "amazon s3 standard ia"

    def test_answer_containing_option_vocabulary(self):
        assert fuzzy_match("Amazon S3 bucket", list(OPTIONS)) == [1]

    def test_score_is_option_coverage_not_similarity(self):
        """A long answer still scores 1.0 if it contains every option token."""
        answer = "You would store the files in an S3 bucket with versioning enabled"

        assert fuzzy_match(answer, list(OPTIONS)) == [1]

    def test_threshold_is_inclusive(self):
        # 1 of 3 option tokens (0.33) misses, 2 of 5 (0.40) matches
        assert fuzzy_match("gateway", ["nat gateway instance"]) is None
        assert fuzzy_match("nat gateway", ["a nat gateway per az"]) == [0]
        assert fuzzy_match("gateway", ["nat gateway instance"], threshold=1 / 3) == [0]

    def test_tie_goes_to_earlier_option(self):
        assert fuzzy_match("s3 ebs", ["ebs", "s3"]) == [0]

    def test_blank_options_skipped(self):
        assert fuzzy_match("s3", ["---", "s3"]) == [1]

    def test_no_answer_or_options(self):
        assert fuzzy_match(None, list(OPTIONS)) is None
        assert fuzzy_match("S3", None) is None
        assert fuzzy_match("Lambda function", list(OPTIONS)) is None


class TestResolveCorrect:

    def test_letters_take_priority(self):
        solution = SolutionRecord(answer="S3 bucket", letters=("C",))

        assert resolve_correct(solution, OPTIONS) == [2]

    def test_fuzzy_used_when_letters_out_of_range(self):
        solution = SolutionRecord(answer="S3 bucket", letters=("H",))

        assert resolve_correct(solution, OPTIONS) == [1]

    def test_no_solution(self):
        assert resolve_correct(None, OPTIONS) is None


def test_synthesize_answer_lists_options():
    assert synthesize_answer([0, 2], list(OPTIONS)) == "A. EBS volume\nC. EFS share"


class TestReconcileItem:

    def test_short_answer_is_synthesized(self):
        # Arrange
        question = QuestionRecord(5, "Which service provides object storage?", ("EBS", "S3", "EFS"), "single")
        solution = SolutionRecord(answer="B", notes="S3 is object storage.", letters=("B",))

        # Act
        item = reconcile_item(question, solution)

        # Assert
        assert item.correct == (1,)
        assert item.answer == "B. S3"
        assert item.notes == "S3 is object storage."

    def test_long_answer_is_kept(self):
        question = QuestionRecord(5, "q", ("EBS", "S3"), "single")
        solution = SolutionRecord(answer="B, S3", letters=("B",))

        assert reconcile_item(question, solution).answer == "B, S3"

    def test_missing_answer_with_unresolved_correct_stays_absent(self):
        question = QuestionRecord(5, "q", ("EBS", "S3"), "single")

        item = reconcile_item(question, SolutionRecord(notes="no idea"))

        assert item.answer is None
        assert item.correct is None
        assert item.notes == "no idea"

    def test_missing_solution_leaves_fields_absent(self):
        question = QuestionRecord(8, "Pick two (Choose two.)", ("a", "b", "c"), "multi")

        item = reconcile_item(question, None)

        assert item.to_dict() == {
            "id": 8,
            "question": "Pick two (Choose two.)",
            "options": ["a", "b", "c"],
            "type": "multi",
        }

    @pytest.mark.parametrize("letters,expected_type", [
        (("A", "C"), "multi"),
        (("A",), "single"),
    ])
    def test_type_inferred_from_correct_when_missing(self, letters, expected_type):
        question = QuestionRecord(3, "q", ("a", "b", "c"), None)

        item = reconcile_item(question, SolutionRecord(answer="see", letters=letters))

        assert item.type == expected_type

    def test_custom_min_answer_length(self):
        question = QuestionRecord(1, "q", ("EBS", "S3"), "single")
        config = ExtractionConfig(min_answer_length=5)

        item = reconcile_item(question, SolutionRecord(answer="B S3", letters=("B",)), config)

        assert item.answer == "B. S3"


class TestBuildSolutionMap:

    def test_duplicate_id_last_wins_and_is_reported(self, caplog):
        # Arrange
        blocks = [Block(4, ("ans- A",)), Block(4, ("ans- C",))]
        diagnostics = DiagnosticsCollector()

        # Act
        solutions = build_solution_map(blocks, diagnostics)

        # Assert
        assert solutions[4].letters == ("C",)
        issues = diagnostics.issues_of_type("duplicate_solution_id")
        assert len(issues) == 1
        assert issues[0].question_id == 4
        assert "Duplicate solution id 4" in caplog.text

    def test_without_diagnostics(self):
        solutions = build_solution_map([Block(1, ("ans- A",)), Block(1, ("ans- B",))])

        assert solutions[1].answer == "B"


class TestReconcile:

    def test_sorted_output_and_orphans(self):
        # Arrange
        questions = [
            QuestionRecord(7, "seven", ("x", "y"), "single"),
            QuestionRecord(2, "two", None, "single"),
        ]
        solutions = {
            7: SolutionRecord(answer="y", letters=None),
            2: SolutionRecord(answer="free text"),
            40: SolutionRecord(answer="orphan"),
        }
        diagnostics = DiagnosticsCollector()

        # Act
        items = reconcile(questions, solutions, diagnostics=diagnostics)

        # Assert
        assert [item.id for item in items] == [2, 7]
        assert items[0].answer == "free text"
        assert items[0].correct is None
        assert items[1].correct == (1,)
        orphans = diagnostics.issues_of_type("orphan_solution")
        assert [issue.question_id for issue in orphans] == [40]

    def test_heuristic_misses_recorded(self):
        questions = [
            QuestionRecord(1, "", None, "single"),
            QuestionRecord(2, "Pick two (Choose two.)", ("a", "b", "c"), "multi"),
            QuestionRecord(3, "unmatched", ("red", "green"), "single"),
            QuestionRecord(4, "no solution", ("x",), "single"),
        ]
        solutions = {
            1: SolutionRecord(answer="text"),
            2: SolutionRecord(answer="A", letters=("A",)),
            3: SolutionRecord(answer="purple", tier="first_line"),
        }
        diagnostics = DiagnosticsCollector()

        reconcile(questions, solutions, diagnostics=diagnostics)

        types = {(i.issue_type, i.question_id) for i in diagnostics.generate_report().issues}
        assert types == {
            ("empty_question", 1),
            ("no_options", 1),
            ("multi_without_multiple_correct", 2),
            ("first_line_answer", 3),
            ("unresolved_correct", 3),
            ("no_solution", 4),
        }
