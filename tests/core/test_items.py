"""
Unit tests for QuizItem.

Test Coverage:
- Construction invariants (positive id, type, correct bounds)
- correct_letters helper
- to_dict() field omission and key order
- from_dict() round trip of a full record
"""

import pytest

from quiz_toolkit.core.models.items import QuizItem, letter_index, option_letter


class TestOptionLetters:
    """Tests for the letter <-> index helpers."""

    def test_option_letter_maps_index_to_label(self):
        assert option_letter(0) == "A"
        assert option_letter(9) == "J"

    def test_letter_index_is_case_insensitive(self):
        assert letter_index("c") == 2
        assert letter_index("C") == 2


class TestQuizItemValidation:
    """Tests for QuizItem construction checks."""

    def test_minimal_item_is_valid(self):
        """An item with only id and question should construct."""
        item = QuizItem(id=1, question="What is S3?")

        assert item.options is None
        assert item.correct is None
        assert item.type == "single"

    @pytest.mark.parametrize("bad_id", [0, -3])
    def test_non_positive_id_rejected(self, bad_id):
        with pytest.raises(ValueError, match="id must be positive"):
            QuizItem(id=bad_id, question="q")

    def test_invalid_type_rejected(self):
        with pytest.raises(ValueError, match="Invalid question type"):
            QuizItem(id=1, question="q", type="essay")

    def test_correct_without_options_rejected(self):
        with pytest.raises(ValueError, match="without options"):
            QuizItem(id=4, question="q", correct=(0,))

    def test_correct_out_of_range_rejected(self):
        """Every correct index must point into options."""
        with pytest.raises(ValueError, match="out of range"):
            QuizItem(id=4, question="q", options=("A1", "B1"), correct=(2,))

    def test_items_are_immutable(self):
        item = QuizItem(id=1, question="q")
        with pytest.raises(AttributeError):
            item.question = "changed"


class TestQuizItemSerialization:
    """Tests for to_dict() / from_dict()."""

    def test_to_dict_omits_absent_fields(self):
        """A question with no solution has no answer, notes or correct keys."""
        # Arrange
        item = QuizItem(id=7, question="Which region?", options=("us-east-1", "eu-west-1"))

        # Act
        d = item.to_dict()

        # Assert
        assert d == {
            "id": 7,
            "question": "Which region?",
            "options": ["us-east-1", "eu-west-1"],
            "type": "single",
        }

    def test_to_dict_key_order(self):
        item = QuizItem(
            id=5,
            question="Which service provides object storage?",
            options=("EBS", "S3", "EFS"),
            correct=(1,),
            answer="B. S3",
            notes="S3 is object storage.",
        )

        assert list(item.to_dict()) == [
            "id", "question", "options", "answer", "notes", "correct", "type",
        ]

    def test_from_dict_restores_item(self):
        # Arrange
        item = QuizItem(
            id=2,
            question="Pick two",
            options=("a", "b", "c"),
            correct=(0, 2),
            answer="A, C",
            type="multi",
        )

        # Act
        restored = QuizItem.from_dict(item.to_dict())

        # Assert
        assert restored == item
        assert restored.correct_letters == ("A", "C")

    def test_correct_letters_empty_when_unresolved(self):
        assert QuizItem(id=1, question="q", options=("x",)).correct_letters == ()


def test_package_metadata():
    import quiz_toolkit

    assert "quiz_toolkit" in quiz_toolkit.__copyright__
    assert quiz_toolkit.__version__
