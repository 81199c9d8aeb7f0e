"""Tests for data models."""

from datetime import date

import pytest

from binary_tutor.exceptions import ValidationError
from binary_tutor.models import (
    ConversionErrorKind,
    ConversionRecord,
    ConversionResult,
    Direction,
    Question,
    QuizResult,
)


class TestDirection:
    """Tests for Direction."""

    def test_labels(self):
        assert Direction.BINARY_TO_DECIMAL.value == "B→D"
        assert Direction.DECIMAL_TO_BINARY.value == "D→B"

    def test_names(self):
        assert Direction.BINARY_TO_DECIMAL.source_name == "binary"
        assert Direction.BINARY_TO_DECIMAL.target_name == "decimal"
        assert Direction.DECIMAL_TO_BINARY.target_name == "binary"


class TestConversionResult:
    """Tests for ConversionResult."""

    def test_failure_constructor(self):
        result = ConversionResult.failure(
            Direction.BINARY_TO_DECIMAL, "2", ConversionErrorKind.INVALID_DIGITS
        )
        assert not result.ok
        assert result.value == ""
        assert result.steps == ()

    def test_success_message_is_empty(self):
        result = ConversionResult(Direction.BINARY_TO_DECIMAL, "1", value="1", steps=("x",))
        assert result.ok
        assert result.error_message == ""

    def test_str(self):
        result = ConversionResult(Direction.DECIMAL_TO_BINARY, "2", value="10")
        assert str(result) == "decimal 2 = binary 10"


class TestConversionRecord:
    """Tests for ConversionRecord."""

    def test_empty_input_rejected(self):
        with pytest.raises(ValidationError):
            ConversionRecord(id=1, direction=Direction.BINARY_TO_DECIMAL, input="", output="0")

    def test_empty_output_rejected(self):
        with pytest.raises(ValidationError):
            ConversionRecord(id=1, direction=Direction.BINARY_TO_DECIMAL, input="0", output="")

    def test_immutable(self, make_record):
        record = make_record()
        with pytest.raises(AttributeError):
            record.output = "11"

    def test_to_dict(self, make_record):
        assert make_record(id=5).to_dict() == {
            "id": 5,
            "type": "B→D",
            "input": "1010",
            "output": "10",
        }

    def test_from_dict(self, make_record):
        record = make_record(id=9, direction=Direction.DECIMAL_TO_BINARY, input="3", output="11")
        assert ConversionRecord.from_dict(record.to_dict()) == record

    def test_from_dict_unknown_type(self):
        with pytest.raises(ValueError):
            ConversionRecord.from_dict({"id": 1, "type": "?", "input": "1", "output": "1"})

    def test_from_dict_bool_id(self):
        with pytest.raises(TypeError):
            ConversionRecord.from_dict({"id": True, "type": "B→D", "input": "1", "output": "1"})

    def test_str(self, make_record):
        assert str(make_record()) == "[B→D] 1010 → 10"


class TestQuestion:
    """Tests for Question."""

    def test_is_correct(self):
        question = Question(
            question="?",
            options=("1", "2"),
            answer="2",
            direction=Direction.BINARY_TO_DECIMAL,
            problem="10",
        )
        assert question.is_correct("2")
        assert not question.is_correct("1")


class TestQuizResult:
    """Tests for QuizResult."""

    def test_percentage(self):
        assert QuizResult("A", 4, 5, date(2024, 1, 1)).percentage == 80

    def test_percentage_rounds(self):
        assert QuizResult("A", 2, 3, date(2024, 1, 1)).percentage == 67

    def test_percentage_empty_quiz(self):
        assert QuizResult("A", 0, 0, date(2024, 1, 1)).percentage == 0

    def test_passed(self):
        result = QuizResult("A", 3, 5, date(2024, 1, 1))
        assert result.passed(60)
        assert not result.passed(61)
