"""Tests for the ResultRecord model."""

import pytest
from pydantic import ValidationError

from code_judge.results.domain.record import UNNAMED, ResultRecord


class TestResultRecord:
    def test_success_is_required(self) -> None:
        with pytest.raises(ValidationError):
            ResultRecord.model_validate({"description": "x"})

    def test_defaults(self) -> None:
        record = ResultRecord(success=True)

        assert record.description == UNNAMED
        assert record.score is None
        assert record.error is None
        assert record.usage is None

    def test_explicit_description_wins_over_test_case(self) -> None:
        record = ResultRecord.model_validate(
            {
                "description": "own",
                "success": True,
                "testCase": {"description": "nested"},
            }
        )

        assert record.description == "own"

    def test_empty_description_falls_back_to_test_case(self) -> None:
        record = ResultRecord.model_validate(
            {"description": "", "success": True, "testCase": {"description": "nested"}}
        )

        assert record.description == "nested"

    def test_is_frozen(self) -> None:
        record = ResultRecord(success=True)
        with pytest.raises(ValidationError):
            record.success = False  # type: ignore[misc]
