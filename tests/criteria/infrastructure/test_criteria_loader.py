"""Tests for loading rubrics from YAML."""

from pathlib import Path

import pytest

from code_judge.criteria.domain.builtin import CODE_REVIEW_CRITERIA
from code_judge.criteria.infrastructure.errors import CriteriaLoadError
from code_judge.criteria.infrastructure.yaml_loader import (
    load_criteria,
    resolve_criteria,
)

# __file__ is tests/criteria/infrastructure/test_criteria_loader.py
FIXTURES = Path(__file__).parent.parent.parent / "fixtures"


class TestLoadCriteria:
    def test_loads_rubric(self) -> None:
        spec = load_criteria(path=FIXTURES / "rubric.yaml")

        assert spec.criterion_names == ["correctness", "readability"]
        assert spec.pass_threshold == 6.0
        assert spec.criteria[1].max_score == 5.0
        assert spec.role.startswith("You are a senior reviewer")

    def test_name_defaults_to_file_stem(self) -> None:
        assert load_criteria(path=FIXTURES / "rubric.yaml").name == "rubric"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(CriteriaLoadError, match="file not found"):
            load_criteria(path=tmp_path / "absent.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text("criteria: [", encoding="utf-8")

        with pytest.raises(CriteriaLoadError, match="invalid YAML"):
            load_criteria(path=path)

    def test_non_mapping_document(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(CriteriaLoadError, match="must be a mapping"):
            load_criteria(path=path)

    def test_duplicate_criteria_rejected(self) -> None:
        with pytest.raises(CriteriaLoadError, match="duplicate criterion names"):
            load_criteria(path=FIXTURES / "rubric_duplicate.yaml")

    def test_unknown_placeholder_rejected(self) -> None:
        with pytest.raises(CriteriaLoadError, match="unknown placeholders: context"):
            load_criteria(path=FIXTURES / "rubric_bad_placeholder.yaml")

    def test_error_carries_path(self, tmp_path: Path) -> None:
        path = tmp_path / "absent.yaml"
        with pytest.raises(CriteriaLoadError) as exc_info:
            load_criteria(path=path)

        assert exc_info.value.path == path


class TestResolveCriteria:
    def test_none_path_returns_builtin(self) -> None:
        spec = resolve_criteria(path=None, default="code-review")

        assert spec is CODE_REVIEW_CRITERIA

    def test_path_wins_over_default(self) -> None:
        spec = resolve_criteria(path=FIXTURES / "rubric.yaml", default="code-review")

        assert spec.name == "rubric"
