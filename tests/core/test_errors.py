"""Tests verifying the CodeJudgeError type hierarchy."""

from pathlib import Path

from code_judge.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)
from code_judge.core.errors import CodeJudgeError
from code_judge.criteria.infrastructure.errors import CriteriaLoadError
from code_judge.project.infrastructure.errors import ProjectAnalysisError
from code_judge.results.infrastructure.errors import (
    ResultsStoreFormatError,
    ResultsStoreNotFoundError,
)


class TestCodeJudgeErrorHierarchy:
    """All code-judge-specific exceptions inherit from CodeJudgeError."""

    def test_missing_env_vars_error_is_code_judge_error(self) -> None:
        error = MissingEnvVarsError(missing_vars=["MY_VAR"])
        assert isinstance(error, CodeJudgeError)

    def test_config_validation_error_is_code_judge_error(self) -> None:
        error = ConfigValidationError(reason="bad value")
        assert isinstance(error, CodeJudgeError)

    def test_config_load_error_is_code_judge_error(self) -> None:
        error = ConfigLoadError(path=Path("/some/config.yaml"))
        assert isinstance(error, CodeJudgeError)

    def test_criteria_load_error_is_code_judge_error(self) -> None:
        error = CriteriaLoadError(path=Path("rubric.yaml"), reason="file not found")
        assert isinstance(error, CodeJudgeError)

    def test_results_store_errors_are_code_judge_errors(self) -> None:
        assert isinstance(
            ResultsStoreNotFoundError(path=Path("test-results.json")), CodeJudgeError
        )
        assert isinstance(ResultsStoreFormatError(reason="bad"), CodeJudgeError)

    def test_project_analysis_error_is_code_judge_error(self) -> None:
        error = ProjectAnalysisError(target="svc", reason="missing")
        assert isinstance(error, CodeJudgeError)

    def test_code_judge_error_is_exception(self) -> None:
        error = CodeJudgeError("test")
        assert isinstance(error, Exception)


class TestErrorMessages:
    """Error messages start with 'Failed to' and name the offending input."""

    def test_missing_env_vars_lists_sorted_names(self) -> None:
        error = MissingEnvVarsError(missing_vars=["ZED", "ALPHA"])
        assert str(error).startswith("Failed to ")
        assert "ALPHA, ZED" in str(error)

    def test_results_not_found_names_path(self) -> None:
        error = ResultsStoreNotFoundError(path=Path("out/results.json"))
        assert str(error).startswith("Failed to ")
        assert "out/results.json" in str(error)

    def test_project_analysis_error_names_target(self) -> None:
        error = ProjectAnalysisError(target="billing", reason="no directory")
        assert str(error).startswith("Failed to ")
        assert "billing" in str(error)
        assert error.target == "billing"
