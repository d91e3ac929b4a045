"""Error types raised by criteria infrastructure."""

from pathlib import Path

from code_judge.core.errors import CodeJudgeError


class CriteriaLoadError(CodeJudgeError):
    """Raised when a rubric file is missing, not valid YAML, or fails validation."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to load criteria from {path}: {reason}")
