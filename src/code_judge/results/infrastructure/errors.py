"""Error types raised by the results store."""

from pathlib import Path

from code_judge.core.errors import CodeJudgeError


class ResultsStoreNotFoundError(CodeJudgeError):
    """Raised when no results file exists at the configured path."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Failed to read results: no results file found at {path}")


class ResultsStoreFormatError(CodeJudgeError):
    """Raised when a results file cannot be decoded or has an unsupported shape."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to read results: {reason}")
