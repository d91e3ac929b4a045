"""Base exception class for all code-judge-specific errors."""


class CodeJudgeError(Exception):
    """Base class for all code-judge errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
