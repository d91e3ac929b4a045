"""Error types raised by project analysis."""

from code_judge.core.errors import CodeJudgeError


class ProjectAnalysisError(CodeJudgeError):
    """Raised when a target project cannot be located or read."""

    def __init__(self, target: str, reason: str) -> None:
        self.target = target
        super().__init__(f"Failed to analyze {target}: {reason}")
