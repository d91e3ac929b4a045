"""EvaluationRequest — the task and artifact to be judged."""

from pydantic import BaseModel


class EvaluationRequest(BaseModel, frozen=True):
    """Free-text task description plus the output to judge. Built per call."""

    task: str
    output: str

    def fields(self) -> dict[str, str]:
        """Placeholder name to substitution text."""
        return {"task": self.task, "output": self.output}
