"""BatchSummary — the outcomes of a completed (or cancelled) batch run."""

from pydantic import BaseModel, Field

from code_judge.evaluation.domain.outcome import EvaluationOutcome
from code_judge.judge.domain.response import TokenUsage
from code_judge.results.domain.record import ResultSet


class BatchSummary(BaseModel, frozen=True):
    """Immutable summary returned when a batch run finishes.

    ``outcomes`` are in original request order. Items never sent to the judge
    because the batch was cancelled are only counted in ``skipped``.
    """

    run_id: str = Field(min_length=1)
    outcomes: list[EvaluationOutcome]
    skipped: int = Field(default=0, ge=0)

    def records(self) -> ResultSet:
        return [outcome.to_record() for outcome in self.outcomes]

    def total_usage(self) -> TokenUsage:
        total = TokenUsage()
        for outcome in self.outcomes:
            if outcome.usage is not None:
                total = total + outcome.usage
        return total
