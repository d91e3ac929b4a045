"""QualityGateDecision and the process exit contract."""

from enum import IntEnum

from pydantic import BaseModel, computed_field

from code_judge.results.domain.stats import AggregateStats


class ExitCode(IntEnum):
    """Terminal status of a pipeline command."""

    SUCCESS = 0
    FAILURE = 1
    CONFIGURATION_ERROR = 2


class QualityGateDecision(BaseModel, frozen=True):
    """Admit/reject outcome computed once per run from AggregateStats."""

    stats: AggregateStats
    threshold: float

    @computed_field  # type: ignore[prop-decorator]
    @property
    def admitted(self) -> bool:
        return self.stats.pass_rate >= self.threshold

    @property
    def pass_rate(self) -> float:
        return self.stats.pass_rate

    @property
    def exit_code(self) -> ExitCode:
        return ExitCode.SUCCESS if self.admitted else ExitCode.FAILURE
