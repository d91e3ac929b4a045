"""AggregateStats — summary statistics over a ResultSet."""

from pydantic import BaseModel, Field

from code_judge.results.domain.record import ResultRecord


class AggregateStats(BaseModel, frozen=True):
    total: int = Field(ge=0)
    passed: int = Field(ge=0)
    failed: int = Field(ge=0)
    average_score: float
    pass_rate: float
    failures: list[ResultRecord] = Field(default_factory=list)
