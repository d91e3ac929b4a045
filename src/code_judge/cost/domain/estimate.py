"""CostEstimate — advisory monetary cost of judge usage."""

from pydantic import BaseModel, Field

from code_judge.config.domain.pricing import ModelPricing

DAILY_RUNS = 10
MONTHLY_RUNS = 300


class CostEstimate(BaseModel, frozen=True):
    """Token totals and USD cost for one observed run.

    ``estimated`` is True when any evaluation lacked real usage counters and
    the configured per-evaluation estimate was used instead.
    """

    model: str
    pricing: ModelPricing
    evaluations: int = Field(ge=0)
    input_tokens: int = Field(ge=0)
    output_tokens: int = Field(ge=0)
    input_cost: float
    output_cost: float
    estimated: bool = False

    @property
    def total_cost(self) -> float:
        return self.input_cost + self.output_cost

    @property
    def cost_per_evaluation(self) -> float:
        return self.total_cost / self.evaluations if self.evaluations else 0.0

    def project(self, runs: int) -> float:
        """Linear projection of this run's cost over *runs* runs."""
        return self.total_cost * runs
