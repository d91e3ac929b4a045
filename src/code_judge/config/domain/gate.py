"""Quality gate configuration model."""

from pydantic import BaseModel, Field

DEFAULT_MIN_PASS_RATE = 70.0


class GateConfig(BaseModel, frozen=True):
    """Minimum pass rate, as a percentage, that admits a run."""

    min_pass_rate: float = Field(default=DEFAULT_MIN_PASS_RATE, ge=0.0, le=100.0)
