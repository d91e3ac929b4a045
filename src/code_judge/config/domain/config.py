"""Top-level AppConfig aggregate — the root configuration object."""

from pydantic import BaseModel, Field

from code_judge.config.domain.execution import ExecutionConfig
from code_judge.config.domain.gate import GateConfig
from code_judge.config.domain.judge import JudgeConfig
from code_judge.config.domain.pricing import PricingConfig


class AppConfig(BaseModel, frozen=True):
    """Root configuration aggregate passed explicitly into each component."""

    judge: JudgeConfig = Field(default_factory=JudgeConfig)
    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)
    gate: GateConfig = Field(default_factory=GateConfig)
    pricing: PricingConfig = Field(default_factory=PricingConfig)
