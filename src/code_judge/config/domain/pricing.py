"""Pricing configuration — USD per million tokens, keyed by judge model."""

from pydantic import BaseModel, Field, model_validator

from code_judge.config.domain.judge import DEFAULT_JUDGE_MODEL

type ModelId = str


class ModelPricing(BaseModel, frozen=True):
    input_per_million: float = Field(ge=0.0)
    output_per_million: float = Field(ge=0.0)


def _default_models() -> dict[ModelId, ModelPricing]:
    return {
        DEFAULT_JUDGE_MODEL: ModelPricing(input_per_million=3, output_per_million=15),
        "claude-haiku": ModelPricing(input_per_million=0.25, output_per_million=1.25),
        "claude-opus": ModelPricing(input_per_million=15, output_per_million=75),
    }


class PricingConfig(BaseModel, frozen=True):
    """Pricing table plus the per-evaluation token estimate used without real usage.

    ``default_model`` names the entry used for any model identifier missing
    from ``models``; it must itself be present in the table.
    """

    models: dict[ModelId, ModelPricing] = Field(default_factory=_default_models)
    default_model: ModelId = DEFAULT_JUDGE_MODEL
    estimated_input_tokens: int = Field(default=500, ge=0)
    estimated_output_tokens: int = Field(default=300, ge=0)

    @model_validator(mode="after")
    def _default_model_is_priced(self) -> "PricingConfig":
        if self.default_model not in self.models:
            raise ValueError(
                f"default_model {self.default_model!r} has no entry in models"
            )
        return self
