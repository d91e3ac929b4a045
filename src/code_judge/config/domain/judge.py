"""Judge configuration model."""

from pydantic import BaseModel, Field, SecretStr

DEFAULT_JUDGE_MODEL = "claude-sonnet-4-20250514"


class JudgeConfig(BaseModel, frozen=True):
    """Settings for the external judge call.

    A temperature of 0.0 is the default: low-variability sampling keeps the
    judge's JSON output consistent and parseable across runs.
    """

    model: str = Field(default=DEFAULT_JUDGE_MODEL, min_length=1)
    max_tokens: int = Field(default=2000, gt=0)
    temperature: float = Field(default=0.0, ge=0.0)
    timeout_seconds: float = Field(default=120.0, gt=0.0)
    api_key: SecretStr | None = None
