"""Judge call value objects — raw response text, token usage, tagged call result."""

from pydantic import BaseModel, Field


class TokenUsage(BaseModel, frozen=True):
    """Token counters reported for one judge invocation."""

    input_tokens: int = Field(default=0, ge=0)
    output_tokens: int = Field(default=0, ge=0)

    def __add__(self, other: "TokenUsage") -> "TokenUsage":
        return TokenUsage(
            input_tokens=self.input_tokens + other.input_tokens,
            output_tokens=self.output_tokens + other.output_tokens,
        )


class RawJudgeResponse(BaseModel, frozen=True):
    """Opaque judge text plus usage. Discarded after parsing; usage lives on."""

    text: str
    usage: TokenUsage = Field(default_factory=TokenUsage)


class JudgeCallResult(BaseModel, frozen=True):
    """Outcome of a judge call: a response on success, an error description otherwise.

    Judge clients return this instead of raising so that one failed call never
    aborts the rest of a batch.
    """

    success: bool
    response: RawJudgeResponse | None = None
    error: str | None = None

    @classmethod
    def ok(cls, response: RawJudgeResponse) -> "JudgeCallResult":
        return cls(success=True, response=response)

    @classmethod
    def failed(cls, error: str) -> "JudgeCallResult":
        return cls(success=False, error=error)
