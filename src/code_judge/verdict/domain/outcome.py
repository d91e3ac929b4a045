"""Tagged parse outcomes — a Verdict or one of two infrastructure failures."""

from typing import Literal

from pydantic import BaseModel, Field

from code_judge.verdict.domain.verdict import Verdict


class ParseFailure(BaseModel, frozen=True):
    """The judge text held no decodable JSON object."""

    kind: Literal["parse_failure"] = "parse_failure"
    reason: str
    raw_text: str


class SchemaFailure(BaseModel, frozen=True):
    """A JSON object was decoded but misses required fields or breaks a scale."""

    kind: Literal["schema_failure"] = "schema_failure"
    errors: list[str] = Field(min_length=1)
    raw_text: str

    @property
    def reason(self) -> str:
        return "; ".join(self.errors)


type VerdictOutcome = Verdict | ParseFailure | SchemaFailure
