"""EvaluationOutcome — the result of judging one EvaluationItem."""

from typing import Literal

from pydantic import BaseModel

from code_judge.judge.domain.response import TokenUsage
from code_judge.results.domain.record import ResultRecord
from code_judge.verdict.domain.outcome import ParseFailure, SchemaFailure
from code_judge.verdict.domain.verdict import Verdict

type FailureKind = Literal["transport", "parse", "schema"]


class EvaluationOutcome(BaseModel, frozen=True):
    """Either a Verdict or an infrastructure failure, never both.

    ``success`` mirrors the verdict's recomputed pass flag; infrastructure
    failures are never successful and carry a diagnostic ``error``.
    """

    description: str
    success: bool
    verdict: Verdict | None = None
    failure_kind: FailureKind | None = None
    error: str | None = None
    usage: TokenUsage | None = None

    @classmethod
    def from_verdict(
        cls, description: str, verdict: Verdict, usage: TokenUsage
    ) -> "EvaluationOutcome":
        return cls(
            description=description,
            success=verdict.passes,
            verdict=verdict,
            usage=usage,
        )

    @classmethod
    def from_failure(
        cls,
        description: str,
        kind: FailureKind,
        reason: str,
        usage: TokenUsage | None = None,
    ) -> "EvaluationOutcome":
        return cls(
            description=description,
            success=False,
            failure_kind=kind,
            error=f"{kind} failure: {reason}",
            usage=usage,
        )

    @classmethod
    def from_parse(
        cls,
        description: str,
        parsed: Verdict | ParseFailure | SchemaFailure,
        usage: TokenUsage,
    ) -> "EvaluationOutcome":
        match parsed:
            case Verdict():
                return cls.from_verdict(
                    description=description, verdict=parsed, usage=usage
                )
            case ParseFailure():
                return cls.from_failure(
                    description=description,
                    kind="parse",
                    reason=parsed.reason,
                    usage=usage,
                )
            case SchemaFailure():
                return cls.from_failure(
                    description=description,
                    kind="schema",
                    reason=parsed.reason,
                    usage=usage,
                )

    def to_record(self) -> ResultRecord:
        return ResultRecord(
            description=self.description,
            success=self.success,
            score=self.verdict.overall_score if self.verdict is not None else None,
            error=self.error,
            usage=self.usage,
        )
