"""Verdict — the schema-validated result extracted from a judge response."""

from typing import Literal

from pydantic import BaseModel, Field


class CriterionScore(BaseModel, frozen=True):
    score: float
    reasoning: str = ""


class Verdict(BaseModel, frozen=True):
    """Immutable structured verdict.

    ``passes`` is always derived from ``overall_score`` and the rubric's pass
    threshold; ``warnings`` records where the judge's own flag disagreed.
    """

    kind: Literal["verdict"] = "verdict"
    scores: dict[str, CriterionScore]
    overall_score: float
    passes: bool
    overall_assessment: str = ""
    recommendations: list[str] = Field(default_factory=list)
    critical_issues: list[str] = Field(default_factory=list)
    strengths: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
