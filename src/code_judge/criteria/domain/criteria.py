"""Criterion and CriteriaSpec — the parametrized rubric sent to the judge."""

import re

from pydantic import BaseModel, Field, model_validator

_CRITERION_NAME = r"^[a-z][a-z0-9_]*$"

TASK_PLACEHOLDER = "{{task}}"
OUTPUT_PLACEHOLDER = "{{output}}"


def _fmt(value: float) -> str:
    return f"{value:g}"


class Criterion(BaseModel, frozen=True):
    """One named, scored dimension of the rubric."""

    name: str = Field(pattern=_CRITERION_NAME)
    description: str = Field(min_length=1)
    min_score: float = 0.0
    max_score: float = 10.0

    @model_validator(mode="after")
    def _scale_is_ordered(self) -> "Criterion":
        if self.min_score >= self.max_score:
            raise ValueError(
                f"criterion {self.name!r}: min_score must be below max_score"
            )
        return self

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()

    @property
    def scale(self) -> str:
        return f"{_fmt(self.min_score)}-{_fmt(self.max_score)}"


class CriteriaSpec(BaseModel, frozen=True):
    """Immutable evaluation rubric shared by every request in a run.

    ``template`` is the exact prompt text with ``{{task}}`` and ``{{output}}``
    placeholders. When omitted, ``prompt_template()`` renders one from the
    criteria, the output schema and the pass rule.
    """

    name: str = Field(min_length=1)
    role: str = "You are an expert code reviewer evaluating LLM-generated code."
    criteria: tuple[Criterion, ...] = Field(min_length=1)
    pass_threshold: float = 7.0
    overall_min: float = 0.0
    overall_max: float = 10.0
    guidance: str = "Be strict but fair. Code should be production-ready."
    template: str | None = None

    @model_validator(mode="after")
    def _check_consistency(self) -> "CriteriaSpec":
        names = [c.name for c in self.criteria]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"duplicate criterion names: {', '.join(duplicates)}")
        if self.overall_min >= self.overall_max:
            raise ValueError("overall_min must be below overall_max")
        if not self.overall_min <= self.pass_threshold <= self.overall_max:
            raise ValueError(
                f"pass_threshold {_fmt(self.pass_threshold)} is outside the "
                f"overall scale {self.overall_scale}"
            )
        return self

    @property
    def overall_scale(self) -> str:
        return f"{_fmt(self.overall_min)}-{_fmt(self.overall_max)}"

    @property
    def criterion_names(self) -> list[str]:
        return [c.name for c in self.criteria]

    @property
    def required_fields(self) -> list[str]:
        """Keys the judge's JSON object must contain."""
        return ["overall_score", "passes", *self.criterion_names]

    def placeholders(self) -> list[str]:
        """Placeholder names referenced by the prompt template, in order."""
        return re.findall(r"\{\{(\w+)\}\}", self.prompt_template())

    def prompt_template(self) -> str:
        if self.template is not None:
            return self.template
        return _render_template(spec=self)


def _render_template(spec: CriteriaSpec) -> str:
    rubric = "\n".join(
        f"{i}. **{c.label}** ({c.scale}): {c.description}"
        for i, c in enumerate(spec.criteria, start=1)
    )
    schema_lines = [
        f'  "{c.name}": {{"score": <{c.scale}>, "reasoning": "..."}},'
        for c in spec.criteria
    ]
    threshold = _fmt(spec.pass_threshold)
    schema_lines += [
        f'  "overall_score": <{spec.overall_scale}>,',
        '  "overall_assessment": "brief summary",',
        f'  "passes": <true if overall_score >= {threshold}>,',
        '  "critical_issues": ["..."],',
        '  "strengths": ["..."],',
        '  "recommendations": ["..."]',
    ]
    schema = "\n".join(["{", *schema_lines, "}"])

    return (
        f"{spec.role}\n\n"
        f"TASK DESCRIPTION:\n{TASK_PLACEHOLDER}\n\n"
        f"OUTPUT TO EVALUATE:\n{OUTPUT_PLACEHOLDER}\n\n"
        f"Evaluate the output on these criteria:\n\n{rubric}\n\n"
        f"Respond in this JSON format:\n{schema}\n\n"
        f"Score >= {threshold} = passes, < {threshold} = fails\n"
        f"{spec.guidance}"
    )
