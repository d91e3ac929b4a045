"""VerdictParser — extracts and validates a structured verdict from judge text."""

import json
import math
from typing import Any

from code_judge.criteria.domain.criteria import CriteriaSpec, Criterion
from code_judge.verdict.domain.observer import VerdictObserver
from code_judge.verdict.domain.outcome import (
    ParseFailure,
    SchemaFailure,
    VerdictOutcome,
)
from code_judge.verdict.domain.verdict import CriterionScore, Verdict

_LIST_FIELDS = ("recommendations", "critical_issues", "strengths")


def extract_json_object(text: str) -> str | None:
    """Return the first balanced ``{...}`` span in *text*, or None.

    The scan starts at the first ``{`` and tracks nesting depth, ignoring
    braces inside JSON string literals, so surrounding prose and markdown
    code fences are skipped.
    """
    start = text.find("{")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return text[start : i + 1]
    return None


def _is_number(value: Any) -> bool:
    return (
        isinstance(value, int | float)
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


class VerdictParser:
    """Turns untrusted judge text into a Verdict, ParseFailure or SchemaFailure.

    The judge's self-reported ``passes`` flag is never trusted: it is
    recomputed from ``overall_score`` and the rubric's pass threshold, and any
    disagreement is kept as a warning on the Verdict.
    """

    def __init__(self, criteria: CriteriaSpec, observer: VerdictObserver) -> None:
        self._criteria = criteria
        self._observer = observer

    def parse(self, text: str, label: str = "") -> VerdictOutcome:
        span = extract_json_object(text)
        if span is None:
            return self._parse_failed(
                label=label, reason="no JSON object found in judge response", text=text
            )
        try:
            data = json.loads(span)
        except json.JSONDecodeError as exc:
            return self._parse_failed(
                label=label, reason=f"invalid JSON object: {exc}", text=text
            )

        errors = self._missing_fields(data=data)
        overall_score = self._overall_score(data=data, errors=errors)
        reported = self._reported_passes(data=data, errors=errors)
        scores = self._criterion_scores(data=data, errors=errors)
        lists = {name: _string_list(data, name, errors) for name in _LIST_FIELDS}
        assessment = data.get("overall_assessment", "")
        if not isinstance(assessment, str):
            errors.append("'overall_assessment' must be a string")

        if errors or overall_score is None or reported is None:
            self._observer.verdict_schema_failed(label=label, errors=errors)
            return SchemaFailure(errors=errors, raw_text=text)

        threshold = self._criteria.pass_threshold
        passes = overall_score >= threshold
        warnings: list[str] = []
        if reported != passes:
            warnings.append(
                f"judge reported passes={str(reported).lower()} but overall_score "
                f"{overall_score:g} against threshold {threshold:g} gives "
                f"passes={str(passes).lower()}; using the recomputed value"
            )
            self._observer.verdict_pass_flag_corrected(
                label=label,
                overall_score=overall_score,
                threshold=threshold,
                reported=reported,
            )

        return Verdict(
            scores=scores,
            overall_score=overall_score,
            passes=passes,
            overall_assessment=assessment,
            warnings=warnings,
            **lists,
        )

    def _parse_failed(self, label: str, reason: str, text: str) -> ParseFailure:
        self._observer.verdict_parse_failed(label=label, reason=reason)
        return ParseFailure(reason=reason, raw_text=text)

    def _missing_fields(self, data: dict[str, Any]) -> list[str]:
        """One error per required field absent from *data*."""
        nested = _nested_scores(data)
        criterion_names = set(self._criteria.criterion_names)
        errors: list[str] = []
        for name in self._criteria.required_fields:
            if name in criterion_names:
                if name not in nested and name not in data:
                    errors.append(f"missing score for criterion '{name}'")
            elif name not in data:
                errors.append(f"missing required field '{name}'")
        return errors

    def _overall_score(self, data: dict[str, Any], errors: list[str]) -> float | None:
        if "overall_score" not in data:
            return None
        value = data["overall_score"]
        if not _is_number(value):
            errors.append(f"'overall_score' must be a number, got {value!r}")
            return None
        low, high = self._criteria.overall_min, self._criteria.overall_max
        if not low <= value <= high:
            errors.append(
                f"'overall_score' {value:g} is outside the scale "
                f"{self._criteria.overall_scale}"
            )
            return None
        return float(value)

    def _reported_passes(self, data: dict[str, Any], errors: list[str]) -> bool | None:
        if "passes" not in data:
            return None
        value = data["passes"]
        if not isinstance(value, bool):
            errors.append(f"'passes' must be a boolean, got {value!r}")
            return None
        return value

    def _criterion_scores(
        self, data: dict[str, Any], errors: list[str]
    ) -> dict[str, CriterionScore]:
        nested = _nested_scores(data)
        scores: dict[str, CriterionScore] = {}
        for criterion in self._criteria.criteria:
            if criterion.name in nested:
                raw = nested[criterion.name]
            elif criterion.name in data:
                raw = data[criterion.name]
            else:
                continue
            score = _criterion_score(criterion=criterion, raw=raw, errors=errors)
            if score is not None:
                scores[criterion.name] = score
        return scores


def _nested_scores(data: dict[str, Any]) -> dict[str, Any]:
    # Criteria may sit at the top level or under a "scores" mapping.
    nested = data.get("scores")
    return nested if isinstance(nested, dict) else {}


def _criterion_score(
    criterion: Criterion, raw: Any, errors: list[str]
) -> CriterionScore | None:
    reasoning = ""
    value = raw
    if isinstance(raw, dict):
        value = raw.get("score")
        reasoning = str(raw.get("reasoning", ""))

    if not _is_number(value):
        errors.append(
            f"criterion '{criterion.name}' score must be a number, got {value!r}"
        )
        return None
    if not criterion.min_score <= value <= criterion.max_score:
        errors.append(
            f"criterion '{criterion.name}' score {value:g} is outside the scale "
            f"{criterion.scale}"
        )
        return None
    return CriterionScore(score=float(value), reasoning=reasoning)


def _string_list(data: dict[str, Any], name: str, errors: list[str]) -> list[str]:
    value = data.get(name, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        errors.append(f"'{name}' must be a list of strings")
        return []
    return value
