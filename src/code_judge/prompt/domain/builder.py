"""Prompt Builder — substitutes request fields into a rubric template."""

import re

from code_judge.criteria.domain.criteria import CriteriaSpec
from code_judge.prompt.domain.request import EvaluationRequest

_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")


def substitute(template: str, fields: dict[str, str]) -> str:
    """Replace each ``{{name}}`` in *template* with ``fields[name]``.

    A single left-to-right pass: text inserted from a field is never scanned
    again, so a field containing ``{{output}}`` stays literal.

    Raises:
        KeyError: if the template names a placeholder absent from *fields*.
    """
    return _PLACEHOLDER.sub(lambda m: fields[m.group(1)], template)


def build_prompt(criteria: CriteriaSpec, request: EvaluationRequest) -> str:
    """Return the exact text sent to the judge for *request*."""
    return substitute(template=criteria.prompt_template(), fields=request.fields())
