"""YAML rubric loader — reads a CriteriaSpec from a file or resolves a built-in."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from code_judge.criteria.domain.builtin import BUILTIN_CRITERIA
from code_judge.criteria.domain.criteria import CriteriaSpec
from code_judge.criteria.infrastructure.errors import CriteriaLoadError

KNOWN_PLACEHOLDERS = frozenset({"task", "output"})


def load_criteria(path: Path) -> CriteriaSpec:
    """
    Load and validate a CriteriaSpec from a YAML file.

    Raises:
        CriteriaLoadError: if the file is missing, is not valid YAML, or the
            document violates the CriteriaSpec schema, or the template
            references a placeholder other than task and output.
    """
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise CriteriaLoadError(path=path, reason="file not found") from exc
    except yaml.YAMLError as exc:
        raise CriteriaLoadError(path=path, reason=f"invalid YAML ({exc})") from exc

    if not isinstance(raw, dict):
        raise CriteriaLoadError(path=path, reason="top-level value must be a mapping")

    raw.setdefault("name", path.stem)
    try:
        spec = CriteriaSpec.model_validate(raw)
    except ValidationError as exc:
        raise CriteriaLoadError(path=path, reason=str(exc)) from exc

    unknown = sorted(set(spec.placeholders()) - KNOWN_PLACEHOLDERS)
    if unknown:
        raise CriteriaLoadError(
            path=path,
            reason=f"template uses unknown placeholders: {', '.join(unknown)}",
        )
    return spec


def resolve_criteria(path: Path | None, default: str) -> CriteriaSpec:
    """Return the rubric at *path*, or the built-in rubric named *default*."""
    if path is not None:
        return load_criteria(path=path)
    return BUILTIN_CRITERIA[default]
