"""${ENV_VAR} substitution over raw YAML config data."""

import re
from collections.abc import Mapping

from code_judge.config.infrastructure.errors import MissingEnvVarsError

_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")

type RawValue = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def interpolate(data: RawValue, environ: Mapping[str, str]) -> RawValue:
    """
    Return a copy of *data* with every ${ENV_VAR} in its strings replaced.

    Raises:
        MissingEnvVarsError: naming every referenced variable absent from
            *environ*, in first-seen order.
    """
    missing: list[str] = []

    def _lookup(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in environ:
            return environ[name]
        if name not in missing:
            missing.append(name)
        return match.group(0)

    def _walk(value: RawValue) -> RawValue:
        match value:
            case str():
                return _ENV_VAR_PATTERN.sub(_lookup, value)
            case list():
                return [_walk(item) for item in value]
            case dict():
                return {key: _walk(item) for key, item in value.items()}
            case _:
                return value

    result = _walk(data)
    if missing:
        raise MissingEnvVarsError(missing)
    return result
