"""Config loader — defaults, optional YAML file, then environment overrides."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from code_judge.config.domain.config import AppConfig
from code_judge.config.domain.observer import ConfigObserver
from code_judge.config.infrastructure.env_interpolation import interpolate
from code_judge.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
)

API_KEY_VAR = "ANTHROPIC_API_KEY"
MODEL_VAR = "CLAUDE_MODEL"
MIN_PASS_RATE_VAR = "MIN_PASS_RATE"


class ConfigLoader:
    """Builds an AppConfig from built-in defaults, a YAML file and the environment.

    Precedence, lowest first: model defaults, the YAML file (when given), then
    the ``ANTHROPIC_API_KEY``, ``CLAUDE_MODEL`` and ``MIN_PASS_RATE`` variables.
    """

    def __init__(
        self,
        observer: ConfigObserver,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._observer = observer
        self._environ = environ if environ is not None else os.environ

    def load(self, path: Path | None = None) -> AppConfig:
        """
        Load and validate an AppConfig.

        Raises:
            ConfigLoadError: if *path* is given but missing or not valid YAML.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset
                (all collected first).
            ConfigValidationError: if the merged values violate the schema.
        """
        raw: dict[str, Any] = {}
        if path is not None:
            raw = self._read_yaml(path=path)
            raw = interpolate(raw, self._environ)  # type: ignore[assignment]

        merged = self._apply_env_overrides(raw=raw)
        try:
            cfg = AppConfig.model_validate(merged)
        except ValidationError as exc:
            raise ConfigValidationError(str(exc)) from exc

        if cfg.judge.temperature > 0.0:
            self._observer.config_judge_temperature_warning(cfg.judge.temperature)
        self._observer.config_loaded(
            source=str(path) if path is not None else "environment",
            judge_model=cfg.judge.model,
        )
        return cfg

    def _read_yaml(self, path: Path) -> dict[str, Any]:
        try:
            with path.open("r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh)
        except FileNotFoundError as exc:
            raise ConfigLoadError(path=path) from exc
        except yaml.YAMLError as exc:
            raise ConfigLoadError(path=path, reason=f"invalid YAML ({exc})") from exc

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigValidationError(
                f"top-level YAML value in {path} must be a mapping"
            )
        return data

    def _apply_env_overrides(self, raw: dict[str, Any]) -> dict[str, Any]:
        judge = dict(raw.get("judge") or {})
        gate = dict(raw.get("gate") or {})

        model = self._environ.get(MODEL_VAR)
        if model:
            judge["model"] = model
            self._observer.config_env_override_applied(variable=MODEL_VAR)

        api_key = self._environ.get(API_KEY_VAR)
        if api_key:
            judge["api_key"] = api_key
            self._observer.config_env_override_applied(variable=API_KEY_VAR)

        min_pass_rate = self._environ.get(MIN_PASS_RATE_VAR)
        if min_pass_rate:
            try:
                gate["min_pass_rate"] = float(min_pass_rate)
            except ValueError as exc:
                raise ConfigValidationError(
                    f"{MIN_PASS_RATE_VAR} must be a number, got {min_pass_rate!r}"
                ) from exc
            self._observer.config_env_override_applied(variable=MIN_PASS_RATE_VAR)

        return {**raw, "judge": judge, "gate": gate}
