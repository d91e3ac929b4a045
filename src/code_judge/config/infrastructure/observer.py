"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, source: str, judge_model: str) -> None:
        self._log.info("config.loaded", source=source, judge_model=judge_model)

    def config_env_override_applied(self, variable: str) -> None:
        self._log.debug("config.env_override_applied", variable=variable)

    def config_judge_temperature_warning(self, temperature: float) -> None:
        self._log.warning(
            "config.judge_temperature_warning",
            temperature=temperature,
            hint="Use temperature 0.0 for consistent, parseable judge output.",
        )
