"""Structlog implementation of the VerdictObserver port."""

import structlog


class StructlogVerdictObserver:
    """Satisfies the VerdictObserver protocol structurally."""

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def verdict_parse_failed(self, label: str, reason: str) -> None:
        self._log.error("verdict.parse_failed", label=label, reason=reason)

    def verdict_schema_failed(self, label: str, errors: list[str]) -> None:
        self._log.error("verdict.schema_failed", label=label, errors=errors)

    def verdict_pass_flag_corrected(
        self,
        label: str,
        overall_score: float,
        threshold: float,
        reported: bool,
    ) -> None:
        self._log.warning(
            "verdict.pass_flag_corrected",
            label=label,
            overall_score=overall_score,
            threshold=threshold,
            reported=reported,
            corrected=not reported,
        )
