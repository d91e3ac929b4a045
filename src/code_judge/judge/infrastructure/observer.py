"""Structlog implementation of the JudgeObserver port."""

import structlog


class StructlogJudgeObserver:
    """Delegates judge domain events to structlog.

    Satisfies the JudgeObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def judge_call_started(self, label: str, model: str) -> None:
        self._log.info("judge.call_started", label=label, model=model)

    def judge_call_completed(
        self,
        label: str,
        duration_ms: int,
        input_tokens: int,
        output_tokens: int,
    ) -> None:
        self._log.info(
            "judge.call_completed",
            label=label,
            duration_ms=duration_ms,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )

    def judge_call_failed(self, label: str, reason: str) -> None:
        self._log.error("judge.call_failed", label=label, reason=reason)

    def judge_high_temperature_warned(self, model: str, temperature: float) -> None:
        self._log.warning(
            "judge.high_temperature_warned",
            model=model,
            temperature=temperature,
        )
