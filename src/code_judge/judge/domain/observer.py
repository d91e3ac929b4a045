"""JudgeObserver port — domain events emitted during judge invocations."""

from typing import Protocol


class JudgeObserver(Protocol):
    """Observer port for judge domain events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def judge_call_started(self, label: str, model: str) -> None: ...

    def judge_call_completed(
        self,
        label: str,
        duration_ms: int,
        input_tokens: int,
        output_tokens: int,
    ) -> None: ...

    def judge_call_failed(self, label: str, reason: str) -> None: ...

    def judge_high_temperature_warned(self, model: str, temperature: float) -> None: ...
