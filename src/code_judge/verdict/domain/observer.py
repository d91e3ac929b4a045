"""VerdictObserver port — events emitted while parsing judge responses."""

from typing import Protocol


class VerdictObserver(Protocol):
    def verdict_parse_failed(self, label: str, reason: str) -> None: ...

    def verdict_schema_failed(self, label: str, errors: list[str]) -> None: ...

    def verdict_pass_flag_corrected(
        self,
        label: str,
        overall_score: float,
        threshold: float,
        reported: bool,
    ) -> None: ...
