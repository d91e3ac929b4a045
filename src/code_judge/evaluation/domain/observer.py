"""Observer port for the evaluation domain — defines events in domain language."""

from typing import Protocol


class EvaluationObserver(Protocol):
    """Observer port emitting structured events during a batch run.

    Implementations may log to structlog, render progress, or record for tests.
    """

    def evaluation_started(
        self, run_id: str, total_items: int, max_concurrent: int
    ) -> None: ...

    def evaluation_completed(
        self,
        run_id: str,
        total_outcomes: int,
        skipped: int,
        elapsed_seconds: float,
    ) -> None: ...

    def evaluation_progress(self, run_id: str, completed: int, total: int) -> None: ...

    def evaluation_cancel_requested(self, run_id: str) -> None: ...

    def item_started(self, run_id: str, index: int, description: str) -> None: ...

    def item_completed(
        self,
        run_id: str,
        index: int,
        description: str,
        success: bool,
        error: str | None,
    ) -> None: ...

    def item_skipped(self, run_id: str, index: int, description: str) -> None: ...
