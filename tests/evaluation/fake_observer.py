"""FakeEvaluationObserver — records evaluation events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EvaluationStartedEvent:
    run_id: str
    total_items: int
    max_concurrent: int


@dataclass(frozen=True)
class EvaluationCompletedEvent:
    run_id: str
    total_outcomes: int
    skipped: int
    elapsed_seconds: float


@dataclass(frozen=True)
class EvaluationProgressEvent:
    run_id: str
    completed: int
    total: int


@dataclass(frozen=True)
class ItemStartedEvent:
    run_id: str
    index: int
    description: str


@dataclass(frozen=True)
class ItemCompletedEvent:
    run_id: str
    index: int
    description: str
    success: bool
    error: str | None


@dataclass(frozen=True)
class ItemSkippedEvent:
    run_id: str
    index: int
    description: str


class FakeEvaluationObserver:
    """Records all emitted evaluation events as typed frozen dataclasses."""

    def __init__(self) -> None:
        self.started: list[EvaluationStartedEvent] = []
        self.completed: list[EvaluationCompletedEvent] = []
        self.progress: list[EvaluationProgressEvent] = []
        self.cancel_requests: list[str] = []
        self.item_starts: list[ItemStartedEvent] = []
        self.item_completions: list[ItemCompletedEvent] = []
        self.item_skips: list[ItemSkippedEvent] = []

    def evaluation_started(
        self, run_id: str, total_items: int, max_concurrent: int
    ) -> None:
        self.started.append(
            EvaluationStartedEvent(
                run_id=run_id, total_items=total_items, max_concurrent=max_concurrent
            )
        )

    def evaluation_completed(
        self,
        run_id: str,
        total_outcomes: int,
        skipped: int,
        elapsed_seconds: float,
    ) -> None:
        self.completed.append(
            EvaluationCompletedEvent(
                run_id=run_id,
                total_outcomes=total_outcomes,
                skipped=skipped,
                elapsed_seconds=elapsed_seconds,
            )
        )

    def evaluation_progress(self, run_id: str, completed: int, total: int) -> None:
        self.progress.append(
            EvaluationProgressEvent(run_id=run_id, completed=completed, total=total)
        )

    def evaluation_cancel_requested(self, run_id: str) -> None:
        self.cancel_requests.append(run_id)

    def item_started(self, run_id: str, index: int, description: str) -> None:
        self.item_starts.append(
            ItemStartedEvent(run_id=run_id, index=index, description=description)
        )

    def item_completed(
        self,
        run_id: str,
        index: int,
        description: str,
        success: bool,
        error: str | None,
    ) -> None:
        self.item_completions.append(
            ItemCompletedEvent(
                run_id=run_id,
                index=index,
                description=description,
                success=success,
                error=error,
            )
        )

    def item_skipped(self, run_id: str, index: int, description: str) -> None:
        self.item_skips.append(
            ItemSkippedEvent(run_id=run_id, index=index, description=description)
        )
