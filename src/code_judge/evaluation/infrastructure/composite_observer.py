"""CompositeEvaluationObserver — fans out all events to a list of observers."""

from code_judge.evaluation.domain.observer import EvaluationObserver


class CompositeEvaluationObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from EvaluationObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[EvaluationObserver]) -> None:
        self._observers = observers

    def evaluation_started(
        self, run_id: str, total_items: int, max_concurrent: int
    ) -> None:
        for obs in self._observers:
            obs.evaluation_started(
                run_id=run_id, total_items=total_items, max_concurrent=max_concurrent
            )

    def evaluation_completed(
        self,
        run_id: str,
        total_outcomes: int,
        skipped: int,
        elapsed_seconds: float,
    ) -> None:
        for obs in self._observers:
            obs.evaluation_completed(
                run_id=run_id,
                total_outcomes=total_outcomes,
                skipped=skipped,
                elapsed_seconds=elapsed_seconds,
            )

    def evaluation_progress(self, run_id: str, completed: int, total: int) -> None:
        for obs in self._observers:
            obs.evaluation_progress(run_id=run_id, completed=completed, total=total)

    def evaluation_cancel_requested(self, run_id: str) -> None:
        for obs in self._observers:
            obs.evaluation_cancel_requested(run_id=run_id)

    def item_started(self, run_id: str, index: int, description: str) -> None:
        for obs in self._observers:
            obs.item_started(run_id=run_id, index=index, description=description)

    def item_completed(
        self,
        run_id: str,
        index: int,
        description: str,
        success: bool,
        error: str | None,
    ) -> None:
        for obs in self._observers:
            obs.item_completed(
                run_id=run_id,
                index=index,
                description=description,
                success=success,
                error=error,
            )

    def item_skipped(self, run_id: str, index: int, description: str) -> None:
        for obs in self._observers:
            obs.item_skipped(run_id=run_id, index=index, description=description)
