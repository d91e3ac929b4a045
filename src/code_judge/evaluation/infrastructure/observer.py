"""StructlogEvaluationObserver — production observer that delegates to structlog."""

import structlog


class StructlogEvaluationObserver:
    """Logs evaluation domain events to structlog.

    Does NOT inherit from EvaluationObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def evaluation_started(
        self, run_id: str, total_items: int, max_concurrent: int
    ) -> None:
        self._log.info(
            "evaluation.started",
            run_id=run_id,
            total_items=total_items,
            max_concurrent=max_concurrent,
        )

    def evaluation_completed(
        self,
        run_id: str,
        total_outcomes: int,
        skipped: int,
        elapsed_seconds: float,
    ) -> None:
        self._log.info(
            "evaluation.completed",
            run_id=run_id,
            total_outcomes=total_outcomes,
            skipped=skipped,
            elapsed_seconds=round(elapsed_seconds, 2),
        )

    def evaluation_progress(self, run_id: str, completed: int, total: int) -> None:
        self._log.debug(
            "evaluation.progress",
            run_id=run_id,
            completed=completed,
            total=total,
            percent=round(100.0 * completed / total, 1) if total else 0.0,
        )

    def evaluation_cancel_requested(self, run_id: str) -> None:
        self._log.warning("evaluation.cancel_requested", run_id=run_id)

    def item_started(self, run_id: str, index: int, description: str) -> None:
        self._log.info(
            "evaluation.item.started",
            run_id=run_id,
            index=index,
            description=description,
        )

    def item_completed(
        self,
        run_id: str,
        index: int,
        description: str,
        success: bool,
        error: str | None,
    ) -> None:
        if error is not None:
            self._log.error(
                "evaluation.item.failed",
                run_id=run_id,
                index=index,
                description=description,
                error=error,
            )
            return
        self._log.info(
            "evaluation.item.completed",
            run_id=run_id,
            index=index,
            description=description,
            success=success,
        )

    def item_skipped(self, run_id: str, index: int, description: str) -> None:
        self._log.warning(
            "evaluation.item.skipped",
            run_id=run_id,
            index=index,
            description=description,
        )
