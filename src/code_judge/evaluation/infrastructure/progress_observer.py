"""ProgressEvaluationObserver — renders a Rich progress bar for a batch on stderr."""

from __future__ import annotations

from rich.console import Console
from rich.progress import (
    Progress,
    ProgressColumn,
    Task,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text


class _CountsColumn(ProgressColumn):
    """Renders done+inflight/total with colors matching the bar segments."""

    def render(self, task: Task) -> Text:
        done = int(task.fields.get("done", 0))
        inflight = int(task.fields.get("inflight", 0))
        total = int(task.total or 0)
        return Text.assemble(
            (str(done), "bright_green"),
            ("+", "dim white"),
            (str(inflight), "grey50"),
            ("/", "dim white"),
            (str(total), "default"),
        )


class _ThreeSegmentBarColumn(ProgressColumn):
    """Renders three segments: done, in-flight, remaining."""

    def __init__(self, bar_width: int = 40) -> None:
        super().__init__()
        self.bar_width = bar_width

    def render(self, task: Task) -> Text:
        total = task.total or 0
        if total > 0:
            done_cells = int(task.completed / total * self.bar_width)
            inflight = int(task.fields.get("inflight", 0))
            inflight_cells = min(
                int(inflight / total * self.bar_width),
                self.bar_width - done_cells,
            )
        else:
            done_cells = 0
            inflight_cells = 0
        remaining_cells = self.bar_width - done_cells - inflight_cells

        result = Text()
        result.append("█" * done_cells, style="bright_green")
        result.append("▒" * inflight_cells, style="grey50")
        result.append("░" * remaining_cells, style="dim white")
        return result


class ProgressEvaluationObserver:
    """Shows judged/in-flight/total counts while a batch runs.

    Only the evaluation lifecycle and per-item start/finish events produce
    output; all other events are no-ops. Pass ``disabled=True`` to suppress
    terminal output (useful in tests).

    Does NOT inherit from EvaluationObserver (structural typing via Protocol).
    """

    def __init__(self, console: Console | None = None, disabled: bool = False) -> None:
        self._console = console if console is not None else Console(stderr=True)
        self._disabled = disabled
        self._done = 0
        self._inflight = 0
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None

    @property
    def done(self) -> int:
        return self._done

    @property
    def inflight(self) -> int:
        return self._inflight

    def _refresh(self) -> None:
        if self._progress is None or self._task_id is None:
            return
        self._progress.update(
            self._task_id,
            completed=self._done,
            done=self._done,
            inflight=self._inflight,
        )

    def evaluation_started(
        self, run_id: str, total_items: int, max_concurrent: int
    ) -> None:
        self._done = 0
        self._inflight = 0
        if self._disabled:
            return
        self._progress = Progress(
            TextColumn("[bold]Judging[/bold]"),
            _ThreeSegmentBarColumn(bar_width=40),
            _CountsColumn(),
            TimeElapsedColumn(),
            console=self._console,
            transient=False,
        )
        self._task_id = self._progress.add_task(
            "judging", total=total_items, done=0, inflight=0
        )
        self._progress.start()

    def evaluation_completed(
        self,
        run_id: str,
        total_outcomes: int,
        skipped: int,
        elapsed_seconds: float,
    ) -> None:
        self._inflight = 0
        self._refresh()
        if self._progress is not None:
            self._progress.stop()
            self._progress = None
            self._task_id = None

    def evaluation_progress(self, run_id: str, completed: int, total: int) -> None:
        pass

    def evaluation_cancel_requested(self, run_id: str) -> None:
        pass

    def item_started(self, run_id: str, index: int, description: str) -> None:
        self._inflight += 1
        self._refresh()

    def item_completed(
        self,
        run_id: str,
        index: int,
        description: str,
        success: bool,
        error: str | None,
    ) -> None:
        self._inflight = max(0, self._inflight - 1)
        self._done += 1
        self._refresh()

    def item_skipped(self, run_id: str, index: int, description: str) -> None:
        pass
