"""EvaluationRunner — judges a batch of requests with bounded concurrency."""

import asyncio
import time
import uuid

from code_judge.config.domain.execution import ExecutionConfig
from code_judge.criteria.domain.criteria import CriteriaSpec
from code_judge.evaluation.domain.item import EvaluationItem
from code_judge.evaluation.domain.observer import EvaluationObserver
from code_judge.evaluation.domain.outcome import EvaluationOutcome
from code_judge.evaluation.domain.summary import BatchSummary
from code_judge.judge.domain.client import JudgeClient
from code_judge.judge.domain.response import TokenUsage
from code_judge.prompt.domain.builder import build_prompt
from code_judge.verdict.application.parser import VerdictParser


class EvaluationRunner:
    """Runs prompt -> judge -> parse for every item and collects the outcomes.

    Items are independent and run concurrently, bounded by
    ``config.max_concurrent``. Each item's steps run in strict sequence.
    Transport, parse and schema failures become failed outcomes; they never
    abort the batch. Outcomes come back in request order, not completion order.
    """

    def __init__(
        self,
        criteria: CriteriaSpec,
        judge_client: JudgeClient,
        parser: VerdictParser,
        config: ExecutionConfig,
        observer: EvaluationObserver,
    ) -> None:
        self._criteria = criteria
        self._judge_client = judge_client
        self._parser = parser
        self._config = config
        self._observer = observer
        self._cancel_requested = False
        self._run_id = ""

    def cancel(self) -> None:
        """Stop issuing judge calls. In-flight calls finish or time out."""
        if not self._cancel_requested:
            self._cancel_requested = True
            self._observer.evaluation_cancel_requested(run_id=self._run_id)

    async def run(self, items: list[EvaluationItem]) -> BatchSummary:
        self._run_id = str(uuid.uuid4())
        run_id = self._run_id
        self._observer.evaluation_started(
            run_id=run_id,
            total_items=len(items),
            max_concurrent=self._config.max_concurrent,
        )
        started_at = time.monotonic()

        sem = asyncio.Semaphore(self._config.max_concurrent)
        # One slot per item; each slot is written only by its own task.
        slots: list[EvaluationOutcome | None] = [None] * len(items)
        completed_count: list[int] = [0]

        try:
            async with asyncio.TaskGroup() as tg:
                for index, item in enumerate(items):
                    tg.create_task(
                        self._run_one(
                            sem=sem,
                            run_id=run_id,
                            index=index,
                            item=item,
                            slots=slots,
                            completed_count=completed_count,
                        )
                    )
        except* KeyError as eg:
            # A template placeholder with no matching request field.
            raise eg.exceptions[0]

        outcomes = [outcome for outcome in slots if outcome is not None]
        skipped = len(items) - len(outcomes)

        self._observer.evaluation_completed(
            run_id=run_id,
            total_outcomes=len(outcomes),
            skipped=skipped,
            elapsed_seconds=time.monotonic() - started_at,
        )
        return BatchSummary(run_id=run_id, outcomes=outcomes, skipped=skipped)

    async def _run_one(
        self,
        sem: asyncio.Semaphore,
        run_id: str,
        index: int,
        item: EvaluationItem,
        slots: list[EvaluationOutcome | None],
        completed_count: list[int],
    ) -> None:
        async with sem:
            if self._cancel_requested:
                self._observer.item_skipped(
                    run_id=run_id, index=index, description=item.description
                )
                return

            self._observer.item_started(
                run_id=run_id, index=index, description=item.description
            )
            outcome = await self._evaluate(item=item)
            slots[index] = outcome

            self._observer.item_completed(
                run_id=run_id,
                index=index,
                description=item.description,
                success=outcome.success,
                error=outcome.error,
            )
            completed_count[0] += 1
            self._observer.evaluation_progress(
                run_id=run_id, completed=completed_count[0], total=len(slots)
            )

    async def _evaluate(self, item: EvaluationItem) -> EvaluationOutcome:
        prompt = build_prompt(criteria=self._criteria, request=item.request)
        call = await self._judge_client.complete(prompt=prompt, label=item.description)
        if not call.success or call.response is None:
            return EvaluationOutcome.from_failure(
                description=item.description,
                kind="transport",
                reason=call.error or "judge returned no response",
                usage=TokenUsage(),
            )

        parsed = self._parser.parse(text=call.response.text, label=item.description)
        return EvaluationOutcome.from_parse(
            description=item.description,
            parsed=parsed,
            usage=call.response.usage,
        )
