"""LiteLLMJudgeClient — judge client that delegates to an LLM via LiteLLM."""

import asyncio
import time
from typing import Any

import litellm

from code_judge.config.domain.judge import JudgeConfig
from code_judge.judge.domain.observer import JudgeObserver
from code_judge.judge.domain.response import (
    JudgeCallResult,
    RawJudgeResponse,
    TokenUsage,
)


class LiteLLMJudgeClient:
    """Judge client backed by ``litellm.acompletion``.

    One instance is shared by every request in a run. Each call is bounded by
    ``config.timeout_seconds``; failures and timeouts come back as an
    unsuccessful JudgeCallResult.
    """

    def __init__(self, config: JudgeConfig, observer: JudgeObserver) -> None:
        litellm.suppress_debug_info = True
        self._config = config
        self._observer = observer

        if config.temperature > 0.0:
            self._observer.judge_high_temperature_warned(
                model=config.model,
                temperature=config.temperature,
            )

    @property
    def model(self) -> str:
        return self._config.model

    async def complete(self, prompt: str, label: str = "") -> JudgeCallResult:
        """Send *prompt* as a single user message and return the judge's reply."""
        self._observer.judge_call_started(label=label, model=self._config.model)

        kwargs: dict[str, Any] = {
            "model": self._config.model,
            "max_tokens": self._config.max_tokens,
            "temperature": self._config.temperature,
            "timeout": self._config.timeout_seconds,
            "messages": [{"role": "user", "content": prompt}],
        }
        if self._config.api_key is not None:
            kwargs["api_key"] = self._config.api_key.get_secret_value()

        start = time.monotonic()
        try:
            response = await asyncio.wait_for(
                litellm.acompletion(**kwargs),
                timeout=self._config.timeout_seconds,
            )
        except TimeoutError:
            return self._failed(
                label=label,
                reason=f"judge call timed out after {self._config.timeout_seconds:g}s",
            )
        except Exception as exc:  # noqa: BLE001
            return self._failed(label=label, reason=str(exc) or type(exc).__name__)

        duration_ms = int((time.monotonic() - start) * 1000)
        text: str = response.choices[0].message.content or ""
        usage = _usage_from(response)

        self._observer.judge_call_completed(
            label=label,
            duration_ms=duration_ms,
            input_tokens=usage.input_tokens,
            output_tokens=usage.output_tokens,
        )
        return JudgeCallResult.ok(RawJudgeResponse(text=text, usage=usage))

    def _failed(self, label: str, reason: str) -> JudgeCallResult:
        self._observer.judge_call_failed(label=label, reason=reason)
        return JudgeCallResult.failed(error=reason)


def _usage_from(response: Any) -> TokenUsage:
    """Read OpenAI-style usage counters; absent counters read as zero."""
    usage = getattr(response, "usage", None)
    if usage is None:
        return TokenUsage()
    return TokenUsage(
        input_tokens=int(getattr(usage, "prompt_tokens", 0) or 0),
        output_tokens=int(getattr(usage, "completion_tokens", 0) or 0),
    )
