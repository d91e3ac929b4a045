"""Tests for the LiteLLMJudgeClient infrastructure implementation."""

import asyncio
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import openai
import pytest

from code_judge.config.domain.judge import JudgeConfig
from code_judge.judge.infrastructure.litellm import LiteLLMJudgeClient
from tests.judge.fake_observer import FakeJudgeObserver

_ACOMPLETION = "code_judge.judge.infrastructure.litellm.litellm.acompletion"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_config(
    model: str = "claude-sonnet-4-20250514",
    temperature: float = 0.0,
    timeout_seconds: float = 120.0,
    api_key: str | None = None,
) -> JudgeConfig:
    return JudgeConfig(
        model=model,
        temperature=temperature,
        timeout_seconds=timeout_seconds,
        api_key=api_key,
    )


def _make_client(
    config: JudgeConfig | None = None,
) -> tuple[LiteLLMJudgeClient, FakeJudgeObserver]:
    observer = FakeJudgeObserver()
    client = LiteLLMJudgeClient(
        config=config if config is not None else _make_config(),
        observer=observer,
    )
    return client, observer


def _make_acompletion_response(
    content: str | None,
    prompt_tokens: int = 1200,
    completion_tokens: int = 340,
) -> MagicMock:
    """Build a mock litellm response object with the given content and usage."""
    message = MagicMock()
    message.content = content
    choice = MagicMock()
    choice.message = message
    usage = MagicMock()
    usage.prompt_tokens = prompt_tokens
    usage.completion_tokens = completion_tokens
    response = MagicMock()
    response.choices = [choice]
    response.usage = usage
    return response


# ---------------------------------------------------------------------------
# Construction: temperature warning
# ---------------------------------------------------------------------------


class TestConstruction:
    """LiteLLMJudgeClient warns when the configured temperature is above 0.0."""

    def test_zero_temperature_emits_no_warning(self) -> None:
        _, observer = _make_client(config=_make_config(temperature=0.0))

        assert observer.temperature_warnings == []

    def test_positive_temperature_emits_warning(self) -> None:
        _, observer = _make_client(config=_make_config(temperature=0.7))

        assert len(observer.temperature_warnings) == 1
        assert observer.temperature_warnings[0].temperature == pytest.approx(0.7)

    def test_model_property_reflects_config(self) -> None:
        client, _ = _make_client(config=_make_config(model="claude-haiku"))

        assert client.model == "claude-haiku"


# ---------------------------------------------------------------------------
# complete(): success path
# ---------------------------------------------------------------------------


class TestCompleteSuccess:
    """complete() returns the judge text and usage and emits the right events."""

    async def test_returns_response_text(self) -> None:
        client, _ = _make_client()

        with patch(
            _ACOMPLETION,
            new=AsyncMock(return_value=_make_acompletion_response('{"a": 1}')),
        ):
            result = await client.complete(prompt="Evaluate this", label="item-0")

        assert result.success is True
        assert result.response is not None
        assert result.response.text == '{"a": 1}'
        assert result.error is None

    async def test_reports_token_usage(self) -> None:
        client, _ = _make_client()
        response = _make_acompletion_response(
            "{}", prompt_tokens=900, completion_tokens=150
        )

        with patch(_ACOMPLETION, new=AsyncMock(return_value=response)):
            result = await client.complete(prompt="p")

        assert result.response is not None
        assert result.response.usage.input_tokens == 900
        assert result.response.usage.output_tokens == 150

    async def test_missing_usage_reads_as_zero(self) -> None:
        client, _ = _make_client()
        response = _make_acompletion_response("{}")
        response.usage = None

        with patch(_ACOMPLETION, new=AsyncMock(return_value=response)):
            result = await client.complete(prompt="p")

        assert result.response is not None
        assert result.response.usage.input_tokens == 0
        assert result.response.usage.output_tokens == 0

    async def test_none_content_becomes_empty_text(self) -> None:
        client, _ = _make_client()

        with patch(
            _ACOMPLETION, new=AsyncMock(return_value=_make_acompletion_response(None))
        ):
            result = await client.complete(prompt="p")

        assert result.response is not None
        assert result.response.text == ""

    async def test_sends_prompt_as_single_user_message(self) -> None:
        client, _ = _make_client(config=_make_config(model="claude-haiku"))
        mock = AsyncMock(return_value=_make_acompletion_response("{}"))

        with patch(_ACOMPLETION, new=mock):
            await client.complete(prompt="Judge me")

        kwargs: dict[str, Any] = mock.call_args.kwargs
        assert kwargs["model"] == "claude-haiku"
        assert kwargs["messages"] == [{"role": "user", "content": "Judge me"}]
        assert kwargs["max_tokens"] == 2000
        assert kwargs["temperature"] == 0.0
        assert "api_key" not in kwargs

    async def test_passes_api_key_when_configured(self) -> None:
        client, _ = _make_client(config=_make_config(api_key="sk-test"))
        mock = AsyncMock(return_value=_make_acompletion_response("{}"))

        with patch(_ACOMPLETION, new=mock):
            await client.complete(prompt="p")

        assert mock.call_args.kwargs["api_key"] == "sk-test"

    async def test_emits_started_and_completed_events(self) -> None:
        client, observer = _make_client()

        with patch(
            _ACOMPLETION,
            new=AsyncMock(
                return_value=_make_acompletion_response(
                    "{}", prompt_tokens=10, completion_tokens=5
                )
            ),
        ):
            await client.complete(prompt="p", label="svc")

        assert len(observer.started) == 1
        assert observer.started[0].label == "svc"
        assert observer.started[0].model == "claude-sonnet-4-20250514"
        assert len(observer.completed) == 1
        assert observer.completed[0].input_tokens == 10
        assert observer.completed[0].output_tokens == 5
        assert observer.completed[0].duration_ms >= 0
        assert observer.failed == []


# ---------------------------------------------------------------------------
# complete(): failure path
# ---------------------------------------------------------------------------


class TestCompleteFailure:
    """Transport errors and timeouts come back as a failed result, never raised."""

    async def test_connection_error_returns_failed_result(self) -> None:
        client, observer = _make_client()
        error = openai.APIConnectionError(request=MagicMock())

        with patch(_ACOMPLETION, new=AsyncMock(side_effect=error)):
            result = await client.complete(prompt="p", label="svc")

        assert result.success is False
        assert result.response is None
        assert result.error
        assert len(observer.failed) == 1
        assert observer.failed[0].label == "svc"
        assert observer.completed == []

    async def test_rate_limit_error_returns_failed_result(self) -> None:
        client, _ = _make_client()
        error = openai.RateLimitError(
            message="rate limited", response=MagicMock(), body=None
        )

        with patch(_ACOMPLETION, new=AsyncMock(side_effect=error)):
            result = await client.complete(prompt="p")

        assert result.success is False
        assert result.error is not None
        assert "rate limited" in result.error

    async def test_timeout_returns_failed_result(self) -> None:
        client, observer = _make_client(config=_make_config(timeout_seconds=0.01))

        async def _hang(**_: Any) -> MagicMock:
            await asyncio.sleep(5)
            return _make_acompletion_response("{}")

        with patch(_ACOMPLETION, new=_hang):
            result = await client.complete(prompt="p", label="slow")

        assert result.success is False
        assert result.error == "judge call timed out after 0.01s"
        assert observer.failed[0].reason == "judge call timed out after 0.01s"
