"""Tests for converting judge usage into USD cost."""

import pytest

from code_judge.config.domain.judge import DEFAULT_JUDGE_MODEL
from code_judge.config.domain.pricing import ModelPricing, PricingConfig
from code_judge.cost.application.estimator import CostEstimator
from code_judge.cost.domain.estimate import DAILY_RUNS, MONTHLY_RUNS
from code_judge.judge.domain.response import TokenUsage
from code_judge.results.domain.record import ResultRecord


def _estimator() -> CostEstimator:
    return CostEstimator(pricing=PricingConfig())


class TestPricingLookup:
    def test_exact_model(self) -> None:
        assert _estimator().pricing_for("claude-haiku") == ModelPricing(
            input_per_million=0.25, output_per_million=1.25
        )

    def test_provider_prefix_is_stripped(self) -> None:
        pricing = _estimator().pricing_for("anthropic/claude-opus")

        assert pricing.input_per_million == 15

    def test_unknown_model_uses_default_entry(self) -> None:
        pricing = _estimator().pricing_for("some-unknown-model")

        assert pricing == PricingConfig().models[DEFAULT_JUDGE_MODEL]


class TestCostForUsage:
    def test_million_tokens_at_default_prices(self) -> None:
        cost = _estimator().cost_for_usage(
            usage=TokenUsage(input_tokens=1_000_000, output_tokens=1_000_000),
            model=DEFAULT_JUDGE_MODEL,
        )

        assert cost == pytest.approx(18.0)

    def test_zero_usage_costs_nothing(self) -> None:
        assert _estimator().cost_for_usage(usage=TokenUsage(), model="x") == 0.0

    def test_split_into_input_and_output(self) -> None:
        estimate = _estimator().estimate_usage(
            usage=TokenUsage(input_tokens=2000, output_tokens=1000),
            model=DEFAULT_JUDGE_MODEL,
        )

        assert estimate.input_cost == pytest.approx(0.006)
        assert estimate.output_cost == pytest.approx(0.015)
        assert estimate.total_cost == pytest.approx(0.021)


class TestEstimateRecords:
    def test_uses_real_usage_when_present(self) -> None:
        records = [
            ResultRecord(
                success=True, usage=TokenUsage(input_tokens=1000, output_tokens=100)
            ),
            ResultRecord(
                success=False, usage=TokenUsage(input_tokens=3000, output_tokens=300)
            ),
        ]

        estimate = _estimator().estimate_records(
            records=records, model=DEFAULT_JUDGE_MODEL
        )

        assert estimate.input_tokens == 4000
        assert estimate.output_tokens == 400
        assert estimate.evaluations == 2
        assert estimate.estimated is False

    def test_falls_back_to_per_evaluation_estimate(self) -> None:
        records = [ResultRecord(success=True) for _ in range(10)]

        estimate = _estimator().estimate_records(
            records=records, model=DEFAULT_JUDGE_MODEL
        )

        assert estimate.input_tokens == 5000
        assert estimate.output_tokens == 3000
        assert estimate.estimated is True
        assert estimate.total_cost == pytest.approx(0.015 + 0.045)

    def test_mixed_usage_is_flagged_estimated(self) -> None:
        records = [
            ResultRecord(success=True, usage=TokenUsage(input_tokens=100)),
            ResultRecord(success=True),
        ]

        estimate = _estimator().estimate_records(records=records, model="x")

        assert estimate.input_tokens == 600
        assert estimate.estimated is True

    def test_zero_usage_is_real_usage(self) -> None:
        records = [
            ResultRecord(
                success=True, usage=TokenUsage(input_tokens=1000, output_tokens=100)
            ),
            ResultRecord(
                success=False, error="transport failure: timeout", usage=TokenUsage()
            ),
        ]

        estimate = _estimator().estimate_records(records=records, model="x")

        assert estimate.input_tokens == 1000
        assert estimate.output_tokens == 100
        assert estimate.estimated is False

    def test_empty_records(self) -> None:
        estimate = _estimator().estimate_records(records=[], model="x")

        assert estimate.total_cost == 0.0
        assert estimate.cost_per_evaluation == 0.0


class TestProjections:
    def test_daily_and_monthly_are_linear(self) -> None:
        estimate = _estimator().estimate_usage(
            usage=TokenUsage(input_tokens=1_000_000), model=DEFAULT_JUDGE_MODEL
        )

        assert estimate.project(DAILY_RUNS) == pytest.approx(30.0)
        assert estimate.project(MONTHLY_RUNS) == pytest.approx(900.0)

    def test_cost_per_evaluation(self) -> None:
        estimate = _estimator().estimate_usage(
            usage=TokenUsage(output_tokens=1_000_000),
            model=DEFAULT_JUDGE_MODEL,
            evaluations=5,
        )

        assert estimate.cost_per_evaluation == pytest.approx(3.0)
