"""Tests for the quality gate decision."""

import pytest

from code_judge.config.domain.gate import GateConfig
from code_judge.gate.application.gate import evaluate_gate
from code_judge.gate.domain.decision import ExitCode
from code_judge.results.domain.stats import AggregateStats


def _stats(pass_rate: float, total: int = 10) -> AggregateStats:
    passed = round(total * pass_rate / 100)
    return AggregateStats(
        total=total,
        passed=passed,
        failed=total - passed,
        average_score=7.0,
        pass_rate=pass_rate,
    )


class TestEvaluateGate:
    def test_admits_at_threshold(self) -> None:
        decision = evaluate_gate(
            stats=_stats(pass_rate=70.0), config=GateConfig(min_pass_rate=70.0)
        )

        assert decision.admitted is True
        assert decision.exit_code == ExitCode.SUCCESS

    def test_rejects_just_below_threshold(self) -> None:
        decision = evaluate_gate(
            stats=_stats(pass_rate=69.9), config=GateConfig(min_pass_rate=70.0)
        )

        assert decision.admitted is False
        assert decision.exit_code == ExitCode.FAILURE

    def test_eighty_percent_admitted_by_default(self) -> None:
        decision = evaluate_gate(stats=_stats(pass_rate=80.0), config=GateConfig())

        assert decision.admitted is True
        assert decision.threshold == 70.0
        assert decision.pass_rate == 80.0

    def test_empty_run_rejected_by_nonzero_threshold(self) -> None:
        decision = evaluate_gate(
            stats=_stats(pass_rate=0.0, total=0), config=GateConfig()
        )

        assert decision.admitted is False

    def test_zero_threshold_admits_everything(self) -> None:
        decision = evaluate_gate(
            stats=_stats(pass_rate=0.0), config=GateConfig(min_pass_rate=0.0)
        )

        assert decision.admitted is True

    @pytest.mark.parametrize(
        ("pass_rate", "threshold", "admitted"),
        [(100.0, 100.0, True), (99.0, 100.0, False), (50.0, 49.5, True)],
    )
    def test_admitted_iff_rate_meets_threshold(
        self, pass_rate: float, threshold: float, admitted: bool
    ) -> None:
        decision = evaluate_gate(
            stats=_stats(pass_rate=pass_rate),
            config=GateConfig(min_pass_rate=threshold),
        )

        assert decision.admitted is admitted


class TestExitCode:
    def test_values(self) -> None:
        assert ExitCode.SUCCESS == 0
        assert ExitCode.FAILURE == 1
        assert ExitCode.CONFIGURATION_ERROR == 2

    def test_configuration_error_distinct_from_reject(self) -> None:
        assert ExitCode.CONFIGURATION_ERROR not in (
            ExitCode.SUCCESS,
            ExitCode.FAILURE,
        )
