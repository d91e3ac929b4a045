"""Quality Gate — turns aggregate statistics into an admit/reject decision."""

from code_judge.config.domain.gate import GateConfig
from code_judge.gate.domain.decision import QualityGateDecision
from code_judge.results.domain.stats import AggregateStats


def evaluate_gate(stats: AggregateStats, config: GateConfig) -> QualityGateDecision:
    """Admit when the pass rate reaches ``config.min_pass_rate``, reject otherwise.

    A reject is an expected outcome, not an error. A missing results store
    never reaches this function; callers map it to
    ``ExitCode.CONFIGURATION_ERROR``.
    """
    return QualityGateDecision(stats=stats, threshold=config.min_pass_rate)
