"""Human-readable console reports for the CLI commands."""

from pathlib import Path

import typer

from code_judge.cost.domain.estimate import DAILY_RUNS, MONTHLY_RUNS, CostEstimate
from code_judge.criteria.domain.criteria import CriteriaSpec
from code_judge.evaluation.domain.summary import BatchSummary
from code_judge.gate.domain.decision import QualityGateDecision
from code_judge.results.domain.stats import AggregateStats
from code_judge.verdict.domain.verdict import Verdict

# ---------------------------------------------------------------------------
# ANSI helpers
# ---------------------------------------------------------------------------
_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_CYAN = "\033[36m"
_YELLOW = "\033[33m"
_GREEN = "\033[32m"
_RED = "\033[31m"
_WHITE = "\033[97m"

# Total cost above which optimisation tips are printed.
_TIP_THRESHOLD_USD = 0.10


def _rule(width: int = 60, color: str = _DIM) -> None:
    typer.echo(f"{color}{'─' * width}{_RESET}")


def _heading(title: str, color: str = _CYAN) -> None:
    typer.echo("")
    _rule(color=color)
    typer.echo(f"{color}{_BOLD}  {title}{_RESET}")
    _rule(color=color)


def _rows(rows: list[tuple[str, str]]) -> None:
    label_w = max(len(label) for label, _ in rows)
    for label, value in rows:
        typer.echo(f"  {_DIM}{label:<{label_w}}{_RESET}  {_WHITE}{value}{_RESET}")


def _status(passed: bool) -> str:
    return f"{_GREEN}PASS{_RESET}" if passed else f"{_RED}FAIL{_RESET}"


def print_results_summary(stats: AggregateStats, threshold: float) -> None:
    """Pass/fail counts, pass rate, average score, then every failed record."""
    _heading("Evaluation Summary")
    _rows(
        [
            ("Total tests", str(stats.total)),
            ("Passed", str(stats.passed)),
            ("Failed", str(stats.failed)),
            ("Pass rate", f"{stats.pass_rate:.1f}%"),
            ("Avg score", f"{stats.average_score:.1f}/10"),
        ]
    )
    typer.echo("")
    if stats.pass_rate >= threshold:
        typer.echo(f"  {_GREEN}Quality threshold met (>= {threshold:g}%){_RESET}")
    else:
        typer.echo(f"  {_YELLOW}Quality threshold not met (< {threshold:g}%){_RESET}")

    if stats.failures:
        typer.echo("")
        typer.echo(f"  {_RED}{_BOLD}Failed tests{_RESET}")
        for i, record in enumerate(stats.failures, start=1):
            typer.echo(f"  {i}. {record.description}")
            if record.error:
                typer.echo(f"     {_DIM}Error: {record.error}{_RESET}")
    typer.echo("")


def print_gate_decision(decision: QualityGateDecision) -> None:
    _heading("Quality Gate Check")
    _rows(
        [
            ("Pass rate", f"{decision.pass_rate:.1f}%"),
            ("Threshold", f"{decision.threshold:g}%"),
            ("Evaluated", str(decision.stats.total)),
        ]
    )
    typer.echo("")
    if decision.admitted:
        typer.echo(
            f"  {_GREEN}{_BOLD}Quality gate passed{_RESET} "
            "- code meets quality standards"
        )
    else:
        typer.echo(
            f"  {_RED}{_BOLD}Quality gate failed{_RESET} "
            "- code quality below threshold",
            err=True,
        )
        typer.echo(f"  Required: {decision.threshold:g}% pass rate", err=True)
        typer.echo(f"  Actual:   {decision.pass_rate:.1f}% pass rate", err=True)
        typer.echo("  Fix the failed evaluations before merging.", err=True)
    typer.echo("")


def print_cost_estimate(estimate: CostEstimate) -> None:
    approx = "~" if estimate.estimated else ""
    _heading("Cost Estimate")
    _rows(
        [
            ("Model", estimate.model),
            ("Evaluations", str(estimate.evaluations)),
            ("Input tokens", f"{approx}{estimate.input_tokens:,}"),
            ("Output tokens", f"{approx}{estimate.output_tokens:,}"),
            ("Total cost", f"${estimate.total_cost:.4f}"),
        ]
    )
    _heading("Cost Projections", color=_DIM)
    _rows(
        [
            (f"Daily ({DAILY_RUNS} runs)", f"${estimate.project(DAILY_RUNS):.2f}"),
            (f"Monthly ({MONTHLY_RUNS})", f"${estimate.project(MONTHLY_RUNS):.2f}"),
            ("Per evaluation", f"${estimate.cost_per_evaluation:.4f}"),
        ]
    )

    if estimate.total_cost > _TIP_THRESHOLD_USD:
        typer.echo("")
        typer.echo(f"  {_YELLOW}{_BOLD}Cost optimisation tips{_RESET}")
        for tip in (
            "Use a cheaper judge model (claude-haiku) for routine evaluations",
            "Reduce max_tokens for the judge",
            "Use deterministic checks where possible",
            "Batch evaluations instead of running on every commit",
        ):
            typer.echo(f"  - {tip}")
    typer.echo("")


def print_verdict(verdict: Verdict, criteria: CriteriaSpec, cost_usd: float) -> None:
    """Overall score and status, per-criterion scores, warnings and advice."""
    _heading("Evaluation Results")
    typer.echo(
        f"  Overall score: {_BOLD}{verdict.overall_score:g}/"
        f"{criteria.overall_max:g}{_RESET}   Status: {_status(verdict.passes)}"
    )
    typer.echo("")
    for criterion in criteria.criteria:
        score = verdict.scores[criterion.name]
        typer.echo(
            f"  {_WHITE}{criterion.label}{_RESET}: {score.score:g}/"
            f"{criterion.max_score:g}"
            + (f" {_DIM}- {score.reasoning}{_RESET}" if score.reasoning else "")
        )

    if verdict.overall_assessment:
        typer.echo("")
        typer.echo(f"  {verdict.overall_assessment}")

    for title, items, color in (
        ("Warnings", verdict.warnings, _YELLOW),
        ("Critical issues", verdict.critical_issues, _RED),
        ("Strengths", verdict.strengths, _GREEN),
        ("Recommendations", verdict.recommendations, _CYAN),
    ):
        if items:
            typer.echo("")
            typer.echo(f"  {color}{_BOLD}{title}{_RESET}")
            for item in items:
                typer.echo(f"  - {item}")

    typer.echo("")
    typer.echo(f"  {_DIM}Cost: ~${cost_usd:.4f}{_RESET}")
    typer.echo("")


def print_batch_summary(
    summary: BatchSummary, stats: AggregateStats, results_path: Path
) -> None:
    _heading("Project Evaluation Summary")
    rows = [
        ("Run ID", f"{summary.run_id[:8]}-..."),
        ("Total projects", str(stats.total)),
        ("Passing", str(stats.passed)),
        ("Failing", str(stats.failed)),
        ("Average score", f"{stats.average_score:.2f}/10"),
        ("Results file", str(results_path)),
    ]
    if summary.skipped:
        rows.insert(2, ("Skipped (cancelled)", str(summary.skipped)))
    _rows(rows)

    for outcome in summary.outcomes:
        typer.echo("")
        if outcome.verdict is None:
            typer.echo(f"  {_WHITE}{outcome.description}{_RESET}: {_status(False)}")
            typer.echo(f"    {_DIM}{outcome.error}{_RESET}")
            continue
        verdict = outcome.verdict
        typer.echo(
            f"  {_WHITE}{outcome.description}{_RESET}: "
            f"{verdict.overall_score:.1f}/10 {_status(verdict.passes)}"
        )
        for name, score in verdict.scores.items():
            typer.echo(f"    {name.replace('_', ' ').title()}: {score.score:g}/10")
        for issue in verdict.critical_issues:
            typer.echo(f"    {_RED}! {issue}{_RESET}")
        for rec in verdict.recommendations[:3]:
            typer.echo(f"    {_DIM}- {rec}{_RESET}")
    typer.echo("")
