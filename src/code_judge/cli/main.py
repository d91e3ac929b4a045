"""CLI entrypoint for code-judge — typer app with one command per pipeline tool."""

import asyncio
import contextlib
import signal
import sys
from pathlib import Path

import structlog
import typer
from pydantic import ValidationError

from code_judge.cli.output.report import (
    print_batch_summary,
    print_cost_estimate,
    print_gate_decision,
    print_results_summary,
    print_verdict,
)
from code_judge.config.domain.config import AppConfig
from code_judge.config.domain.gate import GateConfig
from code_judge.config.infrastructure.errors import ConfigValidationError
from code_judge.config.infrastructure.loader import ConfigLoader
from code_judge.config.infrastructure.observer import StructlogConfigObserver
from code_judge.core.errors import CodeJudgeError
from code_judge.cost.application.estimator import CostEstimator
from code_judge.criteria.domain.builtin import CODE_REVIEW_CRITERIA, PROJECT_CRITERIA
from code_judge.criteria.domain.criteria import CriteriaSpec
from code_judge.criteria.infrastructure.yaml_loader import resolve_criteria
from code_judge.evaluation.application.runner import EvaluationRunner
from code_judge.evaluation.domain.item import EvaluationItem
from code_judge.evaluation.domain.observer import EvaluationObserver
from code_judge.evaluation.domain.summary import BatchSummary
from code_judge.evaluation.infrastructure.composite_observer import (
    CompositeEvaluationObserver,
)
from code_judge.evaluation.infrastructure.observer import StructlogEvaluationObserver
from code_judge.evaluation.infrastructure.progress_observer import (
    ProgressEvaluationObserver,
)
from code_judge.gate.application.gate import evaluate_gate
from code_judge.gate.domain.decision import ExitCode
from code_judge.judge.infrastructure.litellm import LiteLLMJudgeClient
from code_judge.judge.infrastructure.observer import StructlogJudgeObserver
from code_judge.project.application.request import build_project_request
from code_judge.project.infrastructure.analyzer import ProjectAnalyzer
from code_judge.prompt.domain.builder import build_prompt
from code_judge.prompt.domain.request import EvaluationRequest
from code_judge.results.application.aggregator import aggregate
from code_judge.results.infrastructure.store import (
    DEFAULT_RESULTS_FILE,
    JsonResultsStore,
)
from code_judge.verdict.application.parser import VerdictParser
from code_judge.verdict.infrastructure.observer import StructlogVerdictObserver

app = typer.Typer(add_completion=False, no_args_is_help=True)

PROJECTS_DIR_VAR = "CODE_JUDGE_PROJECTS_DIR"

_ResultsFileOption = typer.Option(
    DEFAULT_RESULTS_FILE, "--results-file", "-r", help="Path to the results store"
)
_ConfigOption = typer.Option(None, "--config", "-c", help="Optional YAML config file")
_CriteriaOption = typer.Option(None, "--criteria", help="YAML rubric file")
_LogFormatOption = typer.Option(
    "console", "--log-format", help="Log format: 'console' or 'json'"
)
_ProjectsDirOption = typer.Option(
    Path("."),
    "--projects-dir",
    envvar=PROJECTS_DIR_VAR,
    help="Directory that project names are resolved against",
)

_USAGE = """\
Usage: code-judge generate-prompt <project>

Example: code-judge generate-prompt my-service

Writes an evaluation prompt you can paste into any chat assistant
for a manual review, without API costs.\
"""


def _configure_structlog(log_format: str) -> None:
    """Configure structlog to write to stderr in the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=ExitCode.FAILURE)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def _load_config(config_path: Path | None) -> AppConfig:
    return ConfigLoader(observer=StructlogConfigObserver()).load(path=config_path)


def _gate_override(min_pass_rate: float) -> GateConfig:
    try:
        return GateConfig(min_pass_rate=min_pass_rate)
    except ValidationError as exc:
        raise ConfigValidationError(
            f"--min-pass-rate {min_pass_rate:g} must be between 0 and 100"
        ) from exc


def _build_runner(
    config: AppConfig,
    criteria: CriteriaSpec,
    observer: EvaluationObserver,
) -> EvaluationRunner:
    return EvaluationRunner(
        criteria=criteria,
        judge_client=LiteLLMJudgeClient(
            config=config.judge, observer=StructlogJudgeObserver()
        ),
        parser=VerdictParser(criteria=criteria, observer=StructlogVerdictObserver()),
        config=config.execution,
        observer=observer,
    )


async def _run_batch(
    runner: EvaluationRunner, items: list[EvaluationItem]
) -> BatchSummary:
    """Run *items*; Ctrl-C stops new judge calls and keeps finished outcomes."""
    loop = asyncio.get_running_loop()
    # Signal handlers are unavailable on some platforms; Ctrl-C then aborts.
    with contextlib.suppress(NotImplementedError):
        loop.add_signal_handler(signal.SIGINT, runner.cancel)
    try:
        return await runner.run(items=items)
    finally:
        with contextlib.suppress(NotImplementedError):
            loop.remove_signal_handler(signal.SIGINT)


@app.callback()
def main(
    ctx: typer.Context,
    log_format: str = _LogFormatOption,
) -> None:
    """LLM-as-judge code evaluation and CI quality gate."""
    _configure_structlog(log_format=log_format)
    ctx.obj = {"log_format": log_format}


@app.command()
def judge(
    task: str = typer.Argument(..., help="Task description given to the LLM"),
    output: str = typer.Argument(..., help="The LLM output to evaluate"),
    criteria_path: Path | None = _CriteriaOption,
    config_path: Path | None = _ConfigOption,
) -> None:
    """Evaluate a single LLM output with the judge."""
    try:
        config = _load_config(config_path=config_path)
        criteria = resolve_criteria(
            path=criteria_path, default=CODE_REVIEW_CRITERIA.name
        )

        runner = _build_runner(
            config=config, criteria=criteria, observer=StructlogEvaluationObserver()
        )
        item = EvaluationItem(
            description="cli", request=EvaluationRequest(task=task, output=output)
        )
        typer.echo("Evaluating with the judge...")
        summary = asyncio.run(runner.run(items=[item]))
    except CodeJudgeError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=ExitCode.FAILURE) from exc

    outcome = summary.outcomes[0]
    if outcome.verdict is None:
        typer.echo(f"Evaluation failed: {outcome.error}", err=True)
        raise typer.Exit(code=ExitCode.FAILURE)

    estimator = CostEstimator(pricing=config.pricing)
    cost = estimator.cost_for_usage(
        usage=summary.total_usage(), model=config.judge.model
    )
    print_verdict(verdict=outcome.verdict, criteria=criteria, cost_usd=cost)


@app.command()
def evaluate(
    ctx: typer.Context,
    targets: list[str] = typer.Argument(..., help="Project directories or names"),
    projects_dir: Path = _ProjectsDirOption,
    results_file: Path = _ResultsFileOption,
    criteria_path: Path | None = _CriteriaOption,
    config_path: Path | None = _ConfigOption,
) -> None:
    """Evaluate whole projects and write the results store."""
    try:
        config = _load_config(config_path=config_path)
        criteria = resolve_criteria(path=criteria_path, default=PROJECT_CRITERIA.name)
    except CodeJudgeError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=ExitCode.FAILURE) from exc

    analyzer = ProjectAnalyzer(projects_dir=projects_dir)
    items: list[EvaluationItem] = []
    for target in targets:
        try:
            snapshot = analyzer.analyze(target=target)
        except CodeJudgeError as exc:
            typer.echo(f"Skipped {target}: {exc}", err=True)
            continue
        items.append(
            EvaluationItem(
                description=snapshot.name, request=build_project_request(snapshot)
            )
        )

    if not items:
        typer.echo("No projects could be analyzed.", err=True)
        raise typer.Exit(code=ExitCode.FAILURE)

    observers: list[EvaluationObserver] = [StructlogEvaluationObserver()]
    if (ctx.obj or {}).get("log_format") != "json":
        observers.append(ProgressEvaluationObserver())
    runner = _build_runner(
        config=config,
        criteria=criteria,
        observer=CompositeEvaluationObserver(observers=observers),
    )
    summary = asyncio.run(_run_batch(runner=runner, items=items))

    records = summary.records()
    stats = aggregate(records=records)
    path = JsonResultsStore(path=results_file).write(records=records, stats=stats)
    print_batch_summary(summary=summary, stats=stats, results_path=path)

    if stats.failed > 0 or summary.skipped > 0:
        raise typer.Exit(code=ExitCode.FAILURE)


@app.command("check-results")
def check_results(
    results_file: Path = _ResultsFileOption,
    config_path: Path | None = _ConfigOption,
) -> None:
    """Print a pass/fail summary of the results store."""
    try:
        config = _load_config(config_path=config_path)
        records = JsonResultsStore(path=results_file).load()
    except CodeJudgeError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=ExitCode.FAILURE) from exc

    print_results_summary(
        stats=aggregate(records=records), threshold=config.gate.min_pass_rate
    )


@app.command("enforce-quality")
def enforce_quality(
    results_file: Path = _ResultsFileOption,
    min_pass_rate: float | None = typer.Option(
        None,
        "--min-pass-rate",
        help="Minimum pass rate in percent (default: $MIN_PASS_RATE or 70)",
    ),
    config_path: Path | None = _ConfigOption,
) -> None:
    """Exit 0 when the pass rate meets the threshold, 1 when it does not.

    A missing or unreadable results store exits 2: that is a broken pipeline,
    not an empty run.
    """
    try:
        config = _load_config(config_path=config_path)
        gate_config = config.gate
        if min_pass_rate is not None:
            gate_config = _gate_override(min_pass_rate=min_pass_rate)
        records = JsonResultsStore(path=results_file).load()
    except CodeJudgeError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=ExitCode.CONFIGURATION_ERROR) from exc

    decision = evaluate_gate(stats=aggregate(records=records), config=gate_config)
    print_gate_decision(decision=decision)
    raise typer.Exit(code=decision.exit_code)


@app.command("estimate-cost")
def estimate_cost(
    results_file: Path = _ResultsFileOption,
    config_path: Path | None = _ConfigOption,
) -> None:
    """Estimate judge API cost for the results store, with projections."""
    try:
        config = _load_config(config_path=config_path)
    except CodeJudgeError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=ExitCode.FAILURE) from exc

    store = JsonResultsStore(path=results_file)
    if not store.exists():
        typer.echo("No results file found - skipping cost estimation")
        return

    try:
        records = store.load()
    except CodeJudgeError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=ExitCode.FAILURE) from exc

    estimator = CostEstimator(pricing=config.pricing)
    print_cost_estimate(
        estimate=estimator.estimate_records(records=records, model=config.judge.model)
    )


@app.command("generate-prompt")
def generate_prompt(
    target: str | None = typer.Argument(None, help="Project directory or name"),
    projects_dir: Path = _ProjectsDirOption,
    output_dir: Path = typer.Option(
        Path("outputs"), "--output-dir", "-o", help="Directory for the prompt file"
    ),
    criteria_path: Path | None = _CriteriaOption,
) -> None:
    """Write a project evaluation prompt for manual use and echo it."""
    if not target:
        typer.echo(_USAGE)
        raise typer.Exit(code=ExitCode.FAILURE)

    typer.echo(f"Generating evaluation prompt for: {target}\n")
    try:
        criteria = resolve_criteria(path=criteria_path, default=PROJECT_CRITERIA.name)
        snapshot = ProjectAnalyzer(projects_dir=projects_dir).analyze(target=target)
    except CodeJudgeError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=ExitCode.FAILURE) from exc

    prompt = build_prompt(criteria=criteria, request=build_project_request(snapshot))

    output_dir.mkdir(parents=True, exist_ok=True)
    output_file = output_dir / f"prompt-{snapshot.name}.txt"
    output_file.write_text(prompt, encoding="utf-8")

    typer.echo(f"Prompt saved to: {output_file}")
    typer.echo("Paste it into a chat assistant to evaluate the project manually.\n")
    typer.echo("=" * 64)
    typer.echo("COPY THIS PROMPT:")
    typer.echo("=" * 64 + "\n")
    typer.echo(prompt)
    typer.echo("\n" + "=" * 64)


if __name__ == "__main__":
    app()
