"""Main CLI entry point for seqbench.

This module provides the command-line interface for running benchmark
targets and inspecting their schedules.
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from seqbench.cli.config_loader import SeqbenchConfig, create_config, get_default_config_path
from seqbench.cli.target import load_target
from seqbench.runner.harness import Benchmark
from seqbench.runner.log import ConsoleSink, LogLevel
from seqbench.runner.report import BenchmarkResults
from seqbench.version import __version__

console = Console()
err_console = Console(stderr=True)


def get_level_choices() -> list[str]:
    """Get available harness log levels."""
    return [level.name.lower() for level in LogLevel]


def get_format_choices() -> list[str]:
    """Get available report formats."""
    return ["table", "json", "markdown"]


@click.group()
@click.version_option(version=__version__, prog_name="seqbench")
@click.option("--verbose", "-v", is_flag=True, help="Log every repetition and test")
@click.option("--quiet", "-q", is_flag=True, help="Only log errors")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool) -> None:
    """seqbench - ordered, instrumented runs of asynchronous benchmark steps.

    \b
    Targets are given as 'package.module:attribute', naming a Benchmark
    or a zero-argument callable that returns one.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


@cli.command()
@click.argument("target")
@click.option(
    "--repetitions",
    "-r",
    type=click.IntRange(min=1),
    default=None,
    help="Number of repetitions (default: 1)",
)
@click.option(
    "--log-level",
    "-l",
    type=click.Choice(get_level_choices(), case_sensitive=False),
    default=None,
    help="Harness log threshold",
)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(get_format_choices()),
    default=None,
    help="Report format",
)
@click.pass_context
def run(
    ctx: click.Context,
    target: str,
    repetitions: int | None,
    log_level: str | None,
    config: Path | None,
    output_format: str | None,
) -> None:
    """Run a benchmark target and print its report.

    \b
    Examples:
        seqbench run mybench.suite:bench
        seqbench run mybench.suite:make_bench -r 10 --format json
        seqbench -v run mybench.suite:bench -c seqbench.yaml
    """
    verbose = ctx.obj.get("verbose", False)
    quiet = ctx.obj.get("quiet", False)

    try:
        settings = create_config(
            config or get_default_config_path(),
            _cli_overrides(repetitions, log_level, output_format),
        )
        bench = load_target(target)
    except Exception as e:
        err_console.print(f"[red]✗[/red] Error: {e}")
        if verbose:
            err_console.print_exception()
        sys.exit(1)

    _apply_config(bench, settings, verbose=verbose, quiet=quiet)

    if not quiet:
        err_console.print(
            f"[bold blue]Running {bench.name}[/bold blue] "
            f"({len(bench.tests)} tests x {settings.harness.repetitions} repetitions)"
        )

    try:
        results = asyncio.run(bench.run(settings.harness.repetitions))
    except Exception as e:
        err_console.print(f"[red]✗[/red] {bench.name} failed: {e}")
        if verbose:
            err_console.print_exception()
        if not quiet:
            err_console.print("[dim]Partial results:[/dim]")
            _print_results(bench.get_results(), settings.output.format)
        sys.exit(1)

    _print_results(results, settings.output.format)


def _cli_overrides(
    repetitions: int | None,
    log_level: str | None,
    output_format: str | None,
) -> dict[str, Any]:
    """Collect explicitly passed options as a config dictionary."""
    overrides: dict[str, Any] = {}
    if repetitions is not None:
        overrides.setdefault("harness", {})["repetitions"] = repetitions
    if log_level is not None:
        overrides.setdefault("harness", {})["log_level"] = log_level
    if output_format is not None:
        overrides.setdefault("output", {})["format"] = output_format
    return overrides


def _apply_config(
    bench: Benchmark,
    settings: SeqbenchConfig,
    *,
    verbose: bool,
    quiet: bool,
) -> None:
    """Apply explicitly configured harness settings to a loaded target."""
    harness = settings.harness
    explicit = harness.model_fields_set

    if "name" in explicit:
        bench.name = harness.name
    if "warn_duplicate_names" in explicit:
        bench.warn_duplicate_names = harness.warn_duplicate_names

    if quiet:
        bench.log_level = LogLevel.ERROR
    elif "log_level" in explicit:
        bench.log_level = harness.log_level
    elif verbose:
        bench.log_level = LogLevel.FINE

    bench.sink = ConsoleSink(err_console)


def _print_results(results: BenchmarkResults, output_format: str) -> None:
    """Print a report in the requested format."""
    if output_format == "json":
        click.echo(results.to_json(indent=2))
    elif output_format == "markdown":
        click.echo(results.to_markdown())
    else:
        console.print(results.to_table())


@cli.command(name="list")
@click.argument("target")
@click.pass_context
def list_tests(ctx: click.Context, target: str) -> None:
    """List the tests scheduled on a benchmark target.

    \b
    Examples:
        seqbench list mybench.suite:bench
    """
    verbose = ctx.obj.get("verbose", False)

    try:
        bench = load_target(target)
    except Exception as e:
        err_console.print(f"[red]✗[/red] Error: {e}")
        if verbose:
            err_console.print_exception()
        sys.exit(1)

    table = Table(title=f"Scheduled Tests: {bench.name}")
    table.add_column("#", justify="right")
    table.add_column("Test", style="cyan")
    table.add_column("Recorded")
    table.add_column("Validator")

    for index, test in enumerate(bench.tests, start=1):
        table.add_row(
            str(index),
            test.name,
            "no" if test.skip_recording else "yes",
            "custom" if test.has_custom_validator else "default",
        )

    console.print(table)


@cli.command()
def info() -> None:
    """Display information about seqbench."""
    console.print(
        Panel.fit(
            f"[bold blue]seqbench v{__version__}[/bold blue]\n\n"
            "[dim]Ordered, instrumented runs of\n"
            "asynchronous benchmark steps[/dim]",
            title="About",
        )
    )

    console.print("\n[bold]Log Levels:[/bold]")
    table = Table(show_header=True, header_style="bold")
    table.add_column("Level")
    table.add_column("Emits")
    table.add_row("fine", "Repetition markers, per-test PASSED/FAILED, pretty report")
    table.add_row("info", "Compact report (default)")
    table.add_row("warning", "Duplicate test names (when enabled)")
    table.add_row("error", "Run failures")
    console.print(table)

    console.print("\n[bold]Quick Start:[/bold]")
    console.print("  $ seqbench list mybench.suite:bench")
    console.print("  $ seqbench run mybench.suite:bench -r 5")
    console.print("  $ seqbench -v run mybench.suite:bench --format json")


if __name__ == "__main__":
    cli()
