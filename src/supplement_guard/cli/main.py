"""CLI for supplement-guard: analyze / prompt commands."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from supplement_guard.config import AppSettings, LLMConfig, ObservabilityConfig
from supplement_guard.exceptions import AnalysisError, ConfigurationError
from supplement_guard.formatters import get_formatter
from supplement_guard.items import ItemSet
from supplement_guard.logging_config import setup_logging
from supplement_guard.models import AnalysisResult, BulletList, Heading, InlineRun, Paragraph
from supplement_guard.pipeline import AnalysisPipeline
from supplement_guard.prompts.builder import build_prompt
from supplement_guard.session import AnalysisSession
from supplement_guard.startup_checks import validate_settings

app = typer.Typer(name="supplement-guard", help="Medication and supplement interaction-risk reports")
console = Console()
err_console = Console(stderr=True)

VERDICT_STYLES = {"safe": "bold green", "caution": "bold yellow", "risk": "bold red"}


def _build_settings(
    model: Optional[str],
    api_key: Optional[str],
    temperature: Optional[float],
    no_grounding: bool,
    timeout: Optional[float],
    verbose: bool,
) -> AppSettings:
    """Build settings, overriding env defaults with CLI flags."""
    overrides: dict = {}
    if model:
        overrides["model"] = model
    if api_key:
        overrides["api_key"] = api_key
    if temperature is not None:
        overrides["temperature"] = temperature
    if no_grounding:
        overrides["grounding_enabled"] = False
    if timeout is not None:
        overrides["timeout"] = timeout

    observability: dict = {"log_level": "DEBUG"} if verbose else {}
    return AppSettings(llm=LLMConfig(**overrides), observability=ObservabilityConfig(**observability))


def _runs_text(runs: list[InlineRun]) -> Text:
    text = Text()
    for run in runs:
        text.append(run.text, style="bold" if run.emphasized else None)
    return text


def _print_result(result: AnalysisResult) -> None:
    if result.verdict is not None:
        style = VERDICT_STYLES[result.verdict.value]
        console.print(Text(f"Overall verdict: {result.verdict.value.upper()}", style=style))

    for block in result.blocks:
        if isinstance(block, Heading):
            console.print()
            console.rule(Text(block.text, style="bold cyan"), align="left")
        elif isinstance(block, Paragraph):
            console.print(_runs_text(block.runs))
        elif isinstance(block, BulletList):
            for item in block.items:
                console.print(Text("  • ") + _runs_text(item))

    if result.sources:
        table = Table(title="Sources (Google Search)", show_lines=False)
        table.add_column("#", justify="right")
        table.add_column("Title")
        table.add_column("URI", overflow="fold")
        for i, source in enumerate(result.sources, 1):
            table.add_row(str(i), Text(source.title), Text(source.uri))
        console.print()
        console.print(table)


def _print_error(error: AnalysisError) -> None:
    err_console.print(f"[bold red]Analysis failed ({error.kind}):[/bold red] {escape(error.message)}")
    if error.message != error.guidance:
        err_console.print(f"[yellow]{escape(error.guidance)}[/yellow]")


@app.command()
def analyze(
    items: Optional[list[str]] = typer.Argument(None, help="Medications / supplements to analyze"),
    defaults: bool = typer.Option(False, "--defaults", help="Seed the list with the configured default items"),
    model: Optional[str] = typer.Option(None, "--model", help="LiteLLM model identifier"),
    api_key: Optional[str] = typer.Option(None, "--api-key", help="API key (overrides env)"),
    temperature: Optional[float] = typer.Option(None, "--temperature", min=0.0, max=1.0),
    no_grounding: bool = typer.Option(False, "--no-grounding", help="Disable web-search grounding"),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Seconds before giving up"),
    output_format: Optional[str] = typer.Option(
        None, "--format", "-f", help="Write json, markdown or text instead of the console view"
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the formatted report to a file"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Generate an interaction-risk report for the given items."""
    settings = _build_settings(model, api_key, temperature, no_grounding, timeout, verbose)
    try:
        validate_settings(settings)
    except ConfigurationError as e:
        err_console.print(f"[bold red]Configuration error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=2) from e
    setup_logging(settings.observability)

    item_set = ItemSet.with_defaults(settings.session.default_items) if defaults else ItemSet()
    for item in items or []:
        item_set.add(item)

    formatter = None
    if output_format or output:
        try:
            formatter = get_formatter(output_format or "markdown")
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--format") from e

    session = AnalysisSession(AnalysisPipeline(settings), items=item_set)
    console.print(f"[bold]Analyzing:[/bold] {escape(', '.join(item_set)) or '(nothing)'}")

    try:
        result = asyncio.run(session.run())
    except AnalysisError as e:
        _print_error(e)
        raise typer.Exit(code=1) from e

    if formatter is None:
        _print_result(result)
    elif output:
        formatter.format_to_file(result, output)
        console.print(f"[green]Report saved to {escape(str(output))}[/green]")
    else:
        console.print(formatter.format(result).decode("utf-8"), markup=False, highlight=False)


@app.command()
def prompt(
    items: list[str] = typer.Argument(..., help="Medications / supplements"),
) -> None:
    """Print the prompt that would be sent for the given items."""
    item_set = ItemSet(items)
    if not item_set:
        raise typer.BadParameter("At least one non-blank item is required", param_hint="ITEMS")
    console.print(build_prompt(item_set), markup=False, highlight=False)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
