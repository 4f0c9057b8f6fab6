"""
Command-line interface for the facts and rules generator.

Uses Typer to provide a CLI with options overriding the YAML
configuration. Without options the generator reads ./markdown and
writes ./facts.json and ./rules.json.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from .config import load_config
from .runner import run_pipeline

app = typer.Typer(add_completion=False)
console = Console()


@app.callback()
def main() -> None:
    """Generate facts and JsonLogic rules from markdown notes."""


@app.command()
def run(
    input: Path | None = typer.Option(None, "--input", "-i", help="Markdown source directory."),
    facts_output: Path | None = typer.Option(None, "--facts-output", help="Facts JSON path."),
    rules_output: Path | None = typer.Option(None, "--rules-output", help="Rules JSON path."),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, dir_okay=False),
    exclude_tag: str | None = typer.Option(
        None, "--exclude-tag", help="Tag marking documents to leave out."
    ),
    progress: bool = typer.Option(True, "--progress/--no-progress"),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_format: str | None = typer.Option(
        None, "--log-format", help="Log file format: jsonl or plain."
    ),
    log_file: bool | None = typer.Option(
        None, "--log-file/--no-log-file", help="Enable or disable file logging."
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Exit with status 1 when either pass fails."
    ),
):
    """Run the facts pass and then the rules pass.

    Args:
        input: Directory containing markdown notes
        facts_output: Path of the facts JSON file
        rules_output: Path of the rules JSON file
        config: Optional path to YAML config file
        exclude_tag: Tag that excludes a note from both outputs
        progress: Whether to show progress bar
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Log file format (jsonl, plain)
        log_file: Enable/disable file logging
        strict: Exit non-zero when a pass failed
    """
    cfg = load_config(str(config) if config else None)

    # Override with CLI options
    if input is not None:
        cfg.input.markdown_dir = str(input)
    if facts_output is not None:
        cfg.output.facts_file = str(facts_output)
    if rules_output is not None:
        cfg.output.rules_file = str(rules_output)
    if exclude_tag:
        cfg.input.exclude_tag = exclude_tag
    if log_level:
        cfg.logging.level = log_level
    if log_format:
        cfg.logging.format = log_format
    if log_file is not None:
        cfg.logging.file = log_file

    result = run_pipeline(cfg, show_progress=progress, console=console)

    if result.facts.ok:
        console.print(f"[bold]Facts[/bold]: {escape(str(result.facts.output_path))} (facts={len(result.facts.facts)})")
    else:
        console.print(f"[bold red]Facts failed[/bold red]: {escape(result.facts.error)}")
    if result.rules.ok:
        console.print(f"[bold]Rules[/bold]: {escape(str(result.rules.output_path))} (rules={len(result.rules.rules)})")
    else:
        console.print(f"[bold red]Rules failed[/bold red]: {escape(result.rules.error)}")

    if strict and not result.ok:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
