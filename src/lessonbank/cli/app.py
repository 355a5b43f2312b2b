# src/lessonbank/cli/app.py
"""Command-line interface for lessonbank.

This module provides a thin Typer wrapper around the commands layer.
Each command:
1. Parses args (via Typer)
2. Creates progress callbacks (for Rich display)
3. Calls commands module functions
4. Renders results with Rich
"""

from __future__ import annotations

import logging

try:
    import typer
    from rich.console import Console
    from rich.logging import RichHandler
    from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn
    from rich.table import Table
except ImportError as e:
    raise SystemExit(
        "CLI requires additional dependencies.\nInstall with: pip install lessonbank[cli]"
    ) from e

from lessonbank import __version__
from lessonbank.commands import CommandStage, ProgressUpdate, clean, ingest, list_cmd, status
from lessonbank.commands.base import ConfirmRequest, IngestResult

app = typer.Typer(
    name="lessonbank",
    help="lessonbank - build a lesson catalog from markdown files.",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"lessonbank {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route library logging through Rich."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log every loaded topic and question.",
    ),
) -> None:
    """lessonbank - build a lesson catalog from markdown files."""
    configure_logging(verbose)


# Stage names for progress display
STAGE_NAMES = {
    CommandStage.RESOLVING: "Resolving",
    CommandStage.LISTING: "Listing",
    CommandStage.PROCESSING: "Processing",
    CommandStage.LOADING: "Loading",
    CommandStage.COMPLETE: "Complete",
}


@app.command(name="ingest")
def ingest_cmd(
    content_dir: str = typer.Argument(
        None,
        help="Lesson directory (default: the configured content roots)",
    ),
    data_dir: str = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Data directory (default: from settings)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
    no_progress: bool = typer.Option(
        False,
        "--no-progress",
        help="Disable progress bars",
    ),
) -> None:
    """Ingest lesson files into the catalog."""
    show_progress = not plain and not no_progress and console.is_terminal

    if show_progress:
        with Progress(
            SpinnerColumn(),
            TextColumn("[bold]{task.fields[stage]:>12}", justify="right"),
            BarColumn(bar_width=20),
            TextColumn("{task.description}", style="dim"),
            console=console,
        ) as progress:
            task = progress.add_task("", total=None, stage="")

            def on_progress(update: ProgressUpdate) -> None:
                progress.update(
                    task,
                    stage=STAGE_NAMES.get(update.stage, update.stage.value),
                    description=update.message or "",
                    total=update.total or None,
                    completed=update.current,
                )

            result = ingest.ingest(
                content_dir=content_dir,
                data_dir=data_dir,
                config_path=config_file,
                on_progress=on_progress,
            )
    else:
        result = ingest.ingest(
            content_dir=content_dir,
            data_dir=data_dir,
            config_path=config_file,
        )

    _render_ingest_result(result, plain=plain)


def _render_ingest_result(result: IngestResult, plain: bool) -> None:
    """Render ingest result to console."""
    if not result.success:
        console.print(f"Error: {result.error}" if plain else f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    for category in result.missing_dirs:
        message = f"Content directory not found for {category}"
        console.print(message if plain else f"[yellow]{message}[/yellow]")

    lines = [
        (f"Processed {result.files_processed} files", "green"),
        (f"Created {result.topics_created} topics", "green"),
        (f"Created {result.total_questions} questions", "green"),
    ]
    if result.topics_skipped > 0:
        lines.append((f"Skipped {result.topics_skipped} existing topics", "dim"))
    if result.questions_skipped > 0:
        lines.append((f"Skipped {result.questions_skipped} existing questions", "dim"))
    if result.files_failed > 0:
        lines.append((f"Failed {result.files_failed} files", "red"))
    if result.questions_failed > 0:
        lines.append((f"Failed {result.questions_failed} questions", "red"))

    for text, style in lines:
        console.print(text if plain else f"[{style}]{text}[/{style}]")

    for location, error in result.errors:
        console.print(f"  {location}: {error}" if plain else f"  [red]{location}[/red]: {error}")

    if result.files_failed > 0 and result.files_failed == result.files_processed:
        raise typer.Exit(1)


@app.command(name="status")
def status_cmd(
    data_dir: str = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Data directory (default: from settings)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    detailed: bool = typer.Option(
        False,
        "--detailed",
        help="Show topic and question counts per module",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
) -> None:
    """Show catalog statistics."""
    result = status.status(data_dir=data_dir, config_path=config_file, detailed=detailed)

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    if result.total_modules == 0:
        if plain:
            console.print("No catalog found.")
        else:
            console.print("[dim]No catalog found. Run 'lessonbank ingest' first.[/dim]")
        raise typer.Exit(0)

    if plain:
        console.print("Catalog Status:")
        console.print(f"  Modules: {result.total_modules}")
        console.print(f"  Topics: {result.total_topics}")
        console.print(f"  Questions: {result.total_questions}")
        for module in result.modules:
            console.print(
                f"  {module.name} ({module.category}): {module.topic_count} topics, "
                f"{module.question_count} questions"
            )
        return

    table = Table(title="Catalog Status")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Modules", str(result.total_modules))
    table.add_row("Topics", str(result.total_topics))
    table.add_row("Questions", str(result.total_questions))
    console.print(table)

    if result.modules:
        console.print()
        detail_table = Table(title="Modules")
        detail_table.add_column("Module", style="cyan")
        detail_table.add_column("Category")
        detail_table.add_column("Topics", justify="right")
        detail_table.add_column("Questions", justify="right", style="green")
        for module in result.modules:
            detail_table.add_row(
                module.name,
                module.category,
                str(module.topic_count),
                str(module.question_count),
            )
        console.print(detail_table)


@app.command(name="list")
def list_cmd_handler(
    module: str = typer.Option(
        None,
        "--module",
        "-m",
        help="Only show topics of this module (category or name)",
    ),
    data_dir: str = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Data directory (default: from settings)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
) -> None:
    """List topics in catalog order."""
    result = list_cmd.list_topics(module=module, data_dir=data_dir, config_path=config_file)

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    if not result.topics:
        console.print("No topics found." if plain else "[dim]No topics found.[/dim]")
        raise typer.Exit(0)

    if plain:
        console.print(f"Topics ({len(result.topics)}):")
        for topic in result.topics:
            console.print(
                f"  [{topic.order_index}] {topic.title} - {topic.difficulty}, "
                f"{topic.estimated_minutes} min, {topic.question_count} questions"
            )
        return

    table = Table(title=f"Topics ({len(result.topics)})")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Module")
    table.add_column("Title", style="cyan")
    table.add_column("Difficulty")
    table.add_column("Minutes", justify="right")
    table.add_column("Questions", justify="right", style="green")
    for topic in result.topics:
        table.add_row(
            str(topic.order_index),
            topic.module,
            topic.title,
            topic.difficulty,
            str(topic.estimated_minutes),
            str(topic.question_count),
        )
    console.print(table)


@app.command(name="clean")
def clean_cmd(
    data_dir: str = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Data directory (default: from settings)",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Skip confirmation prompt",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
) -> None:
    """Delete every module, topic and question from the catalog."""

    def cli_confirm(request: ConfirmRequest) -> bool:
        """CLI confirmation callback using typer.confirm."""
        if request.details:
            console.print(request.details if plain else f"[yellow]{request.details}[/yellow]")
        return typer.confirm("Continue?")

    result = clean.clean(
        data_dir=data_dir,
        config_path=config_file,
        on_confirm=None if force else cli_confirm,
    )

    if not result.success:
        if result.error == "Cancelled.":
            console.print("Cancelled.")
            raise typer.Exit(0)
        console.print(f"Error: {result.error}" if plain else f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    message = (
        f"Deleted {result.modules_deleted} modules, {result.topics_deleted} topics "
        f"and {result.questions_deleted} questions"
    )
    console.print(message if plain else f"[green]{message}[/green]")
