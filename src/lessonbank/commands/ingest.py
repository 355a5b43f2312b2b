# src/lessonbank/commands/ingest.py
"""Ingest command - load lesson files into the catalog.

This module provides the core ingest logic that the CLI uses.
"""

from __future__ import annotations

from pathlib import Path

from lessonbank.commands.base import (
    CommandStage,
    FileIngestResult,
    IngestResult,
    ProgressCallback,
    ProgressUpdate,
)
from lessonbank.config import ConfigError, get_lessonbank_config, get_store
from lessonbank.exceptions import StoreError
from lessonbank.pipeline import ContentPipeline, IngestReport, PipelineState

# Map pipeline events to CommandStage
STAGE_MAP = {
    "resolving": CommandStage.RESOLVING,
    "listing": CommandStage.LISTING,
    "processing": CommandStage.PROCESSING,
}


def ingest(
    content_dir: str | Path | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    on_progress: ProgressCallback | None = None,
) -> IngestResult:
    """Run the content pipeline against the configured module sources.

    Args:
        content_dir: Override the content directory of the first module
        data_dir: Override data directory (uses config if not provided)
        config_path: Override config file path
        on_progress: Callback for progress updates during ingestion

    Returns:
        IngestResult with aggregated statistics and per-file results
    """
    if content_dir is not None and not Path(content_dir).is_dir():
        return IngestResult(success=False, error=f"Directory not found: {content_dir}")

    config = get_lessonbank_config(data_dir, config_path)
    if isinstance(config, ConfigError):
        return IngestResult(success=False, error=config.message)

    settings = config.settings
    if content_dir is not None:
        settings = settings.with_content_roots([str(content_dir)])

    try:
        store = get_store(config.data_dir)
    except (OSError, StoreError) as e:
        return IngestResult(success=False, error=f"Failed to open catalog: {e}")

    def progress_adapter(event: str, current: int, total: int, message: str) -> None:
        """Adapt pipeline progress events to ProgressUpdate."""
        if on_progress:
            on_progress(
                ProgressUpdate(
                    stage=STAGE_MAP.get(event, CommandStage.PROCESSING),
                    current=current,
                    total=total,
                    message=message,
                )
            )

    pipeline = ContentPipeline(store, settings)
    report = pipeline.run(on_progress=progress_adapter if on_progress else None)
    return _to_result(report)


def _to_result(report: IngestReport) -> IngestResult:
    result = IngestResult(
        success=True,
        files_processed=report.files_processed,
        topics_created=report.topics_created,
        topics_skipped=report.topics_skipped,
        files_failed=report.files_failed,
        total_questions=report.questions_created,
        questions_skipped=report.questions_skipped,
        questions_failed=report.questions_failed,
        errors=report.errors,
    )

    for module in report.modules:
        if module.state is PipelineState.NO_DIRECTORY:
            result.missing_dirs.append(module.category)
        for f in module.files:
            result.file_results.append(
                FileIngestResult(
                    filepath=f.path,
                    skipped=not f.created,
                    title=f.title,
                    reason=f.error or (None if f.created else "already exists"),
                    questions=f.questions_created,
                    questions_skipped=f.questions_skipped,
                    questions_failed=f.questions_failed,
                )
            )

    failed_modules = [m for m in report.modules if m.state is PipelineState.FAILED]
    if failed_modules and len(failed_modules) == len(report.modules):
        result.success = False
        result.error = failed_modules[0].error

    return result
