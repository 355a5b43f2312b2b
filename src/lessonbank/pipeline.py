# src/lessonbank/pipeline.py
"""Content ingestion pipeline for lessonbank."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from lessonbank.loaders import LessonLoader, Loader, find_content_dir
from lessonbank.models import Module
from lessonbank.reconciler import Reconciler
from lessonbank.settings import ModuleSource, Settings
from lessonbank.stores import CatalogStore

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int, str], None]
"""Callback for ingestion progress updates.

Args:
    event: Event type: "resolving", "listing" or "processing"
    current: Current progress count (0 to total)
    total: Total items to process
    message: Human-readable status message
"""


class PipelineState(Enum):
    """States of one module's ingestion run."""

    IDLE = "idle"
    RESOLVING_MODULE = "resolving_module"
    LISTING_FILES = "listing_files"
    NO_DIRECTORY = "no_directory"
    PROCESSING_FILES = "processing_files"
    DONE = "done"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (PipelineState.NO_DIRECTORY, PipelineState.DONE, PipelineState.FAILED)


@dataclass
class FileOutcome:
    """Outcome of ingesting a single lesson file."""

    path: str
    title: str | None = None
    created: bool = False
    questions_created: int = 0
    questions_skipped: int = 0
    questions_failed: int = 0
    error: str | None = None

    @property
    def skipped(self) -> bool:
        """True if the topic already existed."""
        return self.error is None and not self.created


@dataclass
class ModuleReport:
    """Outcome of ingesting one module's content directory."""

    category: str
    module_name: str | None = None
    content_dir: str | None = None
    state: PipelineState = PipelineState.IDLE
    files: list[FileOutcome] = field(default_factory=list)
    error: str | None = None

    @property
    def topics_created(self) -> int:
        return sum(1 for f in self.files if f.created)

    @property
    def topics_skipped(self) -> int:
        return sum(1 for f in self.files if f.skipped)

    @property
    def files_failed(self) -> int:
        return sum(1 for f in self.files if f.error is not None)

    @property
    def questions_created(self) -> int:
        return sum(f.questions_created for f in self.files)

    @property
    def questions_skipped(self) -> int:
        return sum(f.questions_skipped for f in self.files)

    @property
    def questions_failed(self) -> int:
        return sum(f.questions_failed for f in self.files)


@dataclass
class IngestReport:
    """Aggregated outcome of a pipeline run."""

    modules: list[ModuleReport] = field(default_factory=list)

    @property
    def files_processed(self) -> int:
        return sum(len(m.files) for m in self.modules)

    @property
    def topics_created(self) -> int:
        return sum(m.topics_created for m in self.modules)

    @property
    def topics_skipped(self) -> int:
        return sum(m.topics_skipped for m in self.modules)

    @property
    def files_failed(self) -> int:
        return sum(m.files_failed for m in self.modules)

    @property
    def questions_created(self) -> int:
        return sum(m.questions_created for m in self.modules)

    @property
    def questions_skipped(self) -> int:
        return sum(m.questions_skipped for m in self.modules)

    @property
    def questions_failed(self) -> int:
        return sum(m.questions_failed for m in self.modules)

    @property
    def errors(self) -> list[tuple[str, str]]:
        """(location, message) pairs for every failure in the run."""
        errors: list[tuple[str, str]] = []
        for m in self.modules:
            if m.error is not None:
                errors.append((m.category, m.error))
            for f in m.files:
                if f.error is not None:
                    errors.append((f.path, f.error))
        return errors


class ContentPipeline:
    """Orchestrates ingestion of lesson files into the catalog.

    Per module source:
    1. Resolve (or create) the owning module
    2. Locate the content directory among the candidate roots
    3. Load each file in sorted order, reconcile its topic and, for new
       topics, its questions

    Files are processed one at a time, each inside its own store
    transaction. A failing file is logged and the loop moves on; an
    unexpected error ends the module's run in the FAILED state without
    raising.
    """

    def __init__(
        self,
        store: CatalogStore,
        settings: Settings | None = None,
        loader: Loader | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            store: Catalog store to reconcile against
            settings: Behavioral settings (default: Settings())
            loader: Lesson loader. Defaults to a LessonLoader configured from
                settings.
        """
        self.store = store
        self.settings = settings or Settings()
        self.loader = loader or LessonLoader(
            extension=self.settings.content_extension,
            default_description=self.settings.default_topic_description,
        )
        self.reconciler = Reconciler(store)
        self.state = PipelineState.IDLE

    def _transition(self, report: ModuleReport, state: PipelineState) -> None:
        logger.debug("%s: %s -> %s", report.category, self.state.value, state.value)
        self.state = state
        report.state = state

    def run(self, on_progress: ProgressCallback | None = None) -> IngestReport:
        """Ingest every configured module source in order."""
        logger.info("Loading content from markdown files...")
        report = IngestReport()
        for source in self.settings.modules:
            report.modules.append(self.run_module(source, on_progress))
        logger.info(
            "Content loading complete: %d topics, %d questions created",
            report.topics_created,
            report.questions_created,
        )
        return report

    def run_module(
        self,
        source: ModuleSource,
        on_progress: ProgressCallback | None = None,
    ) -> ModuleReport:
        """Ingest one module source. Never raises."""

        def progress(event: str, current: int, total: int, message: str = "") -> None:
            if on_progress:
                on_progress(event, current, total, message)

        self.state = PipelineState.IDLE
        report = ModuleReport(category=source.category.value)

        try:
            self._transition(report, PipelineState.RESOLVING_MODULE)
            progress("resolving", 0, 1, f"Resolving module {source.name}...")
            module = self.reconciler.resolve_module(source)
            report.module_name = module.name
            progress("resolving", 1, 1, f"Module {module.name}")

            self._transition(report, PipelineState.LISTING_FILES)
            content_dir = find_content_dir(source.content_roots)
            if content_dir is None:
                logger.warning(
                    "Content directory not found for %s: %s",
                    source.category.value,
                    ", ".join(source.content_roots),
                )
                self._transition(report, PipelineState.NO_DIRECTORY)
                return report

            report.content_dir = str(content_dir)
            files = self.loader.list_documents(content_dir)
            progress("listing", 1, 1, f"Found {len(files)} files in {content_dir}")

            self._transition(report, PipelineState.PROCESSING_FILES)
            for i, path in enumerate(files):
                progress("processing", i, len(files), path.name)
                report.files.append(self.process_file(module, path))
            progress("processing", len(files), len(files), "Processing complete")

            self._transition(report, PipelineState.DONE)
        except Exception as e:
            logger.exception("Error loading content for %s: %s", source.category.value, e)
            report.error = str(e)
            self._transition(report, PipelineState.FAILED)

        return report

    def process_file(self, module: Module, path: Path) -> FileOutcome:
        """Load one file and reconcile its topic and questions atomically."""
        outcome = FileOutcome(path=str(path))
        try:
            document = self.loader.load(path)
            outcome.title = document.title

            with self.store.transaction():
                topic_outcome = self.reconciler.upsert_topic(module, document)
                if not topic_outcome.created:
                    # Existing topics are never re-scanned for questions
                    return outcome

                outcome.created = True
                questions = self.reconciler.upsert_questions(
                    topic_outcome.topic, document.questions
                )
        except Exception as e:
            logger.error("Error loading topic from %s: %s", path, e)
            outcome.created = False
            outcome.error = str(e)
            return outcome

        outcome.questions_created = questions.created
        outcome.questions_skipped = questions.skipped
        outcome.questions_failed = questions.failed
        return outcome
