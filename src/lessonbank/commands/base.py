# src/lessonbank/commands/base.py
"""Base types for the commands layer.

This module defines the data structures used by all commands:
- Progress callbacks for long-running operations
- Confirm callbacks for destructive commands (like clean)
- Result types for each command
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum


class CommandStage(Enum):
    """Stages of command execution for progress reporting."""

    # Ingest stages
    RESOLVING = "Resolving"
    LISTING = "Listing"
    PROCESSING = "Processing"

    # General stages
    LOADING = "Loading"
    COMPLETE = "Complete"


@dataclass
class ProgressUpdate:
    """Progress update for long-running operations.

    Attributes:
        stage: Current stage of the operation
        current: Current item number
        total: Total number of items (0 for indeterminate)
        message: Optional status message
    """

    stage: CommandStage
    current: int
    total: int
    message: str | None = None

    @property
    def is_indeterminate(self) -> bool:
        """True if progress is indeterminate (total unknown)."""
        return self.total == 0

    @property
    def percentage(self) -> int:
        """Progress as percentage (0-100). Returns 0 if indeterminate."""
        if self.total == 0:
            return 0
        return int(100 * self.current / self.total)


# Callback type for progress updates
ProgressCallback = Callable[[ProgressUpdate], None]


@dataclass
class ConfirmRequest:
    """Request for a yes/no confirmation before a destructive action."""

    message: str
    details: str | None = None


# Callback type for confirmations - returns True to proceed
ConfirmCallback = Callable[[ConfirmRequest], bool]


@dataclass
class CommandResult:
    """Base result type for commands."""

    success: bool
    error: str | None = None


@dataclass
class FileIngestResult:
    """Result for a single lesson file."""

    filepath: str
    skipped: bool
    title: str | None = None
    reason: str | None = None  # Reason if skipped or failed
    questions: int = 0
    questions_skipped: int = 0
    questions_failed: int = 0


@dataclass
class IngestResult(CommandResult):
    """Result of the ingest command.

    Attributes:
        files_processed: Number of lesson files seen
        topics_created: Topics created in this run
        topics_skipped: Topics that already existed
        files_failed: Files that could not be ingested
        total_questions: Questions created in this run
        questions_skipped: Questions that already existed
        questions_failed: Questions that could not be saved
        missing_dirs: Module categories whose content directory was not found
        file_results: Per-file results
        errors: List of (location, error_message) for failures
    """

    files_processed: int = 0
    topics_created: int = 0
    topics_skipped: int = 0
    files_failed: int = 0
    total_questions: int = 0
    questions_skipped: int = 0
    questions_failed: int = 0
    missing_dirs: list[str] = field(default_factory=list)
    file_results: list[FileIngestResult] = field(default_factory=list)
    errors: list[tuple[str, str]] = field(default_factory=list)


@dataclass
class ModuleInfo:
    """Information about a catalog module."""

    name: str
    category: str
    topic_count: int = 0
    question_count: int = 0


@dataclass
class StatusResult(CommandResult):
    """Result of the status command."""

    total_modules: int = 0
    total_topics: int = 0
    total_questions: int = 0
    modules: list[ModuleInfo] = field(default_factory=list)


@dataclass
class TopicInfo:
    """Information about a catalog topic."""

    module: str
    title: str
    difficulty: str
    estimated_minutes: int
    order_index: int
    question_count: int = 0


@dataclass
class ListResult(CommandResult):
    """Result of the list command."""

    topics: list[TopicInfo] = field(default_factory=list)


@dataclass
class CleanResult(CommandResult):
    """Result of the clean command."""

    modules_deleted: int = 0
    topics_deleted: int = 0
    questions_deleted: int = 0
