# src/lessonbank/commands/__init__.py
"""UI-agnostic command layer for lessonbank.

Commands return data structures, allowing UIs to render results appropriately.

Usage:
    from lessonbank.commands import ingest, status

    result = ingest.ingest("./content/java", on_progress=my_callback)
    result = status.status(detailed=True)
"""

from lessonbank.commands import clean, ingest, status
from lessonbank.commands import list as list_cmd
from lessonbank.commands.base import (
    CleanResult,
    CommandResult,
    CommandStage,
    ConfirmCallback,
    ConfirmRequest,
    FileIngestResult,
    IngestResult,
    ListResult,
    ModuleInfo,
    ProgressCallback,
    ProgressUpdate,
    StatusResult,
    TopicInfo,
)

__all__ = [
    # Base types
    "CommandStage",
    "ProgressUpdate",
    "ProgressCallback",
    "ConfirmRequest",
    "ConfirmCallback",
    "CommandResult",
    # Result types
    "IngestResult",
    "FileIngestResult",
    "StatusResult",
    "ModuleInfo",
    "ListResult",
    "TopicInfo",
    "CleanResult",
    # Command modules
    "ingest",
    "status",
    "list_cmd",
    "clean",
]
