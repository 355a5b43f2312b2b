# src/lessonbank/__init__.py
"""lessonbank - lesson catalog ingestion.

Turns a directory of markdown lesson files into modules, topics and embedded
practice questions. Ingestion is idempotent: running it again over an
unchanged directory creates nothing new.

Quick Start:
    from lessonbank import ContentPipeline, Settings, SQLiteCatalogStore

    store = SQLiteCatalogStore("./lessonbank_data/catalog.db")
    report = ContentPipeline(store, Settings()).run()
    print(report.topics_created, report.questions_created)
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("lessonbank")
except PackageNotFoundError:
    __version__ = "unknown"

from lessonbank.exceptions import ContentReadError, LessonbankError, StoreError
from lessonbank.extractor import QuestionBlock, split_questions
from lessonbank.loaders import LessonLoader, Loader, find_content_dir
from lessonbank.models import (
    Difficulty,
    LessonDocument,
    Module,
    ModuleCategory,
    Question,
    QuestionType,
    Topic,
)
from lessonbank.pipeline import ContentPipeline, IngestReport, PipelineState
from lessonbank.reconciler import PositionCounter, Reconciler
from lessonbank.settings import ModuleSource, Settings
from lessonbank.stores import CatalogStore, SQLiteCatalogStore

__all__ = [
    # Version
    "__version__",
    # Models
    "Difficulty",
    "LessonDocument",
    "Module",
    "ModuleCategory",
    "Question",
    "QuestionType",
    "Topic",
    # Errors
    "LessonbankError",
    "ContentReadError",
    "StoreError",
    # Extraction and loading
    "QuestionBlock",
    "split_questions",
    "Loader",
    "LessonLoader",
    "find_content_dir",
    # Storage
    "CatalogStore",
    "SQLiteCatalogStore",
    # Pipeline
    "ContentPipeline",
    "IngestReport",
    "PipelineState",
    "PositionCounter",
    "Reconciler",
    # Configuration
    "ModuleSource",
    "Settings",
]
