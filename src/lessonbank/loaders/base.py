# src/lessonbank/loaders/base.py
"""Loader abstract base class."""

from abc import ABC, abstractmethod
from pathlib import Path

from lessonbank.models import LessonDocument


class Loader(ABC):
    """Abstract base class for lesson file loading."""

    @abstractmethod
    def load(self, path: str | Path) -> LessonDocument:
        """Read a lesson file and extract its catalog fields.

        Raises:
            ContentReadError: If the file cannot be read or decoded
        """
        ...

    @abstractmethod
    def supports(self, path: str | Path) -> bool:
        """Check if this loader handles the given path."""
        ...

    @abstractmethod
    def list_documents(self, directory: str | Path) -> list[Path]:
        """List loadable files in a directory in processing order."""
        ...
