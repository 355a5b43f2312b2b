# src/lessonbank/loaders/lesson.py
"""Markdown lesson loader."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from lessonbank.exceptions import ContentReadError
from lessonbank.extractor import (
    DEFAULT_DESCRIPTION,
    extract_description,
    extract_difficulty,
    extract_estimated_minutes,
    extract_order_index,
    extract_title,
)
from lessonbank.loaders.base import Loader
from lessonbank.models import LessonDocument

logger = logging.getLogger(__name__)


def find_content_dir(candidates: Iterable[str | Path]) -> Path | None:
    """Return the first candidate that is an existing directory.

    Relative candidates resolve against the current working directory.
    """
    for candidate in candidates:
        path = Path(candidate)
        if path.is_dir():
            return path
        logger.debug("Content directory candidate not found: %s", path)
    return None


class LessonLoader(Loader):
    """Load markdown lesson files into LessonDocuments.

    Files are listed in lexicographic name order. That order matches the
    numeric prefix order only while prefixes share the same zero-padded
    width, which is why each document also carries ``order_index``.
    """

    def __init__(
        self,
        extension: str = ".md",
        default_description: str = DEFAULT_DESCRIPTION,
    ) -> None:
        """Initialize the loader.

        Args:
            extension: Filename suffix of lesson files (case-sensitive)
            default_description: Description used when a file has no body text
        """
        if not extension:
            raise ValueError("extension must not be empty")
        self.extension = extension
        self.default_description = default_description

    def supports(self, path: str | Path) -> bool:
        """Check if the filename ends with the lesson extension."""
        return Path(path).name.endswith(self.extension)

    def list_documents(self, directory: str | Path) -> list[Path]:
        """List lesson files directly inside ``directory``, sorted by name."""
        directory = Path(directory)
        files = [
            entry for entry in directory.iterdir() if entry.is_file() and self.supports(entry)
        ]
        return sorted(files, key=lambda entry: entry.name)

    def load(self, path: str | Path) -> LessonDocument:
        """Read a lesson file and run the field extractors over it."""
        file_path = Path(path)

        try:
            content = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ContentReadError(str(file_path), str(e)) from e

        file_name = file_path.name
        return LessonDocument(
            path=str(file_path),
            file_name=file_name,
            title=extract_title(content, file_name, self.extension),
            description=extract_description(content, self.default_description),
            difficulty=extract_difficulty(content),
            estimated_minutes=extract_estimated_minutes(content),
            order_index=extract_order_index(file_name),
            content=content,
        )
