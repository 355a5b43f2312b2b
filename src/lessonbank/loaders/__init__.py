# src/lessonbank/loaders/__init__.py
"""File loaders for lessonbank."""

from lessonbank.loaders.base import Loader
from lessonbank.loaders.lesson import LessonLoader, find_content_dir

__all__ = ["Loader", "LessonLoader", "find_content_dir"]
