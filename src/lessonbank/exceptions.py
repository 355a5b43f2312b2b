# src/lessonbank/exceptions.py
"""Exceptions raised by lessonbank."""


class LessonbankError(Exception):
    """Base class for lessonbank errors."""


class ContentReadError(LessonbankError):
    """A lesson file could not be read or decoded."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read {path}: {reason}")


class StoreError(LessonbankError):
    """The catalog store failed to read or write a record."""
