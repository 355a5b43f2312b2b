# src/lessonbank/models/__init__.py
"""Data models for lessonbank."""

from lessonbank.models.document import LessonDocument
from lessonbank.models.enums import Difficulty, ModuleCategory, QuestionType
from lessonbank.models.module import Module
from lessonbank.models.question import Question
from lessonbank.models.topic import Topic

__all__ = [
    "Difficulty",
    "ModuleCategory",
    "QuestionType",
    "Module",
    "Topic",
    "Question",
    "LessonDocument",
]
