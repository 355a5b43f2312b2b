# src/lessonbank/models/document.py
"""Extracted lesson document model."""

from pydantic import BaseModel

from lessonbank.extractor.questions import QuestionBlocks, split_questions
from lessonbank.models.enums import Difficulty


class LessonDocument(BaseModel):
    """Fields extracted from one lesson file, before reconciliation."""

    path: str
    file_name: str
    title: str
    description: str
    difficulty: Difficulty
    estimated_minutes: int
    order_index: int
    content: str

    @property
    def questions(self) -> QuestionBlocks:
        """Question blocks embedded in the content, split on demand."""
        return split_questions(self.content)

    @property
    def line_count(self) -> int:
        return len(self.content.splitlines())
