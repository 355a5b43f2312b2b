# src/lessonbank/models/question.py
"""Question data model."""

from uuid import uuid4

from pydantic import BaseModel, Field

from lessonbank.models.enums import Difficulty, QuestionType


class Question(BaseModel):
    """A practice item parsed out of a topic body.

    (topic_id, title) is the natural key.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    topic_id: str
    title: str
    description: str
    solution: str = ""
    type: QuestionType = QuestionType.INTERVIEW
    difficulty: Difficulty = Difficulty.BEGINNER
    order_index: int = 1  # 1-based position within the topic
