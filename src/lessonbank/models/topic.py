# src/lessonbank/models/topic.py
"""Topic data model."""

from uuid import uuid4

from pydantic import BaseModel, Field

from lessonbank.models.enums import Difficulty


class Topic(BaseModel):
    """One lesson document belonging to a module.

    (module_id, title) is the natural key.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    module_id: str
    title: str
    description: str
    difficulty: Difficulty = Difficulty.BEGINNER
    estimated_minutes: int = 180
    content: str = ""
    order_index: int = 999  # From the source filename, not listing order
    published: bool = True
