# src/lessonbank/models/module.py
"""Module data model."""

from uuid import uuid4

from pydantic import BaseModel, Field

from lessonbank.models.enums import ModuleCategory


class Module(BaseModel):
    """A top-level content category (e.g. a language track) owning topics."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str
    description: str = ""
    category: ModuleCategory
    order_index: int = 0
