# src/lessonbank/settings.py
"""Behavioral settings for lessonbank.

Settings are passed programmatically. The library does not read the
environment itself; ``lessonbank.config`` builds Settings from YAML and
LESSONBANK_* variables for the CLI.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from lessonbank.extractor import DEFAULT_DESCRIPTION
from lessonbank.models import ModuleCategory

DEFAULT_CONTENT_ROOTS = ["content/java", "../content/java"]


class ModuleSource(BaseModel):
    """Where a module's lesson files live and how to create the module.

    ``content_roots`` are tried in order; the first existing directory wins.
    """

    category: ModuleCategory = ModuleCategory.JAVA
    name: str = "Java Programming"
    description: str = "Master Java programming from fundamentals to advanced concepts"
    order_index: int = 1
    content_roots: list[str] = Field(default_factory=lambda: list(DEFAULT_CONTENT_ROOTS))


class Settings(BaseModel):
    """Behavioral settings for the ingestion pipeline.

    Example:
        settings = Settings(
            modules=[
                ModuleSource(),
                ModuleSource(
                    category="ALGORITHMS",
                    name="Algorithms",
                    order_index=2,
                    content_roots=["content/algorithms"],
                ),
            ],
        )
    """

    # Lesson files
    content_extension: str = ".md"
    default_topic_description: str = DEFAULT_DESCRIPTION

    # Modules to ingest, in order
    modules: list[ModuleSource] = Field(default_factory=lambda: [ModuleSource()])

    @field_validator("content_extension")
    @classmethod
    def _check_extension(cls, value: str) -> str:
        if not value:
            raise ValueError("content_extension must not be empty")
        return value

    def with_content_roots(self, content_roots: list[str]) -> Settings:
        """Return a copy whose first module reads from ``content_roots`` only."""
        modules = [source.model_copy() for source in self.modules] or [ModuleSource()]
        modules[0] = modules[0].model_copy(update={"content_roots": list(content_roots)})
        return self.model_copy(update={"modules": modules})
