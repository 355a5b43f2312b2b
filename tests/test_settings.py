# tests/test_settings.py
"""Tests for behavioral settings."""

import pytest
from pydantic import ValidationError

from lessonbank.models import ModuleCategory
from lessonbank.settings import DEFAULT_CONTENT_ROOTS, ModuleSource, Settings


class TestModuleSource:
    def test_defaults(self):
        source = ModuleSource()
        assert source.category == ModuleCategory.JAVA
        assert source.name == "Java Programming"
        assert source.description == (
            "Master Java programming from fundamentals to advanced concepts"
        )
        assert source.order_index == 1
        assert source.content_roots == ["content/java", "../content/java"]

    def test_roots_not_shared(self):
        source = ModuleSource()
        source.content_roots.append("elsewhere")
        assert ModuleSource().content_roots == DEFAULT_CONTENT_ROOTS

    def test_category_from_string(self):
        assert ModuleSource(category="ALGORITHMS").category == ModuleCategory.ALGORITHMS

    def test_unknown_category(self):
        with pytest.raises(ValidationError):
            ModuleSource(category="COOKING")


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.content_extension == ".md"
        assert settings.default_topic_description == "Learn about this Java topic"
        assert settings.modules == [ModuleSource()]

    def test_empty_extension_rejected(self):
        with pytest.raises(ValidationError):
            Settings(content_extension="")

    def test_with_content_roots(self):
        settings = Settings()
        updated = settings.with_content_roots(["lessons"])
        assert updated.modules[0].content_roots == ["lessons"]
        assert settings.modules[0].content_roots == DEFAULT_CONTENT_ROOTS

    def test_with_content_roots_keeps_other_modules(self):
        settings = Settings(
            modules=[
                ModuleSource(),
                ModuleSource(category="DATABASES", name="Databases", content_roots=["db"]),
            ]
        )
        updated = settings.with_content_roots(["lessons"])
        assert updated.modules[0].content_roots == ["lessons"]
        assert updated.modules[1].content_roots == ["db"]

    def test_with_content_roots_no_modules(self):
        updated = Settings(modules=[]).with_content_roots(["lessons"])
        assert len(updated.modules) == 1
        assert updated.modules[0].category == ModuleCategory.JAVA
        assert updated.modules[0].content_roots == ["lessons"]
