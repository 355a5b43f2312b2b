# tests/commands/test_status.py
"""Tests for the status command."""

import os

from lessonbank.commands import ingest, status


class TestStatusCommand:
    """Tests for status.status()."""

    def test_status_no_catalog(self, temp_dir) -> None:
        """Status with no catalog returns success with zero counts."""
        result = status.status(data_dir=os.path.join(temp_dir, "nonexistent"))

        assert result.success is True
        assert result.total_modules == 0
        assert result.total_topics == 0
        assert result.total_questions == 0
        assert result.modules == []

    def test_status_does_not_create_catalog(self, data_dir) -> None:
        status.status(data_dir=data_dir)
        assert not os.path.exists(os.path.join(data_dir, "catalog.db"))

    def test_status_counts(self, content_dir, data_dir) -> None:
        ingest.ingest(content_dir=content_dir, data_dir=data_dir)

        result = status.status(data_dir=data_dir)

        assert result.success is True
        assert result.total_modules == 1
        assert result.total_topics == 3
        assert result.total_questions == 4
        assert result.modules == []

    def test_status_detailed(self, content_dir, data_dir) -> None:
        ingest.ingest(content_dir=content_dir, data_dir=data_dir)

        result = status.status(data_dir=data_dir, detailed=True)

        assert len(result.modules) == 1
        module = result.modules[0]
        assert module.name == "Java Programming"
        assert module.category == "JAVA"
        assert module.topic_count == 3
        assert module.question_count == 4
