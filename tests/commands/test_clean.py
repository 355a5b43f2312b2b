# tests/commands/test_clean.py
"""Tests for the clean command."""

from lessonbank.commands import ConfirmRequest, clean, ingest, status


class TestCleanCommand:
    def test_no_catalog(self, data_dir):
        result = clean.clean(data_dir=data_dir)
        assert result.success is False
        assert result.error == "No catalog found."

    def test_clean_without_confirm(self, content_dir, data_dir):
        ingest.ingest(content_dir=content_dir, data_dir=data_dir)

        result = clean.clean(data_dir=data_dir)

        assert result.success is True
        assert result.modules_deleted == 1
        assert result.topics_deleted == 3
        assert result.questions_deleted == 4
        assert status.status(data_dir=data_dir).total_topics == 0

    def test_confirm_shows_counts(self, content_dir, data_dir):
        ingest.ingest(content_dir=content_dir, data_dir=data_dir)
        requests = []

        def confirm(request: ConfirmRequest) -> bool:
            requests.append(request)
            return True

        result = clean.clean(data_dir=data_dir, on_confirm=confirm)

        assert result.success is True
        assert "1 modules, 3 topics and 4 questions" in requests[0].details

    def test_cancelled(self, content_dir, data_dir):
        ingest.ingest(content_dir=content_dir, data_dir=data_dir)

        result = clean.clean(data_dir=data_dir, on_confirm=lambda request: False)

        assert result.success is False
        assert result.error == "Cancelled."
        assert status.status(data_dir=data_dir).total_topics == 3

    def test_ingest_after_clean(self, content_dir, data_dir):
        ingest.ingest(content_dir=content_dir, data_dir=data_dir)
        clean.clean(data_dir=data_dir)

        result = ingest.ingest(content_dir=content_dir, data_dir=data_dir)

        assert result.topics_created == 3
        assert result.total_questions == 4
