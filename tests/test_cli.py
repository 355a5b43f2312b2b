# tests/test_cli.py
"""Tests for the CLI."""

import os

import pytest

pytest.importorskip("typer", reason="Tests require typer package (pip install lessonbank[cli])")

from typer.testing import CliRunner

from lessonbank.cli import app


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(temp_dir, monkeypatch):
    workdir = os.path.join(temp_dir, "work")
    os.makedirs(workdir)
    monkeypatch.chdir(workdir)
    monkeypatch.delenv("LESSONBANK_CONTENT_ROOTS", raising=False)


@pytest.fixture
def data_dir(temp_dir):
    return os.path.join(temp_dir, "data")


class TestCliBasics:
    def test_help(self, runner):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "lessonbank" in result.output.lower()

    def test_version(self, runner):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "lessonbank" in result.output


class TestIngestCommand:
    def test_ingest_help(self, runner):
        result = runner.invoke(app, ["ingest", "--help"])
        assert result.exit_code == 0
        assert "content" in result.output.lower()

    def test_ingest(self, runner, content_dir, data_dir):
        result = runner.invoke(app, ["ingest", content_dir, "--data-dir", data_dir, "--plain"])
        assert result.exit_code == 0
        assert "Processed 3 files" in result.output
        assert "Created 3 topics" in result.output
        assert "Created 4 questions" in result.output

    def test_ingest_twice(self, runner, content_dir, data_dir):
        runner.invoke(app, ["ingest", content_dir, "-d", data_dir, "--plain"])
        result = runner.invoke(app, ["ingest", content_dir, "-d", data_dir, "--plain"])
        assert result.exit_code == 0
        assert "Created 0 topics" in result.output
        assert "Skipped 3 existing topics" in result.output

    def test_ingest_nonexistent_dir(self, runner, temp_dir, data_dir):
        missing = os.path.join(temp_dir, "missing")
        result = runner.invoke(app, ["ingest", missing, "-d", data_dir, "--plain"])
        assert result.exit_code == 1
        assert "Directory not found" in result.output

    def test_ingest_default_roots_missing(self, runner, data_dir):
        result = runner.invoke(app, ["ingest", "-d", data_dir, "--plain"])
        assert result.exit_code == 0
        assert "Content directory not found for JAVA" in result.output
        assert "Processed 0 files" in result.output

    def test_ingest_all_files_failed(self, runner, temp_dir, data_dir):
        lessons = os.path.join(temp_dir, "broken")
        os.makedirs(lessons)
        with open(os.path.join(lessons, "01-broken.md"), "wb") as f:
            f.write(b"\xff\xfe\xfa")
        result = runner.invoke(app, ["ingest", lessons, "-d", data_dir, "--plain"])
        assert result.exit_code == 1
        assert "Failed 1 files" in result.output


class TestStatusCommand:
    def test_status_no_catalog(self, runner, data_dir):
        result = runner.invoke(app, ["status", "-d", data_dir, "--plain"])
        assert result.exit_code == 0
        assert "No catalog found." in result.output

    def test_status(self, runner, content_dir, data_dir):
        runner.invoke(app, ["ingest", content_dir, "-d", data_dir, "--plain"])
        result = runner.invoke(app, ["status", "-d", data_dir, "--plain", "--detailed"])
        assert result.exit_code == 0
        assert "Topics: 3" in result.output
        assert "Questions: 4" in result.output
        assert "Java Programming (JAVA): 3 topics, 4 questions" in result.output


class TestListCommand:
    def test_list_empty(self, runner, data_dir):
        result = runner.invoke(app, ["list", "-d", data_dir, "--plain"])
        assert result.exit_code == 0
        assert "No topics found." in result.output

    def test_list(self, runner, content_dir, data_dir):
        runner.invoke(app, ["ingest", content_dir, "-d", data_dir, "--plain"])
        result = runner.invoke(app, ["list", "-d", data_dir, "--plain"])
        assert result.exit_code == 0
        assert "Topics (3):" in result.output
        assert "[1] Variables and Types - BEGINNER, 120 min, 3 questions" in result.output


class TestCleanCommand:
    def test_clean_no_catalog(self, runner, data_dir):
        result = runner.invoke(app, ["clean", "-d", data_dir, "--force", "--plain"])
        assert result.exit_code == 1
        assert "No catalog found." in result.output

    def test_clean_force(self, runner, content_dir, data_dir):
        runner.invoke(app, ["ingest", content_dir, "-d", data_dir, "--plain"])
        result = runner.invoke(app, ["clean", "-d", data_dir, "--force", "--plain"])
        assert result.exit_code == 0
        assert "Deleted 1 modules, 3 topics and 4 questions" in result.output

    def test_clean_cancelled(self, runner, content_dir, data_dir):
        runner.invoke(app, ["ingest", content_dir, "-d", data_dir, "--plain"])
        result = runner.invoke(app, ["clean", "-d", data_dir, "--plain"], input="n\n")
        assert result.exit_code == 0
        assert "Cancelled." in result.output

    def test_clean_confirmed(self, runner, content_dir, data_dir):
        runner.invoke(app, ["ingest", content_dir, "-d", data_dir, "--plain"])
        result = runner.invoke(app, ["clean", "-d", data_dir, "--plain"], input="y\n")
        assert result.exit_code == 0
        assert "Deleted 1 modules" in result.output
