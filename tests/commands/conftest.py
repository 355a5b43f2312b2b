"""Fixtures for command tests."""

import os

import pytest


@pytest.fixture(autouse=True)
def isolated_cwd(temp_dir, monkeypatch):
    """Run commands from an empty directory so no stray config file is found."""
    workdir = os.path.join(temp_dir, "work")
    os.makedirs(workdir)
    monkeypatch.chdir(workdir)
    monkeypatch.delenv("LESSONBANK_CONTENT_ROOTS", raising=False)
    monkeypatch.delenv("LESSONBANK_CONTENT_EXTENSION", raising=False)


@pytest.fixture
def data_dir(temp_dir):
    return os.path.join(temp_dir, "data")
