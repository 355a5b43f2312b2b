"""Shared pytest fixtures."""

import os
import tempfile

import pytest

VARIABLES_MD = """# Variables and Types - Java Basics
Learn variable declarations.
**Difficulty**: Beginner
Estimated Time: 1-2 hours

## Overview

Variables hold values.

#### Q1: What is a variable?
A named storage location.
**Solution**: Use a declaration statement.

#### Q2: What is a primitive type?
A built-in value type.
**Solution**: int, long, double, boolean and friends.

#### Q3: What does final do?
**Difficulty**: Intermediate
Prevents reassignment.
"""

OPERATORS_MD = """# Operators
Arithmetic, relational and logical operators.
**Difficulty**: Intermediate
Estimated Time: 2-3 hours

#### Q1: What is integer division?
Division that truncates toward zero.
"""

NOTES_MD = """Just some notes without a heading.
Difficulty: advanced
"""


@pytest.fixture
def temp_dir():
    """Create a temporary directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def store(temp_dir):
    """Create a SQLiteCatalogStore in a temporary directory."""
    from lessonbank.stores import SQLiteCatalogStore

    return SQLiteCatalogStore(os.path.join(temp_dir, "data", "catalog.db"))


@pytest.fixture
def content_dir(temp_dir):
    """Create a lesson directory with a few markdown files and one non-lesson file."""
    path = os.path.join(temp_dir, "content", "java")
    os.makedirs(path)
    files = {
        "01-variables.md": VARIABLES_MD,
        "02-operators.md": OPERATORS_MD,
        "notes.md": NOTES_MD,
        "README.txt": "Not a lesson.",
    }
    for name, text in files.items():
        with open(os.path.join(path, name), "w", encoding="utf-8") as f:
            f.write(text)
    return path
