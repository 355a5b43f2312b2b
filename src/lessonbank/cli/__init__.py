# src/lessonbank/cli/__init__.py
"""CLI package for lessonbank.

This package provides the command-line interface using Typer.
The CLI is a thin wrapper around the commands layer.
"""

from lessonbank.cli.app import app, console

__all__ = ["app", "console"]
