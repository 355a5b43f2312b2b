# src/lessonbank/commands/clean.py
"""Clean command - remove every record from the catalog.

This is the administrative reset. The ingestion pipeline itself never
deletes anything.
"""

from __future__ import annotations

import os
from pathlib import Path

from lessonbank.commands.base import CleanResult, ConfirmCallback, ConfirmRequest
from lessonbank.config import CATALOG_DB, get_store, load_config, resolve_data_dir
from lessonbank.exceptions import StoreError


def clean(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    on_confirm: ConfirmCallback | None = None,
) -> CleanResult:
    """Delete all questions, topics and modules.

    Args:
        data_dir: Override data directory
        config_path: Override config file path
        on_confirm: Optional callback for confirmation. Return True to
            proceed, False to cancel. If None, deletion proceeds without
            confirmation (equivalent to --force).

    Returns:
        CleanResult with deletion statistics, or cancelled result
    """
    config = load_config(config_path)
    effective_data_dir = resolve_data_dir(data_dir, config)

    if not os.path.exists(os.path.join(effective_data_dir, CATALOG_DB)):
        return CleanResult(success=False, error="No catalog found.")

    try:
        store = get_store(effective_data_dir)

        if on_confirm is not None:
            request = ConfirmRequest(
                message="Clean the catalog?",
                details=(
                    f"This will remove {store.count_modules()} modules, "
                    f"{store.count_topics()} topics and "
                    f"{store.count_questions()} questions."
                ),
            )
            if not on_confirm(request):
                return CleanResult(success=False, error="Cancelled.")

        modules, topics, questions = store.clear()
    except (OSError, StoreError) as e:
        return CleanResult(success=False, error=f"Failed to access catalog: {e}")

    return CleanResult(
        success=True,
        modules_deleted=modules,
        topics_deleted=topics,
        questions_deleted=questions,
    )
