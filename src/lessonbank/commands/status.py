# src/lessonbank/commands/status.py
"""Status command - show catalog statistics."""

from __future__ import annotations

import os
from pathlib import Path

from lessonbank.commands.base import ModuleInfo, StatusResult
from lessonbank.config import CATALOG_DB, get_store, load_config, resolve_data_dir
from lessonbank.exceptions import StoreError


def status(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    detailed: bool = False,
) -> StatusResult:
    """Get catalog statistics.

    Args:
        data_dir: Override data directory
        config_path: Override config file path
        detailed: If True, include per-module breakdown

    Returns:
        StatusResult with catalog statistics
    """
    config = load_config(config_path)
    effective_data_dir = resolve_data_dir(data_dir, config)

    if not os.path.exists(os.path.join(effective_data_dir, CATALOG_DB)):
        return StatusResult(success=True)

    try:
        store = get_store(effective_data_dir)
        result = StatusResult(
            success=True,
            total_modules=store.count_modules(),
            total_topics=store.count_topics(),
            total_questions=store.count_questions(),
        )

        if detailed:
            for module in store.list_modules():
                topics = store.list_topics(module.id)
                result.modules.append(
                    ModuleInfo(
                        name=module.name,
                        category=module.category.value,
                        topic_count=len(topics),
                        question_count=sum(store.count_questions(t.id) for t in topics),
                    )
                )
    except (OSError, StoreError) as e:
        return StatusResult(success=False, error=f"Failed to access catalog: {e}")

    return result
