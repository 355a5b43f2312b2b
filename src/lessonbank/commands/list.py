# src/lessonbank/commands/list.py
"""List command - show the topics in the catalog."""

from __future__ import annotations

import os
from pathlib import Path

from lessonbank.commands.base import ListResult, TopicInfo
from lessonbank.config import CATALOG_DB, get_store, load_config, resolve_data_dir
from lessonbank.exceptions import StoreError


def list_topics(
    module: str | None = None,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> ListResult:
    """List topics in catalog order.

    Args:
        module: Only list topics of the module with this category or name
        data_dir: Override data directory
        config_path: Override config file path
    """
    config = load_config(config_path)
    effective_data_dir = resolve_data_dir(data_dir, config)

    if not os.path.exists(os.path.join(effective_data_dir, CATALOG_DB)):
        return ListResult(success=True)

    try:
        store = get_store(effective_data_dir)
        result = ListResult(success=True)
        for owner, topic in store.iter_topics():
            if module and module.upper() != owner.category.value and module != owner.name:
                continue
            result.topics.append(
                TopicInfo(
                    module=owner.name,
                    title=topic.title,
                    difficulty=topic.difficulty.value,
                    estimated_minutes=topic.estimated_minutes,
                    order_index=topic.order_index,
                    question_count=store.count_questions(topic.id),
                )
            )
    except (OSError, StoreError) as e:
        return ListResult(success=False, error=f"Failed to access catalog: {e}")

    return result
