# src/lessonbank/extractor/__init__.py
"""Pure extraction of catalog fields and question blocks from lesson text."""

from lessonbank.extractor.fields import (
    DEFAULT_DESCRIPTION,
    DEFAULT_ESTIMATED_MINUTES,
    FALLBACK_ORDER_INDEX,
    extract_description,
    extract_difficulty,
    extract_estimated_minutes,
    extract_order_index,
    extract_title,
)
from lessonbank.extractor.questions import QuestionBlock, QuestionBlocks, split_questions

__all__ = [
    "DEFAULT_DESCRIPTION",
    "DEFAULT_ESTIMATED_MINUTES",
    "FALLBACK_ORDER_INDEX",
    "extract_title",
    "extract_description",
    "extract_difficulty",
    "extract_estimated_minutes",
    "extract_order_index",
    "QuestionBlock",
    "QuestionBlocks",
    "split_questions",
]
