# src/lessonbank/reconciler.py
"""Idempotent reconciliation of extracted records against the catalog store."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from lessonbank.extractor import QuestionBlock, extract_difficulty
from lessonbank.models import LessonDocument, Module, Question, QuestionType, Topic
from lessonbank.settings import ModuleSource
from lessonbank.stores import CatalogStore

logger = logging.getLogger(__name__)


@dataclass
class PositionCounter:
    """Running count of a topic's questions.

    Seeded once from the store and advanced only after a question is saved,
    so positions are never re-read from the store mid-batch.
    """

    count: int = 0

    @property
    def next_position(self) -> int:
        """1-based position the next saved question receives."""
        return self.count + 1

    def advance(self) -> None:
        self.count += 1


@dataclass
class TopicOutcome:
    """Result of reconciling one topic."""

    topic: Topic
    created: bool


@dataclass
class QuestionOutcome:
    """Result of reconciling a topic's question blocks."""

    created: int = 0
    skipped: int = 0
    failed: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)


class Reconciler:
    """Decides per extracted record whether to skip it or persist it.

    Natural keys:
    - Module: category
    - Topic: (module, title)
    - Question: (topic, title)

    Existing records are never updated. A question's position is the count of
    questions the topic already had plus one at insertion time, so positions
    are only contiguous when earlier runs saved every question of the topic.
    """

    def __init__(self, store: CatalogStore) -> None:
        self.store = store

    def resolve_module(self, source: ModuleSource) -> Module:
        """Reuse the first module of the source's category, or create it."""
        existing = self.store.find_modules_by_category(source.category)
        if existing:
            return existing[0]

        module = Module(
            name=source.name,
            description=source.description,
            category=source.category,
            order_index=source.order_index,
        )
        self.store.save_module(module)
        logger.info("Created module: %s (%s)", module.name, module.category.value)
        return module

    def upsert_topic(self, module: Module, document: LessonDocument) -> TopicOutcome:
        """Create the document's topic unless (module, title) already exists."""
        existing = self.store.find_topic_by_module_and_title(module.id, document.title)
        if existing is not None:
            logger.info("Topic already exists: %s", document.title)
            return TopicOutcome(topic=existing, created=False)

        topic = Topic(
            module_id=module.id,
            title=document.title,
            description=document.description,
            difficulty=document.difficulty,
            estimated_minutes=document.estimated_minutes,
            content=document.content,
            order_index=document.order_index,
            published=True,
        )
        self.store.save_topic(topic)
        logger.info("Loaded topic: %s (%d lines)", topic.title, document.line_count)
        return TopicOutcome(topic=topic, created=True)

    def question_counter(self, topic: Topic) -> tuple[PositionCounter, set[str]]:
        """Seed a position counter and the known titles from the store."""
        existing = self.store.find_questions_by_topic_ordered(topic.id)
        return PositionCounter(count=len(existing)), {q.title for q in existing}

    def upsert_questions(
        self,
        topic: Topic,
        blocks: Iterable[QuestionBlock],
        counter: PositionCounter | None = None,
        known_titles: set[str] | None = None,
    ) -> QuestionOutcome:
        """Save the blocks whose titles the topic does not have yet.

        A failure to save one question is logged and counted; the remaining
        blocks are still processed.

        Args:
            topic: Owning topic
            blocks: Question blocks in source order
            counter: Position counter for the topic. Seeded from the store
                when not given.
            known_titles: Titles already present for the topic. Seeded from
                the store together with the counter when not given.
        """
        if counter is None or known_titles is None:
            seeded_counter, seeded_titles = self.question_counter(topic)
            counter = counter if counter is not None else seeded_counter
            known_titles = known_titles if known_titles is not None else seeded_titles

        outcome = QuestionOutcome()
        for block in blocks:
            if block.title in known_titles:
                outcome.skipped += 1
                continue

            question = Question(
                topic_id=topic.id,
                title=block.title,
                description=block.description,
                solution=block.solution,
                type=QuestionType.INTERVIEW,
                difficulty=extract_difficulty(block.body),
                order_index=counter.next_position,
            )
            try:
                self.store.save_question(question)
            except Exception as e:
                logger.error("Error saving question %s: %s", block.title, e)
                outcome.failed += 1
                outcome.errors.append((block.title, str(e)))
                continue

            counter.advance()
            known_titles.add(block.title)
            outcome.created += 1
            logger.info("Loaded interview question: %s", block.title)

        return outcome
