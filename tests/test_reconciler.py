# tests/test_reconciler.py
"""Tests for the reconciler."""

from unittest.mock import patch

import pytest

from lessonbank.exceptions import StoreError
from lessonbank.extractor import QuestionBlock, split_questions
from lessonbank.models import Difficulty, LessonDocument, ModuleCategory, Question, QuestionType
from lessonbank.reconciler import PositionCounter, Reconciler
from lessonbank.settings import ModuleSource


def make_document(title="Variables", content="# Variables\n", **overrides):
    fields = {
        "path": "content/java/01-variables.md",
        "file_name": "01-variables.md",
        "title": title,
        "description": "Learn variables.",
        "difficulty": Difficulty.BEGINNER,
        "estimated_minutes": 120,
        "order_index": 1,
        "content": content,
    }
    fields.update(overrides)
    return LessonDocument(**fields)


def block(title, description="d", solution=""):
    return QuestionBlock(title=title, description=description, solution=solution, body=description)


@pytest.fixture
def reconciler(store):
    return Reconciler(store)


@pytest.fixture
def module(reconciler):
    return reconciler.resolve_module(ModuleSource())


class TestPositionCounter:
    def test_starts_at_one(self):
        assert PositionCounter().next_position == 1

    def test_advance(self):
        counter = PositionCounter(count=2)
        counter.advance()
        assert counter.next_position == 4


class TestResolveModule:
    def test_creates_with_defaults(self, store, reconciler):
        module = reconciler.resolve_module(ModuleSource())
        assert module.name == "Java Programming"
        assert module.description.startswith("Master Java programming")
        assert module.category == ModuleCategory.JAVA
        assert module.order_index == 1
        assert store.count_modules() == 1

    def test_reuses_existing(self, store, reconciler):
        first = reconciler.resolve_module(ModuleSource())
        second = reconciler.resolve_module(ModuleSource(name="Renamed"))
        assert second.id == first.id
        assert second.name == "Java Programming"
        assert store.count_modules() == 1

    def test_one_module_per_category(self, store, reconciler):
        reconciler.resolve_module(ModuleSource())
        reconciler.resolve_module(ModuleSource(category=ModuleCategory.ALGORITHMS, name="Algo"))
        assert store.count_modules() == 2


class TestUpsertTopic:
    def test_creates_topic(self, store, reconciler, module):
        outcome = reconciler.upsert_topic(module, make_document())
        assert outcome.created is True
        assert outcome.topic.published is True
        assert outcome.topic.module_id == module.id
        assert outcome.topic.estimated_minutes == 120
        assert store.count_topics() == 1

    def test_existing_topic_is_terminal(self, store, reconciler, module):
        first = reconciler.upsert_topic(module, make_document())
        second = reconciler.upsert_topic(
            module, make_document(description="Changed", difficulty=Difficulty.ADVANCED)
        )
        assert second.created is False
        assert second.topic.id == first.topic.id
        assert second.topic.description == "Learn variables."
        assert store.count_topics() == 1


class TestUpsertQuestions:
    def test_positions_one_to_three(self, store, reconciler, module):
        content = (
            "#### Q1: One\nA\n**Solution**: a\n"
            "#### Q2: Two\nB\n"
            "#### Q3: Three\n**Difficulty**: Advanced\nC\n"
        )
        topic = reconciler.upsert_topic(module, make_document(content=content)).topic

        outcome = reconciler.upsert_questions(topic, split_questions(content))

        assert outcome.created == 3
        questions = store.find_questions_by_topic_ordered(topic.id)
        assert [q.order_index for q in questions] == [1, 2, 3]
        assert [q.title for q in questions] == ["One", "Two", "Three"]
        assert all(q.type == QuestionType.INTERVIEW for q in questions)
        assert questions[0].solution == "a"
        assert questions[1].solution == ""
        assert questions[2].difficulty == Difficulty.ADVANCED

    def test_skips_existing_titles(self, store, reconciler, module):
        topic = reconciler.upsert_topic(module, make_document()).topic
        reconciler.upsert_questions(topic, [block("One"), block("Two")])

        outcome = reconciler.upsert_questions(topic, [block("Two"), block("Three")])

        assert outcome.created == 1
        assert outcome.skipped == 1
        questions = store.find_questions_by_topic_ordered(topic.id)
        positions = {q.title: q.order_index for q in questions}
        assert positions == {"One": 1, "Two": 2, "Three": 3}

    def test_duplicate_titles_in_one_batch(self, store, reconciler, module):
        topic = reconciler.upsert_topic(module, make_document()).topic
        outcome = reconciler.upsert_questions(topic, [block("Same"), block("Same")])
        assert outcome.created == 1
        assert outcome.skipped == 1

    def test_explicit_counter(self, store, reconciler, module):
        topic = reconciler.upsert_topic(module, make_document()).topic
        counter = PositionCounter(count=10)
        reconciler.upsert_questions(topic, [block("A"), block("B")], counter=counter)
        assert counter.count == 12
        questions = store.find_questions_by_topic_ordered(topic.id)
        assert [q.order_index for q in questions] == [11, 12]

    def test_failure_isolated(self, store, reconciler, module):
        topic = reconciler.upsert_topic(module, make_document()).topic
        real_save = store.save_question

        def flaky_save(question: Question) -> Question:
            if question.title == "Bad":
                raise StoreError("disk full")
            return real_save(question)

        with patch.object(store, "save_question", side_effect=flaky_save):
            outcome = reconciler.upsert_questions(
                topic, [block("Good"), block("Bad"), block("Also good")]
            )

        assert outcome.created == 2
        assert outcome.failed == 1
        assert outcome.errors == [("Bad", "disk full")]
        positions = [q.order_index for q in store.find_questions_by_topic_ordered(topic.id)]
        assert positions == [1, 2]
