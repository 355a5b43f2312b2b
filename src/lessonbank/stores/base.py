# src/lessonbank/stores/base.py
"""Abstract base class for catalog storage."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import AbstractContextManager

from lessonbank.models import Module, ModuleCategory, Question, Topic


class CatalogStore(ABC):
    """Persistence boundary for modules, topics and questions.

    The ingestion pipeline only looks records up and saves new ones.
    ``clear`` exists for the administrative clean command.
    """

    @abstractmethod
    def find_modules_by_category(self, category: ModuleCategory) -> list[Module]:
        """Get all modules with the given category, ordered by order_index."""
        ...

    @abstractmethod
    def find_topic_by_module_and_title(self, module_id: str, title: str) -> Topic | None:
        """Look a topic up by its natural key. Returns None if not found."""
        ...

    @abstractmethod
    def find_questions_by_topic_ordered(self, topic_id: str) -> list[Question]:
        """Get all questions of a topic, ordered by order_index."""
        ...

    @abstractmethod
    def save_module(self, module: Module) -> Module:
        """Persist a new module and return it."""
        ...

    @abstractmethod
    def save_topic(self, topic: Topic) -> Topic:
        """Persist a new topic and return it."""
        ...

    @abstractmethod
    def save_question(self, question: Question) -> Question:
        """Persist a new question and return it."""
        ...

    @abstractmethod
    def transaction(self) -> AbstractContextManager[None]:
        """Group writes into one atomic unit of work.

        Everything saved inside the block is committed together when it exits
        normally and rolled back when it raises. Nested blocks join the
        outermost one.
        """
        ...

    @abstractmethod
    def list_modules(self) -> list[Module]:
        """List all modules ordered by order_index."""
        ...

    @abstractmethod
    def list_topics(self, module_id: str | None = None) -> list[Topic]:
        """List topics, optionally restricted to one module, ordered by order_index."""
        ...

    @abstractmethod
    def count_modules(self) -> int:
        """Count the modules in the store."""
        ...

    @abstractmethod
    def count_topics(self, module_id: str | None = None) -> int:
        """Count topics, optionally restricted to one module."""
        ...

    @abstractmethod
    def count_questions(self, topic_id: str | None = None) -> int:
        """Count questions, optionally restricted to one topic."""
        ...

    @abstractmethod
    def clear(self) -> tuple[int, int, int]:
        """Delete every question, topic and module.

        Returns:
            Tuple of (modules_deleted, topics_deleted, questions_deleted)
        """
        ...

    def iter_topics(self) -> Iterator[tuple[Module, Topic]]:
        """Yield (module, topic) pairs in catalog order."""
        for module in self.list_modules():
            for topic in self.list_topics(module.id):
                yield module, topic
