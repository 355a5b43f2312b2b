# src/lessonbank/stores/sqlite_catalog.py
"""SQLite catalog store implementation."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from lessonbank.exceptions import StoreError
from lessonbank.models import Difficulty, Module, ModuleCategory, Question, QuestionType, Topic
from lessonbank.stores.base import CatalogStore

MODULE_COLUMNS = "id, name, description, category, order_index"
TOPIC_COLUMNS = (
    "id, module_id, title, description, difficulty, estimated_minutes, "
    "content, order_index, published"
)
QUESTION_COLUMNS = "id, topic_id, title, description, solution, type, difficulty, order_index"


def _row_to_module(row: tuple) -> Module:
    return Module(
        id=row[0],
        name=row[1],
        description=row[2],
        category=ModuleCategory(row[3]),
        order_index=row[4],
    )


def _row_to_topic(row: tuple) -> Topic:
    return Topic(
        id=row[0],
        module_id=row[1],
        title=row[2],
        description=row[3],
        difficulty=Difficulty(row[4]),
        estimated_minutes=row[5],
        content=row[6],
        order_index=row[7],
        published=bool(row[8]),
    )


def _row_to_question(row: tuple) -> Question:
    return Question(
        id=row[0],
        topic_id=row[1],
        title=row[2],
        description=row[3],
        solution=row[4],
        type=QuestionType(row[5]),
        difficulty=Difficulty(row[6]),
        order_index=row[7],
    )


class SQLiteCatalogStore(CatalogStore):
    """SQLite-backed catalog store.

    Each call opens its own connection unless a ``transaction()`` block is
    active, in which case every call shares that block's connection.
    """

    def __init__(self, db_path: str) -> None:
        """Initialize the store, creating the database file and schema if needed."""
        self.db_path = db_path
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._active: sqlite3.Connection | None = None
        self._init_db()

    def _open(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    def _init_db(self) -> None:
        """Create tables if they don't exist."""
        with self._connect() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS modules (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    description TEXT NOT NULL,
                    category TEXT NOT NULL,
                    order_index INTEGER NOT NULL
                )
            """)
            conn.execute("""
                CREATE TABLE IF NOT EXISTS topics (
                    id TEXT PRIMARY KEY,
                    module_id TEXT NOT NULL REFERENCES modules(id) ON DELETE CASCADE,
                    title TEXT NOT NULL,
                    description TEXT NOT NULL,
                    difficulty TEXT NOT NULL,
                    estimated_minutes INTEGER NOT NULL,
                    content TEXT NOT NULL,
                    order_index INTEGER NOT NULL,
                    published INTEGER NOT NULL,
                    UNIQUE (module_id, title)
                )
            """)
            conn.execute("""
                CREATE TABLE IF NOT EXISTS questions (
                    id TEXT PRIMARY KEY,
                    topic_id TEXT NOT NULL REFERENCES topics(id) ON DELETE CASCADE,
                    title TEXT NOT NULL,
                    description TEXT NOT NULL,
                    solution TEXT NOT NULL,
                    type TEXT NOT NULL,
                    difficulty TEXT NOT NULL,
                    order_index INTEGER NOT NULL,
                    UNIQUE (topic_id, title)
                )
            """)
            conn.execute("CREATE INDEX IF NOT EXISTS idx_module_category ON modules(category)")
            conn.execute("CREATE INDEX IF NOT EXISTS idx_question_topic ON questions(topic_id)")

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Yield the active transaction's connection, or a fresh committed one."""
        if self._active is not None:
            try:
                yield self._active
            except sqlite3.Error as e:
                raise StoreError(str(e)) from e
            return

        conn = self._open()
        try:
            with conn:
                yield conn
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e
        finally:
            conn.close()

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Commit everything saved inside the block at once, or nothing."""
        if self._active is not None:
            yield
            return

        conn = self._open()
        self._active = conn
        try:
            with conn:
                yield
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e
        finally:
            self._active = None
            conn.close()

    def find_modules_by_category(self, category: ModuleCategory) -> list[Module]:
        """Get all modules with the given category."""
        with self._connect() as conn:
            cursor = conn.execute(
                f"SELECT {MODULE_COLUMNS} FROM modules WHERE category = ? "
                "ORDER BY order_index, rowid",
                (category.value,),
            )
            return [_row_to_module(row) for row in cursor.fetchall()]

    def find_topic_by_module_and_title(self, module_id: str, title: str) -> Topic | None:
        """Look a topic up by (module_id, title)."""
        with self._connect() as conn:
            cursor = conn.execute(
                f"SELECT {TOPIC_COLUMNS} FROM topics WHERE module_id = ? AND title = ?",
                (module_id, title),
            )
            row = cursor.fetchone()
            return _row_to_topic(row) if row else None

    def find_questions_by_topic_ordered(self, topic_id: str) -> list[Question]:
        """Get all questions of a topic, ordered by position."""
        with self._connect() as conn:
            cursor = conn.execute(
                f"SELECT {QUESTION_COLUMNS} FROM questions WHERE topic_id = ? "
                "ORDER BY order_index, rowid",
                (topic_id,),
            )
            return [_row_to_question(row) for row in cursor.fetchall()]

    def save_module(self, module: Module) -> Module:
        """Insert a module."""
        with self._connect() as conn:
            conn.execute(
                f"INSERT INTO modules ({MODULE_COLUMNS}) VALUES (?, ?, ?, ?, ?)",
                (
                    module.id,
                    module.name,
                    module.description,
                    module.category.value,
                    module.order_index,
                ),
            )
        return module

    def save_topic(self, topic: Topic) -> Topic:
        """Insert a topic."""
        with self._connect() as conn:
            conn.execute(
                f"INSERT INTO topics ({TOPIC_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
                (
                    topic.id,
                    topic.module_id,
                    topic.title,
                    topic.description,
                    topic.difficulty.value,
                    topic.estimated_minutes,
                    topic.content,
                    topic.order_index,
                    int(topic.published),
                ),
            )
        return topic

    def save_question(self, question: Question) -> Question:
        """Insert a question."""
        with self._connect() as conn:
            conn.execute(
                f"INSERT INTO questions ({QUESTION_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
                (
                    question.id,
                    question.topic_id,
                    question.title,
                    question.description,
                    question.solution,
                    question.type.value,
                    question.difficulty.value,
                    question.order_index,
                ),
            )
        return question

    def list_modules(self) -> list[Module]:
        """List all modules."""
        with self._connect() as conn:
            cursor = conn.execute(
                f"SELECT {MODULE_COLUMNS} FROM modules ORDER BY order_index, rowid"
            )
            return [_row_to_module(row) for row in cursor.fetchall()]

    def list_topics(self, module_id: str | None = None) -> list[Topic]:
        """List topics, optionally for one module."""
        with self._connect() as conn:
            if module_id is None:
                cursor = conn.execute(
                    f"SELECT {TOPIC_COLUMNS} FROM topics ORDER BY order_index, title"
                )
            else:
                cursor = conn.execute(
                    f"SELECT {TOPIC_COLUMNS} FROM topics WHERE module_id = ? "
                    "ORDER BY order_index, title",
                    (module_id,),
                )
            return [_row_to_topic(row) for row in cursor.fetchall()]

    def count_modules(self) -> int:
        """Count the modules in the store."""
        with self._connect() as conn:
            count = conn.execute("SELECT COUNT(id) FROM modules").fetchone()
            return count[0] if count else 0

    def count_topics(self, module_id: str | None = None) -> int:
        """Count topics, optionally for one module."""
        with self._connect() as conn:
            if module_id is None:
                count = conn.execute("SELECT COUNT(id) FROM topics").fetchone()
            else:
                count = conn.execute(
                    "SELECT COUNT(id) FROM topics WHERE module_id = ?", (module_id,)
                ).fetchone()
            return count[0] if count else 0

    def count_questions(self, topic_id: str | None = None) -> int:
        """Count questions, optionally for one topic."""
        with self._connect() as conn:
            if topic_id is None:
                count = conn.execute("SELECT COUNT(id) FROM questions").fetchone()
            else:
                count = conn.execute(
                    "SELECT COUNT(id) FROM questions WHERE topic_id = ?", (topic_id,)
                ).fetchone()
            return count[0] if count else 0

    def clear(self) -> tuple[int, int, int]:
        """Delete everything, children first."""
        with self._connect() as conn:
            questions = conn.execute("DELETE FROM questions").rowcount
            topics = conn.execute("DELETE FROM topics").rowcount
            modules = conn.execute("DELETE FROM modules").rowcount
        return modules, topics, questions
