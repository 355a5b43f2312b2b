# src/lessonbank/models/enums.py
"""Closed-set tags shared by the catalog models."""

from enum import Enum


class Difficulty(str, Enum):
    """Difficulty tier of a topic or question."""

    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"


class ModuleCategory(str, Enum):
    """Top-level content category a module belongs to."""

    JAVA = "JAVA"
    DATA_STRUCTURES = "DATA_STRUCTURES"
    ALGORITHMS = "ALGORITHMS"
    SYSTEM_DESIGN = "SYSTEM_DESIGN"
    DATABASES = "DATABASES"


class QuestionType(str, Enum):
    """Kind of practice item."""

    PRACTICE = "PRACTICE"
    QUIZ = "QUIZ"
    INTERVIEW = "INTERVIEW"
