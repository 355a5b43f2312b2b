# src/lessonbank/extractor/questions.py
"""Split a topic body into embedded question blocks."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

SOLUTION_MARKER = "**Solution**:"

# A block runs from "#### Q<n>: <title>" up to the next "#### Q<n>:" marker
# or the end of the text. The title needs exactly one space after the colon.
QUESTION_PATTERN = re.compile(
    r"#### Q\d+: (?P<title>[^\n]+?)[ \t]*(?:\n|\Z)(?P<body>.*?)(?=#### Q\d+:|\Z)",
    re.DOTALL,
)


@dataclass(frozen=True)
class QuestionBlock:
    """One question carved out of a topic body."""

    title: str
    description: str
    solution: str
    body: str


def parse_block(title: str, body: str) -> QuestionBlock:
    """Split a block body into prompt and solution at the solution marker."""
    title = title.strip()
    body = body.strip()
    if SOLUTION_MARKER in body:
        description, _, solution = body.partition(SOLUTION_MARKER)
        return QuestionBlock(
            title=title,
            description=description.strip(),
            solution=solution.strip(),
            body=body,
        )
    return QuestionBlock(title=title, description=body, solution="", body=body)


class QuestionBlocks:
    """Lazy view of the question blocks in a text.

    Nothing is scanned until iteration. Each ``iter()`` rescans from the
    start, so the sequence can be walked any number of times.
    """

    def __init__(self, text: str) -> None:
        self.text = text

    def __iter__(self) -> Iterator[QuestionBlock]:
        for match in QUESTION_PATTERN.finditer(self.text):
            yield parse_block(match.group("title"), match.group("body"))

    def __repr__(self) -> str:
        return f"QuestionBlocks(len(text)={len(self.text)})"


def split_questions(text: str) -> QuestionBlocks:
    """Return the question blocks of ``text`` in source order."""
    return QuestionBlocks(text)
