# src/lessonbank/extractor/fields.py
"""Heuristic field extraction from lesson markdown.

All functions are pure: they take raw document text (or a filename) and
return a scalar. None of them raise on odd input; missing markers resolve to
the documented defaults.
"""

from __future__ import annotations

import re

from lessonbank.models.enums import Difficulty

DEFAULT_DESCRIPTION = "Learn about this Java topic"
DEFAULT_ESTIMATED_MINUTES = 180
FALLBACK_ORDER_INDEX = 999
UNTITLED = "Untitled"

TITLE_MARKER = "# "
TITLE_SEPARATOR = " - "

# Evaluated first-match-wins. Beginner is checked before the other tiers
# regardless of where the markers appear in the document.
DIFFICULTY_MARKERS: tuple[tuple[tuple[str, ...], Difficulty], ...] = (
    (("difficulty**: beginner", "difficulty: beginner"), Difficulty.BEGINNER),
    (("difficulty**: intermediate", "difficulty: intermediate"), Difficulty.INTERMEDIATE),
    (("difficulty**: advanced", "difficulty: advanced"), Difficulty.ADVANCED),
)

ESTIMATED_TIME_PHRASE = "estimated time"

# Checked in this order against the first "estimated time" line.
ESTIMATED_TIME_MINUTES: tuple[tuple[str, int], ...] = (
    ("2-3 hours", 180),
    ("3-4 hours", 240),
    ("1-2 hours", 120),
)

_ORDER_PREFIX = re.compile(r"[+-]?[0-9]+")

# Positions are stored as 32-bit integers.
ORDER_INDEX_MIN = -(2**31)
ORDER_INDEX_MAX = 2**31 - 1


def extract_title(text: str, fallback_name: str, extension: str = ".md") -> str:
    """Return the text of the first top-level heading.

    The heading is cut at the first " - " separator. Without a usable heading
    the title is derived from ``fallback_name``: the extension is stripped and
    dashes become spaces.
    """
    for line in text.splitlines():
        if line.startswith(TITLE_MARKER):
            title = line[len(TITLE_MARKER) :].split(TITLE_SEPARATOR)[0].strip()
            if title:
                return title
            break

    name = fallback_name
    if extension and name.endswith(extension):
        name = name[: -len(extension)]
    name = name.replace("-", " ").strip()
    return name or UNTITLED


def extract_description(text: str, default: str = DEFAULT_DESCRIPTION) -> str:
    """Return the first non-blank line that is not a heading."""
    for line in text.splitlines():
        if line.strip() and not line.startswith("#"):
            return line.strip()
    return default


def extract_difficulty(text: str) -> Difficulty:
    """Detect the difficulty tier from ``difficulty: <tier>`` markers.

    Defaults to BEGINNER when no marker is present.
    """
    lowered = text.lower()
    for patterns, tier in DIFFICULTY_MARKERS:
        if any(pattern in lowered for pattern in patterns):
            return tier
    return Difficulty.BEGINNER


def extract_estimated_minutes(text: str) -> int:
    """Map the first "Estimated Time" line to a duration in minutes."""
    for line in text.splitlines():
        if ESTIMATED_TIME_PHRASE in line.lower():
            for literal, minutes in ESTIMATED_TIME_MINUTES:
                if literal in line:
                    return minutes
            return DEFAULT_ESTIMATED_MINUTES
    return DEFAULT_ESTIMATED_MINUTES


def extract_order_index(file_name: str) -> int:
    """Parse the numeric prefix of a filename like ``01-variables.md``.

    Names without a numeric prefix, or with one outside the 32-bit range,
    sort last.
    """
    prefix = file_name.split("-")[0]
    if _ORDER_PREFIX.fullmatch(prefix):
        value = int(prefix)
        if ORDER_INDEX_MIN <= value <= ORDER_INDEX_MAX:
            return value
    return FALLBACK_ORDER_INDEX
