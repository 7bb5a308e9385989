"""Deterministic sentence categorization.

A transcript is split into sentences and each sentence long enough to carry
meaning is tagged with one bucket from a fixed taxonomy. Tagging is plain
keyword containment on the case-folded sentence, so the result is
explainable and identical for identical input.

The default keywords are Italian, matching the capture language.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence


class Category(str, Enum):
    IMPORTANT = "important"
    ACTION = "action"
    DECISION = "decision"
    OTHER = "other"


@dataclass(frozen=True)
class KeyPoint:
    text: str
    category: Category


DEFAULT_MIN_LENGTH = 20

DEFAULT_KEYWORDS: dict[Category, tuple[str, ...]] = {
    Category.IMPORTANT: ("importante", "fondamentale"),
    Category.ACTION: ("dobbiamo", "bisogna"),
    Category.DECISION: ("deciso", "stabilito"),
}

_SENTENCE_BOUNDARY = re.compile(r"[.!?]+")


def _keyword_pattern(keywords: Iterable[str]) -> re.Pattern[str] | None:
    words = [w.casefold() for w in keywords if w and w.strip()]
    if not words:
        return None
    return re.compile("|".join(re.escape(w) for w in words))


def build_rules(
    important: Iterable[str] = DEFAULT_KEYWORDS[Category.IMPORTANT],
    action: Iterable[str] = DEFAULT_KEYWORDS[Category.ACTION],
    decision: Iterable[str] = DEFAULT_KEYWORDS[Category.DECISION],
) -> list[tuple[Category, re.Pattern[str]]]:
    """Compile keyword lists into ordered rules.

    A category with no keywords never matches.
    """
    rules: list[tuple[Category, re.Pattern[str]]] = []
    for category, keywords in (
        (Category.IMPORTANT, important),
        (Category.ACTION, action),
        (Category.DECISION, decision),
    ):
        pattern = _keyword_pattern(keywords)
        if pattern is not None:
            rules.append((category, pattern))
    return rules


# Ordering matters: earlier matches win.
DEFAULT_RULES = build_rules()


def split_sentences(text: str | None) -> list[str]:
    """Split on any run of '.', '!' or '?', dropping empty fragments."""
    return [fragment for fragment in _SENTENCE_BOUNDARY.split(text or "") if fragment]


def categorize_sentence(
    sentence: str,
    rules: Sequence[tuple[Category, re.Pattern[str]]] = DEFAULT_RULES,
) -> Category:
    lowered = sentence.casefold()
    for category, pattern in rules:
        if pattern.search(lowered):
            return category
    return Category.OTHER


def categorize(
    text: str | None,
    *,
    min_length: int = DEFAULT_MIN_LENGTH,
    rules: Sequence[tuple[Category, re.Pattern[str]]] = DEFAULT_RULES,
) -> list[KeyPoint]:
    """Tag every sufficiently long sentence of ``text`` with a category.

    Args:
        text: Free transcript text.
        min_length: Sentences whose trimmed length is at or below this are dropped.
        rules: Ordered (category, pattern) rules; the first match wins.

    Returns:
        KeyPoints in original sentence order. Empty input gives an empty list.
    """
    points: list[KeyPoint] = []
    for fragment in split_sentences(text):
        sentence = fragment.strip()
        if len(sentence) <= min_length:
            continue
        points.append(KeyPoint(text=sentence, category=categorize_sentence(sentence, rules)))
    return points
