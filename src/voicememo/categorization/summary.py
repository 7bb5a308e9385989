"""Grouped plain-text summary report."""

from __future__ import annotations

from typing import Sequence

from .rules import Category, KeyPoint

SUMMARY_TITLE = "Riassunto Dettagliato:"

# Section order is fixed.
SECTION_TITLES: list[tuple[Category, str]] = [
    (Category.IMPORTANT, "PUNTI IMPORTANTI:"),
    (Category.ACTION, "AZIONI DA INTRAPRENDERE:"),
    (Category.DECISION, "DECISIONI PRESE:"),
    (Category.OTHER, "ALTRI PUNTI CHIAVE:"),
]


def format_section(title: str, points: Sequence[KeyPoint]) -> str:
    items = "\n".join(f"{n}. {point.text}" for n, point in enumerate(points, start=1))
    return f"{title}\n{items}"


def format_summary(points: Sequence[KeyPoint]) -> str:
    """Render KeyPoints as four numbered sections, one per category.

    Numbering restarts at 1 in each section. A section with no points keeps
    its header and an empty body.
    """
    sections = [
        format_section(title, [p for p in points if p.category == category])
        for category, title in SECTION_TITLES
    ]
    return f"{SUMMARY_TITLE}\n\n" + "\n\n".join(sections)
