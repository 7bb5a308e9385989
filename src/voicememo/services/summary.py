"""Summary generation service.

Binds the categorizer to the configured threshold and keyword lists and
produces both the KeyPoints and the formatted report for a transcript.
"""

import logging
from dataclasses import dataclass

from voicememo.categorization.rules import (
    DEFAULT_MIN_LENGTH,
    DEFAULT_RULES,
    KeyPoint,
    build_rules,
    categorize,
)
from voicememo.categorization.summary import format_summary
from voicememo.config import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SummaryResult:
    key_points: list[KeyPoint]
    summary: str


class SummaryService:
    """Categorize transcript text and format the grouped summary."""

    def __init__(self, min_length: int = DEFAULT_MIN_LENGTH, rules=DEFAULT_RULES):
        """Initialize the service.

        Args:
            min_length: Sentence length threshold passed to ``categorize``
            rules: Ordered category rules from ``build_rules``
        """
        self.min_length = min_length
        self.rules = rules

    @classmethod
    def from_settings(cls, settings: Settings) -> "SummaryService":
        """Build a service from the categorization section of the settings."""
        return cls(
            min_length=settings.min_sentence_length,
            rules=build_rules(
                important=settings.important_keywords,
                action=settings.action_keywords,
                decision=settings.decision_keywords,
            ),
        )

    def key_points(self, text: str) -> list[KeyPoint]:
        return categorize(text, min_length=self.min_length, rules=self.rules)

    def generate(self, text: str) -> SummaryResult:
        """Recompute KeyPoints and the report from the current text.

        Args:
            text: Transcript snapshot

        Returns:
            SummaryResult with the KeyPoints and the formatted report
        """
        points = self.key_points(text)
        logger.debug(
            "Summary generated",
            extra={"key_points": len(points), "chars": len(text or "")},
        )
        return SummaryResult(key_points=points, summary=format_summary(points))
