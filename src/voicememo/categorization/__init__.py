"""Transcript categorization utilities.

This module provides deterministic, local categorization of transcript
sentences and the grouped summary built from it. It is rule-based (no
network calls) so summaries can be regenerated instantly on every edit.
"""

from .rules import Category, KeyPoint, build_rules, categorize
from .summary import format_summary

__all__ = ["Category", "KeyPoint", "build_rules", "categorize", "format_summary"]
