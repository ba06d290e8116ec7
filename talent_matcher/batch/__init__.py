"""Batch scoring, ranking and report export."""

from .scorer import BatchMatcher, MatchResult, importance_for, rating_for
from .report import ReportGenerator

__all__ = [
    "BatchMatcher",
    "MatchResult",
    "ReportGenerator",
    "importance_for",
    "rating_for",
]
