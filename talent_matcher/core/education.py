"""
Education Matcher - Compares education levels on an ordinal scale.
"""

from typing import Optional
import json
import logging

from .knowledge import DEFAULT_KNOWLEDGE, KnowledgeBase
from .models import EducationLevel, EducationMatch
from .text import contains_any, normalize_keyword


class EducationScorer:
    """Scores an entity's education level against the required level (0-100)."""

    # Score by how many levels the entity falls short
    GAP_SCORES = {1: 70, 2: 50}
    MIN_SCORE = 30
    # Deepest list nesting that is still walked
    MAX_DEPTH = 10

    def __init__(self, knowledge: KnowledgeBase = DEFAULT_KNOWLEDGE):
        self.knowledge = knowledge
        self.logger = logging.getLogger(self.__class__.__name__)

    def level_of(self, education) -> EducationLevel:
        """Highest education level mentioned in text, a list or JSON."""
        if isinstance(education, EducationLevel):
            return education

        text = normalize_keyword(self._to_text(education))
        if not text:
            return EducationLevel.NONE

        for level, keywords in self.knowledge.education_keywords:
            if contains_any(text, keywords):
                return level
        return EducationLevel.NONE

    def score(self, candidate_education, required_education) -> EducationMatch:
        required = self.level_of(required_education)
        actual = self.level_of(candidate_education)

        result = EducationMatch(required_level=required, actual_level=actual)
        result.score = self.score_levels(actual, required)
        return result

    def score_levels(self, actual: EducationLevel, required: EducationLevel) -> float:
        if required is EducationLevel.NONE or actual.value >= required.value:
            return 100.0

        gap = required.value - actual.value
        if gap in self.GAP_SCORES:
            return float(self.GAP_SCORES[gap])
        return float(max(self.MIN_SCORE, 80 - 15 * gap))

    def _to_text(self, education, depth: int = 0) -> str:
        if education is None or depth > self.MAX_DEPTH:
            return ""

        if isinstance(education, dict):
            return " ".join(
                self._to_text(education[key], depth + 1)
                for key in ("degree", "title", "name", "level")
                if education.get(key)
            )

        if isinstance(education, (list, tuple)):
            return " ".join(self._to_text(entry, depth + 1) for entry in education)

        text = str(education).strip()
        if text[:1] in ("[", "{"):
            parsed = self._parse_json(text)
            if parsed is not None:
                return self._to_text(parsed, depth + 1)
        return text

    def _parse_json(self, text: str) -> Optional[object]:
        try:
            return json.loads(text)
        except (ValueError, RecursionError):
            self.logger.debug("Education is not valid JSON, reading it as text")
            return None
