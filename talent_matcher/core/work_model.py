"""
Work Model Matcher - Compares the offered and the preferred work arrangement.
"""

from typing import Optional
import logging

from .knowledge import DEFAULT_KNOWLEDGE, KnowledgeBase
from .models import WorkModel, WorkModelMatch
from .text import contains_any, normalize_keyword


class WorkModelScorer:
    """Scores work model compatibility (0-100)."""

    COMPATIBLE = (
        frozenset((WorkModel.PART_TIME, WorkModel.FULL_TIME)),
        frozenset((WorkModel.PROJECT, WorkModel.PART_TIME)),
    )
    COMPATIBLE_SCORE = 50.0

    def __init__(self, knowledge: KnowledgeBase = DEFAULT_KNOWLEDGE):
        self.knowledge = knowledge
        self.logger = logging.getLogger(self.__class__.__name__)

    def classify(self, value, fallback_text: str = "") -> WorkModel:
        """
        Classify a work model value.

        Args:
            value: WorkModel, or text such as "Vollzeit" or "part-time"
            fallback_text: Text searched when value is not recognized

        Returns:
            The first matching WorkModel, FULL_TIME if nothing matches
        """
        if isinstance(value, WorkModel):
            return value

        model = self._lookup(value)
        if model is None and fallback_text:
            model = self._lookup(fallback_text)
        return model or WorkModel.FULL_TIME

    def score(
        self,
        candidate_model,
        position_model,
        candidate_text: str = "",
        position_text: str = "",
    ) -> WorkModelMatch:
        actual = self.classify(candidate_model, candidate_text)
        required = self.classify(position_model, position_text)

        result = WorkModelMatch(required_model=required, actual_model=actual)

        if actual is required or actual is WorkModel.FLEXIBLE:
            result.score = 100.0
        elif frozenset((actual, required)) in self.COMPATIBLE:
            result.score = self.COMPATIBLE_SCORE
        else:
            result.score = 0.0
        return result

    def _lookup(self, value) -> Optional[WorkModel]:
        if value is None:
            return None
        text = normalize_keyword(value)
        if not text:
            return None
        for model, keywords in self.knowledge.work_model_keywords:
            if contains_any(text, keywords):
                return model
        return None
