"""
Skill matching - normalization, pairwise similarity and set scoring.

Skills arrive as delimited strings, JSON-encoded arrays (of strings or of
{name, level} objects) or already-structured lists. They are reduced to
ordered lists of normalized tokens and compared pairwise:

- Exact: identical tokens
- Partial: one token contains the other
- Synonym: the pair is listed in the synonym table
- Stem: the longer token starts with a shorter token of 4+ characters
- Category: both tokens belong to the same skill category
"""

from typing import Optional
import json
import logging
import re

from .knowledge import DEFAULT_KNOWLEDGE, KnowledgeBase
from .models import SimilarityClass, SimilarityWeights, SkillMatch
from .text import normalize_skill


_DELIMITERS = re.compile(r"[,;|\n\r•]+")

logger = logging.getLogger("SkillNormalizer")


def _item_to_text(item) -> Optional[str]:
    if item is None:
        return None
    if isinstance(item, dict):
        name = item.get("name") or item.get("skill")
        return str(name) if name else None
    return str(item)


def _raw_skills(value) -> list[str]:
    """Turn any supported skill representation into raw skill strings."""
    if value is None:
        return []

    if isinstance(value, (list, tuple, set, frozenset)):
        items = sorted(value, key=str) if isinstance(value, (set, frozenset)) else value
        return [text for text in map(_item_to_text, items) if text]

    if isinstance(value, dict):
        text = _item_to_text(value)
        return [text] if text else []

    text = str(value).strip()
    if not text:
        return []

    if text[0] in "[{":
        try:
            parsed = json.loads(text)
            if isinstance(parsed, str):
                return _DELIMITERS.split(parsed)
            return _raw_skills(parsed)
        except (ValueError, RecursionError):
            logger.debug(f"Unparseable skill JSON, using it as free text: {text[:60]}")
            return [text]

    return _DELIMITERS.split(text)


def normalize_skills(value) -> list[str]:
    """
    Canonicalize a skill representation into ordered, lowercase tokens.

    Duplicates and input order are kept, empty tokens dropped. Never raises:
    a value that looks like JSON but does not parse becomes one token.
    """
    tokens = (normalize_skill(raw) for raw in _raw_skills(value))
    return [token for token in tokens if token]


class SkillSimilarity:
    """Classifies how closely two skill tokens relate."""

    STEM_MIN_LENGTH = 4

    def __init__(
        self,
        knowledge: KnowledgeBase = DEFAULT_KNOWLEDGE,
        weights: Optional[SimilarityWeights] = None,
    ):
        self.knowledge = knowledge
        self.weights = weights or SimilarityWeights()

    def classify(self, first: str, second: str) -> SimilarityClass:
        """Return the similarity class of two normalized tokens."""
        if not first or not second:
            return SimilarityClass.NONE

        if first == second:
            return SimilarityClass.EXACT

        if first in second or second in first:
            return SimilarityClass.PARTIAL

        if self.knowledge.are_synonyms(first, second):
            return SimilarityClass.SYNONYM

        shorter, longer = sorted((first, second), key=len)
        if len(shorter) >= self.STEM_MIN_LENGTH and longer.startswith(shorter):
            return SimilarityClass.STEM

        if self.knowledge.share_category(first, second):
            return SimilarityClass.CATEGORY

        return SimilarityClass.NONE

    def similarity(self, first: str, second: str) -> float:
        """Weighted similarity (0-1) of two normalized tokens."""
        return self.weights.weight_for(self.classify(first, second))

    def best_match(self, skill: str, candidates: list[str]) -> float:
        """Best similarity of skill against any candidate token."""
        best = 0.0
        for candidate in candidates:
            score = self.similarity(skill, candidate)
            if score > best:
                best = score
            if best >= self.weights.exact:
                return self.weights.exact
        return best


class SkillSetScorer:
    """Scores a candidate skill set against a required skill set (0-100)."""

    def __init__(
        self,
        similarity: Optional[SkillSimilarity] = None,
        matched_threshold: Optional[float] = None,
        partial_threshold: Optional[float] = None,
        no_requirement_score: float = 0.0,
    ):
        """
        Args:
            similarity: Pairwise similarity to use
            matched_threshold: Best-match weight from which a skill counts as
                matched (default: the exact weight)
            partial_threshold: Best-match weight from which a skill counts as
                partially matched (default: the partial weight)
            no_requirement_score: Score when nothing is required
        """
        self.similarity = similarity or SkillSimilarity()
        weights = self.similarity.weights
        self.matched_threshold = weights.exact if matched_threshold is None else matched_threshold
        self.partial_threshold = weights.partial if partial_threshold is None else partial_threshold
        self.no_requirement_score = no_requirement_score
        self.logger = logging.getLogger(self.__class__.__name__)

    def score(self, candidate_skills, required_skills) -> SkillMatch:
        """Score raw candidate skills against raw required skills."""
        required = normalize_skills(required_skills)
        candidate = normalize_skills(candidate_skills)

        if not required:
            return SkillMatch(score=self.no_requirement_score)

        if not candidate:
            return SkillMatch(score=0.0, missing_skills=list(required))

        result = SkillMatch()
        total = 0.0

        for skill in required:
            best = self.similarity.best_match(skill, candidate)
            total += best

            if best >= self.matched_threshold:
                result.matched_skills.append(skill)
            elif best >= self.partial_threshold and best > 0:
                result.partially_matched_skills.append(skill)
            else:
                result.missing_skills.append(skill)

        possible = len(required) * self.similarity.weights.exact
        result.score = round(total / possible * 100, 2) if possible else 0.0
        result.score = min(100.0, result.score)

        self.logger.debug(
            f"Skills: {len(result.matched_skills)} matched, "
            f"{len(result.partially_matched_skills)} partial, "
            f"{len(result.missing_skills)} missing"
        )
        return result
