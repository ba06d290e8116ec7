"""
Location Matcher - Geographic compatibility between an entity and a position.

Locations are free text ("10115 Berlin", "München, Bayern", "Remote") and
may name several places separated by commas or slashes. The best signal
across all part pairs wins:

- Remote work offered and asked for
- Identical location text
- Identical or neighbouring postal codes
- Identical or contained place names
- Places in the same region
"""

from typing import Optional
import logging
import re

from .knowledge import DEFAULT_KNOWLEDGE, KnowledgeBase
from .models import LocationMatch
from .text import contains_any, normalize_location


class LocationScorer:
    """Scores geographic proximity between two locations (0-100)."""

    SCORES = {
        "remote_both": 100,
        "remote": 80,
        "exact": 100,
        "postal_exact": 100,
        "postal_area": 80,
        "part_exact": 95,
        "containment": 90,
        "same_region": 70,
        "hybrid": 50,
        "default": 30,
    }

    # Contained place names must be longer than this
    MIN_CONTAINED_LENGTH = 3

    _POSTAL_CODE = re.compile(r"(?<!\d)\d{5}(?!\d)")
    _SEPARATORS = re.compile(r"\s*[,/]\s*|\s+-\s+")

    def __init__(
        self,
        knowledge: KnowledgeBase = DEFAULT_KNOWLEDGE,
        scores: Optional[dict] = None,
    ):
        self.knowledge = knowledge
        self.scores = {**self.SCORES, **(scores or {})}
        self.logger = logging.getLogger(self.__class__.__name__)

    def score(
        self,
        candidate_location,
        position_location,
        remote_allowed: bool = False,
    ) -> LocationMatch:
        """
        Score a candidate location against a position location.

        Args:
            candidate_location: Entity location text or list of locations
            position_location: Position location text or list of locations
            remote_allowed: Whether the position can be done remotely

        Returns:
            LocationMatch with score and the matching candidate locations
        """
        candidate_text = self._to_text(candidate_location)
        position_text = self._to_text(position_location)
        candidate_parts = self._split(candidate_text)
        position_parts = self._split(position_text)

        matched = self._matched_locations(candidate_parts, position_parts)

        if remote_allowed:
            candidate_remote = contains_any(candidate_text, self.knowledge.remote_keywords)
            position_remote = contains_any(position_text, self.knowledge.remote_keywords)
            if candidate_remote and position_remote:
                return LocationMatch(score=self.scores["remote_both"], matched_locations=matched)
            if candidate_remote or position_remote:
                return LocationMatch(score=self.scores["remote"], matched_locations=matched)

        if candidate_text and candidate_text == position_text:
            return LocationMatch(score=self.scores["exact"], matched_locations=matched)

        best = self._postal_score(candidate_text, position_text)
        for candidate_part in candidate_parts:
            for position_part in position_parts:
                best = max(best, self._part_score(candidate_part, position_part))

        if best > 0:
            return LocationMatch(score=best, matched_locations=matched)

        hybrid = (
            contains_any(candidate_text, self.knowledge.hybrid_keywords)
            or contains_any(position_text, self.knowledge.hybrid_keywords)
        )
        default = self.scores["hybrid"] if hybrid else self.scores["default"]
        return LocationMatch(score=default, matched_locations=matched)

    def _to_text(self, location) -> str:
        if location is None:
            return ""
        if isinstance(location, (list, tuple)):
            location = ", ".join(str(part) for part in location if part)
        return normalize_location(location)

    def _split(self, text: str) -> list[str]:
        return [part.strip() for part in self._SEPARATORS.split(text) if part.strip()]

    def _postal_score(self, first: str, second: str) -> float:
        first_code = self._postal_code(first)
        second_code = self._postal_code(second)

        if not first_code or not second_code:
            return 0
        if first_code == second_code:
            return self.scores["postal_exact"]
        if first_code[:2] == second_code[:2]:
            return self.scores["postal_area"]
        return 0

    def _postal_code(self, text: str) -> Optional[str]:
        match = self._POSTAL_CODE.search(text)
        return match.group(0) if match else None

    def _part_score(self, first: str, second: str) -> float:
        if first == second:
            return self.scores["part_exact"]

        if self._contains(first, second):
            return self.scores["containment"]

        first_regions = self.knowledge.regions_for(first)
        if first_regions and first_regions & self.knowledge.regions_for(second):
            return self.scores["same_region"]

        return 0

    def _matched_locations(self, candidate_parts: list[str], position_parts: list[str]) -> list[str]:
        return [
            candidate_part
            for candidate_part in candidate_parts
            if any(
                candidate_part == position_part or self._contains(candidate_part, position_part)
                for position_part in position_parts
            )
        ]

    def _contains(self, first: str, second: str) -> bool:
        shorter, longer = sorted((first, second), key=len)
        return len(shorter) > self.MIN_CONTAINED_LENGTH and shorter in longer
