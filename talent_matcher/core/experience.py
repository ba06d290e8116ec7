"""
Experience Matcher - Compares years of experience against a requirement.
"""

from typing import Optional
import json
import logging
import math
import re

from .models import ExperienceMatch


_YEARS_PATTERN = re.compile(
    r"(\d+(?:[.,]\d+)?)"
    r"(?:\s*(?:-|–|to|bis)\s*(\d+(?:[.,]\d+)?))?"
    r"\s*\+?\s*(?:years?|yrs?|jahren?|jahr)\b",
    re.IGNORECASE,
)


def _to_float(text: str) -> float:
    return float(text.replace(",", "."))


def extract_years(text) -> float:
    """
    Extract a number of years from free text.

    Understands "3 years", "5+ years", "2.5 yrs", "3-5 years" (midpoint)
    and the German "Jahre"/"Jahren". Returns 0 when nothing is found.
    """
    if not text:
        return 0.0

    match = _YEARS_PATTERN.search(str(text))
    if not match:
        return 0.0

    low = _to_float(match.group(1))
    if match.group(2):
        return (low + _to_float(match.group(2))) / 2
    return low


def _as_years(value) -> Optional[float]:
    """Read a structured years value, or None if there is none."""
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        years = float(value)
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            years = _to_float(text)
        except ValueError:
            return extract_years(text)

    if math.isnan(years) or math.isinf(years) or years < 0:
        return 0.0
    return years


class ExperienceScorer:
    """Scores actual against required years of experience (0-100)."""

    # Maximum bonus for exceeding the requirement, capped at 100 overall
    MAX_BONUS = 20
    # Deepest history nesting that is still walked
    MAX_DEPTH = 10

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    def actual_years(self, experience_years=None, experience=None, fallback_text: str = "") -> float:
        """
        Years of experience of an entity.

        Args:
            experience_years: Structured number of years
            experience: Work history (list or JSON list of entries with
                years/duration) or free text
            fallback_text: Text searched when nothing else yields years
        """
        years = _as_years(experience_years)
        if years is not None:
            return years

        years = self._history_years(experience)
        if years == 0 and fallback_text:
            years = extract_years(fallback_text)
        return years

    def required_years(self, experience_years=None, text: str = "") -> float:
        """Years of experience asked for by a position."""
        years = _as_years(experience_years)
        if years is not None:
            return years
        return extract_years(text)

    def score(self, actual_years: float, required_years: float) -> ExperienceMatch:
        result = ExperienceMatch(required_years=required_years, actual_years=actual_years)

        if required_years <= 0:
            result.score = 100.0
        elif actual_years >= required_years:
            bonus = min(self.MAX_BONUS, (actual_years - required_years) / required_years * 20)
            result.score = min(100.0, 100 + bonus)
        else:
            result.score = actual_years / required_years * 100

        return result

    def _history_years(self, experience, depth: int = 0) -> float:
        if experience is None or isinstance(experience, bool) or depth > self.MAX_DEPTH:
            return 0.0

        if isinstance(experience, (int, float)):
            return _as_years(experience) or 0.0

        if isinstance(experience, dict):
            for key in ("years", "duration"):
                years = _as_years(experience.get(key))
                if years:
                    return years
            text = " ".join(
                str(experience[key])
                for key in ("period", "title", "description")
                if experience.get(key)
            )
            return extract_years(text)

        if isinstance(experience, (list, tuple)):
            return float(sum(self._history_years(entry, depth + 1) for entry in experience))

        text = str(experience).strip()
        if text[:1] in ("[", "{"):
            try:
                parsed = json.loads(text)
                if not isinstance(parsed, str):
                    return self._history_years(parsed, depth + 1)
            except (ValueError, RecursionError):
                self.logger.debug("Experience history is not valid JSON, reading it as text")
                return extract_years(text)
            text = parsed

        return extract_years(text)
