"""
Text normalization helpers shared by the scorers and the knowledge tables.
"""

from functools import lru_cache
import re


_SKILL_STRIP = re.compile(r"[^\w\s#+\-]|_")
_LOCATION_STRIP = re.compile(r"[^\w\s\-/,]|_")
_WHITESPACE = re.compile(r"\s+")


def normalize_skill(value) -> str:
    """Lowercase, trim and strip punctuation except '#', '+' and '-'."""
    if value is None:
        return ""
    text = _SKILL_STRIP.sub("", str(value).lower())
    return _WHITESPACE.sub(" ", text).strip()


def normalize_location(value) -> str:
    """Lowercase and trim, keeping the ',', '/' and '-' separators."""
    if value is None:
        return ""
    text = _LOCATION_STRIP.sub(" ", str(value).lower())
    return _WHITESPACE.sub(" ", text).strip()


def normalize_keyword(value) -> str:
    return _WHITESPACE.sub(" ", str(value).lower()).strip()


@lru_cache(maxsize=2048)
def _keyword_pattern(keyword: str):
    return re.compile(r"(?<!\w)" + re.escape(keyword) + r"(?!\w)")


def contains_keyword(text: str, keyword: str) -> bool:
    """True if keyword occurs in text as a whole word or phrase."""
    if not text or not keyword:
        return False
    return _keyword_pattern(keyword).search(text) is not None


def contains_any(text: str, keywords) -> bool:
    return any(contains_keyword(text, keyword) for keyword in keywords)
