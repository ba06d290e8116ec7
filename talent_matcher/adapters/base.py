"""
Base class for entity adapters.

Adapters read the heterogeneous records of the surrounding system (plain
dicts or attribute objects) and return the canonical MatchFields the
scorers work on. They never raise on missing or oddly typed fields.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Optional
import logging

from bs4 import BeautifulSoup


@dataclass
class MatchFields:
    """Raw, canonical fields of one side of a comparison."""
    skills: Any = None
    location: Any = None
    experience_years: Any = None
    experience: Any = None
    education: Any = None
    work_model: Any = None
    description: str = ""
    remote_allowed: bool = False

    def merged(self, **overrides) -> "MatchFields":
        """Copy with the non-empty overrides applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v not in (None, "", [])})


_FALSY_FLAGS = {"", "none", "false", "no", "0", "nein", "off"}


def strip_html(html: Optional[str]) -> str:
    """Plain text of an HTML fragment."""
    if not html:
        return ""
    soup = BeautifulSoup(str(html), "html.parser")
    return soup.get_text(" ", strip=True)


def is_truthy_flag(value) -> bool:
    """Interpret flags such as True, "yes", "hybrid" or "none"."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    return str(value).strip().lower() not in _FALSY_FLAGS


def get_field(record, *names, default=None):
    """First non-empty value among names, from a dict or an object."""
    if record is None:
        return default
    for name in names:
        if isinstance(record, dict):
            value = record.get(name)
        else:
            value = getattr(record, name, None)
        if value not in (None, "", [], {}):
            return value
    return default


def join_text(*parts) -> str:
    return "\n".join(str(part).strip() for part in parts if part and str(part).strip())


class EntityAdapter(ABC):
    """Abstract base class for record adapters."""

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    @abstractmethod
    def kind(self) -> str:
        """Record kind this adapter reads (e.g. "candidate")."""
        pass

    @abstractmethod
    def extract(self, record) -> MatchFields:
        """
        Read the match-relevant fields of a record.

        Args:
            record: dict or object as stored by the surrounding system

        Returns:
            MatchFields with whatever the record provides
        """
        pass
