"""
Entity adapters turning stored records into canonical match fields.
"""

from .base import EntityAdapter, MatchFields, get_field, strip_html
from .candidate import ApplicationAdapter, CandidateAdapter, TalentPoolAdapter
from .position import JobAdapter, RequirementAdapter

ADAPTERS = {
    adapter.kind: adapter
    for adapter in (
        CandidateAdapter(),
        ApplicationAdapter(),
        TalentPoolAdapter(),
        JobAdapter(),
        RequirementAdapter(),
    )
}


def get_adapter(kind: str) -> EntityAdapter:
    """Adapter for a record kind such as "candidate" or "job"."""
    try:
        return ADAPTERS[kind]
    except KeyError:
        raise ValueError(
            f"Unknown record type: {kind!r} (expected one of {', '.join(ADAPTERS)})"
        ) from None


__all__ = [
    "ADAPTERS",
    "EntityAdapter",
    "MatchFields",
    "CandidateAdapter",
    "ApplicationAdapter",
    "TalentPoolAdapter",
    "JobAdapter",
    "RequirementAdapter",
    "get_adapter",
    "get_field",
    "strip_html",
]
