"""Core models and scorers for entity/position matching."""

from .exceptions import ConfigurationError
from .models import (
    EducationLevel,
    MatchDetails,
    MatchWeights,
    SimilarityClass,
    SimilarityWeights,
    WorkModel,
)
from .knowledge import DEFAULT_KNOWLEDGE, KnowledgeBase, Region, SkillCategory
from .skills import SkillSetScorer, SkillSimilarity, normalize_skills
from .location import LocationScorer
from .experience import ExperienceScorer, extract_years
from .education import EducationScorer
from .work_model import WorkModelScorer
from .matcher import JobMatcher

__all__ = [
    "ConfigurationError",
    "EducationLevel",
    "MatchDetails",
    "MatchWeights",
    "SimilarityClass",
    "SimilarityWeights",
    "WorkModel",
    "DEFAULT_KNOWLEDGE",
    "KnowledgeBase",
    "Region",
    "SkillCategory",
    "SkillSetScorer",
    "SkillSimilarity",
    "normalize_skills",
    "LocationScorer",
    "ExperienceScorer",
    "extract_years",
    "EducationScorer",
    "WorkModelScorer",
    "JobMatcher",
]
