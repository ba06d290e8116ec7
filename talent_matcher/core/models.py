"""
Core data models for the matching engine.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
import json
import math

from .exceptions import ConfigurationError


# Scoring factors in the order they are reported
FACTORS = ("skills", "location", "experience", "education", "work_model")


class SimilarityClass(Enum):
    """How two skill tokens relate to each other."""
    EXACT = "exact"
    PARTIAL = "partial"
    SYNONYM = "synonym"
    STEM = "stem"
    CATEGORY = "category"
    NONE = "none"


class EducationLevel(Enum):
    """Ordinal education hierarchy."""
    NONE = 0
    VOCATIONAL = 1
    BACHELOR = 2
    MASTER = 3
    DOCTORATE = 4
    PROFESSOR = 5

    @property
    def label(self) -> str:
        return self.name.lower()


class WorkModel(Enum):
    """Work arrangement offered by a position or preferred by an entity."""
    FULL_TIME = "full_time"
    PART_TIME = "part_time"
    PROJECT = "project"
    INTERNSHIP = "internship"
    APPRENTICESHIP = "apprenticeship"
    FLEXIBLE = "flexible"


def _check_weight(name: str, value) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Weight '{name}' must be a number, got {value!r}")
    if math.isnan(value) or math.isinf(value) or value < 0:
        raise ConfigurationError(f"Weight '{name}' must be a non-negative number, got {value!r}")
    return value


@dataclass(frozen=True)
class MatchWeights:
    """Relative importance of the five scoring factors."""
    skills: float = 0.5
    location: float = 0.2
    experience: float = 0.15
    education: float = 0.1
    work_model: float = 0.05

    def __post_init__(self):
        for name in FACTORS:
            object.__setattr__(self, name, _check_weight(name, getattr(self, name)))

    @property
    def total(self) -> float:
        return sum(getattr(self, name) for name in FACTORS)

    def normalized(self) -> "MatchWeights":
        """Scale the weights so they sum to 1.0 (unchanged if all are zero)."""
        total = self.total
        if total == 0:
            return self
        return MatchWeights(**{name: getattr(self, name) / total for name in FACTORS})

    @classmethod
    def equal(cls) -> "MatchWeights":
        return cls(0.2, 0.2, 0.2, 0.2, 0.2)

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "MatchWeights":
        """Overlay a partial mapping on the default weights."""
        values = cls().to_dict()
        for key, value in (data or {}).items():
            name = "work_model" if key == "workModel" else key
            if name not in values:
                raise ConfigurationError(f"Unknown weight: {key}")
            values[name] = value
        return cls(**values)

    def to_dict(self) -> dict:
        return {name: getattr(self, name) for name in FACTORS}


@dataclass(frozen=True)
class SimilarityWeights:
    """Credit given to each skill similarity class."""
    exact: float = 1.0
    partial: float = 0.7
    synonym: float = 0.9
    stem: float = 0.8
    category: float = 0.6

    def __post_init__(self):
        for name in ("exact", "partial", "synonym", "stem", "category"):
            object.__setattr__(self, name, _check_weight(name, getattr(self, name)))

    def weight_for(self, similarity: SimilarityClass) -> float:
        if similarity is SimilarityClass.NONE:
            return 0.0
        return getattr(self, similarity.value)

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "SimilarityWeights":
        values = cls().to_dict()
        for key, value in (data or {}).items():
            if key not in values:
                raise ConfigurationError(f"Unknown similarity weight: {key}")
            values[key] = value
        return cls(**values)

    def to_dict(self) -> dict:
        return {
            "exact": self.exact,
            "partial": self.partial,
            "synonym": self.synonym,
            "stem": self.stem,
            "category": self.category,
        }


@dataclass
class SkillMatch:
    """Skill factor result."""
    score: float = 0.0  # 0-100
    matched_skills: list[str] = field(default_factory=list)
    partially_matched_skills: list[str] = field(default_factory=list)
    missing_skills: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "score": round(self.score, 2),
            "matched_skills": self.matched_skills,
            "partially_matched_skills": self.partially_matched_skills,
            "missing_skills": self.missing_skills,
        }


@dataclass
class LocationMatch:
    """Location factor result."""
    score: float = 0.0  # 0-100
    matched_locations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "score": round(self.score, 2),
            "matched_locations": self.matched_locations,
        }


@dataclass
class ExperienceMatch:
    """Experience factor result."""
    score: float = 0.0  # 0-100
    required_years: float = 0.0
    actual_years: float = 0.0

    def to_dict(self) -> dict:
        return {
            "score": round(self.score, 2),
            "required_years": self.required_years,
            "actual_years": self.actual_years,
        }


@dataclass
class EducationMatch:
    """Education factor result."""
    score: float = 0.0  # 0-100
    required_level: EducationLevel = EducationLevel.NONE
    actual_level: EducationLevel = EducationLevel.NONE

    def to_dict(self) -> dict:
        return {
            "score": round(self.score, 2),
            "required_level": self.required_level.label,
            "actual_level": self.actual_level.label,
        }


@dataclass
class WorkModelMatch:
    """Work model factor result."""
    score: float = 0.0  # 0-100
    required_model: WorkModel = WorkModel.FULL_TIME
    actual_model: WorkModel = WorkModel.FULL_TIME

    def to_dict(self) -> dict:
        return {
            "score": round(self.score, 2),
            "required_model": self.required_model.value,
            "actual_model": self.actual_model.value,
        }


@dataclass
class MatchDetails:
    """Explainable breakdown of one entity/position comparison."""
    skills: SkillMatch = field(default_factory=SkillMatch)
    location: LocationMatch = field(default_factory=LocationMatch)
    experience: ExperienceMatch = field(default_factory=ExperienceMatch)
    education: EducationMatch = field(default_factory=EducationMatch)
    work_model: WorkModelMatch = field(default_factory=WorkModelMatch)
    overall_score: float = 0.0  # 0-100, two decimals

    def category_scores(self) -> dict:
        return {name: round(getattr(self, name).score, 2) for name in FACTORS}

    def to_dict(self) -> dict:
        return {
            "overall_score": round(self.overall_score, 2),
            "skills": self.skills.to_dict(),
            "location": self.location.to_dict(),
            "experience": self.experience.to_dict(),
            "education": self.education.to_dict(),
            "work_model": self.work_model.to_dict(),
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def to_record(self) -> dict:
        """Flat form for storing next to a persisted match row."""
        return {
            "overall_score": round(self.overall_score, 2),
            "category_scores": self.category_scores(),
            "matched_skills": self.skills.matched_skills,
            "partially_matched_skills": self.skills.partially_matched_skills,
            "missing_skills": self.skills.missing_skills,
            "location_matches": self.location.matched_locations,
            "experience_details": {
                "required_years": self.experience.required_years,
                "actual_years": self.experience.actual_years,
            },
            "education_details": {
                "required_level": self.education.required_level.label,
                "actual_level": self.education.actual_level.label,
            },
            "work_model_details": {
                "required_model": self.work_model.required_model.value,
                "actual_model": self.work_model.actual_model.value,
            },
        }
