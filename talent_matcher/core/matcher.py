"""
Job Matcher - Weighted multi-factor compatibility between entities and positions.

Calculates five sub-scores (0-100) and combines them by weight:
- Skill match: How well entity skills cover the required skills
- Location match: Geographic compatibility, including remote work
- Experience match: Does the entity have the required years
- Education match: Does the entity reach the required level
- Work model match: Full-time, part-time, project, ... compatibility
"""

from typing import Optional, Union
import logging

from talent_matcher.adapters import MatchFields, get_adapter

from .education import EducationScorer
from .experience import ExperienceScorer
from .knowledge import DEFAULT_KNOWLEDGE, KnowledgeBase
from .location import LocationScorer
from .models import FACTORS, MatchDetails, MatchWeights, SimilarityWeights
from .skills import SkillSetScorer, SkillSimilarity
from .work_model import WorkModelScorer


class JobMatcher:
    """
    Matches entities (candidates, applications, talent-pool records) to
    positions (jobs, customer requirements).

    A matcher is immutable after construction and safe to share between
    threads.
    """

    def __init__(
        self,
        weights: Union[MatchWeights, dict, None] = None,
        knowledge: KnowledgeBase = DEFAULT_KNOWLEDGE,
        similarity_weights: Union[SimilarityWeights, dict, None] = None,
        matched_threshold: Optional[float] = None,
        partial_threshold: Optional[float] = None,
        no_requirement_score: float = 0.0,
    ):
        """
        Args:
            weights: Factor weights, normalized to sum to 1.0
            knowledge: Synonym, category, region and keyword tables
            similarity_weights: Credit per skill similarity class
            matched_threshold: Similarity from which a skill counts as matched
            partial_threshold: Similarity from which a skill counts as partial
            no_requirement_score: Skill score when a position requires no skills
        """
        if isinstance(weights, dict):
            weights = MatchWeights.from_dict(weights)
        if isinstance(similarity_weights, dict):
            similarity_weights = SimilarityWeights.from_dict(similarity_weights)

        self.weights = (weights or MatchWeights()).normalized()
        self.knowledge = knowledge

        self.skill_scorer = SkillSetScorer(
            SkillSimilarity(knowledge, similarity_weights),
            matched_threshold=matched_threshold,
            partial_threshold=partial_threshold,
            no_requirement_score=no_requirement_score,
        )
        self.location_scorer = LocationScorer(knowledge)
        self.experience_scorer = ExperienceScorer()
        self.education_scorer = EducationScorer(knowledge)
        self.work_model_scorer = WorkModelScorer(knowledge)
        self.logger = logging.getLogger(self.__class__.__name__)

    def calculate(
        self,
        entity,
        position,
        entity_type: str = "candidate",
        position_type: str = "job",
    ) -> MatchDetails:
        """
        Calculate the match between an entity record and a position record.

        Args:
            entity: Candidate, application or talent-pool record (dict or object)
            position: Job or requirement record (dict or object)
            entity_type: candidate, application or talent_pool
            position_type: job or requirement

        Returns:
            MatchDetails with the overall score and the per-factor breakdown
        """
        entity_fields = get_adapter(entity_type).extract(entity)
        position_fields = get_adapter(position_type).extract(position)
        return self.calculate_fields(entity_fields, position_fields)

    def calculate_fields(self, entity: MatchFields, position: MatchFields) -> MatchDetails:
        """Calculate the match between two already adapted records."""
        details = MatchDetails()

        details.skills = self.skill_scorer.score(entity.skills, position.skills)

        details.location = self.location_scorer.score(
            entity.location, position.location, position.remote_allowed
        )

        actual_years = self.experience_scorer.actual_years(
            entity.experience_years, entity.experience, entity.description
        )
        required_years = self.experience_scorer.required_years(
            position.experience_years, position.description
        )
        details.experience = self.experience_scorer.score(actual_years, required_years)

        details.education = self.education_scorer.score(
            entity.education, position.education or position.description
        )

        # Entity descriptions (cover letters) are not classified
        details.work_model = self.work_model_scorer.score(
            entity.work_model,
            position.work_model,
            position_text=position.description,
        )

        details.overall_score = self._overall(details)

        self.logger.debug(
            f"Overall {details.overall_score:.2f} from {details.category_scores()}"
        )
        return details

    def _overall(self, details: MatchDetails) -> float:
        scores = [getattr(details, name).score for name in FACTORS]

        if self.weights.total == 0:
            overall = sum(scores) / len(scores)
        else:
            overall = sum(
                score * getattr(self.weights, name)
                for name, score in zip(FACTORS, scores)
            )

        return round(max(0.0, min(100.0, overall)), 2)
