"""
Batch Matcher - Scores many entity/position pairs and ranks the results.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Optional
import logging

from talent_matcher.adapters import get_adapter, get_field
from talent_matcher.core.matcher import JobMatcher
from talent_matcher.core.models import MatchDetails


# Rating label by minimum overall score, checked from the top
RATINGS = {
    90: "Excellent",
    75: "High",
    60: "Good",
    40: "Moderate",
    0: "Low",
}


def rating_for(score: float) -> str:
    for threshold, label in RATINGS.items():
        if score >= threshold:
            return label
    return "Low"


def importance_for(score: float) -> str:
    """Notification importance of a match score."""
    if score >= 90:
        return "high"
    if score >= 75:
        return "normal"
    return "low"


@dataclass
class MatchResult:
    """One scored entity/position pair."""
    entity_id: str
    position_id: str
    entity_type: str = "candidate"
    position_type: str = "job"
    details: MatchDetails = field(default_factory=MatchDetails)
    entity_label: str = ""
    position_label: str = ""

    @property
    def overall_score(self) -> float:
        return self.details.overall_score

    @property
    def rating(self) -> str:
        return rating_for(self.overall_score)

    @property
    def importance(self) -> str:
        return importance_for(self.overall_score)

    def to_dict(self) -> dict:
        return {
            "entity_id": self.entity_id,
            "entity_type": self.entity_type,
            "entity_label": self.entity_label,
            "position_id": self.position_id,
            "position_type": self.position_type,
            "position_label": self.position_label,
            "overall_score": round(self.overall_score, 2),
            "rating": self.rating,
            "importance": self.importance,
            "details": self.details.to_dict(),
        }


def _record_id(record, index: int) -> str:
    value = get_field(record, "id", "uuid")
    return str(value) if value is not None else str(index)


def _record_label(record) -> str:
    value = get_field(record, "name", "title", "full_name", "applicant_name")
    if value is None:
        first = get_field(record, "first_name", default="")
        last = get_field(record, "last_name", default="")
        value = f"{first} {last}".strip()
    return str(value)


class BatchMatcher:
    """Scores N x M entity/position pairs, optionally in parallel."""

    def __init__(
        self,
        matcher: Optional[JobMatcher] = None,
        parallel: bool = True,
        max_workers: Optional[int] = None,
        min_score: float = 0.0,
    ):
        """
        Args:
            matcher: Matcher shared by all pairs
            parallel: Whether to score pairs on a thread pool
            max_workers: Thread pool size (None = executor default)
            min_score: Results below this overall score are dropped
        """
        self.matcher = matcher or JobMatcher()
        self.parallel = parallel
        self.max_workers = max_workers
        self.min_score = min_score
        self.logger = logging.getLogger(self.__class__.__name__)

    def score_all(
        self,
        entities: list,
        positions: list,
        entity_type: str = "candidate",
        position_type: str = "job",
        min_score: Optional[float] = None,
    ) -> list[MatchResult]:
        """
        Score every entity against every position.

        Args:
            entities: Entity records
            positions: Position records
            entity_type: candidate, application or talent_pool
            position_type: job or requirement
            min_score: Overrides the configured minimum score

        Returns:
            Results sorted by overall score, best first; ties keep input order
        """
        # Unknown record types fail the whole batch, not each pair
        get_adapter(entity_type)
        get_adapter(position_type)

        pairs = []
        for i, entity in enumerate(entities):
            for j, position in enumerate(positions):
                pairs.append((len(pairs), i, entity, j, position))

        if not pairs:
            return []

        if self.parallel and len(pairs) > 1:
            scored = self._score_parallel(pairs, entity_type, position_type)
        else:
            scored = self._score_sequential(pairs, entity_type, position_type)

        threshold = self.min_score if min_score is None else min_score
        scored = [(order, result) for order, result in scored if result.overall_score >= threshold]
        scored.sort(key=lambda item: (-item[1].overall_score, item[0]))

        results = [result for _, result in scored]
        self.logger.info(
            f"Scored {len(pairs)} pairs, {len(results)} at or above {threshold}"
        )
        return results

    def rank_positions_for_entity(
        self,
        entity,
        positions: list,
        entity_type: str = "candidate",
        position_type: str = "job",
        top: Optional[int] = None,
    ) -> list[MatchResult]:
        """Positions ranked by how well they fit one entity."""
        results = self.score_all([entity], positions, entity_type, position_type)
        return results[:top] if top else results

    def rank_entities_for_position(
        self,
        position,
        entities: list,
        entity_type: str = "candidate",
        position_type: str = "job",
        top: Optional[int] = None,
    ) -> list[MatchResult]:
        """Entities ranked by how well they fit one position."""
        results = self.score_all(entities, [position], entity_type, position_type)
        return results[:top] if top else results

    def _score_parallel(self, pairs: list, entity_type: str, position_type: str) -> list:
        """Score pairs on a thread pool."""
        scored = []

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {
                executor.submit(
                    self._score_pair, i, entity, j, position, entity_type, position_type
                ): (order, i, j)
                for order, i, entity, j, position in pairs
            }

            for future in as_completed(futures):
                order, i, j = futures[future]
                try:
                    scored.append((order, future.result()))
                except Exception as e:
                    self.logger.error(f"Scoring {entity_type} {i} against {position_type} {j} failed: {e}")

        return scored

    def _score_sequential(self, pairs: list, entity_type: str, position_type: str) -> list:
        """Score pairs one after another."""
        scored = []

        for order, i, entity, j, position in pairs:
            try:
                scored.append(
                    (order, self._score_pair(i, entity, j, position, entity_type, position_type))
                )
            except Exception as e:
                self.logger.error(f"Scoring {entity_type} {i} against {position_type} {j} failed: {e}")

        return scored

    def _score_pair(
        self,
        i: int,
        entity,
        j: int,
        position,
        entity_type: str,
        position_type: str,
    ) -> MatchResult:
        details = self.matcher.calculate(entity, position, entity_type, position_type)
        return MatchResult(
            entity_id=_record_id(entity, i),
            position_id=_record_id(position, j),
            entity_type=entity_type,
            position_type=position_type,
            details=details,
            entity_label=_record_label(entity),
            position_label=_record_label(position),
        )
