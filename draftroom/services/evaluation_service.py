"""
Player evaluation service.

Runs the position fit scorer across every role for a player, derives
best and viable roles, classifies the archetype, age-adjusts the best
score and stores the result. The batch path evaluates the whole pool
and finishes with one ranking pass.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterable, Optional

from draftroom.cache import Cache, ensure_safe
from draftroom.config import EngineConfig, get_config
from draftroom.core.aging import adjust_for_age, get_age_modifier
from draftroom.core.archetypes import classify_archetype, is_elite
from draftroom.core.attributes import AttributeSnapshot
from draftroom.core.enums import Role
from draftroom.core.models import PlayerEvaluation, ViablePosition
from draftroom.core.scoring import get_tier, score_all_positions
from draftroom.errors import DraftroomError, NotFoundError, ValidationError
from draftroom.services import cache_keys
from draftroom.services.ranking_service import RankingService
from draftroom.stores.base import AttributeStore, EvaluationStore

logger = logging.getLogger(__name__)


@dataclass
class BatchEvaluationResult:
    """Result of evaluating many players."""

    evaluated: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)  # player_id -> error message
    cancelled: bool = False
    ranked: int = 0
    duration_ms: float = 0.0
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def success(self) -> bool:
        return not self.failed and not self.cancelled

    def to_dict(self) -> dict:
        return {
            "evaluated": len(self.evaluated),
            "failed": dict(self.failed),
            "cancelled": self.cancelled,
            "ranked": self.ranked,
            "duration_ms": round(self.duration_ms, 1),
        }


def select_viable_roles(
    scores: dict[Role, float],
    best_role: Role,
    floor: float = 50.0,
    ratio: float = 0.75,
) -> list[Role]:
    """
    Roles scoring above max(floor, best * ratio), best first.

    Equal scores keep table order. The best role is always included.
    """
    cutoff = max(floor, scores[best_role] * ratio)
    ordered = sorted(scores, key=lambda role: scores[role], reverse=True)
    viable = [role for role in ordered if scores[role] > cutoff]
    if best_role not in viable:
        viable.insert(0, best_role)
    return viable


class PlayerEvaluator:
    """Evaluates players and keeps their evaluation records current."""

    def __init__(
        self,
        attributes: AttributeStore,
        evaluations: EvaluationStore,
        cache: Optional[Cache] = None,
        config: Optional[EngineConfig] = None,
        ranking: Optional[RankingService] = None,
    ):
        self.config = config or get_config()
        self.attributes = attributes
        self.evaluations = evaluations
        self.cache = ensure_safe(cache, self.config.cache_ttl_seconds)
        self.ranking = ranking or RankingService(evaluations, self.cache)

    def build_evaluation(self, snapshot: AttributeSnapshot) -> PlayerEvaluation:
        """Compute an evaluation from a snapshot without storing it."""
        rated_role = Role.from_code(snapshot.rated_role) if snapshot.rated_role else None
        if rated_role is None:
            raise ValidationError(
                f"Player {snapshot.player_id} has no valid rated role ({snapshot.rated_role!r})",
                field="rated_role",
            )

        scores = score_all_positions(snapshot)
        # max() keeps the first of equal scores, so ties go to table order
        best_role = max(scores, key=scores.get)
        best_score = scores[best_role]

        viable = select_viable_roles(
            scores, best_role, self.config.viable_floor, self.config.viable_ratio
        )
        viable_positions = [
            ViablePosition(
                role=role,
                score=scores[role],
                tier=get_tier(role, scores[role]),
                is_elite=is_elite(snapshot, role),
            )
            for role in viable
        ]

        return PlayerEvaluation(
            player_id=snapshot.player_id,
            player_name=snapshot.full_name,
            rated_role=rated_role,
            position_scores=scores,
            best_role=best_role,
            normalized_score=best_score,
            age_modifier=get_age_modifier(snapshot.age),
            age_adjusted_score=adjust_for_age(best_score, snapshot.age, best_role),
            viable_roles=viable,
            viable_positions=viable_positions,
            position_tier=get_tier(best_role, best_score),
            archetype=classify_archetype(snapshot, best_role, viable),
        )

    def evaluate(self, player_id: str) -> PlayerEvaluation:
        """
        Evaluate one player and store the result.

        Any previous evaluation is overwritten. Its rank is carried over
        until the next ranking pass.

        Raises:
            NotFoundError: Unknown player
            ValidationError: No ratings recorded, or no rated role
        """
        if not self.attributes.player_exists(player_id):
            raise NotFoundError(f"Player {player_id} not found", entity="player", entity_id=player_id)

        snapshot = self.attributes.latest_snapshot(player_id)
        if snapshot is None:
            raise ValidationError(f"Player {player_id} has no ratings recorded", field="ratings")

        evaluation = self.build_evaluation(snapshot)

        previous = self.evaluations.get(player_id)
        if previous is not None:
            evaluation.rank = previous.rank

        self.evaluations.upsert(evaluation)
        self.cache.delete(cache_keys.evaluation(player_id))
        self.cache.delete(cache_keys.ALL_EVALUATIONS)

        logger.debug(
            f"Evaluated {player_id}: {evaluation.best_role.value} "
            f"{evaluation.normalized_score:.1f} (adj {evaluation.age_adjusted_score:.1f})"
        )
        return evaluation

    def evaluate_all(
        self,
        player_ids: Optional[Iterable[str]] = None,
        should_stop: Optional[Callable[[], bool]] = None,
    ) -> BatchEvaluationResult:
        """
        Evaluate many players, then rank the whole pool once.

        A player that fails is logged and skipped; the rest still run.
        `should_stop` is checked between players, and a cancelled batch
        still ranks whatever has been stored.

        Args:
            player_ids: Players to evaluate (default: every known player)
            should_stop: Returns True to cancel the batch early

        Returns:
            BatchEvaluationResult with per-player outcomes
        """
        start = datetime.now()
        result = BatchEvaluationResult()
        ids = list(player_ids) if player_ids is not None else self.attributes.all_player_ids()

        for player_id in ids:
            if should_stop is not None and should_stop():
                logger.info(f"Batch evaluation cancelled after {len(result.evaluated)} players")
                result.cancelled = True
                break
            try:
                self.evaluate(player_id)
                result.evaluated.append(player_id)
            except DraftroomError as e:
                logger.warning(f"Skipping player {player_id}: {e}")
                result.failed[player_id] = str(e)
            except Exception as e:
                logger.exception(f"Unexpected error evaluating player {player_id}")
                result.failed[player_id] = str(e)

        result.ranked = len(self.ranking.update_ranks())
        result.duration_ms = (datetime.now() - start).total_seconds() * 1000

        logger.info(
            f"Batch evaluation: {len(result.evaluated)} evaluated, "
            f"{len(result.failed)} failed, {result.ranked} ranked"
        )
        return result

    def get_evaluation(self, player_id: str) -> Optional[PlayerEvaluation]:
        """Stored evaluation for a player (cached), or None."""
        key = cache_keys.evaluation(player_id)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug(f"Cache hit: {key}")
            return PlayerEvaluation.from_dict(cached)

        evaluation = self.evaluations.get(player_id)
        if evaluation is not None:
            self.cache.set(key, evaluation.to_dict(), self.config.cache_ttl_seconds)
        return evaluation

    def list_evaluations(self) -> list[PlayerEvaluation]:
        """Every stored evaluation, highest score first (cached)."""
        cached = self.cache.get(cache_keys.ALL_EVALUATIONS)
        if cached is not None:
            logger.debug(f"Cache hit: {cache_keys.ALL_EVALUATIONS}")
            return [PlayerEvaluation.from_dict(e) for e in cached]

        evaluations = self.evaluations.all_sorted_by_score_desc()
        self.cache.set(
            cache_keys.ALL_EVALUATIONS,
            [e.to_dict() for e in evaluations],
            self.config.cache_ttl_seconds,
        )
        return evaluations

    def delete_evaluation(self, player_id: str, rerank: bool = True) -> bool:
        """
        Remove a player's evaluation.

        Args:
            player_id: Player whose record to delete
            rerank: Re-run the ranking pass so remaining ranks stay dense

        Returns:
            False if the player had no evaluation
        """
        deleted = self.evaluations.delete(player_id)
        self.cache.delete(cache_keys.evaluation(player_id))
        self.cache.delete(cache_keys.ALL_EVALUATIONS)
        if deleted and rerank:
            self.ranking.update_ranks()
        return deleted
