"""
Draft recommendation service.

Suggests the best available players for an upcoming pick, based on how
close each player's reference draft slot is to that pick.
"""

import logging
from typing import Optional

from draftroom.cache import Cache, ensure_safe
from draftroom.config import EngineConfig, get_config
from draftroom.core.draft import build_candidate_pool, calculate_overall_pick, rank_candidates
from draftroom.core.models import DraftHistoryEntry, Recommendation
from draftroom.errors import ComputationError, NotFoundError, ValidationError
from draftroom.services import cache_keys
from draftroom.stores.base import DraftContextStore, EvaluationStore

logger = logging.getLogger(__name__)


class DraftRecommendationService:
    """Generates and serves per-pick recommendations."""

    def __init__(
        self,
        evaluations: EvaluationStore,
        draft_context: DraftContextStore,
        cache: Optional[Cache] = None,
        config: Optional[EngineConfig] = None,
    ):
        self.config = config or get_config()
        self.evaluations = evaluations
        self.draft_context = draft_context
        self.cache = ensure_safe(cache, self.config.cache_ttl_seconds)

    def _reason(self, entry: DraftHistoryEntry) -> str:
        evaluation = self.evaluations.get(entry.player_id)
        if evaluation is not None and evaluation.best_role is not None:
            label = evaluation.archetype.primary if evaluation.archetype else "Unknown Type"
            return f"{evaluation.best_role.value} - {label}"
        return f"Projected pick {entry.overall_pick}"

    def generate(
        self,
        session_id: str,
        round: int,
        pick: int,
        total_teams: Optional[int] = None,
        is_snake_draft: Optional[bool] = None,
        limit: Optional[int] = None,
    ) -> list[Recommendation]:
        """
        Generate recommendations for a pick and store them.

        Replaces anything previously stored for the same (session, round,
        pick). Draft format defaults to the session's.

        Args:
            session_id: Session making the pick
            round: Round number, 1-based
            pick: The team's draft slot, 1-based
            total_teams: Override the session's team count
            is_snake_draft: Override the session's snake setting
            limit: Max recommendations (default from config)

        Returns:
            Recommendations, best first

        Raises:
            NotFoundError: Unknown session
            ValidationError: Bad round, pick, team count or limit
            ComputationError: No player has a reference draft slot
        """
        limit = self.config.recommendation_limit if limit is None else limit
        if limit < 1:
            raise ValidationError(f"limit must be at least 1, got {limit}", field="limit")

        session = self.draft_context.get_session(session_id)
        if session is None:
            raise NotFoundError(f"Draft session {session_id} not found", entity="session", entity_id=session_id)

        teams = session.total_teams if total_teams is None else total_teams
        snake = session.is_snake_draft if is_snake_draft is None else is_snake_draft
        overall_pick = calculate_overall_pick(round, pick, teams, snake)

        drafted_ids = {p.player_id for p in self.draft_context.picks_for_session(session_id)}
        pool = build_candidate_pool(
            self.draft_context.draft_history(),
            overall_pick,
            drafted_ids,
            window=self.config.recommendation_window,
            limit=limit,
        )
        if not pool:
            raise ComputationError(
                f"No undrafted players with a draft position for session {session_id} "
                f"(overall pick {overall_pick})"
            )

        recommendations = [
            Recommendation(
                session_id=session_id,
                round=round,
                pick=pick,
                player_id=entry.player_id,
                player_name=entry.player_name,
                score=score,
                reason=self._reason(entry),
                overall_pick=overall_pick,
                projected_pick=entry.overall_pick,
            )
            for entry, score in rank_candidates(
                pool, overall_pick, self.config.recommendation_decay, limit
            )
        ]

        self.draft_context.replace_recommendations(session_id, round, pick, recommendations)
        # Invalidate strictly after the write commits
        self.cache.delete(cache_keys.recommendations(session_id, round, pick))
        self.cache.delete_pattern(cache_keys.session_recommendations(session_id))

        logger.info(
            f"Session {session_id}: {len(recommendations)} recommendations for "
            f"round {round} pick {pick} (overall {overall_pick})"
        )
        return recommendations

    def find_for_pick(self, session_id: str, round: int, pick: int) -> list[Recommendation]:
        """Stored recommendations for a pick, best first (cached)."""
        key = cache_keys.recommendations(session_id, round, pick)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug(f"Cache hit: {key}")
            return [Recommendation.from_dict(r) for r in cached]

        recommendations = self.draft_context.recommendations_for_pick(session_id, round, pick)
        self.cache.set(key, [r.to_dict() for r in recommendations], self.config.cache_ttl_seconds)
        return recommendations
