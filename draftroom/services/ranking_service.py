"""Global ranking of evaluated players."""

import logging
from typing import Optional

from draftroom.cache import Cache, ensure_safe
from draftroom.services import cache_keys
from draftroom.stores.base import EvaluationStore

logger = logging.getLogger(__name__)


class RankingService:
    """
    Assigns every evaluated player a global rank.

    Ranking is a single pass over the full, committed set of evaluations:
    rank 1 is the highest normalized score and ties go to the lower
    player id. Running it twice without changes gives the same ranks.
    """

    def __init__(self, evaluations: EvaluationStore, cache: Optional[Cache] = None):
        self.evaluations = evaluations
        self.cache = ensure_safe(cache)

    def update_ranks(self) -> dict[str, int]:
        """
        Rank all evaluations and persist the ranks.

        Returns:
            player_id -> rank (1-based, dense)
        """
        pool = self.evaluations.all_sorted_by_score_desc()
        pool.sort(key=lambda e: (-e.normalized_score, e.player_id))

        ranks = {evaluation.player_id: i for i, evaluation in enumerate(pool, start=1)}
        self.evaluations.set_ranks(ranks)

        # Every cached evaluation carries a rank, so all of them are stale now
        self.cache.delete(cache_keys.ALL_EVALUATIONS)
        self.cache.delete_pattern(cache_keys.EVALUATION_PATTERN)

        logger.info(f"Ranked {len(ranks)} players")
        return ranks
