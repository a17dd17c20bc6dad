"""Draft pick arithmetic and recommendation scoring."""

from draftroom.core.draft.picks import (
    PickSlot,
    calculate_all_picks,
    calculate_overall_pick,
    get_round_from_pick,
    round_bounds,
)
from draftroom.core.draft.recommendations import (
    build_candidate_pool,
    rank_candidates,
    recommendation_score,
)

__all__ = [
    "PickSlot",
    "build_candidate_pool",
    "calculate_all_picks",
    "calculate_overall_pick",
    "get_round_from_pick",
    "rank_candidates",
    "recommendation_score",
    "round_bounds",
]
