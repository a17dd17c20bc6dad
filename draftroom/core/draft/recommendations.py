"""
Best-available recommendation scoring.

Candidates are players whose historical or projected draft slot sits
near the pick being made. Their score decays exponentially with the
distance between that slot and the current overall pick.
"""

import math
from typing import Iterable

from draftroom.core.models import DraftHistoryEntry

DEFAULT_WINDOW = 20
DEFAULT_DECAY = 10.0


def recommendation_score(distance: float, decay: float = DEFAULT_DECAY) -> float:
    """
    Score a candidate by distance from the current pick.

    1.0 at zero distance, e^-1 at one decay length, strictly decreasing.
    """
    return math.exp(-abs(distance) / decay)


def _proximity_key(entry: DraftHistoryEntry, overall_pick: int) -> tuple:
    return (abs(entry.overall_pick - overall_pick), entry.overall_pick, entry.player_id)


def build_candidate_pool(
    history: Iterable[DraftHistoryEntry],
    overall_pick: int,
    drafted_ids: Iterable[str] = (),
    window: int = DEFAULT_WINDOW,
    limit: int = 10,
) -> list[DraftHistoryEntry]:
    """
    Select the players worth scoring for a pick.

    Players already taken in the session are never candidates. The pool
    is every remaining player projected within `window` picks of the
    current pick; if nobody is, it falls back to the `limit` remaining
    players projected closest to it.
    """
    taken = set(drafted_ids)
    available = [h for h in history if h.player_id not in taken]

    nearby = [h for h in available if abs(h.overall_pick - overall_pick) <= window]
    if nearby:
        return nearby

    available.sort(key=lambda h: _proximity_key(h, overall_pick))
    return available[:limit]


def rank_candidates(
    candidates: Iterable[DraftHistoryEntry],
    overall_pick: int,
    decay: float = DEFAULT_DECAY,
    limit: int = 10,
) -> list[tuple[DraftHistoryEntry, float]]:
    """
    Score and order candidates, best first.

    Ties on score go to the earlier projected pick, then player id.

    Returns:
        Up to `limit` (entry, score) pairs
    """
    scored = [
        (entry, recommendation_score(entry.overall_pick - overall_pick, decay))
        for entry in candidates
    ]
    scored.sort(key=lambda pair: (-pair[1], pair[0].overall_pick, pair[0].player_id))
    return scored[:limit]
