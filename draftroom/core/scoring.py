"""
Position fit scoring.

A player's fit at a role is the weighted average of the ratings the role
cares about. Ratings the player doesn't have are left out of both the
numerator and the denominator, so an unrated attribute never counts as
a zero.
"""

import logging
from typing import Optional

from draftroom.core.attributes import AttributeSnapshot
from draftroom.core.enums import Role
from draftroom.core.tables import ROLE_TIER_THRESHOLDS, ROLE_WEIGHT_PROFILES

logger = logging.getLogger(__name__)


def score_position(
    snapshot: AttributeSnapshot,
    role: "Role | str",
    weight_lbs: Optional[float] = None,
) -> float:
    """
    Score how well a player fits a role.

    Args:
        snapshot: The player's ratings
        role: Target role (Role or role code)
        weight_lbs: Body weight; defaults to the snapshot's weight

    Returns:
        Weighted average rating (0-99), after any body-type penalty.
        Unknown roles score 0.0.
    """
    resolved = Role.from_code(role)
    profile = ROLE_WEIGHT_PROFILES.get(resolved) if resolved else None
    if profile is None:
        logger.warning(f"No weight profile for role {role!r}, scoring 0")
        return 0.0

    weighted_sum = 0.0
    total_weight = 0.0
    for attr, weight in profile.weights.items():
        value = snapshot.get(attr)
        if value is None:
            continue
        weighted_sum += value * weight
        total_weight += weight

    if total_weight == 0:
        return 0.0
    score = weighted_sum / total_weight

    if weight_lbs is None:
        weight_lbs = snapshot.weight_lbs
    if profile.body_type is not None and profile.body_type.is_outside(weight_lbs):
        score *= 1 - profile.body_type.penalty

    return score


def score_all_positions(snapshot: AttributeSnapshot) -> dict[Role, float]:
    """Score a player at every role, in table order."""
    return {role: score_position(snapshot, role) for role in ROLE_WEIGHT_PROFILES}


def get_tier(role: "Role | str", score: float) -> int:
    """
    Get the display tier for a score at a role.

    1 is the best tier, 4 is replacement level and 5 is below it.
    Roles without cut-points are always tier 5.
    """
    resolved = Role.from_code(role)
    thresholds = ROLE_TIER_THRESHOLDS.get(resolved) if resolved else None
    if thresholds is None:
        return 5
    return thresholds.tier_for(score)
