"""
Age adjustment.

Scales a raw fit score by where the player sits on the age curve and by
how well their role tends to age.
"""

from typing import Optional

from draftroom.core.enums import Role
from draftroom.core.tables import (
    ACCURACY_FACTOR,
    ACCURACY_ROLES,
    AGE_BRACKETS,
    EXPLOSIVE_FACTOR,
    EXPLOSIVE_ROLES,
    TWILIGHT_MODIFIER,
)


def get_age_modifier(age: Optional[int]) -> float:
    """
    Get the age bracket multiplier.

    Args:
        age: Player's current age, or None if unknown

    Returns:
        Multiplier from 1.08 (23 and under) down to 0.90 (over 35).
        Unknown age is treated as neutral (1.0).
    """
    if age is None:
        return 1.0
    for max_age, modifier in AGE_BRACKETS:
        if age <= max_age:
            return modifier
    return TWILIGHT_MODIFIER


def get_role_factor(role: "Role | str") -> float:
    """Get the role multiplier (technique roles age better than contact roles)."""
    resolved = Role.from_code(role)
    if resolved in ACCURACY_ROLES:
        return ACCURACY_FACTOR
    if resolved in EXPLOSIVE_ROLES:
        return EXPLOSIVE_FACTOR
    return 1.0


def adjust_for_age(raw_score: float, age: Optional[int], role: "Role | str") -> float:
    """Apply the age and role multipliers to a raw score."""
    return raw_score * get_age_modifier(age) * get_role_factor(role)
