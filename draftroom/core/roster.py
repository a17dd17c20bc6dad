"""
Roster optimization and positional needs.

Turns a session's picks into role groups (each player at their natural
role, plus any role they are good enough to cover) and derives how badly
each role still needs filling. Both are derived views, rebuilt from the
pick list on every call.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional

from draftroom.core.enums import Role
from draftroom.core.models import DraftPick, PlayerEvaluation
from draftroom.errors import ValidationError

logger = logging.getLogger(__name__)

# Secondary coverage requires an elite bundle or one of the top two tiers
SECONDARY_MAX_TIER = 2

# A starter at or above this score means the role needs no quality upgrade
QUALITY_STARTER_SCORE = 85.0


@dataclass
class PositionRequirement:
    """How many players a roster wants at a role."""

    min: int
    max: int
    current: int = 0  # Informational; counts are always derived from picks

    def __post_init__(self) -> None:
        if self.min < 0:
            raise ValidationError(f"min cannot be negative, got {self.min}", field="min")
        if self.max < self.min:
            raise ValidationError(f"max ({self.max}) cannot be below min ({self.min})", field="max")

    def to_dict(self) -> dict:
        return {"min": self.min, "max": self.max, "current": self.current}


@dataclass
class RosterSlotAssignment:
    """A drafted player placed at a role."""

    player_id: str
    player_name: str
    role: Role
    score: float
    is_secondary: bool = False

    def to_dict(self) -> dict:
        return {
            "player_id": self.player_id,
            "name": self.player_name,
            "role": self.role.value,
            "score": round(self.score, 2),
            "is_secondary": self.is_secondary,
        }


@dataclass
class RosterNeed:
    """How much a role still needs filling."""

    role: Role
    needed: int
    priority: float
    current_players: list[RosterSlotAssignment] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "role": self.role.value,
            "needed": self.needed,
            "priority": round(self.priority, 4),
            "current_players": [
                {"name": p.player_name, "score": round(p.score, 2), "is_secondary": p.is_secondary}
                for p in self.current_players
            ],
        }


# =============================================================================
# Roster Optimizer
# =============================================================================

def natural_role(pick: DraftPick, evaluation: PlayerEvaluation) -> Optional[Role]:
    """The role a pick plays: drafted role, else rated role, else best role."""
    return pick.drafted_role or evaluation.rated_role or evaluation.best_role


def player_assignments(pick: DraftPick, evaluation: PlayerEvaluation) -> list[RosterSlotAssignment]:
    """Primary assignment at the natural role plus qualifying secondary ones."""
    assignments = []
    home = natural_role(pick, evaluation)
    if home is not None:
        assignments.append(RosterSlotAssignment(
            player_id=evaluation.player_id,
            player_name=evaluation.player_name,
            role=home,
            score=evaluation.age_adjusted_score,
            is_secondary=False,
        ))

    for vp in evaluation.viable_positions:
        if vp.role == home:
            continue
        if vp.is_elite or vp.tier <= SECONDARY_MAX_TIER:
            assignments.append(RosterSlotAssignment(
                player_id=evaluation.player_id,
                player_name=evaluation.player_name,
                role=vp.role,
                score=vp.score,
                is_secondary=True,
            ))
    return assignments


def optimize_roster(
    drafted: Iterable[tuple[DraftPick, Optional[PlayerEvaluation]]],
) -> dict[Role, list[RosterSlotAssignment]]:
    """
    Group drafted players by the roles they can fill.

    Args:
        drafted: (pick, evaluation) pairs in pick order. Picks whose
            player has no evaluation are skipped.

    Returns:
        Role -> assignments sorted by score (best first), roles in table order
    """
    groups: dict[Role, list[RosterSlotAssignment]] = {}
    for pick, evaluation in drafted:
        if evaluation is None:
            logger.warning(
                f"Skipping pick {pick.round}.{pick.pick} ({pick.player_id}): player has no evaluation"
            )
            continue
        for assignment in player_assignments(pick, evaluation):
            groups.setdefault(assignment.role, []).append(assignment)

    roster = {}
    for role in Role:
        if role in groups:
            roster[role] = sorted(groups[role], key=lambda a: a.score, reverse=True)
    return roster


# =============================================================================
# Positional Needs
# =============================================================================

def calculate_priority(
    needed: int,
    requirement: PositionRequirement,
    assignments: list[RosterSlotAssignment],
) -> float:
    """
    Priority weight for drafting at a role.

    Starts at 1.0 and is raised for unmet minimums, damped when the role
    is at or over its maximum, raised when no natural starter is a quality
    player, and raised for every fill-in covering the role.
    """
    priority = 1.0
    if needed > 0:
        priority *= 1 + 0.2 * needed
    if len(assignments) >= requirement.max:
        priority *= 0.3

    has_quality_starter = any(
        a.score >= QUALITY_STARTER_SCORE and not a.is_secondary for a in assignments
    )
    if not has_quality_starter and needed <= 0:
        priority *= 1.2

    secondary_count = sum(1 for a in assignments if a.is_secondary)
    priority *= 1 + 0.1 * secondary_count
    return priority


def calculate_positional_needs(
    roster: Mapping[Role, list[RosterSlotAssignment]],
    needs_config: Mapping[Role, PositionRequirement],
) -> dict[Role, RosterNeed]:
    """
    Derive shortage and priority for each configured role.

    Both primary and secondary assignments count toward a role.
    """
    needs = {}
    for role, requirement in needs_config.items():
        assignments = list(roster.get(role, []))
        needed = max(0, requirement.min - len(assignments))
        needs[role] = RosterNeed(
            role=role,
            needed=needed,
            priority=calculate_priority(needed, requirement, assignments),
            current_players=assignments,
        )
    return needs
