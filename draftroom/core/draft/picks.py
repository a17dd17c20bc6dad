"""
Draft pick arithmetic.

Converts between (round, pick) positions and the single linear overall
pick number, for both straight and snake drafts.
"""

from dataclasses import dataclass

from draftroom.errors import ValidationError


@dataclass(frozen=True)
class PickSlot:
    """One selection a team holds: round, order within the round, overall number."""

    round: int
    pick: int
    overall: int

    def to_dict(self) -> dict:
        return {"round": self.round, "pick": self.pick, "overall": self.overall}


def _check_format(total_teams: int, draft_position: int) -> None:
    if total_teams < 1:
        raise ValidationError(f"total_teams must be at least 1, got {total_teams}", field="total_teams")
    if not 1 <= draft_position <= total_teams:
        raise ValidationError(
            f"pick must be between 1 and {total_teams}, got {draft_position}", field="pick"
        )


def calculate_overall_pick(
    round: int,
    pick: int,
    total_teams: int = 32,
    is_snake_draft: bool = True,
) -> int:
    """
    Get the overall pick number a team's slot lands on in a round.

    Args:
        round: Round number, 1-based
        pick: The team's draft slot, 1-based
        total_teams: Teams in the draft
        is_snake_draft: If True, order reverses on even rounds

    Returns:
        Overall pick number, 1-based

    Example:
        Slot 5 of 32 in round 2 of a snake draft picks 28th in the
        round, 60th overall.
    """
    if round < 1:
        raise ValidationError(f"round must be at least 1, got {round}", field="round")
    _check_format(total_teams, pick)

    base = (round - 1) * total_teams
    if is_snake_draft and round % 2 == 0:
        return base + (total_teams - pick + 1)
    return base + pick


def calculate_all_picks(
    draft_position: int,
    total_rounds: int = 54,
    is_snake_draft: bool = True,
    total_teams: int = 32,
) -> list[PickSlot]:
    """
    List every selection a team holds across the draft.

    Args:
        draft_position: The team's first-round slot
        total_rounds: Rounds in the draft
        is_snake_draft: If True, order reverses on even rounds
        total_teams: Teams in the draft

    Returns:
        One PickSlot per round, in round order
    """
    _check_format(total_teams, draft_position)
    if total_rounds < 1:
        raise ValidationError(
            f"total_rounds must be at least 1, got {total_rounds}", field="total_rounds"
        )

    slots = []
    for round_number in range(1, total_rounds + 1):
        overall = calculate_overall_pick(round_number, draft_position, total_teams, is_snake_draft)
        in_round = overall - (round_number - 1) * total_teams
        slots.append(PickSlot(round=round_number, pick=in_round, overall=overall))
    return slots


def get_round_from_pick(pick_number: int, teams: int = 32) -> int:
    """Get round number from overall pick number."""
    if pick_number < 1:
        raise ValidationError(f"pick_number must be at least 1, got {pick_number}", field="pick_number")
    if teams < 1:
        raise ValidationError(f"teams must be at least 1, got {teams}", field="teams")
    return ((pick_number - 1) // teams) + 1


def round_bounds(round: int, teams: int = 32) -> tuple[int, int]:
    """First and last overall pick of a round, inclusive."""
    if round < 1:
        raise ValidationError(f"round must be at least 1, got {round}", field="round")
    return (round - 1) * teams + 1, round * teams
