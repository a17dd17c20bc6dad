"""
Pydantic schemas for external input.

League fixture files and roster-needs configs arrive as plain JSON.
These schemas validate them before anything reaches the engine, and
parse failures surface as draftroom ValidationErrors.
"""

from typing import Any, Mapping, Optional

import pydantic
from pydantic import BaseModel, ConfigDict, Field, model_validator

from draftroom.core.enums import Role
from draftroom.core.roster import PositionRequirement
from draftroom.errors import ValidationError


def _first_error(exc: pydantic.ValidationError, prefix: str = "") -> ValidationError:
    """Convert a pydantic error into ours, keeping the first failing field."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    field = f"{prefix}.{location}" if prefix and location else (prefix or location or None)
    message = first.get("msg", str(exc))
    return ValidationError(f"{field}: {message}" if field else message, field=field)


class PositionNeedSchema(BaseModel):
    """Min/max players wanted at one role."""

    model_config = ConfigDict(extra="forbid")

    min: int = Field(..., ge=0)
    max: int = Field(..., ge=0)
    current: int = Field(0, ge=0)

    @model_validator(mode="after")
    def _max_not_below_min(self) -> "PositionNeedSchema":
        if self.max < self.min:
            raise ValueError(f"max ({self.max}) cannot be below min ({self.min})")
        return self

    def to_requirement(self) -> PositionRequirement:
        return PositionRequirement(min=self.min, max=self.max, current=self.current)


def parse_roster_needs(raw: Mapping[str, Any]) -> dict[Role, PositionRequirement]:
    """
    Validate a roster-needs config.

    Args:
        raw: Role code -> {"min": int, "max": int, "current": int}

    Returns:
        Role -> PositionRequirement

    Raises:
        ValidationError: Unknown role, negative min, max below min, or
            non-numeric values
    """
    if not isinstance(raw, Mapping):
        raise ValidationError("Roster needs must be a mapping of role to {min, max}")

    config: dict[Role, PositionRequirement] = {}
    for code, value in raw.items():
        role = Role.from_code(code)
        if role is None:
            raise ValidationError(f"Unknown role in roster needs: {code!r}", field=str(code))
        try:
            config[role] = PositionNeedSchema.model_validate(value).to_requirement()
        except pydantic.ValidationError as e:
            raise _first_error(e, prefix=role.value) from e
    return config


# =============================================================================
# League Fixture
# =============================================================================

class DraftHistorySchema(BaseModel):
    """A player's historical or projected draft slot."""

    overall_pick: int = Field(..., ge=1)
    round: Optional[int] = Field(None, ge=1)
    round_pick: Optional[int] = Field(None, ge=1)


class PlayerFixtureSchema(BaseModel):
    """A player with one set of ratings."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    first_name: str = ""
    last_name: str = ""
    rated_role: Optional[str] = None
    age: Optional[int] = Field(None, ge=0)
    weight_lbs: Optional[int] = Field(None, ge=0)
    height_inches: Optional[int] = Field(None, ge=0)
    ratings: dict[str, int] = {}
    draft: Optional[DraftHistorySchema] = None


class PickFixtureSchema(BaseModel):
    """A pick already made in a session."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    round: int = Field(..., ge=1)
    pick: int = Field(..., ge=1)
    player_id: str
    drafted_role: Optional[str] = None


class SessionFixtureSchema(BaseModel):
    """A draft session with its picks so far."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    draft_position: int = Field(1, ge=1)
    total_teams: int = Field(32, ge=1)
    is_snake_draft: bool = True
    status: str = "active"
    picks: list[PickFixtureSchema] = []
    roster_needs: Optional[dict[str, dict[str, Any]]] = None


class LeagueFixtureSchema(BaseModel):
    """A whole league: players, sessions and optional roster requirements."""

    players: list[PlayerFixtureSchema] = []
    sessions: list[SessionFixtureSchema] = []
    roster_requirements: Optional[dict[str, dict[str, Any]]] = None


def parse_league(data: Any) -> LeagueFixtureSchema:
    """Validate a league fixture, raising draftroom ValidationError on failure."""
    try:
        return LeagueFixtureSchema.model_validate(data)
    except pydantic.ValidationError as e:
        raise _first_error(e) from e
