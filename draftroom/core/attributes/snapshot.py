"""Point-in-time attribute snapshot for a player."""

from dataclasses import dataclass, fields
from typing import Any, Optional

from draftroom.core.attributes.base import ATTRIBUTES_BY_NAME, ATTRIBUTE_NAMES
from draftroom.errors import ValidationError


@dataclass(frozen=True)
class AttributeSnapshot:
    """
    A player's ratings as recorded at one point in time.

    Every rating is optional: a missing value means "not rated", which
    scoring skips rather than treating as zero. Snapshots are immutable;
    a new rating pass produces a new snapshot.
    """

    # Identity
    player_id: str
    first_name: str = ""
    last_name: str = ""
    rated_role: Optional[str] = None  # Role code the ratings were recorded at

    # Physical info
    age: Optional[int] = None
    weight_lbs: Optional[int] = None
    height_inches: Optional[int] = None

    # Physical
    speed: Optional[int] = None
    acceleration: Optional[int] = None
    agility: Optional[int] = None
    strength: Optional[int] = None
    jumping: Optional[int] = None
    stamina: Optional[int] = None
    injury: Optional[int] = None
    toughness: Optional[int] = None
    change_of_direction: Optional[int] = None

    # Passing
    throw_power: Optional[int] = None
    throw_accuracy_short: Optional[int] = None
    throw_accuracy_mid: Optional[int] = None
    throw_accuracy_deep: Optional[int] = None
    throw_on_the_run: Optional[int] = None
    throw_under_pressure: Optional[int] = None
    play_action: Optional[int] = None
    break_sack: Optional[int] = None

    # Rushing
    carrying: Optional[int] = None
    trucking: Optional[int] = None
    break_tackle: Optional[int] = None
    juke_move: Optional[int] = None
    spin_move: Optional[int] = None
    stiff_arm: Optional[int] = None
    bc_vision: Optional[int] = None

    # Receiving
    catching: Optional[int] = None
    catch_in_traffic: Optional[int] = None
    spectacular_catch: Optional[int] = None
    short_route_running: Optional[int] = None
    medium_route_running: Optional[int] = None
    deep_route_running: Optional[int] = None
    release: Optional[int] = None

    # Blocking
    pass_block: Optional[int] = None
    pass_block_power: Optional[int] = None
    pass_block_finesse: Optional[int] = None
    run_block: Optional[int] = None
    run_block_power: Optional[int] = None
    run_block_finesse: Optional[int] = None
    lead_block: Optional[int] = None
    impact_blocking: Optional[int] = None

    # Defense
    tackle: Optional[int] = None
    hit_power: Optional[int] = None
    block_shedding: Optional[int] = None
    pursuit: Optional[int] = None
    play_recognition: Optional[int] = None
    man_coverage: Optional[int] = None
    zone_coverage: Optional[int] = None
    press: Optional[int] = None
    finesse_moves: Optional[int] = None
    power_moves: Optional[int] = None

    # Special Teams
    kick_power: Optional[int] = None
    kick_accuracy: Optional[int] = None
    kick_return: Optional[int] = None

    # Mental
    awareness: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("age", "weight_lbs", "height_inches"):
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValidationError(f"{name} must be numeric, got {value!r}", field=name)
            if value < 0:
                raise ValidationError(f"{name} cannot be negative, got {value}", field=name)

        for name in ATTRIBUTE_NAMES:
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValidationError(f"Rating {name} must be numeric, got {value!r}", field=name)
            if not ATTRIBUTES_BY_NAME[name].in_range(value):
                raise ValidationError(f"Rating {name}={value} is outside 0-99", field=name)

    @property
    def full_name(self) -> str:
        """Full name of the player."""
        return f"{self.first_name} {self.last_name}".strip()

    def get(self, attr_name: str) -> Optional[int]:
        """Get a rating by name, or None if unrated or not a rating."""
        if attr_name not in ATTRIBUTES_BY_NAME:
            return None
        return getattr(self, attr_name)

    def ratings(self) -> dict[str, int]:
        """All rated attributes as a plain dictionary."""
        return {
            name: getattr(self, name)
            for name in ATTRIBUTE_NAMES
            if getattr(self, name) is not None
        }

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "player_id": self.player_id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "rated_role": self.rated_role,
            "age": self.age,
            "weight_lbs": self.weight_lbs,
            "height_inches": self.height_inches,
            "ratings": self.ratings(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AttributeSnapshot":
        """
        Create from dictionary.

        Ratings may be nested under "ratings" or given at the top level.
        Unknown rating names are rejected.
        """
        identity = {f.name for f in fields(cls)} - set(ATTRIBUTE_NAMES)
        ratings = dict(data.get("ratings", {}))
        for key, value in data.items():
            if key in ATTRIBUTES_BY_NAME:
                ratings[key] = value

        unknown = sorted(set(ratings) - set(ATTRIBUTE_NAMES))
        if unknown:
            raise ValidationError(f"Unknown ratings: {', '.join(unknown)}", field=unknown[0])
        if "player_id" not in data:
            raise ValidationError("Snapshot is missing player_id", field="player_id")

        kwargs = {k: v for k, v in data.items() if k in identity}
        kwargs["player_id"] = str(data["player_id"])
        return cls(**kwargs, **ratings)
