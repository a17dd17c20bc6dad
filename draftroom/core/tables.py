"""
Static evaluation tables.

Per-role attribute weights, body-type thresholds, tier cut-points,
specialist bundles and age curves. Everything here is read-only config
built once at import; nothing in the engine mutates it.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Protocol

from draftroom.core.attributes.base import ATTRIBUTES_BY_NAME
from draftroom.core.enums import Role


class _Rated(Protocol):
    def get(self, attr_name: str) -> Optional[int]: ...


# =============================================================================
# Table Types
# =============================================================================

@dataclass(frozen=True)
class BodyTypeThreshold:
    """Expected weight range for a role. Either bound may be absent."""

    min_weight: Optional[int] = None
    max_weight: Optional[int] = None
    penalty: float = 0.0  # Fraction removed from the score when out of range

    def is_outside(self, weight_lbs: Optional[float]) -> bool:
        """Check whether a weight falls outside the expected range."""
        if weight_lbs is None:
            return False
        if self.min_weight is not None and weight_lbs < self.min_weight:
            return True
        if self.max_weight is not None and weight_lbs > self.max_weight:
            return True
        return False


@dataclass(frozen=True)
class RoleWeightProfile:
    """Attribute weights for one role plus its optional body-type thresholds."""

    role: Role
    weights: Mapping[str, float]
    body_type: Optional[BodyTypeThreshold] = None

    def __post_init__(self) -> None:
        unknown = [name for name in self.weights if name not in ATTRIBUTES_BY_NAME]
        if unknown:
            raise ValueError(f"{self.role.value} profile uses unknown attributes: {unknown}")
        if any(w <= 0 for w in self.weights.values()):
            raise ValueError(f"{self.role.value} profile weights must be positive")
        object.__setattr__(self, "weights", MappingProxyType(dict(self.weights)))


@dataclass(frozen=True)
class RoleTierThresholds:
    """
    Four descending score cut-points for a role.

    Tier 1 is at or above tier1, and so on down to tier 4. Anything below
    tier4 is tier 5 (below replacement level).
    """

    tier1: float
    tier2: float
    tier3: float
    tier4: float

    def __post_init__(self) -> None:
        if not self.tier1 > self.tier2 > self.tier3 > self.tier4:
            raise ValueError(
                f"Tier cut-points must descend: {self.tier1}/{self.tier2}/{self.tier3}/{self.tier4}"
            )

    def tier_for(self, score: float) -> int:
        """Get the tier (1-5) a score falls into."""
        for tier, cut in enumerate((self.tier1, self.tier2, self.tier3, self.tier4), start=1):
            if score >= cut:
                return tier
        return 5


@dataclass(frozen=True)
class SpecialistBundle:
    """
    A named set of attribute minimums describing a playing style.

    A bundle matches only when every listed attribute is rated and meets
    or exceeds its minimum.
    """

    name: str
    thresholds: Mapping[str, int] = field(default_factory=dict)
    elite: bool = False

    def matches(self, snapshot: _Rated) -> bool:
        for attr, minimum in self.thresholds.items():
            value = snapshot.get(attr)
            if value is None or value < minimum:
                return False
        return True


# =============================================================================
# Role Weights
# =============================================================================

_OFFENSIVE_TACKLE = {
    "pass_block": 1.0,
    "pass_block_power": 1.0,
    "pass_block_finesse": 0.9,
    "strength": 0.9,
    "run_block": 0.8,
    "run_block_power": 0.8,
    "run_block_finesse": 0.8,
    "agility": 0.7,
    "acceleration": 0.6,
}

_GUARD = {
    "run_block": 1.0,
    "run_block_power": 1.0,
    "run_block_finesse": 0.9,
    "strength": 0.9,
    "pass_block": 0.8,
    "pass_block_power": 0.8,
    "pass_block_finesse": 0.8,
    "agility": 0.6,
}

_DEFENSIVE_END = {
    "speed": 1.0,
    "acceleration": 1.0,
    "power_moves": 0.9,
    "finesse_moves": 0.9,
    "block_shedding": 0.9,
    "strength": 0.8,
    "pursuit": 0.8,
    "tackle": 0.7,
    "stamina": 0.6,
}

_OUTSIDE_LINEBACKER = {
    "speed": 1.0,
    "acceleration": 1.0,
    "tackle": 0.9,
    "pursuit": 0.9,
    "hit_power": 0.8,
    "block_shedding": 0.8,
    "zone_coverage": 0.7,
    "finesse_moves": 0.7,
    "power_moves": 0.7,
    "stamina": 0.6,
}

_KICKING = {"kick_power": 1.0, "kick_accuracy": 0.9}

_ROLE_WEIGHTS: dict[Role, dict[str, float]] = {
    Role.QB: {
        "throw_power": 1.0,
        "throw_accuracy_short": 1.0,
        "throw_accuracy_mid": 1.0,
        "throw_accuracy_deep": 0.9,
        "throw_on_the_run": 0.9,
        "throw_under_pressure": 0.9,
        "play_action": 0.7,
        "break_sack": 0.7,
        "speed": 0.6,
        "acceleration": 0.6,
        "agility": 0.5,
    },
    Role.HB: {
        "speed": 1.0,
        "acceleration": 1.0,
        "agility": 0.9,
        "break_tackle": 0.9,
        "carrying": 0.9,
        "change_of_direction": 0.9,
        "trucking": 0.8,
        "juke_move": 0.8,
        "spin_move": 0.8,
        "stiff_arm": 0.7,
        "catching": 0.6,
        "bc_vision": 0.6,
        "stamina": 0.5,
    },
    Role.FB: {
        "lead_block": 1.0,
        "impact_blocking": 1.0,
        "run_block": 0.9,
        "strength": 0.9,
        "carrying": 0.7,
        "trucking": 0.7,
        "catching": 0.6,
        "speed": 0.5,
    },
    Role.WR: {
        "speed": 1.0,
        "acceleration": 1.0,
        "catching": 1.0,
        "agility": 0.9,
        "release": 0.9,
        "short_route_running": 0.9,
        "medium_route_running": 0.9,
        "deep_route_running": 0.9,
        "catch_in_traffic": 0.8,
        "spectacular_catch": 0.8,
        "change_of_direction": 0.8,
        "jumping": 0.7,
        "stamina": 0.5,
    },
    Role.TE: {
        "catching": 1.0,
        "run_block": 0.9,
        "short_route_running": 0.9,
        "medium_route_running": 0.9,
        "catch_in_traffic": 0.9,
        "strength": 0.8,
        "speed": 0.8,
        "acceleration": 0.8,
        "impact_blocking": 0.8,
        "stamina": 0.5,
    },
    Role.LT: _OFFENSIVE_TACKLE,
    Role.LG: _GUARD,
    Role.C: {
        "run_block": 1.0,
        "pass_block": 1.0,
        "strength": 0.9,
        "run_block_power": 0.9,
        "pass_block_power": 0.9,
        "agility": 0.6,
    },
    Role.RG: _GUARD,
    Role.RT: _OFFENSIVE_TACKLE,
    Role.LE: _DEFENSIVE_END,
    Role.RE: _DEFENSIVE_END,
    Role.DT: {
        "block_shedding": 1.0,
        "strength": 1.0,
        "power_moves": 0.9,
        "speed": 0.9,
        "acceleration": 0.9,
        "tackle": 0.8,
        "pursuit": 0.7,
        "stamina": 0.6,
    },
    Role.LOLB: _OUTSIDE_LINEBACKER,
    Role.MLB: {
        "speed": 1.0,
        "acceleration": 1.0,
        "tackle": 0.9,
        "pursuit": 0.9,
        "hit_power": 0.8,
        "zone_coverage": 0.8,
        "block_shedding": 0.8,
        "stamina": 0.6,
    },
    Role.ROLB: _OUTSIDE_LINEBACKER,
    Role.CB: {
        "speed": 1.0,
        "acceleration": 1.0,
        "agility": 1.0,
        "man_coverage": 1.0,
        "zone_coverage": 0.9,
        "press": 0.8,
        "jumping": 0.8,
        "change_of_direction": 0.8,
        "stamina": 0.5,
    },
    Role.FS: {
        "zone_coverage": 1.0,
        "speed": 0.9,
        "acceleration": 0.9,
        "play_recognition": 0.8,
        "pursuit": 0.8,
        "tackle": 0.7,
        "hit_power": 0.6,
        "jumping": 0.6,
        "stamina": 0.6,
    },
    Role.SS: {
        "hit_power": 0.9,
        "zone_coverage": 0.9,
        "speed": 0.8,
        "acceleration": 0.8,
        "play_recognition": 0.8,
        "pursuit": 0.8,
        "tackle": 0.8,
        "jumping": 0.6,
        "stamina": 0.6,
    },
    Role.K: _KICKING,
    Role.P: _KICKING,
}

# (min_weight, max_weight, penalty)
_BODY_TYPES: dict[Role, tuple[int, int, float]] = {
    Role.QB: (200, 250, 0.25),
    Role.HB: (190, 230, 0.25),
    Role.FB: (230, 265, 0.25),
    Role.WR: (175, 215, 0.30),
    Role.TE: (235, 270, 0.25),
    Role.LT: (290, 340, 0.20),
    Role.LG: (290, 340, 0.20),
    Role.C: (290, 340, 0.20),
    Role.RG: (290, 340, 0.20),
    Role.RT: (290, 340, 0.20),
    Role.LE: (250, 290, 0.15),
    Role.RE: (250, 290, 0.15),
    Role.DT: (285, 340, 0.20),
    Role.LOLB: (230, 255, 0.20),
    Role.MLB: (230, 255, 0.20),
    Role.ROLB: (230, 255, 0.20),
    Role.CB: (175, 205, 0.30),
    Role.FS: (180, 210, 0.25),
    Role.SS: (190, 220, 0.25),
    Role.K: (170, 220, 0.15),
    Role.P: (170, 220, 0.15),
}

# Iteration order follows Role member order, which is the table order
ROLE_WEIGHT_PROFILES: Mapping[Role, RoleWeightProfile] = MappingProxyType({
    role: RoleWeightProfile(
        role=role,
        weights=_ROLE_WEIGHTS[role],
        body_type=BodyTypeThreshold(*_BODY_TYPES[role]) if role in _BODY_TYPES else None,
    )
    for role in Role
})


# =============================================================================
# Tier Cut-points
# =============================================================================

_TIERS: dict[Role, tuple[float, float, float, float]] = {
    Role.QB: (88, 80, 72, 65),
    Role.HB: (86, 78, 70, 62),
    Role.FB: (80, 72, 65, 58),
    Role.WR: (86, 78, 70, 62),
    Role.TE: (84, 76, 68, 60),
    Role.LT: (84, 76, 68, 60),
    Role.LG: (84, 76, 68, 60),
    Role.C: (84, 76, 68, 60),
    Role.RG: (84, 76, 68, 60),
    Role.RT: (84, 76, 68, 60),
    Role.LE: (85, 77, 69, 61),
    Role.RE: (85, 77, 69, 61),
    Role.DT: (85, 77, 69, 61),
    Role.LOLB: (84, 76, 68, 60),
    Role.MLB: (84, 76, 68, 60),
    Role.ROLB: (84, 76, 68, 60),
    Role.CB: (86, 78, 70, 62),
    Role.FS: (84, 76, 68, 60),
    Role.SS: (84, 76, 68, 60),
    Role.K: (88, 82, 75, 68),
    Role.P: (88, 82, 75, 68),
}

ROLE_TIER_THRESHOLDS: Mapping[Role, RoleTierThresholds] = MappingProxyType({
    role: RoleTierThresholds(*cuts) for role, cuts in _TIERS.items()
})


# =============================================================================
# Specialist Bundles
# =============================================================================
# Per role: elite bundles first, then specialist bundles in priority order.

_OL_BUNDLES = (
    SpecialistBundle("Elite Lineman", {"pass_block": 90, "run_block": 90, "strength": 88}, elite=True),
    SpecialistBundle("Pass Protector", {"pass_block": 88, "pass_block_finesse": 85}),
    SpecialistBundle("Run Blocker", {"run_block": 88, "run_block_power": 85}),
    SpecialistBundle("Zone Blocker", {"run_block_finesse": 85, "agility": 80}),
    SpecialistBundle("Power Blocker", {"run_block_power": 85, "strength": 88}),
)

_DL_BUNDLES = (
    SpecialistBundle(
        "Elite Defensive Lineman",
        {"power_moves": 88, "finesse_moves": 88, "block_shedding": 88},
        elite=True,
    ),
    SpecialistBundle("Power Rusher", {"power_moves": 88, "strength": 88}),
    SpecialistBundle("Speed Rusher", {"finesse_moves": 88, "speed": 85}),
    SpecialistBundle("Run Stopper", {"block_shedding": 88, "tackle": 85}),
    SpecialistBundle("Pass Rusher", {"power_moves": 85, "finesse_moves": 85}),
)

_LB_BUNDLES = (
    SpecialistBundle(
        "Elite Linebacker", {"tackle": 90, "pursuit": 88, "play_recognition": 88}, elite=True
    ),
    SpecialistBundle("Pass Coverage", {"zone_coverage": 85, "play_recognition": 85}),
    SpecialistBundle("Run Stopper", {"block_shedding": 85, "tackle": 88}),
    SpecialistBundle("Pass Rusher", {"finesse_moves": 85, "speed": 85}),
)

_SAFETY_BUNDLES = (
    SpecialistBundle(
        "Elite Safety", {"zone_coverage": 90, "play_recognition": 88, "tackle": 85}, elite=True
    ),
    SpecialistBundle("Ball Hawk", {"play_recognition": 88, "jumping": 85}),
    SpecialistBundle("Run Support", {"hit_power": 88, "tackle": 85}),
    SpecialistBundle("Zone Coverage", {"zone_coverage": 88}),
)

_KICKING_BUNDLES = (
    SpecialistBundle("Elite Leg", {"kick_power": 92, "kick_accuracy": 92}, elite=True),
    SpecialistBundle("Power", {"kick_power": 90}),
    SpecialistBundle("Accurate", {"kick_accuracy": 90}),
)

_BUNDLES: dict[Role, tuple[SpecialistBundle, ...]] = {
    Role.QB: (
        SpecialistBundle(
            "Elite Passer",
            {
                "throw_power": 90,
                "throw_accuracy_short": 90,
                "throw_accuracy_mid": 88,
                "throw_accuracy_deep": 85,
            },
            elite=True,
        ),
        SpecialistBundle("Strong Arm", {"throw_power": 90}),
        SpecialistBundle("Scrambler", {"speed": 85}),
        SpecialistBundle("West Coast", {"throw_accuracy_short": 90}),
    ),
    Role.HB: (
        SpecialistBundle(
            "Elite Back",
            {"speed": 90, "acceleration": 90, "break_tackle": 88, "carrying": 88},
            elite=True,
        ),
        SpecialistBundle("Power Back", {"trucking": 85, "strength": 85}),
        SpecialistBundle("Speed Back", {"speed": 90}),
        SpecialistBundle("Receiving Back", {"catching": 80}),
    ),
    Role.FB: (
        SpecialistBundle("Elite Fullback", {"lead_block": 90, "impact_blocking": 90}, elite=True),
        SpecialistBundle("Lead Blocker", {"lead_block": 85, "run_block": 80}),
        SpecialistBundle("Receiving Fullback", {"catching": 80}),
        SpecialistBundle("Battering Ram", {"trucking": 85, "strength": 80}),
    ),
    Role.WR: (
        SpecialistBundle(
            "Elite Receiver",
            {
                "catching": 90,
                "speed": 90,
                "short_route_running": 88,
                "medium_route_running": 88,
                "deep_route_running": 88,
            },
            elite=True,
        ),
        SpecialistBundle("Deep Threat", {"deep_route_running": 88, "speed": 90}),
        SpecialistBundle("Possession", {"catch_in_traffic": 85, "catching": 88}),
        SpecialistBundle("Route Runner", {"short_route_running": 88, "medium_route_running": 88}),
        SpecialistBundle("Slot Specialist", {"short_route_running": 85, "agility": 88}),
    ),
    Role.TE: (
        SpecialistBundle(
            "Elite Tight End",
            {"catching": 88, "run_block": 85, "short_route_running": 85},
            elite=True,
        ),
        SpecialistBundle("Vertical Threat", {"catching": 85, "deep_route_running": 80}),
        SpecialistBundle("Blocking", {"run_block": 85, "impact_blocking": 85}),
        SpecialistBundle("Receiving", {"catching": 85, "short_route_running": 80}),
    ),
    Role.LT: _OL_BUNDLES,
    Role.LG: _OL_BUNDLES,
    Role.C: _OL_BUNDLES,
    Role.RG: _OL_BUNDLES,
    Role.RT: _OL_BUNDLES,
    Role.LE: _DL_BUNDLES,
    Role.RE: _DL_BUNDLES,
    Role.DT: _DL_BUNDLES,
    Role.LOLB: _LB_BUNDLES,
    Role.MLB: _LB_BUNDLES,
    Role.ROLB: _LB_BUNDLES,
    Role.CB: (
        SpecialistBundle(
            "Lockdown Corner", {"man_coverage": 92, "zone_coverage": 88, "speed": 90}, elite=True
        ),
        SpecialistBundle("Man Coverage", {"man_coverage": 88}),
        SpecialistBundle("Zone Coverage", {"zone_coverage": 88}),
        SpecialistBundle("Press", {"press": 88, "strength": 80}),
        SpecialistBundle("Ball Hawk", {"play_recognition": 85, "jumping": 85}),
    ),
    Role.FS: _SAFETY_BUNDLES,
    Role.SS: _SAFETY_BUNDLES,
    Role.K: _KICKING_BUNDLES,
    Role.P: _KICKING_BUNDLES,
}

ROLE_BUNDLES: Mapping[Role, tuple[SpecialistBundle, ...]] = MappingProxyType(_BUNDLES)

# Label used as the primary archetype when no bundle matches
FALLBACK_LABELS: Mapping[Role, str] = MappingProxyType({
    Role.QB: "Pocket",
    **{role: "Balanced" for role in Role if role != Role.QB},
})

# Matched regardless of role; reported as special traits only
UNIVERSAL_TRAITS: tuple[SpecialistBundle, ...] = (
    SpecialistBundle("High Football IQ", {"awareness": 90}),
    SpecialistBundle("Iron Man", {"stamina": 90}),
    SpecialistBundle("Durable", {"injury": 90}),
    SpecialistBundle("Powerhouse", {"strength": 95}),
    SpecialistBundle("Blazing Speed", {"speed": 95}),
    SpecialistBundle("Explosive", {"acceleration": 95}),
)


# =============================================================================
# Age Curves
# =============================================================================

# (max_age, modifier), ascending by max age; first match wins
AGE_BRACKETS: tuple[tuple[int, float], ...] = (
    (23, 1.08),  # Rookie upside
    (26, 1.04),  # Developing
    (29, 1.00),  # Prime
    (32, 0.97),  # Veteran
    (35, 0.94),  # Late career
)
TWILIGHT_MODIFIER = 0.90

# Technique roles age gracefully; contact-heavy roles wear down
ACCURACY_ROLES = frozenset({Role.QB, Role.K, Role.P})
EXPLOSIVE_ROLES = frozenset({Role.HB, Role.FB})
ACCURACY_FACTOR = 1.03
EXPLOSIVE_FACTOR = 0.97


# =============================================================================
# Roster Requirements
# =============================================================================

# Role -> (min, max) players on a full roster
DEFAULT_ROSTER_REQUIREMENTS: Mapping[Role, tuple[int, int]] = MappingProxyType({
    Role.QB: (1, 2),
    Role.HB: (1, 3),
    Role.FB: (0, 1),
    Role.WR: (3, 6),
    Role.TE: (1, 3),
    Role.LT: (1, 2),
    Role.LG: (1, 2),
    Role.C: (1, 2),
    Role.RG: (1, 2),
    Role.RT: (1, 2),
    Role.LE: (1, 3),
    Role.RE: (1, 3),
    Role.DT: (2, 4),
    Role.LOLB: (1, 2),
    Role.MLB: (1, 3),
    Role.ROLB: (1, 2),
    Role.CB: (3, 6),
    Role.FS: (1, 2),
    Role.SS: (1, 2),
    Role.K: (1, 1),
    Role.P: (1, 1),
})
