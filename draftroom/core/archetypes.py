"""
Archetype classification.

Matches a player's ratings against the specialist bundles of their best
role and viable roles to label how they play.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from draftroom.core.attributes import AttributeSnapshot
from draftroom.core.enums import Role
from draftroom.core.tables import FALLBACK_LABELS, ROLE_BUNDLES, UNIVERSAL_TRAITS


@dataclass
class Archetype:
    """Playing-style classification for an evaluated player."""

    primary: str
    secondary: Optional[str] = None
    versatility: list[Role] = field(default_factory=list)  # Viable roles besides the best
    special_traits: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "primary": self.primary,
            "secondary": self.secondary,
            "versatility": [r.value for r in self.versatility],
            "special_traits": list(self.special_traits),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Archetype":
        return cls(
            primary=data["primary"],
            secondary=data.get("secondary"),
            versatility=[Role(r) for r in data.get("versatility", [])],
            special_traits=list(data.get("special_traits", [])),
        )


def matched_bundles(snapshot: AttributeSnapshot, role: "Role | str") -> list[str]:
    """Names of every bundle of a role the player matches, elite first."""
    resolved = Role.from_code(role)
    bundles = ROLE_BUNDLES.get(resolved, ()) if resolved else ()
    return [b.name for b in bundles if b.matches(snapshot)]


def is_elite(snapshot: AttributeSnapshot, role: "Role | str") -> bool:
    """Check whether the player matches an elite bundle at a role."""
    resolved = Role.from_code(role)
    bundles = ROLE_BUNDLES.get(resolved, ()) if resolved else ()
    return any(b.elite and b.matches(snapshot) for b in bundles)


def classify_archetype(
    snapshot: AttributeSnapshot,
    best_role: "Role | str",
    viable_roles: Iterable["Role | str"] = (),
) -> Archetype:
    """
    Classify a player's archetype.

    Args:
        snapshot: The player's ratings
        best_role: Highest-scoring role
        viable_roles: Viable roles sorted by score, best first. The best
            role may be included; it is skipped when found.

    Returns:
        Archetype with primary/secondary labels, versatility and traits
    """
    best = Role.from_code(best_role)
    others: list[Role] = []
    for code in viable_roles:
        role = Role.from_code(code)
        if role is not None and role != best and role not in others:
            others.append(role)

    at_best = matched_bundles(snapshot, best)
    primary = at_best[0] if at_best else FALLBACK_LABELS.get(best, "Balanced")

    secondary = next((name for name in at_best if name != primary), None)
    if secondary is None and others:
        secondary = next(
            (name for name in matched_bundles(snapshot, others[0]) if name != primary), None
        )

    traits: list[str] = []
    for role in [best, *others]:
        for name in matched_bundles(snapshot, role):
            if name != primary and name not in traits:
                traits.append(name)
    for bundle in UNIVERSAL_TRAITS:
        if bundle.matches(snapshot) and bundle.name not in traits:
            traits.append(bundle.name)

    return Archetype(
        primary=primary,
        secondary=secondary,
        versatility=others,
        special_traits=traits,
    )
