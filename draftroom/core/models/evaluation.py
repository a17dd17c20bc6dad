"""Player evaluation record."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from draftroom.core.archetypes import Archetype
from draftroom.core.enums import Role


@dataclass
class ViablePosition:
    """A role the player can credibly fill, with its tier."""

    role: Role
    score: float
    tier: int
    is_elite: bool = False

    def to_dict(self) -> dict:
        return {
            "role": self.role.value,
            "score": self.score,
            "tier": self.tier,
            "is_elite": self.is_elite,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ViablePosition":
        return cls(
            role=Role(data["role"]),
            score=data["score"],
            tier=data["tier"],
            is_elite=data.get("is_elite", False),
        )


@dataclass
class PlayerEvaluation:
    """
    The engine's assessment of one player.

    Fully overwritten on every re-evaluation. Rank is assigned later by
    the ranking pass and is None until the first pass runs.
    """

    player_id: str
    player_name: str = ""
    rated_role: Optional[Role] = None
    position_scores: dict[Role, float] = field(default_factory=dict)
    best_role: Optional[Role] = None
    normalized_score: float = 0.0  # Best raw score, before age adjustment
    age_modifier: float = 1.0
    age_adjusted_score: float = 0.0
    viable_roles: list[Role] = field(default_factory=list)  # Sorted by score, best first
    viable_positions: list[ViablePosition] = field(default_factory=list)
    position_tier: int = 5
    archetype: Optional[Archetype] = None
    rank: Optional[int] = None
    calculated_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "player_id": self.player_id,
            "player_name": self.player_name,
            "rated_role": self.rated_role.value if self.rated_role else None,
            "position_scores": {r.value: s for r, s in self.position_scores.items()},
            "best_role": self.best_role.value if self.best_role else None,
            "normalized_score": self.normalized_score,
            "age_modifier": self.age_modifier,
            "age_adjusted_score": self.age_adjusted_score,
            "viable_roles": [r.value for r in self.viable_roles],
            "viable_positions": [vp.to_dict() for vp in self.viable_positions],
            "position_tier": self.position_tier,
            "archetype": self.archetype.to_dict() if self.archetype else None,
            "rank": self.rank,
            "calculated_at": self.calculated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PlayerEvaluation":
        """Create from dictionary."""
        return cls(
            player_id=data["player_id"],
            player_name=data.get("player_name", ""),
            rated_role=Role(data["rated_role"]) if data.get("rated_role") else None,
            position_scores={Role(r): s for r, s in data.get("position_scores", {}).items()},
            best_role=Role(data["best_role"]) if data.get("best_role") else None,
            normalized_score=data.get("normalized_score", 0.0),
            age_modifier=data.get("age_modifier", 1.0),
            age_adjusted_score=data.get("age_adjusted_score", 0.0),
            viable_roles=[Role(r) for r in data.get("viable_roles", [])],
            viable_positions=[
                ViablePosition.from_dict(vp) for vp in data.get("viable_positions", [])
            ],
            position_tier=data.get("position_tier", 5),
            archetype=Archetype.from_dict(data["archetype"]) if data.get("archetype") else None,
            rank=data.get("rank"),
            calculated_at=(
                datetime.fromisoformat(data["calculated_at"])
                if data.get("calculated_at")
                else datetime.now()
            ),
        )

    def __repr__(self) -> str:
        role = self.best_role.value if self.best_role else "?"
        return f"PlayerEvaluation({self.player_name or self.player_id}, {role} {self.normalized_score:.1f}, rank={self.rank})"
