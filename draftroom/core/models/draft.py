"""Draft session, pick, history and recommendation records."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from draftroom.core.enums import Role


class SessionStatus(Enum):
    """Lifecycle of a draft session."""

    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"


@dataclass
class DraftSession:
    """A user's mock draft: format plus the slot they pick from."""

    id: str
    draft_position: int = 1  # First-round slot, 1-based
    total_teams: int = 32
    is_snake_draft: bool = True
    status: SessionStatus = SessionStatus.ACTIVE

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "draft_position": self.draft_position,
            "total_teams": self.total_teams,
            "is_snake_draft": self.is_snake_draft,
            "status": self.status.value,
        }


@dataclass
class DraftPick:
    """A player taken in a session."""

    session_id: str
    round: int
    pick: int  # Pick within the round, 1-based
    player_id: str
    drafted_role: Optional[Role] = None  # Role the player was drafted to play
    picked_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        return {
            "session_id": self.session_id,
            "round": self.round,
            "pick": self.pick,
            "player_id": self.player_id,
            "drafted_role": self.drafted_role.value if self.drafted_role else None,
            "picked_at": self.picked_at.isoformat(),
        }


@dataclass
class DraftHistoryEntry:
    """Where a player went (or is projected to go) in a reference draft."""

    player_id: str
    overall_pick: int
    player_name: str = ""
    round: Optional[int] = None
    round_pick: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "player_id": self.player_id,
            "player_name": self.player_name,
            "overall_pick": self.overall_pick,
            "round": self.round,
            "round_pick": self.round_pick,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DraftHistoryEntry":
        return cls(
            player_id=data["player_id"],
            overall_pick=data["overall_pick"],
            player_name=data.get("player_name", ""),
            round=data.get("round"),
            round_pick=data.get("round_pick"),
        )


@dataclass
class Recommendation:
    """A suggested player for an upcoming pick."""

    session_id: str
    round: int
    pick: int
    player_id: str
    score: float  # In (0, 1]; 1.0 when the player's projection is this exact pick
    reason: str
    overall_pick: int
    projected_pick: int
    player_name: str = ""

    def to_dict(self) -> dict:
        return {
            "session_id": self.session_id,
            "round": self.round,
            "pick": self.pick,
            "player_id": self.player_id,
            "player_name": self.player_name,
            "score": self.score,
            "reason": self.reason,
            "overall_pick": self.overall_pick,
            "projected_pick": self.projected_pick,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Recommendation":
        return cls(
            session_id=data["session_id"],
            round=data["round"],
            pick=data["pick"],
            player_id=data["player_id"],
            player_name=data.get("player_name", ""),
            score=data["score"],
            reason=data.get("reason", ""),
            overall_pick=data["overall_pick"],
            projected_pick=data["projected_pick"],
        )
