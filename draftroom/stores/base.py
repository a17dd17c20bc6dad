"""
Store interfaces.

The engine never owns persistence. Services talk to these abstract
stores; a deployment plugs in its own database-backed implementations
and tests use the in-memory ones from draftroom.stores.memory.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from draftroom.core.attributes import AttributeSnapshot
from draftroom.core.enums import Role
from draftroom.core.models import (
    DraftHistoryEntry,
    DraftPick,
    DraftSession,
    PlayerEvaluation,
    Recommendation,
)
from draftroom.core.roster import PositionRequirement


class AttributeStore(ABC):
    """Read access to recorded player ratings."""

    @abstractmethod
    def latest_snapshot(self, player_id: str) -> Optional[AttributeSnapshot]:
        """Most recent snapshot for a player, or None if none recorded."""

    @abstractmethod
    def player_exists(self, player_id: str) -> bool:
        """Check whether the player is known at all."""

    @abstractmethod
    def all_player_ids(self) -> list[str]:
        """Every known player id, in a stable order."""


class EvaluationStore(ABC):
    """Persistence for evaluation records. Reads must see prior writes."""

    @abstractmethod
    def upsert(self, evaluation: PlayerEvaluation) -> None:
        """Create or fully overwrite the evaluation for its player."""

    @abstractmethod
    def get(self, player_id: str) -> Optional[PlayerEvaluation]:
        """Evaluation for a player, or None."""

    @abstractmethod
    def all_sorted_by_score_desc(self) -> list[PlayerEvaluation]:
        """Every evaluation, highest normalized score first."""

    @abstractmethod
    def set_ranks(self, ranks: dict[str, int]) -> None:
        """Persist ranks for many players at once (player_id -> rank)."""

    @abstractmethod
    def delete(self, player_id: str) -> bool:
        """Remove a player's evaluation. Returns False if there was none."""


class DraftContextStore(ABC):
    """Draft sessions, picks, roster needs and reference draft history."""

    @abstractmethod
    def get_session(self, session_id: str) -> Optional[DraftSession]:
        """Session by id, or None."""

    @abstractmethod
    def picks_for_session(self, session_id: str) -> list[DraftPick]:
        """Picks made in a session, in the order they were made."""

    @abstractmethod
    def add_pick(self, pick: DraftPick) -> None:
        """Record a pick."""

    @abstractmethod
    def roster_needs_config(self, session_id: str) -> Optional[dict[Role, PositionRequirement]]:
        """The session's roster needs, or None if it never set any."""

    @abstractmethod
    def set_roster_needs_config(
        self, session_id: str, config: dict[Role, PositionRequirement]
    ) -> None:
        """Replace the session's roster needs."""

    @abstractmethod
    def roster_requirement_table(self) -> dict[Role, PositionRequirement]:
        """League-wide min/max per role."""

    @abstractmethod
    def draft_history(self) -> list[DraftHistoryEntry]:
        """Historical or projected draft position for every player that has one."""

    @abstractmethod
    def replace_recommendations(
        self,
        session_id: str,
        round: int,
        pick: int,
        recommendations: Iterable[Recommendation],
    ) -> None:
        """Overwrite the recommendations stored for one (session, round, pick)."""

    @abstractmethod
    def recommendations_for_pick(self, session_id: str, round: int, pick: int) -> list[Recommendation]:
        """Stored recommendations for a pick, best first."""
