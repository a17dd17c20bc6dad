"""
Draft service.

Records picks in a session, builds the per-round draft board from
reference draft history and lists a session's pick schedule.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from draftroom.cache import Cache, ensure_safe
from draftroom.config import EngineConfig, get_config
from draftroom.core.draft import PickSlot, calculate_all_picks, round_bounds
from draftroom.core.enums import Role
from draftroom.core.models import DraftHistoryEntry, DraftPick, DraftSession
from draftroom.errors import NotFoundError, ValidationError
from draftroom.services import cache_keys
from draftroom.stores.base import AttributeStore, DraftContextStore

logger = logging.getLogger(__name__)


@dataclass
class DraftBoard:
    """Reference picks that fell in one round, in pick order."""

    round: int
    picks: list[DraftHistoryEntry] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"round": self.round, "picks": [p.to_dict() for p in self.picks]}

    @classmethod
    def from_dict(cls, data: dict) -> "DraftBoard":
        return cls(
            round=data["round"],
            picks=[DraftHistoryEntry.from_dict(p) for p in data.get("picks", [])],
        )


class DraftService:
    """Session picks, draft boards and pick schedules."""

    def __init__(
        self,
        attributes: AttributeStore,
        draft_context: DraftContextStore,
        cache: Optional[Cache] = None,
        config: Optional[EngineConfig] = None,
    ):
        self.config = config or get_config()
        self.attributes = attributes
        self.draft_context = draft_context
        self.cache = ensure_safe(cache, self.config.cache_ttl_seconds)

    def get_session(self, session_id: str) -> DraftSession:
        session = self.draft_context.get_session(session_id)
        if session is None:
            raise NotFoundError(f"Draft session {session_id} not found", entity="session", entity_id=session_id)
        return session

    # =========================================================================
    # Picks
    # =========================================================================

    def record_pick(
        self,
        session_id: str,
        round: int,
        pick: int,
        player_id: str,
        drafted_role: "Role | str | None" = None,
    ) -> DraftPick:
        """
        Record a player taken in a session.

        Args:
            session_id: Session making the pick
            round: Round number, 1-based
            pick: Draft slot within the round, 1-based
            player_id: Player taken
            drafted_role: Role the player is drafted to play (optional)

        Raises:
            NotFoundError: Unknown session or player
            ValidationError: Bad round/pick, slot already used, player
                already drafted, or unknown role
        """
        session = self.get_session(session_id)
        if not self.attributes.player_exists(player_id):
            raise NotFoundError(f"Player {player_id} not found", entity="player", entity_id=player_id)

        if not 1 <= round <= self.config.total_rounds:
            raise ValidationError(
                f"round must be between 1 and {self.config.total_rounds}, got {round}", field="round"
            )
        if not 1 <= pick <= session.total_teams:
            raise ValidationError(
                f"pick must be between 1 and {session.total_teams}, got {pick}", field="pick"
            )

        role = None
        if drafted_role is not None:
            role = Role.from_code(drafted_role)
            if role is None:
                raise ValidationError(f"Unknown role: {drafted_role!r}", field="drafted_role")

        for existing in self.draft_context.picks_for_session(session_id):
            if existing.player_id == player_id:
                raise ValidationError(
                    f"Player {player_id} was already drafted in round {existing.round}",
                    field="player_id",
                )
            if existing.round == round and existing.pick == pick:
                raise ValidationError(f"Round {round} pick {pick} has already been made", field="pick")

        draft_pick = DraftPick(
            session_id=session_id,
            round=round,
            pick=pick,
            player_id=player_id,
            drafted_role=role,
        )
        self.draft_context.add_pick(draft_pick)

        # Recommendations exclude drafted players, so the session's are stale
        self.cache.delete_pattern(cache_keys.session_recommendations(session_id))

        logger.info(f"Session {session_id}: round {round} pick {pick} -> {player_id}")
        return draft_pick

    def pick_schedule(self, session_id: str) -> list[PickSlot]:
        """Every selection the session's team holds across the draft."""
        session = self.get_session(session_id)
        return calculate_all_picks(
            session.draft_position,
            self.config.total_rounds,
            session.is_snake_draft,
            session.total_teams,
        )

    # =========================================================================
    # Draft Board
    # =========================================================================

    def draft_board(self, round: int) -> DraftBoard:
        """Reference picks for a round (cached briefly)."""
        key = cache_keys.draft_board(round)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug(f"Returning draft board for round {round} from cache")
            return DraftBoard.from_dict(cached)

        first, last = round_bounds(round, self.config.total_teams)
        picks = [
            entry
            for entry in self.draft_context.draft_history()
            if first <= entry.overall_pick <= last
        ]
        picks.sort(key=lambda entry: (entry.overall_pick, entry.player_id))
        board = DraftBoard(round=round, picks=picks)

        self.cache.set(key, board.to_dict(), self.config.draft_board_ttl_seconds)
        return board

    def clear_draft_board_cache(self, round: Optional[int] = None) -> None:
        """Drop one round's cached board, or every round's."""
        if round is not None:
            self.cache.delete(cache_keys.draft_board(round))
        else:
            self.cache.delete_pattern(cache_keys.DRAFT_BOARD_PATTERN)

    def refresh_draft_board(self, round: int) -> DraftBoard:
        """Rebuild a round's board from the store."""
        self.clear_draft_board_cache(round)
        return self.draft_board(round)
