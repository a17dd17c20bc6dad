"""
Roster service.

Builds a session's roster view and positional needs from its picks.
Nothing here is cached: both views are derived from the pick list on
every call, so a new pick is reflected immediately.
"""

import logging
from typing import Any, Mapping

from draftroom.core.enums import Role
from draftroom.core.roster import (
    PositionRequirement,
    RosterNeed,
    RosterSlotAssignment,
    calculate_positional_needs,
    optimize_roster,
)
from draftroom.core.models import DraftSession
from draftroom.errors import NotFoundError
from draftroom.schemas import parse_roster_needs
from draftroom.stores.base import DraftContextStore, EvaluationStore

logger = logging.getLogger(__name__)


class RosterService:
    """Roster assignments, needs config and positional needs for a session."""

    def __init__(self, evaluations: EvaluationStore, draft_context: DraftContextStore):
        self.evaluations = evaluations
        self.draft_context = draft_context

    def _require_session(self, session_id: str) -> DraftSession:
        session = self.draft_context.get_session(session_id)
        if session is None:
            raise NotFoundError(f"Draft session {session_id} not found", entity="session", entity_id=session_id)
        return session

    def optimize_roster(self, session_id: str) -> dict[Role, list[RosterSlotAssignment]]:
        """Group the session's drafted players by the roles they can fill."""
        self._require_session(session_id)
        picks = self.draft_context.picks_for_session(session_id)
        return optimize_roster((pick, self.evaluations.get(pick.player_id)) for pick in picks)

    def roster_needs_config(self, session_id: str) -> dict[Role, PositionRequirement]:
        """
        The session's roster needs, with current counts filled in.

        Sessions that never set needs use the league requirement table.
        """
        self._require_session(session_id)
        config = self.draft_context.roster_needs_config(session_id)
        if config is None:
            config = self.draft_context.roster_requirement_table()

        roster = self.optimize_roster(session_id)
        for role, requirement in config.items():
            requirement.current = len(roster.get(role, []))
        return config

    def update_roster_needs(
        self, session_id: str, raw_config: Mapping[str, Any]
    ) -> dict[Role, PositionRequirement]:
        """
        Validate and store a session's roster needs.

        Raises:
            NotFoundError: Unknown session
            ValidationError: Malformed config
        """
        self._require_session(session_id)
        config = parse_roster_needs(raw_config)
        self.draft_context.set_roster_needs_config(session_id, config)
        logger.info(f"Updated roster needs for session {session_id} ({len(config)} roles)")
        return self.roster_needs_config(session_id)

    def positional_needs(self, session_id: str) -> dict[Role, RosterNeed]:
        """Shortage and draft priority for every configured role."""
        roster = self.optimize_roster(session_id)
        config = self.roster_needs_config(session_id)
        return calculate_positional_needs(roster, config)
