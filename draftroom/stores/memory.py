"""In-memory store implementations used by tests and the CLI."""

import copy
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
from draftroom.core.tables import DEFAULT_ROSTER_REQUIREMENTS
from draftroom.stores.base import AttributeStore, DraftContextStore, EvaluationStore


class InMemoryAttributeStore(AttributeStore):
    """Snapshots held in lists per player, oldest first."""

    def __init__(self, snapshots: Iterable[AttributeSnapshot] = ()) -> None:
        self._players: dict[str, list[AttributeSnapshot]] = {}
        for snapshot in snapshots:
            self.add_snapshot(snapshot)

    def add_player(self, player_id: str) -> None:
        """Register a player with no ratings yet."""
        self._players.setdefault(player_id, [])

    def add_snapshot(self, snapshot: AttributeSnapshot) -> None:
        """Record a new snapshot; it becomes the player's latest."""
        self._players.setdefault(snapshot.player_id, []).append(snapshot)

    def latest_snapshot(self, player_id: str) -> Optional[AttributeSnapshot]:
        history = self._players.get(player_id)
        return history[-1] if history else None

    def player_exists(self, player_id: str) -> bool:
        return player_id in self._players

    def all_player_ids(self) -> list[str]:
        return list(self._players)


class InMemoryEvaluationStore(EvaluationStore):
    """Evaluations keyed by player id. Copies on the way in and out."""

    def __init__(self) -> None:
        self._evaluations: dict[str, PlayerEvaluation] = {}

    def upsert(self, evaluation: PlayerEvaluation) -> None:
        self._evaluations[evaluation.player_id] = copy.deepcopy(evaluation)

    def get(self, player_id: str) -> Optional[PlayerEvaluation]:
        evaluation = self._evaluations.get(player_id)
        return copy.deepcopy(evaluation) if evaluation else None

    def all_sorted_by_score_desc(self) -> list[PlayerEvaluation]:
        ordered = sorted(
            self._evaluations.values(),
            key=lambda e: (-e.normalized_score, e.player_id),
        )
        return [copy.deepcopy(e) for e in ordered]

    def set_ranks(self, ranks: dict[str, int]) -> None:
        for player_id, rank in ranks.items():
            if player_id in self._evaluations:
                self._evaluations[player_id].rank = rank

    def delete(self, player_id: str) -> bool:
        return self._evaluations.pop(player_id, None) is not None

    def __len__(self) -> int:
        return len(self._evaluations)


class InMemoryDraftContextStore(DraftContextStore):
    """Sessions, picks, needs and history held in plain dicts."""

    def __init__(
        self,
        sessions: Iterable[DraftSession] = (),
        history: Iterable[DraftHistoryEntry] = (),
        requirements: Optional[dict[Role, PositionRequirement]] = None,
    ) -> None:
        self._sessions: dict[str, DraftSession] = {s.id: s for s in sessions}
        self._picks: dict[str, list[DraftPick]] = {}
        self._needs: dict[str, dict[Role, PositionRequirement]] = {}
        self._history: dict[str, DraftHistoryEntry] = {h.player_id: h for h in history}
        self._requirements = requirements or {
            role: PositionRequirement(min=lo, max=hi)
            for role, (lo, hi) in DEFAULT_ROSTER_REQUIREMENTS.items()
        }
        self._recommendations: dict[tuple[str, int, int], list[Recommendation]] = {}

    def add_session(self, session: DraftSession) -> None:
        self._sessions[session.id] = session

    def add_history(self, entry: DraftHistoryEntry) -> None:
        self._history[entry.player_id] = entry

    def get_session(self, session_id: str) -> Optional[DraftSession]:
        session = self._sessions.get(session_id)
        return copy.deepcopy(session) if session else None

    def picks_for_session(self, session_id: str) -> list[DraftPick]:
        return copy.deepcopy(self._picks.get(session_id, []))

    def add_pick(self, pick: DraftPick) -> None:
        self._picks.setdefault(pick.session_id, []).append(copy.deepcopy(pick))

    def roster_needs_config(self, session_id: str) -> Optional[dict[Role, PositionRequirement]]:
        config = self._needs.get(session_id)
        return copy.deepcopy(config) if config is not None else None

    def set_roster_needs_config(
        self, session_id: str, config: dict[Role, PositionRequirement]
    ) -> None:
        self._needs[session_id] = copy.deepcopy(config)

    def roster_requirement_table(self) -> dict[Role, PositionRequirement]:
        return copy.deepcopy(self._requirements)

    def draft_history(self) -> list[DraftHistoryEntry]:
        return sorted(
            (copy.deepcopy(h) for h in self._history.values()),
            key=lambda h: (h.overall_pick, h.player_id),
        )

    def replace_recommendations(
        self,
        session_id: str,
        round: int,
        pick: int,
        recommendations: Iterable[Recommendation],
    ) -> None:
        self._recommendations[(session_id, round, pick)] = copy.deepcopy(list(recommendations))

    def recommendations_for_pick(self, session_id: str, round: int, pick: int) -> list[Recommendation]:
        stored = self._recommendations.get((session_id, round, pick), [])
        return sorted(copy.deepcopy(stored), key=lambda r: r.score, reverse=True)
