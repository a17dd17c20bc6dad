"""
League loading.

Builds in-memory stores and the engine's services from a league fixture
(a JSON document of players, ratings, reference draft slots and draft
sessions).
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from draftroom.cache import Cache, InMemoryCache
from draftroom.config import EngineConfig, get_config
from draftroom.core.attributes import AttributeSnapshot
from draftroom.core.models import DraftHistoryEntry, DraftSession, SessionStatus
from draftroom.errors import ValidationError
from draftroom.schemas import LeagueFixtureSchema, parse_league, parse_roster_needs
from draftroom.services import (
    DraftRecommendationService,
    DraftService,
    PlayerEvaluator,
    RankingService,
    RosterService,
)
from draftroom.stores import (
    InMemoryAttributeStore,
    InMemoryDraftContextStore,
    InMemoryEvaluationStore,
)

logger = logging.getLogger(__name__)


@dataclass
class League:
    """Stores, cache and services for one loaded league."""

    attributes: InMemoryAttributeStore
    evaluations: InMemoryEvaluationStore
    draft_context: InMemoryDraftContextStore
    cache: Cache = field(default_factory=InMemoryCache)
    config: EngineConfig = field(default_factory=get_config)

    @property
    def evaluator(self) -> PlayerEvaluator:
        return PlayerEvaluator(
            self.attributes, self.evaluations, self.cache, self.config, self.ranking
        )

    @property
    def ranking(self) -> RankingService:
        return RankingService(self.evaluations, self.cache)

    @property
    def roster(self) -> RosterService:
        return RosterService(self.evaluations, self.draft_context)

    @property
    def drafts(self) -> DraftService:
        return DraftService(self.attributes, self.draft_context, self.cache, self.config)

    @property
    def recommendations(self) -> DraftRecommendationService:
        return DraftRecommendationService(
            self.evaluations, self.draft_context, self.cache, self.config
        )


def build_league(
    fixture: LeagueFixtureSchema,
    cache: Optional[Cache] = None,
    config: Optional[EngineConfig] = None,
) -> League:
    """
    Populate in-memory stores from a validated fixture.

    Session picks are recorded through DraftService so they get the same
    checks as live picks.
    """
    config = config or get_config()
    attributes = InMemoryAttributeStore()
    history = []
    for player in fixture.players:
        snapshot = AttributeSnapshot.from_dict({
            "player_id": player.id,
            "first_name": player.first_name,
            "last_name": player.last_name,
            "rated_role": player.rated_role,
            "age": player.age,
            "weight_lbs": player.weight_lbs,
            "height_inches": player.height_inches,
            "ratings": player.ratings,
        })
        attributes.add_snapshot(snapshot)
        if player.draft is not None:
            history.append(DraftHistoryEntry(
                player_id=player.id,
                player_name=snapshot.full_name,
                overall_pick=player.draft.overall_pick,
                round=player.draft.round,
                round_pick=player.draft.round_pick,
            ))

    requirements = None
    if fixture.roster_requirements is not None:
        requirements = parse_roster_needs(fixture.roster_requirements)

    draft_context = InMemoryDraftContextStore(history=history, requirements=requirements)
    league = League(
        attributes=attributes,
        evaluations=InMemoryEvaluationStore(),
        draft_context=draft_context,
        cache=cache if cache is not None else InMemoryCache(config.cache_ttl_seconds),
        config=config,
    )

    for session in fixture.sessions:
        try:
            status = SessionStatus(session.status.lower())
        except ValueError as e:
            raise ValidationError(f"Unknown session status: {session.status!r}", field="status") from e
        draft_context.add_session(DraftSession(
            id=session.id,
            draft_position=session.draft_position,
            total_teams=session.total_teams,
            is_snake_draft=session.is_snake_draft,
            status=status,
        ))
        if session.roster_needs is not None:
            draft_context.set_roster_needs_config(session.id, parse_roster_needs(session.roster_needs))
        for pick in session.picks:
            league.drafts.record_pick(
                session.id, pick.round, pick.pick, pick.player_id, pick.drafted_role
            )

    logger.info(
        f"Loaded league: {len(fixture.players)} players, {len(history)} with draft slots, "
        f"{len(fixture.sessions)} sessions"
    )
    return league


def load_league(
    source: Union[str, Path, dict[str, Any]],
    cache: Optional[Cache] = None,
    config: Optional[EngineConfig] = None,
) -> League:
    """Load a league from a fixture path or an already-parsed dictionary."""
    if isinstance(source, dict):
        data = source
    else:
        path = Path(source)
        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError as e:
            raise ValidationError(f"{path} is not valid JSON: {e}") from e
    return build_league(parse_league(data), cache=cache, config=config)
