"""Shared pytest fixtures for draftroom tests."""

import pytest

from draftroom.cache import InMemoryCache
from draftroom.config import EngineConfig
from draftroom.core.attributes import AttributeSnapshot
from draftroom.core.models import DraftHistoryEntry, DraftSession
from draftroom.stores import (
    InMemoryAttributeStore,
    InMemoryDraftContextStore,
    InMemoryEvaluationStore,
)


# =============================================================================
# Config and Cache
# =============================================================================

@pytest.fixture
def config() -> EngineConfig:
    """Engine config with explicit values so the environment can't leak in."""
    return EngineConfig(
        cache_ttl_seconds=604800,
        draft_board_ttl_seconds=300,
        total_teams=32,
        total_rounds=54,
        is_snake_draft=True,
        recommendation_window=20,
        recommendation_decay=10.0,
        recommendation_limit=10,
        viable_floor=50.0,
        viable_ratio=0.75,
        log_level="INFO",
    )


@pytest.fixture
def cache() -> InMemoryCache:
    return InMemoryCache()


# =============================================================================
# Snapshots
# =============================================================================

@pytest.fixture
def elite_qb() -> AttributeSnapshot:
    """A young, accurate passer with a strong arm."""
    return AttributeSnapshot(
        player_id="qb1",
        first_name="Sam",
        last_name="Passer",
        rated_role="QB",
        age=24,
        weight_lbs=220,
        throw_power=90,
        throw_accuracy_short=92,
        throw_accuracy_mid=88,
        throw_accuracy_deep=86,
        throw_on_the_run=80,
        throw_under_pressure=82,
        play_action=78,
        break_sack=70,
        speed=70,
        acceleration=72,
        agility=68,
        awareness=91,
    )


@pytest.fixture
def speed_receiver() -> AttributeSnapshot:
    """A fast deep threat."""
    return AttributeSnapshot(
        player_id="wr1",
        first_name="Deep",
        last_name="Threat",
        rated_role="WR",
        age=22,
        weight_lbs=195,
        speed=95,
        acceleration=93,
        agility=88,
        catching=86,
        release=80,
        short_route_running=82,
        medium_route_running=84,
        deep_route_running=90,
        catch_in_traffic=75,
        spectacular_catch=80,
        change_of_direction=85,
        jumping=82,
        stamina=80,
    )


@pytest.fixture
def veteran_tackle() -> AttributeSnapshot:
    """A 33-year-old pass protector."""
    return AttributeSnapshot(
        player_id="ol1",
        first_name="Big",
        last_name="Wall",
        rated_role="LT",
        age=33,
        weight_lbs=315,
        pass_block=90,
        pass_block_power=88,
        pass_block_finesse=87,
        strength=89,
        run_block=80,
        run_block_power=82,
        run_block_finesse=78,
        agility=65,
        acceleration=60,
    )


# =============================================================================
# Stores
# =============================================================================

@pytest.fixture
def attribute_store(elite_qb, speed_receiver, veteran_tackle) -> InMemoryAttributeStore:
    return InMemoryAttributeStore([elite_qb, speed_receiver, veteran_tackle])


@pytest.fixture
def evaluation_store() -> InMemoryEvaluationStore:
    return InMemoryEvaluationStore()


@pytest.fixture
def session() -> DraftSession:
    return DraftSession(id="s1", draft_position=5, total_teams=32, is_snake_draft=True)


@pytest.fixture
def draft_history() -> list[DraftHistoryEntry]:
    return [
        DraftHistoryEntry(player_id="qb1", player_name="Sam Passer", overall_pick=58, round=2, round_pick=26),
        DraftHistoryEntry(player_id="wr1", player_name="Deep Threat", overall_pick=60, round=2, round_pick=28),
        DraftHistoryEntry(player_id="ol1", player_name="Big Wall", overall_pick=75, round=3, round_pick=11),
        DraftHistoryEntry(player_id="far1", player_name="Late Flier", overall_pick=200, round=7, round_pick=8),
    ]


@pytest.fixture
def draft_context(session, draft_history) -> InMemoryDraftContextStore:
    return InMemoryDraftContextStore(sessions=[session], history=draft_history)


# =============================================================================
# League Fixture
# =============================================================================

@pytest.fixture
def league_data(elite_qb, speed_receiver, veteran_tackle) -> dict:
    """A small league document in fixture-file format."""
    players = []
    for snapshot, overall, round_number, round_pick in [
        (elite_qb, 58, 2, 26),
        (speed_receiver, 60, 2, 28),
        (veteran_tackle, 75, 3, 11),
    ]:
        data = snapshot.to_dict()
        players.append({
            "id": data["player_id"],
            "first_name": data["first_name"],
            "last_name": data["last_name"],
            "rated_role": data["rated_role"],
            "age": data["age"],
            "weight_lbs": data["weight_lbs"],
            "ratings": data["ratings"],
            "draft": {"overall_pick": overall, "round": round_number, "round_pick": round_pick},
        })
    return {
        "players": players,
        "sessions": [
            {"id": "s1", "draft_position": 5, "total_teams": 32, "is_snake_draft": True},
        ],
    }
