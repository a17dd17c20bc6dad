"""Tests for the roster service."""

import pytest

from draftroom.core.enums import Role
from draftroom.errors import NotFoundError, ValidationError
from draftroom.services.draft_service import DraftService
from draftroom.services.evaluation_service import PlayerEvaluator
from draftroom.services.roster_service import RosterService


@pytest.fixture
def drafts(attribute_store, draft_context, cache, config) -> DraftService:
    return DraftService(attribute_store, draft_context, cache, config)


@pytest.fixture
def roster(evaluation_store, draft_context) -> RosterService:
    return RosterService(evaluation_store, draft_context)


@pytest.fixture
def evaluated(attribute_store, evaluation_store, cache, config):
    PlayerEvaluator(attribute_store, evaluation_store, cache, config).evaluate_all()
    return evaluation_store


class TestOptimizeRoster:

    def test_empty_session(self, roster):
        assert roster.optimize_roster("s1") == {}

    def test_picks_placed_at_natural_roles(self, roster, drafts, evaluated):
        drafts.record_pick("s1", 1, 5, "qb1")
        drafts.record_pick("s1", 2, 5, "ol1")
        result = roster.optimize_roster("s1")

        qb = result[Role.QB][0]
        assert qb.player_id == "qb1"
        assert not qb.is_secondary
        assert qb.score == evaluated.get("qb1").age_adjusted_score
        assert result[Role.LT][0].player_id == "ol1"

    def test_drafted_role_respected(self, roster, drafts, evaluated):
        drafts.record_pick("s1", 1, 5, "wr1", drafted_role="WR")
        primaries = [
            a for group in roster.optimize_roster("s1").values() for a in group if not a.is_secondary
        ]
        assert [(a.player_id, a.role) for a in primaries] == [("wr1", Role.WR)]

    def test_unevaluated_pick_skipped(self, roster, drafts):
        drafts.record_pick("s1", 1, 5, "qb1")
        assert roster.optimize_roster("s1") == {}

    def test_unknown_session(self, roster):
        with pytest.raises(NotFoundError):
            roster.optimize_roster("nope")


class TestRosterNeedsConfig:

    def test_falls_back_to_requirement_table(self, roster):
        config = roster.roster_needs_config("s1")
        assert list(config) == list(Role)
        assert (config[Role.WR].min, config[Role.WR].max) == (3, 6)

    def test_current_derived_from_picks(self, roster, drafts, evaluated):
        assert roster.roster_needs_config("s1")[Role.QB].current == 0
        drafts.record_pick("s1", 1, 5, "qb1")
        assert roster.roster_needs_config("s1")[Role.QB].current == 1

    def test_update(self, roster, drafts, evaluated):
        drafts.record_pick("s1", 1, 5, "qb1")
        config = roster.update_roster_needs("s1", {"qb": {"min": 2, "max": 3}})

        assert list(config) == [Role.QB]
        assert (config[Role.QB].min, config[Role.QB].max, config[Role.QB].current) == (2, 3, 1)
        assert list(roster.roster_needs_config("s1")) == [Role.QB]

    def test_supplied_current_is_ignored(self, roster):
        config = roster.update_roster_needs("s1", {"QB": {"min": 1, "max": 2, "current": 7}})
        assert config[Role.QB].current == 0

    @pytest.mark.parametrize("raw", [
        {"XX": {"min": 1, "max": 2}},
        {"QB": {"min": 3, "max": 1}},
        {"QB": {"min": -1, "max": 1}},
        {"QB": {"min": "lots", "max": 1}},
        {"QB": {"min": 1}},
        ["QB"],
    ])
    def test_invalid_update_rejected(self, roster, raw):
        with pytest.raises(ValidationError):
            roster.update_roster_needs("s1", raw)
        assert len(roster.roster_needs_config("s1")) == len(Role)

    def test_unknown_session(self, roster):
        with pytest.raises(NotFoundError):
            roster.update_roster_needs("nope", {"QB": {"min": 1, "max": 2}})


class TestPositionalNeeds:

    def test_everything_needed_before_first_pick(self, roster):
        needs = roster.positional_needs("s1")
        assert needs[Role.WR].needed == 3
        assert needs[Role.WR].priority == pytest.approx(1.6)
        assert needs[Role.FB].needed == 0

    def test_pick_reflected_immediately(self, roster, drafts, evaluated):
        roster.update_roster_needs("s1", {"QB": {"min": 2, "max": 3}})
        assert roster.positional_needs("s1")[Role.QB].needed == 2

        drafts.record_pick("s1", 1, 5, "qb1")
        need = roster.positional_needs("s1")[Role.QB]

        assert need.needed == 1
        assert need.priority == pytest.approx(1.2)
        assert [p.player_id for p in need.current_players] == ["qb1"]

    def test_unknown_session(self, roster):
        with pytest.raises(NotFoundError):
            roster.positional_needs("nope")
