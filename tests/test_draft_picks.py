"""Tests for draft pick arithmetic."""

import pytest

from draftroom.core.draft import (
    PickSlot,
    calculate_all_picks,
    calculate_overall_pick,
    get_round_from_pick,
    round_bounds,
)
from draftroom.errors import ValidationError


class TestCalculateOverallPick:
    """Tests for the (round, slot) -> overall conversion."""

    def test_first_round(self):
        assert calculate_overall_pick(1, 5) == 5

    def test_snake_even_round_reverses(self):
        assert calculate_overall_pick(2, 5, 32, True) == 60

    def test_snake_odd_round_forward(self):
        assert calculate_overall_pick(3, 5, 32, True) == 69

    def test_straight_draft(self):
        assert calculate_overall_pick(2, 5, 32, False) == 37

    def test_last_slot_snake(self):
        # Last slot picks last in round 1 and first in round 2
        assert calculate_overall_pick(1, 32) == 32
        assert calculate_overall_pick(2, 32) == 33

    def test_small_league(self):
        assert calculate_overall_pick(2, 5, 10, False) == 15
        assert calculate_overall_pick(2, 5, 10, True) == 16

    @pytest.mark.parametrize("round,pick,teams", [(0, 1, 32), (1, 0, 32), (1, 33, 32), (1, 1, 0)])
    def test_invalid_input(self, round, pick, teams):
        with pytest.raises(ValidationError):
            calculate_overall_pick(round, pick, teams)

    @pytest.mark.parametrize("snake", [True, False])
    def test_every_slot_covers_each_round(self, snake):
        """Each round's slots map one-to-one onto that round's overall picks."""
        teams = 32
        for round_number in range(1, 5):
            first, last = round_bounds(round_number, teams)
            overall = {
                calculate_overall_pick(round_number, slot, teams, snake)
                for slot in range(1, teams + 1)
            }
            assert overall == set(range(first, last + 1))


class TestCalculateAllPicks:

    def test_snake_schedule(self):
        assert calculate_all_picks(5, 3) == [
            PickSlot(round=1, pick=5, overall=5),
            PickSlot(round=2, pick=28, overall=60),
            PickSlot(round=3, pick=5, overall=69),
        ]

    def test_straight_schedule(self):
        slots = calculate_all_picks(5, 3, is_snake_draft=False)
        assert [s.overall for s in slots] == [5, 37, 69]
        assert all(s.pick == 5 for s in slots)

    def test_default_rounds(self):
        assert len(calculate_all_picks(1)) == 54

    def test_rounds_match_overall(self):
        for slot in calculate_all_picks(17, 10, True, 32):
            assert get_round_from_pick(slot.overall) == slot.round

    def test_invalid_rounds(self):
        with pytest.raises(ValidationError):
            calculate_all_picks(5, 0)

    def test_invalid_position(self):
        with pytest.raises(ValidationError):
            calculate_all_picks(40, 3)

    def test_slot_to_dict(self):
        assert PickSlot(2, 28, 60).to_dict() == {"round": 2, "pick": 28, "overall": 60}


class TestRoundHelpers:

    @pytest.mark.parametrize("pick,round", [(1, 1), (32, 1), (33, 2), (60, 2), (65, 3)])
    def test_round_from_pick(self, pick, round):
        assert get_round_from_pick(pick) == round

    def test_round_from_pick_custom_teams(self):
        assert get_round_from_pick(11, teams=10) == 2

    def test_round_from_pick_invalid(self):
        with pytest.raises(ValidationError):
            get_round_from_pick(0)

    def test_round_bounds(self):
        assert round_bounds(1) == (1, 32)
        assert round_bounds(2) == (33, 64)
        assert round_bounds(3, teams=10) == (21, 30)

    def test_round_bounds_invalid(self):
        with pytest.raises(ValidationError):
            round_bounds(0)
