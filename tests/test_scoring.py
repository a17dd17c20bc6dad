"""Tests for position fit scoring and tiers."""

import pytest

from draftroom.core.attributes import AttributeSnapshot
from draftroom.core.enums import Role
from draftroom.core.scoring import get_tier, score_all_positions, score_position
from draftroom.core.tables import (
    ROLE_TIER_THRESHOLDS,
    ROLE_WEIGHT_PROFILES,
    RoleTierThresholds,
)


@pytest.fixture
def two_stat_passer() -> AttributeSnapshot:
    return AttributeSnapshot(player_id="p1", throw_power=90, throw_accuracy_short=80)


# =============================================================================
# score_position
# =============================================================================

class TestScorePosition:
    """Tests for the weighted-average scorer."""

    def test_weighted_average(self, two_stat_passer):
        """Equal weights average the rated attributes."""
        assert score_position(two_stat_passer, Role.QB) == pytest.approx(85.0)

    def test_unequal_weights(self):
        """throw_power 1.0 and throw_accuracy_deep 0.9 weigh proportionally."""
        snapshot = AttributeSnapshot(player_id="p1", throw_power=90, throw_accuracy_deep=80)
        expected = (90 * 1.0 + 80 * 0.9) / 1.9
        assert score_position(snapshot, Role.QB) == pytest.approx(expected)

    def test_missing_attributes_skipped(self):
        """Unrated attributes don't drag the score toward zero."""
        snapshot = AttributeSnapshot(player_id="p1", throw_power=90)
        assert score_position(snapshot, Role.QB) == pytest.approx(90.0)

    def test_attributes_outside_profile_ignored(self, two_stat_passer):
        """Ratings the role doesn't weigh have no effect."""
        with_extra = AttributeSnapshot(
            player_id="p1", throw_power=90, throw_accuracy_short=80, kick_power=10
        )
        assert score_position(with_extra, Role.QB) == score_position(two_stat_passer, Role.QB)

    def test_nothing_rated_scores_zero(self):
        assert score_position(AttributeSnapshot(player_id="p1"), Role.QB) == 0.0

    def test_accepts_role_codes(self, two_stat_passer):
        assert score_position(two_stat_passer, "qb") == score_position(two_stat_passer, Role.QB)

    def test_unknown_role_scores_zero(self, two_stat_passer, caplog):
        assert score_position(two_stat_passer, "XX") == 0.0
        assert "XX" in caplog.text


class TestBodyTypePenalty:
    """Tests for the out-of-range weight penalty."""

    def test_underweight_penalized(self):
        snapshot = AttributeSnapshot(
            player_id="p1", throw_power=90, throw_accuracy_short=80, weight_lbs=180
        )
        # QB range is 200-250 with a 25% penalty
        assert score_position(snapshot, Role.QB) == pytest.approx(85.0 * 0.75)

    def test_overweight_penalized(self, two_stat_passer):
        assert score_position(two_stat_passer, Role.QB, weight_lbs=260) == pytest.approx(85.0 * 0.75)

    def test_weight_in_range_not_penalized(self, two_stat_passer):
        assert score_position(two_stat_passer, Role.QB, weight_lbs=220) == pytest.approx(85.0)

    def test_range_bounds_are_inclusive(self, two_stat_passer):
        assert score_position(two_stat_passer, Role.QB, weight_lbs=200) == pytest.approx(85.0)
        assert score_position(two_stat_passer, Role.QB, weight_lbs=250) == pytest.approx(85.0)

    def test_no_weight_no_penalty(self, two_stat_passer):
        assert two_stat_passer.weight_lbs is None
        assert score_position(two_stat_passer, Role.QB) == pytest.approx(85.0)

    def test_explicit_weight_overrides_snapshot(self):
        snapshot = AttributeSnapshot(
            player_id="p1", throw_power=90, throw_accuracy_short=80, weight_lbs=180
        )
        assert score_position(snapshot, Role.QB, weight_lbs=220) == pytest.approx(85.0)

    def test_penalty_matches_fraction_for_every_role(self, elite_qb):
        """Penalized score is exactly unpenalized * (1 - penalty)."""
        for role, profile in ROLE_WEIGHT_PROFILES.items():
            body = profile.body_type
            in_range = score_position(elite_qb, role, weight_lbs=body.min_weight)
            too_light = score_position(elite_qb, role, weight_lbs=body.min_weight - 1)
            assert too_light == pytest.approx(in_range * (1 - body.penalty))
            assert too_light <= in_range


class TestScoreAllPositions:
    """Tests for scoring every role at once."""

    def test_covers_every_role_in_table_order(self, elite_qb):
        scores = score_all_positions(elite_qb)
        assert list(scores) == list(Role)

    def test_scores_within_rating_scale(self, elite_qb, speed_receiver, veteran_tackle):
        for snapshot in (elite_qb, speed_receiver, veteran_tackle):
            for score in score_all_positions(snapshot).values():
                assert 0 <= score <= 99

    def test_passer_scores_highest_at_qb(self, elite_qb):
        scores = score_all_positions(elite_qb)
        assert max(scores, key=scores.get) == Role.QB


# =============================================================================
# Tiers and tables
# =============================================================================

class TestGetTier:
    """Tests for tier lookup."""

    @pytest.mark.parametrize(
        "score,tier",
        [(95, 1), (88, 1), (87.9, 2), (80, 2), (72, 3), (65, 4), (64.9, 5), (0, 5)],
    )
    def test_qb_tiers(self, score, tier):
        assert get_tier(Role.QB, score) == tier

    def test_kicker_cutpoints_differ(self):
        assert get_tier(Role.K, 82) == 2
        assert get_tier(Role.QB, 82) == 2
        assert get_tier(Role.K, 76) == 3

    def test_unknown_role_is_bottom_tier(self):
        assert get_tier("XX", 99) == 5


class TestTables:
    """Sanity checks on the static tables."""

    def test_every_role_has_profile_and_tiers(self):
        for role in Role:
            assert role in ROLE_WEIGHT_PROFILES
            assert role in ROLE_TIER_THRESHOLDS

    def test_tier_cutpoints_descend(self):
        for thresholds in ROLE_TIER_THRESHOLDS.values():
            assert thresholds.tier1 > thresholds.tier2 > thresholds.tier3 > thresholds.tier4

    def test_non_descending_cutpoints_rejected(self):
        with pytest.raises(ValueError):
            RoleTierThresholds(80, 85, 70, 60)

    def test_mirrored_roles_share_weights(self):
        assert dict(ROLE_WEIGHT_PROFILES[Role.LE].weights) == dict(ROLE_WEIGHT_PROFILES[Role.RE].weights)
        assert dict(ROLE_WEIGHT_PROFILES[Role.LT].weights) == dict(ROLE_WEIGHT_PROFILES[Role.RT].weights)

    def test_profiles_are_read_only(self):
        with pytest.raises(TypeError):
            ROLE_WEIGHT_PROFILES[Role.QB].weights["speed"] = 5.0
