"""Tests for archetype classification."""

import pytest

from draftroom.core.archetypes import Archetype, classify_archetype, is_elite, matched_bundles
from draftroom.core.attributes import AttributeSnapshot
from draftroom.core.enums import Role
from draftroom.core.tables import SpecialistBundle


class TestBundleMatching:
    """Tests for the all-thresholds-met contract."""

    def test_all_thresholds_met(self):
        bundle = SpecialistBundle("Fast", {"speed": 80, "acceleration": 80})
        assert bundle.matches(AttributeSnapshot(player_id="p", speed=80, acceleration=85))

    def test_one_threshold_missed(self):
        bundle = SpecialistBundle("Fast", {"speed": 80, "acceleration": 80})
        assert not bundle.matches(AttributeSnapshot(player_id="p", speed=99, acceleration=79))

    def test_unrated_attribute_never_matches(self):
        bundle = SpecialistBundle("Fast", {"speed": 80})
        assert not bundle.matches(AttributeSnapshot(player_id="p"))

    def test_elite_bundles_listed_first(self, elite_qb):
        assert matched_bundles(elite_qb, Role.QB) == ["Elite Passer", "Strong Arm", "West Coast"]


class TestClassifyArchetype:
    """Tests for primary/secondary/traits selection."""

    def test_elite_primary(self, elite_qb):
        archetype = classify_archetype(elite_qb, Role.QB)
        assert archetype.primary == "Elite Passer"
        assert archetype.secondary == "Strong Arm"

    def test_special_traits_exclude_primary(self, elite_qb):
        archetype = classify_archetype(elite_qb, Role.QB)
        assert "Elite Passer" not in archetype.special_traits
        assert archetype.special_traits[:2] == ["Strong Arm", "West Coast"]

    def test_universal_traits_included(self, elite_qb):
        archetype = classify_archetype(elite_qb, Role.QB)
        assert "High Football IQ" in archetype.special_traits

    def test_fallback_label_when_nothing_matches(self):
        snapshot = AttributeSnapshot(player_id="p", throw_power=70)
        archetype = classify_archetype(snapshot, Role.QB)
        assert archetype.primary == "Pocket"
        assert archetype.secondary is None
        assert archetype.special_traits == []

    def test_non_qb_fallback_is_balanced(self):
        archetype = classify_archetype(AttributeSnapshot(player_id="p"), Role.MLB)
        assert archetype.primary == "Balanced"

    def test_specialist_beats_fallback(self):
        snapshot = AttributeSnapshot(player_id="p", man_coverage=92, zone_coverage=88, speed=89)
        archetype = classify_archetype(snapshot, Role.CB)
        # Speed 89 misses the Lockdown Corner bundle
        assert archetype.primary == "Man Coverage"
        assert archetype.secondary == "Zone Coverage"

    def test_secondary_from_next_viable_role(self):
        snapshot = AttributeSnapshot(
            player_id="p", throw_power=92, catching=88, catch_in_traffic=85
        )
        archetype = classify_archetype(snapshot, Role.QB, [Role.QB, Role.WR])
        assert archetype.primary == "Strong Arm"
        assert archetype.secondary == "Possession"
        assert archetype.special_traits == ["Possession"]

    def test_versatility_excludes_best_role(self, elite_qb):
        archetype = classify_archetype(elite_qb, Role.QB, [Role.QB, Role.SS, "HB", Role.SS])
        assert archetype.versatility == [Role.SS, Role.HB]

    def test_deterministic(self, speed_receiver):
        first = classify_archetype(speed_receiver, Role.WR, [Role.WR, Role.CB])
        second = classify_archetype(speed_receiver, Role.WR, [Role.WR, Role.CB])
        assert first == second

    def test_round_trips_through_dict(self, elite_qb):
        archetype = classify_archetype(elite_qb, Role.QB, [Role.QB, Role.HB])
        assert Archetype.from_dict(archetype.to_dict()) == archetype


class TestIsElite:
    """Tests for elite detection at a role."""

    def test_elite_at_home_role(self, elite_qb):
        assert is_elite(elite_qb, Role.QB)

    def test_not_elite_elsewhere(self, elite_qb):
        assert not is_elite(elite_qb, Role.WR)

    def test_specialist_match_is_not_elite(self):
        snapshot = AttributeSnapshot(player_id="p", throw_power=95)
        assert not is_elite(snapshot, Role.QB)

    @pytest.mark.parametrize("role", [Role.LT, Role.C, Role.RG])
    def test_linemen_share_bundles(self, role):
        snapshot = AttributeSnapshot(player_id="p", pass_block=91, run_block=90, strength=88)
        assert is_elite(snapshot, role)
