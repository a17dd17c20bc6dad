"""Tests for the age adjustment engine."""

import pytest

from draftroom.core.aging import adjust_for_age, get_age_modifier, get_role_factor
from draftroom.core.enums import Role


class TestAgeModifier:
    """Tests for the age brackets."""

    @pytest.mark.parametrize(
        "age,modifier",
        [
            (21, 1.08),
            (23, 1.08),
            (24, 1.04),
            (26, 1.04),
            (27, 1.00),
            (29, 1.00),
            (30, 0.97),
            (32, 0.97),
            (33, 0.94),
            (35, 0.94),
            (36, 0.90),
            (41, 0.90),
        ],
    )
    def test_brackets(self, age, modifier):
        assert get_age_modifier(age) == modifier

    def test_unknown_age_is_neutral(self):
        assert get_age_modifier(None) == 1.0


class TestRoleFactor:
    """Tests for the role-specific aging factor."""

    @pytest.mark.parametrize("role", [Role.QB, Role.K, Role.P])
    def test_accuracy_roles(self, role):
        assert get_role_factor(role) == 1.03

    @pytest.mark.parametrize("role", [Role.HB, Role.FB])
    def test_explosive_roles(self, role):
        assert get_role_factor(role) == 0.97

    @pytest.mark.parametrize("role", [Role.WR, Role.LT, Role.CB, Role.MLB])
    def test_other_roles(self, role):
        assert get_role_factor(role) == 1.0

    def test_role_codes_accepted(self):
        assert get_role_factor("qb") == 1.03


class TestAdjustForAge:
    """Tests for the combined adjustment."""

    def test_developing_passer(self):
        """Age 24 (x1.04) at an accuracy role (x1.03) is x1.0712."""
        assert adjust_for_age(80.0, 24, Role.QB) == pytest.approx(80.0 * 1.0712)

    def test_prime_neutral_role_unchanged(self):
        assert adjust_for_age(80.0, 28, Role.WR) == pytest.approx(80.0)

    def test_twilight_back(self):
        assert adjust_for_age(80.0, 37, Role.HB) == pytest.approx(80.0 * 0.90 * 0.97)

    @pytest.mark.parametrize("role", list(Role))
    def test_non_increasing_after_prime(self, role):
        """Adjusted score never rises as a player ages past 29."""
        scores = [adjust_for_age(80.0, age, role) for age in range(29, 41)]
        assert all(a >= b for a, b in zip(scores, scores[1:]))
