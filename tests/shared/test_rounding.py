"""
Tests for rounding helpers.
"""

import pytest

from gpxroute.shared.rounding import round_fixed, round_half_up


class TestRoundFixed:
    """Tests for round_fixed function."""

    @pytest.mark.parametrize("value, digits, expected", [
        (111.19492664455873, 2, 111.19),
        (111.19492664455873, 3, 111.195),
        (0.0, 3, 0.0),
        (2.0, 2, 2.0),
    ])
    def test_values(self, value, digits, expected):
        assert round_fixed(value, digits) == expected

    def test_exact_tie_rounds_away_from_zero(self):
        """0.0625 is exact in binary; the tie goes up, not to even."""
        assert round_fixed(0.0625, 3) == 0.063
        assert round(0.0625, 3) == 0.062

    def test_uses_exact_binary_value(self):
        """1.005 is stored slightly below 1.005, so it rounds down."""
        assert round_fixed(1.005, 2) == 1.0

    def test_negative_tie(self):
        assert round_fixed(-0.0625, 3) == -0.063


class TestRoundHalfUp:
    """Tests for round_half_up function."""

    @pytest.mark.parametrize("value, expected", [
        (100.4, 100),
        (100.5, 101),
        (2.5, 3),
        (0.0, 0),
        (-2.5, -2),
        (-2.6, -3),
        (-0.4, 0),
    ])
    def test_values(self, value, expected):
        assert round_half_up(value) == expected

    def test_returns_int(self):
        assert isinstance(round_half_up(99.9), int)
