"""Unit tests for half-up rounding."""

from calorie_calculator.domain.shared.rounding import round_half_up, round_half_up_int


class TestRoundHalfUp:
    """Test rounding helpers."""

    def test_half_rounds_up(self):
        """Test that .5 rounds up, unlike banker's rounding."""
        assert round_half_up(2.5) == 3.0
        assert round_half_up(0.5) == 1.0

    def test_decimal_places(self):
        """Test rounding to a number of decimals."""
        assert round_half_up(0.125, 2) == 0.13
        assert round_half_up(22.857142, 2) == 22.86
        assert round_half_up(0.457142, 3) == 0.457

    def test_int_variant(self):
        """Test integer rounding."""
        assert round_half_up_int(0.5) == 1
        assert round_half_up_int(62.5) == 63
        assert round_half_up_int(62.49) == 62
        assert isinstance(round_half_up_int(10.0), int)

    def test_written_half_survives_float_noise(self):
        """Test halves stored just below .5 in binary still round up."""
        assert round_half_up(1.005, 2) == 1.01
        assert round_half_up(2.675, 2) == 2.68
        assert round_half_up(0.0005, 3) == 0.001

    def test_int_accepts_ints(self):
        """Test whole numbers pass through unchanged."""
        assert round_half_up_int(1800) == 1800
        assert round_half_up(1800) == 1800.0
