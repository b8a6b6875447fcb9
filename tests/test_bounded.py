"""Tests for saturating bounded values."""

import pytest

from campfire.model.bounded import BoundedFloat
from campfire.model.errors import BoundedFloatError, InvalidBounds, TooHigh, TooLow


class TestConstruction:
    """Construction is strict."""

    def test_valid_value(self):
        """A value within its bounds is kept as given."""
        value = BoundedFloat(1.5, 1.0, 2.0)
        assert value.current == 1.5
        assert float(value) == 1.5

    def test_zero_min(self):
        """new_zero_min bounds the value below by 0.0."""
        value = BoundedFloat.new_zero_min(1.0, 2.0)
        assert value.min == 0.0
        assert value.max == 2.0

    def test_inverted_bounds(self):
        """max below min is rejected."""
        with pytest.raises(InvalidBounds):
            BoundedFloat(1.0, 2.0, 0.0)

    def test_too_low(self):
        """current below min is rejected."""
        with pytest.raises(TooLow):
            BoundedFloat.new_zero_min(-1.0, 2.0)

    def test_too_high(self):
        """current above max is rejected."""
        with pytest.raises(TooHigh):
            BoundedFloat.new_zero_min(3.0, 2.0)

    def test_errors_are_value_errors(self):
        """All construction errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            BoundedFloat(5.0, 0.0, 1.0)
        assert issubclass(TooLow, BoundedFloatError)


class TestSaturation:
    """Arithmetic saturates at the bounds."""

    def test_add_saturates_at_max(self):
        """Adding past the maximum stops at the maximum."""
        assert (BoundedFloat.new_zero_min(0.0, 2.0) + 5.0).current == 2.0

    def test_sub_saturates_at_min(self):
        """Subtracting past the minimum stops at the minimum."""
        assert (BoundedFloat.new_zero_min(1.0, 2.0) - 5.0).current == 0.0

    def test_in_range_arithmetic(self):
        """Results within the bounds are exact."""
        value = BoundedFloat(2.0, 0.0, 10.0)
        assert (value + 3.0).current == 5.0
        assert (value * 2.0).current == 4.0
        assert (value / 4.0).current == 0.5

    def test_mul_saturates(self):
        """Multiplying past the maximum stops at the maximum."""
        assert (BoundedFloat(2.0, 0.0, 10.0) * 100.0).current == 10.0

    def test_in_place_returns_new_value(self):
        """+= rebinds the name; the original value is untouched."""
        original = BoundedFloat.new_zero_min(1.0, 2.0)
        value = original
        value += 0.5
        assert value.current == 1.5
        assert original.current == 1.0

    def test_saturating_set(self):
        """saturating_set clamps into the bounds."""
        value = BoundedFloat(5.0, 0.0, 10.0)
        assert value.saturating_set(-3.0).current == 0.0
        assert value.saturating_set(30.0).current == 10.0
        assert value.saturating_set(7.0).current == 7.0


class TestRebinding:
    """with_max / with_min and the distance helpers."""

    def test_with_max_clamps_current(self):
        """Lowering the maximum below current pulls current down with it."""
        value = BoundedFloat(8.0, 0.0, 10.0).with_max(5.0)
        assert value.max == 5.0
        assert value.current == 5.0

    def test_with_max_below_min(self):
        """A maximum below the minimum is rejected."""
        with pytest.raises(InvalidBounds):
            BoundedFloat(1.0, 1.0, 10.0).with_max(0.5)

    def test_with_min_clamps_current(self):
        """Raising the minimum above current pulls current up with it."""
        value = BoundedFloat(2.0, 0.0, 10.0).with_min(4.0)
        assert value.min == 4.0
        assert value.current == 4.0

    def test_with_min_above_max(self):
        """A minimum above the maximum is rejected."""
        with pytest.raises(InvalidBounds):
            BoundedFloat(1.0, 0.0, 10.0).with_min(11.0)

    def test_diffs(self):
        """max_diff is the headroom, min_diff the distance above the floor."""
        value = BoundedFloat(3.0, 1.0, 10.0)
        assert value.max_diff() == 7.0
        assert value.min_diff() == 2.0


class TestDivisionByZero:
    """Dividing by zero saturates like any other result."""

    def test_positive_over_zero(self):
        """A positive value over zero goes to the maximum."""
        assert (BoundedFloat(1.0, 0.0, 5.0) / 0.0).current == 5.0

    def test_negative_over_zero(self):
        """A negative value over zero goes to the minimum."""
        assert (BoundedFloat(-1.0, -5.0, 5.0) / 0.0).current == -5.0

    def test_negative_zero_divisor(self):
        """Dividing by -0.0 flips the sign of the infinity."""
        assert (BoundedFloat(1.0, -5.0, 5.0) / -0.0).current == -5.0

    def test_zero_over_zero(self):
        """0 / 0 falls to the minimum."""
        assert (BoundedFloat(0.0, -2.0, 5.0) / 0.0).current == -2.0
