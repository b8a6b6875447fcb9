"""
Bounded Values
==============
A scalar that always stays within [min, max], used for hit points and
inventory capacity.

Construction is strict: an out-of-range value raises. Arithmetic on an
existing value is lenient: results saturate at the bounds, so once a valid
BoundedFloat exists no update can make it invalid.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
import math

from campfire.model.errors import InvalidBounds, TooHigh, TooLow


@dataclass(frozen=True)
class BoundedFloat:
    current: float
    min: float
    max: float

    def __post_init__(self) -> None:
        if self.max < self.min:
            raise InvalidBounds(self.min, self.max)
        if self.current < self.min:
            raise TooLow(self.current, self.min)
        if self.current > self.max:
            raise TooHigh(self.current, self.max)

    @classmethod
    def new_zero_min(cls, current: float, maximum: float) -> BoundedFloat:
        """Create a value bounded to [0.0, maximum]."""
        return cls(current, 0.0, maximum)

    def saturating_set(self, value: float) -> BoundedFloat:
        """Copy with `current` set to `value`, clamped to the bounds."""
        return replace(self, current=max(self.min, min(self.max, value)))

    def with_max(self, value: float) -> BoundedFloat:
        """
        Copy with a new maximum. `current` is clamped into the new bounds.

        Raises:
            InvalidBounds: The new maximum is below the minimum.
        """
        if value < self.min:
            raise InvalidBounds(self.min, value)
        return BoundedFloat(min(self.current, value), self.min, value)

    def with_min(self, value: float) -> BoundedFloat:
        """
        Copy with a new minimum. `current` is clamped into the new bounds.

        Raises:
            InvalidBounds: The new minimum is above the maximum.
        """
        if value > self.max:
            raise InvalidBounds(value, self.max)
        return BoundedFloat(max(self.current, value), value, self.max)

    def max_diff(self) -> float:
        """Headroom left below the maximum."""
        return self.max - self.current

    def min_diff(self) -> float:
        """Distance above the minimum."""
        return self.current - self.min

    def __add__(self, other: float) -> BoundedFloat:
        return self.saturating_set(self.current + other)

    def __sub__(self, other: float) -> BoundedFloat:
        return self.saturating_set(self.current - other)

    def __mul__(self, other: float) -> BoundedFloat:
        return self.saturating_set(self.current * other)

    def __truediv__(self, other: float) -> BoundedFloat:
        if other == 0:
            # x / 0 is infinite in the sign of x; 0 / 0 has no sign and falls to the minimum
            if self.current == 0:
                return self.saturating_set(self.min)
            return self.saturating_set(math.copysign(math.inf, self.current) * math.copysign(1.0, other))
        return self.saturating_set(self.current / other)

    def __float__(self) -> float:
        return float(self.current)
