"""Constraint value types and the bounds shared by every component."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValueRange:
    """Closed interval ``[minimum, maximum]``, inclusive on both ends.

    An empty range (both bounds ``None``) contains nothing.  Catalogs return
    it for vehicle classes they do not know.
    """

    minimum: float | None = None
    maximum: float | None = None

    def __post_init__(self) -> None:
        if (self.minimum is None) != (self.maximum is None):
            raise ValueError("ValueRange bounds must both be set or both be None.")
        if self.minimum is not None and self.minimum > self.maximum:
            raise ValueError("ValueRange minimum must be <= maximum.")

    @property
    def is_empty(self) -> bool:
        return self.minimum is None

    def __contains__(self, value: object) -> bool:
        if self.is_empty or isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        return self.minimum <= value <= self.maximum

    def __bool__(self) -> bool:
        return not self.is_empty


EMPTY_RANGE = ValueRange()

POSITION_RANGE = ValueRange(0, 100)
"""Percent open / reclined, shared by doors, windows and seats."""

FUEL_LEVEL_RANGE = ValueRange(0, 100)
"""Percent full."""

CLIMATE_SETTINGS: tuple[int, ...] = (0, 1, 2, 3)
"""Seat heat / cool levels: off, low, medium, high."""
