"""Door entity.

Lock rules:
  - a door cannot be locked while open (position != 0)
  - a locked door cannot move between closed and open in either direction
"""

from __future__ import annotations

from vehicle_configurator import reporting
from vehicle_configurator.catalogs.ranges import POSITION_RANGE
from vehicle_configurator.components.window import Window
from vehicle_configurator.config.door import DoorSpec
from vehicle_configurator.models.outcome import Outcome
from vehicle_configurator.models.status import DoorStatus


class Door:
    """A door with a lock and an optional window."""

    def __init__(
        self,
        name: str,
        has_window: bool = False,
        hinge_type: str = "standard",
        is_locked: bool = True,
        position: float = 0,
    ) -> None:
        self.name = name
        self.has_window = has_window
        self.hinge_type = hinge_type
        self.is_locked = is_locked
        self.position = position
        self.window: Window | None = None

    @classmethod
    def from_spec(cls, spec: DoorSpec) -> Door:
        """Build a door from its record.  The window, if named, is linked separately."""
        return cls(
            name=spec.name,
            has_window=spec.has_window,
            hinge_type=spec.hinge_type,
            is_locked=spec.is_locked,
            position=spec.position,
        )

    @property
    def is_open(self) -> bool:
        return self.position != 0

    def set_window(self, new_window: Window) -> Outcome:
        """Mount ``new_window`` in this door, replacing any previous one."""
        if not isinstance(new_window, Window):
            return reporting.invalid_instance("window")

        self.window = new_window
        self.has_window = True
        return Outcome.success()

    def set_window_position(self, new_position: float) -> Outcome:
        if self.window is None:
            return reporting.does_not_have("door", "a window")

        if not self.window.is_operable:
            return reporting.not_operable("window")

        return self.window.set_position(new_position)

    def set_position(self, new_position: float) -> Outcome:
        """Open the door to ``new_position`` percent (0 closes it)."""
        if new_position == self.position:
            return reporting.no_change("position")

        if self.position == 0 and self.is_locked:
            return reporting.cannot_while("door", "opened", "locked")

        if new_position not in POSITION_RANGE:
            return reporting.out_of_range("door position", POSITION_RANGE.minimum, POSITION_RANGE.maximum)

        if new_position == 0 and self.is_locked:
            return reporting.cannot_while("door", "closed", "lock is engaged")

        self.position = new_position
        return Outcome.success()

    def set_is_locked(self, new_is_locked: bool) -> Outcome:
        if new_is_locked == self.is_locked:
            return reporting.already("door", "locked" if self.is_locked else "unlocked")

        if new_is_locked and self.is_open:
            return reporting.cannot_while(self.name, "locked", "it is open")

        self.is_locked = new_is_locked
        return Outcome.success()

    def lock(self) -> Outcome:
        return self.set_is_locked(True)

    def unlock(self) -> Outcome:
        return self.set_is_locked(False)

    def to_status(self) -> DoorStatus:
        return DoorStatus(
            name=self.name,
            has_window=self.has_window,
            hinge_type=self.hinge_type,
            is_locked=self.is_locked,
            position=self.position,
            window=self.window.name if self.window is not None else None,
        )

    def __repr__(self) -> str:
        return f"Door(name={self.name!r}, position={self.position}, is_locked={self.is_locked})"
