"""Window entity."""

from __future__ import annotations

from vehicle_configurator import reporting
from vehicle_configurator.catalogs.ranges import POSITION_RANGE
from vehicle_configurator.config.window import WindowSpec
from vehicle_configurator.models.outcome import Outcome
from vehicle_configurator.models.status import WindowStatus


class Window:
    """A window, optionally mounted in a door.

    A door window is still owned by the vehicle.  The door only holds a
    reference and forwards position changes through
    :meth:`Door.set_window_position`.
    """

    def __init__(
        self,
        name: str,
        in_door: bool = False,
        is_operable: bool = False,
        operation_type: str = "none",
        position: float = 0,
    ) -> None:
        self.name = name
        self.in_door = in_door
        self.is_operable = is_operable
        self.operation_type = operation_type
        self.position = position

    @classmethod
    def from_spec(cls, spec: WindowSpec) -> Window:
        return cls(
            name=spec.name,
            in_door=spec.in_door,
            is_operable=spec.is_operable,
            operation_type=spec.operation_type,
            position=spec.position,
        )

    def set_position(self, new_position: float) -> Outcome:
        """Open the window to ``new_position`` percent."""
        if not self.is_operable:
            return reporting.not_operable("window")

        if new_position == self.position:
            return reporting.no_change("position")

        if new_position not in POSITION_RANGE:
            return reporting.out_of_range("window position", POSITION_RANGE.minimum, POSITION_RANGE.maximum)

        self.position = new_position
        return Outcome.success()

    def to_status(self) -> WindowStatus:
        return WindowStatus(
            name=self.name,
            in_door=self.in_door,
            is_operable=self.is_operable,
            operation_type=self.operation_type,
            position=self.position,
        )

    def __repr__(self) -> str:
        return f"Window(name={self.name!r}, position={self.position})"
