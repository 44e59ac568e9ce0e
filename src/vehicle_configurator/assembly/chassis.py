"""Vehicle aggregate: owns every component of one vehicle.

Doors, windows and seats are held in name-keyed dicts.  Names are unique
within a vehicle; a batch with duplicate names is rejected on attachment.
Attachment is all-or-nothing: a rejected batch leaves the previously
attached collection in place.

Name-keyed operations resolve the entity, report ``NOT_FOUND`` if it is
missing, and otherwise return the entity's own guarded outcome.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TypeVar

from vehicle_configurator import reporting
from vehicle_configurator.catalogs import chassis as chassis_catalog
from vehicle_configurator.catalogs import engine as engine_catalog
from vehicle_configurator.catalogs import tires as tires_catalog
from vehicle_configurator.catalogs.ranges import POSITION_RANGE
from vehicle_configurator.components.door import Door
from vehicle_configurator.components.engine import Engine
from vehicle_configurator.components.seat import Seat
from vehicle_configurator.components.tires import Tires
from vehicle_configurator.components.window import Window
from vehicle_configurator.config.chassis import ChassisSpec, VehicleClass
from vehicle_configurator.models.outcome import Outcome
from vehicle_configurator.models.status import VehicleStatus

logger = logging.getLogger(__name__)

T = TypeVar("T", Door, Window, Seat)


class VehicleChassis:
    """One vehicle: identity plus its engine, tires, doors, windows and seats.

    Usage::

        vehicle = VehicleChassis(2020, "Hyundai", "Elantra GT", "White", "car")
        vehicle.set_engine(Engine("car", "electric", 60, "automatic"))
        vehicle.set_tires(Tires("car", 4, 17, 34))
        vehicle.add_all_doors([Door("driver"), Door("passenger")])

        if not vehicle.set_door_position("driver", 50):
            ...  # re-read vehicle.get_door_details("driver")

    Raises
    ------
    ValueError
        If ``vehicle_class`` is not a known vehicle class.
    """

    def __init__(self, year: int, make: str, model: str, color: str, vehicle_class: VehicleClass | str) -> None:
        resolved = VehicleClass.lookup(vehicle_class)
        if resolved is None:
            raise ValueError(f"invalid vehicle type: {vehicle_class!r}")
        self.year = year
        self.make = make
        self.model = model
        self.color = color
        self.vehicle_class = resolved
        self._engine: Engine | None = None
        self._tires: Tires | None = None
        self._doors: dict[str, Door] = {}
        self._windows: dict[str, Window] = {}
        self._seats: dict[str, Seat] = {}

    @classmethod
    def from_spec(cls, spec: ChassisSpec) -> VehicleChassis:
        return cls(spec.year, spec.make, spec.model, spec.color, spec.vehicle_class)

    # ═══════════════════════════════════════════════════════════════════
    # Engine & tires
    # ═══════════════════════════════════════════════════════════════════

    @property
    def engine(self) -> Engine | None:
        return self._engine

    @property
    def tires(self) -> Tires | None:
        return self._tires

    def set_engine(self, new_engine: Engine) -> Outcome:
        """Attach or replace the engine."""
        if not isinstance(new_engine, Engine):
            return reporting.invalid_instance("engine")

        if VehicleClass.lookup(new_engine.vehicle_class) is not self.vehicle_class:
            return reporting.invalid_config("engine", f"not built for a {self.vehicle_class.value}")

        if not engine_catalog.validate_engine_config(new_engine):
            return reporting.invalid_config("engine")

        self._engine = new_engine
        logger.debug("engine attached to %s", self)
        return Outcome.success()

    def set_tires(self, new_tires: Tires) -> Outcome:
        """Attach or replace the tire set."""
        if not isinstance(new_tires, Tires):
            return reporting.invalid_instance("tires")

        if VehicleClass.lookup(new_tires.vehicle_class) is not self.vehicle_class:
            return reporting.invalid_config("tires", f"not built for a {self.vehicle_class.value}")

        if not tires_catalog.validate_tire_config(new_tires):
            return reporting.invalid_config("tires")

        self._tires = new_tires
        logger.debug("tires attached to %s", self)
        return Outcome.success()

    def get_engine_details(self) -> Engine | None:
        return self._engine

    def get_tires_details(self) -> Tires | None:
        return self._tires

    def start_engine(self) -> Outcome:
        if self._engine is None:
            return reporting.not_found("engine")
        return self._engine.set_is_running(True)

    def stop_engine(self) -> Outcome:
        if self._engine is None:
            return reporting.not_found("engine")
        return self._engine.set_is_running(False)

    # ═══════════════════════════════════════════════════════════════════
    # Collection attachment
    # ═══════════════════════════════════════════════════════════════════

    def add_all_windows(self, windows: Iterable[Window]) -> Outcome:
        return self._attach("windows", "window", windows, Window, chassis_catalog.check_valid_window_count)

    def add_all_doors(self, doors: Iterable[Door]) -> Outcome:
        return self._attach("doors", "door", doors, Door, chassis_catalog.check_valid_door_count)

    def add_all_seats(self, seats: Iterable[Seat]) -> Outcome:
        return self._attach("seats", "seat", seats, Seat, chassis_catalog.check_valid_seat_count)

    def _attach(
        self,
        plural: str,
        singular: str,
        items: Iterable[T],
        kind: type[T],
        count_is_valid: Callable[[VehicleClass, int], bool],
    ) -> Outcome:
        if isinstance(items, (str, bytes)) or not isinstance(items, Iterable):
            return reporting.invalid_instance(singular)
        items = list(items)

        if not count_is_valid(self.vehicle_class, len(items)):
            return reporting.invalid_config(plural, f"{len(items)} not allowed for {self.vehicle_class.value}")

        if not all(isinstance(item, kind) for item in items):
            return reporting.invalid_instance(singular)

        by_name = {item.name: item for item in items}
        if len(by_name) != len(items):
            return reporting.invalid_config(plural, "names must be unique")

        setattr(self, f"_{plural}", by_name)
        if plural in ("doors", "windows"):
            self._relink_door_windows()
        logger.debug("%d %s attached to %s", len(items), plural, self)
        return Outcome.success()

    def _relink_door_windows(self) -> None:
        # A door carries the registered window of the same name, never a stale copy.
        for door in self._doors.values():
            if door.window is None:
                continue
            registered = self._windows.get(door.window.name)
            if registered is not None and registered is not door.window:
                door.window = registered
                logger.debug("door %r relinked to window %r", door.name, registered.name)

    # ═══════════════════════════════════════════════════════════════════
    # Windows
    # ═══════════════════════════════════════════════════════════════════

    def get_window_names(self) -> list[str]:
        return list(self._windows)

    def get_window_details(self, window_name: str) -> Window | None:
        window = self._windows.get(window_name)
        if window is None:
            reporting.not_found("window")
        return window

    def set_window_position(self, window_name: str, new_position: float) -> Outcome:
        """Move a window.  Door windows are moved through their door."""
        window = self._windows.get(window_name)
        if window is None:
            return reporting.not_found("window")

        if not window.in_door:
            return window.set_position(new_position)

        door = self._door_carrying(window)
        if door is None:
            return reporting.not_found("door")
        return door.set_window_position(new_position)

    def _door_carrying(self, window: Window) -> Door | None:
        for door in self._doors.values():
            if door.window is window:
                return door
        return None

    def open_all_windows(self) -> int:
        """Fully open every operable window.  Returns how many moved."""
        return self._move_all_windows(POSITION_RANGE.maximum)

    def close_all_windows(self) -> int:
        """Close every operable window.  Returns how many moved."""
        return self._move_all_windows(POSITION_RANGE.minimum)

    def _move_all_windows(self, position: float) -> int:
        moved = 0
        for window in self._windows.values():
            if window.is_operable and self.set_window_position(window.name, position):
                moved += 1
        return moved

    # ═══════════════════════════════════════════════════════════════════
    # Doors
    # ═══════════════════════════════════════════════════════════════════

    def get_door_names(self) -> list[str]:
        return list(self._doors)

    def get_door_details(self, door_name: str) -> Door | None:
        door = self._doors.get(door_name)
        if door is None:
            reporting.not_found("door")
        return door

    def get_door_window_details(self, door_name: str) -> Window | None:
        door = self._doors.get(door_name)
        if door is None:
            reporting.not_found("door")
            return None
        if door.window is None:
            reporting.does_not_have("door", "a window")
            return None
        if self._windows.get(door.window.name) is not door.window:
            reporting.not_found("window")
            return None
        return door.window

    def set_door_position(self, door_name: str, new_position: float) -> Outcome:
        door = self._doors.get(door_name)
        if door is None:
            return reporting.not_found("door")
        return door.set_position(new_position)

    def lock_door(self, door_name: str) -> Outcome:
        door = self._doors.get(door_name)
        if door is None:
            return reporting.not_found("door")
        return door.set_is_locked(True)

    def unlock_door(self, door_name: str) -> Outcome:
        door = self._doors.get(door_name)
        if door is None:
            return reporting.not_found("door")
        return door.set_is_locked(False)

    def lock_all_doors(self) -> int:
        """Lock every door that can be locked.  Returns how many changed."""
        return sum(
            1
            for door in self._doors.values()
            if not door.is_open and not door.is_locked and door.set_is_locked(True)
        )

    def unlock_all_doors(self) -> int:
        """Unlock every locked door.  Returns how many changed."""
        return sum(
            1 for door in self._doors.values() if door.is_locked and door.set_is_locked(False)
        )

    # ═══════════════════════════════════════════════════════════════════
    # Seats
    # ═══════════════════════════════════════════════════════════════════

    def get_seat_names(self) -> list[str]:
        return list(self._seats)

    def get_seat_details(self, seat_name: str) -> Seat | None:
        seat = self._seats.get(seat_name)
        if seat is None:
            reporting.not_found("seat")
        return seat

    def set_seat_position(self, seat_name: str, new_position: float) -> Outcome:
        seat = self._seats.get(seat_name)
        if seat is None:
            return reporting.not_found("seat")
        return seat.set_position(new_position)

    def set_seat_heat_setting(self, seat_name: str, new_setting: int) -> Outcome:
        seat = self._seats.get(seat_name)
        if seat is None:
            return reporting.not_found("seat")
        return seat.set_heat_setting(new_setting)

    def set_seat_cool_setting(self, seat_name: str, new_setting: int) -> Outcome:
        seat = self._seats.get(seat_name)
        if seat is None:
            return reporting.not_found("seat")
        return seat.set_cool_setting(new_setting)

    # ═══════════════════════════════════════════════════════════════════
    # Read-back
    # ═══════════════════════════════════════════════════════════════════

    def status(self) -> VehicleStatus:
        """Snapshot the whole vehicle."""
        return VehicleStatus(
            year=self.year,
            make=self.make,
            model=self.model,
            color=self.color,
            vehicle_class=self.vehicle_class,
            engine=self._engine.to_status() if self._engine is not None else None,
            tires=self._tires.to_status() if self._tires is not None else None,
            doors=[door.to_status() for door in self._doors.values()],
            windows=[window.to_status() for window in self._windows.values()],
            seats=[seat.to_status() for seat in self._seats.values()],
        )

    def __repr__(self) -> str:
        return f"VehicleChassis({self.year} {self.make} {self.model}, {self.vehicle_class.value})"
