"""Chassis catalog: allowed door, window and seat counts per vehicle class."""

from __future__ import annotations

from vehicle_configurator.catalogs.ranges import EMPTY_RANGE, ValueRange
from vehicle_configurator.config.chassis import VehicleClass

_DOOR_COUNTS: dict[VehicleClass, ValueRange] = {
    VehicleClass.MOTORCYCLE: ValueRange(0, 0),
    VehicleClass.CAR: ValueRange(2, 5),
    VehicleClass.SUV: ValueRange(2, 5),
    VehicleClass.VAN: ValueRange(2, 5),
    VehicleClass.TRUCK: ValueRange(2, 5),
    VehicleClass.SEMI_TRUCK: ValueRange(2, 4),
    VehicleClass.BUS: ValueRange(2, 4),
}

_WINDOW_COUNTS: dict[VehicleClass, ValueRange] = {
    VehicleClass.MOTORCYCLE: ValueRange(0, 0),
    VehicleClass.CAR: ValueRange(3, 6),
    VehicleClass.SUV: ValueRange(3, 8),
    VehicleClass.VAN: ValueRange(3, 8),
    VehicleClass.TRUCK: ValueRange(3, 6),
    VehicleClass.SEMI_TRUCK: ValueRange(3, 6),
    VehicleClass.BUS: ValueRange(12, 42),
}

_SEAT_COUNTS: dict[VehicleClass, ValueRange] = {
    VehicleClass.MOTORCYCLE: ValueRange(1, 2),
    VehicleClass.CAR: ValueRange(2, 5),
    VehicleClass.SUV: ValueRange(5, 8),
    VehicleClass.VAN: ValueRange(5, 8),
    VehicleClass.TRUCK: ValueRange(2, 5),
    VehicleClass.SEMI_TRUCK: ValueRange(2, 5),
    VehicleClass.BUS: ValueRange(20, 80),
}


def get_allowed_number_doors(vehicle_class: VehicleClass | str) -> ValueRange:
    """Allowed door count for ``vehicle_class``; empty for an unknown class."""
    return _DOOR_COUNTS.get(VehicleClass.lookup(vehicle_class), EMPTY_RANGE)


def get_allowed_number_windows(vehicle_class: VehicleClass | str) -> ValueRange:
    """Allowed window count for ``vehicle_class``; empty for an unknown class."""
    return _WINDOW_COUNTS.get(VehicleClass.lookup(vehicle_class), EMPTY_RANGE)


def get_allowed_number_seats(vehicle_class: VehicleClass | str) -> ValueRange:
    """Allowed seat count for ``vehicle_class``; empty for an unknown class."""
    return _SEAT_COUNTS.get(VehicleClass.lookup(vehicle_class), EMPTY_RANGE)


def check_valid_door_count(vehicle_class: VehicleClass | str, door_count: int) -> bool:
    return door_count in get_allowed_number_doors(vehicle_class)


def check_valid_window_count(vehicle_class: VehicleClass | str, window_count: int) -> bool:
    return window_count in get_allowed_number_windows(vehicle_class)


def check_valid_seat_count(vehicle_class: VehicleClass | str, seat_count: int) -> bool:
    return seat_count in get_allowed_number_seats(vehicle_class)
