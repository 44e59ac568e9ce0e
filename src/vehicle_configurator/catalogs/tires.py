"""Tires catalog: counts, sizes (inches) and pressures (psi) per vehicle class.

Tire counts are discrete sets, not ranges: a bus may run 6, 8, 10 or 12
tires but never 7.
"""

from __future__ import annotations

from typing import Any

from vehicle_configurator.catalogs.ranges import EMPTY_RANGE, ValueRange
from vehicle_configurator.config.chassis import VehicleClass

_COUNTS: dict[VehicleClass, tuple[int, ...]] = {
    VehicleClass.MOTORCYCLE: (2, 3),
    VehicleClass.CAR: (4,),
    VehicleClass.SUV: (4,),
    VehicleClass.VAN: (4,),
    VehicleClass.TRUCK: (4, 6),
    VehicleClass.SEMI_TRUCK: (10, 18),
    VehicleClass.BUS: (6, 8, 10, 12),
}

_SIZES: dict[VehicleClass, ValueRange] = {
    VehicleClass.MOTORCYCLE: ValueRange(16, 21),
    VehicleClass.CAR: ValueRange(14, 20),
    VehicleClass.SUV: ValueRange(15, 22),
    VehicleClass.VAN: ValueRange(15, 22),
    VehicleClass.TRUCK: ValueRange(15, 22),
    VehicleClass.SEMI_TRUCK: ValueRange(22, 25),
    VehicleClass.BUS: ValueRange(19, 25),
}

_PRESSURES: dict[VehicleClass, ValueRange] = {
    VehicleClass.MOTORCYCLE: ValueRange(28, 42),
    VehicleClass.CAR: ValueRange(30, 35),
    VehicleClass.SUV: ValueRange(30, 40),
    VehicleClass.VAN: ValueRange(30, 50),
    VehicleClass.TRUCK: ValueRange(30, 50),
    VehicleClass.SEMI_TRUCK: ValueRange(75, 100),
    VehicleClass.BUS: ValueRange(80, 120),
}


def get_allowed_number_tires(vehicle_class: VehicleClass | str) -> tuple[int, ...]:
    """Discrete tire counts for ``vehicle_class``; empty for an unknown class."""
    return _COUNTS.get(VehicleClass.lookup(vehicle_class), ())


def get_allowed_tire_sizes(vehicle_class: VehicleClass | str) -> ValueRange:
    return _SIZES.get(VehicleClass.lookup(vehicle_class), EMPTY_RANGE)


def get_allowed_tire_pressure(vehicle_class: VehicleClass | str) -> ValueRange:
    return _PRESSURES.get(VehicleClass.lookup(vehicle_class), EMPTY_RANGE)


def check_valid_tire_count(vehicle_class: VehicleClass | str, tire_count: int) -> bool:
    return tire_count in get_allowed_number_tires(vehicle_class)


def check_valid_pressure(vehicle_class: VehicleClass | str, pressure: float) -> bool:
    return pressure in get_allowed_tire_pressure(vehicle_class)


def check_valid_size(vehicle_class: VehicleClass | str, size: float) -> bool:
    return size in get_allowed_tire_sizes(vehicle_class)


def validate_tire_config(tires: Any) -> bool:
    """Check count, size and pressure of any tires-shaped object together."""
    valid_count = check_valid_tire_count(tires.vehicle_class, tires.count)
    valid_size = check_valid_size(tires.vehicle_class, tires.size)
    valid_pressure = check_valid_pressure(tires.vehicle_class, tires.pressure)
    return valid_count and valid_size and valid_pressure
