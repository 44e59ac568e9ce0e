"""Engine catalog: fuels and gears per transmission, sizes per class and fuel.

Electric sizes are battery capacity in kWh; every other fuel is
displacement in litres.  The first fuel listed for a transmission is the
one an engine falls back to when a transmission change invalidates its
current fuel.
"""

from __future__ import annotations

from typing import Any

from vehicle_configurator.catalogs.ranges import EMPTY_RANGE, ValueRange
from vehicle_configurator.config.chassis import VehicleClass

_FUELS: dict[str, tuple[str, ...]] = {
    "automatic": ("gasoline", "diesel", "electric", "hybrid"),
    "manual": ("gasoline", "diesel"),
}

_GEARS: dict[str, tuple[str, ...]] = {
    "automatic": ("park", "neutral", "reverse", "drive"),
    "manual": ("reverse", "neutral", "park", "1st", "2nd", "3rd", "4th", "5th"),
}

# (electric kWh, combustion litres)
_SIZES: dict[VehicleClass, tuple[ValueRange, ValueRange]] = {
    VehicleClass.MOTORCYCLE: (ValueRange(5.0, 20.0), ValueRange(0.1, 2.0)),
    VehicleClass.CAR: (ValueRange(20.0, 100.0), ValueRange(0.5, 6.0)),
    VehicleClass.SUV: (ValueRange(20.0, 100.0), ValueRange(0.5, 6.0)),
    VehicleClass.VAN: (ValueRange(30.0, 120.0), ValueRange(2.0, 5.0)),
    VehicleClass.TRUCK: (ValueRange(40.0, 200.0), ValueRange(2.5, 6.0)),
    VehicleClass.SEMI_TRUCK: (ValueRange(300.0, 1000.0), ValueRange(9.0, 15.0)),
    VehicleClass.BUS: (ValueRange(100.0, 600.0), ValueRange(4.0, 15.0)),
}

TRANSMISSIONS: tuple[str, ...] = tuple(_FUELS)
STOPPED_GEARS: frozenset[str] = frozenset({"park", "neutral"})


def get_allowed_engine_fuels(transmission: str) -> tuple[str, ...]:
    """Fuels an engine may use with ``transmission``; empty if unknown."""
    return _FUELS.get(transmission, ())


def get_allowed_engine_sizes(vehicle_class: VehicleClass | str, fuel: str) -> ValueRange:
    """Size range for ``vehicle_class`` running on ``fuel``; empty if the class is unknown."""
    sizes = _SIZES.get(VehicleClass.lookup(vehicle_class))
    if sizes is None:
        return EMPTY_RANGE
    electric, combustion = sizes
    return electric if fuel == "electric" else combustion


def get_allowed_engine_gears(transmission: str) -> tuple[str, ...]:
    """Gears selectable with ``transmission``; empty if unknown."""
    return _GEARS.get(transmission, ())


def check_valid_gear(transmission: str, gear: str) -> bool:
    return gear in get_allowed_engine_gears(transmission)


def check_valid_size(vehicle_class: VehicleClass | str, size: float, fuel: str) -> bool:
    return size in get_allowed_engine_sizes(vehicle_class, fuel)


def check_valid_fuel(transmission: str, fuel: str) -> bool:
    return fuel in get_allowed_engine_fuels(transmission)


def validate_engine_config(engine: Any) -> bool:
    """Check fuel, size and gear of any engine-shaped object together.

    Accepts a :class:`~vehicle_configurator.components.engine.Engine` or an
    :class:`~vehicle_configurator.config.engine.EngineSpec`.
    """
    valid_fuel = check_valid_fuel(engine.transmission, engine.fuel)
    valid_size = check_valid_size(engine.vehicle_class, engine.size, engine.fuel)
    valid_gear = check_valid_gear(engine.transmission, engine.gear)
    return valid_fuel and valid_size and valid_gear
