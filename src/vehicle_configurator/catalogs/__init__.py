"""Constraint catalogs: stateless lookups keyed by vehicle class."""

from vehicle_configurator.catalogs import chassis, engine, tires
from vehicle_configurator.catalogs.ranges import (
    CLIMATE_SETTINGS,
    EMPTY_RANGE,
    FUEL_LEVEL_RANGE,
    POSITION_RANGE,
    ValueRange,
)

__all__ = [
    "chassis",
    "engine",
    "tires",
    "ValueRange",
    "EMPTY_RANGE",
    "POSITION_RANGE",
    "FUEL_LEVEL_RANGE",
    "CLIMATE_SETTINGS",
]
