"""Construction records: the shape of each component before it exists."""

from vehicle_configurator.config.chassis import ChassisSpec, VehicleClass
from vehicle_configurator.config.engine import EngineSpec, Fuel, Gear, Transmission
from vehicle_configurator.config.tires import TiresSpec
from vehicle_configurator.config.door import DoorSpec, HingeType
from vehicle_configurator.config.window import WindowOperation, WindowSpec
from vehicle_configurator.config.seat import SeatMaterial, SeatOperation, SeatSpec
from vehicle_configurator.config.vehicle import VehicleSpec
from vehicle_configurator.config.loader import load_vehicle_spec

__all__ = [
    "VehicleClass",
    "ChassisSpec",
    "EngineSpec",
    "Fuel",
    "Gear",
    "Transmission",
    "TiresSpec",
    "DoorSpec",
    "HingeType",
    "WindowSpec",
    "WindowOperation",
    "SeatSpec",
    "SeatMaterial",
    "SeatOperation",
    "VehicleSpec",
    "load_vehicle_spec",
]
