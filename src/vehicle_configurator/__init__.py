"""Vehicle configurator: class-keyed constraint catalogs and guarded component state."""

from vehicle_configurator.assembly import AssemblyResult, VehicleChassis, assemble_vehicle
from vehicle_configurator.components import Door, Engine, Seat, Tires, Window
from vehicle_configurator.config import VehicleClass, VehicleSpec, load_vehicle_spec
from vehicle_configurator.models import ErrorKind, Outcome, OutcomeStatus

__version__ = "0.1.0"

__all__ = [
    "AssemblyResult",
    "VehicleChassis",
    "assemble_vehicle",
    "Door",
    "Engine",
    "Seat",
    "Tires",
    "Window",
    "VehicleClass",
    "VehicleSpec",
    "load_vehicle_spec",
    "ErrorKind",
    "Outcome",
    "OutcomeStatus",
]
