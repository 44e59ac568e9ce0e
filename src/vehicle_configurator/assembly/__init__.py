"""Vehicle aggregate and build-sheet assembly."""

from vehicle_configurator.assembly.chassis import VehicleChassis
from vehicle_configurator.assembly.builder import AssemblyResult, assemble_vehicle

__all__ = [
    "VehicleChassis",
    "AssemblyResult",
    "assemble_vehicle",
]
