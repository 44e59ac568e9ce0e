"""Result models: setter outcomes and status snapshots."""

from vehicle_configurator.models.outcome import Adjustment, ErrorKind, Outcome, OutcomeStatus
from vehicle_configurator.models.status import (
    DoorStatus,
    EngineStatus,
    SeatStatus,
    TiresStatus,
    VehicleStatus,
    WindowStatus,
)

__all__ = [
    "Adjustment",
    "ErrorKind",
    "Outcome",
    "OutcomeStatus",
    "DoorStatus",
    "EngineStatus",
    "SeatStatus",
    "TiresStatus",
    "VehicleStatus",
    "WindowStatus",
]
