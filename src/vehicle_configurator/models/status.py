"""Status snapshots: immutable read-back of component state.

Failed mutations do not raise, so callers re-read state after every
attempt.  These models are the serialisable form of that read-back.
"""

from __future__ import annotations

from pydantic import BaseModel

from vehicle_configurator.config.chassis import VehicleClass


class EngineStatus(BaseModel):
    vehicle_class: VehicleClass
    fuel: str
    size: float
    transmission: str
    gear: str
    speed: float
    is_running: bool
    fuel_level: float


class TiresStatus(BaseModel):
    vehicle_class: VehicleClass
    count: int
    size: float
    pressure: float


class WindowStatus(BaseModel):
    name: str
    in_door: bool
    is_operable: bool
    operation_type: str
    position: float


class DoorStatus(BaseModel):
    name: str
    has_window: bool
    hinge_type: str
    is_locked: bool
    position: float
    window: str | None = None
    """Name of the window mounted in the door."""


class SeatStatus(BaseModel):
    name: str
    material: str
    color: str
    is_operable: bool
    operation_type: str
    position: float
    has_heat: bool
    has_cool: bool
    heat_setting: int
    cool_setting: int


class VehicleStatus(BaseModel):
    """Whole-vehicle snapshot.  ``engine`` / ``tires`` are ``None`` until attached."""

    year: int
    make: str
    model: str
    color: str
    vehicle_class: VehicleClass
    engine: EngineStatus | None = None
    tires: TiresStatus | None = None
    doors: list[DoorStatus] = []
    windows: list[WindowStatus] = []
    seats: list[SeatStatus] = []
