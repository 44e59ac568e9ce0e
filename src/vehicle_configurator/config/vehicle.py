"""Top-level build sheet: bundles every component record for one vehicle."""

from pydantic import BaseModel, Field

from vehicle_configurator.config.chassis import ChassisSpec
from vehicle_configurator.config.door import DoorSpec
from vehicle_configurator.config.engine import EngineSpec
from vehicle_configurator.config.seat import SeatSpec
from vehicle_configurator.config.tires import TiresSpec
from vehicle_configurator.config.window import WindowSpec


class VehicleSpec(BaseModel):
    """Complete input bundle for assembling one vehicle."""

    chassis: ChassisSpec = Field(default_factory=ChassisSpec)
    engine: EngineSpec = Field(default_factory=EngineSpec)
    tires: TiresSpec = Field(default_factory=TiresSpec)
    doors: list[DoorSpec] = Field(default_factory=list)
    windows: list[WindowSpec] = Field(default_factory=list)
    seats: list[SeatSpec] = Field(default_factory=list)
