"""Engine record and the literal value sets shared with the engine catalog."""

from typing import Literal

from pydantic import BaseModel, Field

from vehicle_configurator.config.chassis import VehicleClass

Fuel = Literal["gasoline", "diesel", "hybrid", "electric"]
Transmission = Literal["automatic", "manual"]
Gear = Literal["park", "neutral", "reverse", "drive", "1st", "2nd", "3rd", "4th", "5th"]


class EngineSpec(BaseModel):
    """One engine as described by a build sheet.

    ``size`` is litres for combustion and hybrid engines and kWh for
    electric ones.  Whether the size suits the vehicle class is decided by
    the engine catalog when the engine is attached, not here.
    """

    vehicle_class: VehicleClass = Field(default=VehicleClass.CAR, description="Vehicle class the engine is built for")
    fuel: Fuel = Field(default="gasoline", description="Fuel type")
    size: float = Field(default=2.0, gt=0, description="Displacement (L) or battery capacity (kWh)")
    transmission: Transmission = Field(default="automatic", description="Transmission type")
    gear: Gear = Field(default="park", description="Current gear")
    speed: float = Field(default=0.0, ge=0, description="Current speed (mph)")
    is_running: bool = Field(default=False, description="Whether the engine is on")
    fuel_level: float = Field(default=0.0, ge=0, le=100, description="Tank / charge level (% full)")
