"""Tire set record."""

from pydantic import BaseModel, Field

from vehicle_configurator.config.chassis import VehicleClass


class TiresSpec(BaseModel):
    """One matched set of tires."""

    vehicle_class: VehicleClass = Field(default=VehicleClass.CAR, description="Vehicle class the set is built for")
    count: int = Field(default=4, ge=1, description="Number of tires")
    size: float = Field(default=17, gt=0, description="Rim diameter (inches)")
    pressure: float = Field(default=34, gt=0, description="Inflation pressure (psi)")
