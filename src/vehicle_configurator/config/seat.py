"""Seat record."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

SeatMaterial = Literal["leather", "cloth"]
SeatOperation = Literal["none", "power", "electric", "manual"]


class SeatSpec(BaseModel):
    """One seat with optional heating and cooling."""

    name: str = Field(min_length=1, description="Unique seat name within the vehicle")
    material: SeatMaterial = Field(default="cloth", description="Upholstery")
    color: str = Field(default="black", description="Upholstery color")
    is_operable: bool = Field(default=False, description="Whether the seat can recline")
    operation_type: SeatOperation = Field(default="none", description="How the seat is adjusted")
    has_heat: bool = Field(default=False, description="Seat heating fitted")
    has_cool: bool = Field(default=False, description="Seat cooling fitted")
    position: float = Field(default=0, ge=0, le=100, description="Percent reclined")
    heat_setting: int = Field(default=0, ge=0, le=3, description="0=off, 1=low, 2=medium, 3=high")
    cool_setting: int = Field(default=0, ge=0, le=3, description="0=off, 1=low, 2=medium, 3=high")

    @model_validator(mode="after")
    def climate_is_consistent(self) -> "SeatSpec":
        if self.heat_setting and self.cool_setting:
            raise ValueError("heat_setting and cool_setting cannot both be on")
        if self.heat_setting and not self.has_heat:
            raise ValueError("heat_setting requires has_heat")
        if self.cool_setting and not self.has_cool:
            raise ValueError("cool_setting requires has_cool")
        return self
