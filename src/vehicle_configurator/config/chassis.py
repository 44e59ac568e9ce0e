"""Vehicle class and chassis record."""

from enum import Enum

from pydantic import BaseModel, Field


class VehicleClass(str, Enum):
    """Category that parameterises every catalog lookup."""

    MOTORCYCLE = "motorcycle"
    CAR = "car"
    SUV = "suv"
    VAN = "van"
    TRUCK = "truck"
    SEMI_TRUCK = "semi-truck"
    BUS = "bus"

    @classmethod
    def lookup(cls, value: object) -> "VehicleClass | None":
        """Return the member for ``value`` (member or its string), or ``None`` if unknown."""
        if isinstance(value, str):
            value = value.lower()
        try:
            return cls(value)
        except ValueError:
            return None


class ChassisSpec(BaseModel):
    """Identity of one vehicle, collected before any component is attached."""

    year: int = Field(default=2020, ge=1886, description="Model year")
    make: str = Field(default="Hyundai", min_length=1, description="Manufacturer")
    model: str = Field(default="Elantra GT", min_length=1, description="Model name")
    color: str = Field(default="White", description="Body color")
    vehicle_class: VehicleClass = Field(default=VehicleClass.CAR, description="Vehicle class")
