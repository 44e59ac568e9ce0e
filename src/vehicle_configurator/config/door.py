"""Door record."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

HingeType = Literal["standard", "gull-wing", "hatchback", "trunk", "scissor", "sliding", "bifold"]


class DoorSpec(BaseModel):
    """One door.

    ``window`` names the :class:`WindowSpec` carried by the door, if any.
    """

    name: str = Field(min_length=1, description="Unique door name within the vehicle")
    has_window: bool = Field(default=False, description="Whether the door carries a window")
    hinge_type: HingeType = Field(default="standard", description="Hinge style")
    is_locked: bool = Field(default=True, description="Whether the lock is engaged")
    position: float = Field(default=0, ge=0, le=100, description="Percent open (0 = closed)")
    window: str | None = Field(default=None, description="Name of the window mounted in this door")

    @model_validator(mode="after")
    def locked_door_is_closed(self) -> "DoorSpec":
        if self.is_locked and self.position != 0:
            raise ValueError("a locked door must be closed (position 0)")
        return self
