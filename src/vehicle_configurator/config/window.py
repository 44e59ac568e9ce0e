"""Window record."""

from typing import Literal

from pydantic import BaseModel, Field

WindowOperation = Literal["none", "electric", "manual"]


class WindowSpec(BaseModel):
    """One window.  Door windows share their name with the door they sit in."""

    name: str = Field(min_length=1, description="Unique window name within the vehicle")
    in_door: bool = Field(default=False, description="Whether the window is mounted in a door")
    is_operable: bool = Field(default=False, description="Whether the window can be opened")
    operation_type: WindowOperation = Field(default="none", description="How the window is operated")
    position: float = Field(default=0, ge=0, le=100, description="Percent open")
