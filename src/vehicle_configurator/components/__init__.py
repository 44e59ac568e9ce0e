"""Component entities with guarded setters."""

from vehicle_configurator.components.engine import Engine
from vehicle_configurator.components.tires import Tires
from vehicle_configurator.components.window import Window
from vehicle_configurator.components.door import Door
from vehicle_configurator.components.seat import Seat

__all__ = [
    "Engine",
    "Tires",
    "Window",
    "Door",
    "Seat",
]
