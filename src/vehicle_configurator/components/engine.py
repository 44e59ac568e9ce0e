"""Engine entity: a small state machine over fuel, size, transmission, gear and speed.

Configuration changes (fuel, size, transmission, fuel level) require the
engine to be off.  Gear and speed changes follow drivetrain rules:

  - with the engine off only ``park`` and ``neutral`` are reachable
  - speed can change only while running, in a driving gear, with fuel
  - ``park`` can only be entered at a standstill
  - ``reverse`` / ``drive`` can be entered while moving only from ``neutral``
  - leaving ``reverse`` while moving is only allowed into ``neutral``
  - the engine starts and stops only in ``park`` or ``neutral``

Fuel and transmission changes may invalidate dependent fields.  Those are
reset to the first allowed value and reported as adjustments on the
returned outcome rather than rejected.
"""

from __future__ import annotations

from vehicle_configurator import reporting
from vehicle_configurator.catalogs import engine as engine_catalog
from vehicle_configurator.catalogs.ranges import FUEL_LEVEL_RANGE
from vehicle_configurator.config.chassis import VehicleClass
from vehicle_configurator.config.engine import EngineSpec
from vehicle_configurator.models.outcome import Adjustment, Outcome
from vehicle_configurator.models.status import EngineStatus


class Engine:
    """Engine and drivetrain state.

    Parameters
    ----------
    vehicle_class : VehicleClass | str
        Class the engine is built for; selects the size range.
    fuel : str
        'gasoline', 'diesel', 'hybrid' or 'electric'.
    size : float
        Displacement (L), or battery capacity (kWh) for electric engines.
    transmission : str
        'automatic' or 'manual'.
    gear : str
        Current gear; defaults to 'park'.
    speed : float
        Current speed (mph).
    is_running : bool
        Whether the engine is on.
    fuel_level : float
        Percent full (0-100).
    """

    def __init__(
        self,
        vehicle_class: VehicleClass | str,
        fuel: str,
        size: float,
        transmission: str,
        gear: str = "park",
        speed: float = 0,
        is_running: bool = False,
        fuel_level: float = 0,
    ) -> None:
        self.vehicle_class = VehicleClass.lookup(vehicle_class) or vehicle_class
        self.fuel = fuel
        self.size = size
        self.transmission = transmission
        self.gear = gear
        self.speed = speed
        self.is_running = is_running
        self.fuel_level = fuel_level

    @classmethod
    def from_spec(cls, spec: EngineSpec) -> Engine:
        return cls(
            vehicle_class=spec.vehicle_class,
            fuel=spec.fuel,
            size=spec.size,
            transmission=spec.transmission,
            gear=spec.gear,
            speed=spec.speed,
            is_running=spec.is_running,
            fuel_level=spec.fuel_level,
        )

    # ------------------------------------------------------------------
    # Configuration (engine off)
    # ------------------------------------------------------------------

    def set_fuel(self, new_fuel: str) -> Outcome:
        if new_fuel == self.fuel:
            return reporting.no_change("fuel type")

        if self.is_running:
            return reporting.cannot_while("fuel type", "changed", "engine is on")

        if not engine_catalog.check_valid_fuel(self.transmission, new_fuel):
            return reporting.not_valid("fuel type", "transmission type")

        self.fuel = new_fuel
        adjustments = self._fit_size_to_fuel()
        return Outcome.success(adjustments)

    def set_size(self, new_size: float) -> Outcome:
        if new_size == self.size:
            return reporting.no_change("engine size")

        if self.is_running:
            return reporting.cannot_while("engine size", "changed", "engine is on")

        if not engine_catalog.check_valid_size(self.vehicle_class, new_size, self.fuel):
            return reporting.not_valid("engine size", "vehicle and fuel types")

        self.size = new_size
        return Outcome.success()

    def set_transmission(self, new_transmission: str) -> Outcome:
        if new_transmission == self.transmission:
            return reporting.no_change("transmission type")

        if self.is_running:
            return reporting.cannot_while("transmission", "changed", "engine is on")

        if new_transmission not in engine_catalog.TRANSMISSIONS:
            return reporting.not_valid("transmission type", "vehicle type")

        self.transmission = new_transmission
        adjustments: list[Adjustment] = []

        if not engine_catalog.check_valid_fuel(new_transmission, self.fuel):
            self.fuel = engine_catalog.get_allowed_engine_fuels(new_transmission)[0]
            adjustments.append(reporting.updated("fuel type", self.fuel, "transmission type"))

        adjustments.extend(self._fit_size_to_fuel())

        # Engine is off here, so it sits in park or neutral unless it was
        # built in a manual forward gear.
        if not engine_catalog.check_valid_gear(new_transmission, self.gear):
            self.gear = "park"
            adjustments.append(reporting.updated("gear", self.gear, "transmission type"))

        return Outcome.success(adjustments)

    def set_fuel_level(self, new_level: float) -> Outcome:
        if self.is_running:
            return reporting.must_be("engine", "off", "change fuel level")

        if new_level == self.fuel_level:
            return reporting.no_change("fuel level")

        if new_level not in FUEL_LEVEL_RANGE:
            return reporting.out_of_range("fuel level", FUEL_LEVEL_RANGE.minimum, FUEL_LEVEL_RANGE.maximum)

        self.fuel_level = new_level
        return Outcome.success()

    def _fit_size_to_fuel(self) -> list[Adjustment]:
        if engine_catalog.check_valid_size(self.vehicle_class, self.size, self.fuel):
            return []
        allowed = engine_catalog.get_allowed_engine_sizes(self.vehicle_class, self.fuel)
        if allowed.is_empty:
            return []
        self.size = allowed.minimum
        return [reporting.updated("engine size", self.size, "fuel type")]

    # ------------------------------------------------------------------
    # Drivetrain
    # ------------------------------------------------------------------

    def set_gear(self, new_gear: str) -> Outcome:
        if new_gear == self.gear:
            return reporting.no_change("engine gear")

        if not self.is_running and new_gear not in engine_catalog.STOPPED_GEARS:
            return reporting.cannot_while("gear", f"changed to {new_gear}", "engine is off")

        if not engine_catalog.check_valid_gear(self.transmission, new_gear):
            return reporting.not_valid("engine gear", "transmission type")

        moving = self.speed != 0
        if moving and new_gear == "park":
            return reporting.cannot_while("gear", f"changed to {new_gear}", "vehicle speed exceeds 0 mph")

        if moving and new_gear in ("reverse", "drive") and self.gear != "neutral":
            return reporting.cannot_while("gear", f"changed to {new_gear}", "vehicle speed exceeds 0 mph")

        if moving and self.gear == "reverse" and new_gear != "neutral":
            return reporting.cannot_while("gear", f"changed to {new_gear}", "vehicle speed exceeds 0 mph")

        self.gear = new_gear
        return Outcome.success()

    def set_speed(self, new_speed: float) -> Outcome:
        if new_speed == self.speed:
            return reporting.no_change("speed")

        if not self.is_running:
            return reporting.cannot_while("speed", "changed", "engine is off")

        if self.gear in engine_catalog.STOPPED_GEARS:
            return reporting.cannot_while("speed", "changed", f"engine is in {self.gear}")

        if self.fuel_level == 0:
            return reporting.cannot_while("speed", "changed", "engine has 0 fuel")

        if new_speed < 0:
            return reporting.not_valid("speed", "gear")

        self.speed = new_speed
        return Outcome.success()

    def set_is_running(self, new_status: bool) -> Outcome:
        if new_status == self.is_running:
            return reporting.already("engine", "on" if self.is_running else "off")

        if self.gear not in engine_catalog.STOPPED_GEARS:
            action = f"turn engine {'on' if new_status else 'off'}"
            return reporting.must_be("gear", 'in "park" or "neutral"', action)

        if not new_status and self.speed != 0:
            return reporting.cannot_while("engine", "turned off", "vehicle speed exceeds 0 mph")

        self.is_running = new_status
        return Outcome.success()

    def start(self) -> Outcome:
        return self.set_is_running(True)

    def stop(self) -> Outcome:
        return self.set_is_running(False)

    def to_status(self) -> EngineStatus:
        return EngineStatus(
            vehicle_class=self.vehicle_class,
            fuel=self.fuel,
            size=self.size,
            transmission=self.transmission,
            gear=self.gear,
            speed=self.speed,
            is_running=self.is_running,
            fuel_level=self.fuel_level,
        )

    def __repr__(self) -> str:
        return (
            f"Engine({self.vehicle_class!r}, fuel={self.fuel!r}, size={self.size}, "
            f"transmission={self.transmission!r}, gear={self.gear!r})"
        )
