"""Tire set entity.  Count is fixed at construction; size and pressure are guarded."""

from __future__ import annotations

from vehicle_configurator import reporting
from vehicle_configurator.catalogs import tires as tires_catalog
from vehicle_configurator.config.chassis import VehicleClass
from vehicle_configurator.config.tires import TiresSpec
from vehicle_configurator.models.outcome import Outcome
from vehicle_configurator.models.status import TiresStatus


class Tires:
    """A matched set of ``count`` tires.

    Parameters
    ----------
    vehicle_class : VehicleClass | str
        Class the set is built for; selects the size and pressure ranges.
    count : int
        Number of tires.  Checked against the catalog on attachment.
    size : float
        Rim diameter (inches).
    pressure : float
        Inflation pressure (psi).
    """

    def __init__(self, vehicle_class: VehicleClass | str, count: int, size: float, pressure: float) -> None:
        self.vehicle_class = VehicleClass.lookup(vehicle_class) or vehicle_class
        self._count = count
        self.size = size
        self.pressure = pressure

    @classmethod
    def from_spec(cls, spec: TiresSpec) -> Tires:
        return cls(spec.vehicle_class, spec.count, spec.size, spec.pressure)

    @property
    def count(self) -> int:
        return self._count

    def set_pressure(self, new_pressure: float) -> Outcome:
        if new_pressure == self.pressure:
            return reporting.no_change("pressure")

        if not tires_catalog.check_valid_pressure(self.vehicle_class, new_pressure):
            return reporting.not_valid("pressure", "vehicle type")

        self.pressure = new_pressure
        return Outcome.success()

    def set_size(self, new_size: float) -> Outcome:
        if new_size == self.size:
            return reporting.no_change("tire size")

        if not tires_catalog.check_valid_size(self.vehicle_class, new_size):
            return reporting.not_valid("tire size", "vehicle type")

        self.size = new_size
        return Outcome.success()

    def to_status(self) -> TiresStatus:
        return TiresStatus(
            vehicle_class=self.vehicle_class,
            count=self.count,
            size=self.size,
            pressure=self.pressure,
        )

    def __repr__(self) -> str:
        return f"Tires({self.vehicle_class!r}, count={self.count}, size={self.size}, pressure={self.pressure})"
