"""Seat entity.  Heating and cooling are mutually exclusive."""

from __future__ import annotations

from vehicle_configurator import reporting
from vehicle_configurator.catalogs.ranges import CLIMATE_SETTINGS, POSITION_RANGE
from vehicle_configurator.config.seat import SeatSpec
from vehicle_configurator.models.outcome import Outcome
from vehicle_configurator.models.status import SeatStatus


class Seat:
    def __init__(
        self,
        name: str,
        material: str,
        color: str,
        is_operable: bool = False,
        operation_type: str = "none",
        has_heat: bool = False,
        has_cool: bool = False,
        position: float = 0,
        heat_setting: int = 0,
        cool_setting: int = 0,
    ) -> None:
        self.name = name
        self.material = material
        self.color = color
        self.is_operable = is_operable
        self.operation_type = operation_type
        self.has_heat = has_heat
        self.has_cool = has_cool
        self.position = position
        self.heat_setting = heat_setting
        self.cool_setting = cool_setting

    @classmethod
    def from_spec(cls, spec: SeatSpec) -> Seat:
        return cls(
            name=spec.name,
            material=spec.material,
            color=spec.color,
            is_operable=spec.is_operable,
            operation_type=spec.operation_type,
            has_heat=spec.has_heat,
            has_cool=spec.has_cool,
            position=spec.position,
            heat_setting=spec.heat_setting,
            cool_setting=spec.cool_setting,
        )

    def set_position(self, new_position: float) -> Outcome:
        """Recline the seat to ``new_position`` percent."""
        if not self.is_operable:
            return reporting.not_operable("seat")

        if new_position == self.position:
            return reporting.no_change("position")

        if new_position not in POSITION_RANGE:
            return reporting.out_of_range("seat position", POSITION_RANGE.minimum, POSITION_RANGE.maximum)

        self.position = new_position
        return Outcome.success()

    def set_heat_setting(self, new_setting: int) -> Outcome:
        if not self.has_heat:
            return reporting.does_not_have("seat", "heating")

        if self.cool_setting != 0:
            return reporting.cannot_while("seat heating", "turned on", "seat cooling is already on")

        if new_setting == self.heat_setting:
            return reporting.no_change("heat setting")

        if new_setting not in CLIMATE_SETTINGS:
            return reporting.out_of_range("heat setting", CLIMATE_SETTINGS[0], CLIMATE_SETTINGS[-1], unit="")

        self.heat_setting = new_setting
        return Outcome.success()

    def set_cool_setting(self, new_setting: int) -> Outcome:
        if not self.has_cool:
            return reporting.does_not_have("seat", "cooling")

        if self.heat_setting != 0:
            return reporting.cannot_while("seat cooling", "turned on", "seat heating is already on")

        if new_setting == self.cool_setting:
            return reporting.no_change("cool setting")

        if new_setting not in CLIMATE_SETTINGS:
            return reporting.out_of_range("cool setting", CLIMATE_SETTINGS[0], CLIMATE_SETTINGS[-1], unit="")

        self.cool_setting = new_setting
        return Outcome.success()

    def to_status(self) -> SeatStatus:
        return SeatStatus(
            name=self.name,
            material=self.material,
            color=self.color,
            is_operable=self.is_operable,
            operation_type=self.operation_type,
            position=self.position,
            has_heat=self.has_heat,
            has_cool=self.has_cool,
            heat_setting=self.heat_setting,
            cool_setting=self.cool_setting,
        )

    def __repr__(self) -> str:
        return f"Seat(name={self.name!r}, position={self.position})"
