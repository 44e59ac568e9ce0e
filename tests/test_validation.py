"""Pydantic validation tests for construction records."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from vehicle_configurator.config import (
    ChassisSpec,
    DoorSpec,
    EngineSpec,
    SeatSpec,
    TiresSpec,
    VehicleClass,
    WindowSpec,
)


class TestChassisSpec:

    def test_defaults_are_valid(self):
        assert ChassisSpec().vehicle_class is VehicleClass.CAR

    def test_unknown_class_rejected(self):
        with pytest.raises(ValidationError):
            ChassisSpec(vehicle_class="spaceship")

    def test_hyphenated_class(self):
        assert ChassisSpec(vehicle_class="semi-truck").vehicle_class is VehicleClass.SEMI_TRUCK


class TestEngineSpec:

    def test_unknown_fuel_rejected(self):
        with pytest.raises(ValidationError):
            EngineSpec(fuel="coal")

    def test_negative_speed_rejected(self):
        with pytest.raises(ValidationError):
            EngineSpec(speed=-1)

    def test_fuel_level_above_max_rejected(self):
        with pytest.raises(ValidationError):
            EngineSpec(fuel_level=101)

    def test_zero_size_rejected(self):
        with pytest.raises(ValidationError):
            EngineSpec(size=0)


class TestTiresSpec:

    def test_zero_count_rejected(self):
        with pytest.raises(ValidationError):
            TiresSpec(count=0)

    def test_class_range_not_checked_here(self):
        """Catalog limits apply on attachment, not in the record."""
        assert TiresSpec(vehicle_class="car", size=25).size == 25


class TestDoorSpec:

    def test_locked_open_door_rejected(self):
        with pytest.raises(ValidationError):
            DoorSpec(name="driver", position=20)

    def test_unlocked_open_door(self):
        assert DoorSpec(name="driver", is_locked=False, position=20).position == 20

    def test_unknown_hinge_rejected(self):
        with pytest.raises(ValidationError):
            DoorSpec(name="driver", hinge_type="rubber")

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            DoorSpec(name="")


class TestWindowSpec:

    def test_position_above_max_rejected(self):
        with pytest.raises(ValidationError):
            WindowSpec(name="w", position=101)


class TestSeatSpec:

    def test_both_climate_settings_rejected(self):
        with pytest.raises(ValidationError):
            SeatSpec(name="s", has_heat=True, has_cool=True, heat_setting=1, cool_setting=1)

    def test_heat_without_capability_rejected(self):
        with pytest.raises(ValidationError):
            SeatSpec(name="s", heat_setting=1)

    def test_setting_above_max_rejected(self):
        with pytest.raises(ValidationError):
            SeatSpec(name="s", has_heat=True, heat_setting=4)

    def test_edge_valid_values(self):
        s = SeatSpec(name="s", has_cool=True, cool_setting=3, position=100)
        assert s.cool_setting == 3
