"""Tests for assembly/chassis.py: attachment and name-keyed routing."""

from __future__ import annotations

import logging

import pytest

from vehicle_configurator.assembly import VehicleChassis
from vehicle_configurator.catalogs import chassis as chassis_catalog
from vehicle_configurator.components import Door, Engine, Seat, Tires, Window
from vehicle_configurator.config import VehicleClass
from vehicle_configurator.models import ErrorKind


def _doors(n: int) -> list[Door]:
    return [Door(f"door-{i}") for i in range(n)]


# ═══════════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════════

class TestConstruction:

    def test_class_normalised(self):
        v = VehicleChassis(2021, "Ford", "F-150", "Blue", "TRUCK")
        assert v.vehicle_class is VehicleClass.TRUCK

    def test_unknown_class_raises(self):
        with pytest.raises(ValueError):
            VehicleChassis(2021, "Acme", "Rocket", "Red", "spaceship")

    def test_empty_vehicle_lookups(self):
        v = VehicleChassis(2021, "Ford", "F-150", "Blue", "truck")
        assert v.get_door_names() == []
        assert v.get_door_details("driver") is None
        assert v.start_engine().kind is ErrorKind.NOT_FOUND
        assert v.status().engine is None


# ═══════════════════════════════════════════════════════════════════════════
# Engine & tires attachment
# ═══════════════════════════════════════════════════════════════════════════

class TestComponentAttachment:

    @pytest.fixture
    def car(self) -> VehicleChassis:
        return VehicleChassis(2020, "Hyundai", "Elantra GT", "White", "car")

    def test_wrong_instance(self, car: VehicleChassis, tires: Tires):
        assert car.set_engine(tires).kind is ErrorKind.INVALID_INSTANCE
        assert car.engine is None

    def test_invalid_engine_config(self, car: VehicleChassis):
        outcome = car.set_engine(Engine("car", "electric", 5, "automatic"))
        assert outcome.kind is ErrorKind.INVALID_CONFIG
        assert car.engine is None

    def test_engine_for_other_class(self, car: VehicleChassis):
        outcome = car.set_engine(Engine("bus", "diesel", 9.0, "automatic"))
        assert outcome.kind is ErrorKind.INVALID_CONFIG

    def test_replace_engine(self, car: VehicleChassis, engine: Engine):
        assert car.set_engine(engine)
        replacement = Engine(VehicleClass.CAR, "diesel", 2.2, "manual")
        assert car.set_engine(replacement)
        assert car.get_engine_details() is replacement

    def test_invalid_tire_count(self, car: VehicleChassis):
        assert car.set_tires(Tires("car", 6, 17, 34)).kind is ErrorKind.INVALID_CONFIG
        assert car.get_tires_details() is None

    def test_tires(self, car: VehicleChassis, tires: Tires):
        assert car.set_tires(tires)
        assert car.tires is tires


# ═══════════════════════════════════════════════════════════════════════════
# Collection attachment
# ═══════════════════════════════════════════════════════════════════════════

class TestCollectionAttachment:

    @pytest.mark.parametrize("vehicle_class", [c for c in VehicleClass])
    def test_door_count_round_trip(self, vehicle_class):
        allowed = chassis_catalog.get_allowed_number_doors(vehicle_class)
        v = VehicleChassis(2020, "Make", "Model", "Black", vehicle_class)
        for n in range(int(allowed.minimum), int(allowed.maximum) + 1):
            assert v.add_all_doors(_doors(n))
            assert len(v.get_door_names()) == n

        previous = v.get_door_names()
        for n in (int(allowed.maximum) + 1, int(allowed.minimum) - 1):
            if n < 0:
                continue
            outcome = v.add_all_doors(_doors(n))
            assert outcome.kind is ErrorKind.INVALID_CONFIG
            assert v.get_door_names() == previous

    def test_wrong_element_type_rejects_batch(self, vehicle: VehicleChassis):
        before = vehicle.get_seat_names()
        outcome = vehicle.add_all_seats([Seat("a", "cloth", "red"), Window("b"), Seat("c", "cloth", "red")])
        assert outcome.kind is ErrorKind.INVALID_INSTANCE
        assert vehicle.get_seat_names() == before

    def test_duplicate_names_rejected(self):
        v = VehicleChassis(2020, "Make", "Model", "Black", "car")
        outcome = v.add_all_doors([Door("driver"), Door("driver")])
        assert outcome.kind is ErrorKind.INVALID_CONFIG
        assert v.get_door_names() == []

    def test_non_iterable_rejected(self):
        v = VehicleChassis(2020, "Make", "Model", "Black", "car")
        assert v.add_all_windows(Window("w")).kind is ErrorKind.INVALID_INSTANCE

    def test_window_count_checked(self):
        v = VehicleChassis(2020, "Make", "Model", "Black", "car")
        assert v.add_all_windows([Window(f"w{i}") for i in range(7)]).kind is ErrorKind.INVALID_CONFIG


# ═══════════════════════════════════════════════════════════════════════════
# Name-keyed routing
# ═══════════════════════════════════════════════════════════════════════════

class TestRouting:

    def test_names_in_attachment_order(self, vehicle: VehicleChassis):
        assert vehicle.get_door_names() == ["driver", "passenger", "rear-driver", "rear-passenger", "trunk"]
        assert vehicle.get_window_names()[0] == "windshield"

    def test_not_found(self, vehicle: VehicleChassis):
        assert vehicle.set_door_position("sunroof", 10).kind is ErrorKind.NOT_FOUND
        assert vehicle.set_window_position("sunroof", 10).kind is ErrorKind.NOT_FOUND
        assert vehicle.set_seat_position("jump", 10).kind is ErrorKind.NOT_FOUND
        assert vehicle.set_seat_heat_setting("jump", 1).kind is ErrorKind.NOT_FOUND
        assert vehicle.set_seat_cool_setting("jump", 1).kind is ErrorKind.NOT_FOUND
        assert vehicle.lock_door("jump").kind is ErrorKind.NOT_FOUND
        assert vehicle.unlock_door("jump").kind is ErrorKind.NOT_FOUND
        assert vehicle.get_window_details("sunroof") is None
        assert vehicle.get_seat_details("jump") is None

    def test_door_window_moves_through_door(self, vehicle: VehicleChassis):
        assert vehicle.set_window_position("driver", 60)
        assert vehicle.get_window_details("driver").position == 60
        assert vehicle.get_door_window_details("driver").position == 60

    def test_in_door_window_without_door(self):
        v = VehicleChassis(2020, "Make", "Model", "Black", "car")
        v.add_all_windows([Window("a"), Window("b"), Window("orphan", True, True)])
        assert v.set_window_position("orphan", 50).kind is ErrorKind.NOT_FOUND

    def test_door_without_window(self, vehicle: VehicleChassis):
        assert vehicle.get_door_window_details("trunk") is None

    def test_door_follows_replaced_windows(self, vehicle: VehicleChassis):
        replacement = [
            Window("windshield"),
            Window("driver", True, True, "electric"),
            Window("passenger", True, True, "electric"),
        ]
        assert vehicle.add_all_windows(replacement)
        assert vehicle.get_door_window_details("driver") is replacement[1]
        assert vehicle.set_window_position("driver", 60)
        assert vehicle.get_window_details("driver").position == 60

    def test_door_follows_replaced_doors(self, vehicle: VehicleChassis):
        stale = Door("driver")
        stale.set_window(Window("driver", True, True, "electric"))
        assert vehicle.add_all_doors([stale, Door("trunk", hinge_type="trunk")])
        assert stale.window is vehicle.get_window_details("driver")
        assert vehicle.set_window_position("driver", 40)
        assert vehicle.get_window_details("driver").position == 40

    def test_unregistered_door_window_hidden(self):
        v = VehicleChassis(2020, "Make", "Model", "Black", "car")
        door = Door("driver")
        door.set_window(Window("driver", True, True, "electric"))
        assert v.add_all_doors([door, Door("passenger")])
        assert v.add_all_windows([Window(f"w{i}") for i in range(7)]).kind is ErrorKind.INVALID_CONFIG
        assert v.get_door_window_details("driver") is None
        assert v.set_window_position("driver", 30).kind is ErrorKind.NOT_FOUND

    def test_fixed_window(self, vehicle: VehicleChassis):
        assert vehicle.set_window_position("windshield", 10).kind is ErrorKind.NOT_OPERABLE

    def test_door_lock_flow(self, vehicle: VehicleChassis):
        assert vehicle.set_door_position("driver", 50).kind is ErrorKind.CANNOT_WHILE
        assert vehicle.unlock_door("driver")
        assert vehicle.set_door_position("driver", 50)
        assert vehicle.lock_door("driver").kind is ErrorKind.CANNOT_WHILE
        assert vehicle.get_door_details("driver").position == 50

    def test_seat_climate_routing(self, vehicle: VehicleChassis):
        assert vehicle.set_seat_heat_setting("driver", 2)
        assert vehicle.set_seat_cool_setting("driver", 1).kind is ErrorKind.CANNOT_WHILE
        assert vehicle.set_seat_cool_setting("passenger", 1).kind is ErrorKind.DOES_NOT_HAVE
        assert vehicle.set_seat_position("driver", 20)
        assert vehicle.get_seat_details("driver").position == 20

    def test_engine_routing(self, vehicle: VehicleChassis):
        assert vehicle.start_engine()
        assert vehicle.get_engine_details().is_running
        assert vehicle.start_engine().kind is ErrorKind.NO_CHANGE
        assert vehicle.stop_engine()


# ═══════════════════════════════════════════════════════════════════════════
# Batch operations
# ═══════════════════════════════════════════════════════════════════════════

class TestBatchOperations:

    def test_open_and_close_all_windows(self, vehicle: VehicleChassis):
        assert vehicle.open_all_windows() == 4
        assert vehicle.get_window_details("windshield").position == 0
        assert all(vehicle.get_window_details(n).position == 100 for n in ("driver", "passenger"))
        assert vehicle.open_all_windows() == 0
        assert vehicle.close_all_windows() == 4

    def test_unlock_and_lock_all(self, vehicle: VehicleChassis):
        assert vehicle.unlock_all_doors() == 5
        vehicle.set_door_position("trunk", 100)
        assert vehicle.lock_all_doors() == 4
        assert not vehicle.get_door_details("trunk").is_locked
        assert vehicle.get_door_details("driver").is_locked

    def test_lock_all_skips_open_doors_quietly(self, vehicle: VehicleChassis, caplog):
        vehicle.unlock_all_doors()
        vehicle.set_door_position("trunk", 100)
        caplog.set_level(logging.DEBUG, logger="vehicle_configurator")
        assert vehicle.lock_all_doors() == 4
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]

    def test_unlock_all_skips_unlocked_doors(self, vehicle: VehicleChassis, caplog):
        vehicle.unlock_door("driver")
        caplog.set_level(logging.DEBUG, logger="vehicle_configurator")
        assert vehicle.unlock_all_doors() == 4
        assert not [r for r in caplog.records if "already" in r.getMessage()]


# ═══════════════════════════════════════════════════════════════════════════
# Read-back
# ═══════════════════════════════════════════════════════════════════════════

class TestStatus:

    def test_status_snapshot(self, vehicle: VehicleChassis):
        status = vehicle.status()
        assert status.vehicle_class is VehicleClass.CAR
        assert status.engine.fuel == "electric"
        assert status.tires.count == 4
        assert [d.window for d in status.doors] == ["driver", "passenger", "rear-driver", "rear-passenger", None]
        assert len(status.seats) == 5

    def test_status_is_detached_copy(self, vehicle: VehicleChassis):
        status = vehicle.status()
        vehicle.unlock_door("driver")
        assert status.doors[0].is_locked

    def test_status_with_upper_case_class_strings(self):
        v = VehicleChassis(2021, "Ford", "F-150", "Blue", "TRUCK")
        assert v.set_engine(Engine("TRUCK", "diesel", 3.0, "automatic"))
        assert v.set_tires(Tires("TRUCK", 4, 17, 35))
        status = v.status()
        assert status.engine.vehicle_class is VehicleClass.TRUCK
        assert status.tires.vehicle_class is VehicleClass.TRUCK
