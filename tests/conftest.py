"""Shared test fixtures: the sample 2020 Hyundai Elantra GT, piece by piece."""

from __future__ import annotations

import pytest

from vehicle_configurator.assembly import VehicleChassis
from vehicle_configurator.components import Door, Engine, Seat, Tires, Window


@pytest.fixture
def engine() -> Engine:
    return Engine("car", "electric", 60, "automatic")


@pytest.fixture
def running_engine() -> Engine:
    """Fuelled, running, in drive, stationary."""
    e = Engine("car", "gasoline", 2.0, "automatic", fuel_level=80)
    assert e.start()
    assert e.set_gear("drive")
    return e


@pytest.fixture
def tires() -> Tires:
    return Tires("car", 4, 17, 34)


@pytest.fixture
def windows() -> list[Window]:
    return [
        Window("windshield"),
        Window("driver", True, True, "electric"),
        Window("passenger", True, True, "electric"),
        Window("rear-driver", True, True, "manual"),
        Window("rear-passenger", True, True, "manual"),
    ]


@pytest.fixture
def doors(windows: list[Window]) -> list[Door]:
    by_name = {w.name: w for w in windows}
    result = [Door("driver"), Door("passenger"), Door("rear-driver"), Door("rear-passenger"), Door("trunk", hinge_type="trunk")]
    for door in result[:4]:
        assert door.set_window(by_name[door.name])
    return result


@pytest.fixture
def seats() -> list[Seat]:
    return [
        Seat("driver", "leather", "grey", True, "electric", has_heat=True, has_cool=True),
        Seat("passenger", "leather", "grey", True, "manual", has_heat=True),
        Seat("rear-driver", "cloth", "black"),
        Seat("rear-passenger", "cloth", "black"),
        Seat("rear-middle", "cloth", "black"),
    ]


@pytest.fixture
def vehicle(
    engine: Engine,
    tires: Tires,
    doors: list[Door],
    windows: list[Window],
    seats: list[Seat],
) -> VehicleChassis:
    v = VehicleChassis(2020, "Hyundai", "Elantra GT", "White", "car")
    assert v.set_engine(engine)
    assert v.set_tires(tires)
    assert v.add_all_doors(doors)
    assert v.add_all_windows(windows)
    assert v.add_all_seats(seats)
    return v
