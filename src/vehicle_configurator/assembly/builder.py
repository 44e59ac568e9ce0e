"""Assemble a vehicle from a build sheet.

Attachment order matches the way a build sheet is collected:

  chassis → engine → tires → door/window links → doors → windows → seats

Each step's outcome is kept.  A rejected step does not stop later steps,
so one report shows everything wrong with a sheet.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from vehicle_configurator import reporting
from vehicle_configurator.assembly.chassis import VehicleChassis
from vehicle_configurator.components.door import Door
from vehicle_configurator.components.engine import Engine
from vehicle_configurator.components.seat import Seat
from vehicle_configurator.components.tires import Tires
from vehicle_configurator.components.window import Window
from vehicle_configurator.config.vehicle import VehicleSpec
from vehicle_configurator.models.outcome import Outcome

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssemblyResult:
    """The assembled vehicle plus the outcome of every attachment step."""

    vehicle: VehicleChassis
    steps: list[tuple[str, Outcome]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(outcome.ok for _, outcome in self.steps)

    @property
    def failures(self) -> list[tuple[str, Outcome]]:
        return [(step, outcome) for step, outcome in self.steps if not outcome.ok]


def assemble_vehicle(spec: VehicleSpec) -> AssemblyResult:
    """Build every component from ``spec`` and attach it to a new chassis."""
    vehicle = VehicleChassis.from_spec(spec.chassis)
    steps: list[tuple[str, Outcome]] = []

    steps.append(("engine", vehicle.set_engine(Engine.from_spec(spec.engine))))
    steps.append(("tires", vehicle.set_tires(Tires.from_spec(spec.tires))))

    windows = [Window.from_spec(w) for w in spec.windows]
    windows_by_name = {w.name: w for w in windows}

    doors: list[Door] = []
    for door_spec in spec.doors:
        door = Door.from_spec(door_spec)
        if door_spec.window is not None:
            window = windows_by_name.get(door_spec.window)
            outcome = door.set_window(window) if window is not None else reporting.not_found("window")
            steps.append((f"door {door.name} window", outcome))
        doors.append(door)

    steps.append(("doors", vehicle.add_all_doors(doors)))
    steps.append(("windows", vehicle.add_all_windows(windows)))
    steps.append(("seats", vehicle.add_all_seats([Seat.from_spec(s) for s in spec.seats])))

    result = AssemblyResult(vehicle=vehicle, steps=steps)
    if result.ok:
        logger.info("assembled %r", vehicle)
    else:
        logger.warning(
            "assembled %r with %d rejected step(s): %s",
            vehicle,
            len(result.failures),
            ", ".join(step for step, _ in result.failures),
        )
    return result
