"""Build-sheet loader."""

from __future__ import annotations

from pathlib import Path

import yaml

from vehicle_configurator.config.vehicle import VehicleSpec

VEHICLES_DIR: Path = Path(__file__).resolve().parents[3] / "vehicles"
SAMPLE_CAR_PATH: Path = VEHICLES_DIR / "sample_car.yaml"


def load_vehicle_spec(path: Path | str | None = None) -> VehicleSpec:
    """Load a vehicle build sheet from a YAML file.

    Args:
        path: Build sheet to read.  Defaults to the bundled sample car.

    Returns:
        The validated :class:`VehicleSpec`.

    Raises:
        FileNotFoundError: If the file does not exist.
        pydantic.ValidationError: If any record is malformed.
    """
    sheet_path = Path(path) if path is not None else SAMPLE_CAR_PATH
    if not sheet_path.exists():
        raise FileNotFoundError(f"Build sheet not found: {sheet_path}")

    with open(sheet_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}

    return VehicleSpec.model_validate(data)
