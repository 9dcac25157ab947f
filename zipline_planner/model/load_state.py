"""LoadState and Environment - Per-run load and ambient inputs."""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class LoadState:
    """The rider hanging on the cable.

    Equipment weight (trolley, carabiners) only counts when a rider is
    present, so an empty line carries no point load at all.

    Attributes:
        rider_weight_kg: Rider mass in kg (>= 0, 0 = no rider)
        equipment_weight_kg: Trolley and hardware mass in kg (>= 0)
        load_position_m: Horizontal rider position from the start anchor
        drag_area_m2: Effective Cd * A of the rider in m²

    Example:
        load = LoadState(rider_weight_kg=120.0, equipment_weight_kg=2.0, load_position_m=50.0, drag_area_m2=0.5)
    """

    rider_weight_kg: float
    equipment_weight_kg: float
    load_position_m: float
    drag_area_m2: float

    def __post_init__(self) -> None:
        if self.rider_weight_kg < 0:
            raise ValueError(f"Rider weight cannot be negative, got {self.rider_weight_kg}kg")
        if self.equipment_weight_kg < 0:
            raise ValueError(f"Equipment weight cannot be negative, got {self.equipment_weight_kg}kg")
        if self.drag_area_m2 < 0:
            raise ValueError(f"Drag area cannot be negative, got {self.drag_area_m2}m²")
        if np.isnan(self.load_position_m):
            raise ValueError("Load position cannot be NaN")

    @property
    def total_load_kg(self) -> float:
        """Rider plus equipment, or 0 when there is no rider."""
        if self.rider_weight_kg > 0:
            return self.rider_weight_kg + self.equipment_weight_kg
        return 0.0


@dataclass(frozen=True)
class Environment:
    """Rigging tension and ambient temperature.

    Attributes:
        tension_kg: Nominal horizontal tension in kg-force, as specified by riggers
        temperature_c: Ambient temperature in °C
    """

    tension_kg: float
    temperature_c: float

    def __post_init__(self) -> None:
        if np.isnan(self.tension_kg) or np.isnan(self.temperature_c):
            raise ValueError(f"Environment cannot contain NaN (tension={self.tension_kg}, temp={self.temperature_c})")
