"""Data model classes for zipline calculations.

- Geometry: Span and anchor heights
- CableSpec: Rope mass and breaking strengths
- LoadState: Rider, equipment, position and drag area
- Environment: Nominal tension and temperature
- ProfilePoint: One sample on a cable profile
- AnchorReaction: Reaction force at one anchor
- ZiplineResult: Complete engine output
"""

from zipline_planner.model.cable_spec import CableSpec
from zipline_planner.model.geometry import Geometry
from zipline_planner.model.load_state import Environment, LoadState
from zipline_planner.model.profile_point import ProfilePoint
from zipline_planner.model.zipline_result import AnchorReaction, ZiplineResult

__all__ = [
    "Geometry",
    "CableSpec",
    "LoadState",
    "Environment",
    "ProfilePoint",
    "AnchorReaction",
    "ZiplineResult",
]
