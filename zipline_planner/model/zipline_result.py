"""ZiplineResult - Immutable output of one engine run.

Holds the static profile, the travel profile with rider speeds, anchor
reactions and the maximum cable tension. Everything here is derived from
the inputs of a single calculate_zipline_curve() call; a new input set
always produces a new result.
"""

from dataclasses import dataclass

from zipline_planner.constants import PhysicsConfig
from zipline_planner.model.geometry import Geometry
from zipline_planner.model.profile_point import ProfilePoint


@dataclass(frozen=True)
class AnchorReaction:
    """Force an anchor exerts on the cable, in kg-force.

    Attributes:
        horizontal_kg: Horizontal component (equal at both anchors)
        vertical_kg: Vertical component, T * tan(end angle) / g
    """

    horizontal_kg: float
    vertical_kg: float

    def to_dict(self) -> dict:
        return {"horizontal": self.horizontal_kg, "vertical": self.vertical_kg}


@dataclass(frozen=True)
class ZiplineResult:
    """Engine output consumed by charts and safety checks.

    Attributes:
        geometry: Geometry the result was computed for
        points: Static profile with the load pinned at its configured position
        travel_profile: Profile with the load co-located with each sample,
            carrying the rider speed in km/h
        reactions_start: Reaction at the start anchor
        reactions_end: Reaction at the end anchor
        max_tension_newtons: Maximum cable tension (start anchor side)
        cable_length_m: Polyline length of the static profile
    """

    geometry: Geometry
    points: tuple[ProfilePoint, ...]
    travel_profile: tuple[ProfilePoint, ...]
    reactions_start: AnchorReaction
    reactions_end: AnchorReaction
    max_tension_newtons: float
    cable_length_m: float

    @property
    def max_tension_kg(self) -> float:
        return self.max_tension_newtons / PhysicsConfig.GRAVITY

    @property
    def speeds_kmh(self) -> list[float]:
        return [p.speed_kmh or 0.0 for p in self.travel_profile]

    @property
    def max_speed_kmh(self) -> float:
        return max(self.speeds_kmh, default=0.0)

    @property
    def finish_speed_kmh(self) -> float:
        """Speed on arrival at the end anchor."""
        if not self.travel_profile:
            return 0.0
        return self.travel_profile[-1].speed_kmh or 0.0

    @property
    def lowest_point(self) -> ProfilePoint:
        """Lowest sample of the static profile."""
        return min(self.points, key=lambda p: p.y)

    @property
    def max_sag_m(self) -> float:
        """Distance from the higher anchor down to the lowest cable point."""
        top = max(self.geometry.start_height_m, self.geometry.end_height_m)
        return top - self.lowest_point.y

    def speed_at(self, x: float) -> float:
        """Speed at the travel sample nearest to horizontal position x.

        Args:
            x: Horizontal position in meters

        Returns:
            Speed in km/h.
        """
        nearest = min(self.travel_profile, key=lambda p: abs(p.x - x))
        return nearest.speed_kmh or 0.0

    def to_dict(self) -> dict:
        """Serialize to plain types for JSON export."""
        return {
            "points": [p.to_dict() for p in self.points],
            "travelProfile": [p.to_dict() for p in self.travel_profile],
            "reactions": {
                "start": self.reactions_start.to_dict(),
                "end": self.reactions_end.to_dict(),
            },
            "maxTensionNewtons": self.max_tension_newtons,
            "cableLength": self.cable_length_m,
        }

    def __repr__(self) -> str:
        return (
            f"ZiplineResult(span={self.geometry.span_m:.0f}m, samples={len(self.points)}, "
            f"length={self.cable_length_m:.2f}m, max_tension={self.max_tension_kg:.0f}kg)"
        )
