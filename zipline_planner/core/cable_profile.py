"""Static cable profile under self-weight and a point load.

The cable height is the superposition of three terms:

1. Straight chord between the anchors:
       y_chord = h_start - (x / L) * drop
2. Distributed self-weight sag (parabolic approximation of the catenary):
       y_rope = q * x * (L - x) / (2 * T)
3. Point load sag (triangular deflection, peak under the load at a):
       y_load = P * b * x / (T * L)          for x <= a
       y_load = P * a * (L - x) / (T * L)    for x >  a
   with b = L - a.

    y = y_chord - y_rope - y_load

T is the horizontal tension in newtons, q the rope weight per meter and P
the point load, both in newtons.
"""

from enum import Enum
from math import sqrt
from typing import Optional

import numpy as np

from zipline_planner.model.geometry import Geometry
from zipline_planner.model.profile_point import ProfilePoint


class LoadPositionPolicy(Enum):
    """Where the point load sits while a profile is sampled."""

    FIXED = "fixed"  # Load pinned at the configured position
    TRAVELING = "traveling"  # Load co-located with each sample


class CableProfileSolver:
    """Computes cable heights for one geometry, tension and load.

    Example:
        solver = CableProfileSolver(
            geometry=geometry,
            tension_newtons=7848.0,
            rope_weight_n_per_m=8.44,
            point_load_newtons=1196.8,
            load_position_m=50.0,
        )
        static = solver.sample(num_points=100, policy=LoadPositionPolicy.FIXED)
    """

    def __init__(
        self,
        geometry: Geometry,
        tension_newtons: float,
        rope_weight_n_per_m: float,
        point_load_newtons: float,
        load_position_m: float,
    ) -> None:
        """Initialize solver.

        Args:
            geometry: Span and anchor heights
            tension_newtons: Temperature-corrected horizontal tension (> 0)
            rope_weight_n_per_m: Distributed cable weight q in N/m
            point_load_newtons: Rider plus equipment weight P in N
            load_position_m: Fixed load position for FIXED sampling
        """
        self.geometry = geometry
        self.tension_newtons = tension_newtons
        self.rope_weight_n_per_m = rope_weight_n_per_m
        self.point_load_newtons = point_load_newtons
        self.load_position_m = load_position_m

    def rope_sag_at(self, x: float) -> float:
        """Sag from the cable's own weight at position x."""
        span = self.geometry.span_m
        return (self.rope_weight_n_per_m * x * (span - x)) / (2 * self.tension_newtons)

    def load_sag_at(self, x: float, load_position_m: float) -> float:
        """Sag from the point load at position x, with the load at load_position_m."""
        if self.point_load_newtons <= 0:
            return 0.0

        span = self.geometry.span_m
        a = load_position_m
        b = span - load_position_m
        if x <= a:
            return (self.point_load_newtons * b * x) / (self.tension_newtons * span)
        return (self.point_load_newtons * a * (span - x)) / (self.tension_newtons * span)

    def height_at(self, x: float, load_position_m: Optional[float] = None) -> float:
        """Cable height at horizontal position x.

        Args:
            x: Horizontal position from start anchor in meters
            load_position_m: Point load position; defaults to the fixed load position

        Returns:
            Cable height in meters.
        """
        if load_position_m is None:
            load_position_m = self.load_position_m
        y_chord = self.geometry.chord_height_at(x=x)
        return y_chord - self.rope_sag_at(x=x) - self.load_sag_at(x=x, load_position_m=load_position_m)

    def sample_positions(self, num_points: int) -> np.ndarray:
        """Uniform sample positions from 0 to span inclusive (num_points + 1 values)."""
        return np.linspace(0.0, self.geometry.span_m, num_points + 1)

    def sample(self, num_points: int, policy: LoadPositionPolicy) -> list[ProfilePoint]:
        """Sample the profile uniformly across the span.

        Args:
            num_points: Number of segments (returns num_points + 1 samples)
            policy: FIXED keeps the load at load_position_m, TRAVELING moves
                it to each sample position

        Returns:
            ProfilePoints ordered by increasing x.
        """
        points = []
        for x in self.sample_positions(num_points=num_points):
            x = float(x)
            load_x = x if policy is LoadPositionPolicy.TRAVELING else self.load_position_m
            points.append(ProfilePoint(x=x, y=self.height_at(x=x, load_position_m=load_x)))
        return points

    @staticmethod
    def arc_length(points: list[ProfilePoint]) -> float:
        """Polyline length through the points (sum of segment lengths)."""
        length = 0.0
        for prev, curr in zip(points, points[1:]):
            dx = curr.x - prev.x
            dy = curr.y - prev.y
            length += sqrt(dx * dx + dy * dy)
        return length
