"""Geometry - Anchor layout of a single zipline span.

Heights are elevations of the two anchor points in meters. The end height
is unconstrained (it may be negative relative to the chosen datum).
"""

from dataclasses import dataclass

import numpy as np

from zipline_planner.exceptions import InvalidGeometryError


@dataclass(frozen=True)
class Geometry:
    """Horizontal span and anchor heights of a zipline.

    Attributes:
        span_m: Horizontal distance between anchors in meters (> 0)
        start_height_m: Elevation of the start anchor in meters
        end_height_m: Elevation of the end anchor in meters

    Example:
        geometry = Geometry(span_m=100.0, start_height_m=15.0, end_height_m=11.0)
    """

    span_m: float
    start_height_m: float
    end_height_m: float

    def __post_init__(self) -> None:
        if not self.span_m > 0:
            raise InvalidGeometryError(f"Span must be positive, got {self.span_m}m")
        if np.isnan(self.start_height_m) or np.isnan(self.end_height_m):
            raise InvalidGeometryError(
                f"Anchor heights cannot be NaN (start={self.start_height_m}, end={self.end_height_m})"
            )

    @classmethod
    def from_drop_percent(cls, span_m: float, start_height_m: float, drop_pct: float) -> "Geometry":
        """Create geometry with the end anchor given as a percentage drop over the span.

        Args:
            span_m: Horizontal span in meters
            start_height_m: Start anchor elevation in meters
            drop_pct: Drop as percentage of span (4.0 = 4 m per 100 m)

        Returns:
            Geometry with end_height_m = start_height_m - span_m * drop_pct / 100.
        """
        return cls(
            span_m=span_m,
            start_height_m=start_height_m,
            end_height_m=start_height_m - span_m * drop_pct / 100,
        )

    @property
    def drop_m(self) -> float:
        """Height difference start - end (positive when descending)."""
        return self.start_height_m - self.end_height_m

    @property
    def slope(self) -> float:
        """Chord slope drop / span (positive when descending)."""
        return self.drop_m / self.span_m

    def chord_height_at(self, x: float) -> float:
        """Height of the straight unloaded chord at horizontal position x."""
        return self.start_height_m - (x / self.span_m) * self.drop_m

    def contains(self, x: float) -> bool:
        return 0 <= x <= self.span_m
