"""Anchor reaction forces from the cable end slopes.

End angles combine chord slope, self-weight and point load contributions:

    angle_start = atan(slope + q*L/(2T) + P*(L - a)/(T*L))
    angle_end   = atan(slope - q*L/(2T) - P*a/(T*L))

Only vertical loads act on the cable, so the horizontal component T is the
same at both anchors. Vertical reaction = T * tan(angle). Maximum tension
is evaluated at the start anchor: T / cos(angle_start).
"""

from dataclasses import dataclass
from math import atan, cos, tan

from zipline_planner.constants import PhysicsConfig
from zipline_planner.model.zipline_result import AnchorReaction


@dataclass(frozen=True)
class AnchorReactions:
    """Reactions at both anchors plus the maximum cable tension.

    Attributes:
        start: Reaction at the start anchor (kg-force)
        end: Reaction at the end anchor (kg-force)
        angle_start_rad: Cable angle at the start anchor
        angle_end_rad: Cable angle at the end anchor
        max_tension_newtons: T / cos(angle_start)
    """

    start: AnchorReaction
    end: AnchorReaction
    angle_start_rad: float
    angle_end_rad: float
    max_tension_newtons: float


class AnchorReactionSolver:
    """Static methods for anchor reactions."""

    @staticmethod
    def solve(
        tension_newtons: float,
        slope: float,
        rope_weight_n_per_m: float,
        span_m: float,
        point_load_newtons: float,
        load_position_m: float,
    ) -> AnchorReactions:
        """Compute anchor reactions for a loaded span.

        Args:
            tension_newtons: Temperature-corrected horizontal tension
            slope: Chord slope drop / span
            rope_weight_n_per_m: Distributed cable weight q in N/m
            span_m: Horizontal span in meters
            point_load_newtons: Point load P in newtons
            load_position_m: Point load position from the start anchor

        Returns:
            AnchorReactions with forces in kg-force.
        """
        g = PhysicsConfig.GRAVITY
        t = tension_newtons
        q = rope_weight_n_per_m
        p = point_load_newtons

        angle_start = atan(slope + (q * span_m) / (2 * t) + (p * (span_m - load_position_m)) / (t * span_m))
        angle_end = atan(slope - (q * span_m) / (2 * t) - (p * load_position_m) / (t * span_m))

        # TODO: compare against angle_end once consumers need the true worst-case anchor
        max_tension_n = t / cos(angle_start)

        return AnchorReactions(
            start=AnchorReaction(horizontal_kg=t / g, vertical_kg=t * tan(angle_start) / g),
            end=AnchorReaction(horizontal_kg=t / g, vertical_kg=t * tan(angle_end) / g),
            angle_start_rad=angle_start,
            angle_end_rad=angle_end,
            max_tension_newtons=max_tension_n,
        )
