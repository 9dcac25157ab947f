"""Recommended pre-tension for a target sag.

Inverts the midspan sag of a cable carrying its own weight plus a
reference point load at the center:

    sag = P*L/(4*T) + q*L²/(8*T)
    =>  T = (P*L/4 + q*L²/8) / sag

with sag = L * target_sag_ratio, P = 120 kg * g and q = mass_per_meter * g.
"""

from math import floor

from zipline_planner.constants import PhysicsConfig, TensionConfig
from zipline_planner.exceptions import InvalidTargetError


class OptimalTensionSolver:
    """Static methods for recommending a cable tension."""

    @staticmethod
    def solve(
        span_m: float,
        mass_per_meter: float,
        target_sag_ratio: float = TensionConfig.DEFAULT_TARGET_SAG_RATIO,
    ) -> float:
        """Tension that yields the target sag under the reference load.

        Args:
            span_m: Horizontal span in meters
            mass_per_meter: Cable mass in kg/m
            target_sag_ratio: Wanted sag as fraction of span (0.02 = 2%)

        Returns:
            Tension in kg-force.

        Raises:
            InvalidTargetError: If span or target sag ratio is not positive.
            ValueError: If mass_per_meter is negative.
        """
        if not target_sag_ratio > 0:
            raise InvalidTargetError(f"Target sag ratio must be positive, got {target_sag_ratio}")
        if not span_m > 0:
            raise InvalidTargetError(f"Span must be positive to target a sag, got {span_m}m")
        if not mass_per_meter >= 0:
            raise ValueError(f"Cable mass per meter cannot be negative, got {mass_per_meter}kg/m")

        g = PhysicsConfig.GRAVITY
        q = mass_per_meter * g
        p = TensionConfig.REFERENCE_LOAD_KG * g
        target_sag = span_m * target_sag_ratio

        tension_n = (p * span_m / 4 + q * span_m**2 / 8) / target_sag
        return tension_n / g

    @staticmethod
    def round_tension_kg(tension_kg: float, step_kg: float = TensionConfig.ROUNDING_STEP_KG) -> float:
        """Round a tension to the rigging step (10 kg by default).

        Args:
            tension_kg: Tension in kg-force
            step_kg: Rounding step in kg

        Returns:
            Tension rounded to the nearest multiple of step_kg (halves round up).
        """
        return floor(tension_kg / step_kg + 0.5) * step_kg
