"""Thermal correction of nominal cable tension.

A temperature rise lengthens the steel cable and relaxes it. The loss is
approximated as a fractional tension change proportional to the deviation
from the reference temperature:

    T = tension_kg * g * (1 - alpha * (temp - T_ref) * k)

with alpha = 12e-6 /°C and the calibrated sensitivity factor k = 100.
"""

import logging

from zipline_planner.constants import PhysicsConfig, ThermalConfig
from zipline_planner.exceptions import DegenerateTensionError

logger = logging.getLogger(__name__)


class ThermalTensionAdjuster:
    """Static methods for temperature-corrected tension."""

    @staticmethod
    def correction_factor(temperature_c: float) -> float:
        """Fraction of nominal tension remaining at the given temperature.

        Args:
            temperature_c: Ambient temperature in °C

        Returns:
            1.0 at the reference temperature, below 1.0 when warmer.
        """
        delta_t = temperature_c - ThermalConfig.REFERENCE_TEMP_C
        return 1 - ThermalConfig.ALPHA_PER_C * delta_t * ThermalConfig.SENSITIVITY_FACTOR

    @staticmethod
    def adjust(tension_kg: float, temperature_c: float) -> float:
        """Convert nominal tension to temperature-corrected tension in newtons.

        Args:
            tension_kg: Nominal tension in kg-force
            temperature_c: Ambient temperature in °C

        Returns:
            Adjusted tension in newtons (> 0).

        Raises:
            DegenerateTensionError: If the corrected tension is zero or negative.
        """
        factor = ThermalTensionAdjuster.correction_factor(temperature_c=temperature_c)
        adjusted_n = tension_kg * PhysicsConfig.GRAVITY * factor
        if not adjusted_n > 0:
            raise DegenerateTensionError(
                f"Adjusted tension {adjusted_n:.1f}N is not positive "
                f"(nominal {tension_kg}kg at {temperature_c}°C, factor {factor:.4f})"
            )
        logger.debug(f"Thermal correction at {temperature_c}°C: {tension_kg}kg -> {adjusted_n:.1f}N")
        return adjusted_n
