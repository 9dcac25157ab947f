"""Rider speed along the span by forward integration.

Walks the span in fixed horizontal steps dx = L / n. At each step the
point load sits at the rider's current position (travel profile), and the
velocity is advanced with the work-energy relation along the arc:

    F_gravity  = m * g * sin(theta)
    F_drag     = 0.5 * rho * v² * CdA
    F_friction = mu * m * g * cos(theta)
    a          = (F_gravity - F_drag - F_friction) / m
    v_i        = sqrt(max(0, v_{i-1}² + 2 * a * ds))

A negative radicand means the rider comes to a stop; there is no reversal.
Each step depends on the previous velocity, so the walk is sequential.
"""

import logging
from math import sqrt

from zipline_planner.constants import DynamicsConfig, PhysicsConfig
from zipline_planner.core.cable_profile import CableProfileSolver
from zipline_planner.model.profile_point import ProfilePoint

logger = logging.getLogger(__name__)


class TravelDynamicsIntegrator:
    """Integrates rider velocity over a travel profile.

    Example:
        integrator = TravelDynamicsIntegrator(profile_solver=solver)
        travel = integrator.integrate(num_steps=100, total_load_kg=122.0, drag_area_m2=0.5)
    """

    def __init__(self, profile_solver: CableProfileSolver) -> None:
        """Initialize integrator.

        Args:
            profile_solver: Solver providing cable heights with a movable load
        """
        self.profile_solver = profile_solver

    def step_forces(
        self,
        velocity_ms: float,
        sin_theta: float,
        cos_theta: float,
        total_load_kg: float,
        drag_area_m2: float,
    ) -> float:
        """Net force along the cable in newtons (positive accelerates the rider).

        Args:
            velocity_ms: Speed at the start of the step in m/s
            sin_theta: Sine of the descent angle (positive downhill)
            cos_theta: Cosine of the descent angle
            total_load_kg: Rider plus equipment mass
            drag_area_m2: Effective Cd * A

        Returns:
            Net force in newtons.
        """
        weight_n = total_load_kg * PhysicsConfig.GRAVITY
        f_gravity = weight_n * sin_theta
        f_drag = 0.5 * DynamicsConfig.AIR_DENSITY * velocity_ms * velocity_ms * drag_area_m2
        f_friction = DynamicsConfig.ROLLING_FRICTION_COEFF * weight_n * cos_theta
        return f_gravity - f_drag - f_friction

    def integrate(self, num_steps: int, total_load_kg: float, drag_area_m2: float) -> list[ProfilePoint]:
        """Produce the travel profile with rider speeds.

        Args:
            num_steps: Number of steps across the span (returns num_steps + 1 samples)
            total_load_kg: Rider plus equipment mass (0 = empty line)
            drag_area_m2: Effective Cd * A in m²

        Returns:
            ProfilePoints ordered by increasing x with speed_kmh set; the first
            sample always has speed 0.
        """
        span = self.profile_solver.geometry.span_m
        dx = span / num_steps

        profile: list[ProfilePoint] = []
        velocity = 0.0
        stopped_at = None

        for i in range(num_steps + 1):
            x = i * dx
            y = self.profile_solver.height_at(x=x, load_position_m=x)

            # An empty line has no force balance to solve
            if i > 0 and total_load_kg > 0:
                dy = y - profile[i - 1].y
                ds = sqrt(dx * dx + dy * dy)
                sin_theta = -dy / ds
                cos_theta = dx / ds

                f_net = self.step_forces(
                    velocity_ms=velocity,
                    sin_theta=sin_theta,
                    cos_theta=cos_theta,
                    total_load_kg=total_load_kg,
                    drag_area_m2=drag_area_m2,
                )
                acceleration = f_net / total_load_kg
                radicand = velocity * velocity + 2 * acceleration * ds
                if radicand < 0 and stopped_at is None:
                    stopped_at = x
                velocity = sqrt(max(0.0, radicand))

            profile.append(ProfilePoint(x=x, y=y, speed_kmh=velocity * PhysicsConfig.MS_TO_KMH))

        if stopped_at is not None:
            logger.debug(f"Rider stopped at x={stopped_at:.1f}m (net deceleration exceeds kinetic energy)")

        return profile
