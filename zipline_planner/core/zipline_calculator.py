"""Zipline engine entry points.

calculate_zipline_curve() runs the full pipeline for one input set:
thermal correction -> static and travel profiles -> rider dynamics ->
anchor reactions. calculate_optimal_tension() recommends a pre-tension for
a target sag.

Both are pure functions: no state is kept between calls, so they can be
called concurrently and re-invoked whenever an input changes.
"""

import logging

from zipline_planner.constants import (
    DragConfig,
    PhysicsConfig,
    ProfileConfig,
    ScenarioDefaults,
    TensionConfig,
    ThermalConfig,
)
from zipline_planner.core.anchor_reactions import AnchorReactionSolver
from zipline_planner.core.cable_profile import CableProfileSolver, LoadPositionPolicy
from zipline_planner.core.tension_solver import OptimalTensionSolver
from zipline_planner.core.thermal_adjuster import ThermalTensionAdjuster
from zipline_planner.core.travel_dynamics import TravelDynamicsIntegrator
from zipline_planner.exceptions import InvalidGeometryError
from zipline_planner.model.geometry import Geometry
from zipline_planner.model.load_state import Environment, LoadState
from zipline_planner.model.zipline_result import ZiplineResult

logger = logging.getLogger(__name__)


def calculate_zipline_curve(
    span_m: float,
    start_height_m: float,
    end_height_m: float,
    rope_mass_per_meter: float,
    tension_kg: float,
    load_weight_kg: float = 0.0,
    load_position_m: float = 0.0,
    temperature_c: float = ThermalConfig.REFERENCE_TEMP_C,
    equipment_weight_kg: float = ScenarioDefaults.EQUIPMENT_WEIGHT_KG,
    drag_area_m2: float = DragConfig.SCENARIOS[DragConfig.DEFAULT_SCENARIO],
    num_points: int = ProfileConfig.DEFAULT_NUM_POINTS,
) -> ZiplineResult:
    """Compute sag profiles, rider speeds and anchor reactions.

    Args:
        span_m: Horizontal span in meters (> 0)
        start_height_m: Start anchor elevation in meters
        end_height_m: End anchor elevation in meters
        rope_mass_per_meter: Cable mass in kg/m
        tension_kg: Nominal tension in kg-force
        load_weight_kg: Rider weight in kg (0 = empty line)
        load_position_m: Rider position for the static profile (0..span)
        temperature_c: Ambient temperature in °C
        equipment_weight_kg: Trolley/carabiner weight, added only with a rider
        drag_area_m2: Rider Cd * A in m²
        num_points: Number of profile segments (num_points + 1 samples)

    Returns:
        ZiplineResult for these inputs.

    Raises:
        InvalidGeometryError: If span is not positive, num_points < 1, or the
            load position lies outside the span.
        DegenerateTensionError: If the corrected tension is not positive.
        ValueError: If rope mass, weights or drag area are negative.
    """
    geometry = Geometry(span_m=span_m, start_height_m=start_height_m, end_height_m=end_height_m)
    load = LoadState(
        rider_weight_kg=load_weight_kg,
        equipment_weight_kg=equipment_weight_kg,
        load_position_m=load_position_m,
        drag_area_m2=drag_area_m2,
    )
    environment = Environment(tension_kg=tension_kg, temperature_c=temperature_c)

    if num_points < 1:
        raise InvalidGeometryError(f"Profile needs at least one segment, got num_points={num_points}")
    if not geometry.contains(x=load.load_position_m):
        raise InvalidGeometryError(f"Load position {load.load_position_m}m is outside span 0..{geometry.span_m}m")
    if not rope_mass_per_meter >= 0:
        raise ValueError(f"Rope mass per meter cannot be negative, got {rope_mass_per_meter}kg/m")

    g = PhysicsConfig.GRAVITY
    tension_n = ThermalTensionAdjuster.adjust(
        tension_kg=environment.tension_kg,
        temperature_c=environment.temperature_c,
    )
    rope_weight_n = rope_mass_per_meter * g
    total_load_kg = load.total_load_kg
    point_load_n = total_load_kg * g

    solver = CableProfileSolver(
        geometry=geometry,
        tension_newtons=tension_n,
        rope_weight_n_per_m=rope_weight_n,
        point_load_newtons=point_load_n,
        load_position_m=load.load_position_m,
    )

    points = solver.sample(num_points=num_points, policy=LoadPositionPolicy.FIXED)
    cable_length = CableProfileSolver.arc_length(points=points)

    travel_profile = TravelDynamicsIntegrator(profile_solver=solver).integrate(
        num_steps=num_points,
        total_load_kg=total_load_kg,
        drag_area_m2=load.drag_area_m2,
    )

    reactions = AnchorReactionSolver.solve(
        tension_newtons=tension_n,
        slope=geometry.slope,
        rope_weight_n_per_m=rope_weight_n,
        span_m=geometry.span_m,
        point_load_newtons=point_load_n,
        load_position_m=load.load_position_m,
    )

    result = ZiplineResult(
        geometry=geometry,
        points=tuple(points),
        travel_profile=tuple(travel_profile),
        reactions_start=reactions.start,
        reactions_end=reactions.end,
        max_tension_newtons=reactions.max_tension_newtons,
        cable_length_m=cable_length,
    )
    logger.debug(
        f"Zipline computed: span={span_m}m, load={total_load_kg}kg at {load_position_m}m, "
        f"tension={tension_n:.0f}N, max_speed={result.max_speed_kmh:.1f}km/h"
    )
    return result


def calculate_optimal_tension(
    span_m: float,
    rope_mass_per_meter: float,
    target_sag_ratio: float = TensionConfig.DEFAULT_TARGET_SAG_RATIO,
) -> float:
    """Recommended tension in kg-force for the target sag ratio.

    See OptimalTensionSolver.solve for the formula and errors.
    """
    return OptimalTensionSolver.solve(
        span_m=span_m,
        mass_per_meter=rope_mass_per_meter,
        target_sag_ratio=target_sag_ratio,
    )
