"""Shared pytest fixtures for zipline_planner tests.

All fixtures use explicit values with documented rationale.

REFERENCE SCENARIO:
    100m span from 15m down to 11m (4% drop), Triniks ZL 12mm cable
    (0.86 kg/m) at 800kg, 122kg rider plus 2kg equipment at midspan,
    20°C (no thermal correction), sitting pose (0.5 m² drag area).
"""

import pytest

from zipline_planner.core.cable_profile import CableProfileSolver
from zipline_planner.core.zipline_analyzer import ZiplineAnalysis, ZiplineAnalyzer, ZiplineScenario
from zipline_planner.core.zipline_calculator import calculate_zipline_curve
from zipline_planner.model.geometry import Geometry
from zipline_planner.model.zipline_result import ZiplineResult


# =============================================================================
# GEOMETRY FIXTURES
# =============================================================================


@pytest.fixture
def level_geometry() -> Geometry:
    """100m span with both anchors at 10m (symmetric, no drop)."""
    return Geometry(span_m=100.0, start_height_m=10.0, end_height_m=10.0)


@pytest.fixture
def reference_geometry() -> Geometry:
    """100m span from 15m to 11m (4% drop)."""
    return Geometry(span_m=100.0, start_height_m=15.0, end_height_m=11.0)


# =============================================================================
# SOLVER FIXTURES
# =============================================================================


@pytest.fixture
def rope_only_solver(level_geometry: Geometry) -> CableProfileSolver:
    """Level span, 1000N tension, 2 N/m rope, no point load.

    Midspan sag = q * L² / (8T) = 2 * 10000 / 8000 = 2.5m.
    """
    return CableProfileSolver(
        geometry=level_geometry,
        tension_newtons=1000.0,
        rope_weight_n_per_m=2.0,
        point_load_newtons=0.0,
        load_position_m=50.0,
    )


@pytest.fixture
def point_load_solver(level_geometry: Geometry) -> CableProfileSolver:
    """Level span, 1000N tension, weightless rope, 100N load at 25m.

    Peak load sag at 25m = P * a * b / (T * L) = 100 * 25 * 75 / 100000 = 1.875m.
    """
    return CableProfileSolver(
        geometry=level_geometry,
        tension_newtons=1000.0,
        rope_weight_n_per_m=0.0,
        point_load_newtons=100.0,
        load_position_m=25.0,
    )


# =============================================================================
# RESULT FIXTURES
# =============================================================================


@pytest.fixture
def reference_result() -> ZiplineResult:
    """Engine result for the reference scenario (see module docstring)."""
    return calculate_zipline_curve(
        span_m=100.0,
        start_height_m=15.0,
        end_height_m=11.0,
        rope_mass_per_meter=0.86,
        tension_kg=800.0,
        load_weight_kg=122.0,
        load_position_m=50.0,
        temperature_c=20.0,
        equipment_weight_kg=2.0,
        drag_area_m2=0.5,
    )


@pytest.fixture
def empty_line_result() -> ZiplineResult:
    """Reference geometry and tension with no rider."""
    return calculate_zipline_curve(
        span_m=100.0,
        start_height_m=15.0,
        end_height_m=11.0,
        rope_mass_per_meter=0.86,
        tension_kg=800.0,
        load_weight_kg=0.0,
        load_position_m=50.0,
        temperature_c=20.0,
        equipment_weight_kg=2.0,
        drag_area_m2=0.5,
    )


@pytest.fixture
def default_analysis() -> ZiplineAnalysis:
    """Analysis of the default scenario (auto-tension, Triniks ZL 12mm, 120kg rider)."""
    return ZiplineAnalyzer.analyze(scenario=ZiplineScenario())
