"""Core physics engine for zipline calculations.

- ThermalTensionAdjuster: Temperature correction of nominal tension
- OptimalTensionSolver: Recommended tension for a target sag
- CableProfileSolver: Cable heights under self-weight and a point load
- AnchorReactionSolver: Anchor forces and maximum tension
- TravelDynamicsIntegrator: Rider speed along the span
- calculate_zipline_curve / calculate_optimal_tension: Engine entry points
- ZiplineAnalyzer: Scenario-level analysis on top of the entry points
"""

from zipline_planner.core.anchor_reactions import AnchorReactions, AnchorReactionSolver
from zipline_planner.core.cable_profile import CableProfileSolver, LoadPositionPolicy
from zipline_planner.core.tension_solver import OptimalTensionSolver
from zipline_planner.core.thermal_adjuster import ThermalTensionAdjuster
from zipline_planner.core.travel_dynamics import TravelDynamicsIntegrator
from zipline_planner.core.zipline_analyzer import ZiplineAnalysis, ZiplineAnalyzer, ZiplineScenario
from zipline_planner.core.zipline_calculator import calculate_optimal_tension, calculate_zipline_curve

__all__ = [
    # Thermal / tension
    "ThermalTensionAdjuster",
    "OptimalTensionSolver",
    # Profile
    "CableProfileSolver",
    "LoadPositionPolicy",
    # Reactions
    "AnchorReactionSolver",
    "AnchorReactions",
    # Dynamics
    "TravelDynamicsIntegrator",
    # Entry points
    "calculate_zipline_curve",
    "calculate_optimal_tension",
    # Analysis
    "ZiplineAnalyzer",
    "ZiplineAnalysis",
    "ZiplineScenario",
]
