"""Scenario analysis built on the zipline engine.

A ZiplineScenario collects the planner's inputs (anchor layout as percent
drop, cable from the catalog, rider pose, auto-tension toggle). The
analyzer resolves them into engine calls and derives the values shown to
the rigger:

- Tension: nominal, or the optimal tension rounded to 10 kg in auto mode
- Loaded result (rider at the chosen fraction of the span)
- No-load reference result (empty line)
- Safety factor: cable breaking strength / maximum working tension
- Speed statistics: max, finish, at the rider position
- Clearance lines: feet line (travel profile) and safety line below it
"""

import logging
from dataclasses import dataclass

from zipline_planner.constants import (
    CableConfig,
    DragConfig,
    PhysicsConfig,
    SafetyConfig,
    ScenarioDefaults,
)
from zipline_planner.core.tension_solver import OptimalTensionSolver
from zipline_planner.core.zipline_calculator import calculate_optimal_tension, calculate_zipline_curve
from zipline_planner.model.cable_spec import CableSpec
from zipline_planner.model.geometry import Geometry
from zipline_planner.model.profile_point import ProfilePoint
from zipline_planner.model.zipline_result import ZiplineResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ZiplineScenario:
    """Planner inputs for one zipline.

    The rider weight reaches the engine on its own and the engine adds
    equipment_weight_kg once. Passing rider plus equipment as the load
    weight would count the equipment twice, so figures from tools that do
    so carry one extra equipment weight (2 kg by default) of point load.

    Attributes:
        start_height_m: Start anchor elevation
        span_m: Horizontal span
        drop_pct: End anchor drop as percent of span
        tension_kg: Nominal tension (ignored when auto_tension is set)
        target_sag_pct: Target sag as percent of span for auto-tension
        auto_tension: Use the optimal tension instead of tension_kg
        cable_name: Cable from CableConfig.CABLES
        rider_weight_kg: Rider weight
        equipment_weight_kg: Trolley and carabiner weight
        load_position_fraction: Rider position as fraction of span (0..1)
        drag_scenario: Rider pose from DragConfig.SCENARIOS
        temperature_c: Ambient temperature
        safety_margin_m: Clearance kept below the feet line
    """

    start_height_m: float = ScenarioDefaults.START_HEIGHT_M
    span_m: float = ScenarioDefaults.SPAN_M
    drop_pct: float = ScenarioDefaults.DROP_PCT
    tension_kg: float = ScenarioDefaults.TENSION_KG
    target_sag_pct: float = ScenarioDefaults.TARGET_SAG_PCT
    auto_tension: bool = ScenarioDefaults.AUTO_TENSION
    cable_name: str = CableConfig.DEFAULT_CABLE
    rider_weight_kg: float = ScenarioDefaults.RIDER_WEIGHT_KG
    equipment_weight_kg: float = ScenarioDefaults.EQUIPMENT_WEIGHT_KG
    load_position_fraction: float = ScenarioDefaults.LOAD_POSITION_FRACTION
    drag_scenario: str = DragConfig.DEFAULT_SCENARIO
    temperature_c: float = ScenarioDefaults.TEMPERATURE_C
    safety_margin_m: float = ScenarioDefaults.SAFETY_MARGIN_M

    def __post_init__(self) -> None:
        if self.drag_scenario not in DragConfig.SCENARIOS:
            raise ValueError(f"Unknown drag scenario '{self.drag_scenario}'. Valid: {DragConfig.IDS}")
        if not 0 <= self.load_position_fraction <= 1:
            raise ValueError(f"Load position fraction must be within 0..1, got {self.load_position_fraction}")

    @property
    def geometry(self) -> Geometry:
        return Geometry.from_drop_percent(
            span_m=self.span_m,
            start_height_m=self.start_height_m,
            drop_pct=self.drop_pct,
        )

    @property
    def cable(self) -> CableSpec:
        return CableSpec.from_catalog(name=self.cable_name)

    @property
    def drag_area_m2(self) -> float:
        return DragConfig.SCENARIOS[self.drag_scenario]

    @property
    def load_position_m(self) -> float:
        return self.load_position_fraction * self.span_m


@dataclass(frozen=True)
class ZiplineAnalysis:
    """Everything derived from one scenario.

    Attributes:
        scenario: Inputs the analysis was computed from
        tension_kg: Tension actually used (auto or nominal)
        result: Engine result with the rider loaded
        no_load_result: Engine result for the empty line
        safety_factor: Breaking strength / maximum tension
    """

    scenario: ZiplineScenario
    tension_kg: float
    result: ZiplineResult
    no_load_result: ZiplineResult
    safety_factor: float

    @property
    def is_safety_critical(self) -> bool:
        return self.safety_factor < SafetyConfig.MIN_SAFETY_FACTOR

    @property
    def max_speed_kmh(self) -> float:
        return self.result.max_speed_kmh

    @property
    def finish_speed_kmh(self) -> float:
        return self.result.finish_speed_kmh

    @property
    def speed_at_load_kmh(self) -> float:
        """Speed at the travel sample nearest to the rider position."""
        return self.result.speed_at(x=self.scenario.load_position_m)

    @property
    def feet_line(self) -> list[ProfilePoint]:
        """Cable height under the moving rider (travel profile, no speeds)."""
        return [ProfilePoint(x=p.x, y=p.y) for p in self.result.travel_profile]

    @property
    def safety_line(self) -> list[ProfilePoint]:
        """Feet line lowered by the scenario safety margin."""
        margin = self.scenario.safety_margin_m
        return [ProfilePoint(x=p.x, y=p.y - margin) for p in self.result.travel_profile]


class ZiplineAnalyzer:
    """Runs the engine for a scenario and derives planner values.

    Example:
        analysis = ZiplineAnalyzer.analyze(scenario=ZiplineScenario(span_m=150.0))
        print(analysis.safety_factor, analysis.max_speed_kmh)
    """

    @staticmethod
    def resolve_tension_kg(scenario: ZiplineScenario) -> float:
        """Nominal tension, or the optimal tension rounded to 10 kg in auto mode."""
        if not scenario.auto_tension:
            return scenario.tension_kg
        optimal = calculate_optimal_tension(
            span_m=scenario.span_m,
            rope_mass_per_meter=scenario.cable.mass_per_meter,
            target_sag_ratio=scenario.target_sag_pct / 100,
        )
        return OptimalTensionSolver.round_tension_kg(tension_kg=optimal)

    @staticmethod
    def safety_factor(cable: CableSpec, max_tension_newtons: float) -> float:
        """Breaking strength divided by maximum working tension (both in kg-force)."""
        max_tension_kg = max_tension_newtons / PhysicsConfig.GRAVITY
        return cable.breaking_strength_kg / max_tension_kg

    @staticmethod
    def analyze(scenario: ZiplineScenario) -> ZiplineAnalysis:
        """Run loaded and no-load calculations for a scenario.

        Args:
            scenario: Planner inputs

        Returns:
            ZiplineAnalysis with both results and derived values.

        Raises:
            ZiplineError: Propagated from the engine for invalid inputs.
            ValueError: For unknown cable names.
        """
        cable = scenario.cable
        geometry = scenario.geometry
        tension_kg = ZiplineAnalyzer.resolve_tension_kg(scenario=scenario)

        result = calculate_zipline_curve(
            span_m=geometry.span_m,
            start_height_m=geometry.start_height_m,
            end_height_m=geometry.end_height_m,
            rope_mass_per_meter=cable.mass_per_meter,
            tension_kg=tension_kg,
            load_weight_kg=scenario.rider_weight_kg,
            load_position_m=scenario.load_position_m,
            temperature_c=scenario.temperature_c,
            equipment_weight_kg=scenario.equipment_weight_kg,
            drag_area_m2=scenario.drag_area_m2,
        )
        no_load_result = calculate_zipline_curve(
            span_m=geometry.span_m,
            start_height_m=geometry.start_height_m,
            end_height_m=geometry.end_height_m,
            rope_mass_per_meter=cable.mass_per_meter,
            tension_kg=tension_kg,
            load_weight_kg=0.0,
            load_position_m=ScenarioDefaults.NO_LOAD_POSITION_FRACTION * geometry.span_m,
            temperature_c=scenario.temperature_c,
            equipment_weight_kg=0.0,
            drag_area_m2=ScenarioDefaults.NO_LOAD_DRAG_AREA_M2,
        )

        factor = ZiplineAnalyzer.safety_factor(cable=cable, max_tension_newtons=result.max_tension_newtons)
        analysis = ZiplineAnalysis(
            scenario=scenario,
            tension_kg=tension_kg,
            result=result,
            no_load_result=no_load_result,
            safety_factor=factor,
        )

        logger.info(
            f"Analyzed {cable.name}: span={geometry.span_m:.0f}m, tension={tension_kg:.0f}kg, "
            f"max_sag={result.max_sag_m:.2f}m, max_speed={analysis.max_speed_kmh:.1f}km/h, "
            f"safety_factor={factor:.1f}"
        )
        if analysis.is_safety_critical:
            logger.warning(
                f"Safety factor {factor:.1f} below {SafetyConfig.MIN_SAFETY_FACTOR} "
                f"(max tension {result.max_tension_kg:.0f}kg, breaking {cable.breaking_strength_kg:.0f}kg)"
            )
        return analysis
