"""Configuration constants for Zipline Planner.

All configurable parameters are centralized here for easy tuning.

Classes:
    PhysicsConfig: Gravity and unit conversions
    ThermalConfig: Thermal tension correction parameters
    TensionConfig: Optimal tension reference load and rounding
    DynamicsConfig: Rider travel integration parameters
    ProfileConfig: Profile sampling resolution
    CableConfig: Cable catalog (mass per meter, breaking strengths)
    DragConfig: Rider pose drag areas
    SafetyConfig: Safety factor thresholds
    ScenarioDefaults: Default inputs for a zipline scenario
    ChartConfig: Chart rendering dimensions
    StyleConfig: Visual colors and styling
"""


class PhysicsConfig:
    """Physical constants and unit conversions."""

    GRAVITY = 9.81  # m/s²
    MS_TO_KMH = 3.6
    KG_PER_KN = 101.97  # kg-force per kilonewton


class ThermalConfig:
    """Thermal tension correction for steel cable."""

    ALPHA_PER_C = 12e-6  # Linear expansion coefficient of steel (1/°C)
    REFERENCE_TEMP_C = 20.0
    # Calibrated span-length sensitivity of the reference design
    SENSITIVITY_FACTOR = 100


class TensionConfig:
    """Optimal tension parameters.

    The recommended tension places the maximum sag at TARGET_SAG_RATIO * span
    with REFERENCE_LOAD_KG hanging at midspan.
    """

    REFERENCE_LOAD_KG = 120.0
    DEFAULT_TARGET_SAG_RATIO = 0.02
    ROUNDING_STEP_KG = 10


class DynamicsConfig:
    """Rider travel integration parameters."""

    AIR_DENSITY = 1.225  # kg/m³ at sea level
    ROLLING_FRICTION_COEFF = 0.02  # Pulley on steel cable


class ProfileConfig:
    """Profile sampling parameters."""

    DEFAULT_NUM_POINTS = 100  # Segments, giving 101 samples


class CableConfig:
    """Cable catalog.

    Breaking strengths are minimum breaking forces in kN keyed by wire
    tensile grade (N/mm²).
    """

    CABLES = {
        "Triniks ZL 10mm": {"mass_per_meter": 0.61, "strengths_kn": {1570: 106, 1770: 112, 1960: 120}},
        "Triniks ZL 11mm": {"mass_per_meter": 0.72, "strengths_kn": {1570: 123, 1770: 131, 1960: 139}},
        "Triniks ZL 12mm": {"mass_per_meter": 0.86, "strengths_kn": {1570: 147, 1770: 156, 1960: 165}},
        "Triniks ZL 16mm": {"mass_per_meter": 1.54, "strengths_kn": {1570: 270, 1770: 287, 1960: 303}},
        "Steel 12mm CDCI": {"mass_per_meter": 0.61, "strengths_kn": {1770: 92.5}},
        "Steel 14mm CDCI": {"mass_per_meter": 0.84, "strengths_kn": {1770: 141}},
    }
    NAMES = list(CABLES.keys())

    DEFAULT_CABLE = "Triniks ZL 12mm"
    assert DEFAULT_CABLE in CABLES

    # Grade used for safety factor checks when available
    PREFERRED_GRADE = 1770


class DragConfig:
    """Rider pose drag areas (Cd * A in m²)."""

    SCENARIOS = {
        "superman": 0.15,  # Head first, horizontal
        "sitting": 0.50,  # Seated in harness
        "star": 0.90,  # Arms and legs spread
    }
    IDS = list(SCENARIOS.keys())

    DEFAULT_SCENARIO = "sitting"
    assert DEFAULT_SCENARIO in SCENARIOS


class SafetyConfig:
    """Safety factor thresholds."""

    MIN_SAFETY_FACTOR = 3.0  # Below this the line is flagged as critical


class ScenarioDefaults:
    """Default inputs for a zipline scenario."""

    START_HEIGHT_M = 15.0
    SPAN_M = 100.0
    DROP_PCT = 4.0
    TENSION_KG = 800.0
    TARGET_SAG_PCT = 2.0
    AUTO_TENSION = True
    RIDER_WEIGHT_KG = 120.0
    EQUIPMENT_WEIGHT_KG = 2.0  # Trolley and carabiners
    LOAD_POSITION_FRACTION = 0.5
    TEMPERATURE_C = 20.0
    SAFETY_MARGIN_M = 1.0  # Clearance below the rider's feet line

    # Reference no-load profile
    NO_LOAD_POSITION_FRACTION = 0.5
    NO_LOAD_DRAG_AREA_M2 = 0.5


class ChartConfig:
    """Chart rendering dimensions and settings."""

    PROFILE_HEIGHT = 550
    SPEED_HEIGHT = 250
    DEFAULT_WIDTH = 800

    # Y-axis padding
    HEIGHT_PADDING_TOP_M = 2.0
    HEIGHT_PADDING_BOTTOM_M = 2.0


class StyleConfig:
    """Visual colors and styling."""

    LINE_COLORS = {
        "cable": "#141414",
        "no_load": "#9CA3AF",  # Gray-400
        "feet": "#F97316",  # Orange-500
        "safety": "#FF4444",
        "speed": "#3B82F6",  # Blue-500
        "anchor": "#1F2937",  # Gray-800
        "rider": "#A855F7",  # Purple
    }
    assert {"cable", "no_load", "feet", "safety", "speed"} <= set(LINE_COLORS.keys())

    GRID_COLOR = "rgba(200, 200, 200, 0.3)"
