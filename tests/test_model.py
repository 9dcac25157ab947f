"""Tests for zipline_planner data model classes.

Tests: Geometry, CableSpec, LoadState, Environment, ProfilePoint, ZiplineResult
Focus: Validation, derived properties, serialization

Note: Fixtures are defined in conftest.py.
"""

from dataclasses import FrozenInstanceError

import pytest

from zipline_planner.constants import CableConfig
from zipline_planner.exceptions import InvalidGeometryError
from zipline_planner.model.cable_spec import CableSpec
from zipline_planner.model.geometry import Geometry
from zipline_planner.model.load_state import Environment, LoadState
from zipline_planner.model.profile_point import ProfilePoint
from zipline_planner.model.zipline_result import ZiplineResult


class TestGeometry:
    """Geometry - span and anchor heights."""

    def test_derived_drop_and_slope(self, reference_geometry: Geometry) -> None:
        """15m -> 11m over 100m: 4m drop, slope 0.04."""
        assert reference_geometry.drop_m == pytest.approx(4.0)
        assert reference_geometry.slope == pytest.approx(0.04)

    def test_chord_height(self, reference_geometry: Geometry) -> None:
        assert reference_geometry.chord_height_at(x=0.0) == pytest.approx(15.0)
        assert reference_geometry.chord_height_at(x=50.0) == pytest.approx(13.0)
        assert reference_geometry.chord_height_at(x=100.0) == pytest.approx(11.0)

    def test_from_drop_percent(self) -> None:
        """4% over 100m from 15m ends at 11m."""
        geometry = Geometry.from_drop_percent(span_m=100.0, start_height_m=15.0, drop_pct=4.0)
        assert geometry.end_height_m == pytest.approx(11.0)

    def test_end_height_may_be_negative(self) -> None:
        """End elevation is unconstrained."""
        geometry = Geometry.from_drop_percent(span_m=300.0, start_height_m=5.0, drop_pct=10.0)
        assert geometry.end_height_m == pytest.approx(-25.0)

    @pytest.mark.parametrize("span", [0.0, -1.0])
    def test_invalid_span(self, span: float) -> None:
        with pytest.raises(InvalidGeometryError):
            Geometry(span_m=span, start_height_m=10.0, end_height_m=10.0)

    @pytest.mark.parametrize("heights", [(float("nan"), 10.0), (10.0, float("nan"))])
    def test_nan_anchor_height(self, heights: tuple[float, float]) -> None:
        start, end = heights
        with pytest.raises(InvalidGeometryError, match="NaN"):
            Geometry(span_m=100.0, start_height_m=start, end_height_m=end)

    def test_contains(self, level_geometry: Geometry) -> None:
        assert level_geometry.contains(x=0.0)
        assert level_geometry.contains(x=100.0)
        assert not level_geometry.contains(x=100.1)
        assert not level_geometry.contains(x=-0.1)

    def test_immutable(self, level_geometry: Geometry) -> None:
        with pytest.raises(FrozenInstanceError):
            level_geometry.span_m = 50.0


class TestCableSpec:
    """CableSpec - catalog lookup and breaking strength."""

    def test_every_catalog_entry_loads(self) -> None:
        for name in CableConfig.NAMES:
            cable = CableSpec.from_catalog(name=name)
            assert cable.name == name
            assert cable.mass_per_meter > 0
            assert cable.breaking_strength_kn > 0

    def test_preferred_grade_strength(self) -> None:
        """Triniks ZL 12mm at grade 1770 is 156 kN = 15907.32 kg."""
        cable = CableSpec.from_catalog(name="Triniks ZL 12mm")
        assert cable.mass_per_meter == 0.86
        assert cable.breaking_strength_kn == 156
        assert cable.breaking_strength_kg == pytest.approx(156 * 101.97)

    def test_falls_back_to_first_grade(self) -> None:
        cable = CableSpec(name="Custom", mass_per_meter=0.5, breaking_strength_kn_by_grade={1570: 80, 1960: 95})
        assert cable.breaking_strength_kn == 80

    def test_no_strength_data(self) -> None:
        cable = CableSpec(name="Unknown rope", mass_per_meter=0.5)
        assert cable.breaking_strength_kg == 0.0

    def test_unknown_cable(self) -> None:
        with pytest.raises(ValueError, match="Unknown cable"):
            CableSpec.from_catalog(name="Nylon 6mm")

    def test_strengths_are_frozen_and_hashable(self) -> None:
        """Strengths are stored as (grade, kN) pairs, so the cable can be hashed."""
        cable = CableSpec.from_catalog(name="Triniks ZL 12mm")
        assert cable.breaking_strength_kn_by_grade == ((1570, 147), (1770, 156), (1960, 165))
        assert hash(cable) == hash(CableSpec.from_catalog(name="Triniks ZL 12mm"))
        with pytest.raises(FrozenInstanceError):
            cable.breaking_strength_kn_by_grade = ()

    def test_non_positive_mass(self) -> None:
        with pytest.raises(ValueError):
            CableSpec(name="Weightless", mass_per_meter=0.0)


class TestLoadState:
    """LoadState - rider, equipment and pose."""

    def test_total_includes_equipment_with_rider(self) -> None:
        load = LoadState(rider_weight_kg=122.0, equipment_weight_kg=2.0, load_position_m=50.0, drag_area_m2=0.5)
        assert load.total_load_kg == 124.0

    def test_equipment_ignored_without_rider(self) -> None:
        load = LoadState(rider_weight_kg=0.0, equipment_weight_kg=2.0, load_position_m=50.0, drag_area_m2=0.5)
        assert load.total_load_kg == 0.0

    @pytest.mark.parametrize(
        "field_name",
        ["rider_weight_kg", "equipment_weight_kg", "drag_area_m2"],
    )
    def test_negative_values_rejected(self, field_name: str) -> None:
        values = dict(rider_weight_kg=80.0, equipment_weight_kg=2.0, load_position_m=10.0, drag_area_m2=0.5)
        values[field_name] = -1.0
        with pytest.raises(ValueError):
            LoadState(**values)

    def test_environment_rejects_nan(self) -> None:
        with pytest.raises(ValueError):
            Environment(tension_kg=float("nan"), temperature_c=20.0)


class TestProfilePoint:
    """ProfilePoint - sample serialization."""

    def test_to_dict_without_speed(self) -> None:
        assert ProfilePoint(x=1.0, y=2.0).to_dict() == {"x": 1.0, "y": 2.0}

    def test_to_dict_with_speed(self) -> None:
        assert ProfilePoint(x=1.0, y=2.0, speed_kmh=0.0).to_dict() == {"x": 1.0, "y": 2.0, "speed": 0.0}


class TestZiplineResult:
    """ZiplineResult - derived values and serialization."""

    def test_speed_statistics(self, reference_result: ZiplineResult) -> None:
        speeds = [p.speed_kmh for p in reference_result.travel_profile]
        assert reference_result.max_speed_kmh == max(speeds)
        assert reference_result.finish_speed_kmh == speeds[-1]

    def test_speed_at_nearest_sample(self, reference_result: ZiplineResult) -> None:
        """speed_at picks the nearest travel sample."""
        sample = reference_result.travel_profile[40]
        assert reference_result.speed_at(x=sample.x + 0.2) == sample.speed_kmh

    def test_lowest_point_and_max_sag(self, reference_result: ZiplineResult) -> None:
        lowest = reference_result.lowest_point
        assert all(p.y >= lowest.y for p in reference_result.points)
        assert reference_result.max_sag_m == pytest.approx(15.0 - lowest.y)

    def test_max_tension_kg(self, reference_result: ZiplineResult) -> None:
        assert reference_result.max_tension_kg == pytest.approx(reference_result.max_tension_newtons / 9.81)

    def test_to_dict_layout(self, reference_result: ZiplineResult) -> None:
        """Serialized keys match what chart and export consumers read."""
        data = reference_result.to_dict()
        assert set(data.keys()) == {"points", "travelProfile", "reactions", "maxTensionNewtons", "cableLength"}
        assert len(data["points"]) == 101
        assert "speed" not in data["points"][0]
        assert data["travelProfile"][0]["speed"] == 0.0
        assert set(data["reactions"]["start"].keys()) == {"horizontal", "vertical"}

    def test_immutable(self, reference_result: ZiplineResult) -> None:
        with pytest.raises(FrozenInstanceError):
            reference_result.cable_length_m = 0.0
