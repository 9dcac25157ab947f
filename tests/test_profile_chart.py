"""Tests for ProfileChart - zipline profile rendering.

These tests verify that ProfileChart correctly creates Plotly figures
from engine output. Tests cover:
- Profile rendering with and without reference lines
- Speed rendering
- Error handling for empty results
- Chart configuration
"""

import plotly.graph_objects as go
import pytest

from zipline_planner.constants import ChartConfig
from zipline_planner.core.zipline_analyzer import ZiplineAnalysis
from zipline_planner.model.geometry import Geometry
from zipline_planner.model.zipline_result import AnchorReaction, ZiplineResult
from zipline_planner.ui.profile_chart import ProfileChart


@pytest.fixture
def chart() -> ProfileChart:
    """Standard chart for testing."""
    return ProfileChart(width=ChartConfig.DEFAULT_WIDTH, height=ChartConfig.PROFILE_HEIGHT)


@pytest.fixture
def empty_result(level_geometry: Geometry) -> ZiplineResult:
    """Result without samples (never produced by the engine)."""
    return ZiplineResult(
        geometry=level_geometry,
        points=(),
        travel_profile=(),
        reactions_start=AnchorReaction(horizontal_kg=0.0, vertical_kg=0.0),
        reactions_end=AnchorReaction(horizontal_kg=0.0, vertical_kg=0.0),
        max_tension_newtons=0.0,
        cable_length_m=0.0,
    )


def trace_names(fig: go.Figure) -> list[str]:
    return [trace.name for trace in fig.data]


class TestProfileRendering:
    """Tests for render_profile method."""

    def test_returns_figure_with_all_lines(self, chart: ProfileChart, default_analysis: ZiplineAnalysis) -> None:
        """All reference lines are drawn by default, cable on top of them."""
        fig = chart.render_profile(analysis=default_analysis)
        assert isinstance(fig, go.Figure)
        assert trace_names(fig) == ["No load", "Feet line", "Safety line", "Cable", "Anchors", "Rider"]

    def test_reference_lines_can_be_hidden(self, chart: ProfileChart, default_analysis: ZiplineAnalysis) -> None:
        fig = chart.render_profile(
            analysis=default_analysis,
            show_no_load=False,
            show_feet_line=False,
            show_safety_line=False,
        )
        assert trace_names(fig) == ["Cable", "Anchors", "Rider"]

    def test_cable_trace_matches_static_profile(self, chart: ProfileChart, default_analysis: ZiplineAnalysis) -> None:
        fig = chart.render_profile(analysis=default_analysis)
        cable = next(trace for trace in fig.data if trace.name == "Cable")
        points = default_analysis.result.points
        assert list(cable.x) == [p.x for p in points]
        assert list(cable.y) == [p.y for p in points]

    def test_y_range_covers_safety_line(self, chart: ProfileChart, default_analysis: ZiplineAnalysis) -> None:
        """Lower axis bound sits below the lowest safety-line point."""
        fig = chart.render_profile(analysis=default_analysis)
        y_min, y_max = fig.layout.yaxis.range
        assert y_min < min(p.y for p in default_analysis.safety_line)
        assert y_max > default_analysis.scenario.start_height_m

    def test_layout_dimensions(self, chart: ProfileChart, default_analysis: ZiplineAnalysis) -> None:
        fig = chart.render_profile(analysis=default_analysis)
        assert fig.layout.width == ChartConfig.DEFAULT_WIDTH
        assert fig.layout.height == ChartConfig.PROFILE_HEIGHT

    def test_stats_annotation(self, chart: ProfileChart, default_analysis: ZiplineAnalysis) -> None:
        fig = chart.render_profile(analysis=default_analysis)
        texts = [a.text for a in fig.layout.annotations]
        assert any(t.startswith("Max sag") for t in texts)
        assert any("Safety factor" in t for t in texts)


class TestSpeedRendering:
    """Tests for render_speed method."""

    def test_speed_trace(self, chart: ProfileChart, default_analysis: ZiplineAnalysis) -> None:
        result = default_analysis.result
        fig = chart.render_speed(result=result)
        assert len(fig.data) == 1
        assert list(fig.data[0].y) == result.speeds_kmh
        assert fig.data[0].y[0] == 0.0

    def test_title_reports_max_speed(self, chart: ProfileChart, default_analysis: ZiplineAnalysis) -> None:
        fig = chart.render_speed(result=default_analysis.result)
        assert f"{default_analysis.max_speed_kmh:.1f}km/h" in fig.layout.title.text


class TestErrorHandling:
    """Tests for invalid input handling."""

    def test_empty_speed_profile_raises(self, chart: ProfileChart, empty_result: ZiplineResult) -> None:
        with pytest.raises(ValueError, match="travel profile"):
            chart.render_speed(result=empty_result)

    def test_empty_profile_raises(
        self, chart: ProfileChart, default_analysis: ZiplineAnalysis, empty_result: ZiplineResult
    ) -> None:
        analysis = ZiplineAnalysis(
            scenario=default_analysis.scenario,
            tension_kg=default_analysis.tension_kg,
            result=empty_result,
            no_load_result=empty_result,
            safety_factor=default_analysis.safety_factor,
        )
        with pytest.raises(ValueError, match="points"):
            chart.render_profile(analysis=analysis)
