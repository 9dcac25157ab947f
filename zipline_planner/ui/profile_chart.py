"""ProfileChart - Plotly rendering of zipline profiles.

Renders:
- Loaded cable profile with rider marker and anchors
- No-load reference cable
- Feet line and safety line (clearance under the moving rider)
- Speed along the span

The chart only reads engine output; it never recomputes physics.
"""

import logging

import plotly.graph_objects as go

from zipline_planner.constants import ChartConfig, StyleConfig
from zipline_planner.core.zipline_analyzer import ZiplineAnalysis
from zipline_planner.model.profile_point import ProfilePoint
from zipline_planner.model.zipline_result import ZiplineResult

logger = logging.getLogger(__name__)


class ProfileChart:
    """Renders zipline profiles using Plotly.

    Example:
        chart = ProfileChart(width=800, height=550)
        fig = chart.render_profile(analysis=analysis)
        fig.write_html("profile.html")
    """

    def __init__(
        self,
        width: int,
        height: int,
    ) -> None:
        """Initialize profile chart renderer.

        Args:
            width: Chart width in pixels
            height: Chart height in pixels
        """
        self.width = width
        self.height = height

    def render_profile(
        self,
        analysis: ZiplineAnalysis,
        show_no_load: bool = True,
        show_feet_line: bool = True,
        show_safety_line: bool = True,
    ) -> go.Figure:
        """Render the cable profile for an analyzed scenario.

        Args:
            analysis: Analysis holding loaded and no-load results
            show_no_load: Draw the empty-line reference cable
            show_feet_line: Draw the travel profile under the moving rider
            show_safety_line: Draw the feet line lowered by the safety margin

        Returns:
            Plotly Figure object.
        """
        result = analysis.result
        if not result.points:
            raise ValueError("Result must have points to render")

        geometry = result.geometry
        colors = StyleConfig.LINE_COLORS
        fig = go.Figure()
        lowest_y = [result.lowest_point.y]

        if show_no_load:
            lowest_y.append(analysis.no_load_result.lowest_point.y)
            fig.add_trace(
                self._line_trace(
                    points=analysis.no_load_result.points,
                    name="No load",
                    color=colors["no_load"],
                    dash="dot",
                )
            )

        if show_feet_line:
            lowest_y.append(min(p.y for p in analysis.feet_line))
            fig.add_trace(
                self._line_trace(
                    points=analysis.feet_line,
                    name="Feet line",
                    color=colors["feet"],
                    dash="dash",
                )
            )

        if show_safety_line:
            lowest_y.append(min(p.y for p in analysis.safety_line))
            fig.add_trace(
                self._line_trace(
                    points=analysis.safety_line,
                    name="Safety line",
                    color=colors["safety"],
                    dash="dash",
                )
            )

        # Loaded cable on top of the reference lines
        fig.add_trace(
            self._line_trace(
                points=result.points,
                name="Cable",
                color=colors["cable"],
                width=3,
            )
        )

        # Anchors
        fig.add_trace(
            go.Scatter(
                x=[0.0, geometry.span_m],
                y=[geometry.start_height_m, geometry.end_height_m],
                mode="markers",
                marker=dict(size=10, color=colors["anchor"], symbol="square"),
                name="Anchors",
                hovertemplate="Anchor<br>Height: %{y:.1f}m<extra></extra>",
            )
        )

        # Rider marker at the static load position
        load_x = analysis.scenario.load_position_m
        rider = min(result.points, key=lambda p: abs(p.x - load_x))
        fig.add_trace(
            go.Scatter(
                x=[rider.x],
                y=[rider.y],
                mode="markers",
                marker=dict(size=12, color=colors["rider"]),
                name="Rider",
                hovertemplate=(
                    f"Rider<br>Distance: %{{x:.1f}}m<br>Height: %{{y:.2f}}m<br>"
                    f"Speed: {analysis.speed_at_load_kmh:.1f}km/h<extra></extra>"
                ),
            )
        )

        lowest = result.lowest_point
        fig.add_annotation(
            x=lowest.x,
            y=lowest.y,
            text=f"Max sag {result.max_sag_m:.2f}m",
            showarrow=True,
            arrowhead=2,
            ay=40,
        )

        min_y = min(lowest_y) - ChartConfig.HEIGHT_PADDING_BOTTOM_M
        max_y = max(geometry.start_height_m, geometry.end_height_m) + ChartConfig.HEIGHT_PADDING_TOP_M

        fig.update_layout(
            title=dict(text=f"{analysis.scenario.cable_name} - {analysis.tension_kg:.0f}kg", x=0.5),
            xaxis=dict(
                title="Distance (m)",
                showgrid=True,
                gridcolor=StyleConfig.GRID_COLOR,
                range=[0, geometry.span_m],
            ),
            yaxis=dict(
                title="Height (m)",
                showgrid=True,
                gridcolor=StyleConfig.GRID_COLOR,
                range=[min_y, max_y],
            ),
            showlegend=True,
            legend=dict(
                orientation="h",
                yanchor="bottom",
                y=1.02,
                xanchor="center",
                x=0.5,
            ),
            width=self.width,
            height=self.height,
            margin=dict(l=50, r=30, t=80, b=70),
            plot_bgcolor="white",
        )

        stats_text = (
            f"Length: {result.cable_length_m:.1f}m | Max tension: {result.max_tension_kg:.0f}kg | "
            f"Safety factor: {analysis.safety_factor:.1f}"
        )
        fig.add_annotation(
            xref="paper",
            yref="paper",
            x=0.5,
            y=-0.15,
            text=stats_text,
            showarrow=False,
            font=dict(size=11, color=colors["safety"] if analysis.is_safety_critical else "black"),
        )

        return fig

    def render_speed(self, result: ZiplineResult) -> go.Figure:
        """Render rider speed along the span.

        Args:
            result: Engine result with a travel profile

        Returns:
            Plotly Figure object.
        """
        if not result.travel_profile:
            raise ValueError("Result must have a travel profile to render speed")

        distances = [p.x for p in result.travel_profile]
        speeds = result.speeds_kmh
        color = StyleConfig.LINE_COLORS["speed"]

        fig = go.Figure()
        fig.add_trace(
            go.Scatter(
                x=distances,
                y=speeds,
                fill="tozeroy",
                fillcolor=f"rgba{self._hex_to_rgba(hex_color=color, alpha=0.2)}",
                line=dict(color=color, width=2),
                name="Speed",
                hovertemplate="Distance: %{x:.0f}m<br>Speed: %{y:.1f}km/h<extra></extra>",
            )
        )

        fig.update_layout(
            title=dict(text=f"Max {result.max_speed_kmh:.1f}km/h | Finish {result.finish_speed_kmh:.1f}km/h", x=0.5),
            xaxis=dict(
                title="Distance (m)",
                showgrid=True,
                gridcolor=StyleConfig.GRID_COLOR,
            ),
            yaxis=dict(
                title="Speed (km/h)",
                showgrid=True,
                gridcolor=StyleConfig.GRID_COLOR,
                rangemode="tozero",
            ),
            showlegend=False,
            width=self.width,
            height=self.height,
            margin=dict(l=50, r=30, t=50, b=50),
            plot_bgcolor="white",
        )

        return fig

    def _line_trace(
        self,
        points: list[ProfilePoint],
        name: str,
        color: str,
        width: int = 2,
        dash: str = "solid",
    ) -> go.Scatter:
        """Line trace through profile points."""
        return go.Scatter(
            x=[p.x for p in points],
            y=[p.y for p in points],
            mode="lines",
            line=dict(color=color, width=width, dash=dash),
            name=name,
            hovertemplate=f"{name}<br>Distance: %{{x:.1f}}m<br>Height: %{{y:.2f}}m<extra></extra>",
        )

    def _hex_to_rgba(self, hex_color: str, alpha: float) -> tuple:
        """Convert hex color to RGBA tuple."""
        hex_color = hex_color.lstrip("#")
        r = int(hex_color[0:2], 16)
        g = int(hex_color[2:4], 16)
        b = int(hex_color[4:6], 16)
        return (r, g, b, alpha)
