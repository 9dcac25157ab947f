"""Plotly chart components that render engine output."""

from zipline_planner.ui.profile_chart import ProfileChart

__all__ = ["ProfileChart"]
