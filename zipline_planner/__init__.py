"""Zipline Planner - Sag, anchor loads and rider speed for a zipline.

Engineering pre-validation of a single loaded zipline span:
- Static cable profile from self-weight and a rider point load
- Temperature-corrected tension and recommended pre-tension
- Anchor reactions and maximum cable tension
- Rider speed along the span (gravity, air drag, rolling friction)

Modules:
    core: Physics engine and scenario analysis
    model: Data structures (Geometry, CableSpec, LoadState, ZiplineResult)
    ui: Plotly chart rendering of results

Example:
    from zipline_planner.core import calculate_zipline_curve

    result = calculate_zipline_curve(
        span_m=100.0,
        start_height_m=15.0,
        end_height_m=11.0,
        rope_mass_per_meter=0.86,
        tension_kg=800.0,
        load_weight_kg=122.0,
        load_position_m=50.0,
    )
"""
