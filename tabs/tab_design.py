"""Tab 2: Design — optimized unit mix and typical floor plan."""

import streamlit as st
import pandas as pd

from config.defaults import UNIT_TYPES, UNIT_TYPE_LABELS
from data.session_store import (
    get_building_config, get_targets, get_grid_resolution, set_grid_resolution,
)
from data.validator import validate_project
from engine.floorplan import grid_label_counts
from engine.mix_solver import solve_unit_mix
from engine.project_engine import run_project
from components.charts import floor_plan_heatmap, unit_mix_bar, efficiency_donut
from components.metrics_cards import render_metric_row, render_alert_card
from components.tables import render_comparison_table, render_styled_table, placement_frame, unit_mix_frame


def _render_unit_mix(result):
    opt = result.optimization
    render_metric_row([
        {"label": "Optimized Units / Floor", "value": f"{opt.total_optimized}",
         "delta": f"{opt.total_optimized - result.targets.total:+d} vs target"},
        {"label": "Width Used", "value": f"{opt.required_width:,.0f} / {opt.available_width:,.0f} ft"},
        {"label": "Utilization", "value": f"{opt.utilization_pct:.1f}%"},
        {"label": "Unit GSF / Floor", "value": f"{opt.total_unit_gsf:,.0f}"},
    ])

    col1, col2 = st.columns([3, 2])
    with col1:
        st.plotly_chart(
            unit_mix_bar(result.targets.as_dict(), opt.optimized.as_dict()),
            use_container_width=True,
        )
    with col2:
        render_comparison_table(unit_mix_frame(result.targets, opt.optimized, opt.gsf_by_type))
        with st.expander("How was this mix chosen?", expanded=False):
            for step in opt.explanation_steps:
                st.markdown(f"- {step}")

    if opt.exit_reason == "iteration_cap":
        render_alert_card(
            "The optimizer hit its iteration limit before the mix fit the building. "
            "Reduce the targets or lengthen the building.",
            "warning",
        )


def _render_solver_comparison(result):
    with st.expander("Compare with exact integer solver", expanded=False):
        st.caption("Solves the same fit as an integer program (PuLP/CBC) for reference.")
        if not st.button("Run solver", key="design_run_solver"):
            return
        with st.spinner("Solving..."):
            exact = solve_unit_mix(
                result.targets, result.config.building_length, result.config.layout_type,
            )
        if exact.exit_reason != "Optimal":
            st.warning(f"Solver status: {exact.exit_reason}")
            return
        df = pd.DataFrame([
            {
                "Unit Type": UNIT_TYPE_LABELS[t],
                "Local Search": result.optimization.optimized[t],
                "Exact Solver": exact.optimized[t],
            }
            for t in UNIT_TYPES
        ])
        render_styled_table(df)
        st.caption(
            f"Width used — local search {result.optimization.required_width:,.0f} ft, "
            f"solver {exact.required_width:,.0f} ft"
        )


def _render_floor_plan(result, resolution):
    plan = result.floor_plan
    eff = result.efficiency

    render_metric_row([
        {"label": "Building Depth", "value": f"{plan.building_depth:.0f} ft"},
        {"label": "Corridor", "value": f"{plan.corridor_width:.0f} ft"},
        {"label": "Cores", "value": f"{plan.cores_needed}"},
        {"label": "Units / Core", "value": f"{plan.units_per_core}"},
    ])

    if result.grid:
        st.plotly_chart(floor_plan_heatmap(result.grid, resolution), use_container_width=True)
    else:
        st.info("Nothing to draw for this configuration.")

    for note in result.floor_plan_notes:
        st.caption(note)
    if plan.layout_type.value == "wrap":
        st.caption("Wrap layouts are drawn as two bands: north/east above the corridor, south/west below.")

    col1, col2 = st.columns([2, 3])
    with col1:
        st.plotly_chart(efficiency_donut(eff), use_container_width=True)
    with col2:
        render_metric_row([
            {"label": "Net-to-Gross", "value": f"{eff.net_to_gross_pct:.1f}%"},
            {"label": "Circulation", "value": f"{eff.circulation_pct:.1f}%"},
        ])
        counts = grid_label_counts(result.grid)
        st.caption("Grid cells: " + ", ".join(f"{k} {v}" for k, v in sorted(counts.items())))

    with st.expander("Placed units", expanded=False):
        render_styled_table(placement_frame(plan.placed_units))


def render(sidebar_state):
    """Render the Design tab."""
    st.header("Design")

    config = get_building_config()
    targets = get_targets()
    if not validate_project(config, targets).is_valid:
        st.info("Fix the project configuration in the Project tab first.")
        return

    resolution = st.select_slider(
        "Grid resolution (ft per cell)", options=[1, 2, 4], value=get_grid_resolution(),
        key="design_resolution",
    )
    set_grid_resolution(resolution)

    result = run_project(
        config, targets, sidebar_state.property_factor, sidebar_state.factory_factor, resolution,
    )

    st.subheader("Unit Mix")
    _render_unit_mix(result)
    _render_solver_comparison(result)

    st.divider()
    st.subheader("Typical Floor Plan")
    _render_floor_plan(result, resolution)
