"""Tab 3: Cost Analysis — traditional vs modular cost and schedule."""

import streamlit as st
import pandas as pd

from data.session_store import get_building_config, get_targets
from data.validator import validate_project
from engine.cost_engine import format_currency, format_mega, format_months
from engine.project_engine import run_project
from components.charts import cost_comparison_bar
from components.metrics_cards import render_metric_row, render_alert_card
from components.tables import render_styled_table


def render(sidebar_state):
    """Render the Cost Analysis tab."""
    st.header("Cost Analysis")

    config = get_building_config()
    targets = get_targets()
    if not validate_project(config, targets).is_valid:
        st.info("Fix the project configuration in the Project tab first.")
        return

    result = run_project(config, targets, sidebar_state.property_factor, sidebar_state.factory_factor)
    costs = result.costs
    gsf = result.building_gsf

    if costs.total_units == 0:
        render_alert_card("No units fit this configuration — costs are zero.", "info")

    render_metric_row([
        {"label": "Traditional", "value": format_mega(costs.site_cost)},
        {"label": "Modular", "value": format_mega(costs.modular_cost)},
        {"label": "Savings", "value": format_mega(costs.savings),
         "delta": f"{costs.savings_pct:.1f}%",
         "delta_color": "normal" if costs.is_savings else "inverse"},
        {"label": "Schedule", "value": format_months(costs.modular_build_months),
         "delta": f"-{costs.time_savings_months} mo", "delta_color": "inverse"},
    ])

    col1, col2 = st.columns([3, 2])
    with col1:
        st.plotly_chart(cost_comparison_bar(costs), use_container_width=True)
    with col2:
        df = pd.DataFrame([
            {"Metric": "Cost / SF", "Traditional": format_currency(costs.site_cost_per_sf),
             "Modular": format_currency(costs.modular_cost_per_sf)},
            {"Metric": "Cost / Unit", "Traditional": format_currency(costs.site_cost_per_unit),
             "Modular": format_currency(costs.modular_cost_per_unit)},
            {"Metric": "Build Time", "Traditional": format_months(costs.site_build_months),
             "Modular": format_months(costs.modular_build_months)},
        ])
        render_styled_table(df, title="Unit Economics")

    st.subheader("Building Area")
    render_metric_row([
        {"label": "Total GSF", "value": f"{gsf.total_gsf:,.0f}"},
        {"label": "Unit GSF", "value": f"{gsf.total_unit_gsf:,.0f}"},
        {"label": "Common GSF", "value": f"{gsf.common_gsf:,.0f}"},
        {"label": "Podium GSF", "value": f"{gsf.total_podium_gsf:,.0f}"},
    ])
    st.caption(
        f"{gsf.residential_floors} residential floor(s), {gsf.gsf_per_unit:,.0f} GSF per unit; "
        f"scale vs base project: {costs.unit_ratio:.2f}x units, {costs.floor_multiplier:.2f}x floors"
    )
