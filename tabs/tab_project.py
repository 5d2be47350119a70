"""Tab 1: Project — building configuration and target unit mix."""

import streamlit as st

from config.defaults import (
    UNIT_TYPES, UNIT_TYPE_LABELS, LOBBY_TYPES, MIN_BUILDING_LENGTH, MAX_BUILDING_LENGTH,
    MIN_FLOORS, MAX_FLOORS, MAX_UNITS_PER_TYPE,
)
from data.session_store import (
    get_building_config, get_targets, set_building_config, set_targets,
)
from data.validator import validate_project
from engine.unit_optimizer import default_targets, lobby_width, required_width
from components.metrics_cards import render_metric_row, render_validation
from models.building import BuildingConfig, LayoutType
from models.unit_mix import UnitTypeCounts


def _render_building_inputs(config: BuildingConfig) -> BuildingConfig:
    col1, col2 = st.columns(2)
    with col1:
        length = st.slider(
            "Building Length (ft)",
            min_value=MIN_BUILDING_LENGTH, max_value=MAX_BUILDING_LENGTH,
            value=int(config.building_length), step=2,
            key="project_length",
        )
        layout_keys = [lt.value for lt in LayoutType]
        layout = st.selectbox(
            "Corridor Layout",
            options=layout_keys,
            format_func=lambda k: f"{LOBBY_TYPES[k]['name']} — {LOBBY_TYPES[k]['description']}",
            index=layout_keys.index(config.layout_type.value),
            key="project_layout",
        )
    with col2:
        floors = st.number_input(
            "Floors", min_value=MIN_FLOORS, max_value=MAX_FLOORS,
            value=int(config.floors), step=1, key="project_floors",
        )
        podium = st.number_input(
            "Podium Floors", min_value=0, max_value=MAX_FLOORS - 1,
            value=int(config.podium_count), step=1, key="project_podium",
        )
        common = st.slider(
            "Common Area (%)", min_value=0, max_value=30,
            value=int(config.common_area_pct), key="project_common",
        )

    return BuildingConfig(
        building_length=length,
        layout_type=LayoutType.parse(layout),
        floors=int(floors),
        common_area_pct=common,
        podium_count=int(podium),
    )


def _render_target_inputs(targets: UnitTypeCounts) -> UnitTypeCounts:
    with st.expander("Start from default mix", expanded=False):
        total = st.number_input("Total units per floor", min_value=0, max_value=400, value=40,
                                key="project_default_total")
        if st.button("Apply default mix", key="project_apply_default"):
            mix = default_targets(int(total))
            for t in UNIT_TYPES:
                st.session_state[f"project_target_{t}"] = mix[t]

    cols = st.columns(len(UNIT_TYPES))
    values = {}
    for col, t in zip(cols, UNIT_TYPES):
        key = f"project_target_{t}"
        if key not in st.session_state:
            st.session_state[key] = targets[t]
        with col:
            values[t] = st.number_input(
                UNIT_TYPE_LABELS[t], min_value=0, max_value=MAX_UNITS_PER_TYPE,
                step=1, key=key,
            )
    return UnitTypeCounts.from_dict(values)


def render(sidebar_state):
    """Render the Project configuration tab."""
    st.header(f"Project — {sidebar_state.project_name}")

    st.subheader("Building")
    config = _render_building_inputs(get_building_config())

    st.subheader("Target Unit Mix (per floor)")
    targets = _render_target_inputs(get_targets())

    validation = validate_project(config, targets)
    if render_validation(validation):
        set_building_config(config)
        set_targets(targets)

    available = config.building_length - lobby_width(config.layout_type)
    render_metric_row([
        {"label": "Target Units / Floor", "value": f"{targets.total}"},
        {"label": "Target Units Total", "value": f"{targets.total * config.residential_floors:,}"},
        {"label": "Required Width", "value": f"{required_width(targets):,.0f} ft"},
        {"label": "Available Width", "value": f"{available:,.0f} ft",
         "help": "Building length less the lobby allowance for the corridor layout"},
    ])
