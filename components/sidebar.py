"""Global sidebar controls for project name and location."""

import streamlit as st
from dataclasses import dataclass

from data.reference_cities import REFERENCE_CITIES, get_city
from data.session_store import (
    get_project_name, set_project_name, get_cost_factors, get_nearest_city,
    get_location_label, set_location,
)
from engine.location import resolve_cost_factors


@dataclass
class SidebarState:
    project_name: str
    property_factor: float
    factory_factor: float


def _render_location_input():
    mode = st.radio(
        "Locate by",
        options=["Reference city", "Coordinates"],
        horizontal=True,
        key="sidebar_location_mode",
    )

    if mode == "Reference city":
        names = [c.name for c in REFERENCE_CITIES]
        name = st.selectbox("City", options=names, index=names.index("Boise, ID"), key="sidebar_city")
        if st.button("Use city", key="sidebar_use_city"):
            city = get_city(name)
            set_location(name, *resolve_cost_factors(city.lat, city.lng))
        return

    col1, col2 = st.columns(2)
    with col1:
        lat = st.number_input("Latitude", min_value=-90.0, max_value=90.0, value=43.615,
                              format="%.4f", key="sidebar_lat")
    with col2:
        lng = st.number_input("Longitude", min_value=-180.0, max_value=180.0, value=-116.2023,
                              format="%.4f", key="sidebar_lng")
    if st.button("Resolve location", key="sidebar_resolve"):
        try:
            factors = resolve_cost_factors(lat, lng)
        except ValueError as exc:
            st.error(str(exc))
        else:
            set_location(f"{lat:.4f}, {lng:.4f}", *factors)


def render_sidebar() -> SidebarState:
    """Render the global sidebar controls and return current state."""
    with st.sidebar:
        st.title("Modular Configurator")
        st.divider()

        name = st.text_input("Project Name", value=get_project_name(), key="sidebar_project_name")
        if name != get_project_name():
            set_project_name(name)

        st.subheader("Location")
        _render_location_input()

        st.divider()

        property_factor, factory_factor = get_cost_factors()
        nearest = get_nearest_city()
        if nearest:
            st.caption(f"Location: {get_location_label()}")
            st.caption(f"Market: {nearest.name} ({nearest.distance_miles:,.0f} mi)")
        else:
            st.caption("Location: default market")
        st.caption(f"Property factor: {property_factor:.2f}")
        st.caption(f"Factory factor: {factory_factor:.2f}")

    return SidebarState(
        project_name=name,
        property_factor=property_factor,
        factory_factor=factory_factor,
    )
