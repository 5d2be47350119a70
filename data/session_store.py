"""Typed wrapper around st.session_state for the project configuration."""

import streamlit as st
from typing import Optional

from config.defaults import (
    DEFAULT_PROJECT_NAME, DEFAULT_TARGETS, DEFAULT_BUILDING_LENGTH, DEFAULT_FLOORS,
    DEFAULT_COMMON_AREA_PCT, DEFAULT_PODIUM_COUNT, DEFAULT_COST_FACTOR, DOUBLE_LOADED,
)
from models.building import BuildingConfig, LayoutType
from models.location import NearestCity
from models.unit_mix import UnitTypeCounts


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "project_name": DEFAULT_PROJECT_NAME,
        "location_label": "",
        "nearest_city": None,
        "property_factor": DEFAULT_COST_FACTOR,
        "factory_factor": DEFAULT_COST_FACTOR,
        "targets": dict(DEFAULT_TARGETS),
        "building_config": {
            "building_length": DEFAULT_BUILDING_LENGTH,
            "layout_type": DOUBLE_LOADED,
            "floors": DEFAULT_FLOORS,
            "common_area_pct": DEFAULT_COMMON_AREA_PCT,
            "podium_count": DEFAULT_PODIUM_COUNT,
        },
        "grid_resolution": 2,
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_project_name() -> str:
    return st.session_state.get("project_name", DEFAULT_PROJECT_NAME)


def get_targets() -> UnitTypeCounts:
    return UnitTypeCounts.from_dict(st.session_state.get("targets", DEFAULT_TARGETS))


def get_building_config() -> BuildingConfig:
    raw = dict(st.session_state.get("building_config", {}))
    if "layout_type" in raw:
        raw["layout_type"] = LayoutType.parse(raw["layout_type"])
    return BuildingConfig(**raw)


def get_cost_factors() -> tuple[float, float]:
    return (
        st.session_state.get("property_factor", DEFAULT_COST_FACTOR),
        st.session_state.get("factory_factor", DEFAULT_COST_FACTOR),
    )


def get_nearest_city() -> Optional[NearestCity]:
    return st.session_state.get("nearest_city")


def get_location_label() -> str:
    return st.session_state.get("location_label", "")


def get_grid_resolution() -> float:
    return st.session_state.get("grid_resolution", 2)


# --- Setters ---

def set_project_name(name: str):
    st.session_state["project_name"] = name


def set_targets(targets: UnitTypeCounts):
    st.session_state["targets"] = targets.as_dict()


def set_building_config(config: BuildingConfig):
    st.session_state["building_config"] = {
        "building_length": config.building_length,
        "layout_type": LayoutType.parse(config.layout_type).value,
        "floors": config.floors,
        "common_area_pct": config.common_area_pct,
        "podium_count": config.podium_count,
    }


def set_location(label: str, property_factor: float, factory_factor: float, nearest: NearestCity):
    """Store a resolved location and the cost factors it maps to."""
    st.session_state["location_label"] = label
    st.session_state["nearest_city"] = nearest
    set_cost_factors(property_factor, factory_factor)


def set_cost_factors(property_factor: float, factory_factor: float):
    st.session_state["property_factor"] = property_factor
    st.session_state["factory_factor"] = factory_factor


def set_grid_resolution(resolution: float):
    st.session_state["grid_resolution"] = resolution
