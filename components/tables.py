"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd
from typing import List, Optional

from config.defaults import UNIT_TYPES, UNIT_TYPE_LABELS
from models.floorplan import PlacedUnit


def render_styled_table(
    df: pd.DataFrame,
    title: Optional[str] = None,
    height: Optional[int] = None,
    use_container_width: bool = True,
):
    """Render a styled, non-editable dataframe."""
    if title:
        st.subheader(title)
    st.dataframe(df, height=height, use_container_width=use_container_width)


def render_comparison_table(df: pd.DataFrame, change_column: str = "Change"):
    """Render a comparison table with positive/negative highlighting."""
    def color_change(val):
        try:
            v = float(val)
            if v > 0:
                return "color: #155724; font-weight: bold"
            elif v < 0:
                return "color: #cc0000; font-weight: bold"
        except (ValueError, TypeError):
            pass
        return ""

    if change_column in df.columns:
        styled = df.style.map(color_change, subset=[change_column])
        st.dataframe(styled, use_container_width=True)
    else:
        st.dataframe(df, use_container_width=True)


def unit_mix_frame(targets, optimized, gsf_by_type) -> pd.DataFrame:
    return pd.DataFrame([
        {
            "Unit Type": UNIT_TYPE_LABELS[t],
            "Target": targets[t],
            "Optimized": optimized[t],
            "Change": optimized[t] - targets[t],
            "GSF": gsf_by_type[t],
        }
        for t in UNIT_TYPES
    ])


def placement_frame(units: List[PlacedUnit]) -> pd.DataFrame:
    return pd.DataFrame([
        {
            "Unit": u.unit_id,
            "Type": UNIT_TYPE_LABELS[u.unit_type],
            "Side": u.side.title(),
            "X (ft)": round(u.x, 1),
            "Width (ft)": u.width,
            "Depth (ft)": u.depth,
        }
        for u in units
    ])
