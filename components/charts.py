"""Plotly chart builders for the Modular Project Configurator."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import Dict, List

from config.defaults import UNIT_TYPES, UNIT_TYPE_LABELS
from engine.cost_engine import CostComparison
from engine.floorplan import (
    CELL_VOID, CELL_CORRIDOR, CELL_CORE, CELL_LABELS, FloorPlanEfficiency, grid_to_frame,
)

# Cell label -> colour; dict order sets the heatmap z index
CELL_COLORS = {
    CELL_VOID: "#F3F4F6",
    CELL_CORRIDOR: "#D1D5DB",
    CELL_CORE: "#374151",
    CELL_LABELS["studio"]: "#4A90D9",
    CELL_LABELS["oneBed"]: "#7BC67E",
    CELL_LABELS["twoBed"]: "#F5C542",
    CELL_LABELS["threeBed"]: "#E8734A",
}


def _discrete_colorscale(colors: List[str]) -> List[list]:
    """Step colorscale so integer z values map to one flat colour each."""
    n = len(colors)
    scale = []
    for i, color in enumerate(colors):
        scale.append([i / n, color])
        scale.append([(i + 1) / n, color])
    return scale


def floor_plan_heatmap(grid: List[List[str]], grid_resolution: float = 2) -> go.Figure:
    """Heatmap of a rasterized floor plan, one colour per cell label."""
    df = grid_to_frame(grid, grid_resolution)
    labels = list(CELL_COLORS.keys())
    index = {label: i for i, label in enumerate(labels)}
    z = [[index.get(cell, 0) for cell in row] for row in df.values]

    fig = go.Figure(data=go.Heatmap(
        z=z,
        x=list(df.columns),
        y=list(df.index),
        text=df.values.tolist(),
        colorscale=_discrete_colorscale(list(CELL_COLORS.values())),
        zmin=-0.5,
        zmax=len(labels) - 0.5,
        showscale=False,
        hovertemplate="x: %{x} ft<br>y: %{y} ft<br>%{text}<extra></extra>",
    ))
    fig.update_layout(
        title="Typical Floor Plan",
        xaxis_title="Length (ft)",
        yaxis_title="Depth (ft)",
        yaxis=dict(autorange="reversed", scaleanchor="x"),
        height=max(250, len(df.index) * 8 + 120),
    )
    return fig


def unit_mix_bar(targets: Dict[str, int], optimized: Dict[str, int]) -> go.Figure:
    """Grouped bar chart of target vs optimized unit counts."""
    df = pd.DataFrame([
        {"Unit Type": UNIT_TYPE_LABELS[t], "Target": targets[t], "Optimized": optimized[t]}
        for t in UNIT_TYPES
    ])
    fig = px.bar(
        df, x="Unit Type", y=["Target", "Optimized"],
        barmode="group",
        labels={"value": "Units per floor", "variable": ""},
        title="Target vs Optimized Unit Mix",
        color_discrete_map={"Target": "#4A90D9", "Optimized": "#E8734A"},
    )
    fig.update_layout(legend_title_text="", height=380)
    return fig


def cost_comparison_bar(costs: CostComparison) -> go.Figure:
    """Bar chart comparing traditional and modular total cost."""
    fig = go.Figure(data=[go.Bar(
        x=["Traditional", "Modular"],
        y=[costs.site_cost, costs.modular_cost],
        marker_color=["#4A90D9", "#E8734A"],
        text=[f"${costs.site_cost / 1e6:.1f}M", f"${costs.modular_cost / 1e6:.1f}M"],
        textposition="auto",
    )])
    fig.update_layout(
        title="Construction Cost",
        yaxis_title="USD",
        height=380,
    )
    return fig


def efficiency_donut(efficiency: FloorPlanEfficiency, title: str = "Floor Plate Split") -> go.Figure:
    """Donut of unit, corridor and core area."""
    other = max(0.0, efficiency.total_footprint - efficiency.unit_area
                - efficiency.corridor_area - efficiency.core_area)
    fig = go.Figure(data=[go.Pie(
        labels=["Units", "Corridor", "Cores", "Other"],
        values=[efficiency.unit_area, efficiency.corridor_area, efficiency.core_area, other],
        hole=0.6,
        marker_colors=["#7BC67E", "#D1D5DB", "#374151", "#F3F4F6"],
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=350,
        showlegend=True,
        annotations=[dict(text=f"{efficiency.net_to_gross_pct:.0f}% NTG", x=0.5, y=0.5,
                          font_size=16, showarrow=False)],
    )
    return fig
