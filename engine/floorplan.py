"""Floorplan placement — lay out a unit mix along the corridor, place cores, rasterize."""

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import pandas as pd

from config.defaults import UNIT_TYPES, DEFAULT_GRID_RESOLUTION
from engine.unit_optimizer import CountsLike, as_counts
from models.building import LayoutType
from models.floorplan import CorePosition, FloorPlan, PlacedUnit
from models.geometry import BuildingGeometry

log = logging.getLogger(__name__)

NORTH, EAST, SOUTH, WEST = "north", "east", "south", "west"
WRAP_SIDES = [NORTH, EAST, SOUTH, WEST]
# Wrap renders as two bands: north/east draw in the north band, south/west in the south band
NORTH_BAND_SIDES = (NORTH, EAST)

CELL_VOID = "VOID"
CELL_CORRIDOR = "CORR"
CELL_CORE = "CORE"
CELL_LABELS = {
    "studio": "STUDIO",
    "oneBed": "ONEBR",
    "twoBed": "TWOBR",
    "threeBed": "3BDRM",
}
UNIT_ID_PREFIX = {
    "studio": "STU",
    "oneBed": "1BR",
    "twoBed": "2BR",
    "threeBed": "3BR",
}


@dataclass(frozen=True)
class PoolUnit:
    unit_id: str
    unit_type: str
    width: float
    depth: float

    def placed(self, x: float, side: str) -> PlacedUnit:
        return PlacedUnit(self.unit_id, self.unit_type, self.width, self.depth, x, side)


@dataclass
class FloorPlanEfficiency:
    total_footprint: float
    unit_area: float
    corridor_area: float
    core_area: float
    net_to_gross_pct: float
    circulation_pct: float
    units_per_core: int


@dataclass(frozen=True)
class WrapCursor:
    """Placement state for wrap layouts: the side being filled and the offset along it."""
    side: str = NORTH
    offset: float = 0.0

    def rotated(self) -> "WrapCursor":
        next_side = WRAP_SIDES[(WRAP_SIDES.index(self.side) + 1) % len(WRAP_SIDES)]
        return WrapCursor(next_side, 0.0)

    def place(self, width: float, building_length: float) -> Tuple[float, str, "WrapCursor"]:
        """Return (x, side, next cursor) for a unit of the given width.

        A unit that would run past the building length moves to the start of
        the next side. A unit wider than the whole length still starts at 0.
        """
        cursor = self
        if cursor.offset > 0 and cursor.offset + width > building_length:
            cursor = cursor.rotated()
        return cursor.offset, cursor.side, WrapCursor(cursor.side, cursor.offset + width)


def calculate_cores_needed(total_units: int, geometry: Optional[BuildingGeometry] = None) -> int:
    geometry = geometry or BuildingGeometry.default()
    if total_units <= geometry.min_units_per_core:
        return 1
    return math.ceil(total_units / geometry.max_units_per_core)


def compute_core_positions(
    cores_needed: int,
    building_length: float,
    geometry: Optional[BuildingGeometry] = None,
) -> List[CorePosition]:
    """One core is centered; several are centered at even fractions i/(n+1) of the length."""
    geometry = geometry or BuildingGeometry.default()
    half = geometry.core_width / 2
    if cores_needed == 1:
        return [CorePosition(building_length / 2 - half, geometry.core_width)]
    spacing = building_length / (cores_needed + 1)
    return [
        CorePosition(spacing * i - half, geometry.core_width)
        for i in range(1, cores_needed + 1)
    ]


def build_unit_pool(optimized: CountsLike, geometry: Optional[BuildingGeometry] = None) -> List[PoolUnit]:
    """Every unit instance, widest first (stable within a width)."""
    geometry = geometry or BuildingGeometry.default()
    optimized = as_counts(optimized)
    pool = [
        PoolUnit(f"{UNIT_ID_PREFIX[t]}-{i + 1}", t, geometry.width(t), geometry.depth(t))
        for t in UNIT_TYPES
        for i in range(optimized[t])
    ]
    return sorted(pool, key=lambda u: -u.width)


def advance_past_cores(offset: float, width: float, cores: List[CorePosition]) -> float:
    """Move offset past any core that [offset, offset + width) would overlap."""
    moved = True
    while moved:
        moved = False
        for core in cores:
            if core.overlaps(offset, offset + width):
                offset = core.x_end
                moved = True
                break
    return offset


def _place_double_loaded(pool, cores) -> Tuple[List[PlacedUnit], List[PlacedUnit]]:
    north, south = [], []
    offsets = {NORTH: 0.0, SOUTH: 0.0}
    side = NORTH
    for unit in pool:
        x = advance_past_cores(offsets[side], unit.width, cores)
        (north if side == NORTH else south).append(unit.placed(x, side))
        offsets[side] = x + unit.width
        side = SOUTH if side == NORTH else NORTH
    return north, south


def _place_single_loaded(pool, cores) -> Tuple[List[PlacedUnit], List[PlacedUnit]]:
    north = []
    offset = 0.0
    for unit in pool:
        x = advance_past_cores(offset, unit.width, cores)
        north.append(unit.placed(x, NORTH))
        offset = x + unit.width
    return north, []


def _place_wrap(pool, building_length) -> Tuple[List[PlacedUnit], List[PlacedUnit]]:
    north, south = [], []
    cursor = WrapCursor()
    for unit in pool:
        x, side, cursor = cursor.place(unit.width, building_length)
        (north if side in NORTH_BAND_SIDES else south).append(unit.placed(x, side))
    return north, south


def generate_floor_plan(
    optimized: CountsLike,
    building_length: float,
    layout_type=LayoutType.DOUBLE_LOADED,
    floors: int = 5,
    geometry: Optional[BuildingGeometry] = None,
) -> FloorPlan:
    """
    Place every unit of the optimized mix along the building length.

    Cores are positioned first; double- and single-loaded layouts step past
    any core a unit would overlap. Wrap layouts cycle north, east, south, west
    and render as two bands.
    """
    geometry = geometry or BuildingGeometry.default()
    layout = LayoutType.parse(layout_type)
    optimized = as_counts(optimized)
    corridor_width = geometry.corridor_width(layout.value)

    total_units = optimized.total
    if total_units == 0:
        # Empty floor: corridor only
        cores_needed, cores = 0, []
    else:
        cores_needed = calculate_cores_needed(total_units, geometry)
        cores = compute_core_positions(cores_needed, building_length, geometry)
    pool = build_unit_pool(optimized, geometry)

    if layout == LayoutType.DOUBLE_LOADED:
        north, south = _place_double_loaded(pool, cores)
    elif layout == LayoutType.SINGLE_LOADED:
        north, south = _place_single_loaded(pool, cores)
    else:
        north, south = _place_wrap(pool, building_length)

    max_depth = max([u.depth for u in pool] + [geometry.corridor_fallback_depth])
    if layout == LayoutType.DOUBLE_LOADED:
        building_depth = max_depth * 2 + corridor_width
    else:
        building_depth = max_depth + corridor_width

    log.debug(
        "Floor plan %s: %d units, %d core(s), %.0f x %.0f ft",
        layout.value, total_units, cores_needed, building_length, building_depth,
    )
    return FloorPlan(
        layout_type=layout,
        north_side=north,
        south_side=south,
        core_positions=cores,
        corridor_width=corridor_width,
        building_length=building_length,
        building_depth=building_depth,
        total_units=total_units,
        cores_needed=cores_needed,
        units_per_core=math.ceil(total_units / cores_needed) if cores_needed else 0,
        floors=floors,
    )


def _fill(grid: List[List[str]], rows: Tuple[int, int], cols: Tuple[int, int], label: str):
    height = len(grid)
    width = len(grid[0]) if grid else 0
    for y in range(max(0, rows[0]), min(height, rows[1])):
        for x in range(max(0, cols[0]), min(width, cols[1])):
            grid[y][x] = label


def _columns(x: float, width: float, resolution: float) -> Tuple[int, int]:
    return math.floor(x / resolution), math.ceil((x + width) / resolution)


def generate_floor_plan_grid(
    floor_plan: FloorPlan,
    grid_resolution: float = DEFAULT_GRID_RESOLUTION,
    geometry: Optional[BuildingGeometry] = None,
) -> List[List[str]]:
    """Rasterize a floor plan into rows x columns of cell labels.

    Corridor runs through the middle of the depth, north units above it,
    south units below it. Cores are drawn last and overwrite anything under them.
    """
    if grid_resolution <= 0:
        raise ValueError(f"Grid resolution must be positive, got {grid_resolution}")
    geometry = geometry or BuildingGeometry.default()

    length = floor_plan.building_length
    depth = floor_plan.building_depth
    cols = math.ceil(length / grid_resolution)
    rows = math.ceil(depth / grid_resolution)
    grid = [[CELL_VOID] * cols for _ in range(rows)]

    mid = depth / 2
    corridor_start = math.floor((mid - floor_plan.corridor_width / 2) / grid_resolution)
    corridor_end = math.ceil((mid + floor_plan.corridor_width / 2) / grid_resolution)
    _fill(grid, (corridor_start, corridor_end), (0, cols), CELL_CORRIDOR)

    for unit in floor_plan.north_side:
        _fill(grid, (0, corridor_start), _columns(unit.x, unit.width, grid_resolution),
              CELL_LABELS[unit.unit_type])

    for unit in floor_plan.south_side:
        _fill(grid, (corridor_end, rows), _columns(unit.x, unit.width, grid_resolution),
              CELL_LABELS[unit.unit_type])

    core_start = math.floor((mid - geometry.core_depth / 2) / grid_resolution)
    core_end = math.ceil((mid + geometry.core_depth / 2) / grid_resolution)
    for core in floor_plan.core_positions:
        _fill(grid, (core_start, core_end), _columns(core.x, core.width, grid_resolution), CELL_CORE)

    return grid


def grid_to_frame(grid: List[List[str]], grid_resolution: float = DEFAULT_GRID_RESOLUTION) -> pd.DataFrame:
    """Grid as a DataFrame indexed by depth (ft) with length (ft) columns."""
    if not grid:
        return pd.DataFrame()
    return pd.DataFrame(
        grid,
        index=[round(r * grid_resolution, 2) for r in range(len(grid))],
        columns=[round(c * grid_resolution, 2) for c in range(len(grid[0]))],
    )


def grid_label_counts(grid: List[List[str]]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for row in grid:
        for label in row:
            counts[label] = counts.get(label, 0) + 1
    return counts


def calculate_floor_plan_efficiency(
    floor_plan: FloorPlan,
    optimized: CountsLike,
    geometry: Optional[BuildingGeometry] = None,
) -> FloorPlanEfficiency:
    """Footprint split into unit, corridor and core area."""
    geometry = geometry or BuildingGeometry.default()
    optimized = as_counts(optimized)

    total_footprint = floor_plan.building_length * floor_plan.building_depth
    corridor_area = floor_plan.building_length * floor_plan.corridor_width
    core_area = floor_plan.cores_needed * geometry.core_width * geometry.core_depth
    unit_area = sum(optimized[t] * geometry.width(t) * geometry.depth(t) for t in UNIT_TYPES)

    if total_footprint > 0:
        net_to_gross = unit_area / total_footprint * 100
        circulation = (corridor_area + core_area) / total_footprint * 100
    else:
        net_to_gross = circulation = 0.0

    return FloorPlanEfficiency(
        total_footprint=total_footprint,
        unit_area=unit_area,
        corridor_area=corridor_area,
        core_area=core_area,
        net_to_gross_pct=net_to_gross,
        circulation_pct=circulation,
        units_per_core=math.ceil(optimized.total / floor_plan.cores_needed) if floor_plan.cores_needed else 0,
    )


def adjacency_conflicts(
    floor_plan: FloorPlan,
    geometry: Optional[BuildingGeometry] = None,
) -> List[Tuple[PlacedUnit, PlacedUnit]]:
    """Touching neighbours on the same side whose unit types do not pair well."""
    geometry = geometry or BuildingGeometry.default()
    by_side: Dict[str, List[PlacedUnit]] = {}
    for unit in floor_plan.placed_units:
        by_side.setdefault(unit.side, []).append(unit)

    conflicts = []
    for units in by_side.values():
        ordered = sorted(units, key=lambda u: u.x)
        for left, right in zip(ordered, ordered[1:]):
            if math.isclose(left.x_end, right.x) and not geometry.compatible(left.unit_type, right.unit_type):
                conflicts.append((left, right))
    return conflicts
