"""Project run — optimize the mix, place the floor plan, and price the result."""

from dataclasses import dataclass, field
from typing import List, Optional

from engine.cost_engine import CostComparison, compare_costs
from engine.explainer import explain_floor_plan
from engine.floorplan import (
    FloorPlanEfficiency, adjacency_conflicts, calculate_floor_plan_efficiency,
    generate_floor_plan, generate_floor_plan_grid,
)
from engine.unit_optimizer import (
    BuildingGSF, OptimizationResult, calculate_building_gsf, optimize_units,
)
from config.defaults import LOBBY_TYPES, DEFAULT_GRID_RESOLUTION
from models.building import BuildingConfig
from models.floorplan import FloorPlan
from models.geometry import BuildingGeometry
from models.unit_mix import UnitTypeCounts


@dataclass
class ProjectResult:
    config: BuildingConfig
    targets: UnitTypeCounts
    optimization: OptimizationResult
    floor_plan: FloorPlan
    grid: List[List[str]]
    efficiency: FloorPlanEfficiency
    building_gsf: BuildingGSF
    costs: CostComparison
    floor_plan_notes: List[str] = field(default_factory=list)


def run_project(
    config: BuildingConfig,
    targets: UnitTypeCounts,
    property_factor: float,
    factory_factor: float,
    grid_resolution: float = DEFAULT_GRID_RESOLUTION,
    geometry: Optional[BuildingGeometry] = None,
) -> ProjectResult:
    """Run every engine for the current configuration. Nothing is cached between calls."""
    geometry = geometry or BuildingGeometry.default()

    optimization = optimize_units(
        targets, config.building_length, config.layout_type, config.floors, geometry,
    )
    optimized = optimization.optimized

    floor_plan = generate_floor_plan(
        optimized, config.building_length, config.layout_type, config.floors, geometry,
    )
    grid = generate_floor_plan_grid(floor_plan, grid_resolution, geometry)
    efficiency = calculate_floor_plan_efficiency(floor_plan, optimized, geometry)
    building_gsf = calculate_building_gsf(
        optimized, config.floors, config.common_area_pct, config.podium_count, geometry,
    )
    costs = compare_costs(optimization.total_optimized, config.floors, property_factor, factory_factor)

    notes = explain_floor_plan(
        layout_name=LOBBY_TYPES[floor_plan.layout_type.value]["name"],
        total_units=floor_plan.total_units,
        cores_needed=floor_plan.cores_needed,
        north_count=len(floor_plan.north_side),
        south_count=len(floor_plan.south_side),
        building_depth=floor_plan.building_depth,
        adjacency_conflicts=len(adjacency_conflicts(floor_plan, geometry)),
    )

    return ProjectResult(
        config=config,
        targets=targets,
        optimization=optimization,
        floor_plan=floor_plan,
        grid=grid,
        efficiency=efficiency,
        building_gsf=building_gsf,
        costs=costs,
        floor_plan_notes=notes,
    )
