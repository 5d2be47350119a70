"""Tests for the end-to-end project run."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import math

from engine.project_engine import run_project
from models.building import BuildingConfig, LayoutType
from models.unit_mix import UnitTypeCounts


class TestRunProject:
    def test_default_project(self):
        config = BuildingConfig()
        targets = UnitTypeCounts(40, 40, 40, 0)
        result = run_project(config, targets, 0.87, 0.87)

        assert result.optimization.optimized == UnitTypeCounts(40, 30, 0, 0)
        assert result.floor_plan.total_units == 70
        assert result.floor_plan.cores_needed == 2
        assert result.costs.total_units == 70
        assert len(result.grid) == math.ceil(result.floor_plan.building_depth / 2)
        assert result.floor_plan_notes

    def test_layout_flows_through(self):
        config = BuildingConfig(building_length=200, layout_type=LayoutType.WRAP)
        result = run_project(config, UnitTypeCounts(5, 5, 0, 0), 1.0, 1.0, grid_resolution=4)
        assert result.optimization.lobby_width == 10
        assert result.floor_plan.layout_type == LayoutType.WRAP
        assert len(result.grid[0]) == 50

    def test_empty_project(self):
        result = run_project(BuildingConfig(), UnitTypeCounts(), 1.0, 1.0)
        assert result.optimization.total_optimized == 0
        assert result.floor_plan.placed_units == []
        assert result.efficiency.core_area == 0
        assert result.costs.site_cost == 0
        assert result.building_gsf.total_gsf == 0


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
