"""Tests for the PuLP unit mix solver."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from engine.mix_solver import solve_unit_mix
from models.building import LayoutType
from models.unit_mix import UnitTypeCounts


class TestSolveUnitMix:
    def test_fills_width_and_tracks_mix(self):
        result = solve_unit_mix(UnitTypeCounts(10, 10, 0, 0), 280, LayoutType.DOUBLE_LOADED)
        assert result.exit_reason == "Optimal"
        assert result.required_width <= result.available_width + 2
        assert result.optimized["studio"] >= 9
        assert result.optimized["oneBed"] >= 9

    def test_zero_target_types_stay_zero(self):
        result = solve_unit_mix(UnitTypeCounts(0, 20, 20, 0), 280, LayoutType.DOUBLE_LOADED)
        assert result.exit_reason == "Optimal"
        assert result.optimized["studio"] == 0
        assert result.optimized["threeBed"] == 0

    def test_zero_targets_skip_solver(self):
        result = solve_unit_mix(UnitTypeCounts(), 280, LayoutType.DOUBLE_LOADED)
        assert result.exit_reason == "Not Solved"
        assert result.total_optimized == 0
        assert result.utilization_pct == 0


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
