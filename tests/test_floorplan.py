"""Tests for floorplan placement, rasterization, and efficiency."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import math

import pytest

from engine.floorplan import (
    WrapCursor,
    adjacency_conflicts,
    advance_past_cores,
    build_unit_pool,
    calculate_cores_needed,
    calculate_floor_plan_efficiency,
    compute_core_positions,
    generate_floor_plan,
    generate_floor_plan_grid,
    grid_label_counts,
    grid_to_frame,
)
from models.building import LayoutType
from models.floorplan import CorePosition
from models.unit_mix import UnitTypeCounts

KNOWN_LABELS = {"VOID", "CORR", "CORE", "STUDIO", "ONEBR", "TWOBR", "3BDRM"}


def make_counts(studio=0, one=0, two=0, three=0):
    return UnitTypeCounts(studio, one, two, three)


def double_loaded_plan():
    # 21 units at 280 ft, one core at x=128
    return generate_floor_plan(make_counts(11, 10, 0, 0), 280, LayoutType.DOUBLE_LOADED)


class TestCores:
    def test_cores_needed(self):
        assert calculate_cores_needed(20) == 1
        assert calculate_cores_needed(30) == 1
        assert calculate_cores_needed(31) == 1
        assert calculate_cores_needed(100) == 2
        assert calculate_cores_needed(121) == 3

    def test_single_core_centered(self):
        cores = compute_core_positions(1, 280)
        assert cores == [CorePosition(128, 24)]

    def test_multiple_cores_evenly_spaced(self):
        cores = compute_core_positions(2, 300)
        assert [c.x for c in cores] == [88, 188]
        assert all(c.width == 24 for c in cores)

    def test_twenty_units_one_core(self):
        plan = generate_floor_plan(make_counts(20, 0, 0, 0), 400, LayoutType.DOUBLE_LOADED)
        assert plan.cores_needed == 1
        assert plan.core_positions[0].x == 400 / 2 - 12

    def test_hundred_units_two_cores(self):
        plan = generate_floor_plan(make_counts(100, 0, 0, 0), 300, LayoutType.DOUBLE_LOADED)
        assert plan.cores_needed == 2
        assert [c.x for c in plan.core_positions] == [300 / 3 - 12, 300 * 2 / 3 - 12]
        assert plan.units_per_core == 50

    def test_advance_past_cores(self):
        cores = [CorePosition(20, 10), CorePosition(30, 10)]
        assert advance_past_cores(0, 10, cores) == 0
        assert advance_past_cores(15, 10, cores) == 40


class TestUnitPool:
    def test_widest_first(self):
        pool = build_unit_pool(make_counts(1, 1, 1, 1))
        assert [u.unit_type for u in pool] == ["threeBed", "twoBed", "oneBed", "studio"]

    def test_ids(self):
        pool = build_unit_pool(make_counts(2, 0, 0, 0))
        assert [u.unit_id for u in pool] == ["STU-1", "STU-2"]


class TestDoubleLoaded:
    def test_alternates_sides(self):
        plan = double_loaded_plan()
        assert len(plan.north_side) == 11
        assert len(plan.south_side) == 10
        assert all(u.side == "north" for u in plan.north_side)
        assert all(u.side == "south" for u in plan.south_side)

    def test_units_skip_core(self):
        plan = double_loaded_plan()
        core = plan.core_positions[0]
        for unit in plan.placed_units:
            assert not core.overlaps(unit.x, unit.x_end)
        north_x = [u.x for u in plan.north_side]
        assert north_x == [0, 14, 28, 42, 56, 70, 82, 94, 106, 152, 164]

    def test_width_containment(self):
        plan = double_loaded_plan()
        for unit in plan.placed_units:
            assert unit.x_end <= plan.building_length + 1e-9

    def test_depth(self):
        plan = double_loaded_plan()
        assert plan.building_depth == 2 * 32 + 6
        assert plan.corridor_width == 6


class TestSingleLoaded:
    def test_all_units_one_side(self):
        plan = generate_floor_plan(make_counts(5, 0, 0, 0), 280, LayoutType.SINGLE_LOADED)
        assert [u.x for u in plan.north_side] == [0, 12, 24, 36, 48]
        assert plan.south_side == []
        assert plan.building_depth == 28 + 8

    def test_steps_past_core(self):
        plan = generate_floor_plan(make_counts(12, 0, 0, 0), 280, LayoutType.SINGLE_LOADED)
        assert plan.north_side[9].x == 108
        assert plan.north_side[10].x == 152
        assert plan.north_side[11].x == 164


class TestWrap:
    def test_cursor_rotates(self):
        x, side, cursor = WrapCursor().place(30, 50)
        assert (x, side) == (0, "north")
        x, side, cursor = cursor.place(30, 50)
        assert (x, side) == (0, "east")
        assert cursor == WrapCursor("east", 30)

    def test_cursor_cycles_back_to_north(self):
        x, side, _ = WrapCursor("west", 40).place(20, 50)
        assert (x, side) == (0, "north")

    def test_oversized_unit_starts_at_zero(self):
        x, side, cursor = WrapCursor().place(80, 50)
        assert (x, side) == (0, "north")
        assert cursor.offset == 80

    def test_sides_fold_into_two_bands(self):
        plan = generate_floor_plan(make_counts(6, 0, 0, 2), 60, LayoutType.WRAP)
        sides = [u.side for u in plan.north_side + plan.south_side]
        assert sides.count("north") == 2
        assert sides.count("east") == 5
        assert sides.count("south") == 1
        assert {u.side for u in plan.north_side} == {"north", "east"}
        assert {u.side for u in plan.south_side} == {"south"}
        for unit in plan.placed_units:
            assert unit.x_end <= 60
        assert plan.building_depth == 36 + 10


class TestEmptyPlan:
    def test_no_units(self):
        plan = generate_floor_plan(make_counts(), 280, LayoutType.DOUBLE_LOADED)
        assert plan.north_side == []
        assert plan.south_side == []
        assert plan.core_positions == []
        assert plan.building_depth == 6 * 2 + 6
        assert plan.units_per_core == 0

    def test_grid_is_corridor_only(self):
        plan = generate_floor_plan(make_counts(), 280, LayoutType.DOUBLE_LOADED)
        grid = generate_floor_plan_grid(plan)
        labels = grid_label_counts(grid)
        assert set(labels) == {"VOID", "CORR"}
        assert labels["CORR"] == 3 * 140


class TestGrid:
    def test_dimensions(self):
        plan = double_loaded_plan()
        for resolution in (1, 2, 3, 4.5):
            grid = generate_floor_plan_grid(plan, resolution)
            assert len(grid) == math.ceil(plan.building_depth / resolution)
            assert all(len(row) == math.ceil(plan.building_length / resolution) for row in grid)

    def test_every_cell_labelled(self):
        plan = generate_floor_plan(make_counts(4, 3, 2, 1), 200, LayoutType.WRAP)
        grid = generate_floor_plan_grid(plan)
        for row in grid:
            for cell in row:
                assert cell in KNOWN_LABELS

    def test_cells(self):
        grid = generate_floor_plan_grid(double_loaded_plan(), 2)
        assert grid[0][0] == "ONEBR"
        assert grid[34][0] == "ONEBR"
        assert grid[17][0] == "CORR"
        assert grid[0][139] == "VOID"
        # Core overwrites the corridor and units under it
        assert grid[17][70] == "CORE"
        assert grid[10][70] == "CORE"

    def test_invalid_resolution(self):
        with pytest.raises(ValueError):
            generate_floor_plan_grid(double_loaded_plan(), 0)

    def test_frame_shape(self):
        grid = generate_floor_plan_grid(double_loaded_plan(), 2)
        df = grid_to_frame(grid, 2)
        assert df.shape == (35, 140)


class TestEfficiency:
    def test_areas(self):
        plan = double_loaded_plan()
        eff = calculate_floor_plan_efficiency(plan, make_counts(11, 10, 0, 0))
        assert eff.total_footprint == 280 * 70
        assert eff.corridor_area == 280 * 6
        assert eff.core_area == 24 * 32
        assert eff.unit_area == 11 * 12 * 28 + 10 * 14 * 32
        assert eff.units_per_core == 21

    def test_internal_consistency(self):
        plan = generate_floor_plan(make_counts(8, 6, 4, 2), 320, LayoutType.SINGLE_LOADED)
        counts = make_counts(8, 6, 4, 2)
        eff = calculate_floor_plan_efficiency(plan, counts)
        footprint = plan.building_length * plan.building_depth
        unit_area = 8 * 12 * 28 + 6 * 14 * 32 + 4 * 26 * 32 + 2 * 28 * 36
        corridor_area = plan.building_length * plan.corridor_width
        core_area = plan.cores_needed * 24 * 32
        assert eff.unit_area == unit_area
        assert abs(eff.net_to_gross_pct - unit_area / footprint * 100) < 1e-9
        assert abs(eff.circulation_pct - (corridor_area + core_area) / footprint * 100) < 1e-9

    def test_zero_footprint(self):
        plan = generate_floor_plan(make_counts(), 0, LayoutType.DOUBLE_LOADED)
        eff = calculate_floor_plan_efficiency(plan, make_counts())
        assert eff.net_to_gross_pct == 0
        assert eff.circulation_pct == 0
        assert eff.units_per_core == 0


class TestAdjacency:
    def test_studio_next_to_two_bed(self):
        plan = generate_floor_plan(make_counts(1, 0, 1, 0), 280, LayoutType.SINGLE_LOADED)
        conflicts = adjacency_conflicts(plan)
        assert len(conflicts) == 1
        assert conflicts[0][0].unit_type == "twoBed"

    def test_compatible_neighbours(self):
        plan = generate_floor_plan(make_counts(1, 1, 0, 0), 280, LayoutType.SINGLE_LOADED)
        assert adjacency_conflicts(plan) == []


class TestDeterminism:
    def test_same_inputs_same_plan(self):
        a = generate_floor_plan(make_counts(9, 9, 4, 2), 300, LayoutType.DOUBLE_LOADED)
        b = generate_floor_plan(make_counts(9, 9, 4, 2), 300, LayoutType.DOUBLE_LOADED)
        assert a == b
        assert generate_floor_plan_grid(a) == generate_floor_plan_grid(b)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
