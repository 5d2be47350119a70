"""Tests for project configuration validation."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from data.validator import validate_building_config, validate_targets, validate_project
from models.building import BuildingConfig, LayoutType
from models.unit_mix import UnitTypeCounts


class TestBuildingConfig:
    def test_defaults_valid(self):
        result = validate_building_config(BuildingConfig())
        assert result.is_valid
        assert result.errors == []

    def test_length_out_of_bounds(self):
        result = validate_building_config(BuildingConfig(building_length=50))
        assert not result.is_valid
        assert "Building length" in result.errors[0]

    def test_podium_leaves_no_residential_floor(self):
        result = validate_building_config(BuildingConfig(floors=3, podium_count=3))
        assert not result.is_valid

    def test_floors_out_of_bounds(self):
        result = validate_building_config(BuildingConfig(floors=0))
        assert not result.is_valid


class TestTargets:
    def test_zero_targets_warns(self):
        result = validate_targets(UnitTypeCounts())
        assert result.is_valid
        assert result.warnings

    def test_too_many_units(self):
        result = validate_targets(UnitTypeCounts(studio=500))
        assert not result.is_valid


class TestValidateProject:
    def test_overflow_warning(self):
        result = validate_project(BuildingConfig(), UnitTypeCounts(40, 40, 40, 0))
        assert result.is_valid
        assert any("2,080 ft" in w for w in result.warnings)

    def test_fitting_mix_has_no_warning(self):
        config = BuildingConfig(building_length=280, layout_type=LayoutType.SINGLE_LOADED)
        result = validate_project(config, UnitTypeCounts(10, 5, 0, 0))
        assert result.is_valid
        assert result.warnings == []

    def test_errors_merged(self):
        result = validate_project(BuildingConfig(building_length=50), UnitTypeCounts(studio=500))
        assert not result.is_valid
        assert len(result.errors) == 2


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
