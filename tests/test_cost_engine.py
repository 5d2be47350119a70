"""Tests for the traditional vs modular cost comparison."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from engine.cost_engine import compare_costs, format_currency, format_mega, format_months


class TestCompareCosts:
    def test_base_project_at_unit_factors(self):
        costs = compare_costs(120, 5, 1.0, 1.0)
        assert costs.unit_ratio == 1.0
        assert costs.floor_multiplier == 1.0
        assert costs.total_gsf == 78336
        assert costs.site_cost == 21567408
        assert costs.modular_cost == 8088967 + 16040830
        assert not costs.is_savings

    def test_expensive_market_cheap_factory_saves(self):
        costs = compare_costs(120, 5, 1.42, 0.87)
        assert costs.is_savings
        assert costs.savings > 0
        assert 0 < costs.savings_pct < 100

    def test_scales_with_units_and_floors(self):
        base = compare_costs(120, 5, 1.0, 1.0)
        double = compare_costs(240, 5, 1.0, 1.0)
        taller = compare_costs(120, 10, 1.0, 1.0)
        assert abs(double.site_cost - 2 * base.site_cost) < 1e-6
        assert abs(taller.modular_cost - 2 * base.modular_cost) < 1e-6

    def test_per_unit_and_per_sf(self):
        costs = compare_costs(120, 5, 1.0, 1.0)
        assert abs(costs.site_cost_per_unit - 21567408 / 120) < 1e-6
        assert abs(costs.site_cost_per_sf - 21567408 / 78336) < 1e-6

    def test_zero_units(self):
        costs = compare_costs(0, 5, 1.0, 1.0)
        assert costs.site_cost == 0
        assert costs.savings_pct == 0
        assert costs.site_cost_per_unit == 0
        assert costs.modular_cost_per_sf == 0

    def test_schedule(self):
        costs = compare_costs(120, 5, 1.0, 1.0)
        assert costs.time_savings_months == 7


class TestFormatting:
    def test_currency(self):
        assert format_currency(1234.6) == "$1,235"

    def test_mega(self):
        assert format_mega(21567408) == "$21.6M"

    def test_months(self):
        assert format_months(11) == "11 mo"


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
