"""Site-built vs modular cost comparison scaled from the calibration project."""

from dataclasses import dataclass

from config.defaults import (
    BASE_BUILDING, BASE_SITE_COST, BASE_GC_COST, BASE_FAB_COST,
    SITE_BUILD_MONTHS, MODULAR_BUILD_MONTHS,
)
from engine.unit_optimizer import calculate_unit_ratio, calculate_floor_multiplier


@dataclass
class CostComparison:
    total_units: int
    unit_ratio: float
    floor_multiplier: float
    total_gsf: float
    site_cost: float
    modular_cost: float
    savings: float
    savings_pct: float
    site_cost_per_sf: float
    modular_cost_per_sf: float
    site_cost_per_unit: float
    modular_cost_per_unit: float
    site_build_months: int = SITE_BUILD_MONTHS
    modular_build_months: int = MODULAR_BUILD_MONTHS

    @property
    def is_savings(self) -> bool:
        return self.savings > 0

    @property
    def time_savings_months(self) -> int:
        return self.site_build_months - self.modular_build_months


def _per(amount: float, divisor: float) -> float:
    return amount / divisor if divisor > 0 else 0.0


def compare_costs(
    total_units: int,
    floors: int,
    property_factor: float,
    factory_factor: float,
) -> CostComparison:
    """
    Compare traditional and modular delivery costs.

    Both scale with unit count and floor count relative to the base building.
    Site-built cost follows the property (local market) factor; modular cost
    splits into on-site GC work at the property factor and fabrication at the
    factory factor.
    """
    unit_ratio = calculate_unit_ratio(total_units)
    floor_multiplier = calculate_floor_multiplier(floors)
    scale = unit_ratio * floor_multiplier
    total_gsf = BASE_BUILDING["gsf"] * scale

    site_cost = BASE_SITE_COST * property_factor * scale
    modular_cost = (
        BASE_GC_COST * property_factor * scale
        + BASE_FAB_COST * factory_factor * scale
    )
    savings = site_cost - modular_cost

    return CostComparison(
        total_units=total_units,
        unit_ratio=unit_ratio,
        floor_multiplier=floor_multiplier,
        total_gsf=total_gsf,
        site_cost=site_cost,
        modular_cost=modular_cost,
        savings=savings,
        savings_pct=_per(savings, site_cost) * 100,
        site_cost_per_sf=_per(site_cost, total_gsf),
        modular_cost_per_sf=_per(modular_cost, total_gsf),
        site_cost_per_unit=_per(site_cost, total_units),
        modular_cost_per_unit=_per(modular_cost, total_units),
    )


def format_currency(amount: float) -> str:
    return f"${round(amount):,}"


def format_mega(amount: float) -> str:
    return f"${amount / 1_000_000:.1f}M"


def format_months(months: float) -> str:
    return f"{months} mo"
