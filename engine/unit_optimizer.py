"""Unit-mix optimizer — fit a target unit mix to the available building width."""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple, Union

from config.defaults import (
    UNIT_TYPES, DEFAULT_UNIT_MIX, BASE_BUILDING, PODIUM_FOOTPRINT_FACTOR,
)
from engine.explainer import explain_optimization
from models.building import LayoutType
from models.geometry import BuildingGeometry
from models.unit_mix import UnitTypeCounts

log = logging.getLogger(__name__)

# Overflow removes the largest type first
REDUCTION_ORDER = ["threeBed", "twoBed", "oneBed", "studio"]

EXIT_CONVERGED = "converged"
EXIT_ITERATION_CAP = "iteration_cap"
EXIT_EXHAUSTED = "exhausted"
EXIT_ZERO_TARGETS = "zero_targets"

CountsLike = Union[UnitTypeCounts, Mapping[str, int]]


@dataclass
class OptimizationResult:
    optimized: UnitTypeCounts
    total_optimized: int
    required_width: float
    available_width: float
    utilization_pct: float
    gsf_by_type: Dict[str, float]
    total_unit_gsf: float
    lobby_width: float
    iterations: int
    exit_reason: str  # "converged", "iteration_cap", "exhausted", "zero_targets", or a solver status
    explanation_steps: List[str] = field(default_factory=list)


@dataclass
class BuildingGSF:
    unit_gsf_per_floor: float
    residential_floors: int
    total_unit_gsf: float
    common_gsf: float
    total_podium_gsf: float
    total_gsf: float
    gsf_per_unit: float


def as_counts(counts: CountsLike) -> UnitTypeCounts:
    if isinstance(counts, UnitTypeCounts):
        return counts
    return UnitTypeCounts.from_dict(counts)


def lobby_width(layout_type, geometry: Optional[BuildingGeometry] = None) -> float:
    geometry = geometry or BuildingGeometry.default()
    return geometry.lobby_width(LayoutType.parse(layout_type).value)


def required_width(counts: UnitTypeCounts, geometry: Optional[BuildingGeometry] = None) -> float:
    """Total module width needed to place every unit side by side."""
    geometry = geometry or BuildingGeometry.default()
    return sum(counts[t] * geometry.width(t) for t in UNIT_TYPES)


def _proportions(counts: UnitTypeCounts) -> Dict[str, float]:
    total = counts.total
    if total == 0:
        return {t: 0.0 for t in UNIT_TYPES}
    return {t: counts[t] / total for t in UNIT_TYPES}


def mix_deficits(counts: UnitTypeCounts, targets: UnitTypeCounts) -> Dict[str, float]:
    """Target proportion minus current proportion, per unit type."""
    target_props = _proportions(targets)
    current_props = _proportions(counts)
    return {t: target_props[t] - current_props[t] for t in UNIT_TYPES}


def optimization_step(
    counts: UnitTypeCounts,
    targets: UnitTypeCounts,
    available_width: float,
    geometry: Optional[BuildingGeometry] = None,
) -> Tuple[UnitTypeCounts, bool]:
    """One optimizer iteration. Returns (new counts, exhausted).

    Overflow drops one unit of the largest non-empty type. Otherwise one unit
    of the most under-represented type is added; if that unit would overshoot
    the tolerance band the run is exhausted. Deficit ties keep UNIT_TYPES order.
    """
    geometry = geometry or BuildingGeometry.default()
    width = required_width(counts, geometry)

    if width > available_width:
        for unit_type in REDUCTION_ORDER:
            if counts[unit_type] > 0:
                return counts.adjusted(unit_type, -1), False
        return counts, True

    deficits = mix_deficits(counts, targets)
    unit_type = min(
        (t for t in UNIT_TYPES if targets[t] > 0),
        key=lambda t: (-deficits[t], UNIT_TYPES.index(t)),
        default=None,
    )
    if unit_type is None or width + geometry.width(unit_type) > available_width + geometry.width_tolerance:
        return counts, True
    return counts.adjusted(unit_type, 1), False


def build_result(
    optimized: UnitTypeCounts,
    available: float,
    lobby: float,
    iterations: int,
    exit_reason: str,
    geometry: BuildingGeometry,
) -> OptimizationResult:
    width = required_width(optimized, geometry)
    gsf_by_type = {t: optimized[t] * geometry.gsf(t) for t in UNIT_TYPES}
    return OptimizationResult(
        optimized=optimized,
        total_optimized=optimized.total,
        required_width=width,
        available_width=available,
        utilization_pct=(width / available * 100) if available > 0 else 0.0,
        gsf_by_type=gsf_by_type,
        total_unit_gsf=sum(gsf_by_type.values()),
        lobby_width=lobby,
        iterations=iterations,
        exit_reason=exit_reason,
    )


def optimize_units(
    targets: CountsLike,
    building_length: float,
    layout_type=LayoutType.DOUBLE_LOADED,
    floors: int = 5,
    geometry: Optional[BuildingGeometry] = None,
) -> OptimizationResult:
    """
    Fit the target unit mix to the building length.

    The loop runs while the required width is outside the tolerance band of
    the available width (building length minus lobby allowance), capped at
    geometry.max_iterations. Floors are informational and do not affect the
    width calculation.
    """
    geometry = geometry or BuildingGeometry.default()
    targets = as_counts(targets)
    lobby = lobby_width(layout_type, geometry)
    available = building_length - lobby

    optimized = targets
    iterations = 0
    exit_reason = EXIT_CONVERGED
    if targets.total == 0:
        # No proportions to track
        optimized = UnitTypeCounts.zero()
        exit_reason = EXIT_ZERO_TARGETS

    while exit_reason != EXIT_ZERO_TARGETS and \
            abs(required_width(optimized, geometry) - available) > geometry.width_tolerance:
        if iterations >= geometry.max_iterations:
            exit_reason = EXIT_ITERATION_CAP
            break
        iterations += 1
        optimized, exhausted = optimization_step(optimized, targets, available, geometry)
        if exhausted:
            exit_reason = EXIT_EXHAUSTED
            break

    result = build_result(optimized, available, lobby, iterations, exit_reason, geometry)
    result.explanation_steps = explain_optimization(
        targets=targets.as_dict(),
        optimized=optimized.as_dict(),
        lobby_width=lobby,
        available_width=available,
        target_width=required_width(targets, geometry),
        final_width=result.required_width,
        iterations=iterations,
        exit_reason=exit_reason,
        max_iterations=geometry.max_iterations,
        tolerance=geometry.width_tolerance,
    )
    log.debug(
        "Optimized %s -> %s in %d iterations (%s), %.0f/%.0f ft",
        targets.as_dict(), optimized.as_dict(), iterations, exit_reason,
        result.required_width, available,
    )
    return result


def calculate_building_gsf(
    optimized: CountsLike,
    floors: int,
    common_area_pct: float = 5,
    podium_count: int = 0,
    geometry: Optional[BuildingGeometry] = None,
) -> BuildingGSF:
    """Whole-building GSF: residential floors, common area share and podium floors."""
    geometry = geometry or BuildingGeometry.default()
    optimized = as_counts(optimized)

    unit_gsf_per_floor = sum(optimized[t] * geometry.gsf(t) for t in UNIT_TYPES)
    residential_floors = max(0, floors - podium_count)
    total_unit_gsf = unit_gsf_per_floor * residential_floors
    common_gsf = total_unit_gsf * (common_area_pct / 100)
    # Podium floors carry a larger footprint than the typical floor
    total_podium_gsf = unit_gsf_per_floor * PODIUM_FOOTPRINT_FACTOR * podium_count
    total_gsf = total_unit_gsf + common_gsf + total_podium_gsf

    unit_count = optimized.total * residential_floors
    return BuildingGSF(
        unit_gsf_per_floor=unit_gsf_per_floor,
        residential_floors=residential_floors,
        total_unit_gsf=total_unit_gsf,
        common_gsf=common_gsf,
        total_podium_gsf=total_podium_gsf,
        total_gsf=total_gsf,
        gsf_per_unit=total_gsf / unit_count if unit_count > 0 else 0.0,
    )


def calculate_unit_ratio(total_optimized: int) -> float:
    """Scale of this project's unit count relative to the base building."""
    return total_optimized / BASE_BUILDING["total_units"]


def calculate_floor_multiplier(floors: int) -> float:
    return floors / BASE_BUILDING["floors"]


def default_targets(total_units: int) -> UnitTypeCounts:
    """Split a unit total across types using the default mix percentages."""
    if total_units <= 0:
        return UnitTypeCounts.zero()
    pct_total = sum(DEFAULT_UNIT_MIX.values())
    raw = {t: total_units * DEFAULT_UNIT_MIX[t] / pct_total for t in UNIT_TYPES}
    counts = {t: int(raw[t]) for t in UNIT_TYPES}
    remainder = total_units - sum(counts.values())
    # Largest remainder first
    by_fraction = sorted(UNIT_TYPES, key=lambda t: (-(raw[t] - counts[t]), UNIT_TYPES.index(t)))
    for unit_type in by_fraction[:remainder]:
        counts[unit_type] += 1
    return UnitTypeCounts.from_dict(counts)
