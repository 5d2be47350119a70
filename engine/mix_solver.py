"""PuLP integer program for the unit mix — exact counterpart of the local-search optimizer."""

import logging
import math
from typing import Optional

import pulp

from config.defaults import UNIT_TYPES
from engine.unit_optimizer import (
    OptimizationResult, CountsLike, as_counts, build_result, lobby_width,
)
from models.building import LayoutType
from models.geometry import BuildingGeometry
from models.unit_mix import UnitTypeCounts

log = logging.getLogger(__name__)

WIDTH_WEIGHT = 1.0
DEVIATION_WEIGHT = 10.0  # ft of width traded per unit of deviation from target share


def solve_unit_mix(
    targets: CountsLike,
    building_length: float,
    layout_type=LayoutType.DOUBLE_LOADED,
    geometry: Optional[BuildingGeometry] = None,
    time_limit: int = 10,
) -> OptimizationResult:
    """
    Solve the unit mix as an integer program.

    Maximizes filled width while penalizing each type's deviation from its
    target share of the final unit count. Width may exceed the available
    width by at most the optimizer tolerance. Types with a zero target stay
    at zero.
    """
    geometry = geometry or BuildingGeometry.default()
    targets = as_counts(targets)
    lobby = lobby_width(layout_type, geometry)
    available = building_length - lobby
    capacity = available + geometry.width_tolerance

    if targets.total == 0 or capacity <= 0:
        return build_result(UnitTypeCounts.zero(), available, lobby, 0, "Not Solved", geometry)

    share = {t: targets[t] / targets.total for t in UNIT_TYPES}

    prob = pulp.LpProblem("UnitMix", pulp.LpMinimize)

    n = {}
    for t in UNIT_TYPES:
        upper = math.floor(capacity / geometry.width(t)) if targets[t] > 0 else 0
        n[t] = pulp.LpVariable(f"n_{t}", lowBound=0, upBound=upper, cat="Integer")

    total_units = pulp.lpSum(n[t] for t in UNIT_TYPES)
    width_term = pulp.lpSum(n[t] * geometry.width(t) for t in UNIT_TYPES)

    # Absolute deviation from target share
    dev = {}
    for t in UNIT_TYPES:
        dev[t] = pulp.LpVariable(f"dev_{t}", lowBound=0)
        prob += dev[t] >= n[t] - share[t] * total_units, f"dev_over_{t}"
        prob += dev[t] >= share[t] * total_units - n[t], f"dev_under_{t}"

    prob += (
        -WIDTH_WEIGHT * width_term
        + DEVIATION_WEIGHT * pulp.lpSum(dev[t] for t in UNIT_TYPES)
    ), "fill_and_track_mix"

    prob += width_term <= capacity, "width_capacity"

    prob.solve(pulp.PULP_CBC_CMD(msg=0, timeLimit=time_limit))
    status = pulp.LpStatus[prob.status]

    if status != "Optimal":
        log.info("Unit mix solver finished with status %s", status)
        return build_result(UnitTypeCounts.zero(), available, lobby, 0, status, geometry)

    optimized = UnitTypeCounts.from_dict(
        {t: int(round(n[t].varValue or 0)) for t in UNIT_TYPES}
    )
    return build_result(optimized, available, lobby, 0, status, geometry)
