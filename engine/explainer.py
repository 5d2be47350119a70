"""Generates human-readable explanations for optimizer and floorplan results."""

from typing import Dict, List

from config.defaults import UNIT_TYPES, UNIT_TYPE_LABELS


def explain_optimization(
    targets: Dict[str, int],
    optimized: Dict[str, int],
    lobby_width: float,
    available_width: float,
    target_width: float,
    final_width: float,
    iterations: int,
    exit_reason: str,
    max_iterations: int,
    tolerance: float,
) -> List[str]:
    """Produce step-by-step explanation for an optimized unit mix."""
    steps = []

    steps.append(
        f"Step 1 - Available width: building length less {lobby_width:.0f} ft lobby "
        f"=> {available_width:.0f} ft for units"
    )

    steps.append(
        f"Step 2 - Target mix: {sum(targets.values())} units need {target_width:.0f} ft of module width"
    )

    if exit_reason == "zero_targets":
        steps.append("Step 3 - No units requested (empty mix)")
        return steps

    gap = target_width - available_width
    if abs(gap) <= tolerance:
        steps.append(f"Step 3 - Target mix already fits within ±{tolerance:.0f} ft")
    elif gap > 0:
        steps.append(
            f"Step 3 - Over by {gap:.0f} ft: removing units, largest types first"
        )
    else:
        steps.append(
            f"Step 3 - Under by {-gap:.0f} ft: adding the most under-represented unit types"
        )

    reason_text = {
        "converged": f"converged within ±{tolerance:.0f} ft",
        "iteration_cap": f"stopped at the {max_iterations}-iteration cap",
        "exhausted": f"stopped, next unit exceeds the ±{tolerance:.0f} ft band",
    }.get(exit_reason, exit_reason)
    steps.append(
        f"Step 4 - Result: {final_width:.0f} ft of {available_width:.0f} ft used after "
        f"{iterations} iteration{'s' if iterations != 1 else ''} ({reason_text})"
    )

    changes = []
    for t in UNIT_TYPES:
        delta = optimized[t] - targets[t]
        if delta:
            changes.append(f"{UNIT_TYPE_LABELS[t]} {delta:+d}")
    if changes:
        steps.append(f"Step 5 - Changes vs target: {', '.join(changes)}")
    else:
        steps.append("Step 5 - Unit mix unchanged from target")

    return steps


def explain_floor_plan(
    layout_name: str,
    total_units: int,
    cores_needed: int,
    north_count: int,
    south_count: int,
    building_depth: float,
    adjacency_conflicts: int,
) -> List[str]:
    """Summarize a generated floor plan."""
    steps = [
        f"{layout_name} layout: {total_units} units per floor, "
        f"{cores_needed} core{'s' if cores_needed != 1 else ''}",
        f"North band {north_count} units, south band {south_count} units, "
        f"building depth {building_depth:.0f} ft",
    ]
    if adjacency_conflicts:
        steps.append(
            f"Note: {adjacency_conflicts} neighbouring unit pair(s) mix module depths (studio next to 2/3 BR)"
        )
    return steps
