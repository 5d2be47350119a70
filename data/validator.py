"""Validation for project configuration entered in the UI."""

from dataclasses import dataclass, field
from typing import List

from config.defaults import (
    UNIT_TYPES, MIN_BUILDING_LENGTH, MAX_BUILDING_LENGTH,
    MIN_FLOORS, MAX_FLOORS, MAX_UNITS_PER_TYPE,
)
from engine.unit_optimizer import lobby_width, required_width
from models.building import BuildingConfig
from models.unit_mix import UnitTypeCounts


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def error(self, message: str):
        self.is_valid = False
        self.errors.append(message)


def validate_building_config(config: BuildingConfig) -> ValidationResult:
    result = ValidationResult()

    if not MIN_BUILDING_LENGTH <= config.building_length <= MAX_BUILDING_LENGTH:
        result.error(
            f"Building length must be between {MIN_BUILDING_LENGTH} and {MAX_BUILDING_LENGTH} ft "
            f"(got {config.building_length:g})."
        )

    if not MIN_FLOORS <= config.floors <= MAX_FLOORS:
        result.error(f"Floors must be between {MIN_FLOORS} and {MAX_FLOORS} (got {config.floors}).")

    if config.podium_count < 0:
        result.error("Podium count cannot be negative.")
    elif config.podium_count >= config.floors:
        result.error("Podium floors must leave at least one residential floor.")

    if not 0 <= config.common_area_pct <= 100:
        result.error("Common area % must be between 0 and 100.")

    return result


def validate_targets(targets: UnitTypeCounts) -> ValidationResult:
    result = ValidationResult()

    too_many = [t for t in UNIT_TYPES if targets[t] > MAX_UNITS_PER_TYPE]
    if too_many:
        result.error(f"Targets above {MAX_UNITS_PER_TYPE} units per type: {', '.join(too_many)}")

    if targets.total == 0:
        result.warnings.append("All unit targets are zero — the optimized mix will be empty.")

    return result


def validate_project(config: BuildingConfig, targets: UnitTypeCounts) -> ValidationResult:
    """Config and targets checks, plus a fit warning when the target mix cannot fit as given."""
    result = ValidationResult()
    for partial in (validate_building_config(config), validate_targets(targets)):
        result.errors.extend(partial.errors)
        result.warnings.extend(partial.warnings)
        result.is_valid = result.is_valid and partial.is_valid

    if result.is_valid and targets.total > 0:
        available = config.building_length - lobby_width(config.layout_type)
        needed = required_width(targets)
        if needed > available:
            result.warnings.append(
                f"Target mix needs {needed:,.0f} ft but only {available:,.0f} ft is available — "
                "units will be removed, largest types first."
            )
    return result
