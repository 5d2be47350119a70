from dataclasses import dataclass, field
from typing import Dict

from config import defaults


@dataclass(frozen=True)
class UnitTypeGeometry:
    width: float   # ft along building length
    depth: float   # ft perpendicular to building length
    gsf: float     # gross square feet per unit


@dataclass(frozen=True)
class BuildingGeometry:
    """Static lookup tables consumed by the optimizer and placement engine.

    Engines receive one of these instead of reading module globals, so an
    alternate module catalogue can be swapped in without touching the engines.
    """
    units: Dict[str, UnitTypeGeometry]
    lobby_widths: Dict[str, float]
    corridor_widths: Dict[str, float]
    core_width: float = defaults.CORE_WIDTH
    core_depth: float = defaults.CORE_DEPTH
    min_units_per_core: int = defaults.MIN_UNITS_PER_CORE
    max_units_per_core: int = defaults.MAX_UNITS_PER_CORE
    corridor_fallback_depth: float = defaults.CORRIDOR_FALLBACK_DEPTH
    width_tolerance: float = defaults.WIDTH_TOLERANCE_FT
    max_iterations: int = defaults.MAX_OPTIMIZER_ITERATIONS
    adjacency: Dict[str, Dict[str, bool]] = field(default_factory=dict)

    def width(self, unit_type: str) -> float:
        return self.units[unit_type].width

    def depth(self, unit_type: str) -> float:
        return self.units[unit_type].depth

    def gsf(self, unit_type: str) -> float:
        return self.units[unit_type].gsf

    def lobby_width(self, layout_type: str) -> float:
        return self.lobby_widths[layout_type]

    def corridor_width(self, layout_type: str) -> float:
        return self.corridor_widths[layout_type]

    def compatible(self, left: str, right: str) -> bool:
        return self.adjacency.get(left, {}).get(right, True)

    @classmethod
    def default(cls) -> "BuildingGeometry":
        units = {
            t: UnitTypeGeometry(
                width=defaults.UNIT_WIDTHS[t],
                depth=defaults.UNIT_DEPTHS[t],
                gsf=defaults.UNIT_SIZES_GSF[t],
            )
            for t in defaults.UNIT_TYPES
        }
        return cls(
            units=units,
            lobby_widths={k: v["width"] for k, v in defaults.LOBBY_TYPES.items()},
            corridor_widths=dict(defaults.CORRIDOR_WIDTHS),
            adjacency={k: dict(v) for k, v in defaults.ADJACENCY_MATRIX.items()},
        )
