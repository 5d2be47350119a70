from dataclasses import dataclass
from typing import List

from models.building import LayoutType


@dataclass(frozen=True)
class PlacedUnit:
    unit_id: str        # e.g. "STU-1", "2BR-3"
    unit_type: str
    width: float
    depth: float
    x: float            # offset along building length (ft)
    side: str           # "north", "south", "east", "west"

    @property
    def x_end(self) -> float:
        return self.x + self.width


@dataclass(frozen=True)
class CorePosition:
    x: float
    width: float

    @property
    def x_end(self) -> float:
        return self.x + self.width

    def overlaps(self, start: float, end: float) -> bool:
        return start < self.x_end and end > self.x


@dataclass
class FloorPlan:
    layout_type: LayoutType
    north_side: List[PlacedUnit]
    south_side: List[PlacedUnit]
    core_positions: List[CorePosition]
    corridor_width: float
    building_length: float
    building_depth: float
    total_units: int
    cores_needed: int
    units_per_core: int
    floors: int = 5

    @property
    def placed_units(self) -> List[PlacedUnit]:
        return self.north_side + self.south_side
