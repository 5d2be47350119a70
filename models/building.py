from dataclasses import dataclass
from enum import Enum

from config.defaults import (
    SINGLE_LOADED, DOUBLE_LOADED, WRAP,
    DEFAULT_BUILDING_LENGTH, DEFAULT_FLOORS,
    DEFAULT_COMMON_AREA_PCT, DEFAULT_PODIUM_COUNT,
)


class LayoutType(str, Enum):
    SINGLE_LOADED = SINGLE_LOADED
    DOUBLE_LOADED = DOUBLE_LOADED
    WRAP = WRAP

    @classmethod
    def parse(cls, value) -> "LayoutType":
        """Accept a LayoutType, its string value, or the legacy lobby number (1/2/3)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            legacy = {1: cls.SINGLE_LOADED, 2: cls.DOUBLE_LOADED, 3: cls.WRAP}
            if value in legacy:
                return legacy[value]
            raise ValueError(f"Unknown lobby type number: {value}")
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown layout type: {value!r}") from None


@dataclass
class BuildingConfig:
    building_length: float = DEFAULT_BUILDING_LENGTH   # ft
    layout_type: LayoutType = LayoutType.DOUBLE_LOADED
    floors: int = DEFAULT_FLOORS
    common_area_pct: float = DEFAULT_COMMON_AREA_PCT
    podium_count: int = DEFAULT_PODIUM_COUNT

    @property
    def residential_floors(self) -> int:
        return max(0, self.floors - self.podium_count)
