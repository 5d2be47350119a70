from dataclasses import dataclass, replace
from typing import Dict, Mapping

from config.defaults import UNIT_TYPES

# unit type key -> dataclass field
_FIELDS = {
    "studio": "studio",
    "oneBed": "one_bed",
    "twoBed": "two_bed",
    "threeBed": "three_bed",
}


@dataclass(frozen=True)
class UnitTypeCounts:
    """Non-negative unit count per unit type. Used for both targets and optimized mixes."""
    studio: int = 0
    one_bed: int = 0
    two_bed: int = 0
    three_bed: int = 0

    def __post_init__(self):
        for unit_type in UNIT_TYPES:
            value = getattr(self, _FIELDS[unit_type])
            if not isinstance(value, int) or value < 0:
                raise ValueError(f"Unit count for {unit_type} must be a non-negative integer, got {value!r}")

    def __getitem__(self, unit_type: str) -> int:
        try:
            return getattr(self, _FIELDS[unit_type])
        except KeyError:
            raise KeyError(f"Unknown unit type: {unit_type}") from None

    @property
    def total(self) -> int:
        return self.studio + self.one_bed + self.two_bed + self.three_bed

    def items(self):
        return [(t, self[t]) for t in UNIT_TYPES]

    def as_dict(self) -> Dict[str, int]:
        return {t: self[t] for t in UNIT_TYPES}

    def with_count(self, unit_type: str, count: int) -> "UnitTypeCounts":
        if unit_type not in _FIELDS:
            raise KeyError(f"Unknown unit type: {unit_type}")
        return replace(self, **{_FIELDS[unit_type]: count})

    def adjusted(self, unit_type: str, delta: int) -> "UnitTypeCounts":
        """Return a copy with one type's count changed by delta."""
        return self.with_count(unit_type, self[unit_type] + delta)

    @classmethod
    def from_dict(cls, counts: Mapping[str, int]) -> "UnitTypeCounts":
        """Build from a {unitType: count} mapping; missing types count as zero."""
        unknown = set(counts) - set(_FIELDS)
        if unknown:
            raise KeyError(f"Unknown unit types: {', '.join(sorted(unknown))}")
        return cls(**{_FIELDS[t]: counts.get(t, 0) for t in UNIT_TYPES})

    @classmethod
    def zero(cls) -> "UnitTypeCounts":
        return cls()
