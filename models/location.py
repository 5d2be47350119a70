from dataclasses import dataclass


@dataclass(frozen=True)
class ReferenceCity:
    name: str
    lat: float
    lng: float
    factor: float   # construction cost multiplier, 1.0 = national baseline


@dataclass(frozen=True)
class NearestCity:
    city: ReferenceCity
    distance_miles: float

    @property
    def name(self) -> str:
        return self.city.name

    @property
    def factor(self) -> float:
        return self.city.factor
