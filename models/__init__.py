from models.building import BuildingConfig, LayoutType
from models.unit_mix import UnitTypeCounts
from models.geometry import BuildingGeometry, UnitTypeGeometry
from models.floorplan import PlacedUnit, CorePosition, FloorPlan
from models.location import ReferenceCity, NearestCity
