"""Nearest reference city lookup for location cost factors."""

import logging
import math
from typing import Optional, Sequence, Tuple

from config.defaults import EARTH_RADIUS_MILES
from data.reference_cities import REFERENCE_CITIES
from models.location import NearestCity, ReferenceCity

log = logging.getLogger(__name__)


def haversine_miles(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance in miles between two lat/lng points."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    return EARTH_RADIUS_MILES * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def _check_coordinates(lat: float, lng: float):
    if not -90 <= lat <= 90:
        raise ValueError(f"Latitude must be within [-90, 90], got {lat}")
    if not -180 <= lng <= 180:
        raise ValueError(f"Longitude must be within [-180, 180], got {lng}")


def find_nearest_reference_city(
    lat: float,
    lng: float,
    cities: Optional[Sequence[ReferenceCity]] = None,
) -> NearestCity:
    """Return the reference city closest to (lat, lng).

    Equal distances keep the first city in table order.
    """
    _check_coordinates(lat, lng)
    candidates = REFERENCE_CITIES if cities is None else cities
    if not candidates:
        raise ValueError("Reference city set is empty")

    nearest = None
    nearest_distance = math.inf
    for city in candidates:
        distance = haversine_miles(lat, lng, city.lat, city.lng)
        if distance < nearest_distance:
            nearest = city
            nearest_distance = distance

    log.debug("Nearest city to (%.4f, %.4f): %s at %.1f mi", lat, lng, nearest.name, nearest_distance)
    return NearestCity(city=nearest, distance_miles=nearest_distance)


def resolve_cost_factors(
    lat: float,
    lng: float,
    cities: Optional[Sequence[ReferenceCity]] = None,
) -> Tuple[float, float, NearestCity]:
    """Property and factory cost factors for a location (both follow the nearest city)."""
    nearest = find_nearest_reference_city(lat, lng, cities)
    return nearest.factor, nearest.factor, nearest
