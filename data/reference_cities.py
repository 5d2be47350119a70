"""Reference cities with calibrated construction cost factors."""

from typing import Tuple

from models.location import ReferenceCity

REFERENCE_CITIES: Tuple[ReferenceCity, ...] = (
    # West Coast (high)
    ReferenceCity("San Francisco, CA", 37.7749, -122.4194, 1.42),
    ReferenceCity("Los Angeles, CA", 34.0522, -118.2437, 1.28),
    ReferenceCity("Seattle, WA", 47.6062, -122.3321, 1.18),
    ReferenceCity("Portland, OR", 45.5152, -122.6784, 1.15),
    ReferenceCity("San Diego, CA", 32.7157, -117.1611, 1.21),
    # Mountain West (medium-low)
    ReferenceCity("Denver, CO", 39.7392, -104.9903, 0.98),
    ReferenceCity("Boise, ID", 43.6150, -116.2023, 0.87),
    ReferenceCity("Salt Lake City, UT", 40.7608, -111.8910, 0.92),
    ReferenceCity("Phoenix, AZ", 33.4484, -112.0740, 0.94),
    # Southwest (medium)
    ReferenceCity("Austin, TX", 30.2672, -97.7431, 0.91),
    ReferenceCity("Dallas, TX", 32.7767, -96.7970, 0.89),
    ReferenceCity("Houston, TX", 29.7604, -95.3698, 0.88),
    # Midwest (medium-low)
    ReferenceCity("Chicago, IL", 41.8781, -87.6298, 1.12),
    ReferenceCity("Minneapolis, MN", 44.9778, -93.2650, 1.06),
    ReferenceCity("Kansas City, MO", 39.0997, -94.5786, 0.86),
    # Southeast (low-medium)
    ReferenceCity("Atlanta, GA", 33.7490, -84.3880, 0.88),
    ReferenceCity("Nashville, TN", 36.1627, -86.7816, 0.84),
    ReferenceCity("Charlotte, NC", 35.2271, -80.8431, 0.82),
    # Northeast (high)
    ReferenceCity("New York, NY", 40.7128, -74.0060, 1.51),
    ReferenceCity("Boston, MA", 42.3601, -71.0589, 1.32),
    ReferenceCity("Washington, DC", 38.9072, -77.0369, 1.09),
)


def get_city(name: str) -> ReferenceCity:
    for city in REFERENCE_CITIES:
        if city.name == name:
            return city
    raise KeyError(f"Unknown reference city: {name}")
