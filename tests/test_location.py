"""Tests for the nearest reference city lookup."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from data.reference_cities import REFERENCE_CITIES, get_city
from engine.location import find_nearest_reference_city, haversine_miles, resolve_cost_factors
from models.location import ReferenceCity


class TestHaversine:
    def test_same_point_is_zero(self):
        assert haversine_miles(40.0, -100.0, 40.0, -100.0) == 0.0

    def test_new_york_to_los_angeles(self):
        ny, la = get_city("New York, NY"), get_city("Los Angeles, CA")
        d = haversine_miles(ny.lat, ny.lng, la.lat, la.lng)
        assert 2400 < d < 2500

    def test_symmetric(self):
        a = haversine_miles(37.77, -122.42, 47.61, -122.33)
        b = haversine_miles(47.61, -122.33, 37.77, -122.42)
        assert abs(a - b) < 1e-9


class TestFindNearestReferenceCity:
    def test_san_francisco(self):
        nearest = find_nearest_reference_city(37.77, -122.42)
        assert nearest.name == "San Francisco, CA"
        assert nearest.factor == 1.42
        assert nearest.distance_miles < 1.0

    def test_exact_city_coordinates(self):
        boise = get_city("Boise, ID")
        nearest = find_nearest_reference_city(boise.lat, boise.lng)
        assert nearest.name == "Boise, ID"
        assert nearest.distance_miles == 0.0

    def test_no_city_strictly_closer(self):
        queries = [(25.76, -80.19), (61.22, -149.90), (35.08, -106.65), (47.66, -117.43), (39.95, -75.17)]
        for lat, lng in queries:
            nearest = find_nearest_reference_city(lat, lng)
            for city in REFERENCE_CITIES:
                assert haversine_miles(lat, lng, city.lat, city.lng) >= nearest.distance_miles

    def test_tie_keeps_first_city(self):
        east = ReferenceCity("East", 0.0, 1.0, 1.1)
        west = ReferenceCity("West", 0.0, -1.0, 0.9)
        assert find_nearest_reference_city(0.0, 0.0, [east, west]).name == "East"
        assert find_nearest_reference_city(0.0, 0.0, [west, east]).name == "West"

    def test_invalid_latitude(self):
        with pytest.raises(ValueError):
            find_nearest_reference_city(91.0, 0.0)

    def test_invalid_longitude(self):
        with pytest.raises(ValueError):
            find_nearest_reference_city(0.0, -181.0)

    def test_empty_city_set(self):
        with pytest.raises(ValueError):
            find_nearest_reference_city(0.0, 0.0, [])


class TestResolveCostFactors:
    def test_both_factors_follow_city(self):
        property_factor, factory_factor, nearest = resolve_cost_factors(43.6, -116.2)
        assert nearest.name == "Boise, ID"
        assert property_factor == 0.87
        assert factory_factor == 0.87


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
