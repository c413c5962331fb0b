import numpy as np
import pytest

from src.pathfinding.geo import EARTH_RADIUS_KM, haversine_km, haversine_km_vectorized


class TestHaversine:
    def test_one_degree_on_equator(self):
        assert haversine_km(0.0, 0.0, 0.0, 1.0) == pytest.approx(111.19492664455873)

    def test_same_point_is_zero(self):
        assert haversine_km(28.5562, 77.1, 28.5562, 77.1) == 0.0

    def test_symmetric(self):
        forward = haversine_km(28.5562, 77.1, 19.0896, 72.8656)
        backward = haversine_km(19.0896, 72.8656, 28.5562, 77.1)
        assert forward == pytest.approx(backward)

    def test_delhi_mumbai(self):
        # DEL -> BOM is roughly 1150 km great-circle
        assert haversine_km(28.5562, 77.1, 19.0896, 72.8656) == pytest.approx(1140, abs=25)

    def test_antipodes_half_circumference(self):
        half = np.pi * EARTH_RADIUS_KM
        assert haversine_km(0.0, 0.0, 0.0, 180.0) == pytest.approx(half)


class TestHaversineVectorized:
    def test_matches_scalar(self):
        lat1 = np.array([0.0, 28.5562, 12.9941])
        lon1 = np.array([0.0, 77.1, 80.1709])
        lat2 = np.array([0.0, 19.0896, 22.6547])
        lon2 = np.array([1.0, 72.8656, 88.4467])

        result = haversine_km_vectorized(lat1, lon1, lat2, lon2)

        expected = [
            haversine_km(a, b, c, d) for a, b, c, d in zip(lat1, lon1, lat2, lon2)
        ]
        assert result == pytest.approx(expected)

    def test_empty_arrays(self):
        result = haversine_km_vectorized([], [], [], [])
        assert len(result) == 0
