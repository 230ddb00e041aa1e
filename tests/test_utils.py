"""Unit tests for the free-function helpers in tmath.core.utils."""

import math

import numpy as np
import pytest

from tmath.core import (
    Vector3,
    angle,
    cross,
    distance,
    dot,
    random_in_hemisphere,
    random_in_unit_sphere,
    random_unit_vector,
    reflect,
    refract,
    vmax,
    vmin,
)


class TestHelpers:
    """The helpers agree with the corresponding Vector methods."""

    def test_products(self):
        a = Vector3(1.0, 2.0, 3.0)
        b = Vector3(-2.0, 0.5, 4.0)
        assert dot(a, b) == a.dot(b)
        assert cross(a, b) == a.cross(b)

    def test_distance_and_angle(self):
        a = Vector3(1.0, 0.0, 0.0)
        b = Vector3(0.0, 1.0, 0.0)
        assert distance(a, b) == pytest.approx(math.sqrt(2.0))
        assert angle(a, b) == pytest.approx(math.pi / 2)

    def test_min_max(self):
        a = Vector3(1.0, 5.0, 0.0)
        b = Vector3(2.0, 3.0, 0.0)
        assert vmin(a, b) == Vector3(1.0, 3.0, 0.0)
        assert vmax(a, b) == Vector3(2.0, 5.0, 0.0)

    def test_reflect_refract(self):
        v = Vector3(1.0, -1.0, 0.0).normalized()
        n = Vector3(0.0, 1.0, 0.0)
        assert reflect(v, n) == v.reflect(n)
        assert refract(v, n, 0.9) == v.refract(n, 0.9)


class TestSamplingHelpers:
    """Tests for the rejection samplers."""

    def test_random_in_unit_sphere(self, rng):
        for _ in range(100):
            assert random_in_unit_sphere(rng=rng).length_squared() < 1.0

    def test_random_unit_vector(self, rng):
        for _ in range(20):
            assert random_unit_vector(rng=rng).length() == pytest.approx(1.0)

    def test_random_unit_vector_float32(self, rng):
        v = random_unit_vector(dtype=np.float32, rng=rng)
        assert v.dtype == np.float32
        assert v.length() == pytest.approx(1.0, rel=1e-5)

    def test_random_in_hemisphere(self, rng):
        normal = Vector3(0.0, -1.0, 0.0)
        for _ in range(50):
            assert random_in_hemisphere(normal, rng=rng).dot(normal) >= 0.0
