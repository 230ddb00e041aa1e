"""Shared fixtures for the tmath test suite."""

import numpy as np
import pytest

from tmath import Point3, Sphere, Vector3


@pytest.fixture
def rng():
    """Seeded generator so sampling tests are reproducible."""
    return np.random.default_rng(42)


@pytest.fixture
def unit_sphere_ahead():
    """Sphere of radius 0.5 centered one unit down -z."""
    return Sphere(Point3(0.0, 0.0, -1.0), 0.5)


@pytest.fixture
def far_sphere():
    """Sphere of radius 0.5 centered three units down -z."""
    return Sphere(Point3(0.0, 0.0, -3.0), 0.5)


@pytest.fixture
def x_axis():
    return Vector3(1.0, 0.0, 0.0)
