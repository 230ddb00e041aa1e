# core/utils.py
from typing import Optional

import numpy as np

from tmath import config
from tmath.core.vector import Scalar, Vector, Vector3


def dot(a: Vector, b: Vector) -> Scalar:
    return a.dot(b)


def cross(a: Vector3, b: Vector3) -> Vector3:
    return a.cross(b)


def distance(a: Vector, b: Vector) -> float:
    return a.distance(b)


def angle(a: Vector, b: Vector) -> float:
    """
    Angle in radians between a and b.
    """
    return a.angle(b)


def vmin(a: Vector, b: Vector) -> Vector:
    return a.min(b)


def vmax(a: Vector, b: Vector) -> Vector:
    return a.max(b)


def reflect(v: Vector, n: Vector) -> Vector:
    """
    Reflects vector v about the normal n.
    """
    return v.reflect(n)


def refract(v: Vector, n: Vector, eta_ratio: float) -> Vector:
    """
    Bends unit vector v through a surface with unit normal n (Snell's law).
    """
    return v.refract(n, eta_ratio)


def random_in_unit_sphere(dim: int = 3, dtype=None,
                          rng: Optional[np.random.Generator] = None) -> Vector:
    """
    Returns a random point inside a unit sphere.
    """
    rng = config.global_rng() if rng is None else rng
    while True:
        p = Vector.random_range(-1.0, 1.0, dim, dtype, rng)
        if p.length_squared() < 1.0:
            return p


def random_unit_vector(dim: int = 3, dtype=None,
                       rng: Optional[np.random.Generator] = None) -> Vector:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere(dim, dtype, rng).normalized()


def random_in_hemisphere(normal: Vector, rng: Optional[np.random.Generator] = None) -> Vector:
    return Vector.random_in_hemisphere(normal, rng)
