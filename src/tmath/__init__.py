"""
Small numeric algebra kernel for ray-intersection experiments.

Subpackages:
    core: generic vectors, quaternions and rays
    geometry: the hittable protocol, spheres and hittable lists
"""

import logging

from tmath.core import (
    Point3,
    Quaternion,
    Ray,
    Vector,
    Vector2,
    Vector3,
    Vector4,
)
from tmath.errors import (
    BoundaryError,
    DegenerateRayError,
    DimensionMismatchError,
    DomainError,
    IntegerDivisionByZero,
    ScalarTypeError,
    TMathError,
)
from tmath.geometry import HitRecord, Hittable, HittableList, Sphere

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Vector",
    "Vector2",
    "Vector3",
    "Vector4",
    "Point3",
    "Quaternion",
    "Ray",
    "HitRecord",
    "Hittable",
    "HittableList",
    "Sphere",
    "TMathError",
    "BoundaryError",
    "DimensionMismatchError",
    "ScalarTypeError",
    "DomainError",
    "IntegerDivisionByZero",
    "DegenerateRayError",
]
