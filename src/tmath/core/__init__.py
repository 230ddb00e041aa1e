"""
Algebra types: vectors, quaternions and rays.
"""

from tmath.core.quaternion import Quaternion
from tmath.core.ray import Ray
from tmath.core.utils import (
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
from tmath.core.vector import Point3, Vector, Vector2, Vector3, Vector4

__all__ = [
    "Vector",
    "Vector2",
    "Vector3",
    "Vector4",
    "Point3",
    "Quaternion",
    "Ray",
    "dot",
    "cross",
    "distance",
    "angle",
    "vmin",
    "vmax",
    "reflect",
    "refract",
    "random_in_unit_sphere",
    "random_unit_vector",
    "random_in_hemisphere",
]
