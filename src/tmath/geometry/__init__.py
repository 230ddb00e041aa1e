"""
Surfaces a ray can hit, and the list that resolves the closest hit.
"""

from tmath.geometry.hittable import HitRecord, Hittable
from tmath.geometry.sphere import Sphere
from tmath.geometry.world import HittableList

__all__ = [
    "HitRecord",
    "Hittable",
    "Sphere",
    "HittableList",
]
