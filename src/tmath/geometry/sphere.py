# geometry/sphere.py
import logging
import math
from typing import Optional

from tmath.core.ray import Ray
from tmath.core.vector import Vector3
from tmath.errors import DegenerateRayError, ScalarTypeError
from tmath.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)


class Sphere(Hittable):
    """
    Represents a sphere defined by its center and radius.

    Spheres never change after construction, so one instance can be shared
    between lists and threads.
    """
    __slots__ = ("_center", "_radius")

    def __init__(self, center: Vector3, radius: float):
        if not center.is_float:
            raise ScalarTypeError(f"Sphere centers need a floating scalar type, got {center.dtype}")
        self._center = Vector3(center)
        self._radius = float(radius)

    @property
    def center(self) -> Vector3:
        return self._center.copy()

    @property
    def radius(self) -> float:
        return self._radius

    def __eq__(self, other) -> bool:
        if not isinstance(other, Sphere):
            return NotImplemented
        return self._center == other._center and self._radius == other._radius

    def __hash__(self) -> int:
        return hash((tuple(self._center), self._radius))

    def __repr__(self) -> str:
        return f"Sphere(center={self._center!r}, radius={self._radius!r})"

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self._center
        a = ray.direction.length_squared()
        if a == 0:
            logger.debug("Rejecting ray with zero-length direction from %r", ray.origin)
            raise DegenerateRayError("Cannot intersect a ray with a zero-length direction")
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self._radius * self._radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if root < t_min or root > t_max:
            root = (-half_b + sqrt_disc) / a
            if root < t_min or root > t_max:
                return None

        rec = HitRecord(t=root, p=ray.at(root))
        outward_normal = (rec.p - self._center) / self._radius
        rec.set_face_normal(ray, outward_normal)
        return rec
