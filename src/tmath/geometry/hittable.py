# geometry/hittable.py
from dataclasses import dataclass, replace
from typing import Optional

from tmath.core.ray import Ray
from tmath.core.vector import Vector3


@dataclass
class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    p: Optional[Vector3] = None        # Intersection point
    normal: Optional[Vector3] = None   # Surface normal, always facing the incoming ray
    t: float = 0.0                     # Ray parameter at intersection
    front_face: bool = True            # Whether the ray hit the outside of the surface

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    def copy(self) -> "HitRecord":
        return replace(
            self,
            p=None if self.p is None else self.p.copy(),
            normal=None if self.normal is None else self.normal.copy(),
        )


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """
        Returns the intersection with the smallest t in [t_min, t_max], or None.
        """
        raise NotImplementedError("hit() must be implemented by subclasses.")
