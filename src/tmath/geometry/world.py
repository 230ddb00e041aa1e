# geometry/world.py
import logging
from typing import Iterator, List, Optional

from tmath.core.ray import Ray
from tmath.geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)


class HittableList(Hittable):
    """
    A list of Hittable objects. The hit() method returns the closest hit.

    The list holds references only; the same surface may sit in several lists.
    When two children report exactly the same t, the one added first wins.
    """
    def __init__(self, *objects: Hittable):
        self.objects: List[Hittable] = list(objects)

    def add(self, obj: Hittable):
        self.objects.append(obj)
        logger.debug("Added %r, list now holds %d objects", obj, len(self.objects))

    def clear(self):
        self.objects.clear()
        logger.debug("Cleared hittable list")

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max

        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is None:
                continue
            # a later child at exactly the same distance does not replace the first
            if hit_record is None or rec.t < closest_so_far:
                closest_so_far = rec.t
                hit_record = rec

        return hit_record
