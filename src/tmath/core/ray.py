# core/ray.py
from typing import List, Sequence

from tmath.core.vector import Scalar, Vector
from tmath.errors import DimensionMismatchError


class Ray:
    """
    Represents a ray in space with an origin and direction.

    The direction does not have to be unit length. time only parametrizes
    the ray; intersection tests ignore it.
    """
    def __init__(self, origin: Vector, direction: Vector, time: float = 0.0):
        origin._check_compatible(direction)
        self.origin = origin.copy()
        self.direction = direction.copy()
        self.time = time

    @property
    def dtype(self):
        return self.origin.dtype

    def at(self, t: float) -> Vector:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def to_list(self) -> List[Scalar]:
        return self.origin.to_list() + self.direction.to_list() + [self.time]

    @classmethod
    def from_list(cls, values: Sequence[Scalar], dim: int = 3, dtype=None) -> "Ray":
        if len(values) != 2 * dim + 1:
            raise DimensionMismatchError(
                f"Expected {2 * dim + 1} values for a ray of dimension {dim}, got {len(values)}")
        return cls(
            Vector(list(values[:dim]), dtype=dtype),
            Vector(list(values[dim:2 * dim]), dtype=dtype),
            float(values[2 * dim]),
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ray):
            return NotImplemented
        return (self.origin == other.origin and self.direction == other.direction
                and self.time == other.time)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin!r}, direction={self.direction!r}, time={self.time!r})"
