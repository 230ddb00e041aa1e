# core/quaternion.py
import math
from typing import List, Sequence

import numpy as np

from tmath.core.vector import Scalar, Vector, Vector3
from tmath.errors import BoundaryError, DimensionMismatchError, ScalarTypeError


def _divide(a: float, b: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(a, b))


def _remainder(a: float, b: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.fmod(a, b))


class Quaternion:
    """
    Scalar part s plus vector part v.

    Used as a general quaternion, or, before calling unit_norm() or
    as_unit_norm(), as an angle-axis descriptor where s holds the angle in
    degrees and v the axis. Nothing keeps a quaternion normalized; callers
    normalize explicitly before using one as a rotation.
    """
    __slots__ = ("_s", "_v")

    def __init__(self, s: float, v, dtype=None):
        self.v = Vector3(v, dtype=dtype)
        self.s = s

    @property
    def v(self) -> Vector3:
        return self._v

    @v.setter
    def v(self, value):
        vector = Vector3(value)
        if not vector.is_float:
            raise ScalarTypeError(f"Quaternions need a floating scalar type, got {vector.dtype}")
        self._v = vector
        if hasattr(self, "_s"):
            self.s = self._s

    @property
    def s(self) -> float:
        return self._s

    @s.setter
    def s(self, value: float):
        # round through the vector's scalar type so s and v share precision
        self._s = float(self.v.dtype.type(value))

    @property
    def dtype(self) -> np.dtype:
        return self.v.dtype

    @classmethod
    def from_components(cls, x: float, y: float, z: float, w: float, dtype=None) -> "Quaternion":
        """
        Builds a quaternion from (x, y, z, w) where w is the scalar part.
        """
        return cls(w, (x, y, z), dtype=dtype)

    @classmethod
    def from_vector4(cls, vector: Vector) -> "Quaternion":
        if vector.dim != 4:
            raise DimensionMismatchError(f"Expected a 4-vector, got dimension {vector.dim}")
        return cls(vector[3], vector.convert(dim=3))

    @classmethod
    def from_list(cls, values: Sequence[float], dtype=None) -> "Quaternion":
        if len(values) != 4:
            raise DimensionMismatchError(f"Expected 4 values (x, y, z, w), got {len(values)}")
        return cls.from_components(*values, dtype=dtype)

    @classmethod
    def from_angle_axis(cls, angle: float, axis: Vector) -> "Quaternion":
        """
        Unit quaternion rotating by angle (degrees) about axis.
        """
        return cls(angle, axis).as_unit_norm()

    def to_list(self) -> List[float]:
        return self.v.to_list() + [self.s]

    def copy(self) -> "Quaternion":
        return Quaternion(self.s, self.v)

    def _check_compatible(self, other: "Quaternion"):
        if self.dtype != other.dtype:
            raise ScalarTypeError(f"Scalar type mismatch: {self.dtype} vs {other.dtype}")

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def __add__(self, other):
        if isinstance(other, Quaternion):
            self._check_compatible(other)
            return Quaternion(self.s + other.s, self.v + other.v)
        if isinstance(other, (int, float, np.number)):
            return Quaternion(self.s + other, self.v + other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Quaternion):
            self._check_compatible(other)
            return Quaternion(self.s - other.s, self.v - other.v)
        if isinstance(other, (int, float, np.number)):
            return Quaternion(self.s - other, self.v - other)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Quaternion):
            # Hamilton product
            self._check_compatible(other)
            return Quaternion(
                self.s * other.s - self.v.dot(other.v),
                other.v * self.s + self.v * other.s + self.v.cross(other.v),
            )
        if isinstance(other, (int, float, np.number)):
            return Quaternion(self.s * other, self.v * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float, np.number)):
            return Quaternion(other * self.s, other * self.v)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, (int, float, np.number)):
            return Quaternion(_divide(self.s, other), self.v / other)
        return NotImplemented

    def __mod__(self, other):
        if isinstance(other, (int, float, np.number)):
            return Quaternion(_remainder(self.s, other), self.v % other)
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return self.s == other.s and self.v == other.v

    __hash__ = None

    def __getitem__(self, index: int) -> Scalar:
        """
        Indices 0..2 read the vector part, 3 reads the scalar part.
        """
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise TypeError(f"Quaternion indices must be integers, not {type(index).__name__}")
        if index == 3:
            return self.s
        if 0 <= index < 3:
            return self.v[int(index)]
        raise BoundaryError(f"Quaternion index {index} out of range")

    def __repr__(self) -> str:
        return f"Quaternion(s={self.s!r}, v={self.v!r})"

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------
    def norm(self) -> float:
        return math.sqrt(self.s * self.s + self.v.dot(self.v))

    def normalize(self):
        norm = self.norm()
        if norm != 0:
            self.s = self.s / norm
            self.v = self.v / norm

    def normalized(self) -> "Quaternion":
        result = self.copy()
        result.normalize()
        return result

    def conjugate(self) -> "Quaternion":
        return Quaternion(self.s, -self.v)

    def inverse(self) -> "Quaternion":
        norm = self.norm()
        return self.conjugate() * _divide(1.0, norm * norm)

    def unit_norm(self):
        """
        Reads s as an angle in degrees and v as an axis, and turns this
        quaternion into the matching unit rotation quaternion in place.
        """
        half_angle = math.radians(self.s) / 2.0
        self.v.normalize()
        self.s = math.cos(half_angle)
        self.v = self.v * math.sin(half_angle)

    def as_unit_norm(self) -> "Quaternion":
        half_angle = math.radians(self.s) / 2.0
        return Quaternion(math.cos(half_angle), self.v.normalized() * math.sin(half_angle))
