# core/vector.py
import math
from typing import Iterator, List, Optional, Union

import numpy as np

from tmath import config
from tmath.errors import (
    BoundaryError,
    DimensionMismatchError,
    IntegerDivisionByZero,
    ScalarTypeError,
)

Scalar = Union[int, float, np.number]

_SEQUENCE_TYPES = (list, tuple, np.ndarray)

# Filled in below once the fixed-dimension classes exist.
_DIMENSION_CLASSES = {}


def check_dtype(dtype) -> np.dtype:
    """
    Resolves dtype (None means the package default) and rejects unsupported ones.
    """
    dtype = config.DEFAULT_DTYPE if dtype is None else np.dtype(dtype)
    if dtype not in config.SCALAR_TYPES:
        raise ScalarTypeError(f"Unsupported scalar type: {dtype}")
    return dtype


def _unpack(components: tuple):
    if len(components) == 1 and isinstance(components[0], _SEQUENCE_TYPES + (Vector,)):
        return components[0]
    return components


def _wrap(data: np.ndarray) -> "Vector":
    vector = object.__new__(_DIMENSION_CLASSES.get(len(data), Vector))
    vector._data = data
    return vector


def _below(data: np.ndarray, low, high) -> np.ndarray:
    """
    Pulls samples that rounded up to high (possible for float32) back below it.
    """
    low = np.asarray(low, dtype=data.dtype)
    high = np.asarray(high, dtype=data.dtype)
    rounded_up = (data >= high) & (high > low)
    return np.where(rounded_up, np.nextafter(high, low), data).astype(data.dtype)


def _component(index: int, name: str) -> property:
    def getter(self):
        return self[index]

    def setter(self, value):
        self[index] = value

    return property(getter, setter, doc=f"Component {name} (index {index}).")


class Vector:
    """
    A fixed-length numeric vector, generic over its dimension and scalar type.

    Components live in a 1-D numpy array whose dtype is one of
    config.SCALAR_TYPES. The dimension never changes after construction.
    Arithmetic returns new vectors; only item assignment and normalize()
    modify a vector in place.

    Vector(1, 2, 3) and Vector((1, 2, 3)) both build a 3-vector, which is
    returned as a Vector3. Dimensions without a dedicated class stay Vector.
    """
    __slots__ = ("_data",)

    # Fixed by the dimension-specific subclasses.
    dimension: Optional[int] = None

    def __new__(cls, *components, dtype=None):
        if cls is Vector:
            cls = _DIMENSION_CLASSES.get(len(_unpack(components)), Vector)
        return object.__new__(cls)

    def __init__(self, *components, dtype=None):
        values = _unpack(components)
        if dtype is None and isinstance(values, Vector):
            dtype = values.dtype
        elif (dtype is None and isinstance(values, np.ndarray)
              and values.dtype in config.SCALAR_TYPES):
            dtype = values.dtype
        dtype = check_dtype(dtype)

        if len(values) == 0 and self.dimension is not None:
            data = np.zeros(self.dimension, dtype=dtype)
        else:
            data = np.array(values, dtype=dtype)

        if data.ndim != 1 or len(data) == 0:
            raise DimensionMismatchError(
                f"A vector needs at least one component, got shape {data.shape}")
        if self.dimension is not None and len(data) != self.dimension:
            raise DimensionMismatchError(
                f"{type(self).__name__} takes {self.dimension} components, got {len(data)}")
        self._data = data

    # ------------------------------------------------------------------
    # Alternative constructors
    # ------------------------------------------------------------------
    @classmethod
    def _resolve_dim(cls, dim: Optional[int]) -> int:
        if dim is None:
            dim = cls.dimension
            if dim is None:
                raise DimensionMismatchError("A dimension is required for a generic Vector")
        elif cls.dimension is not None and dim != cls.dimension:
            raise DimensionMismatchError(f"{cls.__name__} has dimension {cls.dimension}, not {dim}")
        if dim < 1:
            raise DimensionMismatchError(f"Dimension must be at least 1, got {dim}")
        return dim

    @classmethod
    def splat(cls, value: Scalar, dim: Optional[int] = None, dtype=None) -> "Vector":
        """
        Broadcasts one scalar to every component.
        """
        return _wrap(np.full(cls._resolve_dim(dim), value, dtype=check_dtype(dtype)))

    @classmethod
    def zeros(cls, dim: Optional[int] = None, dtype=None) -> "Vector":
        return _wrap(np.zeros(cls._resolve_dim(dim), dtype=check_dtype(dtype)))

    @classmethod
    def from_array(cls, array, dtype=None) -> "Vector":
        """
        Builds a vector from any 1-D array-like. Without a dtype the array's own
        type is kept when it is supported.
        """
        array = np.asarray(array)
        if dtype is None and array.dtype in config.SCALAR_TYPES:
            dtype = array.dtype
        return cls(array, dtype=check_dtype(dtype))

    @classmethod
    def from_list(cls, values: List[Scalar], dtype=None) -> "Vector":
        return cls(list(values), dtype=dtype)

    # ------------------------------------------------------------------
    # Random sampling
    # ------------------------------------------------------------------
    @classmethod
    def random(cls, dim: Optional[int] = None, dtype=None,
               rng: Optional[np.random.Generator] = None) -> "Vector":
        """
        Floats are uniform in [0, 1); integers cover the whole range of the type.
        """
        dim = cls._resolve_dim(dim)
        dtype = check_dtype(dtype)
        rng = config.global_rng() if rng is None else rng
        if dtype in config.FLOAT_TYPES:
            data = rng.random(dim, dtype=dtype)
        else:
            info = np.iinfo(dtype)
            data = rng.integers(info.min, info.max, size=dim, dtype=dtype, endpoint=True)
        return _wrap(data)

    @classmethod
    def random_range(cls, low: Scalar, high: Scalar, dim: Optional[int] = None, dtype=None,
                     rng: Optional[np.random.Generator] = None) -> "Vector":
        """
        Every component uniform in [low, high).
        """
        dim = cls._resolve_dim(dim)
        dtype = check_dtype(dtype)
        rng = config.global_rng() if rng is None else rng
        if dtype in config.FLOAT_TYPES:
            data = _below(rng.uniform(low, high, dim).astype(dtype), low, high)
        else:
            data = rng.integers(low, high, size=dim, dtype=dtype)
        return _wrap(data)

    @classmethod
    def random_vec_range(cls, low: "Vector", high: "Vector",
                         rng: Optional[np.random.Generator] = None) -> "Vector":
        """
        Component i uniform in [low[i], high[i]).
        """
        low._check_compatible(high)
        rng = config.global_rng() if rng is None else rng
        if low.is_float:
            data = _below(rng.uniform(low._data, high._data).astype(low.dtype),
                          low._data, high._data)
        else:
            data = rng.integers(low._data, high._data, dtype=low.dtype)
        return _wrap(data)

    @classmethod
    def random_unit(cls, dim: Optional[int] = None, dtype=None,
                    rng: Optional[np.random.Generator] = None) -> "Vector":
        """
        Samples the cube [-1, 1]^N and normalizes the result.
        """
        if check_dtype(dtype) not in config.FLOAT_TYPES:
            raise ScalarTypeError("random_unit requires a floating scalar type")
        vector = cls.random_range(-1.0, 1.0, dim, dtype, rng)
        vector.normalize()
        return vector

    @classmethod
    def random_in_hemisphere(cls, normal: "Vector",
                             rng: Optional[np.random.Generator] = None) -> "Vector":
        """
        Random unit vector flipped, if needed, onto the side normal points to.
        """
        on_sphere = cls.random_unit(normal.dim, normal.dtype, rng)
        if on_sphere.dot(normal) < 0:
            return -on_sphere
        return on_sphere

    # ------------------------------------------------------------------
    # Introspection and conversion
    # ------------------------------------------------------------------
    @property
    def dim(self) -> int:
        return len(self._data)

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def is_float(self) -> bool:
        return self._data.dtype in config.FLOAT_TYPES

    @property
    def is_signed(self) -> bool:
        return self._data.dtype in config.SIGNED_TYPES

    def convert(self, dim: Optional[int] = None, dtype=None) -> "Vector":
        """
        Changes dimension and/or scalar type.

        The first min(N_old, N_new) components are cast to the new type, extra
        components are zero when widening and dropped when narrowing.
        """
        dim = self.dim if dim is None else dim
        if dim < 1:
            raise DimensionMismatchError(f"Dimension must be at least 1, got {dim}")
        dtype = self.dtype if dtype is None else check_dtype(dtype)

        data = np.zeros(dim, dtype=dtype)
        shared = min(dim, self.dim)
        with np.errstate(invalid="ignore", over="ignore"):
            data[:shared] = self._data[:shared].astype(dtype)
        return _wrap(data)

    def copy(self) -> "Vector":
        return _wrap(self._data.copy())

    def __copy__(self) -> "Vector":
        return self.copy()

    def __deepcopy__(self, memo) -> "Vector":
        return self.copy()

    def to_list(self) -> List[Scalar]:
        return self._data.tolist()

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self._data.copy()
        return self._data.astype(dtype)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._data.tolist())

    def __repr__(self) -> str:
        components = ", ".join(repr(c) for c in self.to_list())
        if self.dtype != config.DEFAULT_DTYPE:
            components += f", dtype={self.dtype.name}"
        return f"{type(self).__name__}({components})"

    # ------------------------------------------------------------------
    # Component access
    # ------------------------------------------------------------------
    def _check_index(self, index) -> int:
        if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
            raise TypeError(f"Vector indices must be integers, not {type(index).__name__}")
        if not 0 <= index < len(self._data):
            raise BoundaryError(f"Index {index} out of range for a vector of dimension {self.dim}")
        return int(index)

    def __getitem__(self, index) -> Scalar:
        return self._data[self._check_index(index)].item()

    def __setitem__(self, index, value: Scalar):
        self._data[self._check_index(index)] = value

    x = _component(0, "x")
    y = _component(1, "y")
    z = _component(2, "z")
    w = _component(3, "w")

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def _check_compatible(self, other: "Vector"):
        if self.dim != other.dim:
            raise DimensionMismatchError(f"Dimension mismatch: {self.dim} vs {other.dim}")
        if self.dtype != other.dtype:
            raise ScalarTypeError(f"Scalar type mismatch: {self.dtype} vs {other.dtype}")

    def _scalar(self, value):
        """
        Casts a plain scalar to the vector's type. Integer vectors only take
        integral values inside their type's range.
        """
        dtype = self._data.dtype
        if not self.is_float:
            if isinstance(value, (float, np.floating)) and not float(value).is_integer():
                raise ScalarTypeError(f"Cannot combine {value!r} with a {dtype} vector")
            info = np.iinfo(dtype)
            if not info.min <= int(value) <= info.max:
                raise ScalarTypeError(f"{value!r} is out of range for {dtype}")
        return dtype.type(value)

    def _operand(self, other):
        if isinstance(other, Vector):
            self._check_compatible(other)
            return other._data
        if isinstance(other, (int, float, np.number)):
            return self._scalar(other)
        return None

    def _divide(self, lhs, rhs):
        if not self.is_float:
            if np.any(rhs == 0):
                raise IntegerDivisionByZero("Integer vector division by zero")
            # truncate toward zero
            return (lhs - np.fmod(lhs, rhs)) // rhs
        with np.errstate(divide="ignore", invalid="ignore"):
            return lhs / rhs

    def _remainder(self, lhs, rhs):
        if not self.is_float:
            if np.any(rhs == 0):
                raise IntegerDivisionByZero("Integer vector remainder by zero")
            return np.fmod(lhs, rhs)
        with np.errstate(divide="ignore", invalid="ignore"):
            return np.fmod(lhs, rhs)

    def __add__(self, other):
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return _wrap(self._data + rhs)

    def __radd__(self, other):
        lhs = self._operand(other)
        if lhs is None:
            return NotImplemented
        return _wrap(lhs + self._data)

    def __sub__(self, other):
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return _wrap(self._data - rhs)

    def __rsub__(self, other):
        lhs = self._operand(other)
        if lhs is None:
            return NotImplemented
        return _wrap(lhs - self._data)

    def __mul__(self, other):
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return _wrap(self._data * rhs)

    def __rmul__(self, other):
        lhs = self._operand(other)
        if lhs is None:
            return NotImplemented
        return _wrap(lhs * self._data)

    def __truediv__(self, other):
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return _wrap(self._divide(self._data, rhs))

    def __rtruediv__(self, other):
        lhs = self._operand(other)
        if lhs is None:
            return NotImplemented
        return _wrap(self._divide(lhs, self._data))

    def __mod__(self, other):
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return _wrap(self._remainder(self._data, rhs))

    def __rmod__(self, other):
        lhs = self._operand(other)
        if lhs is None:
            return NotImplemented
        return _wrap(self._remainder(lhs, self._data))

    def __neg__(self) -> "Vector":
        if not self.is_signed:
            raise ScalarTypeError(f"Cannot negate a vector of unsigned type {self.dtype}")
        return _wrap(-self._data)

    def __matmul__(self, other: "Vector") -> Scalar:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dot(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dim == other.dim and bool(np.array_equal(self._data, other._data))

    # Mutable through item assignment, so not hashable.
    __hash__ = None

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    def _require_float(self, operation: str):
        if not self.is_float:
            raise ScalarTypeError(f"{operation} requires a floating scalar type, got {self.dtype}")

    def _as_float(self) -> "Vector":
        if self.is_float:
            return self
        return self.convert(dtype=config.float_type_for(self.dtype))

    def length_squared(self) -> Scalar:
        return np.dot(self._data, self._data).item()

    def length(self) -> float:
        float_type = config.float_type_for(self.dtype)
        return float(np.sqrt(float_type.type(self.length_squared())))

    def dot(self, other: "Vector") -> Scalar:
        self._check_compatible(other)
        return np.dot(self._data, other._data).item()

    def normalize(self):
        """
        Scales this vector to unit length in place. A zero vector is left untouched.
        """
        self._require_float("normalize")
        length = self.length()
        if length != 0:
            self._data = self._data / self._data.dtype.type(length)

    def normalized(self) -> "Vector":
        result = self.copy()
        result.normalize()
        return result

    def distance(self, other: "Vector") -> float:
        return (self - other).length()

    def angle(self, other: "Vector") -> float:
        """
        Angle between two vectors in radians.

        Uses 2 * atan2(|a|b| - b|a||, |a|b| + b|a||), which keeps its precision
        close to 0 and pi where acos(dot / (|a| |b|)) does not.
        """
        self._check_compatible(other)
        a = self._as_float()
        b = other._as_float()
        a_scaled = a * b.length()
        b_scaled = b * a.length()
        return 2.0 * math.atan2((a_scaled - b_scaled).length(), (a_scaled + b_scaled).length())

    def reflect(self, normal: "Vector") -> "Vector":
        """
        Reflects this vector about normal.
        """
        return self - normal * (2 * self.dot(normal))

    def refract(self, normal: "Vector", eta_ratio: float) -> "Vector":
        """
        Refracts this (unit) vector through a surface with the given (unit) normal.
        eta_ratio is the ratio of refractive indices, incident over transmitted.
        """
        self._require_float("refract")
        cos_theta = min(-self.dot(normal), 1.0)
        r_out_perp = (self + normal * cos_theta) * eta_ratio
        r_out_parallel = normal * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
        return r_out_perp + r_out_parallel

    def min(self, other: "Vector") -> "Vector":
        self._check_compatible(other)
        return _wrap(np.minimum(self._data, other._data))

    def max(self, other: "Vector") -> "Vector":
        self._check_compatible(other)
        return _wrap(np.maximum(self._data, other._data))

    def near_zero(self) -> bool:
        """
        True when every component is within NEAR_ZERO_EPSILON of zero.
        """
        self._require_float("near_zero")
        return bool(np.all(np.abs(self._data) < config.NEAR_ZERO_EPSILON))


class Vector2(Vector):
    __slots__ = ()
    dimension = 2


class Vector3(Vector):
    """
    3D vector: points, directions and colors.
    """
    __slots__ = ()
    dimension = 3

    def cross(self, other: "Vector3") -> "Vector3":
        self._check_compatible(other)
        a, b = self._data, other._data
        return _wrap(np.array([
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        ], dtype=self.dtype))

    def rotate_about_angle_axis(self, angle: float, axis: "Vector3") -> "Vector3":
        """
        Rotates this vector by angle (degrees) about axis.

        The axis is normalized and turned into a unit quaternion q; the result
        is the vector part of q * (0, self) * conjugate(q).
        """
        from tmath.core.quaternion import Quaternion

        q = Quaternion(angle, axis.normalized()).as_unit_norm()
        return (q * Quaternion(0, self) * q.conjugate()).v


class Vector4(Vector):
    __slots__ = ()
    dimension = 4


Point3 = Vector3

_DIMENSION_CLASSES.update({2: Vector2, 3: Vector3, 4: Vector4})
