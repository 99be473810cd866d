from __future__ import annotations

from typing import Iterator, Mapping, Sequence, Union
import math
import numpy as np


# Anything add/sub/dot accept as the other operand: a full Vector, a mapping
# with some of "x"/"y"/"z", or a sequence of up to three numbers.
VectorLike = Union["Vector", Mapping[str, float], Sequence[float]]


def _component(value: object) -> float:
    # Absent, None and NaN components count as zero.
    if value is None:
        return 0.0
    f = float(value)  # type: ignore[arg-type]
    return 0.0 if math.isnan(f) else f


def _components(other: VectorLike) -> tuple[float, float, float]:
    if isinstance(other, Vector):
        return _component(other.x), _component(other.y), _component(other.z)
    if isinstance(other, Mapping):
        return _component(other.get("x")), _component(other.get("y")), _component(other.get("z"))
    values = list(other)
    if len(values) > 3:
        raise ValueError("vector operand takes at most 3 components")
    values += [0.0] * (3 - len(values))
    return _component(values[0]), _component(values[1]), _component(values[2])


class Vector:
    """
    A two or three-dimensional vector: a point or a displacement, with both
    magnitude and direction.

    In-place operations (add, sub, mult, normalise, set_mag, set, set_heading,
    rotate) mutate the receiver and return it so calls can be chained. Use
    copy() when an unmutated snapshot is needed. The arithmetic operators
    (+, -, *) always build new vectors.
    """

    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float = 0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    # ---- Constructors ----
    @staticmethod
    def zero() -> "Vector":
        return Vector(0.0, 0.0, 0.0)

    @staticmethod
    def from_angle(angle: float, length: float = 1.0) -> "Vector":
        """
        2D vector of the given length pointing at `angle` radians from +x.
        """
        return Vector(length * math.cos(angle), length * math.sin(angle))

    # ---- Vector math ----
    def add(self, other: VectorLike) -> "Vector":
        ox, oy, oz = _components(other)
        self.x += ox
        self.y += oy
        self.z += oz
        return self

    def sub(self, other: VectorLike) -> "Vector":
        ox, oy, oz = _components(other)
        self.x -= ox
        self.y -= oy
        self.z -= oz
        return self

    def mult(self, scalar: float) -> "Vector":
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return self

    def dot(self, other: VectorLike) -> float:
        """
        Dot product. Largest in magnitude when both vectors point the same or
        opposite ways, 0 when they form a right angle.
        """
        ox, oy, oz = _components(other)
        return self.x * ox + self.y * oy + self.z * oz

    def cross(self, other: "Vector") -> "Vector":
        """
        Right-handed cross product. Its magnitude is the area of the
        parallelogram spanned by both vectors; 2D vectors have z = 0.
        """
        x = self.y * other.z - self.z * other.y
        y = self.z * other.x - self.x * other.z
        z = self.x * other.y - self.y * other.x
        return Vector(x, y, z)

    def normalise(self) -> "Vector":
        """
        Scale to unit length. The zero vector is left unchanged.
        """
        length = self.magnitude()
        if length != 0:
            self.mult(1.0 / length)
        return self

    # ---- Measurements ----
    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())

    def magnitude_squared(self) -> float:
        return self.x ** 2 + self.y ** 2 + self.z ** 2

    def set_mag(self, magnitude: float) -> "Vector":
        # Inherits normalise()'s zero-vector behaviour: stays zero whatever `magnitude` is.
        return self.normalise().mult(magnitude)

    def heading(self) -> float:
        """
        Angle from the positive x-axis, atan2(y, x). With y pointing down on
        screen, angles grow clockwise.
        """
        return math.atan2(self.y, self.x)

    # set_heading/rotate turn the vector in the x/y plane and keep z, so the
    # in-plane length is what gets preserved.
    def set_heading(self, angle: float) -> "Vector":
        m = math.hypot(self.x, self.y)
        self.x = m * math.cos(angle)
        self.y = m * math.sin(angle)
        return self

    def rotate(self, angle: float) -> "Vector":
        new_heading = self.heading() + angle
        mag = math.hypot(self.x, self.y)
        self.x = math.cos(new_heading) * mag
        self.y = math.sin(new_heading) * mag
        return self

    def angle_between(self, other: "Vector") -> float:
        """
        Signed angle between two vectors, so that
        a.angle_between(b) == -b.angle_between(a).

        The sign comes from the z component of the cross product (+1 when it
        is exactly 0). Returns NaN if either vector has zero magnitude.
        """
        if self.magnitude_squared() * other.magnitude_squared() == 0:
            return math.nan
        u = self.cross(other)
        sign = math.copysign(1.0, u.z) if u.z != 0 else 1.0
        return math.atan2(u.magnitude(), self.dot(other)) * sign

    def dist(self, other: "Vector") -> float:
        tmp = other.copy()
        tmp.sub(self)
        return tmp.magnitude()

    # ---- Utilities ----
    def copy(self) -> "Vector":
        return Vector(self.x, self.y, self.z)

    def set(self, x: float, y: float, z: float = 0.0) -> "Vector":
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        return self

    def equals(self, other: "Vector") -> bool:
        return self.x == other.x and self.y == other.y and self.z == other.z

    def to_string(self) -> str:
        return f"Vector : ({self.x}, {self.y}, {self.z})"

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)

    # ---- Python protocol ----
    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Vector(x={self.x!r}, y={self.y!r}, z={self.z!r})"

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.equals(other)

    # Mutable: equal vectors may not stay equal, so no hashing.
    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: VectorLike) -> "Vector":
        return self.copy().add(other)

    def __sub__(self, other: VectorLike) -> "Vector":
        return self.copy().sub(other)

    def __mul__(self, scalar: float) -> "Vector":
        return self.copy().mult(scalar)

    def __rmul__(self, scalar: float) -> "Vector":
        return self.copy().mult(scalar)

    def __neg__(self) -> "Vector":
        return self.copy().mult(-1.0)
