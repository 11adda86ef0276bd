# MIT License (see LICENSE)
"""
Immutable 3D vector algebra.

Vector is a frozen value type: every operation returns a new Vector (or a
float for dot and magnitude) and never mutates its operands. The algebra
is available both as named module-level functions and as operators:

    a + b       add(a, b)
    a - b       sub(a, b)
    v * s       scale(v, s)     (also s * v)
    a @ b       dot(a, b)
    -v          scale(v, -1)
    v / s       component-wise division by s

Degenerate inputs are not rejected. Normalizing the zero vector divides
by a zero magnitude and yields inf/nan components following IEEE 754,
exactly as plain float arithmetic would.
"""
from __future__ import annotations
from dataclasses import dataclass
from numbers import Real
from typing import Iterator

import numpy as np

from .util import f64, norm


@dataclass(frozen=True)
class Vector:
    """
    A 3-component real vector used for position, velocity and acceleration.

    Attributes:
        x: First component.
        y: Second component.
        z: Third component.

    Note:
        Components are stored as Python floats so equality is exact and
        component-wise.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self) -> None:
        """Coerce components to float."""
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> Vector:
        return zero()

    @classmethod
    def from2(cls, x: float, y: float) -> Vector:
        """Planar vector; z is set to zero."""
        return from2(x, y)

    @classmethod
    def from3(cls, x: float, y: float, z: float) -> Vector:
        return from3(x, y, z)

    @classmethod
    def from_array(cls, a) -> Vector:
        """
        Build a Vector from any array-like of length 3.

        Raises:
            ValueError: If the input does not have shape (3,).
        """
        arr = f64(a)
        if arr.shape != (3,):
            raise ValueError(f"Expected an array of shape (3,), got {arr.shape}")
        return cls(arr[0], arr[1], arr[2])

    def as_array(self) -> np.ndarray:
        """Components as a float64 numpy array of shape (3,)."""
        return f64((self.x, self.y, self.z))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    # -------------------------------------------------------------------------
    # Algebra
    # -------------------------------------------------------------------------

    def dot(self, other: Vector) -> float:
        return dot(self, other)

    def magnitude(self) -> float:
        return magnitude(self)

    def unit(self) -> Vector:
        return unit(self)

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return sub(self, other)

    def __mul__(self, s):
        if not isinstance(s, Real):
            return NotImplemented
        return scale(self, s)

    __rmul__ = __mul__

    def __truediv__(self, s):
        if not isinstance(s, Real):
            return NotImplemented
        with np.errstate(divide="ignore", invalid="ignore"):
            x, y, z = np.divide((self.x, self.y, self.z), s)
        return Vector(x, y, z)

    def __matmul__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return dot(self, other)

    def __neg__(self) -> Vector:
        return scale(self, -1.0)


def _reciprocal(s: float) -> float:
    # 1/0 -> inf instead of ZeroDivisionError
    with np.errstate(divide="ignore"):
        return float(np.divide(1.0, s))


def zero() -> Vector:
    """The zero vector (0, 0, 0)."""
    return Vector(0.0, 0.0, 0.0)


def from2(x: float, y: float) -> Vector:
    """Vector (x, y, 0)."""
    return Vector(x, y, 0.0)


def from3(x: float, y: float, z: float) -> Vector:
    """Vector (x, y, z)."""
    return Vector(x, y, z)


def add(a: Vector, b: Vector) -> Vector:
    """Component-wise sum a + b."""
    return Vector(a.x + b.x, a.y + b.y, a.z + b.z)


def sub(a: Vector, b: Vector) -> Vector:
    """Component-wise difference a - b."""
    return Vector(a.x - b.x, a.y - b.y, a.z - b.z)


def scale(v: Vector, s: float) -> Vector:
    """Component-wise product of v with the scalar s."""
    return Vector(v.x * s, v.y * s, v.z * s)


def dot(a: Vector, b: Vector) -> float:
    """Dot product: sum of component-wise products."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def magnitude(v: Vector) -> float:
    """Euclidean norm sqrt(x² + y² + z²). Zero for the zero vector."""
    return norm((v.x, v.y, v.z))


def unit(v: Vector) -> Vector:
    """
    Unit vector in the direction of v, computed as scale(v, 1/|v|).

    For the zero vector the reciprocal is inf and every component becomes
    nan (0 * inf). Callers needing a defined result must not normalize a
    zero vector.
    """
    return scale(v, _reciprocal(magnitude(v)))
