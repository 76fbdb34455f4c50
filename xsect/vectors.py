"""Points and vectors over any registered scalar type."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Generic, Iterator, Optional, Sequence, Tuple

import numpy as np

from .config import current_tolerance
from .scalar import T, ScalarOps, ops_for


def _component_name(index: int) -> str:
    """Map 1/2/3 onto ``x``/``y``/``z``; anything past 2 selects ``z``."""

    if index == 1:
        return "x"
    if index == 2:
        return "y"
    return "z"


@dataclass(frozen=True, order=True)
class Point(Generic[T]):
    """A position in 3-space. Compares lexicographically on ``(x, y, z)``."""

    x: T
    y: T
    z: T

    @classmethod
    def from_triple(cls, a: T, b: T, c: T) -> "Point[T]":
        return cls(a, b, c)

    @classmethod
    def from_vector(cls, v: "Vector[T]") -> "Point[T]":
        return cls(v.x, v.y, v.z)

    @classmethod
    def from_array(cls, values: Sequence[T]) -> "Point[T]":
        x, y, z = np.asarray(values).reshape(3).tolist()
        return cls(x, y, z)

    @classmethod
    def zero(cls, like: T = 0.0) -> "Point[T]":
        z = ops_for(like).zero()
        return cls(z, z, z)

    def __iter__(self) -> Iterator[T]:
        return iter((self.x, self.y, self.z))

    def as_tuple(self) -> Tuple[T, T, T]:
        return (self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        return np.array(self.as_tuple())

    def with_component(self, index: int, value: T) -> "Point[T]":
        return replace(self, **{_component_name(index): value})

    def __add__(self, other: "Point[T]") -> "Point[T]":
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Point[T]") -> "Point[T]":
        return Point(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Point[T]":
        return Point(-self.x, -self.y, -self.z)

    def div_by(self, divisor: T) -> "Point[T]":
        div = ops_for(self.x).div
        return Point(div(self.x, divisor), div(self.y, divisor), div(self.z, divisor))


@dataclass(frozen=True, order=True)
class Vector(Generic[T]):
    """A displacement in 3-space.

    Ordering is lexicographic and carries no geometric meaning; it exists so
    vectors sort deterministically.
    """

    x: T
    y: T
    z: T

    @classmethod
    def from_triple(cls, a: T, b: T, c: T) -> "Vector[T]":
        return cls(a, b, c)

    @classmethod
    def from_point(cls, p: Point[T]) -> "Vector[T]":
        return cls(p.x, p.y, p.z)

    @classmethod
    def from_pair(cls, p1: Point[T], p2: Point[T]) -> "Vector[T]":
        """Displacement from ``p1`` to ``p2``."""

        return cls.from_point(p2 - p1)

    @classmethod
    def from_array(cls, values: Sequence[T]) -> "Vector[T]":
        x, y, z = np.asarray(values).reshape(3).tolist()
        return cls(x, y, z)

    @classmethod
    def zero(cls, like: T = 0.0) -> "Vector[T]":
        z = ops_for(like).zero()
        return cls(z, z, z)

    def __iter__(self) -> Iterator[T]:
        return iter((self.x, self.y, self.z))

    def as_tuple(self) -> Tuple[T, T, T]:
        return (self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        return np.array(self.as_tuple())

    def with_component(self, index: int, value: T) -> "Vector[T]":
        return replace(self, **{_component_name(index): value})

    @property
    def ops(self) -> ScalarOps:
        return ops_for(self.x)

    def __add__(self, other: "Vector[T]") -> "Vector[T]":
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector[T]") -> "Vector[T]":
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector[T]":
        return Vector(-self.x, -self.y, -self.z)

    def div_by(self, divisor: T) -> "Vector[T]":
        div = self.ops.div
        return Vector(div(self.x, divisor), div(self.y, divisor), div(self.z, divisor))

    def dot(self, other: "Vector[T]") -> T:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector[T]") -> "Vector[T]":
        # |i  j  k |
        # |x1 y1 z1| = (y1 z2 - z1 y2) i - (x1 z2 - z1 x2) j + (x1 y2 - y1 x2) k
        # |x2 y2 z2|
        a = self.y * other.z - self.z * other.y
        b = -(self.x * other.z - self.z * other.x)
        c = self.x * other.y - self.y * other.x
        return Vector(a, b, c)

    def norm(self) -> T:
        return self.ops.sqrt(self.dot(self))

    def unit(self) -> "Vector[T]":
        return self.div_by(self.norm())

    def is_close(self, other: "Vector[T]", tolerance: Optional[float] = None) -> bool:
        """Componentwise comparison; exact unless a positive tolerance applies."""

        tol = current_tolerance() if tolerance is None else tolerance
        if not tol:
            return self == other
        ops = self.ops
        return all(ops.within(a - b, tol) for a, b in zip(self, other))

    def is_zero(self, tolerance: Optional[float] = None) -> bool:
        return self.is_close(Vector.zero(self.x), tolerance)

    def is_orthogonal_to(self, other: "Vector[T]", tolerance: Optional[float] = None) -> bool:
        """True when the cross product with ``other`` is the zero vector."""

        return self.cross(other).is_zero(tolerance)

    def is_perpendicular_to(self, other: "Vector[T]", tolerance: Optional[float] = None) -> bool:
        """True when the dot product with ``other`` vanishes."""

        tol = current_tolerance() if tolerance is None else tolerance
        return self.ops.within(self.dot(other), tol)


__all__ = ["Point", "Vector"]
