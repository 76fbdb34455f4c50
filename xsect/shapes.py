"""Planar cross-section primitives and their measurements.

Every shape keeps its input in the coordinate system it was given and
re-expresses it in Cartesian coordinates before measuring, so centroids and
normals always come back Cartesian.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Protocol, Sequence, Tuple, Union

from .config import get_config
from .coordinates import Coordinates, reexpress
from .logging_utils import apply_debug_logging
from .scalar import T, ScalarOps, ops_for
from .types import Outcome, PolygonError, PolygonErrorKind
from .vectors import Point, Vector

logger = logging.getLogger(__name__)


class Polygon(Protocol[T]):
    def area(self) -> T: ...

    def perimeter(self) -> T: ...

    def centroid(self) -> Point[T]: ...

    def normal(self) -> Vector[T]: ...


def _freeze_vertices(shape: object, vertices: Sequence[Point[T]], expect: int) -> None:
    vertices = tuple(vertices)
    if len(vertices) != expect:
        raise PolygonError(
            PolygonErrorKind.BAD_CONSTRUCTION,
            f"{type(shape).__name__} needs {expect} vertices, got {len(vertices)}",
        )
    object.__setattr__(shape, "vertices", vertices)


def _small_int(ops: ScalarOps, n: int):
    # Built from the identity so integer-like scalars never see a float literal.
    value = ops.zero()
    for _ in range(n):
        value = value + ops.one()
    return value


@dataclass(frozen=True)
class Triangle(Generic[T]):
    coords: Coordinates
    vertices: Tuple[Point[T], Point[T], Point[T]]

    def __post_init__(self) -> None:
        _freeze_vertices(self, self.vertices, 3)

    @classmethod
    def new(
        cls, a: Point[T], b: Point[T], c: Point[T], coords: Coordinates = Coordinates.CARTESIAN
    ) -> "Triangle[T]":
        return cls(coords, (a, b, c))

    def reparm(self, target: Coordinates) -> Tuple[Point[T], ...]:
        """Return the vertices re-expressed in ``target``."""

        return reexpress(self.vertices, self.coords, target)

    def edges(self) -> Tuple[Vector[T], Vector[T], Vector[T]]:
        a, b, c = self.reparm(Coordinates.CARTESIAN)
        return Vector.from_pair(a, b), Vector.from_pair(b, c), Vector.from_pair(c, a)

    def area(self) -> T:
        ab, _, ca = self.edges()
        ops = ops_for(ab.x)
        return ab.cross(-ca).norm() / _small_int(ops, 2)

    def perimeter(self) -> T:
        ab, bc, ca = self.edges()
        return ab.norm() + bc.norm() + ca.norm()

    def centroid(self) -> Point[T]:
        a, b, c = self.reparm(Coordinates.CARTESIAN)
        return (a + b + c).div_by(_small_int(ops_for(a.x), 3))

    def normal(self) -> Vector[T]:
        ab, bc, _ = self.edges()
        return ab.cross(bc).unit()


@dataclass(frozen=True)
class Rectangle(Generic[T]):
    """Four vertices in traversal order.

    Edge ``i`` runs from vertex ``i`` to vertex ``i + 1`` (wrapping). A valid
    rectangle has perpendicular consecutive edges and opposite edges that are
    equal once traversed in the same direction.
    """

    coords: Coordinates
    vertices: Tuple[Point[T], Point[T], Point[T], Point[T]]

    def __post_init__(self) -> None:
        _freeze_vertices(self, self.vertices, 4)
        e0, e1, e2, e3 = self.edges()
        if not (e0.is_perpendicular_to(e1) and e2.is_perpendicular_to(e3)):
            logger.debug("Rejecting rectangle with non-perpendicular edges %s", self.vertices)
            raise PolygonError(PolygonErrorKind.NON_ORTHOGONAL, "consecutive edges are not perpendicular")
        if not (e0.is_close(-e2) and e1.is_close(-e3)):
            logger.debug("Rejecting rectangle with unequal opposite edges %s", self.vertices)
            raise PolygonError(PolygonErrorKind.NON_ORTHOGONAL, "opposite edges differ")

    @classmethod
    def new(
        cls,
        a: Point[T],
        b: Point[T],
        c: Point[T],
        d: Point[T],
        coords: Coordinates = Coordinates.CARTESIAN,
    ) -> Outcome["Rectangle[T]"]:
        """Build a rectangle, returning the ``PolygonError`` instead of raising it."""

        try:
            return cls(coords, (a, b, c, d))
        except PolygonError as exc:
            return exc

    def reparm(self, target: Coordinates) -> Tuple[Point[T], ...]:
        return reexpress(self.vertices, self.coords, target)

    def edges(self) -> Tuple[Vector[T], ...]:
        pts = self.reparm(Coordinates.CARTESIAN)
        return tuple(Vector.from_pair(pts[i], pts[(i + 1) % 4]) for i in range(4))

    def edge(self, index: int) -> Vector[T]:
        return self.edges()[index % 4]

    def area(self) -> T:
        e0, e1 = self.edges()[:2]
        return e0.cross(e1).norm()

    def perimeter(self) -> T:
        e0, e1, e2, e3 = self.edges()
        return e0.norm() + e1.norm() + e2.norm() + e3.norm()

    def centroid(self) -> Point[T]:
        a, b, c, d = self.reparm(Coordinates.CARTESIAN)
        return (a + b + c + d).div_by(_small_int(ops_for(a.x), 4))

    def normal(self) -> Vector[T]:
        e0, e1 = self.edges()[:2]
        return e0.cross(e1).unit()


@dataclass(frozen=True)
class Circle(Generic[T]):
    """A disc of ``radius`` around ``center`` in the plane normal to ``normal``.

    ``center`` is read in ``coords``; ``normal`` is a direction and is used
    as given.
    """

    coords: Coordinates
    center: Vector[T]
    radius: T
    normal_vector: Vector[T]

    def __post_init__(self) -> None:
        if get_config().normalize_circle_normal:
            object.__setattr__(self, "normal_vector", self.normal_vector.unit())

    @classmethod
    def new(
        cls,
        center: Vector[T],
        radius: T,
        normal: Vector[T],
        coords: Coordinates = Coordinates.CARTESIAN,
    ) -> "Circle[T]":
        return cls(coords, center, radius, normal)

    def area(self) -> T:
        ops = ops_for(self.radius)
        return ops.pi() * self.radius * self.radius

    def perimeter(self) -> T:
        ops = ops_for(self.radius)
        return _small_int(ops, 2) * ops.pi() * self.radius

    def centroid(self) -> Point[T]:
        return Point.from_vector(self.coords.into_cartesian(self.center))

    def normal(self) -> Vector[T]:
        return self.normal_vector


Variant = Union[Triangle, Rectangle, Circle]


class ShapeKind(Enum):
    TRIANGLE = "triangle"
    RECTANGLE = "rectangle"
    CIRCLE = "circle"


_KINDS = {Triangle: ShapeKind.TRIANGLE, Rectangle: ShapeKind.RECTANGLE, Circle: ShapeKind.CIRCLE}


@dataclass(frozen=True)
class Shape(Generic[T]):
    """Closed union over the supported polygon kinds."""

    variant: Variant

    def __post_init__(self) -> None:
        if type(self.variant) not in _KINDS:
            raise TypeError(f"Shape cannot wrap {type(self.variant).__name__}")

    @property
    def kind(self) -> ShapeKind:
        return _KINDS[type(self.variant)]

    def area(self) -> T:
        return self.variant.area()

    def perimeter(self) -> T:
        return self.variant.perimeter()

    def centroid(self) -> Point[T]:
        return self.variant.centroid()

    def normal(self) -> Vector[T]:
        return self.variant.normal()


@dataclass(frozen=True)
class Measurement(Generic[T]):
    area: T
    perimeter: T
    centroid: Point[T]
    normal: Vector[T]


def as_shape(value: Union[Shape, Variant]) -> Shape:
    return value if isinstance(value, Shape) else Shape(value)


def measure(shape: Union[Shape, Variant]) -> Measurement:
    """Evaluate the full polygon contract of ``shape`` at once."""

    shape = as_shape(shape)
    return Measurement(
        area=shape.area(),
        perimeter=shape.perimeter(),
        centroid=shape.centroid(),
        normal=shape.normal(),
    )


apply_debug_logging(globals(), logger=logger, skip={"Polygon"})


__all__ = [
    "Polygon",
    "Triangle",
    "Rectangle",
    "Circle",
    "Shape",
    "ShapeKind",
    "Measurement",
    "as_shape",
    "measure",
]
