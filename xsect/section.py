"""Composite cross-sections built from coplanar shapes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import reduce
from typing import Generic, Iterable, Iterator, Tuple, Union

from .logging_utils import apply_debug_logging
from .scalar import T, ops_for
from .shapes import Measurement, Shape, Variant, as_shape, measure
from .types import SectionError
from .vectors import Point, Vector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CrossSection(Generic[T]):
    """Shapes sharing one plane, described by the section's neutral axis.

    Each shape's normal must be parallel to the axis; length and sense are free.
    """

    neutral_axis: Vector[T]
    shapes: Tuple[Shape[T], ...]

    def __post_init__(self) -> None:
        shapes = tuple(as_shape(s) for s in self.shapes)
        object.__setattr__(self, "shapes", shapes)
        if self.neutral_axis.is_zero():
            raise SectionError("neutral axis must be a non-zero vector")
        for index, shape in enumerate(shapes):
            n = shape.normal()
            if not n.is_orthogonal_to(self.neutral_axis):
                raise SectionError(
                    f"shape {index} ({shape.kind.value}) has normal {n.as_tuple()} "
                    f"not aligned with neutral axis {self.neutral_axis.as_tuple()}"
                )
        logger.debug("Built cross-section with %d shape(s)", len(shapes))

    @classmethod
    def new(
        cls, neutral_axis: Vector[T], shapes: Iterable[Union[Shape[T], Variant]]
    ) -> Union["CrossSection[T]", SectionError]:
        try:
            return cls(neutral_axis, tuple(shapes))
        except SectionError as exc:
            return exc

    def __len__(self) -> int:
        return len(self.shapes)

    def __iter__(self) -> Iterator[Shape[T]]:
        return iter(self.shapes)

    def measurements(self) -> Tuple[Measurement[T], ...]:
        return tuple(measure(shape) for shape in self.shapes)

    def area(self) -> T:
        zero = ops_for(self.neutral_axis.x).zero()
        return reduce(lambda acc, shape: acc + shape.area(), self.shapes, zero)

    def centroid(self) -> Point[T]:
        """Area-weighted mean of the member centroids."""

        if not self.shapes:
            raise SectionError("an empty cross-section has no centroid")
        zero = ops_for(self.neutral_axis.x).zero()
        total = zero
        moment = Point(zero, zero, zero)
        for m in self.measurements():
            c = m.centroid
            moment = moment + Point(c.x * m.area, c.y * m.area, c.z * m.area)
            total = total + m.area
        return moment.div_by(total)

    def normal(self) -> Vector[T]:
        return self.neutral_axis


apply_debug_logging(globals(), logger=logger)


__all__ = ["CrossSection"]
