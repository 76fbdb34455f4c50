from __future__ import annotations

from enum import Enum
from typing import Optional, TypeVar, Union

T = TypeVar("T")


class PolygonErrorKind(Enum):
    NON_ORTHOGONAL = "non-orthogonal"
    # Reserved for shape validation beyond the rectangle edge checks.
    BAD_CONSTRUCTION = "bad-construction"


class PolygonError(ValueError):
    """Raised (or returned) when a polygon cannot be built from its input."""

    def __init__(self, kind: PolygonErrorKind, message: Optional[str] = None) -> None:
        self.kind = kind
        super().__init__(message or kind.value)

    def __repr__(self) -> str:
        return f"PolygonError({self.kind.name}, {str(self)!r})"


class SectionError(ValueError):
    """Raised when shapes do not share the plane of a cross-section."""


Outcome = Union[T, PolygonError]


__all__ = [
    "PolygonErrorKind",
    "PolygonError",
    "SectionError",
    "Outcome",
]
