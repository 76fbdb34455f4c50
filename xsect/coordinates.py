"""Conversions between Cartesian, cylindrical and spherical triples.

Cylindrical triples are ``(r, theta, z)``; spherical triples are
``(rho, theta, phi)`` with ``theta`` the azimuth in the x-y plane and ``phi``
the polar angle measured from +z.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Protocol, Tuple, TypeVar

from .scalar import ops_for

logger = logging.getLogger(__name__)


class Triple(Protocol):
    """Anything with three named components that can be rebuilt from raw scalars."""

    @property
    def x(self): ...

    @property
    def y(self): ...

    @property
    def z(self): ...

    @classmethod
    def from_triple(cls, a, b, c): ...


U = TypeVar("U", bound=Triple)


class Coordinates(Enum):
    CARTESIAN = "cartesian"
    CYLINDRICAL = "cylindrical"
    SPHERICAL = "spherical"

    @classmethod
    def parse(cls, text: str) -> "Coordinates":
        try:
            return cls(text.strip().lower())
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(f"unknown coordinate system {text!r} (expected one of: {choices})") from None

    def into_cartesian(self, b: U) -> U:
        """Re-express ``b``, given in this system, in Cartesian coordinates."""

        if self is Coordinates.CARTESIAN:
            return b
        ops = ops_for(b.x)
        if self is Coordinates.CYLINDRICAL:
            r, theta, z = b.x, b.y, b.z
            return type(b).from_triple(r * ops.cos(theta), r * ops.sin(theta), z)
        rho, theta, phi = b.x, b.y, b.z
        sin_phi = ops.sin(phi)
        return type(b).from_triple(
            rho * sin_phi * ops.cos(theta),
            rho * sin_phi * ops.sin(theta),
            rho * ops.cos(phi),
        )

    def into_cylindrical(self, b: U) -> U:
        """Re-express ``b``, given in this system, in cylindrical coordinates."""

        if self is Coordinates.CYLINDRICAL:
            return b
        ops = ops_for(b.x)
        if self is Coordinates.CARTESIAN:
            x, y, z = b.x, b.y, b.z
            return type(b).from_triple(ops.sqrt(x * x + y * y), ops.atan2(y, x), z)
        rho, theta, phi = b.x, b.y, b.z
        return type(b).from_triple(rho * ops.sin(phi), theta, rho * ops.cos(phi))

    def into_spherical(self, b: U) -> U:
        """Re-express ``b``, given in this system, in spherical coordinates."""

        if self is Coordinates.SPHERICAL:
            return b
        ops = ops_for(b.x)
        if self is Coordinates.CARTESIAN:
            x, y, z = b.x, b.y, b.z
            planar_sq = x * x + y * y
            rho = ops.sqrt(planar_sq + z * z)
            return type(b).from_triple(rho, ops.atan2(y, x), ops.atan2(ops.sqrt(planar_sq), z))
        r, theta, z = b.x, b.y, b.z
        return type(b).from_triple(ops.sqrt(r * r + z * z), theta, ops.atan2(r, z))

    def into(self, target: "Coordinates", b: U) -> U:
        if target is Coordinates.CARTESIAN:
            return self.into_cartesian(b)
        if target is Coordinates.CYLINDRICAL:
            return self.into_cylindrical(b)
        return self.into_spherical(b)


def convert(source: Coordinates, target: Coordinates, triple: U) -> U:
    """Re-express ``triple`` from ``source`` into ``target``.

    Converting into the same system returns ``triple`` itself.
    """

    return source.into(target, triple)


def reexpress(points: Iterable[U], source: Coordinates, target: Coordinates) -> Tuple[U, ...]:
    """Convert every triple in ``points``; the input sequence is left untouched."""

    converted = tuple(source.into(target, p) for p in points)
    if source is not target and logger.isEnabledFor(logging.DEBUG):
        logger.debug("Re-expressed %d triple(s) %s -> %s", len(converted), source.value, target.value)
    return converted


__all__ = ["Triple", "Coordinates", "convert", "reexpress"]
