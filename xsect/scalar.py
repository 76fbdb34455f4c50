"""Numeric capability contract shared by the vector and shape modules."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Protocol, TypeVar

import numpy as np


class Scalar(Protocol):
    """Operator surface a component type must provide."""

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __neg__(self) -> Any: ...

    def __eq__(self, other: object) -> bool: ...

    def __lt__(self, other: Any) -> bool: ...


T = TypeVar("T", bound=Scalar)


class Sign(Enum):
    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1


class ScalarOps(ABC):
    """Numeric policy for one scalar type.

    Arithmetic goes through the ordinary operators; everything the operators
    cannot express (roots, trigonometry, identities, sign, total division)
    lives here.
    """

    @abstractmethod
    def sqrt(self, value: T) -> T: ...

    @abstractmethod
    def sin(self, value: T) -> T: ...

    @abstractmethod
    def cos(self, value: T) -> T: ...

    @abstractmethod
    def tan(self, value: T) -> T: ...

    @abstractmethod
    def atan2(self, y: T, x: T) -> T:
        """Angle of the point ``(x, y)``, i.e. mathematical ``atan2(y, x)``."""

    @abstractmethod
    def pi(self) -> Any: ...

    @abstractmethod
    def zero(self) -> Any: ...

    @abstractmethod
    def one(self) -> Any: ...

    @abstractmethod
    def sign(self, value: T) -> Sign:
        """Classify ``value``; zero of either sign and NaN are ``Sign.ZERO``."""

    def div(self, numerator: T, denominator: T) -> T:
        """Division that never raises; degenerate quotients follow the scalar type."""

        return numerator / denominator

    def magnitude(self, value: T) -> T:
        if self.sign(value) is Sign.NEGATIVE:
            return -value
        return value

    def within(self, value: T, tolerance: float) -> bool:
        """``|value| <= tolerance``; a zero tolerance means exact equality.

        NaN is never within any tolerance.
        """

        if not tolerance:
            return value == self.zero()
        return self.magnitude(value) <= tolerance


class FloatOps(ScalarOps):
    def sqrt(self, value: float) -> float:
        return math.sqrt(value)

    def sin(self, value: float) -> float:
        return math.sin(value)

    def cos(self, value: float) -> float:
        return math.cos(value)

    def tan(self, value: float) -> float:
        return math.tan(value)

    def atan2(self, y: float, x: float) -> float:
        return math.atan2(y, x)

    def pi(self) -> float:
        return math.pi

    def zero(self) -> float:
        return 0.0

    def one(self) -> float:
        return 1.0

    def div(self, numerator: float, denominator: float) -> float:
        try:
            return numerator / denominator
        except ZeroDivisionError:
            # IEEE 754: 0/0 is NaN, x/0 is an infinity signed by both operands.
            if numerator == 0 or math.isnan(numerator):
                return math.nan
            return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)

    def sign(self, value: float) -> Sign:
        if value == 0 or math.isnan(value):
            return Sign.ZERO
        if math.copysign(1.0, value) < 0:
            return Sign.NEGATIVE
        return Sign.POSITIVE


class IntOps(FloatOps):
    """Integers keep integral identities; roots, angles and quotients become floats."""

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def sign(self, value: int) -> Sign:
        if value == 0:
            return Sign.ZERO
        return Sign.NEGATIVE if value < 0 else Sign.POSITIVE


class NumpyOps(ScalarOps):
    def __init__(self, dtype: type = np.float64) -> None:
        self.dtype = dtype

    def sqrt(self, value: np.floating) -> np.floating:
        return np.sqrt(value)

    def sin(self, value: np.floating) -> np.floating:
        return np.sin(value)

    def cos(self, value: np.floating) -> np.floating:
        return np.cos(value)

    def tan(self, value: np.floating) -> np.floating:
        return np.tan(value)

    def atan2(self, y: np.floating, x: np.floating) -> np.floating:
        return np.arctan2(y, x)

    def pi(self) -> np.floating:
        return self.dtype(np.pi)

    def zero(self) -> np.floating:
        return self.dtype(0)

    def one(self) -> np.floating:
        return self.dtype(1)

    def div(self, numerator: np.floating, denominator: np.floating) -> np.floating:
        with np.errstate(divide="ignore", invalid="ignore"):
            return np.true_divide(numerator, denominator)

    def sign(self, value: np.floating) -> Sign:
        if value == 0 or np.isnan(value):
            return Sign.ZERO
        if np.signbit(value):
            return Sign.NEGATIVE
        return Sign.POSITIVE


_REGISTRY: Dict[type, ScalarOps] = {}


def register_scalar(scalar_type: type, ops: ScalarOps) -> None:
    """Make ``scalar_type`` (and its subclasses) usable as a component type."""

    _REGISTRY[scalar_type] = ops


def ops_for(value: Any) -> ScalarOps:
    """Return the policy registered for ``type(value)`` or its nearest base."""

    for klass in type(value).__mro__:
        ops = _REGISTRY.get(klass)
        if ops is not None:
            return ops
    raise TypeError(f"no scalar operations registered for {type(value).__name__}")


def is_registered(scalar_type: type) -> bool:
    return any(klass in _REGISTRY for klass in scalar_type.__mro__)


register_scalar(float, FloatOps())
register_scalar(int, IntOps())
# Any other NumPy float width falls back to float64 identities.
register_scalar(np.floating, NumpyOps(np.float64))
register_scalar(np.float32, NumpyOps(np.float32))
register_scalar(np.float16, NumpyOps(np.float16))


__all__ = [
    "Scalar",
    "T",
    "Sign",
    "ScalarOps",
    "FloatOps",
    "IntOps",
    "NumpyOps",
    "register_scalar",
    "ops_for",
    "is_registered",
]
