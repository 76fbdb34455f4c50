"""Process-wide geometry settings."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class GeometryConfig:
    # Zero keeps orthogonality and vector comparisons bit-exact.
    tolerance: float = 0.0
    normalize_circle_normal: bool = False

    def __post_init__(self) -> None:
        if self.tolerance < 0:
            raise ValueError(f"tolerance must be non-negative, got {self.tolerance}")


_GEOMETRY_CONFIG = GeometryConfig()


def get_config() -> GeometryConfig:
    return copy.deepcopy(_GEOMETRY_CONFIG)


def set_config(config: GeometryConfig) -> None:
    global _GEOMETRY_CONFIG
    _GEOMETRY_CONFIG = copy.deepcopy(config)


def reset_config() -> None:
    set_config(GeometryConfig())


def current_tolerance() -> float:
    return _GEOMETRY_CONFIG.tolerance
