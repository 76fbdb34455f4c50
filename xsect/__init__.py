from .scalar import Sign, ScalarOps, FloatOps, IntOps, NumpyOps, register_scalar, ops_for
from .types import PolygonError, PolygonErrorKind, SectionError
from .config import GeometryConfig, get_config, set_config, reset_config
from .vectors import Point, Vector
from .coordinates import Coordinates, convert, reexpress
from .shapes import (
    Polygon,
    Triangle,
    Rectangle,
    Circle,
    Shape,
    ShapeKind,
    Measurement,
    measure,
)
from .section import CrossSection

__all__ = [
    'Sign',
    'ScalarOps',
    'FloatOps',
    'IntOps',
    'NumpyOps',
    'register_scalar',
    'ops_for',
    'PolygonError',
    'PolygonErrorKind',
    'SectionError',
    'GeometryConfig',
    'get_config',
    'set_config',
    'reset_config',
    'Point',
    'Vector',
    'Coordinates',
    'convert',
    'reexpress',
    'Polygon',
    'Triangle',
    'Rectangle',
    'Circle',
    'Shape',
    'ShapeKind',
    'Measurement',
    'measure',
    'CrossSection',
]
