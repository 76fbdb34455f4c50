import argparse
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from xsect import (
    Circle,
    Coordinates,
    GeometryConfig,
    Point,
    PolygonError,
    Rectangle,
    Triangle,
    Vector,
    convert,
    measure,
    set_config,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_triple(text: str) -> Tuple[float, float, float]:
    parts = [part.strip() for part in text.split(",")]
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"expected x,y,z but got {text!r}")
    try:
        x, y, z = (float(part) for part in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(f"non-numeric component in {text!r}") from None
    return x, y, z


def _parse_tolerance(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"tolerance must be a number, got {text!r}") from None
    if not value >= 0.0:
        raise argparse.ArgumentTypeError(f"tolerance must be non-negative, got {text!r}")
    return value


def _parse_coords(text: str) -> Coordinates:
    try:
        return Coordinates.parse(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _fmt(value: float) -> str:
    # Adding 0.0 folds -0.0 into 0.0.
    return f"{value + 0.0:.6g}"


def _fmt_triple(triple: Sequence[float]) -> str:
    return "(" + ", ".join(_fmt(v) for v in triple) + ")"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xsect",
        description="Measure cross-section primitives and convert coordinate triples",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--coords",
        type=_parse_coords,
        default=Coordinates.CARTESIAN,
        help="Coordinate system of the input triples (default: cartesian)",
    )
    parser.add_argument(
        "--tolerance",
        type=_parse_tolerance,
        default=0.0,
        help="Comparison tolerance for rectangle validation (default: exact)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    tri = sub.add_parser("triangle", help="Measure a triangle")
    tri.add_argument("vertices", nargs=3, type=_parse_triple, metavar="X,Y,Z")

    rect = sub.add_parser("rectangle", help="Measure a rectangle")
    rect.add_argument("vertices", nargs=4, type=_parse_triple, metavar="X,Y,Z")

    circ = sub.add_parser("circle", help="Measure a circle")
    circ.add_argument("--center", type=_parse_triple, required=True)
    circ.add_argument("--radius", type=float, required=True)
    circ.add_argument("--normal", type=_parse_triple, default=(0.0, 0.0, 1.0))

    conv = sub.add_parser("convert", help="Convert a triple between coordinate systems")
    conv.add_argument("--to", dest="target", type=_parse_coords, required=True)
    conv.add_argument("triple", type=_parse_triple, metavar="A,B,C")
    return parser


def _report(shape) -> List[str]:
    m = measure(shape)
    return [
        f"area: {_fmt(m.area)}",
        f"perimeter: {_fmt(m.perimeter)}",
        f"centroid: {_fmt_triple(m.centroid)}",
        f"normal: {_fmt_triple(m.normal)}",
    ]


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    set_config(GeometryConfig(tolerance=args.tolerance))

    if args.command == "convert":
        result = convert(args.coords, args.target, Point(*args.triple))
        logger.info("Converted %s -> %s", args.coords.value, args.target.value)
        print(_fmt_triple(result))
        return

    if args.command == "triangle":
        shape = Triangle.new(*(Point(*v) for v in args.vertices), coords=args.coords)
    elif args.command == "rectangle":
        shape = Rectangle.new(*(Point(*v) for v in args.vertices), coords=args.coords)
        if isinstance(shape, PolygonError):
            logger.error("Cannot build rectangle: %s", shape)
            raise SystemExit(1)
    else:
        shape = Circle.new(Vector(*args.center), args.radius, Vector(*args.normal), coords=args.coords)

    logger.info("Measuring %s given in %s coordinates", args.command, args.coords.value)
    for line in _report(shape):
        print(line)


if __name__ == "__main__":  # pragma: no cover - manual invocation
    main(sys.argv[1:])
