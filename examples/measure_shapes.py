"""Example: build the three primitives and print their measurements."""

import math

from xsect import Circle, Coordinates, Point, PolygonError, Rectangle, Triangle, Vector, measure


def main() -> None:
    triangle = Triangle.new(
        Point(0.0, 0.0, 0.0),
        Point(3.0, 0.0, 0.0),
        Point(3.0, 4.0, 0.0),
        Coordinates.CARTESIAN,
    )
    rectangle = Rectangle.new(
        Point(0.0, 0.0, 0.0),
        Point(0.3, 0.0, 0.0),
        Point(0.3, 0.6, 0.0),
        Point(0.0, 0.6, 0.0),
    )
    if isinstance(rectangle, PolygonError):
        raise SystemExit(f"rectangle rejected: {rectangle}")
    # Centre given as (r, theta, z).
    circle = Circle.new(Vector(1.0, math.pi / 4, 0.0), 0.25, Vector(0.0, 0.0, 1.0), Coordinates.CYLINDRICAL)

    for name, shape in (("triangle", triangle), ("rectangle", rectangle), ("circle", circle)):
        m = measure(shape)
        cx, cy, cz = m.centroid
        print(f"{name}: area={m.area:.6f} perimeter={m.perimeter:.6f} centroid=({cx:.4f}, {cy:.4f}, {cz:.4f})")


if __name__ == "__main__":
    main()
