"""Example: an I-shaped section assembled from three rectangles."""

import logging

from xsect import Coordinates, CrossSection, Point, Rectangle, Vector


def plate(x0: float, y0: float, width: float, height: float) -> Rectangle:
    return Rectangle(
        Coordinates.CARTESIAN,
        (
            Point(x0, y0, 0.0),
            Point(x0 + width, y0, 0.0),
            Point(x0 + width, y0 + height, 0.0),
            Point(x0, y0 + height, 0.0),
        ),
    )


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    bottom = plate(0.0, 0.0, 0.20, 0.02)
    web = plate(0.095, 0.02, 0.01, 0.36)
    top = plate(0.05, 0.38, 0.10, 0.02)

    section = CrossSection(Vector(0.0, 0.0, 1.0), (bottom, web, top))
    c = section.centroid()
    print(f"shapes: {len(section)}")
    print(f"area: {section.area():.6f} m^2")
    print(f"centroid: ({c.x:.4f}, {c.y:.4f}, {c.z:.4f}) m")


if __name__ == "__main__":
    main()
