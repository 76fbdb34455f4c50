"""Example: move one point through all three coordinate systems."""

from xsect import Coordinates, Point, convert


def main() -> None:
    p = Point(1.0, 1.0, 1.0)
    cyl = convert(Coordinates.CARTESIAN, Coordinates.CYLINDRICAL, p)
    sph = convert(Coordinates.CYLINDRICAL, Coordinates.SPHERICAL, cyl)
    back = convert(Coordinates.SPHERICAL, Coordinates.CARTESIAN, sph)
    print("cartesian:  ", p.as_tuple())
    print("cylindrical:", cyl.as_tuple())
    print("spherical:  ", sph.as_tuple())
    print("round trip: ", back.as_tuple())


if __name__ == "__main__":
    main()
