import itertools
import math

import pytest

from xsect import Coordinates, Point, Vector, convert, reexpress

SYSTEMS = list(Coordinates)


@pytest.mark.parametrize('source, target', list(itertools.permutations(SYSTEMS, 2)))
def test_origin_maps_to_origin_exactly(source, target):
    origin = Point(0.0, 0.0, 0.0)
    assert convert(source, target, origin) == origin


@pytest.mark.parametrize('system', SYSTEMS)
def test_self_conversion_is_identity(system):
    p = Point(1.5, -0.25, 2.0)
    assert convert(system, system, p) is p


def test_cartesian_unit_x_survives_cylindrical_round_trip():
    p = Point(1.0, 0.0, 0.0)
    cyl = convert(Coordinates.CARTESIAN, Coordinates.CYLINDRICAL, p)
    assert cyl == Point(1.0, 0.0, 0.0)
    assert convert(Coordinates.CYLINDRICAL, Coordinates.CARTESIAN, cyl) == p


def test_cartesian_to_cylindrical_values():
    cyl = Coordinates.CARTESIAN.into_cylindrical(Point(0.0, 2.0, 5.0))
    assert cyl.x == pytest.approx(2.0)
    assert cyl.y == pytest.approx(math.pi / 2)
    assert cyl.z == 5.0


def test_cartesian_to_spherical_values():
    sph = Coordinates.CARTESIAN.into_spherical(Point(0.0, 0.0, 3.0))
    assert sph == Point(3.0, 0.0, 0.0)
    sph = Coordinates.CARTESIAN.into_spherical(Point(1.0, 1.0, 0.0))
    assert sph.x == pytest.approx(math.sqrt(2.0))
    assert sph.y == pytest.approx(math.pi / 4)
    assert sph.z == pytest.approx(math.pi / 2)


@pytest.mark.parametrize('source, target', list(itertools.permutations(SYSTEMS, 2)))
def test_round_trip(source, target):
    original = Coordinates.CARTESIAN.into(source, Point(1.2, -0.7, 2.5))
    back = convert(target, source, convert(source, target, original))
    assert back.as_tuple() == pytest.approx(original.as_tuple(), abs=1e-12)


def test_vectors_convert_to_vectors():
    v = convert(Coordinates.CYLINDRICAL, Coordinates.CARTESIAN, Vector(2.0, math.pi, 1.0))
    assert isinstance(v, Vector)
    assert v.as_tuple() == pytest.approx((-2.0, 0.0, 1.0), abs=1e-12)


def test_reexpress_returns_new_tuple():
    points = [Point(1.0, 0.0, 0.0), Point(0.0, 1.0, 0.0)]
    out = reexpress(points, Coordinates.CARTESIAN, Coordinates.CYLINDRICAL)
    assert isinstance(out, tuple)
    assert out[1].y == pytest.approx(math.pi / 2)
    assert points == [Point(1.0, 0.0, 0.0), Point(0.0, 1.0, 0.0)]


def test_parse_coordinate_names():
    assert Coordinates.parse(' Spherical ') is Coordinates.SPHERICAL
    with pytest.raises(ValueError) as exc:
        Coordinates.parse('polar')
    assert 'cartesian' in str(exc.value)
