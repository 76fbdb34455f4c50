import pytest

from xsect import (
    Circle,
    CrossSection,
    Point,
    Rectangle,
    SectionError,
    Shape,
    Triangle,
    Vector,
)


def flange(y0, width=4.0, thickness=1.0):
    return Rectangle.new(
        Point(0.0, y0, 0.0),
        Point(width, y0, 0.0),
        Point(width, y0 + thickness, 0.0),
        Point(0.0, y0 + thickness, 0.0),
    )


def test_composite_area_and_centroid():
    section = CrossSection(Vector(0.0, 0.0, 1.0), (flange(0.0), flange(5.0, width=2.0)))
    assert len(section) == 2
    assert section.area() == 6.0
    # (4 * 0.5 + 2 * 5.5) / 6 in y, (4 * 2 + 2 * 1) / 6 in x
    c = section.centroid()
    assert c.x == pytest.approx(10.0 / 6.0)
    assert c.y == pytest.approx(13.0 / 6.0)
    assert c.z == 0.0


def test_opposite_normals_are_accepted():
    reversed_triangle = Triangle.new(Point(3.0, 4.0, 0.0), Point(3.0, 0.0, 0.0), Point(0.0, 0.0, 0.0))
    section = CrossSection(Vector(0.0, 0.0, 2.0), [reversed_triangle, flange(0.0)])
    assert all(isinstance(s, Shape) for s in section)
    assert section.area() == 10.0
    assert section.normal() == Vector(0.0, 0.0, 2.0)


def test_mismatched_normal_is_rejected():
    tilted = Circle.new(Vector(0.0, 0.0, 0.0), 1.0, Vector(0.0, 1.0, 0.0))
    with pytest.raises(SectionError) as exc:
        CrossSection(Vector(0.0, 0.0, 1.0), (flange(0.0), tilted))
    assert 'shape 1 (circle)' in str(exc.value)

    outcome = CrossSection.new(Vector(0.0, 0.0, 1.0), [tilted])
    assert isinstance(outcome, SectionError)


def test_measurements_follow_shape_order():
    section = CrossSection(Vector(0.0, 0.0, 1.0), [flange(0.0), flange(2.0, width=1.0)])
    assert [m.area for m in section.measurements()] == [4.0, 1.0]


def test_empty_section():
    section = CrossSection(Vector(0.0, 0.0, 1.0), ())
    assert section.area() == 0.0
    with pytest.raises(SectionError):
        section.centroid()


def test_normal_length_does_not_matter():
    disc = Circle.new(Vector(0.0, 0.0, 0.0), 1.0, Vector(0.0, 0.0, 2.0))
    section = CrossSection(Vector(0.0, 0.0, 1.0), (disc, flange(3.0)))
    assert len(section) == 2

    shrunk = Circle.new(Vector(0.0, 0.0, 0.0), 1.0, Vector(0.0, 0.0, -0.5))
    assert isinstance(CrossSection.new(Vector(0.0, 0.0, 3.0), [shrunk]), CrossSection)


def test_zero_neutral_axis_is_rejected():
    with pytest.raises(SectionError) as exc:
        CrossSection(Vector(0.0, 0.0, 0.0), (flange(0.0),))
    assert "neutral axis" in str(exc.value)
