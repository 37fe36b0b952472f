import math

import numpy as np
import pytest

from hatchtile import Line, LineIntersectionError, Point


def test_endpoints_are_ordered_by_v():
    low = Point(1.0, 0.0)
    high = Point(0.0, 5.0)
    line = Line(high, low)
    assert line.start is low
    assert line.end is high


def test_first_argument_wins_on_v_tie():
    first = Point(2.0, 1.0)
    second = Point(0.0, 1.0)
    line = Line(first, second)
    assert line.start is first
    assert line.end is second


@pytest.mark.parametrize(
    'start, end',
    [
        ((0.0, 0.0), (1.0, 0.0)),
        ((1.0, 0.0), (0.0, 0.0)),
        ((0.0, 0.0), (1.0, 1.0)),
        ((0.0, 0.0), (-1.0, 1.0)),
        ((3.0, 4.0), (3.0, -2.0)),
        ((-5.0, 2.0), (7.0, 1.999)),
    ],
)
def test_angle_is_in_half_open_range(start, end):
    angle = Line(Point(*start), Point(*end)).angle
    assert 0.0 <= angle < math.pi


def test_angle_values():
    assert math.isclose(Line(Point(0.0, 0.0), Point(1.0, 1.0)).angle, math.pi / 4)
    assert math.isclose(Line(Point(0.0, 0.0), Point(-1.0, 1.0)).angle, 3 * math.pi / 4)
    assert math.isclose(Line(Point(0.0, 0.0), Point(0.0, 2.0)).angle, math.pi / 2)
    assert Line(Point(1.0, 0.0), Point(0.0, 0.0)).angle == 0.0


def test_zero_length_line_has_zero_angle():
    assert Line(Point(2.0, 3.0), Point(2.0, 3.0)).angle == 0.0


def test_length_and_center():
    line = Line(Point(0.0, 0.0), Point(6.0, 8.0))
    assert line.length == 10.0
    assert line.center_point == Point(3.0, 4.0)
    assert line.direction == Point(6.0, 8.0)


def test_intersect_crossing_lines():
    a = Line(Point(0.0, 0.0), Point(2.0, 2.0))
    b = Line(Point(0.0, 2.0), Point(2.0, 0.0))
    assert a.intersect(b) == Point(1.0, 1.0)


def test_intersect_parallel_lines_fails():
    a = Line(Point(0.0, 0.0), Point(2.0, 2.0))
    b = Line(Point(1.0, 0.0), Point(3.0, 2.0))
    with pytest.raises(LineIntersectionError, match='do not intersect'):
        a.intersect(b)


def test_point_on_line_treats_line_as_infinite():
    line = Line(Point(0.0, 0.0), Point(2.0, 2.0))
    assert line.point_on_line(Point(5.0, 5.0))
    assert line.point_on_line(Point(1.0, 1.0 + 1e-6))
    assert not line.point_on_line(Point(1.0, 1.1))


def test_collinear_mask_over_many_points():
    line = Line(Point(0.0, 0.0), Point(1.0, 2.0))
    mask = line.collinear_mask(np.array([[0.0, 0.0], [1.0, 1.0], [2.0, 4.0], [-1.0, -2.0]]))
    assert mask.tolist() == [True, False, True, True]


def test_rotate_moves_endpoints_in_place():
    start = Point(0.0, 0.0)
    end = Point(1.0, 0.0)
    line = Line(start, end)
    line.rotate(math.pi / 2)
    assert end == Point(0.0, 1.0)
    assert math.isclose(line.angle, math.pi / 2)


def test_rotate_keeps_canonical_ordering():
    line = Line(Point(1.0, 0.0), Point(0.0, 0.0))
    line.rotate(math.pi / 4, line.center_point)
    assert line.start.v <= line.end.v
    assert math.isclose(line.angle, math.pi / 4, abs_tol=1e-12)
    assert math.isclose(line.length, 1.0)
