import logging
import math

import pytest

from hatchtile import Line, Point, SafeGrid, shallow_frame


def _diag_angle(bounds):
    return Line(Point(0.0, 0.0), Point(*bounds)).angle


def _grid(bounds, u_tiles, v_tiles, flipped=False, **kwargs):
    return SafeGrid(bounds, _diag_angle(bounds), u_tiles, v_tiles, flipped, **kwargs)


def test_shallow_frame_below_diagonal_keeps_axes():
    frame = shallow_frame(0.3, 0.5, (10.0, 5.0), 3, 1, False)
    assert frame.angle == 0.3
    assert (frame.u_tiles, frame.v_tiles) == (3, 1)
    assert (frame.domain_u, frame.domain_v) == (10.0, 5.0)
    assert frame.offset_direction == -1.0
    assert shallow_frame(0.3, 0.5, (10.0, 5.0), 3, 1, True).offset_direction == 1.0


def test_shallow_frame_above_diagonal_swaps_axes():
    frame = shallow_frame(1.0, 0.5, (10.0, 5.0), 1, 3, False)
    assert math.isclose(frame.angle, math.pi / 2 - 1.0)
    assert (frame.u_tiles, frame.v_tiles) == (3, 1)
    assert (frame.domain_u, frame.domain_v) == (5.0, 10.0)
    assert frame.offset_direction == 1.0

    flipped = shallow_frame(1.0, 0.5, (10.0, 5.0), 1, 3, True)
    assert math.isclose(flipped.angle, 1.0 - math.pi / 2)
    assert flipped.offset_direction == -1.0


def test_shift_closed_form_for_unit_tiles():
    grid = _grid((10.0, 10.0), 1, 1)
    assert math.isclose(grid.grid_angle, math.pi / 4)
    assert math.isclose(grid.shift, 10.0 * math.cos(math.pi / 4))
    assert math.isclose(grid.shift, 7.0710678, rel_tol=1e-7)


def test_diagonal_candidate_parameters():
    theta = math.atan(0.5)
    normal = _grid((10.0, 5.0), 1, 1)
    mirrored = _grid((10.0, 5.0), 1, 1, flipped=True)

    assert math.isclose(normal.grid_angle, theta)
    assert math.isclose(mirrored.grid_angle, math.pi - theta)
    assert math.isclose(normal.span, math.sqrt(125.0))
    assert math.isclose(normal.shift, 10.0 * math.cos(theta))
    assert math.isclose(normal.offset, -10.0 * math.sin(theta))
    assert math.isclose(mirrored.offset, 10.0 * math.sin(theta))


@pytest.mark.parametrize(
    'u_tiles, v_tiles, flipped, grid_angle, offset',
    [
        (1, 0, False, 0.0, -5.0),
        (1, 0, True, math.pi, 5.0),
        (0, 1, False, math.pi / 2, 10.0),
    ],
)
def test_edge_candidates(u_tiles, v_tiles, flipped, grid_angle, offset):
    grid = _grid((10.0, 5.0), u_tiles, v_tiles, flipped)
    assert math.isclose(grid.grid_angle, grid_angle)
    assert grid.offset == offset
    assert grid.shift == 0.0
    assert grid.is_valid()


@pytest.mark.parametrize('flipped, grid_angle, offset_sign', [(False, math.pi / 4, 1.0), (True, 3 * math.pi / 4, -1.0)])
def test_lattice_search_finds_repeating_point(flipped, grid_angle, offset_sign):
    grid = _grid((10.0, 5.0), 1, 2, flipped)

    assert grid.is_valid()
    assert math.isclose(grid.grid_angle, grid_angle)
    assert math.isclose(grid.span, math.sqrt(200.0))
    assert math.isclose(grid.offset, offset_sign * 5.0 / math.sqrt(2.0))
    assert math.isclose(grid.shift, 5.0 / math.sqrt(2.0))
    assert (grid.frame.u_tiles, grid.frame.v_tiles) == (2, 1)


def test_lattice_search_without_repeat_is_invalid(caplog):
    with caplog.at_level(logging.WARNING):
        grid = _grid((10.0, 5.0), 2, 2)

    assert grid.shift is None
    assert not grid.is_valid()
    assert 'Can not determine next repeating grid' in caplog.text


def test_diagnostics_go_to_injected_logger(caplog):
    sink = logging.getLogger('tests.safe_grid.sink')
    with caplog.at_level(logging.WARNING, logger='tests.safe_grid.sink'):
        _grid((10.0, 5.0), 2, 2, logger=sink)

    assert [record.name for record in caplog.records] == ['tests.safe_grid.sink']
