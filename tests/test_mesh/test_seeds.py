"""Tests for the starting mesh constructors."""

from __future__ import annotations

import math

import pytest

from weave.mesh import regular_polygon, square_grid
from weave.mesh.seeds import grid_index
from tests.conftest import xy


@pytest.mark.parametrize("sides", [3, 4, 5, 6, 12])
def test_regular_polygon_on_unit_circle(sides):
    mesh = regular_polygon(sides)
    assert mesh.num_vertices() == sides
    assert mesh.num_polygons() == 1
    assert mesh.polygons()[0] == tuple(range(sides))
    for p in mesh.points():
        assert math.hypot(p.x(), p.y()) == pytest.approx(1.0)


def test_regular_polygon_increasing_angles():
    mesh = regular_polygon(7)
    thetas = [math.atan2(p.y(), p.x()) % (2 * math.pi) for p in mesh.points()]
    assert thetas[0] == pytest.approx(0.0)
    assert thetas == sorted(thetas)


def test_regular_polygon_starts_on_x_axis(pentagon):
    assert xy(pentagon.point(0)) == pytest.approx((1.0, 0.0))


def test_regular_polygon_rejects_two_sides():
    with pytest.raises(ValueError):
        regular_polygon(2)


@pytest.mark.parametrize("cols,rows", [(1, 1), (2, 2), (3, 1), (1, 4), (4, 3)])
def test_square_grid_counts(cols, rows):
    mesh = square_grid(cols, rows)
    assert mesh.num_vertices() == (cols + 1) * (rows + 1)
    assert mesh.num_polygons() == cols * rows


def test_square_grid_is_row_major():
    # row-major: index = y * (cols + 1) + x
    mesh = square_grid(3, 2)
    for y in range(3):
        for x in range(4):
            assert xy(mesh.point(grid_index(x, y, 3))) == (x, y)


@pytest.mark.parametrize("cols,rows", [(3, 2), (2, 5)])
def test_square_grid_cells_are_unit_ccw_squares(cols, rows):
    mesh = square_grid(cols, rows)
    cells = set()
    for ring in mesh.polygons():
        pts = [xy(mesh.point(i)) for i in ring]
        x0, y0 = pts[0]
        assert pts == [(x0, y0), (x0 + 1, y0), (x0 + 1, y0 + 1), (x0, y0 + 1)]
        # positive shoelace area: counter-clockwise
        area = sum(pts[i][0] * pts[(i + 1) % 4][1] - pts[(i + 1) % 4][0] * pts[i][1]
                   for i in range(4)) / 2
        assert area == pytest.approx(1.0)
        cells.add((x0, y0))
    assert cells == {(x, y) for x in range(cols) for y in range(rows)}


@pytest.mark.parametrize("cols,rows", [(0, 1), (1, 0)])
def test_square_grid_rejects_empty(cols, rows):
    with pytest.raises(ValueError):
        square_grid(cols, rows)
