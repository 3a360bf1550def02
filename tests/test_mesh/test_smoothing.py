"""Tests for the single-pass barycentric smoothing."""

from __future__ import annotations

import pytest

from weave.mesh import smooth
from tests.conftest import make_mesh, xy


@pytest.fixture
def fan():
    # vertex 0 is shared by three triangles, 2 and 3 by two, 1 and 4 by one
    return make_mesh(
        [(0.3, 0.2), (2, 0), (0, 2), (-2, 0), (0, -2)],
        [(0, 1, 2), (0, 2, 3), (0, 3, 4)],
    )


def _centers(mesh):
    return [xy(mesh.polygon_center(ring)) for ring in mesh.polygons()]


def test_high_degree_vertex_moves_to_mean_of_barycenters(fan):
    centers = _centers(fan)
    expected = (sum(c[0] for c in centers) / 3, sum(c[1] for c in centers) / 3)
    assert smooth(fan) == 1
    assert xy(fan.point(0)) == pytest.approx(expected)
    assert xy(fan.point(0)) == pytest.approx((-1.1 / 9, 2.6 / 9))


def test_low_degree_vertices_stay(fan):
    before = [xy(p) for p in fan.points()]
    smooth(fan)
    for i in (1, 2, 3, 4):
        assert xy(fan.point(i)) == before[i]


def test_barycenters_use_positions_before_smoothing():
    # two vertices of degree 3 sharing the same triangles
    mesh = make_mesh(
        [(0, 0), (1, 0), (2, 1), (1, 2), (-1, 1)],
        [(0, 1, 2), (0, 1, 3), (0, 1, 4)],
    )
    centers = _centers(mesh)
    mean = (sum(c[0] for c in centers) / 3, sum(c[1] for c in centers) / 3)
    assert smooth(mesh) == 2
    assert xy(mesh.point(0)) == pytest.approx(mean)
    assert xy(mesh.point(1)) == pytest.approx(mean)


def test_min_degree_is_tunable(fan):
    assert smooth(fan, min_degree=2) == 3


def test_single_polygon_never_moves(pentagon):
    before = [xy(p) for p in pentagon.points()]
    assert smooth(pentagon) == 0
    assert [xy(p) for p in pentagon.points()] == before


def test_changed_emitted_only_when_something_moves(fan, pentagon):
    hits = []
    fan.changed.connect(lambda: hits.append('fan'))
    pentagon.changed.connect(lambda: hits.append('pentagon'))
    smooth(fan)
    smooth(pentagon)
    assert hits == ['fan']


def test_grid_interior_vertex_stays_centered(grid_2x2):
    # the four squares around (1, 1) are symmetric, so it does not move
    smooth(grid_2x2)
    assert xy(grid_2x2.point(4)) == pytest.approx((1.0, 1.0))
    assert xy(grid_2x2.point(1)) == (1.0, 0.0)
