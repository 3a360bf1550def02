"""Shared test fixtures."""

from __future__ import annotations

import pytest
from PySide6 import QtCore

from weave.mesh import Mesh, regular_polygon, square_grid


def xy(p: QtCore.QPointF) -> tuple[float, float]:
    return (p.x(), p.y())


def make_mesh(points, polygons) -> Mesh:
    mesh = Mesh()
    for x, y in points:
        mesh.add_point(QtCore.QPointF(x, y))
    for ring in polygons:
        mesh.add_polygon(ring)
    return mesh


@pytest.fixture
def pentagon() -> Mesh:
    return regular_polygon(5)


@pytest.fixture
def grid_2x2() -> Mesh:
    return square_grid(2, 2)


@pytest.fixture
def two_squares() -> Mesh:
    # 0--1--2 on y=0, 3--4--5 on y=1; squares share the edge (1, 4)
    return make_mesh(
        [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)],
        [(0, 1, 4, 3), (1, 2, 5, 4)],
    )
