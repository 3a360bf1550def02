import logging
import math

from PySide6 import QtCore

from .model import Mesh

logger = logging.getLogger(__name__)


def regular_polygon(sides: int) -> Mesh:
    '''
    A single regular polygon on the unit circle, centered at the origin.

    Corner k sits at angle 2*pi*k/sides, so the ring runs counter-clockwise
    starting on the positive x axis.
    '''

    if sides < 3:
        raise ValueError(f"a polygon needs at least 3 sides, got {sides}")

    mesh = Mesh()
    delta = 2.0 * math.pi / sides
    ring = []
    for n in range(sides):
        theta = delta * n
        ring.append(mesh.add_point(QtCore.QPointF(math.cos(theta), math.sin(theta))))
    mesh.add_polygon(ring)

    logger.debug("Built regular %d-gon", sides)
    return mesh


def grid_index(x: int, y: int, cols: int) -> int:
    '''
    Index of lattice point (x, y) in a grid with `cols` squares per row.

    Lattice points are stored row-major: every row holds cols + 1 points.
    '''

    return y * (cols + 1) + x


def square_grid(cols: int, rows: int) -> Mesh:
    '''
    A cols x rows block of unit squares on the integer lattice.

    Each square is the ring (x, y), (x+1, y), (x+1, y+1), (x, y+1).
    '''

    if cols < 1 or rows < 1:
        raise ValueError(f"a grid needs at least one row and column, got {cols}x{rows}")

    mesh = Mesh()
    for y in range(rows + 1):
        for x in range(cols + 1):
            mesh.add_point(QtCore.QPointF(x, y))

    for y in range(rows):
        for x in range(cols):
            mesh.add_polygon((
                grid_index(x, y, cols),
                grid_index(x + 1, y, cols),
                grid_index(x + 1, y + 1, cols),
                grid_index(x, y + 1, cols),
            ))

    logger.debug("Built %dx%d square grid", cols, rows)
    return mesh
