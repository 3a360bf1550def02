import logging

from PySide6 import QtCore

from ..constants.weave import SMOOTH_MIN_DEGREE
from ..utility.geometry import barycenter
from .model import Mesh

logger = logging.getLogger(__name__)


def smooth(mesh: Mesh, min_degree: int = SMOOTH_MIN_DEGREE) -> int:
    '''
    Single relaxation pass, in place.

    Every vertex shared by at least `min_degree` polygons moves to the plain
    mean of those polygons' barycenters. All barycenters are taken from the
    positions before anything moves. Returns the number of vertices moved.
    '''

    centers: dict[int, list[QtCore.QPointF]] = {}
    for ring in mesh.polygons():
        center = mesh.polygon_center(ring)
        for idx in ring:
            centers.setdefault(idx, []).append(center)

    moved = 0
    for idx, pts in centers.items():
        if len(pts) < min_degree:
            continue
        mesh.set_point(idx, barycenter(pts))
        moved += 1

    logger.debug("Smoothing moved %d of %d vertices", moved, mesh.num_vertices())
    if moved:
        mesh.changed.emit()
    return moved
