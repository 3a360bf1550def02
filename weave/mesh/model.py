import logging

from PySide6 import QtCore

from ..errors import MeshError
from ..utility.geometry import barycenter

logger = logging.getLogger(__name__)


class Mesh(QtCore.QObject):
    '''
    Planar polygon mesh.

    Vertices live in an append-only list and are addressed purely by their
    index. A polygon is a ring of vertex indices, read cyclically, whose order
    encodes its winding. Seams are the internal (b, c) edges recorded by the
    most recent subdivision, kept for annotated rendering.
    '''

    changed = QtCore.Signal()  # vertex positions moved

    def __init__(self):
        super().__init__()
        self._pts: list[QtCore.QPointF] = []
        self._polys: list[tuple[int, ...]] = []
        self._seams: list[tuple[int, int]] = []

    # vertices
    def add_point(self, p: QtCore.QPointF) -> int:
        self._pts.append(QtCore.QPointF(p))
        return len(self._pts) - 1

    def points(self):
        return self._pts

    def point(self, i: int) -> QtCore.QPointF:
        return self._pts[i]

    def set_point(self, i: int, p: QtCore.QPointF):
        self._pts[i] = QtCore.QPointF(p)

    def num_vertices(self) -> int:
        return len(self._pts)

    # polygons (rings of indices into points)
    def polygons(self):
        return self._polys

    def add_polygon(self, ring) -> int:
        ring = tuple(ring)
        if len(ring) < 3:
            raise MeshError(f"a ring needs at least 3 corners, got {len(ring)}")
        n = len(self._pts)
        if any(idx < 0 or idx >= n for idx in ring):
            raise MeshError(f"ring {ring} references a vertex outside 0..{n - 1}")
        self._polys.append(ring)
        return len(self._polys) - 1

    def num_polygons(self) -> int:
        return len(self._polys)

    def polygon_center(self, ring) -> QtCore.QPointF:
        return barycenter(self._pts[i] for i in ring)

    # seams
    def seams(self):
        return self._seams

    def add_seam(self, i: int, j: int):
        n = len(self._pts)
        if any(idx < 0 or idx >= n for idx in (i, j)):
            raise MeshError(f"seam ({i}, {j}) references a vertex outside 0..{n - 1}")
        self._seams.append((i, j))

    def same_geometry(self, other: 'Mesh') -> bool:
        '''True when both meshes hold the same vertex positions, rings and seams.'''
        return (self._pts == other._pts and self._polys == other._polys
                and self._seams == other._seams)

    def copy(self) -> 'Mesh':
        out = Mesh()
        out._pts = [QtCore.QPointF(p) for p in self._pts]
        out._polys = list(self._polys)
        out._seams = list(self._seams)
        return out

    def __repr__(self):
        return (f"<Mesh vertices={len(self._pts)} polygons={len(self._polys)} "
                f"seams={len(self._seams)}>")
