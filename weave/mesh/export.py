from typing import NamedTuple, Optional

from ..errors import EmptyMeshError
from .model import Mesh

MOVE = 'move'
LINE = 'line'
CLOSE = 'close'


class PathCommand(NamedTuple):
    op: str
    x: Optional[float] = None
    y: Optional[float] = None


def extents(mesh: Mesh) -> tuple[float, float, float, float]:
    '''Axis aligned bounds of all vertices as (min_x, min_y, max_x, max_y).'''

    pts = mesh.points()
    if not pts:
        raise EmptyMeshError("cannot take the extents of a mesh with no vertices")

    min_x = max_x = pts[0].x()
    min_y = max_y = pts[0].y()
    for p in pts[1:]:
        min_x = min(min_x, p.x())
        max_x = max(max_x, p.x())
        min_y = min(min_y, p.y())
        max_y = max(max_y, p.y())
    return min_x, min_y, max_x, max_y


def fit_to_rect(mesh: Mesh, width: float, height: float, margin: float = 0.0):
    '''
    Scale and offset placing the mesh centered inside a width x height rect.

    Aspect ratio is kept, so scale_x == scale_y. Returns
    (scale_x, scale_y, cx, cy) ready for export_path.
    '''

    min_x, min_y, max_x, max_y = extents(mesh)
    span_x = max_x - min_x
    span_y = max_y - min_y
    avail_w = max(0.0, width - 2 * margin)
    avail_h = max(0.0, height - 2 * margin)

    spans = [avail / span for avail, span in ((avail_w, span_x), (avail_h, span_y)) if span > 0]
    scale = min(spans) if spans else 1.0

    cx = width / 2 - scale * (min_x + max_x) / 2
    cy = height / 2 - scale * (min_y + max_y) / 2
    return scale, scale, cx, cy


class PathInstructions:
    '''
    Lazy drawing instructions for a mesh, mapped to screen space.

    Each iteration walks the mesh again, so the sequence can be replayed as
    often as needed. screen = world * scale + center, per axis.
    '''

    def __init__(self, mesh: Mesh, scale_x: float, scale_y: float, cx: float, cy: float, seams: bool = False):
        self.mesh = mesh
        self.scale_x = scale_x
        self.scale_y = scale_y
        self.cx = cx
        self.cy = cy
        self.seams = seams

    def _map(self, idx: int) -> tuple[float, float]:
        p = self.mesh.point(idx)
        return p.x() * self.scale_x + self.cx, p.y() * self.scale_y + self.cy

    def __iter__(self):
        if self.seams:
            for i, j in self.mesh.seams():
                yield PathCommand(MOVE, *self._map(i))
                yield PathCommand(LINE, *self._map(j))
            return

        for ring in self.mesh.polygons():
            yield PathCommand(MOVE, *self._map(ring[0]))
            for idx in ring[1:]:
                yield PathCommand(LINE, *self._map(idx))
            yield PathCommand(CLOSE)


def export_path(mesh: Mesh, scale_x: float, scale_y: float, cx: float, cy: float) -> PathInstructions:
    return PathInstructions(mesh, scale_x, scale_y, cx, cy)


def export_seams(mesh: Mesh, scale_x: float, scale_y: float, cx: float, cy: float) -> PathInstructions:
    '''Open move/line segments, one per seam recorded by the last subdivision.'''
    return PathInstructions(mesh, scale_x, scale_y, cx, cy, seams=True)
