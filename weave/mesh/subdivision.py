import logging

from ..constants.weave import SPLIT_RATIO, SPLIT_ANGLE
from ..errors import DegenerateEdgeError
from ..utility.geometry import distance, angle, polar
from .model import Mesh
from .smoothing import smooth

logger = logging.getLogger(__name__)


def get_split_points(edge: tuple[int, int], mesh: Mesh, cache: dict,
                     ratio: float = SPLIT_RATIO, phi: float = SPLIT_ANGLE) -> tuple[int, int]:
    '''
    Return the two vertex indices splitting `edge`, creating them on first use.

    The points are always built from the low index towards the high index, so
    they do not depend on which neighbour asks first. For an edge given as
    (hi, lo) the stored pair comes back reversed: the first index returned is
    always the one nearest edge[0].

    p = lo + r * (cos(t + phi), sin(t + phi))
    q = hi - r * (cos(t + phi), sin(t + phi))

    where t is the direction from lo to hi and r is `ratio` times its length.
    '''

    u, v = edge
    lo, hi = min(u, v), max(u, v)
    reverse = u > v

    pair = cache.get((lo, hi))
    if pair is None:
        a, b = mesh.point(lo), mesh.point(hi)
        r0 = distance(a, b)
        if r0 == 0.0:
            raise DegenerateEdgeError(f"edge ({lo}, {hi}) has zero length")

        r_seg = r0 * ratio
        theta = angle(a, b) + phi
        p = polar(a, r_seg, theta)
        q = polar(b, -r_seg, theta)

        pair = (mesh.add_point(p), mesh.add_point(q))
        cache[(lo, hi)] = pair

    if reverse:
        return pair[1], pair[0]
    return pair


def penta_decomp(mesh: Mesh) -> Mesh:
    '''
    Replace every n-gon of `mesh` with n pentagons, then smooth once.

    Corner d of a ring, with neighbours cw (before) and ccw (after), becomes
    the pentagon [a, b, c, d, e]: a is the ring's barycenter, (b, c) split
    the incoming edge (cw, d) and e is the split point of the outgoing edge
    (d, ccw) nearest d. (b, c) is recorded as a seam.

    The input mesh is not modified; the original vertices keep their indices
    in the output.
    '''

    out = Mesh()
    for p in mesh.points():
        out.add_point(p)

    cache: dict[tuple[int, int], tuple[int, int]] = {}

    for ring in mesh.polygons():
        n = len(ring)
        a = out.add_point(mesh.polygon_center(ring))

        for i in range(n):
            d = ring[i]
            cw = ring[(i - 1 + n) % n]
            ccw = ring[(i + 1) % n]

            b, c = get_split_points((cw, d), out, cache)
            e, _ = get_split_points((d, ccw), out, cache)

            out.add_polygon((a, b, c, d, e))
            out.add_seam(b, c)

    logger.debug("Subdivided %d polygons into %d over %d vertices (%d edges split)",
                 mesh.num_polygons(), out.num_polygons(), out.num_vertices(), len(cache))

    smooth(out)
    return out
