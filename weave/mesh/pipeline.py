import enum
import logging

from ..constants.weave import POLYGON_SIDES
from .model import Mesh
from .seeds import regular_polygon, square_grid
from .subdivision import penta_decomp

logger = logging.getLogger(__name__)


class Surface(enum.Enum):
    PLANE = 'Plane'
    SPHERE = 'Sphere'

    def __str__(self):
        return self.value


class StartMeshPlanar(enum.Enum):
    SQUARE = 'Square'
    PENTAGON = 'Pentagon'
    HEXAGON = 'Hexagon'
    SQUARE_GRID = 'Square grid'

    def __str__(self):
        return self.value


class StartMeshSpherical(enum.Enum):
    CUBE = 'Cube'
    DODECAHEDRON = 'Dodecahedron'
    ICOSAHEDRON = 'Icosahedron'
    TRUNCATED_ICOSAHEDRON = 'Truncated icosahedron'

    def __str__(self):
        return self.value


class SeedKind(enum.Enum):
    POLYGON = 'polygon'  # params: {'sides': n}
    GRID = 'grid'        # params: {'cols': c, 'rows': r}
    SPHERE = 'sphere'    # params: {'shape': StartMeshSpherical}


def make_seed(seed_kind: SeedKind, seed_params: dict) -> Mesh:
    if seed_kind is SeedKind.POLYGON:
        return regular_polygon(seed_params['sides'])
    if seed_kind is SeedKind.GRID:
        return square_grid(seed_params['cols'], seed_params['rows'])
    if seed_kind is SeedKind.SPHERE:
        raise NotImplementedError(f"spherical seed {seed_params.get('shape')} is not available")
    raise ValueError(f"unknown seed kind {seed_kind!r}")


def build_mesh(seed_kind: SeedKind, seed_params: dict, iterations: int) -> Mesh:
    '''
    Seed a mesh and run `iterations` penta-decompositions over it.

    Every step consumes the previous mesh and returns a fresh one, so nothing
    is shared between iterations.
    '''

    if iterations < 0:
        raise ValueError(f"iterations must be non-negative, got {iterations}")

    mesh = make_seed(seed_kind, seed_params)
    for it in range(iterations):
        mesh = penta_decomp(mesh)
        logger.debug("Iteration %d: %d polygons, %d vertices",
                     it + 1, mesh.num_polygons(), mesh.num_vertices())
    return mesh


def planar_seed(start: StartMeshPlanar, cols: int = 3, rows: int = 3) -> tuple[SeedKind, dict]:
    '''Map a planar pick-list choice onto build_mesh arguments.'''

    if start is StartMeshPlanar.SQUARE_GRID:
        return SeedKind.GRID, {'cols': cols, 'rows': rows}
    return SeedKind.POLYGON, {'sides': POLYGON_SIDES[start.value]}
