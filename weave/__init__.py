from .errors import MeshError, EmptyRingError, EmptyMeshError, DegenerateEdgeError
from .mesh import (
    Mesh, regular_polygon, square_grid, get_split_points, penta_decomp, smooth,
    extents, fit_to_rect, export_path, export_seams, build_mesh, SeedKind,
)

__version__ = "0.1.0"
