from .model import Mesh
from .seeds import regular_polygon, square_grid
from .smoothing import smooth
from .subdivision import get_split_points, penta_decomp
from .export import PathCommand, PathInstructions, extents, fit_to_rect, export_path, export_seams
from .pipeline import Surface, SeedKind, StartMeshPlanar, StartMeshSpherical, make_seed, build_mesh, planar_seed
