class MeshError(ValueError):
    '''Base class for violations of mesh invariants.'''


class EmptyRingError(MeshError):
    '''A ring (or point list) with no corners was asked for its barycenter.'''


class EmptyMeshError(MeshError):
    '''A query that needs at least one vertex ran on an empty mesh.'''


class DegenerateEdgeError(MeshError):
    '''An edge whose two endpoints coincide cannot be split.'''
