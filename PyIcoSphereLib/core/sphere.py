import logging
import numpy as np

from .mesh import Mesh
from .icosahedron import make_icosahedron, EDGE_LENGTH, EDGE_TOLERANCE
from .subdivision import subdivide, check_level

logger = logging.getLogger(__name__)


def icosphere(level: int, edge_length: float = EDGE_LENGTH, tol: float = EDGE_TOLERANCE, index_dtype=np.uint32):
    """Build the icosphere of ``level`` in float64.

    Returns ``(V, F, radius, history)``; the radius is the length of the
    first icosahedron vertex and every returned vertex lies at it.
    """
    level = check_level(level, index_dtype)
    base = make_icosahedron(edge_length, tol)
    radius = float(np.linalg.norm(base.V[0]))
    V, F, history = subdivide(base.V, base.F, radius, level)
    logger.info("icosphere level %d: %d vertices, %d faces", level, V.shape[0], F.shape[0])
    return V, F, radius, history


def make_icosphere(R=None, center=(0, 0, 0), subdivisions=3) -> Mesh:
    V, F, radius, _ = icosphere(subdivisions)
    if R is not None:
        V = V * (float(R) / radius)
    V = V + np.asarray(center, float)
    return Mesh(V=V, F=F)
