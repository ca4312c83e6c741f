import math
import logging
from itertools import combinations
from typing import List, Tuple
import numpy as np

from .mesh import Mesh
from .errors import BaseMeshError
from .geometry import signed_volume
from ..io.perf import perf

logger = logging.getLogger(__name__)

TAU = (1.0 + math.sqrt(5.0)) / 2.0
EDGE_LENGTH = 2.0
EDGE_TOLERANCE = 0.1
VOLUME_TOLERANCE = 1e-9
N_BASE_FACES = 20


def icosahedron_vertices() -> np.ndarray:
    t = TAU
    return np.array([
        [1, t, 0], [1, -t, 0], [-1, -t, 0], [-1, t, 0],
        [0, 1, t], [0, 1, -t], [0, -1, -t], [0, -1, t],
        [t, 0, 1], [-t, 0, 1], [-t, 0, -1], [t, 0, -1],
    ], float)


def find_faces(V, edge_length: float = EDGE_LENGTH, tol: float = EDGE_TOLERANCE) -> List[Tuple[int, int, int]]:
    """Return every triple i < j < k whose three edges all measure ``edge_length``.

    The tolerance is loose because the vertices are the raw golden-ratio
    coordinates: the icosahedron edge is exactly 2 while the next shortest
    vertex distance is 2*tau.
    """
    V = np.asarray(V, float)
    faces = []
    for i, j, k in combinations(range(V.shape[0]), 3):
        a = np.linalg.norm(V[i] - V[j])
        b = np.linalg.norm(V[i] - V[k])
        c = np.linalg.norm(V[j] - V[k])
        if abs(a - edge_length) < tol and abs(b - edge_length) < tol and abs(c - edge_length) < tol:
            faces.append((i, j, k))
    return faces


def orient_face(V, face: Tuple[int, int, int]) -> Tuple[int, int, int]:
    """Order ``face`` counter-clockwise as seen from outside the sphere."""
    i, j, k = face
    vol = signed_volume(V[i], V[j], V[k])
    if abs(vol) <= VOLUME_TOLERANCE:
        raise BaseMeshError(f"degenerate face {face}: signed volume {vol!r}")
    if vol < 0.0:
        return (i, k, j)
    return (i, j, k)


def make_icosahedron(edge_length: float = EDGE_LENGTH, tol: float = EDGE_TOLERANCE) -> Mesh:
    V = icosahedron_vertices()
    with perf.section("base_faces"):
        faces = find_faces(V, edge_length, tol)
        if len(faces) != N_BASE_FACES:
            raise BaseMeshError(
                f"expected {N_BASE_FACES} icosahedron faces, found {len(faces)} "
                f"(edge_length={edge_length}, tol={tol})"
            )
        F = np.array([orient_face(V, f) for f in faces], np.int64)
    logger.debug("icosahedron: %d vertices, %d faces", V.shape[0], F.shape[0])
    return Mesh(V=V, F=F)
