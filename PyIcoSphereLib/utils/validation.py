from typing import Optional
import numpy as np

from ..core.errors import MeshValidationError
from ..core.geometry import triangle_normal, triangle_area
from ..core.subdivision import face_count, vertex_count


def ensure_mesh(mesh):
    if not hasattr(mesh, "V") or not hasattr(mesh, "F"):
        raise TypeError("mesh must have V and F")


def edge_use_counts(F):
    """Return the unique undirected edges of ``F`` and how many faces use each."""
    F = np.asarray(F, np.int64).reshape(-1, 3)
    E = np.concatenate([F[:, [0, 1]], F[:, [1, 2]], F[:, [2, 0]]], axis=0)
    E.sort(axis=1)
    return np.unique(E, axis=0, return_counts=True)


def is_closed_manifold(F) -> bool:
    _, counts = edge_use_counts(F)
    return bool(counts.size) and bool(np.all(counts == 2))


def winding_volumes(V, F) -> np.ndarray:
    """Unit face normal dotted with the face centroid; positive means outward."""
    V = np.asarray(V, float)
    F = np.asarray(F, np.int64).reshape(-1, 3)
    a, b, c = V[F[:, 0]], V[F[:, 1]], V[F[:, 2]]
    centroid = (a + b + c) / 3.0
    return np.einsum("ij,ij->i", triangle_normal(a, b, c), centroid)


def face_areas(V, F) -> np.ndarray:
    V = np.asarray(V, float)
    F = np.asarray(F, np.int64).reshape(-1, 3)
    return triangle_area(V[F[:, 0]], V[F[:, 1]], V[F[:, 2]])


def radius_deviation(V, radius: float) -> float:
    r = np.linalg.norm(np.asarray(V, float), axis=1)
    return float(np.max(np.abs(r - radius))) if r.size else 0.0


def validate_icosphere(mesh, level: int, radius: float, rtol: float = 1e-5,
                       center: Optional[np.ndarray] = None) -> None:
    ensure_mesh(mesh)
    V = np.asarray(mesh.V, float)
    if center is not None:
        V = V - np.asarray(center, float)
    F = np.asarray(mesh.F, np.int64).reshape(-1, 3)
    problems = []
    if F.shape[0] != face_count(level):
        problems.append(f"face count {F.shape[0]} != {face_count(level)}")
    if V.shape[0] != vertex_count(level):
        problems.append(f"vertex count {V.shape[0]} != {vertex_count(level)}")
    if F.size and (F.min() < 0 or F.max() >= V.shape[0]):
        problems.append("face index out of range")
    elif F.size:
        if np.any((F[:, 0] == F[:, 1]) | (F[:, 1] == F[:, 2]) | (F[:, 0] == F[:, 2])):
            problems.append("face with repeated vertex")
        elif np.any(face_areas(V, F) <= 0.0):
            problems.append("face with zero area")
        if not is_closed_manifold(F):
            problems.append("mesh is not closed: some edge is not shared by exactly two faces")
        if np.any(winding_volumes(V, F) <= 0.0):
            problems.append("face wound clockwise as seen from outside")
    dev = radius_deviation(V, radius)
    if dev > rtol * radius:
        problems.append(f"vertex off sphere by {dev:.3g}")
    if problems:
        raise MeshValidationError(problems)
