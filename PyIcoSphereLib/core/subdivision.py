import logging
from dataclasses import dataclass
from typing import List, Tuple
import numpy as np

from .buffers import VertexBuffer
from .errors import SubdivisionLevelError
from .midpoint_cache import MidpointCache
from ..io.perf import perf

logger = logging.getLogger(__name__)

BASE_FACES = 20


def face_count(level: int) -> int:
    return BASE_FACES * 4 ** level


def edge_count(level: int) -> int:
    return 3 * face_count(level) // 2


def vertex_count(level: int) -> int:
    # Euler: V - E + F = 2
    return 2 + edge_count(level) - face_count(level)


def index_bound(level: int) -> int:
    """``2 + 30 * 4**level``, the value an index type must hold for ``level``."""
    return 2 + edge_count(level)


def max_level(index_dtype=np.uint32) -> int:
    limit = int(np.iinfo(index_dtype).max)
    level = 0
    while index_bound(level + 1) <= limit:
        level += 1
    return level


def check_level(level, index_dtype=np.uint32) -> int:
    if isinstance(level, (bool, np.bool_)) or not isinstance(level, (int, np.integer)):
        raise SubdivisionLevelError(f"subdivision level must be an integer, got {level!r}")
    level = int(level)
    if level < 0:
        raise SubdivisionLevelError(f"subdivision level must be >= 0, got {level}")
    top = max_level(index_dtype)
    if level > top:
        raise SubdivisionLevelError(
            f"subdivision level {level} overflows {np.dtype(index_dtype).name} indices "
            f"(bound {index_bound(level)} > {np.iinfo(index_dtype).max}); maximum is {top}"
        )
    return level


@dataclass
class LevelStats:
    level: int
    faces: int
    vertices: int
    new_vertices: int
    cache_hits: int


class Subdivider:
    """Splits every face into four, one level per ``step()``, until ``target_level``."""

    def __init__(self, vertices: VertexBuffer, faces: List[Tuple[int, int, int]], radius: float, target_level: int):
        self.vertices = vertices
        self.faces = [tuple(int(i) for i in f) for f in faces]
        self.cache = MidpointCache(vertices, radius)
        self.target_level = int(target_level)
        self.level = 0
        self.history: List[LevelStats] = []

    @property
    def done(self) -> bool:
        return self.level >= self.target_level

    def step(self) -> LevelStats:
        if self.done:
            raise RuntimeError(f"already subdivided to level {self.target_level}")
        faces = self.faces
        mid = self.cache.get_or_create
        n_faces = len(faces)
        n_vertices = len(self.vertices)
        hits = self.cache.hits
        with perf.section(f"subdivide_level_{self.level + 1}") as section:
            for t in range(n_faces):
                #           p0
                #           /\
                #       p3 /--\ p5
                #         / \/ \
                #     p1 /--p4--\ p2
                p0, p1, p2 = faces[t]
                p3 = mid(p0, p1)
                p4 = mid(p1, p2)
                p5 = mid(p2, p0)
                faces[t] = (p0, p3, p5)
                faces.append((p3, p1, p4))
                faces.append((p5, p4, p2))
                faces.append((p4, p5, p3))
        self.level += 1
        stats = LevelStats(
            level=self.level,
            faces=len(faces),
            vertices=len(self.vertices),
            new_vertices=len(self.vertices) - n_vertices,
            cache_hits=self.cache.hits - hits,
        )
        self.history.append(stats)
        perf.record_level(stats, section["elapsed"])
        logger.debug("level %d: faces=%d vertices=%d new=%d hits=%d",
                     stats.level, stats.faces, stats.vertices, stats.new_vertices, stats.cache_hits)
        return stats

    def run(self) -> List[LevelStats]:
        while not self.done:
            self.step()
        return self.history

    def face_array(self) -> np.ndarray:
        return np.array(self.faces, np.int64).reshape(-1, 3)


def subdivide(V, F, radius: float, levels: int):
    """Subdivide the closed mesh (V, F) ``levels`` times on a sphere of ``radius``.

    Returns the new vertex array, face array and per-level stats.
    """
    V = np.asarray(V, float)
    F = np.asarray(F, np.int64)
    n_faces = F.shape[0] * 4 ** levels
    # closed genus-0 triangulation: V = 2 + F / 2
    buf = VertexBuffer(V, capacity=2 + n_faces // 2)
    sub = Subdivider(buf, [tuple(f) for f in F], radius, levels)
    history = sub.run()
    return buf.to_array(), sub.face_array(), history
