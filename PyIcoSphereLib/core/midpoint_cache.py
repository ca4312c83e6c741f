from typing import Dict, Tuple

from .buffers import VertexBuffer
from .geometry import spherical_midpoint


def canonical_edge(a: int, b: int) -> Tuple[int, int]:
    a = int(a)
    b = int(b)
    return (a, b) if a <= b else (b, a)


class MidpointCache:
    """Maps each undirected edge to the index of its projected midpoint.

    One instance lives for a whole generation call, so edges created at
    level n resolve to the same midpoint when level n + 1 splits them.
    """

    def __init__(self, vertices: VertexBuffer, radius: float):
        self.vertices = vertices
        self.radius = float(radius)
        self._index: Dict[Tuple[int, int], int] = {}
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, edge) -> bool:
        return canonical_edge(*edge) in self._index

    def get_or_create(self, a: int, b: int) -> int:
        key = canonical_edge(a, b)
        idx = self._index.get(key)
        if idx is not None:
            self.hits += 1
            return idx
        if key[0] == key[1]:
            raise ValueError(f"edge endpoints must differ, got {key}")
        p = spherical_midpoint(self.vertices[key[0]], self.vertices[key[1]], self.radius)
        idx = self.vertices.append(p)
        self._index[key] = idx
        self.misses += 1
        return idx
