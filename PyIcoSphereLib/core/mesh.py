from dataclasses import dataclass
from typing import Tuple
import numpy as np


@dataclass
class Mesh:
    V: np.ndarray
    F: np.ndarray

    @property
    def n_vertices(self) -> int:
        return int(np.asarray(self.V).shape[0])

    @property
    def n_faces(self) -> int:
        return int(np.asarray(self.F).shape[0])

    @property
    def indices(self) -> np.ndarray:
        return np.asarray(self.F, np.uint32).ravel()

    def center_of_mass(self) -> np.ndarray:
        return np.asarray(self.V, float).mean(axis=0)

    def edges(self) -> np.ndarray:
        """Unique undirected edges as (E, 2) rows with the smaller index first."""
        F = np.asarray(self.F, np.int64)
        E = np.concatenate([F[:, [0, 1]], F[:, [1, 2]], F[:, [2, 0]]], axis=0)
        E.sort(axis=1)
        return np.unique(E, axis=0)

    def as_buffers(self, vertex_dtype=np.float32, index_dtype=np.uint32) -> Tuple[np.ndarray, np.ndarray]:
        V = np.ascontiguousarray(self.V, dtype=vertex_dtype)
        idx = np.ascontiguousarray(np.asarray(self.F).ravel(), dtype=index_dtype)
        return V, idx
