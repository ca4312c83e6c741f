from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import numpy as np

from ..core.mesh import Mesh
from ..core.sphere import icosphere
from ..core.subdivision import LevelStats, max_level
from ..core.icosahedron import EDGE_LENGTH, EDGE_TOLERANCE


@dataclass
class IcosphereConfig:
    level: int = 0
    edge_length: float = EDGE_LENGTH
    edge_tolerance: float = EDGE_TOLERANCE
    vertex_dtype: type = np.float32
    index_dtype: type = np.uint32

    def validate(self) -> None:
        if not np.isfinite(self.edge_length) or self.edge_length <= 0.0:
            raise ValueError("edge_length must be positive and finite")
        if not np.isfinite(self.edge_tolerance) or self.edge_tolerance <= 0.0:
            raise ValueError("edge_tolerance must be positive and finite")
        if np.dtype(self.vertex_dtype).kind != "f":
            raise ValueError("vertex_dtype must be a floating point type")
        if np.dtype(self.index_dtype).kind != "u":
            raise ValueError("index_dtype must be an unsigned integer type")


@dataclass
class IcosphereResult:
    vertices: np.ndarray
    indices: np.ndarray
    radius: float
    level: int
    stats: List[LevelStats] = field(default_factory=list)

    @property
    def faces(self) -> np.ndarray:
        return self.indices.reshape(-1, 3)

    def to_mesh(self) -> Mesh:
        return Mesh(V=np.asarray(self.vertices, float), F=np.asarray(self.faces, np.int64))


class IcosphereGenerator:
    def __init__(self, config: Optional[IcosphereConfig] = None):
        self.config = config or IcosphereConfig()
        self.config.validate()

    @property
    def max_level(self) -> int:
        return max_level(self.config.index_dtype)

    def compute(self, level: Optional[int] = None) -> IcosphereResult:
        cfg = self.config
        lvl = cfg.level if level is None else level
        V, F, radius, history = icosphere(lvl, cfg.edge_length, cfg.edge_tolerance, cfg.index_dtype)
        vertices, indices = Mesh(V=V, F=F).as_buffers(cfg.vertex_dtype, cfg.index_dtype)
        vertices.flags.writeable = False
        indices.flags.writeable = False
        return IcosphereResult(
            vertices=vertices,
            indices=indices,
            radius=radius,
            level=len(history),
            stats=history,
        )


def generate(level: int) -> Tuple[np.ndarray, np.ndarray]:
    """Icosphere of ``level`` as ``(vertices, indices)``.

    ``vertices`` is a read-only float32 (V, 3) array, ``indices`` a read-only
    flat uint32 array holding one counter-clockwise triangle per triple.
    """
    res = IcosphereGenerator().compute(level)
    return res.vertices, res.indices
