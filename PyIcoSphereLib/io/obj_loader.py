import os
import numpy as np
from ..core.mesh import Mesh


def load_obj(path: str) -> Mesh:
    if not os.path.isfile(path):
        raise FileNotFoundError(path)
    vertices = []
    faces = []
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if line.startswith("v "):
                parts = line.split()
                if len(parts) < 4:
                    continue
                x, y, z = map(float, parts[1:4])
                vertices.append((x, y, z))
            elif line.startswith("f "):
                parts = line.split()[1:]
                if len(parts) < 3:
                    continue
                def parse_index(tok):
                    return int(tok.split("/")[0])
                idx = [parse_index(t) for t in parts]
                idx = [i - 1 if i > 0 else len(vertices) + i for i in idx]
                for i in range(1, len(idx) - 1):
                    faces.append((idx[0], idx[i], idx[i + 1]))
    if not vertices or not faces:
        raise ValueError(f"OBJ '{path}' has no vertices or faces")
    V = np.asarray(vertices, dtype=float)
    F = np.asarray(faces, dtype=int)
    if F.min() < 0 or F.max() >= V.shape[0]:
        raise ValueError(f"OBJ '{path}' references vertices out of range")
    return Mesh(V=V, F=F)


def save_obj(mesh: Mesh, path: str, header: str = "") -> None:
    V = np.asarray(mesh.V, float)
    F = np.asarray(mesh.F, np.int64)
    d = os.path.dirname(os.path.abspath(path))
    os.makedirs(d, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        for line in header.splitlines():
            f.write(f"# {line}\n")
        for x, y, z in V.tolist():
            f.write(f"v {x!r} {y!r} {z!r}\n")
        for i, j, k in (F + 1).tolist():
            f.write(f"f {i} {j} {k}\n")
