import numpy as np


def normalize_to(v, radius: float) -> np.ndarray:
    """Rescale ``v`` to length ``radius``, keeping its direction."""
    v = np.asarray(v, float)
    L = float(np.linalg.norm(v))
    if L == 0.0:
        raise ValueError("cannot project a zero vector onto the sphere")
    return v * (radius / L)


def spherical_midpoint(a, b, radius: float) -> np.ndarray:
    a = np.asarray(a, float)
    b = np.asarray(b, float)
    return normalize_to(a + 0.5 * (b - a), radius)


def signed_volume(a, b, c) -> float:
    """Six times the signed volume of the tetrahedron (origin, a, b, c).

    Positive when ``(b - a) x (c - a)`` points away from the origin.
    """
    return float(np.dot(np.asarray(a, float), np.cross(np.asarray(b, float), np.asarray(c, float))))


def triangle_normal(a, b, c):
    """Unit normal of triangle(s) a, b, c; rows of (N, 3) arrays are handled per face."""
    n = np.cross(np.asarray(b, float) - a, np.asarray(c, float) - a)
    L = np.linalg.norm(n, axis=-1, keepdims=True) + 1e-18
    return n / L


def triangle_area(a, b, c):
    return 0.5 * np.linalg.norm(np.cross(np.asarray(b, float) - a, np.asarray(c, float) - a), axis=-1)
