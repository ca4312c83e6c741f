import unittest
import numpy as np

from PyIcoSphereLib.core.buffers import VertexBuffer
from PyIcoSphereLib.core.geometry import normalize_to, spherical_midpoint, triangle_normal, triangle_area
from PyIcoSphereLib.core.midpoint_cache import MidpointCache, canonical_edge


class MidpointCacheTests(unittest.TestCase):
    def setUp(self):
        self.V = VertexBuffer(np.array([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]))
        self.cache = MidpointCache(self.V, 1.0)

    def test_canonical_edge(self):
        self.assertEqual(canonical_edge(5, 2), (2, 5))
        self.assertEqual(canonical_edge(2, 5), (2, 5))

    def test_shared_edge_creates_one_vertex(self):
        a = self.cache.get_or_create(0, 1)
        b = self.cache.get_or_create(1, 0)
        self.assertEqual(a, 3)
        self.assertEqual(a, b)
        self.assertEqual(len(self.V), 4)
        self.assertEqual(self.cache.misses, 1)
        self.assertEqual(self.cache.hits, 1)
        self.assertIn((1, 0), self.cache)

    def test_distinct_edges_get_distinct_vertices(self):
        idx = {self.cache.get_or_create(*e) for e in ((0, 1), (1, 2), (2, 0))}
        self.assertEqual(idx, {3, 4, 5})
        self.assertEqual(len(self.cache), 3)

    def test_midpoint_is_projected(self):
        i = self.cache.get_or_create(0, 1)
        p = self.V[i]
        self.assertAlmostEqual(float(np.linalg.norm(p)), 1.0)
        np.testing.assert_allclose(p, np.array([1.0, 1.0, 0.0]) / np.sqrt(2.0))

    def test_rejects_loop_edge(self):
        with self.assertRaises(ValueError):
            self.cache.get_or_create(1, 1)

    def test_buffer_grows_past_capacity(self):
        buf = VertexBuffer(capacity=1)
        for n in range(5):
            self.assertEqual(buf.append((n, 0.0, 0.0)), n)
        self.assertEqual(len(buf), 5)
        self.assertGreaterEqual(buf.capacity, 5)
        self.assertEqual(buf.to_array()[4, 0], 4.0)
        with self.assertRaises(IndexError):
            buf[5]


class ProjectorTests(unittest.TestCase):
    def test_normalize_to_keeps_direction(self):
        p = normalize_to([3.0, 4.0, 0.0], 10.0)
        np.testing.assert_allclose(p, [6.0, 8.0, 0.0])

    def test_zero_vector_rejected(self):
        with self.assertRaises(ValueError):
            normalize_to([0.0, 0.0, 0.0], 1.0)
        with self.assertRaises(ValueError):
            spherical_midpoint([1.0, 0.0, 0.0], [-1.0, 0.0, 0.0], 1.0)

    def test_triangle_normal_and_area(self):
        a, b, c = np.zeros(3), np.array([2.0, 0.0, 0.0]), np.array([0.0, 2.0, 0.0])
        np.testing.assert_allclose(triangle_normal(a, b, c), [0.0, 0.0, 1.0])
        self.assertAlmostEqual(float(triangle_area(a, b, c)), 2.0)
        A = np.stack([a, a])
        B = np.stack([b, c])
        C = np.stack([c, b])
        np.testing.assert_allclose(triangle_normal(A, B, C), [[0.0, 0.0, 1.0], [0.0, 0.0, -1.0]])
        np.testing.assert_allclose(triangle_area(A, B, C), [2.0, 2.0])


if __name__ == "__main__":
    unittest.main()
