import unittest
import numpy as np

from PyIcoSphereLib import (
    generate, make_icosphere, IcosphereGenerator, IcosphereConfig,
    SubdivisionLevelError, MeshValidationError,
)
from PyIcoSphereLib.core.icosahedron import icosahedron_vertices
from PyIcoSphereLib.utils.validation import validate_icosphere, edge_use_counts, face_areas


class GenerateTests(unittest.TestCase):
    def test_counts_and_dtypes(self):
        for level, (nv, nf) in enumerate([(12, 20), (42, 80), (162, 320)]):
            vertices, indices = generate(level)
            self.assertEqual(vertices.shape, (nv, 3))
            self.assertEqual(indices.shape, (3 * nf,))
            self.assertEqual(vertices.dtype, np.float32)
            self.assertEqual(indices.dtype, np.uint32)
            self.assertTrue(vertices.flags.c_contiguous)

    def test_vertices_on_sphere(self):
        vertices, _ = generate(3)
        radius = float(np.linalg.norm(icosahedron_vertices()[0]))
        r = np.linalg.norm(vertices.astype(float), axis=1)
        np.testing.assert_allclose(r, radius, rtol=1e-6)

    def test_manifold_closure(self):
        _, indices = generate(3)
        _, counts = edge_use_counts(indices.astype(np.int64))
        self.assertTrue(np.all(counts == 2))

    def test_deterministic(self):
        v1, i1 = generate(3)
        v2, i2 = generate(3)
        self.assertEqual(v1.tobytes(), v2.tobytes())
        self.assertEqual(i1.tobytes(), i2.tobytes())

    def test_result_is_read_only(self):
        vertices, indices = generate(1)
        with self.assertRaises(ValueError):
            vertices[0, 0] = 0.0
        with self.assertRaises(ValueError):
            indices[0] = 0

    def test_invalid_levels(self):
        for bad in (-1, 14, 1.5, False):
            with self.assertRaises(SubdivisionLevelError):
                generate(bad)


class GeneratorTests(unittest.TestCase):
    def test_config_validation(self):
        with self.assertRaises(ValueError):
            IcosphereGenerator(IcosphereConfig(edge_tolerance=0.0))
        with self.assertRaises(ValueError):
            IcosphereGenerator(IcosphereConfig(index_dtype=np.int32))
        with self.assertRaises(ValueError):
            IcosphereGenerator(IcosphereConfig(vertex_dtype=np.int32))

    def test_uint16_indices(self):
        gen = IcosphereGenerator(IcosphereConfig(level=2, index_dtype=np.uint16))
        self.assertEqual(gen.max_level, 5)
        res = gen.compute()
        self.assertEqual(res.indices.dtype, np.uint16)
        self.assertEqual(res.level, 2)
        self.assertEqual([s.new_vertices for s in res.stats], [30, 120])
        with self.assertRaises(SubdivisionLevelError):
            gen.compute(6)

    def test_result_validates(self):
        res = IcosphereGenerator().compute(2)
        mesh = res.to_mesh()
        validate_icosphere(mesh, res.level, res.radius)
        np.testing.assert_array_equal(mesh.indices, res.indices)

    def test_validation_reports_flipped_face(self):
        res = IcosphereGenerator().compute(1)
        mesh = res.to_mesh()
        mesh.F[0] = mesh.F[0][[0, 2, 1]]
        with self.assertRaises(MeshValidationError) as ctx:
            validate_icosphere(mesh, 1, res.radius)
        self.assertTrue(any("clockwise" in p for p in ctx.exception.problems))

    def test_validation_reports_collapsed_face(self):
        res = IcosphereGenerator().compute(1)
        mesh = res.to_mesh()
        mesh.V[mesh.F[0, 1]] = mesh.V[mesh.F[0, 0]]
        with self.assertRaises(MeshValidationError) as ctx:
            validate_icosphere(mesh, 1, res.radius)
        self.assertIn("face with zero area", ctx.exception.problems)

    def test_surface_area_approaches_sphere(self):
        res = IcosphereGenerator().compute(3)
        mesh = res.to_mesh()
        ratio = face_areas(mesh.V, mesh.F).sum() / (4.0 * np.pi * res.radius ** 2)
        self.assertGreater(ratio, 0.98)
        self.assertLess(ratio, 1.0)


class MakeIcosphereTests(unittest.TestCase):
    def test_scaled_and_translated(self):
        center = (0.0, 0.0, 0.26)
        mesh = make_icosphere(R=0.5, center=center, subdivisions=2)
        self.assertEqual(mesh.n_faces, 320)
        np.testing.assert_allclose(np.linalg.norm(mesh.V - np.asarray(center), axis=1), 0.5)
        np.testing.assert_allclose(mesh.center_of_mass(), center, atol=1e-12)
        validate_icosphere(mesh, 2, 0.5, center=center)


if __name__ == "__main__":
    unittest.main()
