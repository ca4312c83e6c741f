import os
import unittest

from PyIcoSphereLib import make_icosphere


class VisualizeTests(unittest.TestCase):
    def test_optional_pyvista_preview(self):
        mesh = make_icosphere(subdivisions=2)
        if os.environ.get("PYICO_VIZ", "0") != "1":
            self.skipTest("set PYICO_VIZ=1 to render")
        from PyIcoSphereLib.visualization.pyvista_backend import mesh_to_pyvista, show_mesh
        poly = mesh_to_pyvista(mesh)
        self.assertEqual(poly.n_points, mesh.n_vertices)
        self.assertEqual(poly.n_cells, mesh.n_faces)
        show_mesh(mesh)


if __name__ == "__main__":
    unittest.main()
