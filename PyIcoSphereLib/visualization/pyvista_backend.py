import numpy as np
import pyvista as pv


def mesh_to_pyvista(mesh):
    V = np.asarray(mesh.V, float)
    F = np.asarray(mesh.F, np.int64)
    n_faces = F.shape[0]
    faces = np.hstack([np.full((n_faces, 1), 3, dtype=np.int64), F]).ravel()
    return pv.PolyData(V, faces)


def show_mesh(mesh, show_edges=True, color="lightsteelblue", screenshot=None):
    poly = mesh_to_pyvista(mesh)
    off_screen = screenshot is not None
    pl = pv.Plotter(off_screen=off_screen)
    pl.set_background("white")
    # backface culling exposes any face wound the wrong way
    pl.add_mesh(poly, color=color, show_edges=show_edges, culling="back", label="Icosphere")
    pl.add_axes(line_width=2)
    if off_screen:
        pl.show(screenshot=screenshot)
    else:
        pl.show()
    return poly
