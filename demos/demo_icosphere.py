import os
import sys
import time
import logging
import argparse
import numpy as np

from PyIcoSphereLib import IcosphereGenerator, IcosphereConfig, save_obj
from PyIcoSphereLib.core.errors import IcosphereError
from PyIcoSphereLib.core.icosahedron import EDGE_TOLERANCE
from PyIcoSphereLib.io.perf import perf
from PyIcoSphereLib.utils.validation import validate_icosphere


def setup_logger(log_path: str, verbose: bool):
    logger = logging.getLogger("PyIcoSphereLib")
    logger.setLevel(logging.DEBUG)
    if logger.handlers:
        logger.handlers.clear()
    formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    file_handler = logging.FileHandler(log_path, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
    if verbose:
        console = logging.StreamHandler()
        console.setLevel(logging.DEBUG)
        console.setFormatter(formatter)
        logger.addHandler(console)
    logger.propagate = False
    return logger


def run_case(level: int, out_dir: str, index_dtype: str, tol: float, check: bool, show: bool, verbose: bool):
    log_path = os.path.join(out_dir, 'icosphere.log')
    logger = setup_logger(log_path, verbose)
    perf.reset()
    cfg = IcosphereConfig(level=level, edge_tolerance=tol, index_dtype=np.dtype(index_dtype).type)
    gen = IcosphereGenerator(cfg)
    t0 = time.perf_counter()
    res = gen.compute()
    dt = time.perf_counter() - t0
    logger.info("generated level %d in %.3fs: %d vertices, %d indices, radius=%.6f",
                res.level, dt, res.vertices.shape[0], res.indices.size, res.radius)
    for s in res.stats:
        logger.info("level %d: faces=%d vertices=%d new_vertices=%d cache_hits=%d",
                    s.level, s.faces, s.vertices, s.new_vertices, s.cache_hits)
    mesh = res.to_mesh()
    if check:
        validate_icosphere(mesh, res.level, res.radius)
        logger.info("mesh checks passed")
    perf.set_meta(level=res.level, vertices=mesh.n_vertices, faces=mesh.n_faces)
    perf.write_csv(os.path.join(out_dir, 'perf.csv'))
    perf.write_levels_csv(os.path.join(out_dir, 'levels.csv'))
    save_obj(mesh, os.path.join(out_dir, f'icosphere_L{res.level}.obj'),
             header=f"icosphere level {res.level}\nradius {res.radius!r}")
    if show:
        from PyIcoSphereLib.visualization.pyvista_backend import show_mesh
        show_mesh(mesh, show_edges=res.level <= 4)
    return res


def build_parser():
    parser = argparse.ArgumentParser()
    parser.add_argument('--level', type=int, default=6)
    parser.add_argument('--index_dtype', type=str, choices=['uint16', 'uint32', 'uint64'], default='uint32')
    parser.add_argument('--tol', type=float, default=EDGE_TOLERANCE)
    parser.add_argument('--name', type=str, default='icosphere')
    parser.add_argument('--check', action='store_true')
    parser.add_argument('--show', action='store_true')
    parser.add_argument('--verbose', action='store_true')
    return parser


def main():
    args = build_parser().parse_args()

    base_out = os.path.abspath(os.path.join(os.path.dirname(os.path.abspath(__file__)), '..'))
    ts_name = time.strftime('%Y%m%d_%H%M%S')
    out_dir = os.path.join(base_out, 'outputs', f"{args.name}_L{args.level}_{ts_name}")
    os.makedirs(out_dir, exist_ok=True)

    try:
        run_case(args.level, out_dir, args.index_dtype, args.tol, args.check, args.show, args.verbose)
    except IcosphereError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(out_dir)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
