from .core.mesh import Mesh
from .core.sphere import make_icosphere
from .core.errors import IcosphereError, SubdivisionLevelError, BaseMeshError, MeshValidationError
from .io.obj_loader import load_obj, save_obj
from .api.generator import generate, IcosphereGenerator, IcosphereConfig, IcosphereResult

__all__ = [
    "Mesh",
    "make_icosphere",
    "generate",
    "IcosphereGenerator",
    "IcosphereConfig",
    "IcosphereResult",
    "load_obj",
    "save_obj",
    "IcosphereError",
    "SubdivisionLevelError",
    "BaseMeshError",
    "MeshValidationError",
]
