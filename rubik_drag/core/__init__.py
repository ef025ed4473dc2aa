from rubik_drag.core.cube_model import Cube
from rubik_drag.core.cubie import Cubie
from rubik_drag.core.errors import CubeInvariantError
from rubik_drag.core.geometry import Color, Face

__all__ = ["Color", "Cube", "CubeInvariantError", "Cubie", "Face"]
