# rubik_drag/core/inverse_rotation.py
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, List, Optional

import numpy as np

from rubik_drag.core.errors import CubeInvariantError
from rubik_drag.core.geometry import Color, Face, FACE_NORMAL, Vec3i, face_from_vector

if TYPE_CHECKING:
    from rubik_drag.core.cube_model import Cube
    from rubik_drag.core.cubie import Cubie

# Posición 3D de la celda (fila, columna) de cada cara desplegada.
# Filas de arriba hacia abajo y columnas de izquierda a derecha mirando la cara de frente
# (arriba/abajo se miran con el frente hacia el observador).
FACE_POSITION: Dict[Face, Callable[[int, int], Vec3i]] = {
    "up": lambda r, c: (c - 1, r - 1, 1),
    "down": lambda r, c: (c - 1, 1 - r, -1),
    "left": lambda r, c: (-1, c - 1, 1 - r),
    "right": lambda r, c: (1, 1 - c, 1 - r),
    "front": lambda r, c: (c - 1, 1, 1 - r),
    "back": lambda r, c: (1 - c, -1, 1 - r),
}


def local_face(orientation: np.ndarray, global_face: Face) -> Face:
    """Cara local del cubie que se ve actualmente en la cara global `global_face`.

    La orientación lleva vectores locales a globales, así que su transpuesta
    (la inversa, por ser ortonormal) hace el camino contrario.

    Args:
        orientation: Matriz de rotación 3x3 del cubie.
        global_face: Cara del cubo (por ejemplo "front").

    Returns:
        La cara local que apunta hacia `global_face`.

    Raises:
        CubeInvariantError: Si la orientación no lleva la normal a ningún eje.
    """
    local = np.rint(np.asarray(orientation).T @ np.array(FACE_NORMAL[global_face]))
    face = face_from_vector(tuple(int(v) for v in local))
    if face is None:
        raise CubeInvariantError(
            f"La orientación {np.asarray(orientation).tolist()} no resuelve la cara {global_face}"
        )
    return face


def sticker_color(cubie: "Cubie", global_face: Face) -> Optional[Color]:
    """Color que muestra `cubie` en la cara global `global_face` (None si ese lado no tiene sticker)."""
    return cubie.face_colors.get(local_face(cubie.orientation, global_face))


def face_grid(cube: "Cube", face: Face) -> List[List[Color]]:
    """Colores actuales de una cara como grilla 3x3 (fila, columna).

    Args:
        cube: Cubo lógico.
        face: Cara global a leer.

    Returns:
        Lista de 3 filas con 3 colores cada una.

    Raises:
        CubeInvariantError: Si falta un cubie o un sticker donde debería haberlo.
    """
    by_position = {c.position: c for c in cube.cubies}
    grid: List[List[Color]] = []
    for r in range(3):
        row: List[Color] = []
        for c in range(3):
            pos = FACE_POSITION[face](r, c)
            cubie = by_position.get(pos)
            if cubie is None:
                raise CubeInvariantError(f"No hay cubie en la posición {pos}")
            color = sticker_color(cubie, face)
            if color is None:
                raise CubeInvariantError(f"El cubie en {pos} no tiene sticker hacia {face}")
            row.append(color)
        grid.append(row)
    return grid
