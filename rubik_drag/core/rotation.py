# rubik_drag/core/rotation.py
from __future__ import annotations

from typing import TYPE_CHECKING, List

import numpy as np

from rubik_drag.core.errors import CubeInvariantError
from rubik_drag.core.geometry import rotation_matrix

if TYPE_CHECKING:
    from rubik_drag.core.cube_model import Cube
    from rubik_drag.core.cubie import Cubie

CUBIE_COUNT = 26
OUTER_LAYER_SIZE = 9   # 4 esquinas + 4 aristas + 1 centro
MIDDLE_LAYER_SIZE = 8  # 4 aristas + 4 centros


def layer_cubies(cube: "Cube", axis: int, layer: int) -> List["Cubie"]:
    """Selecciona los cubies cuya componente `axis` vale `layer`.

    Args:
        cube: Cubo lógico.
        axis: Eje (0, 1 o 2).
        layer: Capa (-1, 0 o 1).

    Returns:
        Lista con los cubies de la capa (9 para una capa externa, 8 para un slice).

    Raises:
        CubeInvariantError: Si el cubo no tiene 26 cubies o la capa no tiene el tamaño esperado.
    """
    if len(cube.cubies) != CUBIE_COUNT:
        raise CubeInvariantError(
            f"El cubo no tiene {CUBIE_COUNT} cubies, tiene {len(cube.cubies)}"
        )

    selected = [c for c in cube.cubies if c.position[axis] == layer]

    expected = MIDDLE_LAYER_SIZE if layer == 0 else OUTER_LAYER_SIZE
    if len(selected) != expected:
        raise CubeInvariantError(
            f"La capa axis={axis} layer={layer} tiene {len(selected)} cubies (se esperaban {expected})"
        )
    return selected


def rotate_layer(cube: "Cube", axis: int, layer: int, theta: float) -> None:
    """Rota una capa del cubo `theta` grados alrededor del eje lógico `axis`.

    Cada cubie seleccionado multiplica su orientación por la izquierda con `R`
    y su posición pasa a ser `round(R · posición)`. El redondeo debe dejar
    componentes exactas en {-1, 0, 1}; cualquier desvío es un bug.

    Args:
        cube: Cubo lógico a modificar.
        axis: Eje de rotación (0=x, 1=y, 2=z).
        layer: Capa a rotar (-1, 0 o 1).
        theta: Ángulo en grados (múltiplo de 90).

    Raises:
        ValueError: Si el eje o el ángulo no son válidos.
        CubeInvariantError: Si la capa o alguna posición resultante es inconsistente.
    """
    R = rotation_matrix(axis, theta)

    for cubie in layer_cubies(cube, axis, layer):
        cubie.orientation = R @ cubie.orientation

        rotated = R @ np.array(cubie.position, dtype=float)
        rounded = np.rint(rotated)
        if np.max(np.abs(rotated - rounded)) > 1e-9 or np.max(np.abs(rounded)) > 1:
            raise CubeInvariantError(
                f"Posición rotada inválida: {rotated.tolist()} (desde {cubie.position})"
            )
        cubie.position = tuple(int(c) for c in rounded)  # type: ignore[assignment]
