# rubik_drag/interaction/drag_interpreter.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from rubik_drag.config import DEGENERATE_AXIS, DEGENERATE_DRAG_PX, DRAG_SENSITIVITY_PX
from rubik_drag.core.geometry import axis_unit, logical_to_scene, scene_to_logical
from rubik_drag.core.move import find_move
from rubik_drag.interaction.camera import Camera

logger = logging.getLogger(__name__)

# Permutaciones pares de (0, 1, 2): ternas con la orientación de la mano derecha
_EVEN_PERMUTATIONS = {(0, 1, 2), (1, 2, 0), (2, 0, 1)}


@dataclass(frozen=True)
class DragResult:
    """Interpretación de un drag sobre un sticker.

    Attributes:
        axis: Eje lógico de rotación (0=x, 1=y, 2=z).
        layer: Capa sobre ese eje (-1, 0 o 1).
        clockwise: True si la capa gira en sentido positivo alrededor del eje de la
            escena (el sentido que ve la visualización).
        move: Movimiento equivalente en notación del cubo.
    """

    axis: int
    layer: int
    clockwise: bool
    move: str


def is_right_handed(axes: Sequence[int]) -> bool:
    """True si la terna de ejes es una permutación par de (0, 1, 2)."""
    return tuple(axes) in _EVEN_PERMUTATIONS


def normal_to_logical_axis(
    face_normal: Sequence[float],
    cube_rotation: Optional[np.ndarray] = None,
) -> Tuple[int, int]:
    """Eje lógico (y su signo) más cercano a una normal global de la escena.

    La normal se lleva al marco del cubo con la inversa de su rotación (la
    transpuesta) y se elige la componente de mayor valor absoluto.

    Returns:
        (eje, signo) con signo en {-1, 1}.
    """
    n = np.asarray(face_normal, dtype=float)
    if cube_rotation is not None:
        n = np.asarray(cube_rotation, dtype=float).T @ n
    logical = scene_to_logical(n)

    axis = int(np.argmax(np.abs(logical)))
    sign = 1 if logical[axis] > 0 else -1
    return axis, sign


def project_axis_to_screen(
    axis: int,
    camera: Camera,
    cube_rotation: Optional[np.ndarray] = None,
) -> np.ndarray:
    """Dirección 2D normalizada en pantalla del eje lógico `axis`.

    Se proyectan el centro del cubo y un paso unitario sobre el eje, y se toma la
    diferencia ignorando la profundidad. Si el eje apunta casi directo a la
    cámara la proyección es degenerada y se devuelve el vector nulo.
    """
    scene_axis = logical_to_scene(axis_unit(axis))
    if cube_rotation is not None:
        scene_axis = np.asarray(cube_rotation, dtype=float) @ scene_axis

    origin = np.array(camera.project((0.0, 0.0, 0.0)), dtype=float)
    end = np.array(camera.project(tuple(scene_axis)), dtype=float)
    screen_dir = end - origin

    length = float(np.linalg.norm(screen_dir))
    if length <= DEGENERATE_AXIS:
        return np.zeros(2)
    return screen_dir / length


def interpret_drag(
    face_normal: Sequence[float],
    cubie_position: Sequence[int],
    drag_delta: Sequence[float],
    camera: Camera,
    cube_rotation: Optional[np.ndarray] = None,
) -> Optional[DragResult]:
    """Decide qué capa girar y en qué sentido a partir de un drag sobre un sticker.

    Pasos:
    1. Se descartan drags degenerados.
    2. La normal clickeada se lleva al marco lógico y se ajusta al eje más cercano;
       ese eje queda fuera de los candidatos.
    3. Los otros dos ejes se proyectan a pantalla; el que mejor se alinea con el
       drag es el eje *a lo largo* del cual se arrastra.
    4. El eje de rotación es el tercero (perpendicular a la normal y al drag).
    5. El sentido sale del signo del drag sobre el eje elegido, corregido por el
       signo de la normal y por la orientación de la terna de ejes.

    Args:
        face_normal: Normal global del sticker (coordenadas de escena).
        cubie_position: Posición lógica del cubie clickeado.
        drag_delta: Vector de drag en píxeles (Y+ hacia abajo, como en pantalla).
        camera: Cámara para proyectar los ejes.
        cube_rotation: Rotación del cubo en la escena (identidad si es None).

    Returns:
        `DragResult` o None si todavía no se puede inferir una dirección.
    """
    # Y de pantalla invertida: arrastrar hacia arriba es positivo
    drag = np.array([drag_delta[0], -drag_delta[1]], dtype=float)
    length = float(np.linalg.norm(drag))
    if length < DEGENERATE_DRAG_PX:
        return None
    drag /= length

    face_axis, face_sign = normal_to_logical_axis(face_normal, cube_rotation)
    available: List[int] = [a for a in (0, 1, 2) if a != face_axis]

    best_axis: Optional[int] = None
    best_dot = 0.0
    best_dir = np.zeros(2)
    for axis in available:
        screen_dir = project_axis_to_screen(axis, camera, cube_rotation)
        d = abs(float(drag @ screen_dir))
        if d > best_dot:
            best_axis, best_dot, best_dir = axis, d, screen_dir

    if best_axis is None:
        # Ningún eje candidato tiene proyección útil en pantalla
        return None

    rotation_axis = next(a for a in available if a != best_axis)
    layer = int(cubie_position[rotation_axis])

    clockwise = float(drag @ best_dir) > 0

    # Click desde el lado negativo del eje invierte el sentido
    if face_sign < 0:
        clockwise = not clockwise

    # Terna (drag, normal, rotación) con orientación izquierda también invierte
    if not is_right_handed((best_axis, face_axis, rotation_axis)):
        clockwise = not clockwise

    # El cambio lógico->escena invierte la orientación: clockwise visual = theta lógico negativo
    move = find_move(rotation_axis, layer, positive_theta=not clockwise)

    logger.debug(
        "Drag: face_axis=%s sign=%s drag_axis=%s -> axis=%s layer=%s clockwise=%s move=%s",
        face_axis, face_sign, best_axis, rotation_axis, layer, clockwise, move,
    )
    return DragResult(axis=rotation_axis, layer=layer, clockwise=clockwise, move=move)


def drag_to_angle(drag_distance: float, sensitivity: float = DRAG_SENSITIVITY_PX) -> float:
    """Convierte una distancia de drag (píxeles) en un ángulo (grados).

    Args:
        drag_distance: Distancia con signo en píxeles.
        sensitivity: Píxeles que equivalen a 90 grados.
    """
    return drag_distance / sensitivity * 90.0
