# rubik_drag/core/geometry.py
from __future__ import annotations

from typing import Dict, List, Literal, Optional, Sequence, Tuple

import numpy as np

Face = Literal["left", "right", "back", "front", "down", "up"]
Color = Literal["orange", "red", "blue", "green", "yellow", "white"]
Axis = Literal[0, 1, 2]
Vec3i = Tuple[int, int, int]

FACES: List[Face] = ["left", "right", "back", "front", "down", "up"]

# Normales por cara en coordenadas lógicas: x=derecha, y=frente, z=arriba
FACE_NORMAL: Dict[Face, Vec3i] = {
    "left": (-1, 0, 0),
    "right": (1, 0, 0),
    "back": (0, -1, 0),
    "front": (0, 1, 0),
    "down": (0, 0, -1),
    "up": (0, 0, 1),
}

FACE_AXIS: Dict[Face, Axis] = {
    "left": 0,
    "right": 0,
    "back": 1,
    "front": 1,
    "down": 2,
    "up": 2,
}

FACE_SIGN: Dict[Face, int] = {f: FACE_NORMAL[f][FACE_AXIS[f]] for f in FACES}

# (eje, signo) -> cara
AXIS_FACES: Dict[Tuple[int, int], Face] = {
    (FACE_AXIS[f], FACE_SIGN[f]): f for f in FACES
}

SOLVED_FACE_COLOR: Dict[Face, Color] = {
    "left": "orange",
    "right": "red",
    "back": "blue",
    "front": "green",
    "down": "yellow",
    "up": "white",
}


def face_from_vector(v: Sequence[float]) -> Optional[Face]:
    """Devuelve la cara cuya normal coincide exactamente con `v`.

    Solo se aceptan los seis vectores unitarios de los ejes. Cualquier otro
    vector (por ejemplo con dos componentes no nulas) retorna None.

    Args:
        v: Vector (x, y, z) con componentes enteras.

    Returns:
        La cara correspondiente o None.
    """
    x, y, z = (int(c) for c in v)
    if (x, y, z) != tuple(v):
        return None
    if y == 0 and z == 0:
        if x == 1:
            return "right"
        if x == -1:
            return "left"
    if x == 0 and z == 0:
        if y == 1:
            return "front"
        if y == -1:
            return "back"
    if x == 0 and y == 0:
        if z == 1:
            return "up"
        if z == -1:
            return "down"
    return None


def axis_unit(axis: int) -> Vec3i:
    """Vector unitario positivo del eje lógico `axis` (0, 1 o 2)."""
    if axis == 0:
        return (1, 0, 0)
    if axis == 1:
        return (0, 1, 0)
    if axis == 2:
        return (0, 0, 1)
    raise ValueError(f"Eje inválido: {axis}")


def rotation_matrix(axis: int, theta: float) -> np.ndarray:
    """Matriz de rotación entera para un múltiplo de 90 grados.

    Sigue la regla de la mano derecha: un ángulo positivo gira en sentido
    antihorario mirando desde el extremo positivo del eje.

    Args:
        axis: Eje lógico (0=x, 1=y, 2=z).
        theta: Ángulo en grados; debe ser múltiplo de 90.

    Returns:
        Matriz 3x3 de enteros (ortonormal, determinante +1).

    Raises:
        ValueError: Si el eje no existe o el ángulo no es múltiplo de 90.
    """
    if theta % 90 != 0:
        raise ValueError(f"El ángulo {theta} no es múltiplo de 90 grados")
    axis_unit(axis)

    turns = int(theta // 90) % 4
    c = (1, 0, -1, 0)[turns]
    s = (0, 1, 0, -1)[turns]

    if axis == 0:
        m = [[1, 0, 0], [0, c, -s], [0, s, c]]
    elif axis == 1:
        m = [[c, 0, s], [0, 1, 0], [-s, 0, c]]
    else:
        m = [[c, -s, 0], [s, c, 0], [0, 0, 1]]
    return np.array(m, dtype=int)


def logical_to_scene(v: Sequence[float]) -> np.ndarray:
    """Convierte (derecha, frente, arriba) a la escena (derecha, arriba, frente)."""
    return np.array([v[0], v[2], v[1]], dtype=float)


def scene_to_logical(v: Sequence[float]) -> np.ndarray:
    """Inversa de `logical_to_scene` (el intercambio y<->z es su propia inversa)."""
    return np.array([v[0], v[2], v[1]], dtype=float)
