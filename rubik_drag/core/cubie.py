# rubik_drag/core/cubie.py
from __future__ import annotations

from typing import Dict, Literal, Optional

import numpy as np

from rubik_drag.core.geometry import Color, Face, FACE_AXIS, FACE_SIGN, FACES, SOLVED_FACE_COLOR, Vec3i

CubieKind = Literal["corner", "edge", "center"]


class Cubie:
    """Sub-cubo del cubo 3x3 (esquina, arista o centro de cara).

    Atributos:
        position: Posición lógica (x, y, z) con componentes en {-1, 0, 1}.
        orientation: Matriz de rotación 3x3 (entera) acumulada desde el estado resuelto.
        face_colors: Colores de las caras *locales* del cubie. Se fijan al crearlo y
            nunca cambian: es la "pintura" del cubie, no lo que se ve globalmente.
    """

    def __init__(
        self,
        position: Vec3i,
        orientation: Optional[np.ndarray] = None,
        face_colors: Optional[Dict[Face, Color]] = None,
    ) -> None:
        self.position: Vec3i = tuple(int(c) for c in position)  # type: ignore[assignment]
        self.orientation: np.ndarray = (
            np.identity(3, dtype=int) if orientation is None else np.array(orientation, dtype=int)
        )
        self.face_colors: Dict[Face, Color] = (
            dict(face_colors) if face_colors is not None else solved_face_colors(self.position)
        )

    @property
    def kind(self) -> CubieKind:
        """Clase del cubie según la cantidad de componentes no nulas de su posición."""
        n = sum(1 for c in self.position if c != 0)
        if n == 3:
            return "corner"
        if n == 2:
            return "edge"
        return "center"

    def copy(self) -> "Cubie":
        return Cubie(self.position, self.orientation.copy(), self.face_colors)

    def __repr__(self) -> str:
        return (
            f"Cubie(position={self.position}, "
            f"orientation={self.orientation.tolist()}, "
            f"face_colors={self.face_colors})"
        )


def solved_face_colors(position: Vec3i) -> Dict[Face, Color]:
    """Colores que tiene un cubie ubicado en `position` en el cubo resuelto.

    Args:
        position: Posición lógica del cubie (no puede ser el centro del cubo).

    Returns:
        Diccionario cara local -> color (1 a 3 entradas).

    Raises:
        ValueError: Si la posición es (0, 0, 0) o tiene componentes fuera de {-1, 0, 1}.
    """
    if any(c not in (-1, 0, 1) for c in position):
        raise ValueError(f"Posición inválida: {position}")
    if all(c == 0 for c in position):
        raise ValueError("El centro del cubo no es un cubie")

    colors: Dict[Face, Color] = {}
    for face in FACES:
        axis = FACE_AXIS[face]
        if position[axis] == FACE_SIGN[face]:
            colors[face] = SOLVED_FACE_COLOR[face]
    return colors
