# rubik_drag/interaction/hit.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from rubik_drag.core.cube_model import Cube
from rubik_drag.core.geometry import Face, FACE_NORMAL, Vec3i, logical_to_scene


@dataclass(frozen=True)
class FaceletHit:
    """Resultado de hacer click sobre un sticker.

    Lo produce el colaborador de escena (raycasting o picking por color).

    Attributes:
        cubie_index: Índice (identidad) del cubie en `Cube.cubies`.
        face_normal: Normal global del sticker en coordenadas de escena.
        position: Posición lógica del cubie al momento del click.
    """

    cubie_index: int
    face_normal: Tuple[float, float, float]
    position: Vec3i

    @classmethod
    def from_face(
        cls,
        cube: Cube,
        cubie_index: int,
        face: Face,
        cube_rotation: Optional[np.ndarray] = None,
    ) -> "FaceletHit":
        """Construye el hit que reportaría la escena para un sticker en la cara lógica `face`.

        Args:
            cube: Cubo lógico.
            cubie_index: Índice del cubie clickeado.
            face: Cara global (lógica) donde está el sticker.
            cube_rotation: Rotación del cubo en la escena (identidad si es None).

        Raises:
            ValueError: Si el cubie no está sobre esa cara.
        """
        cubie = cube.cubies[cubie_index]
        normal = FACE_NORMAL[face]
        axis = next(i for i, v in enumerate(normal) if v != 0)
        if cubie.position[axis] != normal[axis]:
            raise ValueError(f"El cubie {cubie_index} en {cubie.position} no está en la cara {face}")

        scene = logical_to_scene(normal)
        if cube_rotation is not None:
            scene = np.asarray(cube_rotation, dtype=float) @ scene
        return cls(
            cubie_index=cubie_index,
            face_normal=tuple(float(v) for v in scene),  # type: ignore[arg-type]
            position=cubie.position,
        )
