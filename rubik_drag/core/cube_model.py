# rubik_drag/core/cube_model.py
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np

from rubik_drag.core.cubie import Cubie
from rubik_drag.core.geometry import Vec3i
from rubik_drag.core.move import do_move
from rubik_drag.core.rotation import layer_cubies
from rubik_drag.logic.moves import normalize_token, parse_sequence
from rubik_drag.logic.scramble import generate_scramble

logger = logging.getLogger(__name__)

CubieHash = Tuple[Vec3i, Tuple[int, ...]]
CubeHash = Tuple[CubieHash, ...]


class Cube:
    """Modelo lógico del cubo Rubik 3x3 basado en matrices de rotación.

    Representación:
        - `cubies` es la lista de los 26 sub-cubos (el centro del cubo no existe).
          El índice de cada cubie es su identidad y no cambia nunca.
        - Cada cubie guarda su posición (x, y, z) en {-1, 0, 1} y su orientación
          como matriz de rotación 3x3 respecto del estado resuelto.
        - `solved_state` es una copia paralela (mismo orden) del cubo resuelto; no
          se modifica y sirve para saber si el cubo está resuelto.

    Coordenadas lógicas: x=derecha, y=frente, z=arriba.
    """

    def __init__(self) -> None:
        """Inicializa el cubo en estado resuelto."""
        self.cubies: List[Cubie] = []
        self.solved_state: Tuple[Cubie, ...] = ()
        self._build_solved_cubies()

    # --------------------------
    # Public API
    # --------------------------
    def is_solved(self) -> bool:
        """Indica si el cubo está resuelto.

        Todas las posiciones deben coincidir exactamente con la referencia y todas
        las orientaciones deben ser la identidad.
        """
        identity = np.identity(3, dtype=int)
        for cubie, ref in zip(self.cubies, self.solved_state):
            if cubie.position != ref.position:
                return False
            if not np.array_equal(cubie.orientation, identity):
                return False
        return True

    def apply_move(self, move: str) -> None:
        """Aplica un movimiento (por ejemplo "R", "U'", "M" o "F2").

        Un sufijo "2" se aplica como dos cuartos de vuelta.

        Raises:
            ValueError: Si el movimiento no está soportado.
        """
        tok = normalize_token(move)
        if tok.endswith("2"):
            do_move(self, tok[0])
            do_move(self, tok[0])
        else:
            do_move(self, tok)

    def apply_sequence(self, seq: str) -> None:
        """Aplica una secuencia de movimientos separada por espacios.

        Args:
            seq: String con movimientos, por ejemplo: "R U R' U'" o "R2 E'".
        """
        for move in parse_sequence(seq):
            self.apply_move(move)

    def scramble(self, n: int, seed: Optional[int] = None) -> List[str]:
        """Mezcla el cubo aplicando `n` giros aleatorios de caras externas.

        Args:
            n: Cantidad de movimientos.
            seed: Semilla opcional para un resultado reproducible.

        Returns:
            La lista de movimientos aplicados.
        """
        moves = generate_scramble(n, seed)
        logger.debug("Scramble: %s", " ".join(moves))
        for move in moves:
            self.apply_move(move)
        return moves

    def reset(self) -> None:
        """Reinicia el cubo a estado resuelto."""
        self.cubies = [ref.copy() for ref in self.solved_state]

    def copy(self) -> "Cube":
        """Crea una copia independiente del cubo (misma referencia resuelta)."""
        c = Cube.__new__(Cube)
        c.cubies = [cubie.copy() for cubie in self.cubies]
        c.solved_state = self.solved_state
        return c

    def to_hashable(self) -> CubeHash:
        """Convierte el estado a una estructura inmutable y hasheable.

        Returns:
            Tupla (posición, orientación aplanada) por cubie, en orden de identidad.
        """
        return tuple(
            (c.position, tuple(int(v) for v in c.orientation.flatten()))
            for c in self.cubies
        )

    def layer_indices(self, axis: int, layer: int) -> List[int]:
        """Índices de los cubies que forman la capa (axis, layer).

        Pensado para que la visualización sepa qué mallas girar.
        """
        members = {id(c) for c in layer_cubies(self, axis, layer)}
        return [i for i, c in enumerate(self.cubies) if id(c) in members]

    def cubie_at(self, position: Vec3i) -> Optional[Cubie]:
        """Cubie que ocupa actualmente `position`, o None si no hay ninguno."""
        target = tuple(position)
        for cubie in self.cubies:
            if cubie.position == target:
                return cubie
        return None

    # --------------------------
    # Construcción
    # --------------------------
    def _build_solved_cubies(self) -> None:
        """Genera los 26 cubies del cubo resuelto y su copia de referencia."""
        refs: List[Cubie] = []
        for x in (-1, 0, 1):
            for y in (-1, 0, 1):
                for z in (-1, 0, 1):
                    # El centro del cubo no es un cubie válido
                    if x == 0 and y == 0 and z == 0:
                        continue
                    refs.append(Cubie((x, y, z)))

        self.solved_state = tuple(refs)
        self.cubies = [ref.copy() for ref in refs]
