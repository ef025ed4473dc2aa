# rubik_drag/logic/scramble.py
from __future__ import annotations

import random
from typing import List, Optional

FACES: List[str] = ["U", "D", "L", "R", "F", "B"]
SUFFIX: List[str] = ["", "'"]


def generate_scramble(n: int, seed: Optional[int] = None) -> List[str]:
    """Genera una secuencia de mezcla (scramble) aleatoria para el cubo.

    Cada movimiento se elige de forma uniforme entre los 12 cuartos de vuelta de
    caras externas (U U' D D' L L' R R' F F' B B'); no se usan slices.

    Args:
        n: Cantidad de movimientos a generar.
        seed: Semilla opcional para obtener resultados reproducibles. Si es None,
            el scramble será distinto en cada ejecución.

    Returns:
        Lista de movimientos, por ejemplo ["R", "U'", "F", ...].

    Raises:
        ValueError: Si `n` es menor o igual a 0.
    """
    if n <= 0:
        raise ValueError("n debe ser mayor que 0.")

    rng = random.Random(seed)
    moves = [face + suffix for face in FACES for suffix in SUFFIX]
    return [rng.choice(moves) for _ in range(n)]
