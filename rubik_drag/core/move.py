# rubik_drag/core/move.py
from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, NamedTuple

from rubik_drag.core.rotation import rotate_layer

if TYPE_CHECKING:
    from rubik_drag.core.cube_model import Cube


class LayerDef(NamedTuple):
    axis: int    # 0=x (izq/der), 1=y (atrás/frente), 2=z (abajo/arriba)
    layer: int   # -1, 0 o 1
    theta: int   # grados; positivo = antihorario mirando desde el extremo positivo del eje


# Movimiento -> (eje, capa, ángulo). Tabla fija según la notación estándar.
MOVE_LAYER: Dict[str, LayerDef] = {
    "U": LayerDef(2, 1, 90),
    "U'": LayerDef(2, 1, -90),
    "D": LayerDef(2, -1, -90),
    "D'": LayerDef(2, -1, 90),
    "L": LayerDef(0, -1, -90),
    "L'": LayerDef(0, -1, 90),
    "R": LayerDef(0, 1, 90),
    "R'": LayerDef(0, 1, -90),
    "F": LayerDef(1, 1, 90),
    "F'": LayerDef(1, 1, -90),
    "B": LayerDef(1, -1, -90),
    "B'": LayerDef(1, -1, 90),
    # Slices
    "M": LayerDef(0, 0, -90),   # sigue a L
    "M'": LayerDef(0, 0, 90),
    "E": LayerDef(2, 0, -90),   # sigue a D
    "E'": LayerDef(2, 0, 90),
    "S": LayerDef(1, 0, 90),    # sigue a F
    "S'": LayerDef(1, 0, -90),
}

ALL_MOVES: List[str] = list(MOVE_LAYER)

# Solo caras externas
OUTER_MOVES: List[str] = [m for m in ALL_MOVES if m[0] not in ("M", "E", "S")]


def do_move(cube: "Cube", move: str) -> None:
    """Aplica un cuarto de vuelta al cubo lógico.

    Args:
        cube: Cubo a modificar.
        move: Uno de los 18 movimientos de `MOVE_LAYER` (por ejemplo "R", "U'", "E").

    Raises:
        ValueError: Si el movimiento no existe.
    """
    try:
        axis, layer, theta = MOVE_LAYER[move]
    except KeyError:
        raise ValueError(f"Movimiento no soportado: {move}") from None
    rotate_layer(cube, axis, layer, theta)


def opposite_move(move: str) -> str:
    """El movimiento que deshace `move` ("R" <-> "R'")."""
    if move not in MOVE_LAYER:
        raise ValueError(f"Movimiento no soportado: {move}")
    return move[0] if move.endswith("'") else move + "'"


def find_move(axis: int, layer: int, positive_theta: bool) -> str:
    """Busca el movimiento que gira la capa (axis, layer) en el sentido pedido.

    Args:
        axis: Eje lógico (0, 1 o 2).
        layer: Capa (-1, 0 o 1).
        positive_theta: True para el movimiento con ángulo positivo en `MOVE_LAYER`.

    Returns:
        Nombre del movimiento (por ejemplo "U'").

    Raises:
        ValueError: Si (axis, layer) no corresponde a ninguna capa.
    """
    for move, d in MOVE_LAYER.items():
        if d.axis == axis and d.layer == layer and (d.theta > 0) == positive_theta:
            return move
    raise ValueError(
        f"No hay movimiento para axis={axis}, layer={layer}, positive_theta={positive_theta}"
    )
