# rubik_drag/core/errors.py
from __future__ import annotations


class CubeInvariantError(AssertionError):
    """El estado lógico del cubo quedó corrupto.

    Se lanza cuando una capa no tiene la cantidad esperada de cubies, cuando
    una posición rotada sale de {-1, 0, 1} o cuando una orientación no
    corresponde a ninguna cara local. Es un error de programación, no una
    condición recuperable.
    """
