# rubik_drag/logic/moves.py
from __future__ import annotations

from typing import List, Set

VALID_BASES: Set[str] = {"U", "D", "L", "R", "F", "B", "M", "E", "S"}
VALID_SUFFIX: Set[str] = {"", "'", "2"}


def normalize_token(tok: str) -> str:
    """Normaliza un token de movimiento a un formato estándar.

    Reglas principales:
    - Elimina espacios y convierte comilla tipográfica (’ o ‘) a comilla simple (').
    - Acepta caras (U D L R F B) y slices (M E S) con sufijo opcional:
        - ""  (ej: "R")
        - "'" (ej: "R'")
        - "2" (ej: "R2")
    - Corrige el caso típico "D2'" -> "D2" (ya que el inverso de un 180° es el mismo).

    Args:
        tok: Token de movimiento (por ejemplo: "R", "U'", "F2", "D2'").

    Returns:
        Token normalizado (por ejemplo: "D2'" -> "D2").

    Raises:
        ValueError: Si la base no es válida o si el sufijo no es válido.
    """
    tok = tok.strip().replace("’", "'").replace("‘", "'")
    if not tok:
        return ""

    base = tok[0]
    suf = tok[1:]

    if base not in VALID_BASES:
        raise ValueError(f"Movimiento inválido: {tok}")

    # Corrección: "D2'" -> "D2"
    if suf == "2'":
        suf = "2"

    if suf not in VALID_SUFFIX:
        raise ValueError(f"Sufijo inválido en: {tok}")

    return base + suf


def inverse_move(m: str) -> str:
    """Devuelve el movimiento inverso de un token.

    Ejemplos:
        - "R"  -> "R'"
        - "R'" -> "R"
        - "R2" -> "R2"

    Raises:
        ValueError: Si `m` no es un token válido.
    """
    m = normalize_token(m)
    if not m:
        return m

    base, suf = m[0], m[1:]
    if suf == "":
        return base + "'"
    if suf == "'":
        return base
    return m


def parse_sequence(text: str) -> List[str]:
    """Convierte una secuencia escrita como texto en una lista de cuartos de vuelta.

    La entrada debe separar movimientos por espacios. Los giros dobles se expanden
    en dos cuartos de vuelta:
        "R U2 R'" -> ["R", "U", "U", "R'"]

    Args:
        text: Secuencia de movimientos escrita como string.

    Returns:
        Lista de tokens normalizados, en el mismo orden.

    Raises:
        ValueError: Si algún token es inválido.
    """
    out: List[str] = []
    for t in text.split():
        tok = normalize_token(t)
        if tok.endswith("2"):
            out.extend([tok[0], tok[0]])
        elif tok:
            out.append(tok)
    return out
