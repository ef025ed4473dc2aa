# rubik_drag/config.py
"""Constantes de interacción (drag, flick y snap) del cubo.

Son valores por defecto; cada sesión puede recibir su propio `TurnSettings`
(por ejemplo con `dataclasses.replace(DEFAULT_SETTINGS, drag_threshold_px=8)`).
Los ángulos se expresan en grados y los tiempos en milisegundos.
"""
from __future__ import annotations

from dataclasses import dataclass

# ---------------- Drag ----------------

# Píxeles que hay que arrastrar antes de fijar la dirección del giro (bajo = más sensible)
DRAG_THRESHOLD_PX: float = 2.0
# Píxeles de arrastre que equivalen a 90° (alto = menos sensible)
DRAG_SENSITIVITY_PX: float = 100.0
# Drags más cortos que esto no tienen dirección
DEGENERATE_DRAG_PX: float = 0.001
# Ejes proyectados más cortos que esto (en NDC) no se normalizan
DEGENERATE_AXIS: float = 0.0001

# ---------------- Flick ----------------

# Velocidad angular mínima (grados/ms) para considerar un flick
FLICK_VELOCITY_THRESHOLD: float = 0.5
# Cuánto proyecta la velocidad el ángulo final (ms)
FLICK_MOMENTUM_MS: float = 80.0
# Peso de la muestra nueva en el promedio exponencial de velocidad
VELOCITY_BLEND: float = 0.7
# Updates separados por más que esto se ignoran para la velocidad (frames atrasados)
STALE_GAP_MS: float = 100.0

# ---------------- Snap ----------------

SNAP_MS_PER_QUARTER: float = 250.0
SNAP_MIN_MS: float = 150.0
SNAP_MAX_MS: float = 500.0
# Si ya estamos a menos de esto del objetivo no se anima
SNAP_EPSILON_DEG: float = 0.5

# ~60fps, igual que el timer de animación del widget
FRAME_INTERVAL_MS: int = 16


@dataclass(frozen=True)
class TurnSettings:
    """Parámetros de una sesión de giro por drag."""

    drag_threshold_px: float = DRAG_THRESHOLD_PX
    drag_sensitivity_px: float = DRAG_SENSITIVITY_PX
    flick_velocity_threshold: float = FLICK_VELOCITY_THRESHOLD
    flick_momentum_ms: float = FLICK_MOMENTUM_MS
    velocity_blend: float = VELOCITY_BLEND
    stale_gap_ms: float = STALE_GAP_MS
    snap_ms_per_quarter: float = SNAP_MS_PER_QUARTER
    snap_min_ms: float = SNAP_MIN_MS
    snap_max_ms: float = SNAP_MAX_MS
    snap_epsilon_deg: float = SNAP_EPSILON_DEG

    def __post_init__(self) -> None:
        if self.drag_sensitivity_px <= 0:
            raise ValueError("drag_sensitivity_px debe ser mayor que 0.")
        if self.drag_threshold_px < 0:
            raise ValueError("drag_threshold_px no puede ser negativo.")
        if not 0.0 < self.velocity_blend <= 1.0:
            raise ValueError("velocity_blend debe estar en (0, 1].")
        if self.stale_gap_ms <= 0:
            raise ValueError("stale_gap_ms debe ser mayor que 0.")
        if self.snap_min_ms < 0 or self.snap_min_ms > self.snap_max_ms:
            raise ValueError("Se requiere 0 <= snap_min_ms <= snap_max_ms.")


DEFAULT_SETTINGS = TurnSettings()
