# rubik_drag/interaction/snap.py
from __future__ import annotations

import math

from rubik_drag.config import DEFAULT_SETTINGS, TurnSettings


def ease_out_cubic(t: float) -> float:
    return 1.0 - (1.0 - t) ** 3


def nearest_quarter_turns(angle: float) -> int:
    """Cantidad (con signo) de cuartos de vuelta más cercana a `angle` grados."""
    # Los empates (45°, 135°...) redondean hacia arriba
    return int(math.floor(angle / 90.0 + 0.5))


class SnapAnimation:
    """Interpolación del ángulo visual hasta el múltiplo de 90° elegido.

    Es puramente cosmética: el resultado lógico ya está decidido al crearla.
    Se avanza con un reloj externo (milisegundos) mediante `angle_at`.
    """

    def __init__(
        self,
        start_angle: float,
        target_angle: float,
        start_time: float,
        settings: TurnSettings = DEFAULT_SETTINGS,
    ) -> None:
        self.start_angle: float = start_angle
        self.target_angle: float = target_angle
        self.start_time: float = start_time

        diff = abs(target_angle - start_angle)
        if diff < settings.snap_epsilon_deg:
            self.duration: float = 0.0
        else:
            # Duración proporcional al ángulo que falta, acotada
            base = diff / 90.0 * settings.snap_ms_per_quarter
            self.duration = max(settings.snap_min_ms, min(settings.snap_max_ms, base))

    def progress(self, now: float) -> float:
        if self.duration <= 0:
            return 1.0
        return min(max((now - self.start_time) / self.duration, 0.0), 1.0)

    def angle_at(self, now: float) -> float:
        p = self.progress(now)
        if p >= 1.0:
            # Terminar exactamente en el objetivo
            return self.target_angle
        return self.start_angle + (self.target_angle - self.start_angle) * ease_out_cubic(p)

    def done(self, now: float) -> bool:
        return self.progress(now) >= 1.0
