# rubik_drag/app/turn_driver.py
from __future__ import annotations

import logging
import time
from typing import Callable, Optional

import numpy as np
from PySide6.QtCore import QObject, QTimer, Signal

from rubik_drag.config import FRAME_INTERVAL_MS, TurnSettings
from rubik_drag.core.cube_model import Cube
from rubik_drag.interaction.camera import Camera
from rubik_drag.interaction.hit import FaceletHit
from rubik_drag.interaction.turn_session import TurnPhase, TurnSession

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class TurnDriver(QObject):
    """Conecta una `TurnSession` con el loop de eventos de Qt.

    El widget que hace el picking llama a `press`, `drag` y `release` desde sus
    eventos de mouse; este objeto marca el tiempo de cada evento y, al soltar,
    avanza el snap con un `QTimer` (~60fps) hasta que el giro se aplica o se cancela.

    Signals:
        angle_changed(float): Ángulo visual (grados) de la capa en giro.
        move_committed(str, int): Movimiento aplicado al cubo y cuántas veces.
        turn_cancelled(): La sesión terminó sin modificar el cubo.
        state_changed(): El cubo cambió; la visualización debe resincronizarse.
    """

    angle_changed = Signal(float)
    move_committed = Signal(str, int)
    turn_cancelled = Signal()
    state_changed = Signal()

    def __init__(
        self,
        cube: Cube,
        camera: Camera,
        settings: Optional[TurnSettings] = None,
        clock: Optional[Clock] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        """Crea el driver y su timer de animación.

        Args:
            cube: Modelo lógico del cubo.
            camera: Cámara usada para interpretar los drags.
            settings: Parámetros de la sesión (por defecto los de `rubik_drag.config`).
            clock: Reloj en milisegundos (por defecto `time.monotonic`).
            parent: QObject padre, opcional.
        """
        super().__init__(parent)
        self._clock: Clock = clock or monotonic_ms

        self.session: TurnSession = TurnSession(
            cube,
            camera,
            settings=settings,
            on_angle=self.angle_changed.emit,
            on_commit=self._on_commit,
            on_cancel=self._on_cancel,
        )

        self._anim_timer: QTimer = QTimer(self)
        self._anim_timer.setInterval(FRAME_INTERVAL_MS)
        self._anim_timer.timeout.connect(self._on_anim_tick)

    @property
    def busy(self) -> bool:
        return self.session.active

    def set_cube_rotation(self, rotation: Optional[np.ndarray]) -> None:
        """Actualiza la rotación del cubo en la escena (rotación ambiental/idle)."""
        self.session.cube_rotation = rotation

    # --------------------------
    # Eventos del widget
    # --------------------------
    def press(self, hit: Optional[FaceletHit], x: float, y: float) -> bool:
        """Click en (x, y). Sin hit (fondo o plástico) no se arma nada.

        Returns:
            True si se empezó una sesión de giro.
        """
        if hit is None:
            return False
        return self.session.pointer_down(hit, x, y, self._clock())

    def drag(self, x: float, y: float) -> None:
        self.session.pointer_move(x, y, self._clock())

    def release(self) -> Optional[int]:
        """Suelta el puntero y arranca el snap si había dirección fija."""
        turns = self.session.pointer_up(self._clock())
        if self.session.phase is TurnPhase.RESOLVING:
            self._anim_timer.start()
        return turns

    def abort(self) -> None:
        """Cancela cualquier giro en curso (por ejemplo al resetear el cubo)."""
        self._anim_timer.stop()
        self.session.cancel()

    # --------------------------
    # Animación
    # --------------------------
    def _on_anim_tick(self) -> None:
        """Tick del timer: avanza el snap hasta completarlo."""
        if not self.session.tick(self._clock()):
            self._anim_timer.stop()

    def _on_commit(self, move: str, count: int) -> None:
        self.move_committed.emit(move, count)
        self.state_changed.emit()

    def _on_cancel(self) -> None:
        logger.debug("Turn cancelled")
        self.turn_cancelled.emit()
