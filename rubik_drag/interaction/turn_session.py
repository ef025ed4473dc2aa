# rubik_drag/interaction/turn_session.py
from __future__ import annotations

import enum
import logging
from typing import Callable, List, Optional

import numpy as np

from rubik_drag.config import DEFAULT_SETTINGS, TurnSettings
from rubik_drag.core.cube_model import Cube
from rubik_drag.core.move import opposite_move
from rubik_drag.interaction.camera import Camera
from rubik_drag.interaction.drag_interpreter import DragResult, drag_to_angle, interpret_drag
from rubik_drag.interaction.hit import FaceletHit
from rubik_drag.interaction.snap import SnapAnimation, nearest_quarter_turns

logger = logging.getLogger(__name__)

AngleCallback = Callable[[float], None]
CommitCallback = Callable[[str, int], None]
CancelCallback = Callable[[], None]


class TurnPhase(enum.Enum):
    IDLE = "idle"
    ARMED = "armed"          # click sobre un sticker, dirección sin fijar
    LOCKED = "locked"        # dirección fija, el ángulo sigue al drag
    RESOLVING = "resolving"  # soltado, animando hasta el múltiplo de 90°


class TurnSession:
    """Máquina de estados de un giro por drag (click -> drag -> soltar).

    Flujo:
        IDLE --pointer_down--> ARMED --drag > umbral--> LOCKED --pointer_up--> RESOLVING
        RESOLVING --tick (fin del snap)--> IDLE (aplica el movimiento)
        ARMED --pointer_up--> IDLE (sin efecto)
        cualquier fase --cancel--> IDLE (sin efecto)

    El intérprete de drag se consulta una sola vez por gesto; después la dirección
    queda fija. El cubo lógico solo se modifica al terminar el snap, nunca mientras
    el ángulo visual se está animando. Los tiempos son milisegundos de un reloj
    externo (el que da los frames).

    Para la visualización se exponen `angle`, `axis` y `affected` (índices de los
    cubies que se están girando).
    """

    def __init__(
        self,
        cube: Cube,
        camera: Camera,
        settings: Optional[TurnSettings] = None,
        cube_rotation: Optional[np.ndarray] = None,
        on_angle: Optional[AngleCallback] = None,
        on_commit: Optional[CommitCallback] = None,
        on_cancel: Optional[CancelCallback] = None,
    ) -> None:
        self.cube: Cube = cube
        self.camera: Camera = camera
        self.settings: TurnSettings = settings or DEFAULT_SETTINGS
        self.cube_rotation: Optional[np.ndarray] = cube_rotation

        self.on_angle = on_angle
        self.on_commit = on_commit
        self.on_cancel = on_cancel

        self._reset()

    # --------------------------
    # Estado expuesto
    # --------------------------
    @property
    def phase(self) -> TurnPhase:
        return self._phase

    @property
    def active(self) -> bool:
        return self._phase is not TurnPhase.IDLE

    @property
    def angle(self) -> float:
        """Ángulo visual actual (grados, positivo alrededor del eje de escena)."""
        return self._angle

    @property
    def velocity(self) -> float:
        """Velocidad angular suavizada (grados/ms)."""
        return self._velocity

    @property
    def result(self) -> Optional[DragResult]:
        return self._result

    @property
    def axis(self) -> Optional[int]:
        return self._result.axis if self._result else None

    @property
    def layer(self) -> Optional[int]:
        return self._result.layer if self._result else None

    @property
    def move(self) -> Optional[str]:
        return self._result.move if self._result else None

    @property
    def clockwise(self) -> Optional[bool]:
        return self._result.clockwise if self._result else None

    @property
    def affected(self) -> List[int]:
        return list(self._affected)

    @property
    def quarter_turns(self) -> Optional[int]:
        """Cuartos de vuelta decididos al soltar (None antes de soltar)."""
        return self._quarter_turns

    # --------------------------
    # Eventos
    # --------------------------
    def pointer_down(self, hit: FaceletHit, x: float, y: float, now: float) -> bool:
        """Click sobre un sticker. Se ignora si ya hay una sesión en curso.

        Returns:
            True si la sesión quedó armada.
        """
        if self._phase is not TurnPhase.IDLE:
            return False

        self._hit = hit
        self._origin = np.array([x, y], dtype=float)
        self._last_angle = 0.0
        self._last_time = now
        self._velocity = 0.0
        self._phase = TurnPhase.ARMED
        return True

    def pointer_move(self, x: float, y: float, now: float) -> None:
        """Movimiento del puntero durante el drag."""
        if self._phase is TurnPhase.ARMED:
            self._try_lock(x, y)

        if self._phase is TurnPhase.LOCKED and self._result is not None:
            self._track_angle(self._result, x, y, now)

    def pointer_up(self, now: float) -> Optional[int]:
        """Suelta el puntero: cancela o empieza el snap al múltiplo de 90° más cercano.

        Returns:
            Cuartos de vuelta (con signo visual) si había dirección fija; None si se canceló.
        """
        if self._phase is TurnPhase.ARMED:
            self.cancel()
            return None
        if self._phase is not TurnPhase.LOCKED:
            return None

        projected = self._angle
        if abs(self._velocity) > self.settings.flick_velocity_threshold:
            projected = self._angle + self._velocity * self.settings.flick_momentum_ms

        self._quarter_turns = nearest_quarter_turns(projected)
        target = self._quarter_turns * 90.0
        self._snap = SnapAnimation(self._angle, target, now, self.settings)
        self._phase = TurnPhase.RESOLVING

        logger.debug(
            "Release: angle=%.1f velocity=%.3f projected=%.1f -> %d quarter turns",
            self._angle, self._velocity, projected, self._quarter_turns,
        )
        return self._quarter_turns

    def tick(self, now: float) -> bool:
        """Avanza la animación de snap (un frame).

        Returns:
            True si la sesión sigue activa después de este frame.
        """
        snap, result, turns = self._snap, self._result, self._quarter_turns
        if self._phase is not TurnPhase.RESOLVING or snap is None or result is None or turns is None:
            return self.active

        self._set_angle(snap.angle_at(now))
        if snap.done(now):
            self._complete(result, turns)
        return self.active

    def cancel(self) -> bool:
        """Descarta la sesión sin tocar el cubo.

        Returns:
            True si había una sesión que cancelar.
        """
        if self._phase is TurnPhase.IDLE:
            return False

        logger.debug("Turn cancelled in phase %s", self._phase.value)
        self._reset()
        if self.on_cancel is not None:
            self.on_cancel()
        return True

    # --------------------------
    # Internos
    # --------------------------
    def _reset(self) -> None:
        self._phase: TurnPhase = TurnPhase.IDLE
        self._hit: Optional[FaceletHit] = None
        self._origin: np.ndarray = np.zeros(2)
        self._lock_dir: np.ndarray = np.zeros(2)
        self._result: Optional[DragResult] = None
        self._affected: List[int] = []
        self._angle: float = 0.0
        self._last_angle: float = 0.0
        self._last_time: float = 0.0
        self._velocity: float = 0.0
        self._snap: Optional[SnapAnimation] = None
        self._quarter_turns: Optional[int] = None

    def _try_lock(self, x: float, y: float) -> None:
        delta = np.array([x, y], dtype=float) - self._origin
        distance = float(np.linalg.norm(delta))
        if distance <= self.settings.drag_threshold_px or self._hit is None:
            return

        result = interpret_drag(
            self._hit.face_normal,
            self._hit.position,
            delta,
            self.camera,
            self.cube_rotation,
        )
        if result is None:
            return

        self._result = result
        self._lock_dir = delta / distance
        self._affected = self.cube.layer_indices(result.axis, result.layer)
        self._phase = TurnPhase.LOCKED
        logger.debug("Locked: axis=%s layer=%s move=%s", result.axis, result.layer, result.move)

    def _track_angle(self, result: DragResult, x: float, y: float, now: float) -> None:
        delta = np.array([x, y], dtype=float) - self._origin
        # Distancia con signo sobre la dirección con la que se fijó el giro
        signed_distance = float(delta @ self._lock_dir)
        sign = 1.0 if result.clockwise else -1.0
        angle = drag_to_angle(signed_distance, self.settings.drag_sensitivity_px) * sign

        dt = now - self._last_time
        if 0 < dt < self.settings.stale_gap_ms:
            instant = (angle - self._last_angle) / dt
            blend = self.settings.velocity_blend
            self._velocity = self._velocity * (1.0 - blend) + instant * blend
        self._last_angle = angle
        self._last_time = now

        self._set_angle(angle)

    def _set_angle(self, angle: float) -> None:
        self._angle = angle
        if self.on_angle is not None:
            self.on_angle(angle)

    def _complete(self, result: DragResult, n: int) -> None:
        sign = 1 if result.clockwise else -1
        move = result.move if n * sign > 0 else opposite_move(result.move)
        count = abs(n)

        for _ in range(count):
            self.cube.apply_move(move)

        self._reset()

        if count > 0:
            logger.debug("Committed %s x%d", move, count)
            if self.on_commit is not None:
                self.on_commit(move, count)
        elif self.on_cancel is not None:
            self.on_cancel()
