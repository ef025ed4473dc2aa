# rubik_drag/interaction/camera.py
from __future__ import annotations

import math
from typing import Protocol, Sequence, Tuple

import numpy as np

Vec2f = Tuple[float, float]


class Camera(Protocol):
    """Cualquier cosa capaz de proyectar un punto de la escena a la pantalla.

    `project` recibe un punto en coordenadas de escena (x=derecha, y=arriba,
    z=hacia el observador) y devuelve coordenadas normalizadas de dispositivo
    (NDC) con y hacia arriba.
    """

    def project(self, point: Sequence[float]) -> Vec2f:
        ...


def rot_x(angle_deg: float) -> np.ndarray:
    """Matriz de rotación alrededor de X (regla de la mano derecha)."""
    a = math.radians(angle_deg)
    c, s = math.cos(a), math.sin(a)
    return np.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])


def rot_y(angle_deg: float) -> np.ndarray:
    """Matriz de rotación alrededor de Y (regla de la mano derecha)."""
    a = math.radians(angle_deg)
    c, s = math.cos(a), math.sin(a)
    return np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])


class OrbitCamera:
    """Cámara orbital con perspectiva, equivalente a la del widget OpenGL.

    La vista es `translate(0, 0, -distance) · Rx(pitch) · Ry(yaw)` y la
    proyección es la de `gluPerspective(fov_y, aspect, ...)`.
    """

    def __init__(
        self,
        yaw: float = 35.0,
        pitch: float = -20.0,
        distance: float = 6.0,
        fov_y: float = 45.0,
        aspect: float = 1.0,
    ) -> None:
        if distance <= 0:
            raise ValueError("distance debe ser mayor que 0.")
        if aspect <= 0:
            raise ValueError("aspect debe ser mayor que 0.")
        self.yaw: float = yaw
        self.pitch: float = pitch
        self.distance: float = distance
        self.fov_y: float = fov_y
        self.aspect: float = aspect

    def view_rotation(self) -> np.ndarray:
        return rot_x(self.pitch) @ rot_y(self.yaw)

    def to_view(self, point: Sequence[float]) -> np.ndarray:
        """Lleva un punto de la escena al espacio de la cámara."""
        p = self.view_rotation() @ np.asarray(point, dtype=float)
        p[2] -= self.distance
        return p

    def project(self, point: Sequence[float]) -> Vec2f:
        """Proyecta un punto de la escena a NDC.

        Raises:
            ValueError: Si el punto queda detrás de la cámara.
        """
        x, y, z = self.to_view(point)
        if z >= -1e-6:
            raise ValueError(f"El punto {tuple(point)} está detrás de la cámara")

        f = 1.0 / math.tan(math.radians(self.fov_y) / 2.0)
        return (f / self.aspect * x / -z, f * y / -z)
