from rubik_drag.interaction.camera import Camera, OrbitCamera
from rubik_drag.interaction.drag_interpreter import DragResult, interpret_drag
from rubik_drag.interaction.hit import FaceletHit
from rubik_drag.interaction.turn_session import TurnPhase, TurnSession

__all__ = [
    "Camera",
    "DragResult",
    "FaceletHit",
    "OrbitCamera",
    "TurnPhase",
    "TurnSession",
    "interpret_drag",
]
