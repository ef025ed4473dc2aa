# rubik_drag/tests/test_turn_driver.py
import unittest

from PySide6.QtCore import QCoreApplication

from rubik_drag.app.turn_driver import TurnDriver
from rubik_drag.core import Cube
from rubik_drag.interaction.camera import OrbitCamera, rot_y
from rubik_drag.interaction.hit import FaceletHit
from rubik_drag.interaction.turn_session import TurnPhase


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class TestTurnDriver(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = QCoreApplication.instance() or QCoreApplication([])

    def setUp(self):
        self.cube = Cube()
        self.clock = FakeClock()
        self.driver = TurnDriver(self.cube, OrbitCamera(yaw=0.0, pitch=0.0), clock=self.clock)

        self.angles = []
        self.commits = []
        self.cancels = []
        self.changes = []
        self.driver.angle_changed.connect(self.angles.append)
        self.driver.move_committed.connect(lambda move, count: self.commits.append((move, count)))
        self.driver.turn_cancelled.connect(lambda: self.cancels.append(True))
        self.driver.state_changed.connect(lambda: self.changes.append(True))

        index = self.cube.cubies.index(self.cube.cubie_at((0, 1, 1)))
        self.hit = FaceletHit.from_face(self.cube, index, "front")

    def tearDown(self):
        self.driver.abort()

    def test_press_without_hit(self):
        self.assertFalse(self.driver.press(None, 0, 0))
        self.assertFalse(self.driver.busy)

    def test_drag_commits_through_timer(self):
        d = self.driver
        self.assertTrue(d.press(self.hit, 0, 0))
        self.clock.now = 1000.0
        d.drag(105.6, 0)
        self.assertAlmostEqual(self.angles[-1], 95.04)

        self.assertEqual(d.release(), 1)
        self.assertTrue(d._anim_timer.isActive())
        self.assertTrue(self.cube.is_solved())

        self.clock.now = 1200.0
        d._on_anim_tick()
        self.assertFalse(d._anim_timer.isActive())
        self.assertFalse(d.busy)
        self.assertEqual(self.commits, [("U'", 1)])
        self.assertEqual(self.changes, [True])
        self.assertEqual(self.angles[-1], 90.0)
        self.assertFalse(self.cube.is_solved())

    def test_rotated_cube(self):
        # Cubo girado -90° en la escena: se ve la cara derecha de frente
        rotation = rot_y(-90.0)
        self.driver.set_cube_rotation(rotation)
        self.assertIs(self.driver.session.cube_rotation, rotation)

        index = self.cube.cubies.index(self.cube.cubie_at((1, 0, 1)))
        hit = FaceletHit.from_face(self.cube, index, "right", rotation)

        d = self.driver
        d.press(hit, 0, 0)
        self.clock.now = 1000.0
        d.drag(105.6, 0)
        self.assertEqual(d.session.move, "U'")
        self.assertEqual(d.release(), 1)

        self.clock.now = 1200.0
        d._on_anim_tick()
        self.assertEqual(self.commits, [("U'", 1)])
        expected = Cube()
        expected.apply_move("U'")
        self.assertEqual(self.cube.to_hashable(), expected.to_hashable())

    def test_release_without_lock_cancels(self):
        d = self.driver
        d.press(self.hit, 0, 0)
        d.drag(1, 1)
        self.assertIsNone(d.release())
        self.assertFalse(d._anim_timer.isActive())
        self.assertEqual(self.cancels, [True])

    def test_abort_during_snap(self):
        d = self.driver
        d.press(self.hit, 0, 0)
        self.clock.now = 1000.0
        d.drag(105.6, 0)
        d.release()
        self.assertIs(d.session.phase, TurnPhase.RESOLVING)

        d.abort()
        self.assertFalse(d._anim_timer.isActive())
        self.assertFalse(d.busy)
        self.assertEqual(self.cancels, [True])
        self.assertEqual(self.commits, [])
        self.assertTrue(self.cube.is_solved())


if __name__ == "__main__":
    unittest.main()
