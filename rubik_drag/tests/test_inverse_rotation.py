# rubik_drag/tests/test_inverse_rotation.py
import unittest

import numpy as np

from rubik_drag.core import Cube, CubeInvariantError
from rubik_drag.core.geometry import FACES, SOLVED_FACE_COLOR, rotation_matrix
from rubik_drag.core.inverse_rotation import face_grid, local_face, sticker_color


class TestInverseRotation(unittest.TestCase):
    def test_identity_keeps_faces(self):
        identity = np.identity(3, dtype=int)
        for face in FACES:
            self.assertEqual(local_face(identity, face), face)

    def test_local_face_after_z_turn(self):
        # Tras +90 sobre z, lo que se ve al frente es la cara local derecha
        r = rotation_matrix(2, 90)
        self.assertEqual(local_face(r, "front"), "right")
        self.assertEqual(local_face(r, "up"), "up")

    def test_local_face_rejects_garbage(self):
        with self.assertRaises(CubeInvariantError):
            local_face(np.zeros((3, 3), dtype=int), "front")

    def test_solved_faces_are_uniform(self):
        c = Cube()
        for face in FACES:
            grid = face_grid(c, face)
            self.assertEqual(len(grid), 3)
            for row in grid:
                self.assertEqual(row, [SOLVED_FACE_COLOR[face]] * 3)

    def test_U_moves_red_to_front_top_row(self):
        c = Cube()
        c.apply_move("U")
        grid = face_grid(c, "front")
        self.assertEqual(grid[0], ["red", "red", "red"])
        self.assertEqual(grid[1], ["green", "green", "green"])
        self.assertEqual(grid[2], ["green", "green", "green"])

    def test_R_moves_green_to_up_right_column(self):
        c = Cube()
        c.apply_move("R")
        grid = face_grid(c, "up")
        for row in grid:
            self.assertEqual(row, ["white", "white", "green"])

    def test_sticker_color_of_plastic_side(self):
        c = Cube()
        center = c.cubie_at((0, 1, 0))
        self.assertEqual(sticker_color(center, "front"), "green")
        self.assertIsNone(sticker_color(center, "up"))

    def test_missing_cubie_fails_loudly(self):
        c = Cube()
        c.cubie_at((1, 1, 1)).position = (0, 0, 0)
        with self.assertRaises(CubeInvariantError):
            face_grid(c, "front")


if __name__ == "__main__":
    unittest.main()
