# rubik_drag/tests/test_cube_model.py
import unittest

import numpy as np

from rubik_drag.core import Cube, CubeInvariantError
from rubik_drag.core.inverse_rotation import face_grid
from rubik_drag.core.move import ALL_MOVES, OUTER_MOVES, opposite_move

VALID = (-1, 0, 1)


class TestCubeModel(unittest.TestCase):
    def test_starts_solved(self):
        c = Cube()
        self.assertTrue(c.is_solved())
        self.assertEqual(len(c.cubies), 26)
        self.assertEqual(len(c.solved_state), 26)

    def test_cubie_kinds(self):
        c = Cube()
        kinds = [cubie.kind for cubie in c.cubies]
        self.assertEqual(kinds.count("corner"), 8)
        self.assertEqual(kinds.count("edge"), 12)
        self.assertEqual(kinds.count("center"), 6)
        for cubie in c.cubies:
            n = {"corner": 3, "edge": 2, "center": 1}[cubie.kind]
            self.assertEqual(len(cubie.face_colors), n)

    def test_U_then_Uprime_returns(self):
        c = Cube()
        before = c.to_hashable()
        c.apply_move("U")
        c.apply_move("U'")
        self.assertEqual(before, c.to_hashable())

    def test_every_move_then_inverse_returns(self):
        for move in ALL_MOVES:
            with self.subTest(move=move):
                c = Cube()
                c.scramble(10, seed=7)
                before = c.to_hashable()
                c.apply_move(move)
                self.assertNotEqual(before, c.to_hashable())
                c.apply_move(opposite_move(move))
                self.assertEqual(before, c.to_hashable())

    def test_four_quarter_turns_are_identity(self):
        for move in ALL_MOVES:
            with self.subTest(move=move):
                c = Cube()
                for _ in range(4):
                    c.apply_move(move)
                self.assertTrue(c.is_solved())

    def test_single_move_unsolves(self):
        for move in ALL_MOVES:
            with self.subTest(move=move):
                c = Cube()
                c.apply_move(move)
                self.assertFalse(c.is_solved())
                c.apply_move(opposite_move(move))
                self.assertTrue(c.is_solved())

    def test_U_R_Rprime_Uprime_is_solved(self):
        c = Cube()
        c.apply_sequence("U R R' U'")
        self.assertTrue(c.is_solved())

    def test_R2_equals_two_R(self):
        c1 = Cube()
        c2 = Cube()
        c1.apply_sequence("R2")
        c2.apply_move("R")
        c2.apply_move("R")
        self.assertEqual(c1.to_hashable(), c2.to_hashable())

    def test_apply_move_accepts_double_turns(self):
        c1 = Cube()
        c2 = Cube()
        c1.apply_move("R2")
        c1.apply_move("D2'")
        c2.apply_sequence("R R D D")
        self.assertEqual(c1.to_hashable(), c2.to_hashable())

        with self.assertRaises(ValueError):
            c1.apply_move("")

    def test_sexy_move_six_times_is_identity(self):
        c = Cube()
        for _ in range(6):
            c.apply_sequence("R U R' U'")
        self.assertTrue(c.is_solved())

    def test_invariants_after_random_sequence(self):
        c = Cube()
        rng = np.random.default_rng(1234)
        for _ in range(200):
            c.apply_move(ALL_MOVES[int(rng.integers(len(ALL_MOVES)))])

        positions = set()
        for cubie in c.cubies:
            self.assertTrue(all(v in VALID for v in cubie.position))
            self.assertNotEqual(cubie.position, (0, 0, 0))
            positions.add(cubie.position)

            r = cubie.orientation
            np.testing.assert_array_equal(r.T @ r, np.identity(3, dtype=int))
            self.assertAlmostEqual(float(np.linalg.det(r)), 1.0)
        self.assertEqual(len(positions), 26)

    def test_M_moves_up_center(self):
        c = Cube()
        c.apply_move("M")
        self.assertFalse(c.is_solved())
        # M mueve los centros: el centro de arriba pasa a otra cara
        up_center = next(cubie for cubie, ref in zip(c.cubies, c.solved_state)
                         if ref.position == (0, 0, 1))
        self.assertNotEqual(up_center.position, (0, 0, 1))

    def test_scramble_unsolves(self):
        c = Cube()
        moves = c.scramble(25)
        self.assertEqual(len(moves), 25)
        self.assertTrue(all(m in OUTER_MOVES for m in moves))
        self.assertFalse(c.is_solved())

    def test_scramble_with_seed_is_reproducible(self):
        c1 = Cube()
        c2 = Cube()
        self.assertEqual(c1.scramble(20, seed=3), c2.scramble(20, seed=3))
        self.assertEqual(c1.to_hashable(), c2.to_hashable())

    def test_scramble_rejects_non_positive(self):
        with self.assertRaises(ValueError):
            Cube().scramble(0)

    def test_reset(self):
        c = Cube()
        c.scramble(15, seed=5)
        c.reset()
        self.assertTrue(c.is_solved())

    def test_copy_is_independent(self):
        c = Cube()
        dup = c.copy()
        dup.apply_move("F")
        self.assertTrue(c.is_solved())
        self.assertFalse(dup.is_solved())

    def test_solved_state_is_never_mutated(self):
        c = Cube()
        before = [(ref.position, ref.orientation.tolist()) for ref in c.solved_state]
        c.scramble(30, seed=11)
        after = [(ref.position, ref.orientation.tolist()) for ref in c.solved_state]
        self.assertEqual(before, after)

    def test_layer_sizes(self):
        c = Cube()
        c.scramble(12, seed=2)
        for axis in range(3):
            self.assertEqual(len(c.layer_indices(axis, -1)), 9)
            self.assertEqual(len(c.layer_indices(axis, 0)), 8)
            self.assertEqual(len(c.layer_indices(axis, 1)), 9)

    def test_cubie_at(self):
        c = Cube()
        self.assertEqual(c.cubie_at((1, 1, 1)).position, (1, 1, 1))
        self.assertIsNone(c.cubie_at((0, 0, 0)))

    def test_color_counts_remain_constant(self):
        c = Cube()
        c.apply_sequence("R U R' U' L D L' D' U2 R2 M E S'")

        flat = []
        for face in ("left", "right", "back", "front", "down", "up"):
            for row in face_grid(c, face):
                flat.extend(row)

        # Cada color debe aparecer 9 veces
        for color in ["orange", "red", "blue", "green", "yellow", "white"]:
            self.assertEqual(flat.count(color), 9)

    def test_missing_cubie_fails_loudly(self):
        c = Cube()
        c.cubies.pop()
        with self.assertRaises(CubeInvariantError):
            c.apply_move("U")

    def test_corrupted_layer_fails_loudly(self):
        c = Cube()
        c.cubie_at((0, 0, 1)).position = (0, 0, -1)
        with self.assertRaises(CubeInvariantError):
            c.apply_move("U")

    def test_unknown_move(self):
        with self.assertRaises(ValueError):
            Cube().apply_move("X")


if __name__ == "__main__":
    unittest.main()
