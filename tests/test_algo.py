import random
import unittest
import sys
import os
from collections import deque
from unittest import mock

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_runner.algo.dfs import RecursiveBacktracker, generate
from maze_runner.core.errors import InternalInconsistency, InvalidDimensions, MazeError
from maze_runner.core.grid import Grid

SIZES = [(2, 2), (2, 7), (9, 2), (10, 10), (23, 17)]

def reachable_from_entrance(grid):
    seen = {(0, 0)}
    queue = deque([(0, 0)])
    while queue:
        x, y = queue.popleft()
        for n in grid.get_open_neighbors(x, y):
            if n not in seen:
                seen.add(n)
                queue.append(n)
    return seen

class TestGenerators(unittest.TestCase):
    def test_spanning_tree_edge_count(self):
        for w, h in SIZES:
            grid = generate(w, h, seed=7)
            self.assertEqual(grid.count_passages(), w * h - 1, f"{w}x{h} is not a spanning tree")

    def test_wall_symmetry(self):
        for w, h in SIZES:
            grid = generate(w, h, seed=3)
            for y in range(h):
                for x in range(w):
                    cell = grid[y][x]
                    if x < w - 1:
                        self.assertEqual(cell.right, grid[y][x + 1].left)
                    if y < h - 1:
                        self.assertEqual(cell.bottom, grid[y + 1][x].top)

    def test_connectivity(self):
        for w, h in SIZES:
            grid = generate(w, h, seed=11)
            self.assertEqual(len(reachable_from_entrance(grid)), w * h, "BFS should reach every cell")

    def test_outer_walls_closed_except_entrance_and_exit(self):
        w, h = 12, 8
        grid = generate(w, h, seed=5)
        self.assertFalse(grid[0][0].left)
        self.assertFalse(grid[h - 1][w - 1].right)

        for x in range(w):
            self.assertTrue(grid[0][x].top)
            self.assertTrue(grid[h - 1][x].bottom)
        for y in range(h):
            if y != 0:
                self.assertTrue(grid[y][0].left)
            if y != h - 1:
                self.assertTrue(grid[y][w - 1].right)

    def test_invalid_dimensions(self):
        for w, h in [(1, 5), (5, 1), (0, 0), (-3, 4), (2, 1)]:
            with self.assertRaises(InvalidDimensions):
                generate(w, h)

    def test_non_integer_dimensions(self):
        for w, h in [(2.0, 3), ("4", 4), (True, 3), (None, 2)]:
            with self.assertRaises(InvalidDimensions):
                generate(w, h)

    def test_invalid_dimensions_is_a_maze_error(self):
        self.assertTrue(issubclass(InvalidDimensions, MazeError))
        self.assertTrue(issubclass(InternalInconsistency, MazeError))

    def test_determinism(self):
        w, h = 10, 10
        grid1 = generate(w, h, seed=12345)

        rec = RecursiveBacktracker(w, h, seed=12345)
        for _ in rec.run(): pass

        self.assertEqual(grid1.cells.tobytes(), rec.grid.cells.tobytes())

    def test_injected_rng(self):
        grid1 = generate(15, 6, rng=random.Random(99))
        grid2 = generate(15, 6, rng=random.Random(99))
        self.assertEqual(grid1.cells.tobytes(), grid2.cells.tobytes())

    def test_first_choice_rng_carves_a_single_corridor(self):
        class FirstChoice:
            def choice(self, seq):
                return seq[0]

        # up/right/down/left order: from (0,0) right wins until the last column
        grid = generate(3, 2, rng=FirstChoice())
        self.assertFalse(grid[0][0].right)
        self.assertFalse(grid[0][1].right)
        self.assertFalse(grid[0][2].bottom)
        self.assertFalse(grid[1][2].left)
        self.assertFalse(grid[1][1].left)
        self.assertTrue(grid[0][0].bottom)

    def test_progress_and_done(self):
        rec = RecursiveBacktracker(20, 20, seed=1)
        updates = list(rec.run())
        self.assertEqual(updates[-1], "Done")
        self.assertEqual(rec.step_count, 20 * 20 - 1)
        self.assertGreater(len(updates), 1)

    def test_result_is_frozen(self):
        grid = generate(4, 4, seed=2)
        with self.assertRaises(MazeError):
            grid.carve_path(0, 0, Grid.RIGHT)

    def test_no_visited_state_on_result(self):
        grid = generate(4, 4, seed=2)
        self.assertFalse(hasattr(grid[0][0], "visited"))
        for val in grid.cells:
            self.assertEqual(val & ~Grid.ALL_WALLS, 0)

    def test_exhausted_stack_raises(self):
        # A grid whose cells report no neighbours can never be completed
        with mock.patch.object(Grid, "get_neighbors", return_value=()):
            with self.assertRaises(InternalInconsistency):
                generate(3, 3, seed=0)

    def test_large_grid_has_no_recursion_limit(self):
        w, h = 100, 100
        grid = generate(w, h, seed=42)
        self.assertEqual(grid.count_passages(), w * h - 1)

if __name__ == '__main__':
    unittest.main()
