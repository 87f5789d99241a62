import logging
from typing import Iterator, List, Optional, Tuple

from maze_runner.algo.base import Generator
from maze_runner.core.errors import InternalInconsistency
from maze_runner.core.grid import Grid

logger = logging.getLogger(__name__)


class RecursiveBacktracker(Generator):
    """
    Randomized depth-first backtracker with an explicit stack.

    Produces a perfect maze: every cell reachable, no loops. The entrance is
    the left wall of (0,0) and the exit the right wall of (width-1, height-1).
    """

    def run(self) -> Iterator[str]:
        grid = self.grid
        width, height = grid.width, grid.height
        total = width * height

        # Scratch state for this run only, never stored on the grid
        visited = bytearray(total)

        current = (0, 0)
        visited[0] = 1
        visited_count = 1
        stack: List[Tuple[int, int]] = [current]

        while visited_count < total:
            cx, cy = current

            neighbors = [
                (nx, ny, dir_bit)
                for nx, ny, dir_bit in grid.get_neighbors(cx, cy)
                if not visited[ny * width + nx]
            ]

            if neighbors:
                nx, ny, dir_bit = self.rng.choice(neighbors)
                stack.append(current)

                # Carve
                grid.carve_path(cx, cy, dir_bit)
                visited[ny * width + nx] = 1
                visited_count += 1
                current = (nx, ny)

                self.step_count += 1
                if self.step_count % 100 == 0:
                    yield f"Carving... Stack: {len(stack)}"
            elif stack:
                # Backtrack
                current = stack.pop()
            else:
                raise InternalInconsistency(
                    f"Stack exhausted with {visited_count}/{total} cells visited"
                )

        grid.open_border(0, 0, Grid.LEFT)
        grid.open_border(width - 1, height - 1, Grid.RIGHT)
        grid.freeze()

        logger.debug(f"Generated {width}x{height} maze with {grid.count_passages()} passages")
        yield "Done"


def generate(width: int, height: int, seed: Optional[int] = None, rng=None) -> Grid:
    """Builds a new perfect maze. ``rng`` may be any object with a ``choice`` method."""
    return RecursiveBacktracker(width, height, seed=seed, rng=rng).run_all()
