from array import array
from typing import Iterator, NamedTuple, Tuple

from maze_runner.core.errors import MazeError


class Cell(NamedTuple):
    x: int
    y: int
    top: bool
    right: bool
    bottom: bool
    left: bool


class Grid:
    # Bitmask Constants
    TOP    = 0b0001
    RIGHT  = 0b0010
    BOTTOM = 0b0100
    LEFT   = 0b1000

    # All walls present by default (T|R|B|L) = 15
    ALL_WALLS = TOP | RIGHT | BOTTOM | LEFT

    # Direction Helpers
    DX = {TOP: 0, BOTTOM: 0, RIGHT: 1, LEFT: -1}
    DY = {TOP: -1, BOTTOM: 1, RIGHT: 0, LEFT: 0}
    OPPOSITE = {TOP: BOTTOM, BOTTOM: TOP, RIGHT: LEFT, LEFT: RIGHT}

    __slots__ = ('width', 'height', 'cells', 'frozen')

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.frozen = False
        # using 'B' (unsigned char) -> 1 byte per cell
        self.cells = array('B', [self.ALL_WALLS] * (width * height))

    def __len__(self) -> int:
        return self.height

    def __getitem__(self, y: int) -> Tuple[Cell, ...]:
        """Row view, so ``grid[y][x]`` is the cell at column x, row y."""
        if not 0 <= y < self.height:
            raise IndexError(f"Row {y} out of bounds")
        return tuple(self.cell(x, y) for x in range(self.width))

    def __iter__(self) -> Iterator[Tuple[Cell, ...]]:
        for y in range(self.height):
            yield self[y]

    @property
    def entrance(self) -> Tuple[int, int]:
        return (0, 0)

    @property
    def exit(self) -> Tuple[int, int]:
        return (self.width - 1, self.height - 1)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_index(self, x: int, y: int) -> int:
        if self.in_bounds(x, y):
            return y * self.width + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def cell(self, x: int, y: int) -> Cell:
        val = self.cells[self.get_index(x, y)]
        return Cell(
            x, y,
            bool(val & self.TOP),
            bool(val & self.RIGHT),
            bool(val & self.BOTTOM),
            bool(val & self.LEFT),
        )

    def freeze(self):
        self.frozen = True
        # Callers keep read access to the raw bytes but cannot write through them
        self.cells = memoryview(self.cells).toreadonly()

    def _check_mutable(self):
        if self.frozen:
            raise MazeError("Maze is frozen; generate a new one instead of editing it")

    def carve_path(self, x1: int, y1: int, dir_bit: int):
        """
        Removes the wall between cell (x1,y1) and the neighbor in 'dir_bit'.
        Also removes the OPPOSITE wall from the neighbor.
        """
        self._check_mutable()
        x2 = x1 + self.DX[dir_bit]
        y2 = y1 + self.DY[dir_bit]
        if not self.in_bounds(x2, y2):
            raise IndexError(f"Cannot carve {x1},{y1} into the void")

        self.cells[y1 * self.width + x1] &= ~dir_bit
        self.cells[y2 * self.width + x2] &= ~self.OPPOSITE[dir_bit]

    def open_border(self, x: int, y: int, dir_bit: int):
        """Removes an outer wall, e.g. to punch the entrance or exit."""
        self._check_mutable()
        if self.in_bounds(x + self.DX[dir_bit], y + self.DY[dir_bit]):
            raise ValueError(f"Wall {dir_bit} of ({x}, {y}) is not on the border")
        self.cells[self.get_index(x, y)] &= ~dir_bit

    def has_wall(self, x: int, y: int, dir_bit: int) -> bool:
        return (self.cells[y * self.width + x] & dir_bit) != 0

    def get_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nx, ny, direction_to_neighbor) for all valid grid neighbors,
        in up/right/down/left order. Does NOT check walls.
        """
        if y > 0:
            yield (x, y - 1, self.TOP)
        if x < self.width - 1:
            yield (x + 1, y, self.RIGHT)
        if y < self.height - 1:
            yield (x, y + 1, self.BOTTOM)
        if x > 0:
            yield (x - 1, y, self.LEFT)

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nx, ny) for neighbors that are NOT blocked by a wall.
        """
        val = self.cells[y * self.width + x]

        if not (val & self.TOP) and y > 0:
            yield (x, y - 1)
        if not (val & self.RIGHT) and x < self.width - 1:
            yield (x + 1, y)
        if not (val & self.BOTTOM) and y < self.height - 1:
            yield (x, y + 1)
        if not (val & self.LEFT) and x > 0:
            yield (x - 1, y)

    def count_passages(self) -> int:
        """Number of removed internal walls (each shared edge counted once)."""
        count = 0
        for y in range(self.height):
            for x in range(self.width):
                val = self.cells[y * self.width + x]
                if x < self.width - 1 and not (val & self.RIGHT):
                    count += 1
                if y < self.height - 1 and not (val & self.BOTTOM):
                    count += 1
        return count
