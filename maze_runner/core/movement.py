from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from maze_runner.core.grid import Grid

Position = Tuple[int, int]


class Direction(Enum):
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"

    @property
    def wall(self) -> int:
        return _WALL_BITS[self]

    @property
    def wall_name(self) -> str:
        """Name of the matching Cell field, e.g. "top" for UP."""
        return _WALL_NAMES[self]

    @property
    def delta(self) -> Tuple[int, int]:
        return Grid.DX[self.wall], Grid.DY[self.wall]


_WALL_BITS = {
    Direction.UP: Grid.TOP,
    Direction.RIGHT: Grid.RIGHT,
    Direction.DOWN: Grid.BOTTOM,
    Direction.LEFT: Grid.LEFT,
}

_WALL_NAMES = {
    Direction.UP: "top",
    Direction.RIGHT: "right",
    Direction.DOWN: "bottom",
    Direction.LEFT: "left",
}


@dataclass(frozen=True)
class Blocked:
    moved = False


@dataclass(frozen=True)
class Moved:
    position: Position
    reached_goal: bool
    moved = True


BLOCKED = Blocked()

MoveResult = Union[Blocked, Moved]


def try_move(grid: Grid, position: Position, direction: Union[Direction, str]) -> MoveResult:
    """
    Resolves one step of the player through the maze.

    A step needs both an open wall flag on the current cell and an in-bounds
    neighbour; the entrance and exit have open outer walls, so the bounds
    check is what keeps the player inside. Hitting a wall returns BLOCKED.
    """
    direction = Direction(direction)
    x, y = position
    if not grid.in_bounds(x, y):
        return BLOCKED

    if grid.has_wall(x, y, direction.wall):
        return BLOCKED

    dx, dy = direction.delta
    nx, ny = x + dx, y + dy
    if not grid.in_bounds(nx, ny):
        return BLOCKED

    new_position = (nx, ny)
    return Moved(new_position, new_position == grid.exit)
