from typing import List, Optional, Tuple

from maze_runner.core.grid import Grid


def render_ascii(grid: Grid, player: Optional[Tuple[int, int]] = None) -> str:
    """
    Draws the maze with +---+ corners and | walls.
    S marks the entrance, E the exit, @ the player (drawn on top).
    """
    lines: List[str] = []
    for y in range(grid.height):
        top = ["+"]
        middle = []
        for x in range(grid.width):
            top.append("---+" if grid.has_wall(x, y, Grid.TOP) else "   +")
            if x == 0:
                middle.append("|" if grid.has_wall(x, y, Grid.LEFT) else " ")

            if player == (x, y):
                mark = "@"
            elif (x, y) == grid.entrance:
                mark = "S"
            elif (x, y) == grid.exit:
                mark = "E"
            else:
                mark = " "
            middle.append(f" {mark} ")
            middle.append("|" if grid.has_wall(x, y, Grid.RIGHT) else " ")
        lines.append("".join(top))
        lines.append("".join(middle))

    # Bottom edge
    bottom = ["+"]
    for x in range(grid.width):
        bottom.append("---+" if grid.has_wall(x, grid.height - 1, Grid.BOTTOM) else "   +")
    lines.append("".join(bottom))
    return "\n".join(lines)
