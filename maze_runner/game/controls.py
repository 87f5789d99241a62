from typing import Optional

import pygame

from maze_runner.core.movement import Direction

DRAG_ACTIVE_THRESHOLD = 25

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


def direction_for_key(key: int) -> Optional[Direction]:
    return KEY_DIRECTIONS.get(key)


def drag_direction(dx: float, dy: float, threshold: float = DRAG_ACTIVE_THRESHOLD) -> Optional[Direction]:
    """
    Turns a drag offset (screen pixels, y growing downwards) into a direction.
    Returns None until the drag travels at least `threshold` along one axis.
    """
    abs_dx, abs_dy = abs(dx), abs(dy)
    if max(abs_dx, abs_dy) < threshold:
        return None
    if abs_dy > abs_dx:
        return Direction.DOWN if dy > 0 else Direction.UP
    return Direction.RIGHT if dx > 0 else Direction.LEFT
