import logging
import random
import time
from enum import Enum
from typing import Optional

from maze_runner.algo.dfs import generate
from maze_runner.config import GameConfig, parse_dimension
from maze_runner.core.errors import MazeError
from maze_runner.core.grid import Grid
from maze_runner.core.movement import BLOCKED, Direction, MoveResult, Position, try_move
from maze_runner.game.timer import GameTimer

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    GENERATING = "generating"
    READY = "ready"
    PLAYING = "playing"
    WON = "won"
    ERROR = "error"


class GameSession:
    """
    One game: the current maze, the player's position and the run timer.

    The session is the only owner of the position; every move goes through
    `move`, which also performs the win check.
    """

    def __init__(self, config: GameConfig = None, rng=None, clock=time.monotonic):
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.timer = GameTimer(clock)
        self.grid: Optional[Grid] = None
        # Last requested size; regeneration without arguments reuses it
        self.width = self.config.width
        self.height = self.config.height
        self.position: Position = (0, 0)
        self.status = GameStatus.GENERATING

    @property
    def entrance(self) -> Position:
        return (0, 0)

    @property
    def exit(self) -> Optional[Position]:
        if self.grid is None:
            return None
        return self.grid.exit

    @property
    def elapsed_seconds(self) -> int:
        return self.timer.elapsed_seconds

    def new_maze(self, width=None, height=None) -> Grid:
        """Replaces the current maze with a freshly generated one."""
        width = self.width if width is None else width
        height = self.height if height is None else height

        self.timer.reset()
        self.status = GameStatus.GENERATING
        self.grid = None
        try:
            w = parse_dimension(width, self.config.min_dimension, self.config.max_dimension)
            h = parse_dimension(height, self.config.min_dimension, self.config.max_dimension)
            self.width, self.height = w, h
            logger.info(f"Generating {w}x{h} maze...")
            grid = generate(w, h, rng=self.rng)
        except MazeError as e:
            logger.error(f"Maze generation failed: {e}")
            self.status = GameStatus.ERROR
            raise

        self.grid = grid
        self.position = self.entrance
        self.status = GameStatus.READY
        return grid

    def move(self, direction) -> MoveResult:
        if self.grid is None or self.status not in (GameStatus.READY, GameStatus.PLAYING):
            return BLOCKED

        if self.status is GameStatus.READY:
            self.status = GameStatus.PLAYING
            self.timer.start()

        result = try_move(self.grid, self.position, Direction(direction))
        if result.moved:
            self.position = result.position
            if result.reached_goal:
                self.timer.stop()
                self.status = GameStatus.WON
                logger.info(f"Maze solved in {self.elapsed_seconds}s")
        return result


class MoveRepeater:
    """
    Keeps moving in one direction while a drag is held.

    Each due tick issues exactly one move; the first Blocked result ends the
    repetition. Times are in milliseconds from any monotonic source.
    """

    def __init__(self, session: GameSession, interval_ms: int = 200):
        self.session = session
        self.interval_ms = interval_ms
        self.direction: Optional[Direction] = None
        self.next_due: Optional[float] = None

    @property
    def active(self) -> bool:
        return self.direction is not None

    def start(self, direction, now_ms: float):
        direction = Direction(direction)
        if self.direction is direction:
            return
        self.stop()

        # One immediate step; only repeat if it went through
        result = self.session.move(direction)
        if not result.moved or self.session.status is not GameStatus.PLAYING:
            return
        self.direction = direction
        self.next_due = now_ms + self.interval_ms

    def stop(self):
        self.direction = None
        self.next_due = None

    def tick(self, now_ms: float):
        if not self.active or now_ms < self.next_due:
            return
        result = self.session.move(self.direction)
        if not result.moved or self.session.status is not GameStatus.PLAYING:
            self.stop()
            return
        # Next step is one interval after this one; missed intervals are dropped
        self.next_due = now_ms + self.interval_ms
