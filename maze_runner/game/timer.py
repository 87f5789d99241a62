import time
from typing import Callable, Optional


class GameTimer:
    """Whole-second stopwatch for a single run through the maze."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self.started_at: Optional[float] = None
        self.stopped_at: Optional[float] = None

    @property
    def running(self) -> bool:
        return self.started_at is not None and self.stopped_at is None

    def start(self):
        self.started_at = self.clock()
        self.stopped_at = None

    def stop(self):
        if self.running:
            self.stopped_at = self.clock()

    def reset(self):
        self.started_at = None
        self.stopped_at = None

    @property
    def elapsed_seconds(self) -> int:
        if self.started_at is None:
            return 0
        end = self.stopped_at if self.stopped_at is not None else self.clock()
        return int(end - self.started_at)
