import random
from abc import ABC, abstractmethod
from typing import Iterator, Optional

from maze_runner.core.errors import InvalidDimensions
from maze_runner.core.grid import Grid


def validate_dimensions(width, height):
    for dim in (width, height):
        # bool is an int subclass but never a valid size
        if isinstance(dim, bool) or not isinstance(dim, int):
            raise InvalidDimensions(f"Dimensions must be integers, got {width!r}x{height!r}")
    if width < 2 or height < 2:
        raise InvalidDimensions(f"Invalid dimensions {width}x{height}: minimum size is 2x2")


class Generator(ABC):
    def __init__(self, width: int, height: int, seed: Optional[int] = None, rng=None):
        validate_dimensions(width, height)
        self.grid = Grid(width, height)
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on self.grid.
        """

    def run_all(self) -> Grid:
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
        return self.grid
