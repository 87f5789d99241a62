from dataclasses import dataclass, fields, replace
from typing import Optional

from maze_runner.core.errors import InvalidDimensions


def parse_dimension(value, minimum: int = 2, maximum: int = 100) -> int:
    """Validates a width/height typed by the user (int or digit string)."""
    if isinstance(value, bool):
        raise InvalidDimensions(f"Not a dimension: {value!r}")
    if isinstance(value, str):
        text = value.strip()
        if not (text.isascii() and text.isdigit()):
            raise InvalidDimensions(f"Not a whole number: {value!r}")
        value = int(text)
    if not isinstance(value, int):
        raise InvalidDimensions(f"Not a whole number: {value!r}")
    if not minimum <= value <= maximum:
        raise InvalidDimensions(f"Dimension {value} outside {minimum}..{maximum}")
    return value


@dataclass(frozen=True)
class GameConfig:
    width: int = 20
    height: int = 15

    # Range accepted from user input; generation itself only needs >= 2
    min_dimension: int = 2
    max_dimension: int = 100

    # Controls
    move_interval_ms: int = 200
    drag_threshold: int = 25

    # Window
    screen_width: int = 1280
    screen_height: int = 720
    fps: int = 60

    seed: Optional[int] = None
    record: bool = False

    @classmethod
    def from_args(cls, args) -> "GameConfig":
        """
        Overlay any matching, non-None argparse values onto the defaults.
        Width and height arrive as text and are validated here.
        """
        overrides = {}
        for f in fields(cls):
            value = getattr(args, f.name, None)
            if value is not None:
                overrides[f.name] = value
        config = replace(cls(), **overrides)
        return replace(
            config,
            width=parse_dimension(config.width, config.min_dimension, config.max_dimension),
            height=parse_dimension(config.height, config.min_dimension, config.max_dimension),
        )
