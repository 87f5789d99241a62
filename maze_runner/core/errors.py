class MazeError(Exception):
    """Base class for maze failures."""


class InvalidDimensions(MazeError):
    """Width or height is not an integer of at least 2 (or outside the UI range)."""


class InternalInconsistency(MazeError):
    """Backtracking stack ran dry before every cell was visited."""
