"""Custom exception hierarchy for puzzle construction and generation."""


class HexClueError(Exception):
    """Base exception for puzzle failures."""


class InvalidCoordinatesError(HexClueError, ValueError):
    """Raised when a cube coordinate triple does not sum to zero."""


class InsufficientRadiusError(HexClueError, ValueError):
    """Raised when a ring or hexagon is given a radius below one."""


class InsufficientLengthError(HexClueError, ValueError):
    """Raised when a segment is given a length below one."""


class OutOfBoundsError(HexClueError, ValueError):
    """Raised when a cell is placed outside the board boundary."""


class GenerationError(HexClueError):
    """Raised when generation exhausts its configured attempt budget."""
