from typing import Tuple

# Default maze size (cells)
DEFAULT_WIDTH = 15
DEFAULT_HEIGHT = 10

# Entrance and exit must be distinct cells
MIN_WIDTH = 2
MIN_HEIGHT = 2

SESSIONS_DIR = "savedsessions"
SAVE_INTERVAL_SECS = 15


def parse_size(size: str) -> Tuple[int, int]:
    """
    Parses a '<width> x <height>' string, e.g. "20 x 12".
    Raises ValueError on malformed input or sizes below the minimum.
    """
    parts = size.lower().split("x")
    if len(parts) != 2:
        raise ValueError(f"Expected '<width> x <height>', got {size!r}")

    try:
        width = int(parts[0].strip())
        height = int(parts[1].strip())
    except ValueError:
        raise ValueError(f"Maze size must be two integers, got {size!r}") from None

    if width < MIN_WIDTH or height < MIN_HEIGHT:
        raise ValueError(f"Maze size must be at least {MIN_WIDTH} x {MIN_HEIGHT}, got {width} x {height}")
    return width, height


def clamp_to_view(width: int, height: int, cols: int, rows: int) -> Tuple[int, int]:
    """Shrinks a maze size so its text fits a cols x rows character area."""
    if 2 * width >= cols:
        width = (cols - 2) // 2
    if height >= rows:
        height = rows - 2
    return max(width, MIN_WIDTH), max(height, MIN_HEIGHT)
