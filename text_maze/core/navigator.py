"""
Collision checks over a rendered maze.

The cursor lives in text coordinates: column 2x+1 of line y+1 is the floor of
grid cell (x, y), column 2x+2 its boundary with the next cell, and line 0 is the
top border holding the entrance gap. Walls are read from the text only.
"""
import logging
from typing import Callable, Dict, NamedTuple, Optional

from text_maze.core.buffer import CLOSED, WALL, RenderedBuffer
from text_maze.core.errors import BufferDesyncError

logger = logging.getLogger(__name__)


class Cursor(NamedTuple):
    col: int
    row: int


def cell_to_cursor(x: int, y: int) -> Cursor:
    return Cursor(2 * x + 1, y + 1)


def cursor_to_cell(cursor: Cursor) -> Optional[tuple]:
    """Grid cell under the cursor, or None when it sits on a boundary or the border."""
    col, row = cursor
    if row < 1 or col % 2 == 0:
        return None
    return (col - 1) // 2, row - 1


def entrance_cursor(buffer: RenderedBuffer) -> Cursor:
    """Starting position: inside the entrance gap, right above the entrance cell."""
    return Cursor(2 * (buffer.width // 2) + 1, 0)


def exit_cursor(buffer: RenderedBuffer) -> Cursor:
    return cell_to_cursor(buffer.width // 2, buffer.height - 1)


def at_exit(buffer: RenderedBuffer, cursor: Cursor) -> bool:
    return tuple(cursor) == tuple(exit_cursor(buffer))


def _char_at(buffer: RenderedBuffer, cursor: Cursor, col: int, row: int) -> str:
    try:
        line = buffer.line(row)
    except IndexError:
        line = None
    if line is None or not 0 <= col < len(line):
        logger.error("Failed to read maze at (%d,%d) for cursor %s", col, row, tuple(cursor))
        raise BufferDesyncError(cursor, row)
    return line[col]


def try_move_down(buffer: RenderedBuffer, cursor: Cursor) -> Optional[Cursor]:
    col, row = cursor
    # Floor under the cursor
    if _char_at(buffer, cursor, col, row) == CLOSED:
        return None
    if row + 1 > buffer.height:
        return None
    if _char_at(buffer, cursor, col, row + 1) == WALL:
        return None
    return Cursor(col, row + 1)


def try_move_up(buffer: RenderedBuffer, cursor: Cursor) -> Optional[Cursor]:
    col, row = cursor
    if row - 1 < 0:
        return None
    if _char_at(buffer, cursor, col, row - 1) in (CLOSED, WALL):
        return None
    return Cursor(col, row - 1)


def _sideways(buffer: RenderedBuffer, cursor: Cursor, step: int) -> Optional[Cursor]:
    col, row = cursor
    target = col + step
    if target < 0 or target > 2 * buffer.width - 1:
        return None
    ch = _char_at(buffer, cursor, target, row)
    # On the border line only the entrance gap is walkable
    if ch == WALL or (row == 0 and ch == CLOSED):
        return None
    return Cursor(target, row)


def try_move_right(buffer: RenderedBuffer, cursor: Cursor) -> Optional[Cursor]:
    return _sideways(buffer, cursor, 1)


def try_move_left(buffer: RenderedBuffer, cursor: Cursor) -> Optional[Cursor]:
    return _sideways(buffer, cursor, -1)


MOVES: Dict[str, Callable[[RenderedBuffer, Cursor], Optional[Cursor]]] = {
    "up": try_move_up,
    "down": try_move_down,
    "left": try_move_left,
    "right": try_move_right,
}

# Single-letter aliases used by the command line
KEYS = {"U": "up", "D": "down", "L": "left", "R": "right"}


def try_move(buffer: RenderedBuffer, cursor: Cursor, direction: str) -> Optional[Cursor]:
    """
    Returns the new cursor, or None if a wall blocks the move.
    Raises BufferDesyncError when the buffer lacks the data the cursor points at.
    """
    try:
        move = MOVES[direction]
    except KeyError:
        raise ValueError(f"Unknown direction {direction!r}") from None
    return move(buffer, Cursor(*cursor))
