class MazeError(Exception):
    """Base class for errors raised by text_maze."""


class BufferDesyncError(MazeError):
    """
    The cursor points at a line (or column) the rendered buffer does not have.
    The play session cannot continue and must be restarted.
    """

    def __init__(self, cursor, row: int):
        self.cursor = cursor
        self.row = row
        super().__init__(f"Buffer out of sync with cursor {tuple(cursor)}: no data at line {row}")


class SessionFormatError(MazeError, ValueError):
    """A saved session file does not start with a valid cursor line."""
