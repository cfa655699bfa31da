from typing import List, Sequence

# Characters of the text encoding. The renderer writes them and the navigator
# reads them back as its collision map.
OPEN = " "
CLOSED = "_"
WALL = "|"


class RenderedBuffer:
    """
    Text form of a maze: one top border line followed by one line per grid row,
    each 2 * width + 1 characters wide.
    """

    __slots__ = ('lines', 'width', 'height')

    def __init__(self, lines: Sequence[str], width: int = None, height: int = None):
        self.lines: List[str] = list(lines)
        # Dimensions default to what the text itself implies.
        if width is None:
            width = (len(self.lines[0]) - 1) // 2 if self.lines else 0
        if height is None:
            height = len(self.lines) - 1
        self.width = width
        self.height = height

    @classmethod
    def from_text(cls, text: str) -> "RenderedBuffer":
        return cls(text.splitlines())

    @property
    def text(self) -> str:
        return "\n".join(self.lines) + "\n"

    def line(self, row: int) -> str:
        """Returns line 'row', raising IndexError if the buffer has no such line."""
        if 0 <= row < len(self.lines):
            return self.lines[row]
        raise IndexError(f"Line {row} not in buffer of {len(self.lines)} lines")

    def __len__(self) -> int:
        return len(self.lines)

    def __eq__(self, other) -> bool:
        if not isinstance(other, RenderedBuffer):
            return NotImplemented
        return (self.lines, self.width, self.height) == (other.lines, other.width, other.height)

    def __str__(self) -> str:
        return self.text
