from text_maze.core.grid import Grid
from text_maze.core.buffer import CLOSED, OPEN, WALL, RenderedBuffer

class TextRenderer:
    """
    Draws a grid as text, two characters per cell.

    Each cell contributes its floor character (open if the SOUTH side is open)
    and the character on its boundary with the next column: a vertical wall
    when there is no passage, otherwise floor, open only when one of the two
    cells lets you go further down.
    """

    @staticmethod
    def top_border(width: int) -> str:
        # One underscore stays above each vertical bar, the entrance gap
        # is cut out around the middle column.
        line = " " + CLOSED * (width * 2 - 1)
        return line[:width] + OPEN * 2 + line[width + 1:]

    @staticmethod
    def row(grid: Grid, y: int) -> str:
        chars = [WALL]
        for x in range(grid.width):
            cell = grid.cells[y * grid.width + x]
            chars.append(OPEN if cell & Grid.SOUTH else CLOSED)

            if cell & Grid.WEST:
                # Passage towards x+1 (see Grid.DX)
                joined = cell
                if x + 1 < grid.width:
                    joined |= grid.cells[y * grid.width + x + 1]
                chars.append(OPEN if joined & Grid.SOUTH else CLOSED)
            else:
                chars.append(WALL)
        return "".join(chars)

    @classmethod
    def render(cls, grid: Grid) -> RenderedBuffer:
        lines = [cls.top_border(grid.width)]
        for y in range(grid.height):
            lines.append(cls.row(grid, y))
        return RenderedBuffer(lines, grid.width, grid.height)


def render(grid: Grid) -> RenderedBuffer:
    return TextRenderer.render(grid)
