from array import array
from typing import Iterator, Tuple

class Grid:
    # Bitmask Constants (set bit = passage open)
    NORTH = 0b0001
    SOUTH = 0b0010
    EAST  = 0b0100
    WEST  = 0b1000

    DIRECTIONS = (NORTH, SOUTH, EAST, WEST)

    # Direction Helpers
    # EAST steps towards x-1 and WEST towards x+1. The text renderer reads the
    # WEST bit as "open towards the next column", so both must change together.
    DX = {NORTH: 0, SOUTH: 0, EAST: -1, WEST: 1}
    DY = {NORTH: -1, SOUTH: 1, EAST: 0, WEST: 0}
    OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}

    __slots__ = ('width', 'height', 'cells')

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        # All cells start closed (value 0)
        # using 'B' (unsigned char) -> 1 byte per cell
        self.cells = array('B', [0] * (width * height))

    @property
    def entrance(self) -> Tuple[int, int]:
        return self.width // 2, 0

    @property
    def exit(self) -> Tuple[int, int]:
        return self.width // 2, self.height - 1

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> int:
        return self.cells[self.get_index(x, y)]

    def step(self, x: int, y: int, dir_bit: int) -> Tuple[int, int]:
        return x + self.DX[dir_bit], y + self.DY[dir_bit]

    def is_visited(self, x: int, y: int) -> bool:
        return self.cells[y * self.width + x] != 0

    def carve_path(self, x1: int, y1: int, dir_bit: int):
        """
        Opens the wall between cell (x1,y1) and its neighbor in 'dir_bit'.
        Also opens the OPPOSITE side of the neighbor.
        """
        x2, y2 = self.step(x1, y1, dir_bit)
        if not self.in_bounds(x2, y2):
            raise IndexError(f"Cannot carve from ({x1}, {y1}) out of the grid")

        self.cells[y1 * self.width + x1] |= dir_bit
        self.cells[y2 * self.width + x2] |= self.OPPOSITE[dir_bit]

    def open_side(self, x: int, y: int, dir_bit: int):
        """Opens one side of a single cell (used for the exit's outer wall)."""
        self.cells[self.get_index(x, y)] |= dir_bit

    def is_open(self, x: int, y: int, dir_bit: int) -> bool:
        return (self.cells[y * self.width + x] & dir_bit) != 0

    def get_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nx, ny, direction_to_neighbor) for all valid grid neighbors.
        Does NOT check walls.
        """
        for dir_bit in self.DIRECTIONS:
            nx, ny = self.step(x, y, dir_bit)
            if self.in_bounds(nx, ny):
                yield (nx, ny, dir_bit)

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nx, ny) for in-grid neighbors reachable through an open side.
        """
        val = self.cells[y * self.width + x]
        for dir_bit in self.DIRECTIONS:
            if val & dir_bit:
                nx, ny = self.step(x, y, dir_bit)
                if self.in_bounds(nx, ny):
                    yield (nx, ny)
