import random
from typing import Iterator, List, Tuple
from text_maze.core.grid import Grid
from text_maze.algo.base import Generator

class FrontierBacktracker(Generator):
    """
    Randomized backtracker driven by a stack of candidate walls.

    Growth starts from both a random cell and the entrance. Every cell carved
    before the exit is reached is remembered; once the exit opens, those cells
    are re-seeded in random order so the rest of the maze branches off the
    solution corridor instead of trailing behind it.
    """

    def run(self) -> Iterator[str]:
        rng = random.Random(self.seed)
        grid = self.grid
        width, height = grid.width, grid.height

        in_x, in_y = grid.entrance
        out_x, out_y = grid.exit

        # Stack of (x, y, direction)
        frontier: List[Tuple[int, int, int]] = []

        start_x, start_y = rng.randrange(width), rng.randrange(height)
        directions = list(Grid.DIRECTIONS)
        rng.shuffle(directions)
        for d in directions:
            frontier.append((start_x, start_y, d))
        for d in directions:
            frontier.append((in_x, in_y, d))

        path: List[Tuple[int, int]] = []
        recording = True

        while frontier:
            x, y, d = frontier.pop()
            nx, ny = grid.step(x, y, d)

            if not grid.in_bounds(nx, ny) or grid.is_visited(nx, ny):
                continue

            grid.carve_path(x, y, d)
            self.step_count += 1

            if recording:
                path.append((nx, ny))

            if (nx, ny) == (out_x, out_y):
                grid.open_side(nx, ny, Grid.SOUTH)
                recording = False
                rng.shuffle(path)
                for px, py in path:
                    self._push_cell(frontier, rng, px, py)
                path = []
                yield f"Exit reached after {self.step_count} carves"
                continue

            if width - 4 <= nx <= width - 2 and height - 4 <= ny <= height - 2:
                # Keep the cell's own walls queued below the entrance so the
                # redirect never strands a pocket of unvisited cells.
                self._push_cell(frontier, rng, nx, ny)
                nx, ny = in_x, in_y

            self._push_cell(frontier, rng, nx, ny)

            if self.step_count % 100 == 0:
                yield f"Carving... Frontier: {len(frontier)}"

        yield "Done"

    @staticmethod
    def _push_cell(frontier, rng, x, y):
        directions = list(Grid.DIRECTIONS)
        rng.shuffle(directions)
        for d in directions:
            frontier.append((x, y, d))


def generate(width: int, height: int, seed: int = None) -> Grid:
    """Builds a complete perfect maze of width x height cells."""
    grid = Grid(width, height)
    return FrontierBacktracker(grid, seed=seed).run_all()
