from text_maze.core.grid import Grid

class MazeStats:
    @staticmethod
    def count_edges(grid: Grid) -> int:
        """
        Counts carved passages between two cells of the grid.
        Outer openings (the exit) are not edges.
        """
        edges = 0
        for y in range(grid.height):
            for x in range(grid.width):
                # Each passage is seen from both ends, count it from one.
                if y + 1 < grid.height and grid.is_open(x, y, Grid.SOUTH):
                    edges += 1
                # WEST leads to x+1 (see Grid.DX)
                if x + 1 < grid.width and grid.is_open(x, y, Grid.WEST):
                    edges += 1
        return edges

    @staticmethod
    def calculate_stats(grid: Grid):
        dead_ends = 0
        corridors = 0
        junctions = 0

        for y in range(grid.height):
            for x in range(grid.width):
                exits = sum(1 for _ in grid.get_open_neighbors(x, y))
                if exits == 1: dead_ends += 1
                elif exits == 2: corridors += 1
                elif exits >= 3: junctions += 1

        out_x, out_y = grid.exit
        total = grid.width * grid.height
        return {
            "edges": MazeStats.count_edges(grid),
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0,
            "exit_open": grid.is_open(out_x, out_y, Grid.SOUTH),
        }
