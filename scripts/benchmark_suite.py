import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from text_maze.core.grid import Grid
from text_maze.algo.frontier import FrontierBacktracker
from text_maze.core.complexity import MazeStats
from text_maze.core.navigator import KEYS, cell_to_cursor, try_move
from text_maze.viz.text_renderer import render

def benchmark_size(width: int, height: int):
    print(f"\n--- Benchmarking {width}x{height} ({width*height:,} cells) ---")

    # 1. Generation
    grid = Grid(width, height)
    algo = FrontierBacktracker(grid, seed=42)

    gen_start = time.time()
    algo.run_all()
    gen_time = time.time() - gen_start
    print(f"Generation Time: {gen_time:.4f}s")
    print(f"Speed: {(width*height)/gen_time:,.0f} cells/sec")

    stats = MazeStats.calculate_stats(grid)
    print(f"Dead ends: {stats['dead_ends']} ({stats['dead_end_percent']:.1f}%)")

    # 2. Rendering
    render_start = time.time()
    buffer = render(grid)
    render_time = time.time() - render_start
    print(f"Render Time: {render_time:.4f}s ({len(buffer.text):,} chars)")

    # 3. Collision checks from every cell
    nav_start = time.time()
    checks = 0
    for y in range(height):
        for x in range(width):
            cursor = cell_to_cursor(x, y)
            for direction in KEYS.values():
                try_move(buffer, cursor, direction)
                checks += 1
    nav_time = time.time() - nav_start
    print(f"Move Checks: {checks:,} in {nav_time:.4f}s ({checks/nav_time:,.0f} checks/sec)")

def run_suite():
    sizes = [
        (15, 10),
        (100, 100),
        (500, 500),
        (1000, 1000),
    ]

    for w, h in sizes:
        benchmark_size(w, h)

if __name__ == "__main__":
    run_suite()
