"""Reading, printing and scanning square grids of integers."""

from collections.abc import Sequence


def parse_grid(text: str, rows: int = 6, cols: int = 6) -> list[list[int]]:
    """Read ``rows`` by ``cols`` whitespace-separated integers from ``text``."""
    if rows <= 0 or cols <= 0:
        raise ValueError("grid dimensions must be positive")
    tokens = text.split()
    needed = rows * cols
    if len(tokens) < needed:
        raise ValueError(f"expected {needed} values, got {len(tokens)}")
    values = [int(token) for token in tokens[:needed]]
    return [values[row * cols : (row + 1) * cols] for row in range(rows)]


def format_grid(grid: Sequence[Sequence[int]]) -> str:
    """Render ``grid`` one row per line, values separated by spaces."""
    return "".join(" ".join(map(str, row)) + "\n" for row in grid)


def max_hourglass_sum(grid: Sequence[Sequence[int]]) -> int:
    """Return the largest hourglass sum in ``grid``, never less than 0.

    An hourglass is a 3x3 block without the left and right cells of its
    middle row.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if rows < 3 or cols < 3:
        raise ValueError("grid must be at least 3 by 3")
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows must all have the same length")
    best = 0
    for top in range(rows - 2):
        for left in range(cols - 2):
            total = (
                sum(grid[top][left : left + 3])
                + grid[top + 1][left + 1]
                + sum(grid[top + 2][left : left + 3])
            )
            best = max(best, total)
    return best