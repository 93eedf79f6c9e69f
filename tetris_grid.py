"""Grid helpers: validity check, stamp, line clear, landing row"""
from typing import List, Tuple
from tetris_shapes import Shape, cells

COLS, ROWS = 10, 20
EMPTY = 0

# ROWS x COLS, each cell EMPTY or a Kind value 1-7
Grid = Tuple[Tuple[int, ...], ...]


def empty_row() -> Tuple[int, ...]:
    return (EMPTY,) * COLS


def empty_grid() -> Grid:
    return tuple(empty_row() for _ in range(ROWS))


def is_valid_position(grid: Grid, shape: Shape, x: int, y: int) -> bool:
    """True if every occupied cell of shape at origin (x, y) is inside the
    side walls, above the floor and, for rows >= 0, on an empty cell.
    Rows above the top are allowed so pieces can enter from outside."""
    height, width = len(grid), len(grid[0])
    for cx, cy in cells(shape):
        bx, by = x + cx, y + cy
        if bx < 0 or bx >= width or by >= height:
            return False
        if by >= 0 and grid[by][bx] != EMPTY:
            return False
    return True


def stamp(grid: Grid, shape: Shape, x: int, y: int, tag: int) -> Grid:
    """Return a new grid with the shape written in as tag. Out-of-bounds cells are skipped."""
    height, width = len(grid), len(grid[0])
    rows: List[List[int]] = [list(r) for r in grid]
    for cx, cy in cells(shape):
        bx, by = x + cx, y + cy
        if 0 <= by < height and 0 <= bx < width:
            rows[by][bx] = int(tag)
    return tuple(tuple(r) for r in rows)


def full_rows(grid: Grid) -> List[int]:
    return [y for y, row in enumerate(grid) if all(v != EMPTY for v in row)]


def clear_lines(grid: Grid) -> Tuple[Grid, List[int]]:
    """Drop complete rows and pad the top with empty ones.

    Returns (new_grid, cleared_row_indices) with indices taken top to bottom
    from the grid before the clear.
    """
    cleared = full_rows(grid)
    if not cleared:
        return grid, cleared
    width = len(grid[0])
    kept = [row for y, row in enumerate(grid) if y not in cleared]
    padding = [(EMPTY,) * width for _ in cleared]
    return tuple(padding + kept), cleared


def landing_row(grid: Grid, shape: Shape, x: int, y: int) -> int:
    """Lowest row the shape can reach by falling straight down from (x, y)."""
    while is_valid_position(grid, shape, x, y + 1):
        y += 1
    return y
