"""The grid of cells that mazes are drawn on and searched through."""

from __future__ import annotations

import enum
from typing import Iterator

Cell = tuple[int, int]
Rect = tuple[int, int, int, int]

LINE_BETWEEN_CELLS_PX = 1


class CellType(enum.Enum):
    NORMAL_PATH = "normal_path"
    WALL = "wall"
    START = "start"
    FINISH = "finish"


CELL_COLORS: dict[CellType, tuple[int, int, int, int]] = {
    CellType.NORMAL_PATH: (255, 255, 255, 255),
    CellType.WALL: (0, 0, 0, 255),
    CellType.START: (0, 255, 0, 255),
    CellType.FINISH: (255, 0, 0, 255),
}


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


class MazeBoard:
    """A rows x cols grid of cells laid out over a screen area in pixels.

    Cells are addressed as (row, col). The start and finish positions are
    only recorded here; marking their cells is up to the caller.
    """

    def __init__(
        self,
        cells_width: int,
        cells_height: int,
        screen_width: int,
        screen_height: int,
    ) -> None:
        if cells_width <= 0 or cells_height <= 0:
            raise ValueError("the board needs at least one cell in each direction")
        if screen_width < cells_width or screen_height < cells_height:
            raise ValueError("the screen is too small for the number of cells")
        self.cells_width = cells_width
        self.cells_height = cells_height
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.cell_width_px = screen_width // cells_width
        self.cell_height_px = screen_height // cells_height
        self.grid: list[list[CellType]] = [
            [CellType.NORMAL_PATH] * cells_width for _ in range(cells_height)
        ]
        self.start: Cell | None = None
        self.finish: Cell | None = None
        self.update_made = True

    @property
    def rows(self) -> int:
        return self.cells_height

    @property
    def cols(self) -> int:
        return self.cells_width

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.cells_height and 0 <= col < self.cells_width

    def _check(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) is outside the board")

    def __getitem__(self, cell: Cell) -> CellType:
        row, col = cell
        self._check(row, col)
        return self.grid[row][col]

    def __setitem__(self, cell: Cell, kind: CellType) -> None:
        row, col = cell
        self._check(row, col)
        self.grid[row][col] = kind

    def cells(self) -> Iterator[tuple[Cell, CellType]]:
        """Yield every ((row, col), kind) in row-major order."""
        for row, line in enumerate(self.grid):
            for col, kind in enumerate(line):
                yield (row, col), kind

    def set_start(self, row: int, col: int) -> None:
        self._check(row, col)
        self.start = (row, col)

    def set_finish(self, row: int, col: int) -> None:
        self._check(row, col)
        self.finish = (row, col)

    def clear_start(self) -> None:
        self.start = None

    def clear_finish(self) -> None:
        self.finish = None

    def clear(self) -> None:
        """Forget start and finish and make every cell a normal path."""
        self.start = None
        self.finish = None
        for line in self.grid:
            line[:] = [CellType.NORMAL_PATH] * len(line)
        self.update_made = True

    def fill_walls(self) -> None:
        """Forget start and finish and make every cell a wall."""
        self.start = None
        self.finish = None
        for line in self.grid:
            line[:] = [CellType.WALL] * len(line)

    def ready_to_search(self) -> bool:
        return self.start is not None and self.finish is not None

    def cell_at_pixel(self, x: int, y: int) -> Cell | None:
        """Return the (row, col) under a pixel, or None if it is off the board."""
        if not (0 <= x < self.screen_width and 0 <= y < self.screen_height):
            return None
        row = _trunc_div(y - LINE_BETWEEN_CELLS_PX, self.cell_height_px)
        col = _trunc_div(x - LINE_BETWEEN_CELLS_PX, self.cell_width_px)
        if not self.in_bounds(row, col):
            return None
        return row, col

    def clamped_cell_at_pixel(self, x: int, y: int) -> Cell:
        """Return the (row, col) nearest a pixel, clamping it onto the board."""
        x = min(max(x, 0), self.screen_width)
        y = min(max(y, 0), self.screen_height)
        row = _trunc_div(y - LINE_BETWEEN_CELLS_PX, self.cell_height_px)
        col = _trunc_div(x - LINE_BETWEEN_CELLS_PX, self.cell_width_px)
        row = min(max(row, 0), self.cells_height - 1)
        col = min(max(col, 0), self.cells_width - 1)
        return row, col

    def cell_rect(self, row: int, col: int) -> Rect:
        """Return the (x, y, width, height) pixel rectangle filled for a cell."""
        self._check(row, col)
        return (
            self.cell_width_px * col + LINE_BETWEEN_CELLS_PX,
            self.cell_height_px * row + LINE_BETWEEN_CELLS_PX,
            self.cell_width_px - LINE_BETWEEN_CELLS_PX,
            self.cell_height_px - LINE_BETWEEN_CELLS_PX,
        )