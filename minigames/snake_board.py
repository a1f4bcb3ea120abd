"""The square playing field for the snake game, and food placement on it."""

from __future__ import annotations

import enum
import random

Cell = tuple[int, int]
Rect = tuple[int, int, int, int]

NUMBER_CELLS = 25
LINE_BETWEEN_CELLS_PX = 1
DEFAULT_SNAKE_X = 12
DEFAULT_SNAKE_Y = 12
MAX_FOOD_TRIES = 150


class CellType(enum.Enum):
    EMPTY = "empty"
    FOOD = "food"
    SNAKE = "snake"


CELL_COLORS: dict[CellType, tuple[int, int, int, int]] = {
    CellType.EMPTY: (0, 0, 0, 255),
    CellType.FOOD: (255, 0, 0, 255),
    CellType.SNAKE: (17, 186, 21, 255),
}


class SnakeBoard:
    """A NUMBER_CELLS x NUMBER_CELLS grid centred horizontally on the screen.

    Cells are addressed as (x, y), where x selects the row and y the column.
    """

    def __init__(self, screen_width: int, screen_height: int) -> None:
        if screen_height < NUMBER_CELLS:
            raise ValueError("the screen is too small for the board")
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.number_cells = NUMBER_CELLS
        self.cell_width_px = screen_height // NUMBER_CELLS
        self.cell_height_px = screen_height // NUMBER_CELLS
        self.x_cell_offset = screen_width // 2 - self.cell_height_px * (NUMBER_CELLS // 2)
        self.grid: list[list[CellType]] = [
            [CellType.EMPTY] * NUMBER_CELLS for _ in range(NUMBER_CELLS)
        ]
        self.food: Cell | None = None
        self.screen_initialized = False

    @property
    def food_exists(self) -> bool:
        return self.food is not None

    @property
    def max_width(self) -> int:
        """Largest valid row index."""
        return len(self.grid) - 1

    @property
    def max_height(self) -> int:
        """Largest valid column index."""
        return len(self.grid[0]) - 1

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x <= self.max_width and 0 <= y <= self.max_height):
            raise IndexError(f"cell ({x}, {y}) is outside the board")

    def reset(self) -> None:
        """Empty every cell and forget the food."""
        for row in self.grid:
            row[:] = [CellType.EMPTY] * len(row)
        self.food = None

    def set_cell(self, x: int, y: int, kind: CellType) -> None:
        self._check(x, y)
        self.grid[x][y] = kind

    def cell(self, x: int, y: int) -> CellType:
        self._check(x, y)
        return self.grid[x][y]

    def is_on_food(self, x: int, y: int) -> bool:
        return self.food == (x, y)

    def place_food(self, x: int, y: int) -> None:
        """Put the food on (x, y)."""
        self.set_cell(x, y, CellType.FOOD)
        self.food = (x, y)

    def clear_food(self) -> None:
        """Forget the food; its cell is left for the caller to overwrite."""
        self.food = None

    def cell_rect(self, row: int, col: int) -> Rect:
        """Return the (x, y, width, height) pixel rectangle filled for a cell."""
        self._check(row, col)
        return (
            self.cell_width_px * col + LINE_BETWEEN_CELLS_PX + self.x_cell_offset,
            self.cell_height_px * row + LINE_BETWEEN_CELLS_PX,
            self.cell_width_px - LINE_BETWEEN_CELLS_PX,
            self.cell_height_px - LINE_BETWEEN_CELLS_PX,
        )

    def play_area_rect(self) -> Rect:
        """The light rectangle drawn behind the cells."""
        return (
            self.x_cell_offset,
            0,
            self.screen_width - 2 * self.x_cell_offset + self.cell_width_px + LINE_BETWEEN_CELLS_PX,
            self.screen_height - 4,
        )


def spawn_food(board: SnakeBoard, rng: random.Random | None = None) -> bool:
    """Drop food on a random empty cell.

    Returns False if food is already on the board or no empty cell was hit
    within a limited number of tries.
    """
    rng = rng if rng is not None else random.Random()
    last = board.number_cells - 1
    tries = 0
    while not board.food_exists:
        x = rng.randint(0, last)
        y = rng.randint(0, last)
        if board.cell(x, y) is CellType.EMPTY:
            board.place_food(x, y)
            return True
        tries += 1
        if tries > MAX_FOOD_TRIES:
            return False
    return False