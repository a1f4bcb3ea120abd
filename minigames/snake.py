"""The snake: its body, queued turns and movement rules."""

from __future__ import annotations

import enum
from collections import deque

from minigames.snake_board import (
    DEFAULT_SNAKE_X,
    DEFAULT_SNAKE_Y,
    CellType,
    SnakeBoard,
)

Cell = tuple[int, int]


class Direction(enum.Enum):
    NONE = "none"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


_STEPS: dict[Direction, Cell] = {
    Direction.NONE: (0, 0),
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_OPPOSITE: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake whose head is the first cell of ``body``.

    Running into a wall is forgiven once: the snake stays put for that move
    and only dies if the following move is still out of bounds.
    """

    def __init__(self) -> None:
        self.body: list[Cell] = [(DEFAULT_SNAKE_X, DEFAULT_SNAKE_Y)]
        self.moves: deque[Direction] = deque()
        self.direction = Direction.NONE
        self.hit_wall_once = False
        self.score = 0

    @property
    def head(self) -> Cell:
        return self.body[0]

    def place(self, board: SnakeBoard) -> None:
        """Mark the snake's head on the board."""
        board.set_cell(*self.head, CellType.SNAKE)

    def reset(self, board: SnakeBoard) -> None:
        """Shrink back to a single cell at the default spot with no score."""
        self.direction = Direction.NONE
        self.body = [(DEFAULT_SNAKE_X, DEFAULT_SNAKE_Y)]
        board.set_cell(DEFAULT_SNAKE_X, DEFAULT_SNAKE_Y, CellType.SNAKE)
        self.score = 0

    def queue_move(self, direction: Direction) -> None:
        self.moves.append(direction)

    def can_turn(self, direction: Direction) -> bool:
        """A turn is allowed unless it reverses the current direction."""
        opposite = _OPPOSITE.get(direction)
        if opposite is None:
            return False
        return self.direction is not opposite

    def update(self, board: SnakeBoard) -> bool:
        """Carry out queued moves, or keep going straight; False when the snake dies."""
        if self.direction is Direction.NONE and not self.moves:
            return True
        if not self.moves:
            return self._move(board, self.direction)
        while self.moves:
            wanted = self.moves.popleft()
            allowed = self.direction is Direction.NONE or self.can_turn(wanted)
            if not allowed:
                self._move(board, self.direction)
            elif not self._move(board, wanted):
                return False
        return True

    def _move(self, board: SnakeBoard, direction: Direction) -> bool:
        d_row, d_col = _STEPS[direction]
        row, col = self.head
        new_head = (row + d_row, col + d_col)

        out_of_bounds = not (
            0 <= new_head[0] <= board.max_height and 0 <= new_head[1] <= board.max_width
        )
        if out_of_bounds:
            if self.hit_wall_once:
                return False
            self.hit_wall_once = True
            return True
        self.hit_wall_once = False

        if board.cell(*new_head) is CellType.SNAKE:
            return False

        if board.is_on_food(*new_head):
            self.score += 1
            board.clear_food()
        else:
            board.set_cell(*self.body.pop(), CellType.EMPTY)

        self.body.insert(0, new_head)
        board.set_cell(*new_head, CellType.SNAKE)
        self.direction = direction
        return True