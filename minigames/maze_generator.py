"""Random maze generation by iterative depth-first backtracking."""

from __future__ import annotations

import random

from minigames.maze_board import CellType, MazeBoard

_DIRECTIONS = ((0, 2), (0, -2), (2, 0), (-2, 0))


class MazeGenerator:
    """Carves a perfect maze into a board, leaving the bottom row as wall."""

    def __init__(self, board: MazeBoard, rng: random.Random | None = None) -> None:
        self.board = board
        self.rng = rng if rng is not None else random.Random()

    def generate(self) -> None:
        board = self.board
        rows, cols = board.rows, board.cols
        start_row_choices = (rows - 3) // 2
        start_col_choices = (cols - 1) // 2
        if start_row_choices <= 0 or start_col_choices <= 0:
            raise ValueError("the board is too small to hold a maze")

        board.fill_walls()
        start = (
            1 + 2 * self.rng.randrange(start_row_choices),
            1 + 2 * self.rng.randrange(start_col_choices),
        )
        board[start] = CellType.NORMAL_PATH

        stack = [start]
        while stack:
            row, col = stack[-1]
            directions = list(_DIRECTIONS)
            self.rng.shuffle(directions)
            for d_row, d_col in directions:
                new_row, new_col = row + d_row, col + d_col
                if not (0 <= new_row < rows - 1 and 0 <= new_col < cols):
                    continue
                if board[new_row, new_col] is CellType.WALL:
                    board[new_row, new_col] = CellType.NORMAL_PATH
                    board[row + d_row // 2, col + d_col // 2] = CellType.NORMAL_PATH
                    stack.append((new_row, new_col))
                    break
            else:
                stack.pop()

        board.update_made = True