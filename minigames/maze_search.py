"""Breadth-first and depth-first searches over a maze board."""

from __future__ import annotations

import abc
import enum
from collections import deque
from typing import Callable, Iterable

from minigames.maze_board import CellType, MazeBoard

Cell = tuple[int, int]
Color = tuple[int, int, int, int]

VisitCallback = Callable[[Cell, Color], None]
PathCallback = Callable[[Cell], None]
KeepGoing = Callable[[], bool]

START_COLOR: Color = (0, 255, 0, 255)
PATH_COLOR: Color = (0, 255, 255, 255)
VISIT_GREEN = 10

# Depth-first search prefers Up, Right, Down, Left, in that order.
DIRECTION_PRECEDENCE: tuple[Cell, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))


class SearchKind(enum.Enum):
    BFS = "bfs"
    DFS = "dfs"


def build_adjacency(cells_width: int, cells_height: int) -> dict[Cell, tuple[Cell, ...]]:
    """Map every (row, col) to its grid neighbours, ordered left, right, up, down."""
    if cells_width <= 0 or cells_height <= 0:
        raise ValueError("the grid needs at least one cell in each direction")
    adjacency: dict[Cell, tuple[Cell, ...]] = {}
    for row in range(cells_height):
        for col in range(cells_width):
            neighbours = []
            if col > 0:
                neighbours.append((row, col - 1))
            if col < cells_width - 1:
                neighbours.append((row, col + 1))
            if row > 0:
                neighbours.append((row - 1, col))
            if row < cells_height - 1:
                neighbours.append((row + 1, col))
            adjacency[(row, col)] = tuple(neighbours)
    return adjacency


def direction_precedence(delta: Cell) -> int:
    """Return the rank of a unit step: Up 0, Right 1, Down 2, Left 3."""
    try:
        return DIRECTION_PRECEDENCE.index(tuple(delta))
    except ValueError:
        raise ValueError(f"{delta!r} is not a step to a neighbouring cell") from None


def reorder_by_precedence(node: Cell, cells: Iterable[Cell]) -> list[Cell]:
    """Sort neighbours of ``node`` by the direction precedence of the step to each."""
    row, col = node
    return sorted(cells, key=lambda cell: direction_precedence((cell[0] - row, cell[1] - col)))


def _gradient(index: int, count: int) -> int:
    if count <= 1:
        return 255
    return int(min(255.0, (1.0 / (count - 1) * index) * 255))


class SearchAlgorithm(abc.ABC):
    """Shared state and driving loop for a search from the start to the finish cell."""

    def __init__(self, board: MazeBoard) -> None:
        self.board = board
        self.adjacency = build_adjacency(board.cols, board.rows)
        self.found_finish = False
        self.visited: set[Cell] = set()
        self.previous: dict[Cell, Cell | None] = {}
        self.explored: list[Cell] = []
        self.path: list[Cell] = []
        self._frontier: deque[Cell] = deque()

    def reset(self) -> None:
        """Forget everything learned by earlier searches."""
        self.found_finish = False
        self.visited.clear()
        self.previous.clear()
        self.explored.clear()
        self.path.clear()
        self._frontier.clear()

    def adjacent_cells(self, row: int, col: int) -> list[Cell]:
        """Neighbours that are neither walls, the start marker, nor already seen."""
        return [
            cell
            for cell in self.adjacency[(row, col)]
            if self.board[cell] not in (CellType.WALL, CellType.START)
            and cell not in self.visited
        ]

    def visit_color(self, cell: Cell) -> Color:
        """Colour shading from the top-left corner toward the bottom-right."""
        row, col = cell
        return (
            _gradient(row, self.board.rows),
            VISIT_GREEN,
            _gradient(col, self.board.cols),
            255,
        )

    @abc.abstractmethod
    def _take(self) -> Cell:
        """Remove and return the next cell to expand."""

    def _order(self, node: Cell, cells: list[Cell]) -> list[Cell]:
        return cells

    def begin_search(
        self,
        on_visit: VisitCallback | None = None,
        on_path: PathCallback | None = None,
        keep_going: KeepGoing | None = None,
    ) -> bool:
        """Search from the board's start cell."""
        if self.board.start is None:
            raise ValueError("the board has no start cell")
        return self.search(*self.board.start, on_visit, on_path, keep_going)

    def search(
        self,
        row: int,
        col: int,
        on_visit: VisitCallback | None = None,
        on_path: PathCallback | None = None,
        keep_going: KeepGoing | None = None,
    ) -> bool:
        """Search from (row, col) toward the board's finish.

        Returns False if ``keep_going`` asked to stop, True otherwise;
        ``found_finish`` and ``path`` tell whether and how the finish was reached.
        """
        if not self.board.in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) is outside the board")
        start = (row, col)
        self._frontier.append(start)
        self.visited.add(start)
        self.previous[start] = None
        if on_visit is not None:
            on_visit(start, START_COLOR)

        while self._frontier:
            if keep_going is not None and not keep_going():
                return False
            node = self._take()
            self.explored.append(node)
            if node != self.board.start and on_visit is not None:
                on_visit(node, self.visit_color(node))

            for cell in self._order(node, self.adjacent_cells(*node)):
                self.previous.setdefault(cell, node)
                if cell == self.board.finish:
                    self.found_finish = True
                    self.path = self._trace(cell)
                    if on_path is not None:
                        for step in reversed(self.path[1:-1]):
                            on_path(step)
                    return True
                self._frontier.append(cell)
                self.visited.add(cell)
        return True

    def _trace(self, cell: Cell) -> list[Cell]:
        path = [cell]
        step = self.previous[cell]
        while step is not None:
            path.append(step)
            step = self.previous[step]
        path.reverse()
        return path


class BreadthFirstSearch(SearchAlgorithm):
    """Expands cells in the order they were discovered."""

    def _take(self) -> Cell:
        return self._frontier.popleft()


class DepthFirstSearch(SearchAlgorithm):
    """Expands the most recently discovered cell first."""

    def _take(self) -> Cell:
        return self._frontier.pop()

    def _order(self, node: Cell, cells: list[Cell]) -> list[Cell]:
        return reorder_by_precedence(node, cells) if len(cells) > 1 else cells


_ALGORITHMS: dict[SearchKind, type[SearchAlgorithm]] = {
    SearchKind.BFS: BreadthFirstSearch,
    SearchKind.DFS: DepthFirstSearch,
}


def create_search(kind: SearchKind, board: MazeBoard) -> SearchAlgorithm:
    """Build the search algorithm of the given kind for ``board``."""
    return _ALGORITHMS.get(kind, BreadthFirstSearch)(board)