"""Interactive maze editor that shows breadth-first and depth-first searches."""

from __future__ import annotations

import argparse
import enum
import random
from dataclasses import dataclass
from typing import Callable

from minigames.maze_board import CELL_COLORS, Cell, CellType, MazeBoard, Rect
from minigames.maze_generator import MazeGenerator
from minigames.maze_search import (
    PATH_COLOR,
    Color,
    SearchAlgorithm,
    SearchKind,
    create_search,
)

SCREEN_WIDTH = 1910
SCREEN_HEIGHT = 1040
CELLS_WIDTH = 175
CELLS_HEIGHT = 198
BOARD_WIDTH = SCREEN_WIDTH - 160
BOARD_HEIGHT = SCREEN_HEIGHT - 50

BUTTON_X = 1756
BUTTON_SIZE = 150
BUTTON_TOP = 30
BUTTON_SPACING = 110
FLASH_MS = 75


class ButtonType(enum.Enum):
    NONE = "none"
    SEARCH = "search"
    START = "start"
    FINISH = "finish"
    MAZE = "maze"
    RESET = "reset"
    ADD_WALLS = "add_walls"
    BFS = "bfs"
    DFS = "dfs"


class DrawMode(enum.Enum):
    MAZE = "maze"
    START = "start"
    FINISH = "finish"


_BUTTONS_IN_ORDER: tuple[tuple[ButtonType, str], ...] = (
    (ButtonType.START, "Start"),
    (ButtonType.FINISH, "Finish"),
    (ButtonType.MAZE, "Maze"),
    (ButtonType.ADD_WALLS, "Add Walls"),
    (ButtonType.BFS, "BFS"),
    (ButtonType.DFS, "DFS"),
    (ButtonType.SEARCH, "Search"),
    (ButtonType.RESET, "Reset"),
)

_KEY_BUTTONS: dict[str, ButtonType] = {
    "d": ButtonType.DFS,
    "b": ButtonType.BFS,
    "e": ButtonType.SEARCH,
    "f": ButtonType.FINISH,
    "m": ButtonType.MAZE,
    "s": ButtonType.START,
    "r": ButtonType.RESET,
    "g": ButtonType.ADD_WALLS,
}

_MODE_BUTTONS: dict[DrawMode, ButtonType] = {
    DrawMode.START: ButtonType.START,
    DrawMode.FINISH: ButtonType.FINISH,
    DrawMode.MAZE: ButtonType.MAZE,
}


@dataclass
class Button:
    """A clickable square in the side panel."""

    kind: ButtonType
    label: str
    rect: Rect
    selected: bool = False

    def contains(self, x: int, y: int) -> bool:
        """True if (x, y) lies within the rectangle, edges included."""
        left, top, width, height = self.rect
        return left <= x <= left + width and top <= y <= top + height


class ButtonPanel:
    """The column of buttons and which of them are highlighted."""

    def __init__(self) -> None:
        self.default_draw = ButtonType.MAZE
        self.default_algorithm = ButtonType.BFS
        self.buttons = [
            Button(kind, label, (BUTTON_X, BUTTON_TOP + BUTTON_SPACING * i, BUTTON_SIZE, BUTTON_SIZE))
            for i, (kind, label) in enumerate(_BUTTONS_IN_ORDER)
        ]
        self.buttons[self.index_of(self.default_draw)].selected = True
        self.buttons[self.index_of(self.default_algorithm)].selected = True

    def index_of(self, kind: ButtonType) -> int:
        """Position of the button of the given kind; ValueError if there is none."""
        for index, button in enumerate(self.buttons):
            if button.kind is kind:
                return index
        raise ValueError(f"no button of kind {kind.name}")

    def unselect(self, kind: ButtonType) -> None:
        self.buttons[self.index_of(kind)].selected = False

    def press(self, current: ButtonType, target: ButtonType) -> ButtonType:
        """Move the highlight from ``current`` to ``target``; return the new current."""
        self.unselect(current)
        self.buttons[self.index_of(target)].selected = True
        return target

    def clear(self, current: ButtonType) -> ButtonType:
        """Drop every highlight and return the default drawing button."""
        self.unselect(current)
        current = self.default_draw
        self.buttons[self.index_of(current)].selected = True
        self.buttons[self.index_of(self.default_algorithm)].selected = True
        for button in self.buttons:
            button.selected = False
        return current

    def button_at(self, x: int, y: int) -> list[Button]:
        """Every button under the point, in panel order (neighbouring buttons overlap)."""
        return [button for button in self.buttons if button.contains(x, y)]


class MazeVisualizer:
    """Editor state: the board, the panel, the drawing mode and the chosen search."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.board = MazeBoard(CELLS_WIDTH, CELLS_HEIGHT, BOARD_WIDTH, BOARD_HEIGHT)
        self.panel = ButtonPanel()
        self.generator = MazeGenerator(self.board, rng)
        self.search_kind = SearchKind.BFS
        self.search: SearchAlgorithm = create_search(self.search_kind, self.board)
        self.draw_mode = DrawMode.MAZE
        self.selected_button = _MODE_BUTTONS[self.draw_mode]
        self.running = True

        self.on_visit: Callable[[Cell, Color], None] | None = None
        self.on_path: Callable[[Cell], None] | None = None
        self.keep_going: Callable[[], bool] | None = None
        self.on_flash: Callable[[ButtonType], None] | None = None

        self._paint_from: CellType | None = None
        self._actions: dict[ButtonType, Callable[[], None]] = {
            ButtonType.SEARCH: self.search_pressed,
            ButtonType.START: self.start_pressed,
            ButtonType.FINISH: self.finish_pressed,
            ButtonType.MAZE: self.maze_pressed,
            ButtonType.ADD_WALLS: self.add_walls_pressed,
            ButtonType.RESET: self.reset_pressed,
            ButtonType.DFS: self.dfs_pressed,
            ButtonType.BFS: self.bfs_pressed,
        }

    def handle_key(self, key: str) -> None:
        """React to a key given by name, such as "s" or "escape"."""
        name = key.lower()
        if name == "escape":
            self.running = False
            return
        kind = _KEY_BUTTONS.get(name)
        if kind is not None:
            self._actions[kind]()

    def handle_board_click(self, row: int, col: int) -> None:
        """Apply the current drawing mode to the clicked cell."""
        cell = (row, col)
        if self.draw_mode is DrawMode.MAZE:
            self._paint_from = self.board[cell]
            self._paint(cell)
        elif self.draw_mode is DrawMode.START:
            self._place_marker(cell, CellType.START)
        else:
            self._place_marker(cell, CellType.FINISH)

    def _paint(self, cell: Cell) -> None:
        board = self.board
        current = board[cell]
        if current is not self._paint_from:
            return
        if current is CellType.WALL:
            board[cell] = CellType.NORMAL_PATH
        elif current is CellType.NORMAL_PATH:
            board[cell] = CellType.WALL
        board.update_made = True

    def _place_marker(self, cell: Cell, kind: CellType) -> None:
        board = self.board
        is_start = kind is CellType.START
        own, other = (board.start, board.finish) if is_start else (board.finish, board.start)
        if cell == other:
            return
        if cell == own:
            (board.clear_start if is_start else board.clear_finish)()
            board[cell] = CellType.NORMAL_PATH
        else:
            if own is not None:
                board[own] = CellType.NORMAL_PATH
            board[cell] = kind
            (board.set_start if is_start else board.set_finish)(*cell)
        board.update_made = True

    def _flash(self, kind: ButtonType) -> None:
        if self.on_flash is not None:
            self.on_flash(kind)

    def _click(self, x: int, y: int) -> bool:
        """Dispatch a left click; True if it landed on the board area."""
        if 0 <= x < self.board.screen_width and 0 <= y < self.board.screen_height:
            cell = self.board.cell_at_pixel(x, y)
            if cell is not None:
                self.handle_board_click(*cell)
            return True
        for button in self.panel.button_at(x, y):
            action = self._actions.get(button.kind)
            if action is not None:
                action()
        return False

    def search_pressed(self) -> None:
        self._flash(ButtonType.SEARCH)
        if self.board.ready_to_search() and not self.search.found_finish:
            self.running = self.search.begin_search(self.on_visit, self.on_path, self.keep_going)

    def start_pressed(self) -> None:
        self.selected_button = self.panel.press(self.selected_button, ButtonType.START)
        self.draw_mode = DrawMode.START

    def finish_pressed(self) -> None:
        self.selected_button = self.panel.press(self.selected_button, ButtonType.FINISH)
        self.draw_mode = DrawMode.FINISH

    def maze_pressed(self) -> None:
        self.selected_button = self.panel.press(self.selected_button, ButtonType.MAZE)
        self.draw_mode = DrawMode.MAZE

    def add_walls_pressed(self) -> None:
        self._flash(ButtonType.ADD_WALLS)
        self.generator.generate()
        self.board.clear_start()
        self.board.clear_finish()

    def reset_pressed(self) -> None:
        self._flash(ButtonType.RESET)
        self.draw_mode = DrawMode.MAZE
        self.board.clear()
        self.search.reset()

    def dfs_pressed(self) -> None:
        if self.search_kind is not SearchKind.DFS:
            self.panel.press(ButtonType.BFS, ButtonType.DFS)
            self.search_kind = SearchKind.DFS
            self.search = create_search(self.search_kind, self.board)

    def bfs_pressed(self) -> None:
        if self.search_kind is not SearchKind.BFS:
            self.panel.press(ButtonType.DFS, ButtonType.BFS)
            self.search_kind = SearchKind.BFS
            self.search = create_search(self.search_kind, self.board)

    def run(self) -> None:
        """Open a window and run the editor until it is closed."""
        import pygame

        pygame.init()
        try:
            screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
            pygame.display.set_caption("Maze Solving Algorithm Visualizer")
            font = pygame.font.Font(None, 30)
            board = self.board

            def draw_button(button: Button) -> None:
                fill = (80, 160, 255) if button.selected else (220, 220, 220)
                screen.fill(fill, button.rect)
                pygame.draw.rect(screen, (255, 255, 255), button.rect, 2)
                text = font.render(button.label, True, (0, 0, 0))
                left, top, width, height = button.rect
                screen.blit(text, text.get_rect(center=(left + width // 2, top + height // 2)))

            def draw_panel() -> None:
                screen.fill((167, 167, 167), (1920 - 170, 0, 160, 1080 - 89))
                screen.fill((0, 0, 0), (1920 - 165, 65, 150, 1080 - 230))
                for button in self.panel.buttons:
                    draw_button(button)
                pygame.display.flip()

            def draw_board() -> None:
                for (row, col), kind in board.cells():
                    screen.fill(CELL_COLORS[kind][:3], board.cell_rect(row, col))
                pygame.display.flip()

            def flash(kind: ButtonType) -> None:
                button = self.panel.buttons[self.panel.index_of(kind)]
                was_selected = button.selected
                button.selected = True
                draw_button(button)
                pygame.display.update(button.rect)
                pygame.time.delay(FLASH_MS)
                button.selected = was_selected and False
                draw_button(button)
                pygame.display.update(button.rect)

            def on_visit(cell: Cell, color: Color) -> None:
                rect = board.cell_rect(*cell)
                screen.fill(color[:3], rect)
                pygame.display.update(rect)

            def on_path(cell: Cell) -> None:
                rect = board.cell_rect(*cell)
                screen.fill(PATH_COLOR[:3], rect)
                pygame.display.update(rect)
                pygame.time.delay(1)

            def keep_going() -> bool:
                # Closing the window or pressing any key ends the search and the program.
                for event in pygame.event.get():
                    if event.type in (pygame.QUIT, pygame.KEYDOWN):
                        return False
                return True

            self.on_visit, self.on_path = on_visit, on_path
            self.keep_going, self.on_flash = keep_going, flash

            pygame.draw.rect(screen, (255, 255, 255), (1, 1, board.screen_width, board.screen_height), 1)
            draw_panel()
            clock = pygame.time.Clock()
            dragging = False
            self.running = True
            while self.running:
                if board.update_made:
                    draw_board()
                    board.update_made = False
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN:
                        self.handle_key(pygame.key.name(event.key))
                        draw_panel()
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        on_board = self._click(*event.pos)
                        dragging = on_board and self.draw_mode is DrawMode.MAZE
                        if not on_board:
                            draw_panel()
                    elif event.type == pygame.MOUSEMOTION and dragging:
                        self._paint(board.clamped_cell_at_pixel(*event.pos))
                    elif event.type == pygame.MOUSEBUTTONUP:
                        dragging = False
                    if not self.running:
                        break
                clock.tick(120)
        finally:
            self.on_visit = self.on_path = self.keep_going = self.on_flash = None
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Start the maze visualizer."""
    parser = argparse.ArgumentParser(prog="maze", description="Maze search visualizer")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    MazeVisualizer(random.Random(args.seed)).run()
    return 0