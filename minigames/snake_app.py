"""Menu, scoring and main loop of the snake game."""

from __future__ import annotations

import argparse
import enum
import random
from dataclasses import dataclass

from minigames.snake import Direction, Snake
from minigames.snake_board import CELL_COLORS, Rect, SnakeBoard, spawn_food

SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080
SNAKE_UPDATE_DELAY_MS = 85
FPS = 120

SCORE_RECT: Rect = (15, 150, 385, 125)
SCORE_MULTIPLIER = 10

_BUTTON_TOP = SCREEN_HEIGHT // 4
_BUTTON_SPACING = 200


class MenuButtonKind(enum.Enum):
    NONE = "none"
    LOGO = "logo"
    PLAY = "play"
    RESUME = "resume"
    QUIT = "quit"


@dataclass
class MenuButton:
    """A rectangle on the main menu that can be highlighted."""

    kind: MenuButtonKind
    label: str
    rect: Rect
    selected: bool = False

    def contains(self, x: int, y: int) -> bool:
        """True if (x, y) lies within the rectangle, edges included."""
        left, top, width, height = self.rect
        return left <= x <= left + width and top <= y <= top + height


def _button_rect(kind: MenuButtonKind, y: int) -> Rect:
    if kind is MenuButtonKind.LOGO:
        return (SCREEN_WIDTH // 2 - 440, y - 200, 880, 210)
    return (SCREEN_WIDTH // 2 - 150, y, 300, 110)


class Menu:
    """The logo and the Play / Resume / Quit buttons of the main menu."""

    def __init__(self) -> None:
        layout = (
            (MenuButtonKind.LOGO, "Snake", 0),
            (MenuButtonKind.PLAY, "Play", 1),
            (MenuButtonKind.RESUME, "Resume", 1),
            (MenuButtonKind.QUIT, "Quit", 2),
        )
        self.buttons = [
            MenuButton(kind, label, _button_rect(kind, _BUTTON_TOP + _BUTTON_SPACING * slot))
            for kind, label, slot in layout
        ]

    def _by_kind(self, kind: MenuButtonKind) -> MenuButton:
        for button in self.buttons:
            if button.kind is kind:
                return button
        raise ValueError(f"no button of kind {kind.name}")

    def visible_buttons(self, is_paused: bool) -> list[MenuButton]:
        """The logo, Play or Resume depending on ``is_paused``, and Quit."""
        middle = MenuButtonKind.RESUME if is_paused else MenuButtonKind.PLAY
        return [
            self._by_kind(MenuButtonKind.LOGO),
            self._by_kind(middle),
            self._by_kind(MenuButtonKind.QUIT),
        ]

    def button_at(self, x: int, y: int, is_paused: bool) -> MenuButton | None:
        """The visible button under (x, y), or None."""
        for button in self.visible_buttons(is_paused):
            if button.contains(x, y):
                return button
        return None

    def hover(self, x: int, y: int) -> None:
        """Highlight exactly the buttons under (x, y)."""
        for button in self.buttons:
            button.selected = button.contains(x, y)


_KEY_DIRECTIONS: dict[str, Direction] = {
    "w": Direction.UP,
    "up": Direction.UP,
    "a": Direction.LEFT,
    "left": Direction.LEFT,
    "s": Direction.DOWN,
    "down": Direction.DOWN,
    "d": Direction.RIGHT,
    "right": Direction.RIGHT,
}


def _game_over_rects(screen_width: int, screen_height: int) -> tuple[Rect, Rect, Rect]:
    width, height = 1000, 250
    x = screen_width // 2 - width // 2
    y = screen_height // 2 - 2 * height
    title = (x, y, width, height)
    x, y, width, height = x - 200, y + 400, width + 400, height - 100
    score = (x, y, width, height)
    x, y, width = x - 50, y + 300, width + 100
    hint = (x, y, width, height)
    return title, score, hint


class SnakeGame:
    """Game state: board, snake, menu and which screen is showing."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.board = SnakeBoard(SCREEN_WIDTH, SCREEN_HEIGHT)
        self.snake = Snake()
        self.snake.place(self.board)
        self.menu = Menu()
        self.running = True
        self.main_menu = True
        self.is_paused = False
        self.game_over = False

    def menu_escape(self) -> None:
        """Escape on the menu quits, or resumes a paused game."""
        if not self.is_paused:
            self.running = False
        else:
            self.main_menu = False
            self.is_paused = False

    def menu_click(self, x: int, y: int) -> MenuButtonKind:
        """Handle a left click on the menu; return the kind of button hit."""
        button = self.menu.button_at(x, y, self.is_paused)
        if button is None:
            return MenuButtonKind.NONE
        if button.kind in (MenuButtonKind.PLAY, MenuButtonKind.RESUME):
            self.main_menu = False
            self.is_paused = False
        elif button.kind is MenuButtonKind.QUIT:
            self.running = False
        return button.kind

    def game_key(self, key: str) -> None:
        """Handle a key pressed during play, given by name such as "w" or "escape"."""
        name = key.lower()
        if name == "escape":
            self.board.screen_initialized = False
            self.main_menu = True
            self.is_paused = True
            return
        direction = _KEY_DIRECTIONS.get(name)
        if direction is not None:
            self.snake.queue_move(direction)

    def tick(self) -> bool:
        """Make sure food is out, then move the snake once; False once the game is over."""
        if self.game_over:
            return False
        if not self.board.food_exists:
            spawn_food(self.board, self.rng)
        if self.snake.update(self.board):
            return True
        self.game_over = True
        return False

    def restart(self) -> None:
        """Start a fresh round after a game over."""
        self.board.screen_initialized = False
        self.game_over = False
        self.board.reset()
        self.snake.reset(self.board)

    def score_text(self) -> str:
        return f"Score: {self.snake.score * SCORE_MULTIPLIER}"

    def game_over_lines(self) -> tuple[str, str, str]:
        return (
            "GAME OVER",
            f"YOUR SCORE : {self.snake.score * SCORE_MULTIPLIER}",
            "Press 'r' to Restart",
        )

    def run(self) -> None:
        """Open a window and play until the program is quit."""
        import pygame

        pygame.init()
        try:
            screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
            pygame.display.set_caption("Snake")
            font = pygame.font.Font(None, 28)
            clock = pygame.time.Clock()
            board = self.board
            last_update = pygame.time.get_ticks()
            game_over_drawn = False

            def blit_text(text: str, rect: Rect) -> None:
                surface = font.render(text, False, (255, 255, 255))
                screen.blit(pygame.transform.scale(surface, rect[2:]), rect[:2])

            def draw_menu() -> None:
                screen.fill((0, 0, 0))
                for button in self.menu.visible_buttons(self.is_paused):
                    highlighted = button.selected and button.kind is not MenuButtonKind.LOGO
                    fill = (17, 186, 21) if highlighted else (60, 60, 60)
                    screen.fill(fill, button.rect)
                    text = font.render(button.label, True, (255, 255, 255))
                    left, top, width, height = button.rect
                    screen.blit(text, text.get_rect(center=(left + width // 2, top + height // 2)))
                pygame.display.flip()

            def draw_score() -> None:
                screen.fill((0, 0, 0), SCORE_RECT)
                blit_text(self.score_text(), SCORE_RECT)

            def draw_board() -> None:
                for row in range(board.number_cells):
                    for col in range(board.number_cells):
                        screen.fill(CELL_COLORS[board.cell(row, col)][:3], board.cell_rect(row, col))

            def draw_game_over() -> None:
                screen.fill((0, 0, 0))
                for line, rect in zip(self.game_over_lines(), _game_over_rects(SCREEN_WIDTH, SCREEN_HEIGHT)):
                    blit_text(line, rect)
                pygame.display.flip()

            self.running = True
            while self.running:
                events = pygame.event.get()
                if any(event.type == pygame.QUIT for event in events):
                    self.running = False
                    break

                if self.main_menu:
                    for event in events:
                        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                            self.menu_escape()
                        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                            self.menu_click(*event.pos)
                        elif event.type == pygame.MOUSEMOTION:
                            self.menu.hover(*event.pos)
                    if self.main_menu:
                        draw_menu()
                elif self.game_over:
                    if not game_over_drawn:
                        draw_game_over()
                        game_over_drawn = True
                    for event in events:
                        if event.type != pygame.KEYDOWN:
                            continue
                        if event.key == pygame.K_ESCAPE:
                            self.running = False
                            break
                        if event.key == pygame.K_r:
                            screen.fill((0, 0, 0))
                            pygame.display.flip()
                            self.restart()
                            game_over_drawn = False
                else:
                    if not board.screen_initialized:
                        screen.fill((0, 0, 0))
                        screen.fill((255, 255, 255), board.play_area_rect())
                        board.screen_initialized = True
                    for event in events:
                        if event.type == pygame.KEYDOWN:
                            self.game_key(pygame.key.name(event.key))
                            if self.main_menu:
                                break
                    if not self.main_menu:
                        now = pygame.time.get_ticks()
                        if now - last_update > SNAKE_UPDATE_DELAY_MS:
                            self.tick()
                            last_update = now
                        if not self.game_over:
                            draw_board()
                            draw_score()
                            pygame.display.flip()
                clock.tick(FPS)
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Start the snake game."""
    parser = argparse.ArgumentParser(prog="snake", description="Snake")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    SnakeGame(random.Random(args.seed)).run()
    return 0