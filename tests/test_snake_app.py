import random

import pytest

from minigames.snake import Direction
from minigames.snake_app import Menu, MenuButtonKind, SnakeGame
from minigames.snake_board import DEFAULT_SNAKE_X, DEFAULT_SNAKE_Y, CellType


def _center(button):
    left, top, width, height = button.rect
    return left + width // 2, top + height // 2


@pytest.fixture
def game():
    return SnakeGame(random.Random(0))


def test_visible_buttons_depend_on_pause():
    menu = Menu()
    assert [b.kind for b in menu.visible_buttons(False)] == [
        MenuButtonKind.LOGO, MenuButtonKind.PLAY, MenuButtonKind.QUIT,
    ]
    assert [b.kind for b in menu.visible_buttons(True)] == [
        MenuButtonKind.LOGO, MenuButtonKind.RESUME, MenuButtonKind.QUIT,
    ]


def test_button_at_finds_visible_button():
    menu = Menu()
    quit_button = menu.visible_buttons(False)[2]
    assert menu.button_at(*_center(quit_button), False) is quit_button
    play = menu.visible_buttons(False)[1]
    assert menu.button_at(*_center(play), True).kind is MenuButtonKind.RESUME
    assert menu.button_at(0, 0, False) is None


def test_hover_highlights_only_button_under_pointer():
    menu = Menu()
    quit_button = menu.visible_buttons(False)[2]
    menu.hover(*_center(quit_button))
    assert [b.selected for b in menu.buttons] == [b is quit_button for b in menu.buttons]
    menu.hover(0, 0)
    assert not any(b.selected for b in menu.buttons)


def test_initial_state_places_snake(game):
    assert game.main_menu and game.running
    assert not game.is_paused and not game.game_over
    assert game.board.cell(DEFAULT_SNAKE_X, DEFAULT_SNAKE_Y) is CellType.SNAKE


def test_menu_escape_quits_when_not_paused(game):
    game.menu_escape()
    assert game.running is False


def test_escape_in_game_pauses_and_menu_escape_resumes(game):
    game.main_menu = False
    game.game_key("escape")
    assert game.main_menu and game.is_paused
    game.menu_escape()
    assert game.running
    assert not game.main_menu and not game.is_paused


def test_menu_click_play_and_quit(game):
    play, quit_button = game.menu.visible_buttons(False)[1:]
    assert game.menu_click(*_center(play)) is MenuButtonKind.PLAY
    assert game.main_menu is False
    assert game.menu_click(*_center(quit_button)) is MenuButtonKind.QUIT
    assert game.running is False


def test_menu_click_outside_does_nothing(game):
    assert game.menu_click(0, 0) is MenuButtonKind.NONE
    assert game.main_menu and game.running


@pytest.mark.parametrize(
    "key, direction",
    [
        ("w", Direction.UP), ("up", Direction.UP),
        ("a", Direction.LEFT), ("left", Direction.LEFT),
        ("s", Direction.DOWN), ("down", Direction.DOWN),
        ("d", Direction.RIGHT), ("right", Direction.RIGHT),
    ],
)
def test_game_keys_queue_moves(game, key, direction):
    game.game_key(key)
    assert list(game.snake.moves) == [direction]


def test_unknown_key_is_ignored(game):
    game.game_key("q")
    assert list(game.snake.moves) == []


def test_tick_spawns_food(game):
    assert game.tick() is True
    assert game.board.food_exists
    assert game.board.cell(*game.board.food) is CellType.FOOD


def test_running_into_wall_ends_game_and_restart_resets(game):
    game.game_key("w")
    results = [game.tick() for _ in range(30)]
    assert False in results
    assert game.game_over
    assert game.tick() is False

    game.restart()
    assert not game.game_over
    assert game.snake.body == [(DEFAULT_SNAKE_X, DEFAULT_SNAKE_Y)]
    assert game.snake.score == 0
    assert game.board.cell(DEFAULT_SNAKE_X, DEFAULT_SNAKE_Y) is CellType.SNAKE
    assert not game.board.food_exists


def test_score_text_and_game_over_lines(game):
    assert game.score_text() == "Score: 0"
    game.snake.score = 3
    assert game.score_text() == "Score: 30"
    assert game.game_over_lines() == ("GAME OVER", "YOUR SCORE : 30", "Press 'r' to Restart")