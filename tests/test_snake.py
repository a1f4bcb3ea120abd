import pytest

from minigames.snake import Direction, Snake
from minigames.snake_board import (
    DEFAULT_SNAKE_X,
    DEFAULT_SNAKE_Y,
    CellType,
    SnakeBoard,
)

START = (DEFAULT_SNAKE_X, DEFAULT_SNAKE_Y)


@pytest.fixture
def board():
    return SnakeBoard(1920, 1080)


@pytest.fixture
def snake(board):
    s = Snake()
    s.place(board)
    return s


def test_new_snake_sits_at_default_cell(board, snake):
    assert snake.body == [START]
    assert snake.score == 0
    assert board.cell(*START) is CellType.SNAKE


def test_no_move_before_first_direction(board, snake):
    assert snake.update(board) is True
    assert snake.body == [START]


def test_move_right_vacates_old_cell(board, snake):
    snake.queue_move(Direction.RIGHT)
    assert snake.update(board) is True
    new_head = (DEFAULT_SNAKE_X, DEFAULT_SNAKE_Y + 1)
    assert snake.body == [new_head]
    assert board.cell(*START) is CellType.EMPTY
    assert board.cell(*new_head) is CellType.SNAKE


def test_keeps_moving_without_input(board, snake):
    snake.queue_move(Direction.DOWN)
    snake.update(board)
    snake.update(board)
    assert snake.head == (DEFAULT_SNAKE_X + 2, DEFAULT_SNAKE_Y)
    assert snake.direction is Direction.DOWN


def test_reversal_keeps_current_direction(board, snake):
    snake.queue_move(Direction.RIGHT)
    snake.update(board)
    snake.queue_move(Direction.LEFT)
    assert snake.update(board) is True
    assert snake.head == (DEFAULT_SNAKE_X, DEFAULT_SNAKE_Y + 2)
    assert snake.direction is Direction.RIGHT


@pytest.mark.parametrize(
    "current, wanted, expected",
    [
        (Direction.RIGHT, Direction.LEFT, False),
        (Direction.LEFT, Direction.RIGHT, False),
        (Direction.UP, Direction.DOWN, False),
        (Direction.DOWN, Direction.UP, False),
        (Direction.UP, Direction.LEFT, True),
        (Direction.RIGHT, Direction.RIGHT, True),
        (Direction.UP, Direction.NONE, False),
    ],
)
def test_can_turn(current, wanted, expected):
    s = Snake()
    s.direction = current
    assert s.can_turn(wanted) is expected


def test_eating_food_grows_and_scores(board, snake):
    food = (DEFAULT_SNAKE_X, DEFAULT_SNAKE_Y + 1)
    board.place_food(*food)
    snake.queue_move(Direction.RIGHT)
    assert snake.update(board) is True
    assert snake.score == 1
    assert snake.body == [food, START]
    assert board.food_exists is False
    assert board.cell(*START) is CellType.SNAKE


def test_wall_grace_then_death(board, snake):
    for _ in range(DEFAULT_SNAKE_X):
        snake.queue_move(Direction.UP)
        assert snake.update(board) is True
    assert snake.head == (0, DEFAULT_SNAKE_Y)
    assert snake.update(board) is True
    assert snake.head == (0, DEFAULT_SNAKE_Y)
    assert snake.hit_wall_once is True
    assert snake.update(board) is False


def test_wall_grace_is_forgiven_after_turning_away(board, snake):
    for _ in range(DEFAULT_SNAKE_X):
        snake.queue_move(Direction.UP)
        snake.update(board)
    assert snake.update(board) is True
    snake.queue_move(Direction.RIGHT)
    assert snake.update(board) is True
    assert snake.hit_wall_once is False
    snake.queue_move(Direction.UP)
    assert snake.update(board) is True
    assert snake.hit_wall_once is True


def test_running_into_body_kills(board, snake):
    board.set_cell(DEFAULT_SNAKE_X - 1, DEFAULT_SNAKE_Y, CellType.SNAKE)
    snake.queue_move(Direction.UP)
    assert snake.update(board) is False
    assert snake.body == [START]


def test_reset_restores_default(board, snake):
    board.place_food(DEFAULT_SNAKE_X, DEFAULT_SNAKE_Y + 1)
    snake.queue_move(Direction.RIGHT)
    snake.update(board)
    board.reset()
    snake.reset(board)
    assert snake.body == [START]
    assert snake.score == 0
    assert snake.direction is Direction.NONE
    assert board.cell(*START) is CellType.SNAKE