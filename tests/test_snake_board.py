import random

import pytest

from minigames.snake_board import (
    NUMBER_CELLS,
    CellType,
    SnakeBoard,
    spawn_food,
)


@pytest.fixture
def board():
    return SnakeBoard(1920, 1080)


def test_new_board_is_empty(board):
    assert board.max_width == NUMBER_CELLS - 1
    assert board.max_height == NUMBER_CELLS - 1
    assert all(
        board.cell(x, y) is CellType.EMPTY
        for x in range(NUMBER_CELLS)
        for y in range(NUMBER_CELLS)
    )
    assert board.food_exists is False


def test_set_and_get_cell_round_trip(board):
    board.set_cell(3, 7, CellType.SNAKE)
    assert board.cell(3, 7) is CellType.SNAKE
    assert board.cell(7, 3) is CellType.EMPTY


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (NUMBER_CELLS, 0), (0, NUMBER_CELLS)])
def test_out_of_range_cells_raise(board, x, y):
    with pytest.raises(IndexError):
        board.cell(x, y)
    with pytest.raises(IndexError):
        board.set_cell(x, y, CellType.SNAKE)


def test_place_and_clear_food(board):
    board.place_food(4, 5)
    assert board.food_exists is True
    assert board.is_on_food(4, 5) is True
    assert board.is_on_food(5, 4) is False
    assert board.cell(4, 5) is CellType.FOOD
    board.clear_food()
    assert board.food_exists is False
    assert board.is_on_food(4, 5) is False


def test_reset_empties_everything(board):
    board.set_cell(1, 1, CellType.SNAKE)
    board.place_food(2, 2)
    board.reset()
    assert board.cell(1, 1) is CellType.EMPTY
    assert board.cell(2, 2) is CellType.EMPTY
    assert board.food is None


def test_cell_rects_tile_the_board(board):
    first = board.cell_rect(0, 0)
    right = board.cell_rect(0, 1)
    below = board.cell_rect(1, 0)
    assert right[0] - first[0] == board.cell_width_px
    assert below[1] - first[1] == board.cell_height_px
    assert first[2] == board.cell_width_px - 1
    assert first[0] == board.x_cell_offset + 1


def test_cell_rect_out_of_range(board):
    with pytest.raises(IndexError):
        board.cell_rect(NUMBER_CELLS, 0)


def test_spawn_food_places_exactly_one(board):
    assert spawn_food(board, random.Random(1)) is True
    foods = [
        (x, y)
        for x in range(NUMBER_CELLS)
        for y in range(NUMBER_CELLS)
        if board.cell(x, y) is CellType.FOOD
    ]
    assert foods == [board.food]


def test_spawn_food_does_nothing_when_food_exists(board):
    board.place_food(0, 0)
    assert spawn_food(board, random.Random(2)) is False
    assert board.food == (0, 0)


def test_spawn_food_gives_up_on_full_board(board):
    for x in range(NUMBER_CELLS):
        for y in range(NUMBER_CELLS):
            board.set_cell(x, y, CellType.SNAKE)
    assert spawn_food(board, random.Random(3)) is False
    assert board.food_exists is False


def test_spawn_food_avoids_snake_cells(board):
    rng = random.Random(4)
    for x in range(NUMBER_CELLS):
        for y in range(NUMBER_CELLS):
            if (x, y) != (6, 6):
                board.set_cell(x, y, CellType.SNAKE)
    board.set_cell(6, 6, CellType.EMPTY)
    placed = spawn_food(board, rng)
    if placed:
        assert board.food == (6, 6)
    else:
        assert board.food is None
    assert all(
        board.cell(x, y) is CellType.SNAKE
        for x in range(NUMBER_CELLS)
        for y in range(NUMBER_CELLS)
        if (x, y) != (6, 6)
    )