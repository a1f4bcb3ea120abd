import random

import pytest

from minigames.life import LifeGrid


def _alive(grid):
    return sorted(grid.live_cells())


def test_set_pattern_marks_hash_cells_alive():
    grid = LifeGrid(6, 4)
    grid.set_pattern(1, 2, "# #")
    assert grid.is_alive(1, 2)
    assert not grid.is_alive(2, 2)
    assert grid.is_alive(3, 2)
    assert _alive(grid) == [(1, 2), (3, 2)]


def test_blinker_oscillates_with_period_two():
    grid = LifeGrid(5, 5)
    grid.set_pattern(1, 2, "###")
    horizontal = _alive(grid)
    grid.step()
    assert _alive(grid) == [(2, 1), (2, 2), (2, 3)]
    grid.step()
    assert _alive(grid) == horizontal


def test_block_is_still_life():
    grid = LifeGrid(6, 6)
    grid.set_pattern(2, 2, "##")
    grid.set_pattern(2, 3, "##")
    before = _alive(grid)
    for _ in range(3):
        grid.step()
    assert _alive(grid) == before


def test_lone_cell_dies():
    grid = LifeGrid(5, 5)
    grid.set_pattern(2, 2, "#")
    grid.step()
    assert _alive(grid) == []


def test_border_cells_never_change():
    grid = LifeGrid(12, 9)
    grid.randomize(random.Random(7))

    def border(g):
        return [
            g.is_alive(x, y)
            for y in range(g.height)
            for x in range(g.width)
            if x in (0, g.width - 1) or y in (0, g.height - 1)
        ]

    before = border(grid)
    for _ in range(5):
        grid.step()
    assert border(grid) == before


def test_randomize_is_deterministic_for_a_seed():
    a = LifeGrid(20, 10)
    b = LifeGrid(20, 10)
    a.randomize(random.Random(3))
    b.randomize(random.Random(3))
    assert _alive(a) == _alive(b)
    assert 0 < len(_alive(a)) < 200


def test_out_of_range_cell_raises():
    grid = LifeGrid(4, 4)
    with pytest.raises(IndexError):
        grid.is_alive(4, 0)
    with pytest.raises(IndexError):
        grid.set_pattern(2, 0, "###")


def test_non_positive_size_raises():
    with pytest.raises(ValueError):
        LifeGrid(0, 5)