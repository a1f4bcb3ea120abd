"""Conway's Game of Life on a fixed grid whose border cells never change."""

from __future__ import annotations

import argparse
import random
from typing import Iterable

ALIVE_CHAR = "#"


class LifeGrid:
    """A width x height grid of cells, each dead (0) or alive (1)."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("grid dimensions must be positive")
        self.width = width
        self.height = height
        self._cells = [bytearray(width) for _ in range(height)]

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside the grid")

    def randomize(self, rng: random.Random) -> None:
        """Set every cell to a random state drawn from ``rng``."""
        self._cells = [
            bytearray(rng.randrange(2) for _ in range(self.width))
            for _ in range(self.height)
        ]

    def set_pattern(self, x: int, y: int, pattern: str) -> None:
        """Write a row of cells starting at (x, y): '#' is alive, anything else dead."""
        self._check(x, y)
        if x + len(pattern) > self.width:
            raise IndexError("pattern runs past the edge of the grid")
        row = self._cells[y]
        for offset, char in enumerate(pattern):
            row[x + offset] = 1 if char == ALIVE_CHAR else 0

    def is_alive(self, x: int, y: int) -> bool:
        self._check(x, y)
        return bool(self._cells[y][x])

    def live_cells(self) -> Iterable[tuple[int, int]]:
        """Yield the (x, y) coordinates of every live cell."""
        for y, row in enumerate(self._cells):
            for x, value in enumerate(row):
                if value:
                    yield x, y

    def step(self) -> None:
        """Advance one generation; cells on the border keep their state."""
        previous = [bytes(row) for row in self._cells]
        for y in range(1, self.height - 1):
            above, here, below = previous[y - 1], previous[y], previous[y + 1]
            row = self._cells[y]
            for x in range(1, self.width - 1):
                neighbours = (
                    above[x - 1] + above[x] + above[x + 1]
                    + here[x - 1] + here[x + 1]
                    + below[x - 1] + below[x] + below[x + 1]
                )
                if here[x]:
                    row[x] = 1 if neighbours in (2, 3) else 0
                else:
                    row[x] = 1 if neighbours == 3 else 0


def main(argv: list[str] | None = None) -> int:
    """Show a random grid; holding space advances the simulation."""
    parser = argparse.ArgumentParser(prog="life", description="Game of Life")
    parser.add_argument("--width", type=int, default=320)
    parser.add_argument("--height", type=int, default=200)
    parser.add_argument("--scale", type=int, default=4)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    import pygame

    grid = LifeGrid(args.width, args.height)
    grid.randomize(random.Random(args.seed))

    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width * args.scale, args.height * args.scale))
        pygame.display.set_caption("Game Of Life")
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            if not pygame.key.get_pressed()[pygame.K_SPACE]:
                clock.tick(60)
                continue
            screen.fill((0, 0, 0))
            for x, y in grid.live_cells():
                screen.fill(
                    (255, 255, 255),
                    (x * args.scale, y * args.scale, args.scale, args.scale),
                )
            pygame.display.flip()
            grid.step()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0