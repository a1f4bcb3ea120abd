"""A triangle that slides up and down, then spins over a fixed target triangle."""

from __future__ import annotations

import argparse
import enum
import math
from dataclasses import dataclass

SQRT3 = math.sqrt(3)
MOVE_VELOCITY = 10.0
ROTATE_VELOCITY = 0.03
INITIAL_ROTATION = -(math.pi / 2.0)
EDGE_MARGIN = 10.0

Color = tuple[int, int, int, int]


class TriangleKind(enum.Enum):
    CENTER_OUTER = "center_outer"
    CENTER_INNER = "center_inner"
    MOVING = "moving"


_COLORS: dict[TriangleKind, tuple[Color, Color, Color]] = {
    TriangleKind.CENTER_OUTER: ((0, 0, 255, 255), (0, 255, 0, 255), (255, 0, 0, 255)),
    TriangleKind.CENTER_INNER: ((0, 0, 0, 255),) * 3,
    TriangleKind.MOVING: ((255, 255, 255, 255),) * 3,
}


@dataclass
class Vertex:
    x: float
    y: float
    color: Color


class Triangle:
    """An upward-pointing equilateral triangle centred on (x, y)."""

    def __init__(self, x: float, y: float, side_length: int, kind: TriangleKind) -> None:
        self.initial_x = float(x)
        self.initial_y = float(y)
        self.side_length = float(side_length)
        self.kind = kind
        self.vertices: list[Vertex] = []
        self.reset()

    def reset(self) -> None:
        """Put the vertices back at the triangle's starting position."""
        x, y, side = self.initial_x, self.initial_y, self.side_length
        apex, right, left = _COLORS[self.kind]
        self.vertices = [
            Vertex(x, y - (SQRT3 / 3) * side, apex),
            Vertex(x + side / 2, y + (SQRT3 / 6) * side, right),
            Vertex(x - side / 2, y + (SQRT3 / 6) * side, left),
        ]


class ShapeGame:
    """State of the game: two fixed centre triangles and one moving triangle."""

    def __init__(self, width: int = 1920, height: int = 1080) -> None:
        self.width = width
        self.height = height
        mid_x = float(width // 2)
        mid_y = float(height // 2)
        side = 250
        self.center_triangles = [
            Triangle(mid_x, mid_y, side, TriangleKind.CENTER_OUTER),
            Triangle(mid_x, mid_y, side - 10, TriangleKind.CENTER_INNER),
        ]
        self.moving_triangle = Triangle(mid_x, 150, side - 10, TriangleKind.MOVING)
        self.move_velocity = MOVE_VELOCITY
        self.rotation = INITIAL_ROTATION
        self.moving = True
        self.rotating = False
        self.capture_center = True
        self.center_x = 0.0
        self.center_y = 0.0

    @property
    def radius(self) -> float:
        return self.moving_triangle.side_length / SQRT3

    def move_triangle(self) -> None:
        """Slide the triangle vertically, bouncing off the top and bottom edges."""
        apex, right, left = self.moving_triangle.vertices
        if right.y > self.height - EDGE_MARGIN or apex.y < EDGE_MARGIN:
            self.move_velocity *= -1
        for vertex in (apex, right, left):
            vertex.y += self.move_velocity

    def rotate_triangle(self) -> None:
        """Place the vertices on a circle around the captured centre, then advance the angle."""
        offsets = (0.0, -2 * math.pi / 3, 2 * math.pi / 3)
        for vertex, offset in zip(self.moving_triangle.vertices, offsets):
            angle = self.rotation + offset
            vertex.x = self.radius * math.cos(angle) + self.center_x
            vertex.y = self.radius * math.sin(angle) + self.center_y
        self.rotation += self.move_velocity

    def toggle(self) -> None:
        """Stop sliding and start spinning, or stop spinning."""
        if self.moving:
            self.moving = False
            self.rotating = True
            self.move_velocity = ROTATE_VELOCITY
        elif self.rotating:
            self.rotating = False

    def reset(self) -> None:
        """Return the moving triangle to its start and resume sliding."""
        self.move_velocity = MOVE_VELOCITY
        self.rotation = INITIAL_ROTATION
        self.moving_triangle.reset()
        self.moving = True
        self.capture_center = True

    def update(self) -> None:
        """Advance one frame."""
        if self.moving:
            self.move_triangle()
        elif self.rotating:
            if self.capture_center:
                apex = self.moving_triangle.vertices[0]
                self.center_x = apex.x
                self.center_y = apex.y + self.radius
                self.capture_center = False
            self.rotate_triangle()


def _mean_color(triangle: Triangle) -> tuple[int, int, int]:
    count = len(triangle.vertices)
    return tuple(
        sum(vertex.color[channel] for vertex in triangle.vertices) // count
        for channel in range(3)
    )


def main(argv: list[str] | None = None) -> int:
    """Run the game: space stops/spins the triangle, R resets, Escape quits."""
    parser = argparse.ArgumentParser(prog="shapes", description="Triangle game")
    parser.add_argument("--width", type=int, default=1920)
    parser.add_argument("--height", type=int, default=1080)
    args = parser.parse_args(argv)

    import pygame

    game = ShapeGame(args.width, args.height)
    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height))
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        game.toggle()
                    elif event.key == pygame.K_r:
                        game.reset()
            game.update()
            screen.fill((0, 0, 0))
            for triangle in (*game.center_triangles, game.moving_triangle):
                points = [(vertex.x, vertex.y) for vertex in triangle.vertices]
                pygame.draw.polygon(screen, _mean_color(triangle), points)
            pygame.display.flip()
            clock.tick(120)
    finally:
        pygame.quit()
    return 0