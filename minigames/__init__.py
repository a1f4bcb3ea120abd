"""Small games and visualizers: Game of Life, shapes, maze search and Snake."""

__version__ = "0.1.0"
__all__ = [
    "life",
    "shapes",
    "maze_board",
    "maze_generator",
    "maze_search",
    "maze_app",
    "snake_board",
    "snake",
    "snake_app",
]