[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minigames"
version = "0.1.0"
description = "Small games and visualizers: Game of Life, a spinning-triangle toy, a maze search visualizer and Snake."
requires-python = ">=3.10"
keywords = ["games", "snake", "maze", "game-of-life", "bfs", "dfs", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
minigames-life = "minigames.life:main"
minigames-shapes = "minigames.shapes:main"
minigames-maze = "minigames.maze_app:main"
minigames-snake = "minigames.snake_app:main"

[tool.hatch.build.targets.wheel]
packages = ["minigames"]

[tool.pytest.ini_options]
addopts = "-ra"
