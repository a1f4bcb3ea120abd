# minigames

Four small games and visualizers, each opening a window of its own with pygame:

- **Game of Life**: a randomly seeded grid that advances one generation per frame while the space bar is held. Cells on the border never change.
- **Shapes**: a triangle slides up and down the screen above a fixed pair of centre triangles. Space stops it and starts it spinning in place, space again freezes it, `r` puts it back at the start, `Esc` quits.
- **Maze visualizer**: draw walls, place a start and a finish, generate a random maze, and watch breadth-first or depth-first search reach the finish and trace the path back.
- **Snake**: the classic game with a main menu, pausing, a score and restart.

## Installing

```
pip install .
```

The only runtime dependency is `pygame`.

## Running

```
minigames-life [--width 320] [--height 200] [--scale 4] [--seed N]
minigames-shapes [--width 1920] [--height 1080]
minigames-maze [--seed N]
minigames-snake [--seed N]
```

`--seed` makes the random grid, maze or food placement repeatable.

### Maze visualizer

The board is on the left and a column of buttons on the right. Keys do the
same as the buttons:

| Key | Action |
| --- | --- |
| `s` | Start mode: clicking a cell places the start there, clicking it again removes it |
| `f` | Finish mode: the same for the finish cell |
| `m` | Maze mode: click and drag to toggle cells between wall and path |
| `g` | generate a random maze (clears start and finish) |
| `b` / `d` | choose breadth-first / depth-first search |
| `e` | run the search, once start and finish are placed |
| `r` | clear the board and the last search |
| `Esc` | quit |

While a search is running, closing the window or pressing any key stops it
and ends the program.

### Snake

Move with `w`/`a`/`s`/`d` or the arrow keys. Running into a wall is forgiven
once: the snake waits in place for one move and only dies if the next move is
still out of bounds. Each piece of food is worth 10 points.

On the menu, click Play (or Resume) or Quit. `Esc` during play pauses back to
the menu; `Esc` on the paused menu resumes, and on the first menu it quits.
On the game-over screen `r` starts a new round and `Esc` quits.

## Using the pieces

The game logic does not need a window and can be driven directly:

```python
from minigames.life import LifeGrid
from minigames.maze_board import MazeBoard
from minigames.maze_search import SearchKind, create_search

grid = LifeGrid(10, 10)
grid.set_pattern(4, 5, "###")
grid.step()
print(sorted(grid.live_cells()))   # the blinker turned upright

board = MazeBoard(10, 10, 100, 100)
board.set_start(0, 0)
board.set_finish(9, 9)
search = create_search(SearchKind.BFS, board)
search.begin_search()
print(search.found_finish, search.path)
```

- `minigames.life`: `LifeGrid`.
- `minigames.shapes`: `Triangle`, `TriangleKind`, `ShapeGame` (`update`, `toggle`, `reset`).
- `minigames.maze_board`: `MazeBoard`, `CellType`.
- `minigames.maze_generator`: `MazeGenerator`, which carves a maze into a `MazeBoard`.
- `minigames.maze_search`: `BreadthFirstSearch`, `DepthFirstSearch`, `create_search`, `build_adjacency`. `begin_search` and `search` take optional `on_visit`, `on_path` and `keep_going` callbacks.
- `minigames.maze_app`: `MazeVisualizer`, `ButtonPanel`.
- `minigames.snake_board`: `SnakeBoard`, `spawn_food`.
- `minigames.snake`: `Snake`, `Direction`.
- `minigames.snake_app`: `SnakeGame`, `Menu`.

## What it does not do

Nothing is saved. Scores, boards and mazes last only while the window is
open, and there is no high-score table. There is no sound.

## Tests

```
pip install .[test]
pytest
```