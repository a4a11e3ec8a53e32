# -*- coding: utf-8 -*-
"""
Project: Maze Runner
Start Date: 10/17/2026

Brief Description:
    - Grid / wall data model, perfect-maze generator and player navigation
    - No drawing or input handling here (see game.py), so it imports headless
"""

import random
from enum import Enum


# -----------------------------
# Errors
# -----------------------------
class MazeError(Exception):
    """
    Base class for every error raised by the maze core
    """


class ConfigurationError(MazeError, ValueError):
    """
    Invalid grid dimensions, or a grid that cannot be generated/played
    """


class OutOfRangeError(MazeError, IndexError):
    """
    Coordinates outside the grid, or a cell that belongs to another grid
    """


class InvalidAdjacencyError(MazeError, ValueError):
    """
    Wall removal requested between cells that are not orthogonal neighbours
    """


# Wall key -> (dcol, drow) of the neighbour behind that wall
WALL_OFFSETS = {
    "N": (0, -1),
    "S": (0, 1),
    "W": (-1, 0),
    "E": (1, 0),
}


def check_dimensions(cols, rows):
    """
    Reject anything but positive integer grid dimensions
    """
    for name, value in (("cols", cols), ("rows", rows)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(f"{name} must be an integer, got {value!r}")
        if value <= 0:
            raise ConfigurationError(f"{name} must be positive, got {value}")


# -----------------------------
# Directions
# -----------------------------
class Direction(Enum):
    """
    Movement directions; the value is the wall key crossed when moving
    """
    UP = "N"
    DOWN = "S"
    LEFT = "W"
    RIGHT = "E"

    @property
    def dcol(self):
        return WALL_OFFSETS[self.value][0]

    @property
    def drow(self):
        return WALL_OFFSETS[self.value][1]

    @classmethod
    def parse(cls, value):
        """
        Accept a Direction or its name ("up", "LEFT", ...)
        """
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {value!r}") from None


# -----------------------------
# Cell
# -----------------------------
class Cell:
    """
    One grid position
    - col, row: coordinates inside the owning grid
    - visited: set by the generator while carving
    Wall flags are read from the owning grid, which stores each wall once
    """

    def __init__(self, grid, col, row):
        self.grid = grid
        self.col = col
        self.row = row
        self.visited = False

    @property
    def coords(self):
        return self.col, self.row

    @property
    def walls(self):
        """
        Wall flags keyed like {"N": True, "E": False, ...}
        """
        return {key: self.grid.has_wall(self, key) for key in ("N", "E", "S", "W")}

    @property
    def top_wall(self):
        return self.grid.has_wall(self, "N")

    @property
    def left_wall(self):
        return self.grid.has_wall(self, "W")

    @property
    def bottom_wall(self):
        return self.grid.has_wall(self, "S")

    @property
    def right_wall(self):
        return self.grid.has_wall(self, "E")

    def __repr__(self):
        return f"Cell(col={self.col}, row={self.row})"


# -----------------------------
# Grid data structure
# -----------------------------
class Grid:
    """
    Grid holds the cells and the wall state
    - cols x rows cells, indexed [col][row]
    - walls live on edges: a passage set of unordered coordinate pairs,
      so the two sides of a wall can never disagree
    - the outer boundary is always closed
    """

    def __init__(self, cols, rows):
        check_dimensions(cols, rows)
        self.cols = cols
        self.rows = rows

        self._cells = [
            [Cell(self, col, row) for row in range(rows)]
            for col in range(cols)
        ]
        self._passages = set()

    @classmethod
    def create(cls, cols, rows):
        """
        New grid with every wall present and every cell unvisited
        """
        return cls(cols, rows)

    # ---------- Queries ----------

    def dimensions(self):
        return self.cols, self.rows

    def in_bounds(self, col, row):
        """
        Check if (col, row) is inside the grid
        """
        return 0 <= col < self.cols and 0 <= row < self.rows

    def cell_at(self, col, row):
        if not self.in_bounds(col, row):
            raise OutOfRangeError(
                f"Cell ({col}, {row}) outside {self.cols}x{self.rows} grid"
            )
        return self._cells[col][row]

    def cells(self):
        """
        Iterate every cell, column by column
        """
        for column in self._cells:
            yield from column

    def neighbours(self, cell):
        """
        Existing orthogonal neighbours of cell: left, right, top, bottom
        """
        self._check_owned(cell)
        result = []
        for key in ("W", "E", "N", "S"):
            dcol, drow = WALL_OFFSETS[key]
            col, row = cell.col + dcol, cell.row + drow
            if self.in_bounds(col, row):
                result.append(self._cells[col][row])
        return result

    def unvisited_neighbours(self, cell):
        return [n for n in self.neighbours(cell) if not n.visited]

    def has_wall(self, cell, direction):
        """
        True if the wall of cell on the given side is present
        - direction: wall key ("N", "E", "S", "W") or a Direction
        """
        self._check_owned(cell)
        key = direction.value if isinstance(direction, Direction) else direction
        dcol, drow = WALL_OFFSETS[key]
        col, row = cell.col + dcol, cell.row + drow
        if not self.in_bounds(col, row):
            return True
        return _edge(cell.coords, (col, row)) not in self._passages

    def open_passages(self):
        """
        Snapshot of removed walls, each a frozenset of two (col, row) pairs
        """
        return set(self._passages)

    # ---------- Mutation ----------

    def remove_wall_between(self, a, b):
        """
        Open the wall shared by two orthogonally adjacent cells
        """
        self._check_owned(a)
        self._check_owned(b)
        if abs(a.col - b.col) + abs(a.row - b.row) != 1:
            raise InvalidAdjacencyError(f"{a!r} and {b!r} are not adjacent")
        self._passages.add(_edge(a.coords, b.coords))

    def _check_owned(self, cell):
        if cell.grid is not self:
            raise OutOfRangeError(f"{cell!r} belongs to a different grid")


def _edge(a, b):
    return frozenset((a, b))


# -----------------------------
# Generation
# -----------------------------
class MazeGenerator:
    """
    Randomized depth-first backtracker
    - starts at (0, 0) and carves into a random unvisited neighbour
    - backtracks through an explicit stack when stuck
    - the opened walls form a spanning tree: exactly one path between any
      two cells
    """

    def __init__(self, seed=None, rng=None):
        if seed is not None and rng is not None:
            raise ConfigurationError("Pass either seed or rng, not both")
        # Local RNG so seeding does not affect global random state
        self.rng = rng if rng is not None else random.Random(seed)

    def generate(self, grid):
        """
        Carve a perfect maze into an unvisited grid, in place
        Returns the same grid with every cell visited
        """
        if any(cell.visited for cell in grid.cells()):
            raise ConfigurationError("Grid has already been generated")

        current = grid.cell_at(0, 0)
        current.visited = True
        stack = []

        while True:
            candidates = grid.unvisited_neighbours(current)
            if candidates:
                chosen = self.rng.choice(candidates)
                grid.remove_wall_between(current, chosen)
                stack.append(current.coords)
                current = chosen
                current.visited = True
            elif stack:
                current = grid.cell_at(*stack.pop())
            else:
                break

        return grid


def build_maze(cols, rows, seed=None, rng=None):
    """
    Create and fully generate a new cols x rows maze
    - deterministic for a fixed seed
    - seed and rng are exclusive; rng lets a caller keep one stream across mazes
    - a single-cell grid is rejected since start and exit would coincide
    """
    check_dimensions(cols, rows)
    if cols * rows < 2:
        raise ConfigurationError("A 1x1 maze has its start on the exit")
    return MazeGenerator(seed=seed, rng=rng).generate(Grid.create(cols, rows))


# -----------------------------
# Navigation
# -----------------------------
class Navigator:
    """
    Navigator holds the current maze and the player/exit markers
    - player starts at (0, 0), exit sits at (cols - 1, rows - 1)
    - grid, player and exit are always replaced together
    - exit detection compares cell identity, so a cell from an older grid
      never counts even with the same coordinates
    """

    def __init__(self, cols, rows, seed=None):
        check_dimensions(cols, rows)
        self.cols = cols
        self.rows = rows
        self.rng = random.Random(seed)

        self.grid = None
        self.player = None
        self.exit = None
        self.moves = 0

        self.new_maze()

    def new_maze(self):
        """
        Build a fresh maze and put the player back at the start
        """
        self.reset(build_maze(self.cols, self.rows, rng=self.rng))
        return self.grid

    def reset(self, grid):
        """
        Adopt grid; player and exit move to its corners in the same step
        """
        cols, rows = grid.dimensions()
        if cols * rows < 2:
            raise ConfigurationError("A 1x1 maze has its start on the exit")
        if not all(cell.visited for cell in grid.cells()):
            raise ConfigurationError("Grid has not been generated")
        start = grid.cell_at(0, 0)
        exit_cell = grid.cell_at(cols - 1, rows - 1)

        self.grid, self.player, self.exit = grid, start, exit_cell
        self.cols, self.rows = cols, rows
        self.moves = 0

    def restart(self):
        """
        Back to the start of the current maze
        """
        self.player = self.grid.cell_at(0, 0)
        self.moves = 0

    def place(self, cell):
        """
        Teleport the player to a cell of the current grid
        """
        if cell.grid is not self.grid:
            raise OutOfRangeError(f"{cell!r} is not part of the current maze")
        self.player = cell

    def move(self, direction):
        """
        Step one cell unless a wall is in the way
        Returns (player cell, reached exit)
        """
        direction = Direction.parse(direction)
        cell = self.player
        if not self.grid.has_wall(cell, direction):
            self.player = self.grid.cell_at(
                cell.col + direction.dcol, cell.row + direction.drow
            )
            self.moves += 1
        return self.player, self.has_reached_exit()

    def has_reached_exit(self):
        return self.player is self.exit
