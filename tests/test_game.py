# tests/test_game.py
import os
import sys

import pytest

# Ensure project root (where game.py lives) is on sys.path
CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(CURRENT_DIR)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

pytest.importorskip("pygame")
pytest.importorskip("OpenGL.GL")

import game
from maze import Direction, Navigator


class _ViewStub:
    """
    Records layout updates instead of touching OpenGL
    """

    def __init__(self):
        self.layouts = []
        self.cell_size = 10.0

    def update_layout(self, cols, rows):
        self.layouts.append((cols, rows))

    def player_center(self, player):
        return (player.col + 0.5) * self.cell_size, (player.row + 0.5) * self.cell_size


def _headless_game(navigator):
    g = game.Game.__new__(game.Game)
    g.navigator = navigator
    g.view = _ViewStub()
    g.notice = ""
    g.notice_until = 0.0
    g.start_time = 0.0
    g.elapsed_time = 0.0
    return g


def _walk_to_exit(g):
    """
    Take the two-move path from (0,0) to (1,1) of a 2x2 maze
    """
    nav = g.navigator
    grid = nav.grid
    via_right = not grid.has_wall(nav.player, Direction.RIGHT) and not grid.has_wall(
        grid.cell_at(1, 0), Direction.DOWN
    )
    if via_right:
        g.try_move(Direction.RIGHT)
        g.try_move(Direction.DOWN)
    else:
        g.try_move(Direction.DOWN)
        g.try_move(Direction.RIGHT)


def test_parse_args_defaults():
    args = game._parse_args(["--seed", "3"])

    assert (args.navigator.cols, args.navigator.rows) == (game.MAZE_COLS, game.MAZE_ROWS)
    assert (args.width, args.height) == (game.WINDOW_WIDTH, game.WINDOW_HEIGHT)


@pytest.mark.parametrize(
    "argv",
    [
        ["--cols", "1", "--rows", "1"],
        ["--cols", "0"],
        ["--rows", "-3"],
        ["--width", "-5"],
        ["--height", "0"],
    ],
)
def test_parse_args_rejects_bad_sizes(argv):
    with pytest.raises(SystemExit) as excinfo:
        game._parse_args(argv)

    assert excinfo.value.code == 2


def test_on_exit_reached_shows_notice_and_regenerates(capsys):
    g = _headless_game(Navigator(3, 3, seed=4))
    old_grid = g.navigator.grid

    g.on_exit_reached()

    assert g.notice == game.EXIT_MESSAGE
    assert g.notice_until > 0.0
    assert g.navigator.grid is not old_grid
    assert g.navigator.player is g.navigator.grid.cell_at(0, 0)
    assert g.view.layouts == [(3, 3)]
    assert game.EXIT_MESSAGE in capsys.readouterr().out


def test_walking_onto_exit_builds_new_maze():
    # Every 2x2 perfect maze reaches (1,1) in two moves from (0,0)
    g = _headless_game(Navigator(2, 2, seed=9))
    old_grid = g.navigator.grid

    _walk_to_exit(g)

    assert g.navigator.grid is not old_grid
    assert g.notice == game.EXIT_MESSAGE
    assert g.navigator.moves == 0


def test_notice_expires():
    g = _headless_game(Navigator(2, 2, seed=0))
    g.notice = game.EXIT_MESSAGE
    g.notice_until = 0.0

    g.update()

    assert g.notice == ""


def test_drag_moves_player():
    g = _headless_game(Navigator(2, 2, seed=5))
    nav = g.navigator
    right_open = not nav.grid.has_wall(nav.player, Direction.RIGHT)

    # Pointer well to the right of the player's center
    g.handle_drag(40.0, 5.0)

    if right_open:
        assert nav.player.coords == (1, 0)
    else:
        assert nav.player.coords == (0, 0)
