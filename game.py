# -*- coding: utf-8 -*-
"""
Project: Maze Runner
Start Date: 10/17/2026

Brief Description:
    - Top-down maze game: reach the red exit, get a new maze
    - Stack: pygame, PyOpenGL
"""

# Pylint notes:
# - Wildcard imports from pygame.locals and PyOpenGL are used for
#   convenience in a real-time graphics script.
# - These modules are C extensions / dynamic, so pylint cannot reliably
#   see the symbols and reports them as undefined.
# pylint: disable=wildcard-import, unused-wildcard-import, no-member, undefined-variable

import sys
import time
import argparse

import pygame
from pygame.locals import *

from OpenGL.GL import *

from maze import ConfigurationError, Direction, Navigator
from controls import cell_center, compute_layout, direction_from_drag


# -----------------------------
# Configuration
# -----------------------------
WINDOW_WIDTH = 700
WINDOW_HEIGHT = 1000

# Maze size
MAZE_COLS = 7
MAZE_ROWS = 10

WALL_THICKNESS = 4.0

BACKGROUND_COLOR = (0.0, 0.8, 0.0)
WALL_COLOR = (0.0, 0.0, 0.0)
PLAYER_COLOR = (0.0, 0.0, 1.0)
EXIT_COLOR = (1.0, 0.0, 0.0)

EXIT_MESSAGE = "You've reached your destination!"
NOTICE_SECONDS = 2.0

TARGET_FPS = 60

KEY_DIRECTIONS = {
    K_UP: Direction.UP,
    K_w: Direction.UP,
    K_DOWN: Direction.DOWN,
    K_s: Direction.DOWN,
    K_LEFT: Direction.LEFT,
    K_a: Direction.LEFT,
    K_RIGHT: Direction.RIGHT,
    K_d: Direction.RIGHT,
}


# -----------------------------
# Maze drawing
# -----------------------------
class MazeView:
    """
    MazeView draws the navigator state with OpenGL
    - orthographic projection in window pixels, (0, 0) top-left
    - walls as lines, player and exit as inset squares
    """

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.cell_size = 0.0
        self.h_margin = 0.0
        self.v_margin = 0.0

    def update_layout(self, cols, rows):
        self.cell_size, self.h_margin, self.v_margin = compute_layout(
            self.width, self.height, cols, rows
        )

    def player_center(self, player):
        return cell_center(player.col, player.row,
                           self.cell_size, self.h_margin, self.v_margin)

    def draw(self, navigator):
        """
        Draw walls, exit and player for the current maze
        """
        self.update_layout(navigator.cols, navigator.rows)

        glPushMatrix()
        glTranslatef(self.h_margin, self.v_margin, 0.0)

        glColor3f(*WALL_COLOR)
        self._draw_all_walls(navigator.grid)

        self._draw_marker(navigator.exit, EXIT_COLOR)
        self._draw_marker(navigator.player, PLAYER_COLOR)

        glPopMatrix()

    def _draw_all_walls(self, grid):
        """
        Draw each wall once:
        - for every cell, draw N and W walls if present
        - for the last row, also draw S walls
        - for the last column, also draw E walls
        """
        size = self.cell_size
        cols, rows = grid.dimensions()

        glLineWidth(WALL_THICKNESS)
        glBegin(GL_LINES)
        for cell in grid.cells():
            x0 = cell.col * size
            y0 = cell.row * size
            x1 = x0 + size
            y1 = y0 + size

            if cell.top_wall:
                glVertex2f(x0, y0)
                glVertex2f(x1, y0)
            if cell.left_wall:
                glVertex2f(x0, y0)
                glVertex2f(x0, y1)
            if cell.row == rows - 1 and cell.bottom_wall:
                glVertex2f(x0, y1)
                glVertex2f(x1, y1)
            if cell.col == cols - 1 and cell.right_wall:
                glVertex2f(x1, y0)
                glVertex2f(x1, y1)
        glEnd()

    def _draw_marker(self, cell, color):
        """
        Filled square inside cell, a tenth of a cell away from its edges
        """
        size = self.cell_size
        margin = size / 10.0

        x0 = cell.col * size + margin
        y0 = cell.row * size + margin
        x1 = (cell.col + 1) * size - margin
        y1 = (cell.row + 1) * size - margin

        glColor3f(*color)
        glBegin(GL_QUADS)
        glVertex2f(x0, y0)
        glVertex2f(x1, y0)
        glVertex2f(x1, y1)
        glVertex2f(x0, y1)
        glEnd()


# -----------------------------
# Game (main loop + glue)
# -----------------------------
class Game:
    """
    Game ties together:
        - Window + OpenGL setup
        - Navigator (maze + player) and MazeView
        - Event handling, update, render loop
    """

    def __init__(self, navigator, width=WINDOW_WIDTH, height=WINDOW_HEIGHT):
        self.navigator = navigator

        pygame.init()
        pygame.display.set_caption("Maze Runner")

        self.font = pygame.font.SysFont("consolas", 20)

        flags = DOUBLEBUF | OPENGL  # pylint: disable=unsupported-binary-operation
        pygame.display.set_mode((width, height), flags)
        self.width = width
        self.height = height
        self.running = True

        # OpenGL setup
        self.init_opengl()

        self.view = MazeView(width, height)
        self.view.update_layout(navigator.cols, navigator.rows)

        # Exit notification
        self.notice = ""
        self.notice_until = 0.0

        # Timing
        self.clock = pygame.time.Clock()
        self.start_time = time.time()
        self.elapsed_time = 0.0

    def init_opengl(self):
        """
        Configure a 2D orthographic projection in window pixels.
        """
        glViewport(0, 0, self.width, self.height)
        glDisable(GL_DEPTH_TEST)

        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(0, self.width, self.height, 0, -1, 1)

        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()

    def handle_events(self):
        """
        Handle pygame events: keys, mouse drags, quit.
        """
        for event in pygame.event.get():
            if event.type == QUIT:
                self.running = False

            elif event.type == KEYDOWN:
                if event.key == K_ESCAPE:
                    self.running = False

                elif event.key in KEY_DIRECTIONS:
                    self.try_move(KEY_DIRECTIONS[event.key])

                # Restart from entrance
                elif event.key == K_r:
                    self.restart_from_entrance()
                    print("Restarted from entrance")

                # Regenerate maze
                elif event.key == K_n:
                    self.regenerate_maze()
                    print("Regenerated maze")

            elif event.type == MOUSEMOTION and event.buttons[0]:
                self.handle_drag(*event.pos)

    def handle_drag(self, x, y):
        """
        Move toward the pointer while the left button is held.
        """
        px, py = self.view.player_center(self.navigator.player)
        direction = direction_from_drag(x - px, y - py, self.view.cell_size)
        if direction is not None:
            self.try_move(direction)

    def try_move(self, direction):
        _, reached_exit = self.navigator.move(direction)
        if reached_exit:
            self.on_exit_reached()

    def on_exit_reached(self):
        """
        Tell the player, then swap in a fresh maze.
        """
        minutes, seconds = divmod(int(self.elapsed_time), 60)
        print(f"{EXIT_MESSAGE} ({self.navigator.moves} moves, {minutes:02d}:{seconds:02d})")
        self.notice = EXIT_MESSAGE
        self.notice_until = time.time() + NOTICE_SECONDS
        self.regenerate_maze()

    def restart_from_entrance(self):
        """
        Reset player to entrance and reset timer.
        """
        self.navigator.restart()
        self.start_time = time.time()
        self.elapsed_time = 0.0

    def regenerate_maze(self):
        """
        Create a new maze, move player to entrance, reset timer.
        """
        self.navigator.new_maze()
        self.view.update_layout(self.navigator.cols, self.navigator.rows)
        self.start_time = time.time()
        self.elapsed_time = 0.0

    def update(self):
        """
        Update timer and expire the notification.
        """
        now = time.time()
        self.elapsed_time = now - self.start_time
        if self.notice and now >= self.notice_until:
            self.notice = ""

    def draw_scene(self):
        """
        Render the maze and HUD.
        """
        glClearColor(*BACKGROUND_COLOR, 1.0)
        glClear(GL_COLOR_BUFFER_BIT)

        glLoadIdentity()
        self.view.draw(self.navigator)

        self.draw_hud()

    def _draw_text_2d(self, x, y, text, color=(255, 255, 255, 255)):
        """
        Draw text at screen coordinates (x, y) using a temporary texture.
        (0,0) is top-left of the window.
        """
        if not text:
            return

        # Render text to a pygame surface
        surface = self.font.render(text, True, color[:3])
        text_data = pygame.image.tostring(surface, "RGBA", False)
        w, h = surface.get_size()

        # Create a temporary texture
        tex_id = glGenTextures(1)
        glBindTexture(GL_TEXTURE_2D, tex_id)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_LINEAR)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_LINEAR)
        glTexImage2D(GL_TEXTURE_2D, 0, GL_RGBA, w, h, 0,
                     GL_RGBA, GL_UNSIGNED_BYTE, text_data)

        glEnable(GL_TEXTURE_2D)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)

        glColor4f(1.0, 1.0, 1.0, 1.0)

        glBegin(GL_QUADS)
        glTexCoord2f(0.0, 0.0)
        glVertex2f(x, y)
        glTexCoord2f(1.0, 0.0)
        glVertex2f(x + w, y)
        glTexCoord2f(1.0, 1.0)
        glVertex2f(x + w, y + h)
        glTexCoord2f(0.0, 1.0)
        glVertex2f(x, y + h)
        glEnd()

        glDisable(GL_BLEND)
        glDisable(GL_TEXTURE_2D)
        glBindTexture(GL_TEXTURE_2D, 0)
        glDeleteTextures([tex_id])

    def draw_hud(self):
        """
        Draw HUD with elapsed time, move count and the exit notification.
        """
        total_seconds = int(self.elapsed_time)
        minutes = total_seconds // 60
        seconds = total_seconds % 60
        time_text = f"Time: {minutes:02d}:{seconds:02d}"

        player = self.navigator.player
        moves_text = f"Moves: {self.navigator.moves}  Cell: ({player.col}, {player.row})"

        glLoadIdentity()
        self._draw_text_2d(10, 10, time_text)
        self._draw_text_2d(10, 35, moves_text)
        if self.notice:
            self._draw_text_2d(10, self.height - 35, self.notice, (255, 255, 0, 255))

    def run(self):
        """
        Main game loop
        """
        while self.running:
            self.clock.tick(TARGET_FPS)

            self.handle_events()
            self.update()
            self.draw_scene()

            pygame.display.flip()

        pygame.quit()


# -----------------------------
# Entry point
# -----------------------------
def _parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Walk a random maze to its exit")
    parser.add_argument("--cols", type=int, default=MAZE_COLS)
    parser.add_argument("--rows", type=int, default=MAZE_ROWS)
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for reproducible mazes")
    parser.add_argument("--width", type=int, default=WINDOW_WIDTH)
    parser.add_argument("--height", type=int, default=WINDOW_HEIGHT)
    args = parser.parse_args(argv)

    if args.width <= 0 or args.height <= 0:
        parser.error("window width and height must be positive")

    try:
        args.navigator = Navigator(args.cols, args.rows, seed=args.seed)
    except ConfigurationError as exc:
        parser.error(str(exc))
    return args


def main(argv=None):
    args = _parse_args(argv)
    Game(args.navigator, width=args.width, height=args.height).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
