# -*- coding: utf-8 -*-
"""
Screen geometry and input helpers shared by the front-end
- no pygame / OpenGL calls, so the math can be tested headless
"""

from maze import Direction


def compute_layout(width, height, cols, rows):
    """
    Fit a cols x rows grid in a width x height window
    Return (cell_size, h_margin, v_margin)
    - keep a free cell-sized band around the maze
    - center the maze on both axes
    """
    if width / cols > height / rows:
        cell_size = height / (rows + 1)
    else:
        cell_size = width / (cols + 1)

    h_margin = (width - cols * cell_size) / 2.0
    v_margin = (height - rows * cell_size) / 2.0

    return cell_size, h_margin, v_margin


def cell_center(col, row, cell_size, h_margin, v_margin):
    """
    Screen (x, y) of the center of cell (col, row)
    """
    x = h_margin + (col + 0.5) * cell_size
    y = v_margin + (row + 0.5) * cell_size
    return x, y


def direction_from_drag(dx, dy, cell_size):
    """
    Turn a drag vector (pointer minus player center) into a Direction
    - nothing happens until the pointer is more than one cell away
    - the dominant axis wins, ties go vertical
    - screen y grows downwards, so positive dy is DOWN
    """
    abs_dx = abs(dx)
    abs_dy = abs(dy)

    if abs_dx <= cell_size and abs_dy <= cell_size:
        return None

    if abs_dx > abs_dy:
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP
