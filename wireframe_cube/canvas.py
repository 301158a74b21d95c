#
# PROJECT: wireframe-cube
# MODULE: wireframe_cube/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

EMPTY = ' '
EDGE = 'X'
VERTEX = 'O'


class Canvas:
    """
    Grid buffer of one glyph per cell, indexed grid[y][x].

    The row lists are allocated once; clear() resets their content in place
    so the same storage is reused every frame.
    """
    __slots__ = ['w', 'h', 'grid']

    def __init__(self, w, h):
        self.w, self.h = w, h
        self.grid = [[EMPTY] * w for _ in range(h)]

    def clear(self):
        for row in self.grid:
            row[:] = [EMPTY] * self.w

    def in_bounds(self, x, y):
        return 0 <= x < self.w and 0 <= y < self.h

    def set_cell(self, x, y, glyph):
        # Negative indices would wrap in Python, so check both ends.
        if not self.in_bounds(x, y): return
        self.grid[y][x] = glyph

    def get_cell(self, x, y):
        return self.grid[y][x]

    def rows(self):
        return self.grid

    def cells(self, glyph):
        """All (x, y) positions currently holding the given glyph."""
        return [(x, y)
                for y, row in enumerate(self.grid)
                for x, c in enumerate(row) if c == glyph]
