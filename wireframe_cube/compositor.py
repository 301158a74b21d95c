#
# PROJECT: wireframe-cube
# MODULE: wireframe_cube/compositor.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses
import logging
import sys

from .canvas import Canvas
from .camera import RenderState
from .color import init_colors
from .config import RenderConfig
from .errors import DisplayError

logger = logging.getLogger(__name__)

CLEAR_HOME = "\x1b[2J\x1b[1;1H"


def status_line(state: RenderState) -> str:
    pitch, yaw, roll = state.angles_degrees()
    paused = "" if state.animating else " | PAUSED"
    return (f" Focal length: {state.focal_length:.1f}"
            f" | Pitch: {pitch:.1f} Yaw: {yaw:.1f} Roll: {roll:.1f}{paused} ")


class Compositor:
    """Serializes a rendered canvas to the display."""

    def start(self):
        pass

    def present(self, canvas: Canvas, state: RenderState):
        raise NotImplementedError

    def end_frame(self):
        pass

    def stop(self):
        pass


class FullReprintCompositor(Compositor):
    """
    Legacy mode: every frame is one text blob, each cell followed by a
    space and each row by a line break, written with a single call.
    """

    def __init__(self, stream=None, clear_screen: bool = True):
        self.stream = stream if stream is not None else sys.stdout
        self.clear_screen = clear_screen

    def _write(self, text):
        try:
            self.stream.write(text)
            self.stream.flush()
        except OSError as e:
            raise DisplayError(f"failed to write frame: {e}") from e

    @staticmethod
    def compose(canvas: Canvas) -> str:
        return ''.join(''.join(cell + ' ' for cell in row) + '\n' for row in canvas.rows())

    def start(self):
        if self.clear_screen:
            self._write(CLEAR_HOME)

    def present(self, canvas, state):
        self._write(self.compose(canvas))

    def end_frame(self):
        # Clear after the frame has been shown, before the next one.
        if self.clear_screen:
            self._write(CLEAR_HOME)


class PartialUpdateCompositor(Compositor):
    """
    Fast mode on a curses screen.

    Row 0 is the status line. Cell (x, y) is written at column x*2, row y+1.
    Every cell is rewritten each frame; there is no diff against the
    previous frame.
    """

    def __init__(self, stdscr, config: RenderConfig):
        self.stdscr = stdscr
        self.config = config
        self.pairs = {}

    def start(self):
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor")
        self.pairs = init_colors(self.config)
        self.stdscr.erase()

    def _attr(self, glyph):
        pair = self.pairs.get(glyph)
        return curses.color_pair(pair) if pair else curses.A_NORMAL

    def _put(self, row, col, text, attr):
        try:
            self.stdscr.addstr(row, col, text, attr)
        except curses.error as e:
            raise DisplayError(f"failed to write at row {row}, column {col}: {e}") from e

    def present(self, canvas, state):
        scr = self.stdscr
        th, tw = scr.getmaxyx()
        if self.config.clear_screen:
            scr.erase()

        # The bottom-right corner cannot be written without curses raising,
        # so the last usable column is tw - 2. The header is padded to that
        # width so a shorter line overwrites the tail of a longer one.
        width = max(0, tw - 1)
        hdr = status_line(state).ljust(width)[:width]
        if th > 0 and hdr:
            self._put(0, 0, hdr, curses.A_BOLD)

        for y, row in enumerate(canvas.rows()):
            sy = y + 1
            if sy >= th:
                break
            for x, glyph in enumerate(row):
                sx = x * 2
                if sx > tw - 2:
                    break
                self._put(sy, sx, glyph, self._attr(glyph))

        try:
            scr.refresh()
        except curses.error as e:
            raise DisplayError(f"failed to refresh screen: {e}") from e


def make_compositor(config: RenderConfig, stdscr=None, stream=None) -> Compositor:
    """Pick the compositor for the configured mode."""
    if config.legacy_mode:
        logger.info("Using full-reprint compositor")
        return FullReprintCompositor(stream, clear_screen=config.clear_screen)
    if stdscr is None:
        raise ValueError("fast mode needs a curses screen")
    logger.info("Using partial-update compositor (color=%s)", config.color)
    return PartialUpdateCompositor(stdscr, config)
