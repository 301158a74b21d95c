#
# PROJECT: wireframe-cube
# MODULE: wireframe_cube/controls.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses
import logging
import os
import select
import sys

from .camera import RenderState

logger = logging.getLogger(__name__)

KEY_ESC = 27
KEY_ROTATE_STEP = 0.1   # radians per key press
FOCAL_STEP = 2.0

PITCH_UP = {ord('w'), curses.KEY_UP}
PITCH_DOWN = {ord('s'), curses.KEY_DOWN}
YAW_LEFT = {ord('a'), curses.KEY_LEFT}
YAW_RIGHT = {ord('d'), curses.KEY_RIGHT}
ROLL_LEFT = {ord('z')}
ROLL_RIGHT = {ord('c')}
ZOOM_IN = {ord('+'), ord('=')}
ZOOM_OUT = {ord('-')}
TOGGLE = {ord(' ')}
EXIT = {ord('q'), KEY_ESC}

# ESC [ A..D as sent by most terminals for the arrow keys
_ARROWS = {'A': curses.KEY_UP, 'B': curses.KEY_DOWN,
           'C': curses.KEY_RIGHT, 'D': curses.KEY_LEFT}


def apply_keys(state: RenderState, keys, rotate_step=KEY_ROTATE_STEP, focal_step=FOCAL_STEP):
    """
    Apply one frame's worth of pressed keys to the render state.
    An empty set leaves the state untouched.
    """
    if not keys:
        return
    if keys & EXIT:
        state.request_exit()
        return
    dpitch = rotate_step * (bool(keys & PITCH_UP) - bool(keys & PITCH_DOWN))
    dyaw = rotate_step * (bool(keys & YAW_RIGHT) - bool(keys & YAW_LEFT))
    droll = rotate_step * (bool(keys & ROLL_RIGHT) - bool(keys & ROLL_LEFT))
    if dpitch or dyaw or droll:
        state.rotate(dpitch, dyaw, droll)
    dfocal = focal_step * (bool(keys & ZOOM_IN) - bool(keys & ZOOM_OUT))
    if dfocal:
        state.adjust_focal_length(dfocal)
    if keys & TOGGLE:
        state.toggle_animation()
        logger.debug("Animation %s", state.loop_state.value)


def decode_keys(text: str):
    """Turn raw terminal input into key codes, folding arrow escapes."""
    keys = set()
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == '\x1b' and text[i + 1:i + 2] == '[' and text[i + 2:i + 3] in _ARROWS:
            keys.add(_ARROWS[text[i + 2]])
            i += 3
            continue
        keys.add(ord(ch.lower()) if ch.isalpha() else ord(ch))
        i += 1
    return keys


class NullKeySource:
    """No keyboard: the loop runs until interrupted or the frame limit."""

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def poll(self):
        return set()


class CursesKeySource(NullKeySource):
    """Non-blocking getch on the curses screen, drained once per frame."""

    def __init__(self, stdscr):
        self.stdscr = stdscr
        stdscr.nodelay(True)
        stdscr.keypad(True)

    def poll(self):
        keys = set()
        while True:
            key = self.stdscr.getch()
            if key == -1:
                break
            if 0 <= key < 256 and chr(key).isalpha():
                key = ord(chr(key).lower())
            keys.add(key)
        return keys


class StdinKeySource(NullKeySource):
    """
    Reads stdin in cbreak mode without blocking, for the legacy compositor
    which writes straight to stdout. Terminal settings are restored on exit.
    """

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdin
        self.old_settings = None
        self.fd = None

    def __enter__(self):
        import termios
        import tty
        try:
            self.fd = self.stream.fileno()
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except (termios.error, OSError, ValueError) as e:
            logger.info("stdin is not a terminal (%s), keyboard disabled", e)
            self.fd = None
        return self

    def __exit__(self, *exc):
        if self.old_settings is not None:
            import termios
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            self.old_settings = None
        return False

    def poll(self):
        if self.fd is None:
            return set()
        chunks = []
        while select.select([self.fd], [], [], 0)[0]:
            data = os.read(self.fd, 64)
            if not data:
                break
            chunks.append(data.decode('utf-8', errors='ignore'))
        return decode_keys(''.join(chunks))
