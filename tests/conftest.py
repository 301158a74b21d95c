import logging

import pytest

from wireframe_cube.camera import RenderState
from wireframe_cube.config import RenderConfig


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("wireframe_cube")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def config():
    return RenderConfig(view_width=25, view_height=25, focal_length=64.0,
                        legacy_mode=True, color=False)


@pytest.fixture
def state():
    return RenderState(focal_length=64.0)


class FakeScreen:
    """Records addstr calls the way a curses window would receive them."""

    def __init__(self, rows=40, cols=80, keys=()):
        self.rows, self.cols = rows, cols
        self.writes = {}
        self.keys = list(keys)
        self.erased = 0
        self.refreshed = 0

    def getmaxyx(self):
        return self.rows, self.cols

    def addstr(self, y, x, text, attr=0):
        for i, ch in enumerate(text):
            self.writes[(y, x + i)] = ch

    def erase(self):
        self.erased += 1
        self.writes.clear()

    def refresh(self):
        self.refreshed += 1

    def nodelay(self, flag):
        pass

    def keypad(self, flag):
        pass

    def getch(self):
        return self.keys.pop(0) if self.keys else -1

    def row_text(self, y):
        return ''.join(self.writes.get((y, x), '') for x in range(self.cols))


@pytest.fixture
def fake_screen():
    return FakeScreen()
