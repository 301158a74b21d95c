#
# PROJECT: wireframe-cube
# MODULE: wireframe_cube/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses
import logging
import time

from .camera import RenderState, LoopState
from .canvas import Canvas
from .compositor import Compositor, make_compositor
from .config import RenderConfig
from .controls import apply_keys, CursesKeySource, StdinKeySource
from .mesh import Mesh
from .renderer import Renderer

logger = logging.getLogger(__name__)


class RenderLoop:
    """
    Single-threaded frame loop.

    Per frame: render into the canvas, present it, poll keys, sleep
    1/FPS seconds, then advance the orientation when animating. The loop
    ends when the state reaches EXITING or after max_frames frames.
    """

    def __init__(self, config: RenderConfig, compositor: Compositor, keys,
                 mesh: Mesh = None, sleep=time.sleep, max_frames=None):
        self.config = config
        self.compositor = compositor
        self.keys = keys
        self.mesh = mesh if mesh is not None else Mesh.cube()
        self.sleep = sleep
        self.max_frames = max_frames

        self.renderer = Renderer()
        self.canvas = Canvas(config.view_width, config.view_height)
        self.state = RenderState(focal_length=config.focal_length)
        self.frame_count = 0

    def step(self):
        """Run a single frame."""
        state = self.state
        self.renderer.render(self.canvas, self.mesh, state, self.config)
        self.compositor.present(self.canvas, state)

        before = state.loop_state
        apply_keys(state, self.keys.poll())
        if state.loop_state is not before:
            logger.info("Loop state %s -> %s", before.value, state.loop_state.value)
        if not state.running:
            # Leave the last frame on screen.
            self.frame_count += 1
            return

        self.sleep(self.config.frame_delay)
        self.compositor.end_frame()

        if state.animating:
            step = self.config.rotate_step
            state.rotate(dpitch=step, dyaw=step)
        self.frame_count += 1

        if self.max_frames is not None and self.frame_count >= self.max_frames:
            state.request_exit()

    def run(self):
        logger.info("Render loop starting: %dx%d @ %s fps, %r",
                    self.config.view_width, self.config.view_height,
                    self.config.fps, self.mesh)
        self.compositor.start()
        try:
            while self.state.loop_state is not LoopState.EXITING:
                if self.max_frames is not None and self.frame_count >= self.max_frames:
                    break
                self.step()
        finally:
            self.compositor.stop()
            logger.info("Render loop stopped after %d frames", self.frame_count)
        return self.frame_count


def run_legacy(config: RenderConfig, mesh: Mesh = None, max_frames=None):
    """Legacy mode: stdout reprint with cbreak stdin for keys."""
    compositor = make_compositor(config)
    with StdinKeySource() as keys:
        return RenderLoop(config, compositor, keys, mesh, max_frames=max_frames).run()


def run_fast(stdscr, config: RenderConfig, mesh: Mesh = None, max_frames=None):
    """Fast mode entry point, called from curses.wrapper."""
    compositor = make_compositor(config, stdscr=stdscr)
    keys = CursesKeySource(stdscr)
    return RenderLoop(config, compositor, keys, mesh, max_frames=max_frames).run()


def main(config: RenderConfig, mesh: Mesh = None, max_frames=None):
    if config.legacy_mode:
        return run_legacy(config, mesh, max_frames)
    return curses.wrapper(run_fast, config, mesh, max_frames)
