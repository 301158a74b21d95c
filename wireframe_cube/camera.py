#
# PROJECT: wireframe-cube
# MODULE: wireframe_cube/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import enum
import math

FOCAL_MIN = 10.0
FOCAL_MAX = 100.0


class LoopState(enum.Enum):
    RUNNING = 'running'   # animating
    PAUSED = 'paused'     # rendering, no automatic rotation
    EXITING = 'exiting'


class RenderState:
    """
    Mutable per-process render state owned by the render loop.

    Holds the orientation angles (radians), the live focal length and the
    loop state. The renderer reads these values directly each frame.
    """
    __slots__ = ('pitch', 'yaw', 'roll', 'focal_length', 'loop_state')

    def __init__(self, focal_length: float = 64.0,
                 pitch: float = 0.0, yaw: float = 0.0, roll: float = 0.0):
        self.pitch = pitch
        self.yaw = yaw
        self.roll = roll
        self.focal_length = focal_length
        self.loop_state = LoopState.RUNNING

    @property
    def running(self):
        return self.loop_state is not LoopState.EXITING

    @property
    def animating(self):
        return self.loop_state is LoopState.RUNNING

    def rotate(self, dpitch: float = 0.0, dyaw: float = 0.0, droll: float = 0.0):
        """Adjust angles by delta (radians)."""
        self.pitch += dpitch
        self.yaw += dyaw
        self.roll += droll

    def adjust_focal_length(self, delta: float):
        """Adjust focal length by delta, clamped to [10, 100]."""
        self.focal_length = max(FOCAL_MIN, min(FOCAL_MAX, self.focal_length + delta))

    def toggle_animation(self):
        if self.loop_state is LoopState.RUNNING:
            self.loop_state = LoopState.PAUSED
        elif self.loop_state is LoopState.PAUSED:
            self.loop_state = LoopState.RUNNING

    def request_exit(self):
        self.loop_state = LoopState.EXITING

    def angles_degrees(self):
        return (math.degrees(self.pitch),
                math.degrees(self.yaw),
                math.degrees(self.roll))
