#
# PROJECT: wireframe-cube
# MODULE: wireframe_cube/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#


class RendererError(Exception):
    """Base class for all errors raised by the renderer."""


class ConfigError(RendererError):
    """The render configuration is missing, unreadable or invalid."""


class GeometryError(RendererError):
    """A solid's vertex/edge lists are inconsistent."""


class DisplayError(RendererError):
    """Writing a frame to the output sink failed."""
