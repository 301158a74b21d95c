#
# PROJECT: wireframe-cube
# MODULE: wireframe_cube/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .errors import RendererError, ConfigError, GeometryError, DisplayError
from .config import RenderConfig, load_config
from .canvas import Canvas
from .mesh import Mesh
from .camera import RenderState, LoopState
from .renderer import Renderer
from .compositor import Compositor, FullReprintCompositor, PartialUpdateCompositor, make_compositor
from .demo import RenderLoop
