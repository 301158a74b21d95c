#
# PROJECT: wireframe-cube
# MODULE: wireframe_cube/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .canvas import Canvas
from .camera import RenderState
from .config import RenderConfig
from .math_utils import project, transform_vertex
from .mesh import Mesh
from .rasterizer import rasterize


class Renderer:
    """
    Stateless wireframe renderer.

    render(canvas, mesh, state, config) fills the canvas with one frame.
    Output to the terminal is the compositor's job.
    """

    def project_vertices(self, mesh: Mesh, state: RenderState, config: RenderConfig):
        """
        Transform and project every vertex.

        Returns one (x, y) float pair per vertex, or None where the
        projection is undefined (z + focal_length == 0).
        """
        extents = config.extents
        focal = state.focal_length
        vw, vh = config.view_width, config.view_height
        return [project(transform_vertex(v, extents, state.pitch, state.yaw, state.roll,
                                         config.full_rotation),
                        focal, vw, vh)
                for v in mesh.vertices]

    def render(self, canvas: Canvas, mesh: Mesh, state: RenderState, config: RenderConfig):
        """
        Render one frame into the canvas.

        Pipeline:
          1. Clear the canvas in place
          2. Scale + rotate each vertex
          3. Perspective-project to grid coordinates
          4. Bresenham every edge, then stamp vertices on top
        """
        canvas.clear()
        projected = self.project_vertices(mesh, state, config)
        rasterize(canvas, mesh.edges, projected)
        return projected
