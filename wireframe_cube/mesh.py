#
# PROJECT: wireframe-cube
# MODULE: wireframe_cube/mesh.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import logging

from .errors import GeometryError

logger = logging.getLogger(__name__)

CUBE_VERTICES = (
    (-1, -1, -1), (-1, -1,  1), (-1,  1, -1), (-1,  1,  1),
    ( 1, -1, -1), ( 1, -1,  1), ( 1,  1, -1), ( 1,  1,  1),
)

CUBE_EDGES = (
    (0, 1), (0, 2), (0, 4), (1, 3),
    (1, 5), (2, 3), (2, 6), (3, 7),
    (4, 5), (4, 6), (5, 7), (6, 7),
)


class Mesh:
    """
    Wireframe solid: a vertex list and an edge list of index pairs.

    Both lists are stored as tuples and never change after construction.
    Every edge must reference two distinct, valid vertex indices.
    """
    __slots__ = ('vertices', 'edges')

    def __init__(self, vertices, edges):
        self.vertices = tuple(tuple(float(c) for c in v) for v in vertices)
        self.edges = tuple((int(a), int(b)) for a, b in edges)
        self._validate()

    def _validate(self):
        count = len(self.vertices)
        for i, v in enumerate(self.vertices):
            if len(v) != 3:
                raise GeometryError(f"vertex {i} has {len(v)} components, expected 3")
        for a, b in self.edges:
            if not (0 <= a < count and 0 <= b < count):
                raise GeometryError(
                    f"edge ({a}, {b}) references a vertex outside 0..{count - 1}")
            if a == b:
                raise GeometryError(f"edge ({a}, {b}) is a self-loop")

    def __repr__(self):
        return f"Mesh(vertices={len(self.vertices)}, edges={len(self.edges)})"

    @classmethod
    def cube(cls):
        """Unit cube with corners in {-1, +1}^3 and its 12 edges."""
        return cls(CUBE_VERTICES, CUBE_EDGES)

    @classmethod
    def from_obj(cls, filename):
        """
        Load a wireframe from a Wavefront OBJ file.

        Vertices come from 'v' records. Edges come from the outline of every
        'f' face loop and from every 'l' polyline, deduplicated regardless of
        direction. Degenerate segments (same index twice) are dropped.
        """
        vertices = []
        edges = []
        seen = set()

        def resolve(token):
            # 1-based, or negative to count back from the latest vertex.
            n = int(token.split('/')[0])
            if n == 0:
                raise ValueError("vertex index 0 is not valid")
            return n - 1 if n > 0 else len(vertices) + n

        def add_edge(a, b):
            if a == b:
                return
            key = (min(a, b), max(a, b))
            if key not in seen:
                seen.add(key)
                edges.append((a, b))

        try:
            with open(filename, 'r') as f:
                for line in f:
                    parts = line.split()
                    if not parts:
                        continue
                    if parts[0] == 'v':
                        vertices.append([float(x) for x in parts[1:4]])
                    elif parts[0] in ('f', 'l'):
                        idx = [resolve(x) for x in parts[1:]]
                        pairs = list(zip(idx, idx[1:]))
                        if parts[0] == 'f' and len(idx) > 2:
                            pairs.append((idx[-1], idx[0]))
                        for a, b in pairs:
                            add_edge(a, b)
        except (OSError, ValueError) as e:
            raise GeometryError(f"could not load '{filename}': {e}") from e

        if not vertices or not edges:
            raise GeometryError(f"'{filename}' contains no usable vertices/edges")

        logger.info("Loaded %s: %d vertices, %d edges", filename, len(vertices), len(edges))
        return cls(vertices, edges)
