#
# PROJECT: soft-rasterizer
# MODULE: soft_rasterizer/mesh.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 7.1
# LOG_REF: 2026-10-18
#

import logging

from .math_utils import Vec3

logger = logging.getLogger(__name__)


class Mesh:
    """
    Indexed polygon mesh loaded from a Wavefront OBJ file.

    Only `v` and `f` records are read. Face indices are stored 0-based;
    `v/vt/vn` references keep just the vertex part and negative (relative)
    indices are resolved against the vertices seen so far.
    """

    def __init__(self, filename=None):
        self.vertices = []
        self.faces = []
        if filename:
            self.load_from_obj(filename)
        else:
            self._make_demo_cube()

    def load_from_obj(self, filename):
        try:
            with open(filename, 'r') as f:
                for lineno, line in enumerate(f, 1):
                    if line.startswith('v '):
                        coords = line.split()[1:4]
                        if len(coords) != 3:
                            raise ValueError(f"line {lineno}: vertex needs 3 coordinates")
                        self.vertices.append(Vec3(*(float(c) for c in coords)))
                    elif line.startswith('f '):
                        face = [self._resolve_index(tok, lineno) for tok in line.split()[1:]]
                        if len(face) < 3:
                            raise ValueError(f"line {lineno}: face needs at least 3 vertices")
                        self.faces.append(face)
        except (OSError, ValueError) as e:
            logger.warning("Could not load '%s': %s", filename, e)
            self.vertices, self.faces = [], []

        if not self.vertices or not self.faces:
            logger.warning("No usable geometry in '%s', using demo cube", filename)
            self._make_demo_cube()
        else:
            logger.info("Loaded '%s': %d vertices, %d faces",
                        filename, len(self.vertices), len(self.faces))

    def _resolve_index(self, token, lineno):
        idx = int(token.split('/')[0])
        if idx < 0:
            idx = len(self.vertices) + idx
        else:
            idx -= 1
        if not 0 <= idx < len(self.vertices):
            raise ValueError(f"line {lineno}: vertex index {token} out of range")
        return idx

    def _make_demo_cube(self):
        """Generate a unit cube centered at origin as fallback geometry.

        Corners sit at +-0.5 so every edge projects inside the canvas;
        +1 would map to x == width and be dropped.
        """
        corners = [
            (-1, -1, -1), ( 1, -1, -1), ( 1,  1, -1), (-1,  1, -1),
            (-1, -1,  1), ( 1, -1,  1), ( 1,  1,  1), (-1,  1,  1),
        ]
        self.vertices = [Vec3(*c) * 0.5 for c in corners]
        self.faces = [
            [0, 1, 2, 3],  # front
            [5, 4, 7, 6],  # back
            [4, 0, 3, 7],  # left
            [1, 5, 6, 2],  # right
            [3, 2, 6, 7],  # top
            [4, 5, 1, 0],  # bottom
        ]

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def face_count(self) -> int:
        return len(self.faces)

    def vertex(self, i: int) -> Vec3:
        return self.vertices[i]

    def face(self, i: int):
        return self.faces[i]

    @classmethod
    def cube(cls):
        """Factory method to create a mesh with a demo cube."""
        return cls()

    @classmethod
    def from_obj(cls, filename):
        """Factory method to create a mesh from an OBJ file."""
        return cls(filename)
