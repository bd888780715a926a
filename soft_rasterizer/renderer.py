#
# PROJECT: soft-rasterizer
# MODULE: soft_rasterizer/renderer.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 7.2
# LOG_REF: 2026-10-18
#

import logging

from .canvas import Canvas
from .color import Color
from .math_utils import Vec2, Vec3
from .mesh import Mesh
from .rasterizer import draw_line

logger = logging.getLogger(__name__)


class WireframeRenderer:
    """
    Orthographic wireframe renderer.

    Model space [-1, 1] on x and y maps onto the full canvas; z is
    ignored. Every face is drawn as a closed loop of edges.
    """

    @staticmethod
    def project(v: Vec3, width: int, height: int) -> Vec2:
        return Vec2(int((v.x + 1.0) * width / 2.0),
                    int((v.y + 1.0) * height / 2.0))

    def render(self, mesh: Mesh, canvas: Canvas, color: Color) -> int:
        """Draw all face edges of mesh onto canvas. Returns the line count."""
        w, h = canvas.width, canvas.height
        screen = [self.project(v, w, h) for v in mesh.vertices]

        lines = 0
        for face in mesh.faces:
            n = len(face)
            for j in range(n):
                draw_line(screen[face[j]], screen[face[(j + 1) % n]], canvas, color)
                lines += 1

        logger.debug("Rendered %d faces (%d lines) onto %r", len(mesh.faces), lines, canvas)
        return lines
