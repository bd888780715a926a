#
# PROJECT: soft-rasterizer
# MODULE: soft_rasterizer/__init__.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 2
# LOG_REF: 2026-10-18
#

from .math_utils import Vec2, Vec3
from .color import Color, parse_hex_color, WHITE, BLACK, RED, GREEN, BLUE
from .canvas import Canvas, Format
from .tga import TGAError
from .rasterizer import (line_pixels, draw_line, draw_line_sampled, signed_area,
                         triangle_spans, fill_triangle, draw_triangle)
from .mesh import Mesh
from .renderer import WireframeRenderer
from .config import RenderConfig
