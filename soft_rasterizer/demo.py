#
# PROJECT: soft-rasterizer
# MODULE: soft_rasterizer/demo.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 8
# LOG_REF: 2026-10-18
#

import argparse
import logging
import sys
import time

from .canvas import Canvas
from .color import Color, WHITE, RED, GREEN
from .config import RenderConfig, FORMAT_NAMES
from .mesh import Mesh
from .rasterizer import draw_line, draw_triangle, fill_triangle
from .renderer import WireframeRenderer
from .tga import TGAError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Line star: one segment per octant from the canvas centre
STAR_CENTER = (250, 250)
STAR_END = (80, 41)

TRIANGLES = [
    ([(10, 70), (50, 160), (70, 80)], RED),
    ([(180, 50), (150, 1), (70, 180)], WHITE),
    ([(180, 150), (120, 160), (130, 180)], GREEN),
]


def benchmark(fn, repeat: int = 1) -> float:
    """Call fn() `repeat` times and return the elapsed wall time in seconds."""
    start = time.perf_counter()
    for _ in range(repeat):
        fn()
    return time.perf_counter() - start


def _finish(canvas: Canvas, config: RenderConfig, filename: str, elapsed: float) -> Canvas:
    logger.info("%s: %d pass(es) in %.3f ms", filename, config.repeat, elapsed * 1000)
    if config.flip:
        # Bottom-left origin in the written image
        canvas.flip_vertically()
    canvas.write_tga(config.output_path(filename), rle=config.rle)
    return canvas


def render_lines(config: RenderConfig) -> Canvas:
    canvas = Canvas(500, 500, config.fmt)
    cx, cy = STAR_CENTER
    ex, ey = STAR_END
    x_series = [ex, ey, -ey, -ex, -ex, -ey, ey, ex]
    y_series = [ey, ex, ex, ey, -ey, -ex, -ex, -ey]

    def draw():
        for i, (dx, dy) in enumerate(zip(x_series, y_series)):
            draw_line((cx, cy), (cx + dx, cy + dy), canvas, Color.gray(255 - i * 20))

    elapsed = benchmark(draw, config.repeat)
    return _finish(canvas, config, "output.tga", elapsed)


def render_model(config: RenderConfig, model_path=None) -> Canvas:
    canvas = Canvas(800, 600, config.fmt)
    mesh = Mesh(model_path)
    renderer = WireframeRenderer()
    elapsed = benchmark(lambda: renderer.render(mesh, canvas, config.color), config.repeat)
    return _finish(canvas, config, "output2.tga", elapsed)


def render_triangles(config: RenderConfig) -> Canvas:
    canvas = Canvas(200, 200, config.fmt)

    def draw():
        outline, _ = TRIANGLES[0]
        draw_triangle(outline, canvas, WHITE)
        for vertices, color in TRIANGLES:
            fill_triangle(vertices, canvas, color)

    elapsed = benchmark(draw, config.repeat)
    return _finish(canvas, config, "output3.tga", elapsed)


SCENES = ('lines', 'model', 'triangles', 'all')


def build_parser() -> argparse.ArgumentParser:
    epilog = """\
examples:
  %(prog)s                                   Triangle scene -> output3.tga
  %(prog)s lines --repeat 1000               Time 1000 passes of the line star
  %(prog)s model --model head.obj --rle      Wireframe an OBJ model, RLE output
  %(prog)s all --output-dir out --format rgba
"""
    parser = argparse.ArgumentParser(
        description="Software line/triangle rasterizer with TGA output",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("scene", nargs='?', default='triangles', choices=SCENES,
                        help="Scene to render (default: triangles)")
    parser.add_argument("--model", default=None,
                        help="Path to .obj file for the model scene (default: demo cube)")
    parser.add_argument("--output-dir", default=".",
                        help="Directory for the .tga files (default: current directory)")
    parser.add_argument("--rle", action="store_true",
                        help="Write run-length encoded TGA files")
    parser.add_argument("--no-flip", action="store_true",
                        help="Keep row 0 at the top of the written image")
    parser.add_argument("--format", default="rgb", choices=sorted(FORMAT_NAMES),
                        help="Pixel format (default: rgb)")
    parser.add_argument("--color", default=None,
                        help="Wireframe color in hex #RRGGBB (default: white)")
    parser.add_argument("--repeat", type=int, default=1,
                        help="Draw each scene N times and log the timing (default: 1)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format=LOG_FORMAT)

    try:
        config = RenderConfig.from_args(args)
    except ValueError as e:
        parser.error(str(e))

    scenes = ('lines', 'model', 'triangles') if args.scene == 'all' else (args.scene,)
    try:
        for scene in scenes:
            if scene == 'lines':
                render_lines(config)
            elif scene == 'model':
                render_model(config, args.model)
            else:
                render_triangles(config)
    except (OSError, TGAError) as e:
        logger.error("Rendering failed: %s", e)
        return 1
    return 0


def cli():
    """Console script entry point."""
    sys.exit(main())
