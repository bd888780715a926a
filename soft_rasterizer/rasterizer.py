#
# PROJECT: soft-rasterizer
# MODULE: soft_rasterizer/rasterizer.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 6
# LOG_REF: 2026-10-18
#

from typing import Iterator, Sequence, Tuple

from .canvas import Canvas
from .color import Color
from .math_utils import Vec2


def line_pixels(p0, p1) -> Iterator[Tuple[int, int]]:
    """
    Yields the pixels of the segment p0-p1 using axis-swap DDA stepping.

    Stepping runs along the dominant axis so every integer on that axis
    gets exactly one pixel. The minor coordinate is accumulated as a float
    and truncated toward zero.
    """
    x0, y0 = p0
    x1, y1 = p1
    x0, y0, x1, y1 = int(x0), int(y0), int(x1), int(y1)

    # Transpose steep lines so x is always the longer range
    steep = abs(y1 - y0) > abs(x1 - x0)
    if steep:
        x0, y0 = y0, x0
        x1, y1 = y1, x1

    if x0 > x1:
        x0, x1 = x1, x0
        y0, y1 = y1, y0

    dx = x1 - x0
    if dx == 0:
        yield (x0, y0)
        return

    # |minor_step| <= 1 because dx >= |dy| after transposition. y is
    # accumulated, not recomputed, so rounding can leave the last pixel
    # one short of p1 on the minor axis: (0, 0)-(6, 1) ends at (6, 0).
    minor_step = (y1 - y0) * (1.0 / dx)
    y = float(y0)
    if steep:
        for x in range(x0, x1 + 1):
            yield (int(y), x)
            y += minor_step
    else:
        for x in range(x0, x1 + 1):
            yield (x, int(y))
            y += minor_step


def draw_line(p0, p1, canvas: Canvas, color: Color):
    """Draws the segment p0-p1 onto canvas. Off-canvas pixels are dropped by the canvas."""
    for x, y in line_pixels(p0, p1):
        canvas.set(x, y, color)


def draw_line_sampled(p0, p1, canvas: Canvas, color: Color, step: float = 0.1):
    """
    Naive parametric line: samples t in [0, 1) every `step` and truncates.
    Leaves gaps whenever the segment is longer than 1/step pixels; kept
    for side-by-side comparison with draw_line.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    x0, y0 = p0
    x1, y1 = p1
    n = 0
    t = 0.0
    while t < 1.0:
        x = int(x0 * (1.0 - t) + x1 * t)
        y = int(y0 * (1.0 - t) + y1 * t)
        canvas.set(x, y, color)
        n += 1
        t = n * step


def signed_area(a, b, c) -> int:
    """Twice the signed area of triangle abc. Zero means collinear."""
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


class _Edge:
    """Triangle edge from `a` to `b`, intercepted one scanline at a time."""
    __slots__ = ('x0', 'y0', 'dx', 'dy', 'x_end')

    def __init__(self, a: Vec2, b: Vec2):
        self.x0, self.y0 = a.x, a.y
        self.dx = b.x - a.x
        self.dy = b.y - a.y
        self.x_end = b.x

    def x_at(self, y: int) -> int:
        # Flat edge: the whole edge lies on this row, reach its far end
        if self.dy == 0:
            return self.x_end
        return int(self.x0 + self.dx * (y - self.y0) / self.dy)


def _vertices(v: Sequence) -> Tuple[Vec2, Vec2, Vec2]:
    if len(v) != 3:
        raise ValueError(f"A triangle needs exactly 3 vertices, got {len(v)}")
    return tuple(Vec2.of(p) for p in v)


def triangle_spans(v: Sequence) -> Iterator[Tuple[int, int, int]]:
    """
    Yields (y, from_x, to_x) spans covering the triangle, top row first.

    Vertices are copied and stably sorted by descending y: t0 top, t1
    middle, t2 bottom. Rows down to t1.y (inclusive) span edges t0-t1 and
    t0-t2; rows below span t1-t2 and t0-t2, so the t1.y row is emitted
    once. Collinear triangles yield nothing.
    """
    pts = _vertices(v)
    if signed_area(*pts) == 0:
        return

    t0, t1, t2 = sorted(pts, key=lambda p: -p.y)
    long_edge = _Edge(t0, t2)
    upper_edge = _Edge(t0, t1)
    lower_edge = _Edge(t1, t2)

    for y in range(t0.y, t2.y - 1, -1):
        if y >= t1.y:
            xa = upper_edge.x_at(y)
        else:
            xa = lower_edge.x_at(y)
        xb = long_edge.x_at(y)
        if xa > xb:
            xa, xb = xb, xa
        yield (y, xa, xb)


def fill_triangle(v: Sequence, canvas: Canvas, color: Color):
    """Scanline-fills the triangle v (three points) onto canvas."""
    for y, from_x, to_x in triangle_spans(v):
        for x in range(from_x, to_x + 1):
            canvas.set(x, y, color)


def draw_triangle(v: Sequence, canvas: Canvas, color: Color):
    """Outline only: v0->v1, v1->v2, v2->v0 in the given vertex order."""
    t0, t1, t2 = _vertices(v)
    draw_line(t0, t1, canvas, color)
    draw_line(t1, t2, canvas, color)
    draw_line(t2, t0, canvas, color)
