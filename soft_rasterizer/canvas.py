#
# PROJECT: soft-rasterizer
# MODULE: soft_rasterizer/canvas.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 4
# LOG_REF: 2026-10-18
#

from enum import IntEnum

import numpy as np

from .color import Color


class Format(IntEnum):
    """Pixel formats, valued by bytes per pixel."""
    GRAYSCALE = 1
    RGB = 3
    RGBA = 4


class Canvas:
    """
    Fixed-size pixel buffer addressed by integer (x, y).

    Pixels live in a (height, width, bpp) uint8 array stored in RGB(A)
    channel order; grayscale canvases keep a single channel and store the
    red component of whatever color is written. Row 0 is y == 0; callers
    that want a bottom-left origin flip vertically before persisting.

    Writes outside the buffer are ignored.
    """
    __slots__ = ['w', 'h', 'fmt', 'buf']

    def __init__(self, width: int, height: int, fmt: Format = Format.RGB):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.w, self.h = int(width), int(height)
        self.fmt = Format(fmt)
        self.buf = np.zeros((self.h, self.w, int(self.fmt)), dtype=np.uint8)

    @property
    def width(self) -> int:
        return self.w

    @property
    def height(self) -> int:
        return self.h

    @property
    def pixels(self) -> np.ndarray:
        """Read-only view of the underlying buffer."""
        view = self.buf.view()
        view.flags.writeable = False
        return view

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.w and 0 <= y < self.h

    def set(self, x: int, y: int, color: Color) -> bool:
        """Write one pixel. Returns False when (x, y) lies outside the canvas."""
        if x < 0 or x >= self.w or y < 0 or y >= self.h:
            return False
        self.buf[y, x] = color[:int(self.fmt)]
        return True

    def get(self, x: int, y: int) -> Color:
        if not self.in_bounds(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.w}x{self.h} canvas")
        px = self.buf[y, x]
        if self.fmt == Format.GRAYSCALE:
            return Color.gray(int(px[0]))
        if self.fmt == Format.RGB:
            return Color(int(px[0]), int(px[1]), int(px[2]))
        return Color(int(px[0]), int(px[1]), int(px[2]), int(px[3]))

    def fill(self, color: Color):
        self.buf[:, :] = color[:int(self.fmt)]

    def clear(self):
        self.buf.fill(0)

    def flip_vertically(self):
        """Reverse row order so row 0 becomes the last row."""
        self.buf = np.ascontiguousarray(self.buf[::-1])

    def flip_horizontally(self):
        self.buf = np.ascontiguousarray(self.buf[:, ::-1])

    def scale(self, width: int, height: int):
        """Nearest-neighbour resample to width x height, in place."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        rows = (np.arange(height) * self.h) // height
        cols = (np.arange(width) * self.w) // width
        self.buf = np.ascontiguousarray(self.buf[rows][:, cols])
        self.w, self.h = int(width), int(height)

    def written_pixels(self):
        """Set of (x, y) whose value differs from zero in any channel."""
        ys, xs = np.nonzero(self.buf.any(axis=2))
        return set(zip(xs.tolist(), ys.tolist()))

    def __eq__(self, other):
        if not isinstance(other, Canvas):
            return NotImplemented
        return self.fmt == other.fmt and np.array_equal(self.buf, other.buf)

    __hash__ = None

    def __repr__(self):
        return f"Canvas({self.w}x{self.h}, {self.fmt.name})"

    def write_tga(self, path, rle: bool = False):
        from . import tga
        tga.write(self, path, rle=rle)

    @classmethod
    def read_tga(cls, path) -> 'Canvas':
        from . import tga
        return tga.read(path)
