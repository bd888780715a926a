#
# PROJECT: soft-rasterizer
# MODULE: soft_rasterizer/tga.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 5
# LOG_REF: 2026-10-18
#

"""
Truevision TGA reader/writer on top of Pillow.

Files are written with the top-left origin flag set, so the first row in
the file is canvas row 0. Reading normalises any origin back to that
layout. RLE (`tga_rle`) is opt-in; the default output is uncompressed.
"""

import io
import logging

import numpy as np
from PIL import Image, UnidentifiedImageError

from .canvas import Canvas, Format

logger = logging.getLogger(__name__)

# Pillow image mode per canvas format
_MODES = {
    Format.GRAYSCALE: "L",
    Format.RGB: "RGB",
    Format.RGBA: "RGBA",
}
_FORMATS = {mode: fmt for fmt, mode in _MODES.items()}


class TGAError(ValueError):
    """Malformed or unsupported TGA data."""


def _to_image(canvas: Canvas) -> Image.Image:
    img = np.array(canvas.pixels, dtype=np.uint8)
    # Squeeze single-channel to (H, W)
    if img.shape[2] == 1:
        img = img.squeeze(2)
    return Image.fromarray(img)


def _save(canvas: Canvas, fp, rle: bool):
    _to_image(canvas).save(fp, format="TGA", orientation=1,
                           compression="tga_rle" if rle else None)


def encode(canvas: Canvas, rle: bool = False) -> bytes:
    """Serialize a canvas to TGA bytes with a top-left origin."""
    buf = io.BytesIO()
    _save(canvas, buf, rle)
    return buf.getvalue()


def decode(data: bytes) -> Canvas:
    """Parse TGA bytes into a canvas whose row 0 is the top image row."""
    try:
        with Image.open(io.BytesIO(data), formats=["TGA"]) as img:
            img.load()
            if img.mode not in _FORMATS:
                # Color-mapped, 16-bit and gray+alpha images
                img = img.convert("RGBA" if "A" in img.getbands() else "RGB")
            fmt = _FORMATS[img.mode]
            pixels = np.array(img, dtype=np.uint8)
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise TGAError(f"Invalid TGA data: {e}") from e

    if pixels.ndim == 2:
        pixels = pixels[..., np.newaxis]
    height, width = pixels.shape[:2]
    canvas = Canvas(width, height, fmt)
    canvas.buf = np.ascontiguousarray(pixels)
    return canvas


def write(canvas: Canvas, path, rle: bool = False):
    """Write a canvas to path. OSError from the file system propagates."""
    with open(path, 'wb') as f:
        _save(canvas, f, rle)
    logger.info("Wrote %s (%dx%d %s%s)", path, canvas.width, canvas.height,
                canvas.fmt.name, " RLE" if rle else "")


def read(path) -> Canvas:
    with open(path, 'rb') as f:
        data = f.read()
    logger.debug("Read %d bytes from %s", len(data), path)
    return decode(data)
