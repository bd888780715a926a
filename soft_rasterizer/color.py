#
# PROJECT: soft-rasterizer
# MODULE: soft_rasterizer/color.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 3.2
# LOG_REF: 2026-10-18
#

from typing import NamedTuple, Optional


class _RGBA(NamedTuple):
    r: int
    g: int
    b: int
    a: int


class Color(_RGBA):
    """Immutable RGBA color with 8-bit channels. Alpha defaults to opaque."""
    __slots__ = ()

    def __new__(cls, r: int, g: int, b: int, a: int = 255):
        for name, value in (('r', r), ('g', g), ('b', b), ('a', a)):
            if not 0 <= int(value) <= 255:
                raise ValueError(f"Color channel {name}={value} outside [0, 255]")
        return super().__new__(cls, int(r), int(g), int(b), int(a))

    @classmethod
    def gray(cls, level: int) -> 'Color':
        """Opaque gray with all three color channels set to level."""
        return cls(level, level, level)

    @property
    def rgb(self):
        return (self.r, self.g, self.b)


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)


def parse_hex_color(hex_str) -> Optional[Color]:
    """
    Parse a hex color string to a Color.
    Accepts: '#RRGGBB', 'RRGGBB' or '#RRGGBBAA' (case-insensitive).
    Returns: Color, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) not in (6, 8):
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
        a = int(val[6:8], 16) if len(val) == 8 else 255
        return Color(r, g, b, a)
    except ValueError:
        return None
