#
# PROJECT: soft-rasterizer
# MODULE: soft_rasterizer/config.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 8.1
# LOG_REF: 2026-10-18
#

from dataclasses import dataclass, field
from pathlib import Path

from .canvas import Format
from .color import Color, WHITE, parse_hex_color

FORMAT_NAMES = {
    'gray': Format.GRAYSCALE,
    'rgb': Format.RGB,
    'rgba': Format.RGBA,
}


@dataclass
class RenderConfig:
    """Configuration for the demo scenes and their output files."""
    output_dir: Path = Path('.')
    fmt: Format = Format.RGB
    rle: bool = False
    flip: bool = True
    repeat: int = 1
    color: Color = field(default=WHITE)

    def __post_init__(self):
        self.output_dir = Path(self.output_dir)
        self.fmt = Format(self.fmt)
        if self.repeat < 1:
            raise ValueError(f"repeat must be >= 1, got {self.repeat}")

    def output_path(self, filename: str) -> Path:
        return self.output_dir / filename

    @classmethod
    def from_args(cls, args) -> 'RenderConfig':
        """
        Build a config from parsed CLI arguments.
        Raises ValueError on an unparseable --color.
        """
        color = WHITE
        if args.color is not None:
            color = parse_hex_color(args.color)
            if color is None:
                raise ValueError(f"Invalid color {args.color!r}, expected #RRGGBB")
        return cls(
            output_dir=args.output_dir,
            fmt=FORMAT_NAMES[args.format],
            rle=args.rle,
            flip=not args.no_flip,
            repeat=args.repeat,
            color=color,
        )
