"""
Glyph sets and cell geometry for matrix rendering.

A GlyphSet is the general, free-form description of a matrix border: one
string for horizontal runs, one for vertical bars, and one string for each of
the nine boundary positions (four corners plus five intersections). Two ways of
filling it in are supported:

  - `GlyphSet.uniform(row, column, corner)` uses the same corner string at
    every boundary, which is handy for plain ASCII output such as "-", "|", "+".
  - `GlyphSet.from_box(box)` reads the corners and intersections out of one of
    Rich's box definitions (rich.box.HEAVY, rich.box.ROUNDED, ...), so every
    border style Rich ships can be used for a matrix.

The named presets below are built with those two constructors. HEAVY is the
default and draws

    ┏━━━┳━━━┓
    ┃ A ┃ B ┃
    ┗━━━┻━━━┛
"""

from dataclasses import dataclass
from enum import Enum

from rich import box as rich_box

from .exceptions import InvalidStyle, UnknownGlyphPreset


class Edge(Enum):
    """Which boundary a separator row sits on."""

    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class GlyphSet:
    horizontal: str
    vertical: str
    top_left: str
    top: str
    top_right: str
    left: str
    center: str
    right: str
    bottom_left: str
    bottom: str
    bottom_right: str

    @classmethod
    def uniform(cls, row: str, column: str, corner: str) -> "GlyphSet":
        """Build a glyph set from three separator strings."""
        return cls(
            horizontal=row,
            vertical=column,
            top_left=corner,
            top=corner,
            top_right=corner,
            left=corner,
            center=corner,
            right=corner,
            bottom_left=corner,
            bottom=corner,
            bottom_right=corner,
        )

    @classmethod
    def from_box(cls, box: rich_box.Box) -> "GlyphSet":
        """Build a glyph set from a Rich box.

        Corners and the top/bottom intersections come from the box's top and
        bottom lines; the left/center/right intersections and the horizontal
        run come from its row separator line, and the vertical bar from its
        body line.
        """
        return cls(
            horizontal=box.row_horizontal,
            vertical=box.mid_vertical,
            top_left=box.top_left,
            top=box.top_divider,
            top_right=box.top_right,
            left=box.row_left,
            center=box.row_cross,
            right=box.row_right,
            bottom_left=box.bottom_left,
            bottom=box.bottom_divider,
            bottom_right=box.bottom_right,
        )

    def separator(self, edge: Edge) -> tuple[str, str, str]:
        """Return the (left, intersection, right) glyphs for a separator row."""
        if edge is Edge.TOP:
            return self.top_left, self.top, self.top_right
        if edge is Edge.BOTTOM:
            return self.bottom_left, self.bottom, self.bottom_right
        return self.left, self.center, self.right


HEAVY = GlyphSet.from_box(rich_box.HEAVY)
SQUARE = GlyphSet.from_box(rich_box.SQUARE)
ROUNDED = GlyphSet.from_box(rich_box.ROUNDED)
DOUBLE = GlyphSet.from_box(rich_box.DOUBLE)
ASCII = GlyphSet.from_box(rich_box.ASCII)
SIMPLE = GlyphSet.uniform("-", "|", "+")

PRESETS: dict[str, GlyphSet] = {
    "heavy": HEAVY,
    "square": SQUARE,
    "rounded": ROUNDED,
    "double": DOUBLE,
    "ascii": ASCII,
    "simple": SIMPLE,
}


def get_preset(name: str) -> GlyphSet:
    """Look up a glyph preset by name (case-insensitive)."""
    try:
        return PRESETS[name.strip().lower()]
    except KeyError:
        raise UnknownGlyphPreset(
            f"Unknown glyph preset: {name!r} (available: {', '.join(PRESETS)})"
        ) from None


@dataclass(frozen=True)
class MatrixStyle:
    """Cell geometry plus the glyphs used to draw the borders."""

    cell_width: int
    cell_height: int
    glyphs: GlyphSet = HEAVY

    def __post_init__(self):
        for name in ("cell_width", "cell_height"):
            value = getattr(self, name)
            # bool is an int subclass; True is not a width
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise InvalidStyle(f"{name} must be a positive integer, got {value!r}")
