"""
Exception hierarchy for matrix-display.

Every error the library raises derives from MatrixDisplayError, so callers can
catch one type at the boundary (the CLI does exactly that). Most classes also
inherit from the matching builtin (ValueError, KeyError, ...) so code that
already handles those keeps working.
"""


class MatrixDisplayError(Exception):
    """Base class for all matrix-display errors."""


class EmptyGrid(MatrixDisplayError, ValueError):
    """Raised when a grid has no rows, or its rows have no cells."""


class InvalidGridShape(MatrixDisplayError, ValueError):
    """Raised when the rows of a grid do not all have the same column count."""

    def __init__(self, row: int, expected: int, actual: int):
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(f"row {row} has {actual} cells, expected {expected}")


class InvalidStyle(MatrixDisplayError, ValueError):
    """Raised when a MatrixStyle is constructed with unusable dimensions."""


class UnknownGlyphPreset(MatrixDisplayError, KeyError):
    """Raised when a glyph preset name is not registered."""

    def __str__(self) -> str:
        # KeyError repr()s its argument; keep the message readable
        return str(self.args[0]) if self.args else ""


class InvalidColorScheme(MatrixDisplayError, ValueError):
    """Raised when a color scheme contains a color that cannot be parsed."""


class UnknownColorCode(MatrixDisplayError, IndexError):
    """Raised when a cell refers to a color code outside the registered scheme."""

    def __init__(self, code: int, size: int):
        self.code = code
        self.size = size
        super().__init__(f"color code {code} is not registered (scheme has {size} colors)")


class ColorScopeError(MatrixDisplayError, RuntimeError):
    """Raised when color attributes are activated or released out of order."""


class GridFileError(MatrixDisplayError):
    """Raised when a grid file cannot be read or does not describe a grid."""
