"""matrix-display - draw grids of colored cells as bordered terminal tables"""

from .alignment import Aligned, TextLike, align, aligned_left, aligned_right, centered, positioned
from .color import DEFAULT_COLORS, ColorScheme, ColorScope
from .config import (
    CONFIG_DIR,
    CONFIG_FILE,
    DEFAULT_CONFIG,
    get_bool_setting,
    get_int_setting,
    get_list_setting,
    get_setting,
    load_color_scheme,
    load_config,
    load_style,
)
from .console import console, err_console
from .display import Cell, Grid, MatrixDisplay, validate_grid
from .exceptions import (
    ColorScopeError,
    EmptyGrid,
    GridFileError,
    InvalidColorScheme,
    InvalidGridShape,
    InvalidStyle,
    MatrixDisplayError,
    UnknownColorCode,
    UnknownGlyphPreset,
)
from .grid_file import load_grid, parse_grid, save_grid
from .log import configure_logging, get_logger
from .style import (
    ASCII,
    DOUBLE,
    HEAVY,
    PRESETS,
    ROUNDED,
    SIMPLE,
    SQUARE,
    Edge,
    GlyphSet,
    MatrixStyle,
    get_preset,
)
from .terminal import BufferTerminal, RichTerminal, Terminal

__all__ = [
    # Alignment
    "Aligned",
    "TextLike",
    "align",
    "aligned_left",
    "aligned_right",
    "centered",
    "positioned",
    # Color
    "DEFAULT_COLORS",
    "ColorScheme",
    "ColorScope",
    # Config
    "CONFIG_DIR",
    "CONFIG_FILE",
    "DEFAULT_CONFIG",
    "get_bool_setting",
    "get_int_setting",
    "get_list_setting",
    "get_setting",
    "load_color_scheme",
    "load_config",
    "load_style",
    # Console
    "console",
    "err_console",
    # Display
    "Cell",
    "Grid",
    "MatrixDisplay",
    "validate_grid",
    # Exceptions
    "ColorScopeError",
    "EmptyGrid",
    "GridFileError",
    "InvalidColorScheme",
    "InvalidGridShape",
    "InvalidStyle",
    "MatrixDisplayError",
    "UnknownColorCode",
    "UnknownGlyphPreset",
    # Grid files
    "load_grid",
    "parse_grid",
    "save_grid",
    # Logging
    "configure_logging",
    "get_logger",
    # Style
    "ASCII",
    "DOUBLE",
    "HEAVY",
    "PRESETS",
    "ROUNDED",
    "SIMPLE",
    "SQUARE",
    "Edge",
    "GlyphSet",
    "MatrixStyle",
    "get_preset",
    # Terminal
    "BufferTerminal",
    "RichTerminal",
    "Terminal",
]
