"""Command-line entry point: draw a grid file (or a demo grid) in the terminal."""

import argparse
import sys
from collections.abc import Sequence

from rich.markup import escape
from rich.segment import Segment, Segments

from .color import ColorScheme
from .config import CONFIG_FILE, get_bool_setting, get_setting, load_color_scheme, load_style
from .console import console, err_console
from .display import Cell, MatrixDisplay
from .exceptions import MatrixDisplayError
from .grid_file import load_grid
from .log import configure_logging, get_logger
from .style import PRESETS, MatrixStyle, get_preset
from .terminal import BufferTerminal, RichTerminal, Terminal

logger = get_logger(__name__)


def demo_grid() -> list[list[Cell]]:
    """A small grid that shows off every default color."""
    return [
        [Cell("A", 0), Cell("B", 1), Cell("C", 2)],
        [Cell("D", 3), Cell("E", 4), Cell("F", 5)],
        [Cell("G", 6), Cell("H", 0), Cell("I", 1)],
    ]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="matrix-display",
        description="Draw a grid of colored cells as a bordered table.",
        epilog=f"Defaults are read from MATRIX_DISPLAY_* environment variables or {CONFIG_FILE}.",
    )
    parser.add_argument("file", nargs="?", help="JSON grid file (omit to draw a demo grid)")
    parser.add_argument("-W", "--cell-width", type=int, help="cell width in characters")
    parser.add_argument("-H", "--cell-height", type=int, help="cell height in lines")
    parser.add_argument("-g", "--glyphs", choices=sorted(PRESETS), help="border glyph preset")
    parser.add_argument("-c", "--colors", help="comma-separated background colors, by color code")
    parser.add_argument(
        "--plain", action="store_true", help="draw without color attributes (or set PLAIN)"
    )
    parser.add_argument("--list-glyphs", action="store_true", help="show every glyph preset and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def resolve_style(args: argparse.Namespace) -> MatrixStyle:
    """Command-line options override the configured style."""
    style = load_style()
    glyphs = get_preset(args.glyphs) if args.glyphs else style.glyphs
    return MatrixStyle(
        args.cell_width if args.cell_width is not None else style.cell_width,
        args.cell_height if args.cell_height is not None else style.cell_height,
        glyphs,
    )


def resolve_scheme(args: argparse.Namespace) -> ColorScheme:
    if args.colors:
        return ColorScheme([c.strip() for c in args.colors.split(",") if c.strip()])
    return load_color_scheme()


def list_glyphs():
    sample = [[Cell("A"), Cell("B")], [Cell("C"), Cell("D")]]
    for name, glyphs in PRESETS.items():
        console.print(f"[bold]{name}[/bold]")
        console.out(MatrixDisplay(MatrixStyle(3, 1, glyphs)).render(sample), highlight=False, end="")


def run(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else get_setting("LOG_LEVEL", "WARNING"))

    if args.list_glyphs:
        list_glyphs()
        return 0

    plain = args.plain or get_bool_setting("PLAIN", False)
    terminal: Terminal | None = None
    try:
        style = resolve_style(args)
        scheme = resolve_scheme(args)
        grid = load_grid(args.file) if args.file else demo_grid()
        terminal = BufferTerminal(scheme) if plain else RichTerminal(console, scheme)
        logger.debug("Using %d colors, glyphs %s", len(scheme), args.glyphs or "from config")
        MatrixDisplay(style, terminal).print(grid)
    except MatrixDisplayError as e:
        err_console.print(f"[bold red]✗ {escape(str(e))}[/bold red]")
        return 1
    finally:
        # Plain output is buffered; lines drawn before a failure are still shown
        if isinstance(terminal, BufferTerminal):
            console.print(Segments([Segment(terminal.getvalue())]), end="", crop=False)
    return 0


def main():
    sys.exit(run())
