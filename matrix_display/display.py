"""
The matrix renderer.

MatrixDisplay draws a grid of cells as a bordered table:

    ┏━━━┳━━━┓     <- top separator
    ┃ A ┃ B ┃     <- value block (cell_height lines per row)
    ┣━━━╋━━━┫     <- middle separator
    ┃ C ┃ D ┃
    ┗━━━┻━━━┛     <- bottom separator

A grid with R rows produces R + 1 separator lines and R * cell_height value
lines. Within a value block the cell content is vertically centered; when the
padding is uneven the extra blank line goes underneath. Each piece of cell
content is horizontally centered in cell_width characters and written inside
a ColorScope, so only the label itself carries the cell's color.

Every draw is a fresh pass over the grid: the renderer keeps nothing between
calls apart from its style and the terminal it writes to.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from .alignment import TextLike, centered
from .color import ColorScope
from .exceptions import EmptyGrid, InvalidGridShape
from .log import get_logger
from .style import Edge, MatrixStyle
from .terminal import BufferTerminal, RichTerminal, Terminal

logger = get_logger(__name__)


@dataclass(frozen=True, init=False)
class Cell:
    """One labeled, colored unit of a grid.

    Any TextLike content is accepted and stored as its str().
    """

    content: str
    color_code: int = 0

    def __init__(self, content: TextLike, color_code: int = 0):
        object.__setattr__(self, "content", str(content))
        object.__setattr__(self, "color_code", color_code)


Grid = Sequence[Sequence[Cell]]


def validate_grid(grid: Grid) -> int:
    """Check that `grid` is non-empty and rectangular.

    Returns:
        The number of columns.

    Raises:
        EmptyGrid: The grid has no rows or its first row has no cells.
        InvalidGridShape: A row has a different number of cells than the first.
    """
    if len(grid) == 0:
        raise EmptyGrid("Grid has no rows")
    columns = len(grid[0])
    if columns == 0:
        raise EmptyGrid("Grid rows have no cells")
    for index, row in enumerate(grid):
        if len(row) != columns:
            raise InvalidGridShape(index, columns, len(row))
    return columns


class MatrixDisplay:
    """Draws grids of cells on a terminal using a fixed MatrixStyle.

    Args:
        style: Cell geometry and glyphs. Fixed for the life of the display.
        terminal: Where to draw. Defaults to a RichTerminal on the shared
            console with the default color scheme.
    """

    def __init__(self, style: MatrixStyle, terminal: Terminal | None = None):
        self._style = style
        self.terminal: Terminal = terminal if terminal is not None else RichTerminal()

    @property
    def style(self) -> MatrixStyle:
        return self._style

    def width_in_chars(self, grid: Grid) -> int:
        """Advisory width of a printed grid: (cell_width + 1) per column.

        This does not count the leading border column. Use printed_width for
        the exact width.
        """
        return (self.style.cell_width + 1) * validate_grid(grid)

    def printed_width(self, grid: Grid) -> int:
        """Exact width in characters of a separator row for `grid`."""
        columns = validate_grid(grid)
        glyphs = self.style.glyphs
        left, intersection, right = glyphs.separator(Edge.TOP)
        run = len(glyphs.horizontal) * self.style.cell_width
        return len(left) + columns * run + (columns - 1) * len(intersection) + len(right)

    def print(self, grid: Grid) -> None:
        """Draw `grid` on the terminal.

        The grid is validated before anything is written. Once drawing has
        started, lines already written stay on the terminal if a later step
        fails (for example an unregistered color code).
        """
        columns = validate_grid(grid)
        logger.debug(
            "Drawing %dx%d grid (cell %dx%d)",
            len(grid),
            columns,
            self.style.cell_width,
            self.style.cell_height,
        )
        self._separator_row(columns, Edge.TOP)
        last = len(grid) - 1
        for index, row in enumerate(grid):
            self._value_block(row)
            self._separator_row(columns, Edge.BOTTOM if index == last else Edge.MIDDLE)

    def render(self, grid: Grid) -> str:
        """Draw `grid` into a string instead of the terminal.

        The text is identical to what `print` writes, without color attributes.
        """
        buffer = BufferTerminal()
        MatrixDisplay(self.style, buffer).print(grid)
        return buffer.getvalue()

    def _separator_row(self, columns: int, edge: Edge):
        glyphs = self.style.glyphs
        left, intersection, right = glyphs.separator(edge)
        run = glyphs.horizontal * self.style.cell_width
        write = self.terminal.write_wide
        write(left)
        for column in range(columns):
            write(run)
            write(right if column == columns - 1 else intersection)
        self.terminal.write_newline()

    def _value_block(self, row: Sequence[Cell]):
        height = self.style.cell_height
        top_pad = (height - 1) // 2
        bottom_pad = height - 1 - top_pad
        for _ in range(top_pad):
            self._padding_line(len(row))
        self._content_line(row)
        for _ in range(bottom_pad):
            self._padding_line(len(row))

    def _content_line(self, row: Sequence[Cell]):
        width = self.style.cell_width
        vertical = self.style.glyphs.vertical
        write = self.terminal.write_wide
        write(vertical)
        for cell in row:
            with ColorScope(self.terminal, cell.color_code):
                write(centered(cell.content, width))
            write(vertical)
        self.terminal.write_newline()

    def _padding_line(self, columns: int):
        blank = centered("", self.style.cell_width)
        vertical = self.style.glyphs.vertical
        write = self.terminal.write_wide
        write(vertical)
        for _ in range(columns):
            write(blank)
            write(vertical)
        self.terminal.write_newline()
