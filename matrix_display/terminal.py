"""
Output sinks for the matrix renderer.

The renderer never writes to stdout directly. It talks to a `Terminal`, which
provides four operations:

  - write_wide(text): write characters at the cursor, in the current attributes
  - write_newline(): end the current line
  - activate(color_code, bold): switch a registered color (and bold) on
  - deactivate(color_code, bold): switch it off again

Two implementations live here. RichTerminal writes through a Rich Console, so
colors are rendered in whatever color system the console detected (or not at
all when output is redirected). BufferTerminal keeps everything in memory and
records each attribute change, which is what `MatrixDisplay.render` and the
test suite use.

Neither implementation locks. If several threads draw to the same terminal
they must take turns.
"""

from typing import Protocol

from rich.console import Console
from rich.segment import Segment, Segments
from rich.style import Style

from .color import DEFAULT_COLORS, ColorScheme
from .exceptions import ColorScopeError


class Terminal(Protocol):
    def write_wide(self, text: str) -> None: ...

    def write_newline(self) -> None: ...

    def activate(self, color_code: int, bold: bool) -> None: ...

    def deactivate(self, color_code: int, bold: bool) -> None: ...


class _AttributeState:
    """Tracks the one color attribute that may be active on a terminal."""

    def __init__(self):
        self.active: tuple[int, bool] | None = None

    def push(self, color_code: int, bold: bool):
        if self.active is not None:
            raise ColorScopeError(
                f"Cannot activate color {color_code}: color {self.active[0]} is still active"
            )
        self.active = (color_code, bold)

    def pop(self, color_code: int, bold: bool):
        if self.active != (color_code, bold):
            raise ColorScopeError(f"Cannot deactivate color {color_code}: it is not active")
        self.active = None


class RichTerminal:
    """Terminal backed by a Rich Console.

    Args:
        console: Console to write to. Defaults to the shared package console.
        scheme: Color scheme used to resolve color codes. Defaults to
            DEFAULT_COLORS.
    """

    def __init__(self, console: Console | None = None, scheme: ColorScheme | None = None):
        if console is None:
            from .console import console as shared_console

            console = shared_console
        self.console = console
        self.scheme = scheme if scheme is not None else ColorScheme(DEFAULT_COLORS)
        self._state = _AttributeState()
        self._style: Style | None = None

    def write_wide(self, text: str) -> None:
        # A raw segment skips Text sanitizing (control characters, tab
        # expansion) and cropping, so the padded text is written unchanged.
        self.console.print(Segments([Segment(text, self._style)]), end="", crop=False)

    def write_newline(self) -> None:
        self.console.line()

    def activate(self, color_code: int, bold: bool) -> None:
        style = self.scheme.style(color_code, bold=bold)
        self._state.push(color_code, bold)
        self._style = style

    def deactivate(self, color_code: int, bold: bool) -> None:
        self._state.pop(color_code, bold)
        self._style = None


class BufferTerminal:
    """In-memory terminal that records text and attribute changes.

    When a scheme is given, color codes are checked against it on activation
    just like RichTerminal does; without one any code is accepted.
    """

    def __init__(self, scheme: ColorScheme | None = None):
        self.scheme = scheme
        self.events: list[tuple[str, int, bool]] = []
        self._chunks: list[str] = []
        self._state = _AttributeState()

    def write_wide(self, text: str) -> None:
        self._chunks.append(text)

    def write_newline(self) -> None:
        self._chunks.append("\n")

    def activate(self, color_code: int, bold: bool) -> None:
        if self.scheme is not None:
            self.scheme.check(color_code)
        self._state.push(color_code, bold)
        self.events.append(("activate", color_code, bold))

    def deactivate(self, color_code: int, bold: bool) -> None:
        self._state.pop(color_code, bold)
        self.events.append(("deactivate", color_code, bold))

    @property
    def active(self) -> tuple[int, bool] | None:
        return self._state.active

    def getvalue(self) -> str:
        return "".join(self._chunks)

    def lines(self) -> list[str]:
        return self.getvalue().splitlines()
