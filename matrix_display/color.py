"""
Color schemes and scoped color attributes.

A ColorScheme maps small integer codes to terminal color pairs. Code `i`
is drawn as black text on the background `colors[i]`, so a scheme such as
["white", "green", "red"] gives cells with color_code 0, 1 and 2 a white,
green or red background.

ColorScope is the only way the renderer touches color attributes. Terminal
attributes are global state: once a color is switched on, every character
written afterwards is drawn in it until it is switched off again. Wrapping the
activation in a context manager means the attribute is switched off whenever
the `with` block is left, whether the block finished normally or raised.

    with ColorScope(terminal, cell.color_code):
        terminal.write_wide(centered(cell.content, width))
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from rich.color import Color, ColorParseError
from rich.style import Style

from .exceptions import InvalidColorScheme, UnknownColorCode

if TYPE_CHECKING:
    from .terminal import Terminal

DEFAULT_COLORS = ("white", "green", "yellow", "red", "blue", "magenta", "cyan")


class ColorScheme:
    """Registry of color pairs, indexed by color code."""

    foreground = "black"

    def __init__(self, colors: Sequence[str]):
        self.colors = tuple(colors)
        self._styles: list[Style] = []
        for name in self.colors:
            try:
                Color.parse(name)
            except ColorParseError as e:
                raise InvalidColorScheme(f"Invalid color in scheme: {name!r}") from e
            self._styles.append(Style(color=self.foreground, bgcolor=name))

    def __len__(self) -> int:
        return len(self._styles)

    def __repr__(self) -> str:
        return f"ColorScheme({list(self.colors)!r})"

    def __contains__(self, code: object) -> bool:
        return isinstance(code, int) and 0 <= code < len(self._styles)

    def check(self, code: int) -> None:
        """Raise UnknownColorCode unless `code` is registered."""
        if code not in self:
            raise UnknownColorCode(code, len(self._styles))

    def style(self, code: int, bold: bool = False) -> Style:
        """Return the Rich style for `code`, optionally emboldened."""
        self.check(code)
        style = self._styles[code]
        if bold:
            style = style + Style(bold=True)
        return style


class ColorScope:
    """Context manager that turns a color and bold on for the duration of a block.

    Only one scope may be active per terminal at a time; scopes do not nest.
    If activation itself fails the error propagates and nothing is deactivated.
    """

    def __init__(self, terminal: "Terminal", color_code: int, bold: bool = True):
        self.terminal = terminal
        self.color_code = color_code
        self.bold = bold

    def __enter__(self) -> "ColorScope":
        self.terminal.activate(self.color_code, self.bold)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.terminal.deactivate(self.color_code, self.bold)
