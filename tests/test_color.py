"""
Tests for color schemes, ColorScope and the terminal sinks.

ColorScope is tested against a MagicMock terminal so the exact sequence of
activate/deactivate calls can be checked, including when the guarded block
raises. The sinks are tested directly: BufferTerminal in memory, RichTerminal
against a Rich Console writing into a StringIO.
"""

import io
import unittest
from unittest.mock import MagicMock, call

from rich.console import Console
from rich.style import Style

from matrix_display.color import DEFAULT_COLORS, ColorScheme, ColorScope
from matrix_display.exceptions import ColorScopeError, InvalidColorScheme, UnknownColorCode
from matrix_display.terminal import BufferTerminal, RichTerminal


class TestColorScheme(unittest.TestCase):
    """Test color registration"""

    def test_codes_index_background_colors(self):
        """Code i is black text on colors[i]"""
        scheme = ColorScheme(["red", "#00ff00"])
        self.assertEqual(len(scheme), 2)
        self.assertEqual(scheme.style(0), Style(color="black", bgcolor="red"))
        self.assertEqual(scheme.style(1), Style(color="black", bgcolor="#00ff00"))

    def test_bold_style(self):
        scheme = ColorScheme(["red"])
        self.assertTrue(scheme.style(0, bold=True).bold)
        self.assertFalse(scheme.style(0).bold)

    def test_unknown_code_raises(self):
        scheme = ColorScheme(["red"])
        with self.assertRaises(UnknownColorCode) as ctx:
            scheme.style(1)
        self.assertEqual(ctx.exception.code, 1)
        self.assertEqual(ctx.exception.size, 1)
        with self.assertRaises(UnknownColorCode):
            scheme.check(-1)

    def test_membership(self):
        scheme = ColorScheme(DEFAULT_COLORS)
        self.assertIn(0, scheme)
        self.assertIn(len(DEFAULT_COLORS) - 1, scheme)
        self.assertNotIn(len(DEFAULT_COLORS), scheme)
        self.assertNotIn("0", scheme)

    def test_invalid_color_name(self):
        with self.assertRaises(InvalidColorScheme):
            ColorScheme(["red", "not-a-color"])


class TestColorScope(unittest.TestCase):
    """Test scoped activation of color attributes"""

    def setUp(self):
        self.terminal = MagicMock()

    def test_activates_and_deactivates_with_bold(self):
        with ColorScope(self.terminal, 3):
            self.terminal.write_wide("x")
        self.assertEqual(
            self.terminal.mock_calls,
            [call.activate(3, True), call.write_wide("x"), call.deactivate(3, True)],
        )

    def test_deactivates_when_block_raises(self):
        """The attribute is released and the error still propagates"""
        with self.assertRaises(ZeroDivisionError):
            with ColorScope(self.terminal, 2):
                1 / 0  # noqa: B018
        self.terminal.deactivate.assert_called_once_with(2, True)

    def test_failed_activation_is_not_deactivated(self):
        self.terminal.activate.side_effect = UnknownColorCode(9, 2)
        with self.assertRaises(UnknownColorCode):
            with ColorScope(self.terminal, 9):
                self.fail("block should not run")
        self.terminal.deactivate.assert_not_called()


class TestBufferTerminal(unittest.TestCase):
    """Test the in-memory sink"""

    def test_collects_text_and_lines(self):
        terminal = BufferTerminal()
        terminal.write_wide("ab")
        terminal.write_wide("c")
        terminal.write_newline()
        terminal.write_wide("d")
        self.assertEqual(terminal.getvalue(), "abc\nd")
        self.assertEqual(terminal.lines(), ["abc", "d"])

    def test_records_attribute_events(self):
        terminal = BufferTerminal()
        with ColorScope(terminal, 1):
            self.assertEqual(terminal.active, (1, True))
        self.assertIsNone(terminal.active)
        self.assertEqual(terminal.events, [("activate", 1, True), ("deactivate", 1, True)])

    def test_nested_scopes_are_rejected(self):
        terminal = BufferTerminal()
        with ColorScope(terminal, 0):
            with self.assertRaises(ColorScopeError):
                terminal.activate(1, True)

    def test_deactivate_without_activate(self):
        with self.assertRaises(ColorScopeError):
            BufferTerminal().deactivate(0, True)

    def test_checks_codes_against_scheme(self):
        terminal = BufferTerminal(ColorScheme(["red"]))
        with self.assertRaises(UnknownColorCode):
            terminal.activate(5, True)
        self.assertIsNone(terminal.active)
        self.assertEqual(terminal.events, [])


class TestRichTerminal(unittest.TestCase):
    """Test the Rich Console sink"""

    def make_console(self, **kwargs):
        self.output = io.StringIO()
        return Console(file=self.output, width=200, **kwargs)

    def test_plain_output_is_exact(self):
        terminal = RichTerminal(self.make_console(color_system=None))
        terminal.write_wide("┃ [b]A ┃")
        terminal.write_newline()
        self.assertEqual(self.output.getvalue(), "┃ [b]A ┃\n")

    def test_colored_output_wraps_only_scoped_text(self):
        console = self.make_console(force_terminal=True, color_system="standard")
        terminal = RichTerminal(console, ColorScheme(["red"]))
        terminal.write_wide("|")
        with ColorScope(terminal, 0):
            terminal.write_wide(" A ")
        terminal.write_wide("|")
        output = self.output.getvalue()
        self.assertTrue(output.startswith("|"))
        self.assertTrue(output.endswith("|"))
        self.assertIn("\x1b[", output)
        self.assertIn(" A ", output)

    def test_default_scheme(self):
        terminal = RichTerminal(self.make_console(color_system=None))
        self.assertEqual(len(terminal.scheme), len(DEFAULT_COLORS))

    def test_unknown_code_propagates(self):
        terminal = RichTerminal(self.make_console(color_system=None), ColorScheme(["red"]))
        with self.assertRaises(UnknownColorCode):
            terminal.activate(4, True)
        # A failed activation leaves no attribute behind
        terminal.activate(0, True)
        terminal.deactivate(0, True)


if __name__ == "__main__":
    unittest.main()
