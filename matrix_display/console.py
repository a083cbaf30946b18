"""
Shared Rich Console singletons for terminal output.

Rich's Console tracks terminal state (width, color support, whether output is
a TTY). The whole package writes through one instance so that a matrix drawn by
the renderer and the status messages printed around it agree on that state.
Tests patch `matrix_display.console.console` in one place to capture output.

`err_console` writes to stderr and is used for warnings and log records, so
they never interleave with a matrix being written to stdout.

Usage:
    from .console import console
    console.print("[green]Done[/green]")
"""

from rich.console import Console

console = Console()

err_console = Console(stderr=True)
