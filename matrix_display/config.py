import json
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .color import DEFAULT_COLORS, ColorScheme
from .console import err_console
from .exceptions import MatrixDisplayError
from .style import MatrixStyle, get_preset

# Load environment variables from .env file
load_dotenv()

# Configuration Defaults
DEFAULT_CONFIG = {
    "CELL_WIDTH": "5",
    "CELL_HEIGHT": "1",
    "GLYPHS": "heavy",
    "COLORS": ",".join(DEFAULT_COLORS),
    "LOG_LEVEL": "WARNING",
    "PLAIN": "false",
}

# Settings are looked up in the environment under this prefix
ENV_PREFIX = "MATRIX_DISPLAY_"

# File Paths
CONFIG_DIR = Path(os.getenv("MATRIX_DISPLAY_DIR", str(Path.home() / ".matrix_display")))
CONFIG_FILE = Path(os.getenv("MATRIX_DISPLAY_CONFIG_FILE", str(CONFIG_DIR / "config.json")))


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load configuration from file"""
    path = path or CONFIG_FILE
    if path.exists():
        try:
            with open(path) as f:
                config = json.load(f)
            if isinstance(config, dict):
                return config
            err_console.print(f"[yellow]Warning: Ignoring config file {path}: not an object[/yellow]")
        except (OSError, ValueError) as e:
            err_console.print(f"[yellow]Warning: Could not load config file: {e}[/yellow]")
    return {}


def get_setting(key: str, default: str) -> str:
    """Get setting with priority: Env Var > Config File > Default"""
    # 1. Environment Variable
    env_val = os.getenv(ENV_PREFIX + key)
    if env_val:
        return env_val

    # 2. Config File
    config = load_config()
    if key in config:
        return str(config[key])

    # 3. Default
    return default


def get_int_setting(key: str, default: int) -> int:
    """Get integer setting with priority: Env Var > Config File > Default"""
    value = get_setting(key, str(default))
    try:
        return int(value)
    except ValueError:
        err_console.print(
            f"[yellow]Warning: Invalid integer value for {key}: {value}, using default {default}[/yellow]"
        )
        return default


def get_bool_setting(key: str, default: bool) -> bool:
    """Get boolean setting with priority: Env Var > Config File > Default"""
    value = get_setting(key, str(default).lower())
    return value.lower() in ("true", "1", "yes", "on")


def get_list_setting(key: str, default: list[str]) -> list[str]:
    """Get a list setting; blank entries are dropped

    Environment variables hold comma-separated strings. The config file may use
    either a JSON array or a comma-separated string.
    """
    if not os.getenv(ENV_PREFIX + key):
        stored = load_config().get(key)
        if isinstance(stored, list):
            items = [str(item).strip() for item in stored if str(item).strip()]
            return items or list(default)
    value = get_setting(key, ",".join(default))
    items = [item.strip() for item in value.split(",") if item.strip()]
    return items or list(default)


def load_style() -> MatrixStyle:
    """Build the configured MatrixStyle, falling back to defaults for bad values"""
    width = get_int_setting("CELL_WIDTH", int(DEFAULT_CONFIG["CELL_WIDTH"]))
    height = get_int_setting("CELL_HEIGHT", int(DEFAULT_CONFIG["CELL_HEIGHT"]))
    glyph_name = get_setting("GLYPHS", DEFAULT_CONFIG["GLYPHS"])
    try:
        glyphs = get_preset(glyph_name)
    except MatrixDisplayError as e:
        err_console.print(f"[yellow]Warning: {e}, using {DEFAULT_CONFIG['GLYPHS']}[/yellow]")
        glyphs = get_preset(DEFAULT_CONFIG["GLYPHS"])
    try:
        return MatrixStyle(width, height, glyphs)
    except MatrixDisplayError as e:
        err_console.print(f"[yellow]Warning: {e}, using default cell size[/yellow]")
        return MatrixStyle(
            int(DEFAULT_CONFIG["CELL_WIDTH"]), int(DEFAULT_CONFIG["CELL_HEIGHT"]), glyphs
        )


def load_color_scheme() -> ColorScheme:
    """Build the configured ColorScheme, falling back to DEFAULT_COLORS"""
    colors = get_list_setting("COLORS", list(DEFAULT_COLORS))
    try:
        return ColorScheme(colors)
    except MatrixDisplayError as e:
        err_console.print(f"[yellow]Warning: {e}, using default colors[/yellow]")
        return ColorScheme(DEFAULT_COLORS)
