"""
Reading and writing grids as JSON.

A grid file is a JSON array of rows. Each row is an array of cells, and each
cell is either a plain string (drawn with color 0) or an object with a
"content" string and an optional integer "color":

    [
      ["A", {"content": "B", "color": 2}],
      ["C", "D"]
    ]

The shape of the grid is not checked here; MatrixDisplay does that when the
grid is drawn.
"""

import json
from pathlib import Path
from typing import Any

from .display import Cell, Grid
from .exceptions import GridFileError


def _parse_cell(raw: Any, row: int, column: int) -> Cell:
    if isinstance(raw, str):
        return Cell(raw)
    if isinstance(raw, dict) and isinstance(raw.get("content"), str):
        color = raw.get("color", 0)
        # bool is an int subclass but not a color code
        if not isinstance(color, int) or isinstance(color, bool):
            raise GridFileError(f"Cell ({row}, {column}): color must be an integer")
        return Cell(raw["content"], color)
    raise GridFileError(f"Cell ({row}, {column}): expected a string or a content object")


def parse_grid(data: Any) -> list[list[Cell]]:
    """Convert decoded JSON data into rows of Cells."""
    if not isinstance(data, list):
        raise GridFileError("Grid must be a JSON array of rows")
    grid = []
    for r, raw_row in enumerate(data):
        if not isinstance(raw_row, list):
            raise GridFileError(f"Row {r}: expected an array of cells")
        grid.append([_parse_cell(raw, r, c) for c, raw in enumerate(raw_row)])
    return grid


def load_grid(filepath: Path | str) -> list[list[Cell]]:
    """Load a grid from a JSON file"""
    try:
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise GridFileError(f"Could not read grid file {filepath}: {e}") from e
    except ValueError as e:
        raise GridFileError(f"Invalid JSON in grid file {filepath}: {e}") from e
    return parse_grid(data)


def save_grid(grid: Grid, filepath: Path | str) -> None:
    """Save a grid to a JSON file"""
    data = [
        [
            cell.content if cell.color_code == 0 else {"content": cell.content, "color": cell.color_code}
            for cell in row
        ]
        for row in grid
    ]
    try:
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise GridFileError(f"Could not write grid file {filepath}: {e}") from e
