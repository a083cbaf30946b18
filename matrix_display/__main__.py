"""
Entry point for running the renderer as a module: `python -m matrix_display`

This is the same `main()` the `matrix-display` console script in
pyproject.toml calls, so both ways of launching behave identically.
"""

from .main import main

if __name__ == "__main__":
    main()
