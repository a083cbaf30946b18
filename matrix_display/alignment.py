"""
Fixed-width text alignment.

All of the padding in a rendered matrix comes from `positioned`: it places a
fragment at a given offset inside a field of spaces. Left, right and centered
alignment are just different ways of choosing that offset.

Content that is already as wide as the field (or wider) is returned as-is.
Nothing is truncated, so an overlong label pushes the rest of its line to the
right instead of being cut off.
"""

from enum import Enum
from typing import Protocol, runtime_checkable


@runtime_checkable
class TextLike(Protocol):
    """Anything with a length that can be turned into display text."""

    def __len__(self) -> int: ...

    def __str__(self) -> str: ...


class Aligned(Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


def positioned(content: TextLike, width: int, offset: int) -> str:
    """Return `content` padded with spaces to exactly `width` characters.

    `offset` spaces go in front of the content and the remainder after it.
    When the content does not fit (len >= width) it is returned unchanged.

    Args:
        content: The fragment to place.
        width: Width of the field in characters.
        offset: Number of leading spaces, 0 <= offset <= width - len(content).

    Returns:
        The padded string.
    """
    text = str(content)
    if len(text) >= width:
        return text
    left = " " * offset
    right = " " * (width - len(text) - offset)
    return left + text + right


def aligned_left(content: TextLike, width: int) -> str:
    return positioned(content, width, 0)


def aligned_right(content: TextLike, width: int) -> str:
    return positioned(content, width, width - len(content))


def centered(content: TextLike, width: int) -> str:
    """Center `content` in `width` characters.

    Odd padding puts the extra space on the right.
    """
    return positioned(content, width, (width - len(content)) // 2)


_ALIGNERS = {
    Aligned.LEFT: aligned_left,
    Aligned.RIGHT: aligned_right,
    Aligned.CENTER: centered,
}


def align(content: TextLike, width: int, alignment: Aligned = Aligned.LEFT) -> str:
    """Pad `content` to `width` using the given alignment."""
    return _ALIGNERS[alignment](content, width)
