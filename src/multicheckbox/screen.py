"""Character cell grid that primitives draw onto."""

import unicodedata
from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple

from PyQt6.QtGui import QColor

from .styles import Alignment


@dataclass
class Style:
    """Foreground and background color of a single cell."""

    foreground: QColor = field(default_factory=lambda: QColor(255, 255, 255))
    background: QColor = field(default_factory=lambda: QColor(0, 0, 0))

    def withForeground(self, color: QColor) -> "Style":
        """Return a copy of this style with another foreground."""
        return replace(self, foreground=QColor(color))

    def withBackground(self, color: QColor) -> "Style":
        """Return a copy of this style with another background."""
        return replace(self, background=QColor(color))

    def reversed(self) -> "Style":
        """Return the reverse-video version of this style."""
        return Style(foreground=QColor(self.background), background=QColor(self.foreground))


@dataclass
class Cell:
    """A single character position on the screen."""

    char: str = " "
    style: Style = field(default_factory=Style)


def char_width(char: str) -> int:
    """Get the number of columns a single character occupies."""
    if unicodedata.combining(char):
        return 0
    if unicodedata.east_asian_width(char) in ("W", "F"):
        return 2
    return 1


def string_width(text: str) -> int:
    """Get the number of columns a string occupies."""
    return sum(char_width(char) for char in text)


class Screen:
    """
    Fixed-size grid of styled character cells.

    Writes that fall outside the grid are silently dropped, so primitives
    may draw past their own bounds without corrupting anything.
    """

    def __init__(self, width: int, height: int, style: Optional[Style] = None):
        self._default_style = style if style is not None else Style()
        self._width = 0
        self._height = 0
        self._cells: List[List[Cell]] = []
        self.resize(width, height)

    def size(self) -> Tuple[int, int]:
        """Get the (width, height) of the grid."""
        return self._width, self._height

    def default_style(self) -> Style:
        """Get the style used for cleared cells."""
        return self._default_style

    def set_default_style(self, style: Style) -> None:
        """Set the style used for cleared cells."""
        self._default_style = style

    def resize(self, width: int, height: int) -> None:
        """Resize the grid, discarding its content."""
        self._width = max(0, width)
        self._height = max(0, height)
        self.clear()

    def clear(self) -> None:
        """Reset every cell to a blank in the default style."""
        self._cells = [
            [Cell(" ", self._default_style) for _ in range(self._width)]
            for _ in range(self._height)
        ]

    def contains(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies on the grid."""
        return 0 <= x < self._width and 0 <= y < self._height

    def set_content(self, x: int, y: int, char: str, style: Style) -> None:
        """Put a character with a style at a position."""
        if not self.contains(x, y):
            return
        self._cells[y][x] = Cell(char, style)

    def get_content(self, x: int, y: int) -> Optional[Cell]:
        """Get the cell at a position, or None outside the grid."""
        if not self.contains(x, y):
            return None
        return self._cells[y][x]

    def fill(self, x: int, y: int, width: int, height: int, char: str, style: Style) -> None:
        """Fill a rectangle with one character and style."""
        for row in range(y, y + height):
            for column in range(x, x + width):
                self.set_content(column, row, char, style)

    def row_text(self, y: int) -> str:
        """Get the characters of one row as a string."""
        if not 0 <= y < self._height:
            return ""
        return "".join(cell.char for cell in self._cells[y])


def print_text(
    screen: Screen,
    text: str,
    x: int,
    y: int,
    max_width: int,
    align: Alignment,
    color: QColor,
) -> Tuple[int, int]:
    """
    Print text onto the screen, truncated to max_width columns.

    Each written cell keeps the background it already had and takes color
    as its foreground.

    Args:
        screen: Target screen.
        text: Text to print.
        x: Leftmost column of the available range.
        y: Row to print on.
        max_width: Number of columns available.
        align: Alignment of the text within the available range.
        color: Foreground color.

    Returns:
        The column the text starts at and the number of columns printed.
    """
    if max_width <= 0 or not text:
        return x, 0

    # Truncate to whole characters that fit
    printed = []
    width = 0
    for char in text:
        w = char_width(char)
        if width + w > max_width:
            break
        printed.append((char, w))
        width += w

    if align == Alignment.CENTER:
        start = x + (max_width - width) // 2
    elif align == Alignment.RIGHT:
        start = x + max_width - width
    else:
        start = x

    column = start
    for char, w in printed:
        if w == 0:
            continue
        existing = screen.get_content(column, y)
        base = existing.style if existing is not None else screen.default_style()
        screen.set_content(column, y, char, base.withForeground(color))
        # Wide characters cover the next cell too
        for extra in range(1, w):
            screen.set_content(column + extra, y, "", base.withForeground(color))
        column += w

    return start, width
