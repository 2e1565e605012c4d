"""Theme and text alignment enumerations."""

from enum import Enum


class Theme(Enum):
    """Theme enumeration for terminal primitives."""
    LIGHT = "light"
    DARK = "dark"


class Alignment(Enum):
    """Horizontal alignment of printed text within its column range."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
