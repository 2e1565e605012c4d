"""
Multi-bit checkbox control for character cell user interfaces on PyQt6.
"""

from .box import Box
from .colors import TerminalColors
from .config import BorderGlyphs, Styles
from .events import Key, KeyEvent, Modifier, MouseAction, MouseEvent
from .form import FormItem
from .multicheckbox import MultiCheckbox
from .screen import Cell, Screen, Style, print_text, string_width
from .styles import Alignment, Theme
from .view import TerminalView

__version__ = "1.0.0"

__all__ = [
    "Alignment",
    "BorderGlyphs",
    "Box",
    "Cell",
    "FormItem",
    "Key",
    "KeyEvent",
    "Modifier",
    "MouseAction",
    "MouseEvent",
    "MultiCheckbox",
    "Screen",
    "Style",
    "Styles",
    "TerminalColors",
    "TerminalView",
    "Theme",
    "print_text",
    "string_width",
]
