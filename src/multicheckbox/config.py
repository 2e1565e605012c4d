"""Configuration and customization options for terminal primitives."""

from dataclasses import dataclass, field

from PyQt6.QtGui import QColor

from .colors import TerminalColors
from .styles import Theme


@dataclass
class BorderGlyphs:
    """Characters used to draw box borders."""

    horizontal: str = "─"
    vertical: str = "│"
    top_left: str = "┌"
    top_right: str = "┐"
    bottom_left: str = "└"
    bottom_right: str = "┘"

    # Focused boxes draw double lines
    horizontal_focus: str = "═"
    vertical_focus: str = "║"
    top_left_focus: str = "╔"
    top_right_focus: str = "╗"
    bottom_left_focus: str = "╚"
    bottom_right_focus: str = "╝"


@dataclass
class Styles:
    """Default colors handed to every primitive at construction."""

    # Backgrounds
    primitive_background: QColor = field(default_factory=lambda: QColor(0, 0, 0))
    contrast_background: QColor = field(default_factory=lambda: QColor(0, 0, 255))
    more_contrast_background: QColor = field(default_factory=lambda: QColor(0, 128, 0))

    # Decorations
    border: QColor = field(default_factory=lambda: QColor(255, 255, 255))
    title: QColor = field(default_factory=lambda: QColor(255, 255, 255))
    graphics: QColor = field(default_factory=lambda: QColor(255, 255, 255))

    # Text colors
    primary_text: QColor = field(default_factory=lambda: QColor(255, 255, 255))
    secondary_text: QColor = field(default_factory=lambda: QColor(255, 255, 0))
    tertiary_text: QColor = field(default_factory=lambda: QColor(0, 128, 0))
    inverse_text: QColor = field(default_factory=lambda: QColor(0, 0, 255))
    contrast_secondary_text: QColor = field(default_factory=lambda: QColor(0, 139, 139))

    borders: BorderGlyphs = field(default_factory=BorderGlyphs)

    @classmethod
    def dark_theme(cls) -> "Styles":
        """Create a dark theme configuration."""
        field_colors = TerminalColors.get_field_colors(Theme.DARK)
        return cls(
            primitive_background=TerminalColors.get_background_color(Theme.DARK),
            contrast_background=field_colors['background'],
            more_contrast_background=QColor(TerminalColors.GREEN),
            border=QColor(TerminalColors.WHITE),
            title=QColor(TerminalColors.WHITE),
            graphics=QColor(TerminalColors.WHITE),
            primary_text=field_colors['text'],
            secondary_text=field_colors['label'],
            tertiary_text=QColor(TerminalColors.GREEN),
            inverse_text=QColor(TerminalColors.BLUE),
            contrast_secondary_text=QColor(TerminalColors.DARK_CYAN),
        )

    @classmethod
    def light_theme(cls) -> "Styles":
        """Create a light theme configuration."""
        field_colors = TerminalColors.get_field_colors(Theme.LIGHT)
        return cls(
            primitive_background=TerminalColors.get_background_color(Theme.LIGHT),
            contrast_background=field_colors['background'],
            more_contrast_background=QColor(TerminalColors.SILVER),
            border=QColor(TerminalColors.GRAY),
            title=QColor(TerminalColors.BLACK),
            graphics=QColor(TerminalColors.GRAY),
            primary_text=field_colors['text'],
            secondary_text=field_colors['label'],
            tertiary_text=QColor(TerminalColors.TEAL),
            inverse_text=QColor(TerminalColors.WHITE),
            contrast_secondary_text=QColor(TerminalColors.MAROON),
        )

    @classmethod
    def for_theme(cls, theme: Theme) -> "Styles":
        """Create the configuration matching a theme."""
        if theme == Theme.LIGHT:
            return cls.light_theme()
        return cls.dark_theme()

    def copy(self) -> "Styles":
        """Create a deep copy of this configuration."""
        import copy
        return copy.deepcopy(self)
