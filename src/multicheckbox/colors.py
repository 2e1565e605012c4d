"""Terminal color palette."""

from PyQt6.QtGui import QColor

from .styles import Theme


class TerminalColors:
    """Named terminal colors used by the dark and light themes."""

    BLACK = QColor(0, 0, 0)
    WHITE = QColor(255, 255, 255)
    SILVER = QColor(192, 192, 192)
    GRAY = QColor(128, 128, 128)
    NAVY = QColor(0, 0, 128)
    BLUE = QColor(0, 0, 255)
    GREEN = QColor(0, 128, 0)
    LIME = QColor(0, 255, 0)
    YELLOW = QColor(255, 255, 0)
    OLIVE = QColor(128, 128, 0)
    TEAL = QColor(0, 128, 128)
    DARK_CYAN = QColor(0, 139, 139)
    MAROON = QColor(128, 0, 0)
    LIGHT_GRAY = QColor(229, 229, 229)

    @classmethod
    def get_background_color(cls, theme: Theme = Theme.DARK) -> QColor:
        """Get the primitive background color for the specified theme."""
        return QColor(cls.BLACK if theme == Theme.DARK else cls.WHITE)

    @classmethod
    def get_field_colors(cls, theme: Theme = Theme.DARK) -> dict:
        """Get the input field colors for the specified theme."""
        if theme == Theme.DARK:
            return {
                'background': QColor(cls.BLUE),
                'text': QColor(cls.WHITE),
                'label': QColor(cls.YELLOW),
            }
        else:
            return {
                'background': QColor(cls.LIGHT_GRAY),
                'text': QColor(cls.BLACK),
                'label': QColor(cls.NAVY),
            }
