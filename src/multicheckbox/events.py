"""Keyboard and mouse events delivered to terminal primitives."""

from dataclasses import dataclass
from enum import Enum, Flag, auto


class Key(Enum):
    """Key identifiers. RUNE carries the typed character in KeyEvent.rune."""
    RUNE = auto()
    ENTER = auto()
    TAB = auto()
    BACKTAB = auto()
    ESCAPE = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    BACKSPACE = auto()
    DELETE = auto()
    INSERT = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()


class Modifier(Flag):
    """Keyboard modifiers held during an event."""
    NONE = 0
    SHIFT = auto()
    CTRL = auto()
    ALT = auto()
    META = auto()


@dataclass
class KeyEvent:
    """A single key press."""

    key: Key
    rune: str = ""
    modifiers: Modifier = Modifier.NONE

    @classmethod
    def character(cls, rune: str, modifiers: Modifier = Modifier.NONE) -> "KeyEvent":
        """Create a RUNE event for a typed character."""
        return cls(Key.RUNE, rune, modifiers)


class MouseAction(Enum):
    """Mouse actions, derived from raw button state by the host view."""
    MOVE = auto()
    LEFT_DOWN = auto()
    LEFT_UP = auto()
    LEFT_CLICK = auto()
    LEFT_DOUBLE_CLICK = auto()
    MIDDLE_DOWN = auto()
    MIDDLE_UP = auto()
    MIDDLE_CLICK = auto()
    RIGHT_DOWN = auto()
    RIGHT_UP = auto()
    RIGHT_CLICK = auto()
    SCROLL_UP = auto()
    SCROLL_DOWN = auto()


@dataclass
class MouseEvent:
    """Mouse state in screen cell coordinates."""

    x: int
    y: int
    buttons: int = 0
    modifiers: Modifier = Modifier.NONE

    def position(self):
        """Get the (x, y) cell position."""
        return self.x, self.y
