"""Box primitive: geometry, border, background and focus for terminal widgets."""

import logging
from typing import Callable, Optional, Tuple

from PyQt6.QtGui import QColor

from .config import Styles
from .events import KeyEvent, MouseAction, MouseEvent
from .screen import Screen, Style, print_text
from .styles import Alignment

logger = logging.getLogger(__name__)

SetFocus = Callable[["Box"], None]
InputCapture = Callable[[KeyEvent], Optional[KeyEvent]]
MouseCapture = Callable[[MouseAction, MouseEvent], Tuple[MouseAction, Optional[MouseEvent]]]


class Box:
    """
    Base primitive occupying a rectangle of screen cells.

    A box paints its background, an optional border with a title, and
    tracks whether it has input focus. Subclasses draw their content inside
    getInnerRect() and react to input by overriding keyPressEvent() and
    mouseEvent(); hosts deliver input through handleKey() and handleMouse(),
    which run the installed capture functions first.

    Example:
        box = Box().setBorder(True).setTitle("Flags")
        box.setRect(0, 0, 20, 3)
        box.draw(screen)
    """

    def __init__(self, styles: Optional[Styles] = None):
        """
        Initialize the box.

        Args:
            styles: Default colors, Styles.dark_theme() when omitted.
        """
        self._styles = styles if styles is not None else Styles.dark_theme()

        # Geometry
        self._x = 0
        self._y = 0
        self._width = 15
        self._height = 10
        self._padding_top = 0
        self._padding_bottom = 0
        self._padding_left = 0
        self._padding_right = 0

        # Appearance
        self._background_color = QColor(self._styles.primitive_background)
        self._border = False
        self._border_color = QColor(self._styles.border)
        self._title = ""
        self._title_color = QColor(self._styles.title)
        self._title_align = Alignment.CENTER

        # State
        self._has_focus = False
        self._focus_func: Optional[Callable[[], None]] = None
        self._blur_func: Optional[Callable[[], None]] = None
        self._input_capture: Optional[InputCapture] = None
        self._mouse_capture: Optional[MouseCapture] = None

    def styles(self) -> Styles:
        """Get the style configuration this box was created with."""
        return self._styles

    # ==================== Geometry ====================

    def setRect(self, x: int, y: int, width: int, height: int) -> "Box":
        """Set the position and size of the box in screen cells."""
        self._x = x
        self._y = y
        self._width = width
        self._height = height
        return self

    def getRect(self) -> Tuple[int, int, int, int]:
        """Get the (x, y, width, height) of the box."""
        return self._x, self._y, self._width, self._height

    def setBorderPadding(self, top: int, bottom: int, left: int, right: int) -> "Box":
        """Set the padding between the border and the inner rectangle."""
        self._padding_top = top
        self._padding_bottom = bottom
        self._padding_left = left
        self._padding_right = right
        return self

    def getInnerRect(self) -> Tuple[int, int, int, int]:
        """
        Get the area available for content.

        Returns:
            (x, y, width, height) with border and padding removed. Width and
            height are never negative.
        """
        x, y, width, height = self.getRect()
        if self._border:
            x += 1
            y += 1
            width -= 2
            height -= 2
        x += self._padding_left
        y += self._padding_top
        width -= self._padding_left + self._padding_right
        height -= self._padding_top + self._padding_bottom
        return x, y, max(0, width), max(0, height)

    def inRect(self, x: int, y: int) -> bool:
        """Check whether a screen position lies inside the box."""
        return self._x <= x < self._x + self._width and self._y <= y < self._y + self._height

    # ==================== Appearance ====================

    def setBackgroundColor(self, color: QColor) -> "Box":
        """Set the background color of the box."""
        self._background_color = QColor(color)
        return self

    def backgroundColor(self) -> QColor:
        """Get the background color."""
        return self._background_color

    def setBorder(self, show: bool) -> "Box":
        """Enable or disable the border."""
        self._border = show
        return self

    def hasBorder(self) -> bool:
        """Check if the border is drawn."""
        return self._border

    def setBorderColor(self, color: QColor) -> "Box":
        """Set the border color."""
        self._border_color = QColor(color)
        return self

    def setTitle(self, title: str) -> "Box":
        """Set the title drawn on the top border."""
        self._title = title
        return self

    def title(self) -> str:
        """Get the title."""
        return self._title

    def setTitleColor(self, color: QColor) -> "Box":
        """Set the title color."""
        self._title_color = QColor(color)
        return self

    def setTitleAlign(self, align: Alignment) -> "Box":
        """Set the alignment of the title on the top border."""
        self._title_align = align
        return self

    # ==================== Focus ====================

    def focus(self, delegate: Optional[SetFocus] = None) -> None:
        """Give input focus to this box."""
        _ = delegate
        self._has_focus = True
        if self._focus_func is not None:
            self._focus_func()

    def blur(self) -> None:
        """Remove input focus from this box."""
        self._has_focus = False
        if self._blur_func is not None:
            self._blur_func()

    def hasFocus(self) -> bool:
        """Check if this box has input focus."""
        return self._has_focus

    def setFocusFunc(self, callback: Optional[Callable[[], None]]) -> "Box":
        """Set a callback invoked when the box receives focus."""
        self._focus_func = callback
        return self

    def setBlurFunc(self, callback: Optional[Callable[[], None]]) -> "Box":
        """Set a callback invoked when the box loses focus."""
        self._blur_func = callback
        return self

    # ==================== Drawing ====================

    def draw(self, screen: Screen) -> None:
        """Paint the background, the border and the title."""
        if self._width <= 0 or self._height <= 0:
            return

        background = Style(
            foreground=QColor(self._styles.primary_text),
            background=QColor(self._background_color),
        )
        screen.fill(self._x, self._y, self._width, self._height, " ", background)

        if self._border and self._width >= 2 and self._height >= 2:
            self._draw_border(screen, background.withForeground(self._border_color))

    def _draw_border(self, screen: Screen, style: Style) -> None:
        """Draw the border, with double lines while focused."""
        glyphs = self._styles.borders
        if self._has_focus:
            horizontal, vertical = glyphs.horizontal_focus, glyphs.vertical_focus
            corners = (
                glyphs.top_left_focus,
                glyphs.top_right_focus,
                glyphs.bottom_left_focus,
                glyphs.bottom_right_focus,
            )
        else:
            horizontal, vertical = glyphs.horizontal, glyphs.vertical
            corners = (
                glyphs.top_left,
                glyphs.top_right,
                glyphs.bottom_left,
                glyphs.bottom_right,
            )

        left = self._x
        right = self._x + self._width - 1
        top = self._y
        bottom = self._y + self._height - 1

        for x in range(left + 1, right):
            screen.set_content(x, top, horizontal, style)
            screen.set_content(x, bottom, horizontal, style)
        for y in range(top + 1, bottom):
            screen.set_content(left, y, vertical, style)
            screen.set_content(right, y, vertical, style)

        screen.set_content(left, top, corners[0], style)
        screen.set_content(right, top, corners[1], style)
        screen.set_content(left, bottom, corners[2], style)
        screen.set_content(right, bottom, corners[3], style)

        if self._title and self._width > 2:
            print_text(
                screen,
                self._title,
                left + 1,
                top,
                self._width - 2,
                self._title_align,
                self._title_color,
            )

    # ==================== Input ====================

    def setInputCapture(self, capture: Optional[InputCapture]) -> "Box":
        """
        Install a function that sees key events before this box does.

        Args:
            capture: Receives each key event and returns the event to pass on,
                possibly a different one, or None to consume it.
        """
        self._input_capture = capture
        return self

    def setMouseCapture(self, capture: Optional[MouseCapture]) -> "Box":
        """
        Install a function that sees mouse events before this box does.

        Args:
            capture: Receives (action, event) and returns (action, event);
                returning None for the event consumes it.
        """
        self._mouse_capture = capture
        return self

    def handleKey(self, event: KeyEvent, setFocus: SetFocus) -> None:
        """Deliver a key event through the input capture to keyPressEvent()."""
        if self._input_capture is not None:
            event = self._input_capture(event)
            if event is None:
                return
        self.keyPressEvent(event, setFocus)

    def handleMouse(
        self, action: MouseAction, event: MouseEvent, setFocus: SetFocus
    ) -> Tuple[bool, Optional["Box"]]:
        """
        Deliver a mouse event through the mouse capture to mouseEvent().

        Returns:
            Whether the event was consumed and the primitive that should
            capture subsequent mouse events, if any.
        """
        if self._mouse_capture is not None:
            action, event = self._mouse_capture(action, event)
            if event is None:
                return True, None
        return self.mouseEvent(action, event, setFocus)

    def keyPressEvent(self, event: KeyEvent, setFocus: SetFocus) -> None:
        """Handle a key event. Boxes ignore keys."""

    def mouseEvent(
        self, action: MouseAction, event: MouseEvent, setFocus: SetFocus
    ) -> Tuple[bool, Optional["Box"]]:
        """Handle a mouse event. A left press inside the box claims focus."""
        if not self.inRect(event.x, event.y):
            return False, None

        if action == MouseAction.LEFT_DOWN:
            logger.debug("Box at %s claimed focus by mouse", self.getRect())
            setFocus(self)
            return True, None

        return False, None
