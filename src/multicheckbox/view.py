"""Qt widget hosting terminal primitives on a character cell grid."""

import logging
from typing import Optional, Tuple

from PyQt6.QtWidgets import QWidget, QSizePolicy
from PyQt6.QtGui import (
    QPainter,
    QFont,
    QFontDatabase,
    QFontMetrics,
    QKeyEvent,
    QMouseEvent,
    QPaintEvent,
    QWheelEvent,
)
from PyQt6.QtCore import Qt, QPointF, QRect, QSize, pyqtSignal

from .box import Box
from .config import Styles
from .events import Key, KeyEvent, Modifier, MouseAction, MouseEvent
from .screen import Screen, Style

logger = logging.getLogger(__name__)

_KEY_MAP = {
    Qt.Key.Key_Return: Key.ENTER,
    Qt.Key.Key_Enter: Key.ENTER,
    Qt.Key.Key_Tab: Key.TAB,
    Qt.Key.Key_Backtab: Key.BACKTAB,
    Qt.Key.Key_Escape: Key.ESCAPE,
    Qt.Key.Key_Up: Key.UP,
    Qt.Key.Key_Down: Key.DOWN,
    Qt.Key.Key_Left: Key.LEFT,
    Qt.Key.Key_Right: Key.RIGHT,
    Qt.Key.Key_Home: Key.HOME,
    Qt.Key.Key_End: Key.END,
    Qt.Key.Key_PageUp: Key.PAGE_UP,
    Qt.Key.Key_PageDown: Key.PAGE_DOWN,
    Qt.Key.Key_Backspace: Key.BACKSPACE,
    Qt.Key.Key_Delete: Key.DELETE,
    Qt.Key.Key_Insert: Key.INSERT,
    Qt.Key.Key_F1: Key.F1,
    Qt.Key.Key_F2: Key.F2,
    Qt.Key.Key_F3: Key.F3,
    Qt.Key.Key_F4: Key.F4,
    Qt.Key.Key_F5: Key.F5,
    Qt.Key.Key_F6: Key.F6,
    Qt.Key.Key_F7: Key.F7,
    Qt.Key.Key_F8: Key.F8,
    Qt.Key.Key_F9: Key.F9,
    Qt.Key.Key_F10: Key.F10,
    Qt.Key.Key_F11: Key.F11,
    Qt.Key.Key_F12: Key.F12,
}

# QKeyEvent.key() reports plain ints
_KEY_CODES = {qt_key.value: key for qt_key, key in _KEY_MAP.items()}

_MODIFIER_MAP = (
    (Qt.KeyboardModifier.ShiftModifier, Modifier.SHIFT),
    (Qt.KeyboardModifier.ControlModifier, Modifier.CTRL),
    (Qt.KeyboardModifier.AltModifier, Modifier.ALT),
    (Qt.KeyboardModifier.MetaModifier, Modifier.META),
)

_PRESS_ACTIONS = {
    Qt.MouseButton.LeftButton: (MouseAction.LEFT_DOWN, MouseAction.LEFT_UP, MouseAction.LEFT_CLICK),
    Qt.MouseButton.MiddleButton: (
        MouseAction.MIDDLE_DOWN,
        MouseAction.MIDDLE_UP,
        MouseAction.MIDDLE_CLICK,
    ),
    Qt.MouseButton.RightButton: (
        MouseAction.RIGHT_DOWN,
        MouseAction.RIGHT_UP,
        MouseAction.RIGHT_CLICK,
    ),
}


def _translate_modifiers(modifiers: Qt.KeyboardModifier) -> Modifier:
    result = Modifier.NONE
    for qt_modifier, modifier in _MODIFIER_MAP:
        if modifiers & qt_modifier:
            result |= modifier
    return result


class TerminalView(QWidget):
    """
    Widget that paints a grid of character cells and routes input to a root
    primitive.

    The grid size follows the widget size divided by the cell size of a
    monospace font. Key events go to the focused primitive; mouse events go
    to the primitive capturing the mouse, or to the root.

    Signals:
        focusChanged: Emitted with the newly focused primitive (or None).
        keyDispatched: Emitted with each translated KeyEvent after dispatch.

    Example:
        view = TerminalView()
        flags = MultiCheckbox().setLabel("Flags: ").setBits(8)
        view.setRoot(flags)
        view.setFocusPrimitive(flags)
        view.show()
    """

    focusChanged = pyqtSignal(object)
    keyDispatched = pyqtSignal(object)

    DEFAULT_FONT_SIZE = 11

    def __init__(self, parent: Optional[QWidget] = None, styles: Optional[Styles] = None):
        """
        Initialize the terminal view.

        Args:
            parent: Parent widget.
            styles: Colors for cleared cells, Styles.dark_theme() when omitted.
        """
        super().__init__(parent)
        self._styles = styles if styles is not None else Styles.dark_theme()
        self._root: Optional[Box] = None
        self._fullscreen = True
        self._focused: Optional[Box] = None
        self._mouse_capture: Optional[Box] = None
        self._pressed_cell: Optional[Tuple[int, int]] = None
        self._screen = Screen(0, 0, self._default_style())

        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setMouseTracking(True)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

        font = QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont)
        font.setPointSize(self.DEFAULT_FONT_SIZE)
        font.setStyleHint(QFont.StyleHint.TypeWriter)
        self.setFont(font)
        self._update_grid()

    def _default_style(self) -> Style:
        return Style(
            foreground=self._styles.primary_text,
            background=self._styles.primitive_background,
        )

    # ==================== Configuration ====================

    def setStyles(self, styles: Styles) -> None:
        """Set the colors used for cleared cells."""
        self._styles = styles
        self._screen.set_default_style(self._default_style())
        self.update()

    def styles(self) -> Styles:
        """Get the colors used for cleared cells."""
        return self._styles

    def setFontPointSize(self, size: int) -> None:
        """
        Set the point size of the cell font.

        Args:
            size: Point size, at least 1.

        Raises:
            ValueError: If size is less than 1.
        """
        if size < 1:
            raise ValueError("Font point size must be at least 1")
        font = self.font()
        font.setPointSize(size)
        self.setFont(font)
        self._update_grid()
        self.update()

    def cellSize(self) -> QSize:
        """Get the pixel size of one character cell."""
        metrics = QFontMetrics(self.font())
        return QSize(max(1, metrics.horizontalAdvance("M")), max(1, metrics.height()))

    def columns(self) -> int:
        """Get the number of grid columns."""
        self._update_grid()
        return self._screen.size()[0]

    def rows(self) -> int:
        """Get the number of grid rows."""
        self._update_grid()
        return self._screen.size()[1]

    def cellScreen(self) -> Screen:
        """Get the cell grid the root primitive draws onto."""
        self._update_grid()
        return self._screen

    def sizeHint(self) -> QSize:
        """Suggest an 80x24 cell area."""
        cell = self.cellSize()
        return QSize(cell.width() * 80, cell.height() * 24)

    # ==================== Primitives ====================

    def setRoot(self, root: Optional[Box], fullscreen: bool = True) -> None:
        """
        Set the primitive drawn by this view.

        Args:
            root: Primitive to draw, or None to clear.
            fullscreen: Resize the root to cover the whole grid on every paint.
        """
        self._root = root
        self._fullscreen = fullscreen
        self._mouse_capture = None
        self.update()

    def root(self) -> Optional[Box]:
        """Get the root primitive."""
        return self._root

    def setFocusPrimitive(self, primitive: Optional[Box]) -> None:
        """Move input focus to a primitive."""
        if primitive is self._focused:
            return
        if self._focused is not None:
            self._focused.blur()
        self._focused = primitive
        if primitive is not None:
            primitive.focus(self.setFocusPrimitive)
        logger.debug("Focus moved to %r", primitive)
        self.focusChanged.emit(primitive)
        self.update()

    def focusPrimitive(self) -> Optional[Box]:
        """Get the primitive with input focus."""
        return self._focused

    # ==================== Geometry ====================

    def _update_grid(self) -> None:
        """Resize the screen to the number of cells that fit the widget."""
        cell = self.cellSize()
        columns = max(0, self.width() // cell.width())
        rows = max(0, self.height() // cell.height())
        if (columns, rows) != self._screen.size():
            self._screen.resize(columns, rows)

    def cellAt(self, pos: QPointF) -> Tuple[int, int]:
        """Get the (column, row) of the cell under a pixel position."""
        cell = self.cellSize()
        return int(pos.x()) // cell.width(), int(pos.y()) // cell.height()

    def resizeEvent(self, event) -> None:
        """Handle resize events."""
        super().resizeEvent(event)
        self._update_grid()

    # ==================== Paint Events ====================

    def paintEvent(self, event: QPaintEvent) -> None:
        """Draw the root primitive onto the grid and paint every cell."""
        self._update_grid()
        self._screen.clear()

        if self._root is not None:
            if self._fullscreen:
                self._root.setRect(0, 0, self.columns(), self.rows())
            self._root.draw(self._screen)

        painter = QPainter(self)
        painter.setFont(self.font())
        painter.fillRect(self.rect(), self._styles.primitive_background)

        cell = self.cellSize()
        columns, rows = self._screen.size()
        for y in range(rows):
            for x in range(columns):
                content = self._screen.get_content(x, y)
                rect = QRect(x * cell.width(), y * cell.height(), cell.width(), cell.height())
                painter.fillRect(rect, content.style.background)
                if content.char.strip():
                    painter.setPen(content.style.foreground)
                    painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, content.char)

        painter.end()

    # ==================== Keyboard ====================

    def focusNextPrevChild(self, next: bool) -> bool:
        """Keep Tab and Backtab inside the view."""
        return False

    def translateKeyEvent(self, event: QKeyEvent) -> Optional[KeyEvent]:
        """
        Convert a Qt key event to a KeyEvent.

        Returns:
            The translated event, or None for keys without a mapping such as
            bare modifier presses.
        """
        modifiers = _translate_modifiers(event.modifiers())
        key = _KEY_CODES.get(event.key())
        if key is not None:
            if key == Key.TAB and modifiers & Modifier.SHIFT:
                key = Key.BACKTAB
            return KeyEvent(key, "", modifiers)

        text = event.text()
        if len(text) == 1 and text.isprintable():
            return KeyEvent.character(text, modifiers)

        return None

    def keyPressEvent(self, event: QKeyEvent) -> None:
        """Dispatch the key to the focused primitive."""
        translated = self.translateKeyEvent(event)
        if translated is None:
            logger.debug("Ignoring unmapped key %#x", event.key())
            super().keyPressEvent(event)
            return

        if self._focused is not None:
            self._focused.handleKey(translated, self.setFocusPrimitive)
        self.keyDispatched.emit(translated)
        event.accept()
        self.update()

    # ==================== Mouse ====================

    def _mouse_event(self, event) -> MouseEvent:
        x, y = self.cellAt(event.position())
        return MouseEvent(
            x=x,
            y=y,
            buttons=event.buttons().value,
            modifiers=_translate_modifiers(event.modifiers()),
        )

    def _dispatch_mouse(self, action: MouseAction, event: MouseEvent) -> bool:
        """Send a mouse action to the capturing primitive, or the root."""
        target = self._mouse_capture if self._mouse_capture is not None else self._root
        if target is None:
            return False

        consumed, capture = target.handleMouse(action, event, self.setFocusPrimitive)
        self._mouse_capture = capture
        self.update()
        return consumed

    def mousePressEvent(self, event: QMouseEvent) -> None:
        """Handle mouse press."""
        actions = _PRESS_ACTIONS.get(event.button())
        if actions is None:
            super().mousePressEvent(event)
            return

        translated = self._mouse_event(event)
        self._pressed_cell = translated.position()
        self._dispatch_mouse(actions[0], translated)
        event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        """Handle mouse release, producing a click on the pressed cell."""
        actions = _PRESS_ACTIONS.get(event.button())
        if actions is None:
            super().mouseReleaseEvent(event)
            return

        translated = self._mouse_event(event)
        self._dispatch_mouse(actions[1], translated)
        if self._pressed_cell == translated.position():
            self._dispatch_mouse(actions[2], translated)
        self._pressed_cell = None
        event.accept()

    def mouseDoubleClickEvent(self, event: QMouseEvent) -> None:
        """Handle double click."""
        if event.button() != Qt.MouseButton.LeftButton:
            super().mouseDoubleClickEvent(event)
            return

        self._dispatch_mouse(MouseAction.LEFT_DOUBLE_CLICK, self._mouse_event(event))
        event.accept()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        """Handle mouse movement."""
        self._dispatch_mouse(MouseAction.MOVE, self._mouse_event(event))
        super().mouseMoveEvent(event)

    def wheelEvent(self, event: QWheelEvent) -> None:
        """Translate wheel movement to scroll actions."""
        delta = event.angleDelta().y()
        if delta == 0:
            event.ignore()
            return

        x, y = self.cellAt(event.position())
        action = MouseAction.SCROLL_UP if delta > 0 else MouseAction.SCROLL_DOWN
        self._dispatch_mouse(
            action,
            MouseEvent(x=x, y=y, buttons=0, modifiers=_translate_modifiers(event.modifiers())),
        )
        event.accept()
