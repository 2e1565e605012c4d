"""
Multi-bit checkbox for terminal forms.

A row of single-character cells, one per bit of an integer bitmask, that
the user walks with the arrow keys and toggles with space, enter or a click.
"""

import logging
from typing import Callable, List, Optional, Tuple

from PyQt6.QtGui import QColor

from .box import Box, SetFocus
from .config import Styles
from .events import Key, KeyEvent, MouseAction, MouseEvent
from .form import FormItem
from .screen import Screen, Style, print_text
from .styles import Alignment

logger = logging.getLogger(__name__)

# Keys that end interaction with the field
_DONE_KEYS = (Key.TAB, Key.BACKTAB, Key.ESCAPE, Key.UP, Key.DOWN)


class MultiCheckbox(Box, FormItem):
    """
    A label followed by a row of toggleable bit cells.

    Cell i shows CHECKED_GLYPH when bit i of the bitmask is set. While the
    control has focus, the cell of the focused bit is drawn in reverse video.
    Bits at or above bits() are kept in the bitmask but never drawn or
    toggled.

    Callbacks:
        changed: Called with the new bitmask after the user toggles a bit.
        done: Called with the key that ended interaction (tab, backtab,
            escape, up or down).
        finished: Called after done with the same key; installed by forms.

    Example:
        flags = MultiCheckbox().setLabel("Flags: ").setBits(8).setChecked(0b101)
        flags.setChangedFunc(lambda value: print(f"Flags now {value:#010b}"))
    """

    CHECKED_GLYPH = "X"
    UNCHECKED_GLYPH = " "

    def __init__(self, styles: Optional[Styles] = None):
        """
        Initialize the control with no label and no bits.

        Args:
            styles: Default colors, Styles.dark_theme() when omitted.
        """
        super().__init__(styles)

        # State
        self._checked = 0
        self._bits = 0
        self._focused_bit = 0

        # Configuration
        self._label = ""
        self._label_width = 0
        self._label_color = QColor(self._styles.secondary_text)
        self._field_background_color = QColor(self._styles.contrast_background)
        self._field_text_color = QColor(self._styles.primary_text)

        # Callbacks
        self._changed: Optional[Callable[[int], None]] = None
        self._done: Optional[Callable[[Key], None]] = None
        self._finished: Optional[Callable[[Key], None]] = None

    # ==================== Bitmask ====================

    def setChecked(self, checked: int) -> "MultiCheckbox":
        """
        Set the bitmask. Does not invoke the changed callback.

        Args:
            checked: New bitmask; bits beyond bits() are kept as given.
        """
        self._checked = checked
        return self

    def isChecked(self) -> int:
        """Get the bitmask."""
        return self._checked

    def isBitChecked(self, bit: int) -> bool:
        """Check whether a single bit of the bitmask is set."""
        if bit < 0:
            return False
        return bool(self._checked & (1 << bit))

    def setBitChecked(self, bit: int, checked: bool) -> "MultiCheckbox":
        """Set or clear a single bit. Does not invoke the changed callback."""
        if bit < 0:
            return self
        if checked:
            self._checked |= 1 << bit
        else:
            self._checked &= ~(1 << bit)
        return self

    def checkedIndexes(self) -> List[int]:
        """Get the indexes of the set bits that are shown as cells."""
        return [bit for bit in range(max(0, self._bits)) if self.isBitChecked(bit)]

    def setBits(self, bits: int) -> "MultiCheckbox":
        """
        Set the number of bit cells.

        Neither the bitmask nor the focused bit are adjusted; a focused bit
        left out of range is pulled back in on the next interaction.
        """
        self._bits = bits
        return self

    def bits(self) -> int:
        """Get the number of bit cells."""
        return self._bits

    def setFocusedBit(self, bit: int) -> "MultiCheckbox":
        """Set the index of the cell that keyboard toggles act on."""
        self._focused_bit = bit
        return self

    def focusedBit(self) -> int:
        """Get the index of the focused cell."""
        return self._focused_bit

    # ==================== Label & Colors ====================

    def setLabel(self, label: str) -> "MultiCheckbox":
        """Set the text displayed before the bit cells."""
        self._label = label
        return self

    def label(self) -> str:
        """Get the text displayed before the bit cells."""
        return self._label

    def setLabelWidth(self, width: int) -> "MultiCheckbox":
        """
        Set the screen width reserved for the label.

        Args:
            width: Width in cells. 0 uses the width of the label text.
        """
        self._label_width = width
        return self

    def labelWidth(self) -> int:
        """Get the reserved label width, 0 meaning automatic."""
        return self._label_width

    def setLabelColor(self, color: QColor) -> "MultiCheckbox":
        """Set the color of the label."""
        self._label_color = QColor(color)
        return self

    def labelColor(self) -> QColor:
        """Get the color of the label."""
        return self._label_color

    def setFieldBackgroundColor(self, color: QColor) -> "MultiCheckbox":
        """Set the background color of the bit cells."""
        self._field_background_color = QColor(color)
        return self

    def fieldBackgroundColor(self) -> QColor:
        """Get the background color of the bit cells."""
        return self._field_background_color

    def setFieldTextColor(self, color: QColor) -> "MultiCheckbox":
        """Set the glyph color of the bit cells."""
        self._field_text_color = QColor(color)
        return self

    def fieldTextColor(self) -> QColor:
        """Get the glyph color of the bit cells."""
        return self._field_text_color

    # ==================== Form Item ====================

    def setFormAttributes(
        self,
        labelWidth: int,
        labelColor: QColor,
        bgColor: QColor,
        fieldTextColor: QColor,
        fieldBgColor: QColor,
    ) -> FormItem:
        """Apply styling shared by all items of a form."""
        self._label_width = labelWidth
        self._label_color = QColor(labelColor)
        self._background_color = QColor(bgColor)
        self._field_text_color = QColor(fieldTextColor)
        self._field_background_color = QColor(fieldBgColor)
        return self

    def fieldWidth(self) -> int:
        """Get the width of the bit cells, not counting the label."""
        return max(0, self._bits)

    # ==================== Callbacks ====================

    def setChangedFunc(self, handler: Optional[Callable[[int], None]]) -> "MultiCheckbox":
        """
        Set the handler called when the user toggles a bit.

        Args:
            handler: Receives the new bitmask. Replaces any previous handler.
        """
        self._changed = handler
        return self

    def setDoneFunc(self, handler: Optional[Callable[[Key], None]]) -> "MultiCheckbox":
        """
        Set the handler called when the user is done with the control.

        The handler receives the key that was pressed:

        - Key.ESCAPE: Abort input.
        - Key.TAB: Move to the next field.
        - Key.BACKTAB: Move to the previous field.
        - Key.UP / Key.DOWN: Move to the field above or below.
        """
        self._done = handler
        return self

    def setFinishedFunc(self, handler: Optional[Callable[[Key], None]]) -> FormItem:
        """Set the callback invoked after done, used by forms to move focus."""
        self._finished = handler
        return self

    # ==================== Drawing ====================

    def draw(self, screen: Screen) -> None:
        """Draw the label and the bit cells."""
        super().draw(screen)

        x, y, width, height = self.getInnerRect()
        right_limit = x + width
        if height < 1 or right_limit <= x:
            return

        # Label
        if self._label_width > 0:
            label_width = min(self._label_width, right_limit - x)
            print_text(screen, self._label, x, y, label_width, Alignment.LEFT, self._label_color)
            x += label_width
        else:
            _, drawn_width = print_text(
                screen, self._label, x, y, right_limit - x, Alignment.LEFT, self._label_color
            )
            x += drawn_width

        # Bit cells, not clipped against right_limit
        focused = self._normalized_focus() if self.hasFocus() else None
        for bit in range(max(0, self._bits)):
            style = Style(
                foreground=QColor(self._field_text_color),
                background=QColor(self._field_background_color),
            )
            if bit == focused:
                style = style.reversed()
            glyph = self.CHECKED_GLYPH if self.isBitChecked(bit) else self.UNCHECKED_GLYPH
            screen.set_content(x + bit, y, glyph, style)

    # ==================== Input ====================

    def keyPressEvent(self, event: KeyEvent, setFocus: SetFocus) -> None:
        """Toggle, move the focused bit, or report that the user is done."""
        key = event.key

        if key in (Key.RUNE, Key.ENTER):
            if key == Key.RUNE and event.rune != " ":
                return
            self._toggle_focused_bit()
        elif key in _DONE_KEYS:
            logger.debug("MultiCheckbox %r done with %s", self._label, key.name)
            if self._done is not None:
                self._done(key)
            if self._finished is not None:
                self._finished(key)
        elif key == Key.LEFT:
            bit = self._normalized_focus()
            if bit is None:
                return
            self._focused_bit = self._bits - 1 if bit == 0 else bit - 1
        elif key == Key.RIGHT:
            bit = self._normalized_focus()
            if bit is None:
                return
            self._focused_bit = (bit + 1) % self._bits

    def mouseEvent(
        self, action: MouseAction, event: MouseEvent, setFocus: SetFocus
    ) -> Tuple[bool, Optional[Box]]:
        """Toggle the focused bit on a left click on the control's row."""
        x, y = event.position()
        _, rect_y, _, _ = self.getInnerRect()
        if not self.inRect(x, y):
            return False, None

        # Clicks toggle the focused bit, whichever cell was clicked
        if action == MouseAction.LEFT_CLICK and y == rect_y:
            setFocus(self)
            self._toggle_focused_bit()
            return True, None

        return False, None

    def _normalized_focus(self) -> Optional[int]:
        """Get the focused bit pulled into [0, bits), or None without bits."""
        if self._bits <= 0:
            return None
        return min(max(self._focused_bit, 0), self._bits - 1)

    def _toggle_focused_bit(self) -> None:
        """Flip the focused bit and notify the changed handler."""
        bit = self._normalized_focus()
        if bit is None:
            return

        self._focused_bit = bit
        self._checked ^= 1 << bit
        logger.debug("MultiCheckbox %r toggled bit %d, now %#x", self._label, bit, self._checked)
        if self._changed is not None:
            self._changed(self._checked)
