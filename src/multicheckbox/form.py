"""Contract between form containers and the fields they lay out."""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from PyQt6.QtGui import QColor

from .events import Key


class FormItem(ABC):
    """
    A field that a form can style and lay out uniformly.

    Forms call setFormAttributes() to apply shared styling, read
    fieldWidth() to size the field column, and install a finished
    callback to move focus when the user leaves the field.
    """

    @abstractmethod
    def label(self) -> str:
        """Get the label shown before the field."""

    @abstractmethod
    def setFormAttributes(
        self,
        labelWidth: int,
        labelColor: QColor,
        bgColor: QColor,
        fieldTextColor: QColor,
        fieldBgColor: QColor,
    ) -> "FormItem":
        """Apply styling shared by all items of a form."""

    @abstractmethod
    def fieldWidth(self) -> int:
        """Get the width of the field in cells, not counting the label."""

    @abstractmethod
    def setFinishedFunc(self, handler: Optional[Callable[[Key], None]]) -> "FormItem":
        """Set the callback invoked with the key that left this item."""
