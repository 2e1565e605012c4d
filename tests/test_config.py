"""Unit tests for the style configuration and palette."""

from PyQt6.QtGui import QColor

from multicheckbox import MultiCheckbox, Styles, TerminalColors, Theme


class TestStyles:
    """Test theme configurations."""

    def test_dark_theme_defaults(self):
        """The dark theme uses blue fields with white text and yellow labels."""
        styles = Styles.dark_theme()

        assert styles.primitive_background == TerminalColors.BLACK
        assert styles.contrast_background == TerminalColors.BLUE
        assert styles.primary_text == TerminalColors.WHITE
        assert styles.secondary_text == TerminalColors.YELLOW

    def test_for_theme(self):
        """for_theme() picks the matching configuration."""
        assert Styles.for_theme(Theme.LIGHT).primitive_background == TerminalColors.WHITE
        assert Styles.for_theme(Theme.DARK).primitive_background == TerminalColors.BLACK

    def test_copy_is_independent(self):
        """Copies do not share colors with the original."""
        styles = Styles.dark_theme()
        copied = styles.copy()

        copied.primary_text.setRgb(1, 2, 3)

        assert styles.primary_text == TerminalColors.WHITE

    def test_palette_is_not_mutated_by_themes(self):
        """Changing a theme color leaves the shared palette alone."""
        styles = Styles.dark_theme()

        styles.contrast_background.setRgb(9, 9, 9)

        assert TerminalColors.BLUE == QColor(0, 0, 255)

    def test_injected_styles_reach_control(self):
        """Controls take their default colors from the injected styles."""
        styles = Styles.light_theme()

        control = MultiCheckbox(styles)

        assert control.fieldBackgroundColor() == TerminalColors.LIGHT_GRAY
        assert control.fieldTextColor() == TerminalColors.BLACK
        assert control.labelColor() == TerminalColors.NAVY
        assert control.backgroundColor() == TerminalColors.WHITE
