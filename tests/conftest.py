"""
Global pytest configuration and fixtures for the multicheckbox test suite.
Runs Qt headless so the view tests work without a display.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from multicheckbox import MultiCheckbox, Screen, Styles


def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "gui: mark test as requiring GUI")


@pytest.fixture
def styles():
    """Fixture providing the dark theme colors."""
    return Styles.dark_theme()


@pytest.fixture
def screen():
    """Fixture providing a small blank screen."""
    return Screen(20, 3)


@pytest.fixture
def checkbox(styles):
    """Fixture providing a one-row control with four bits at the origin."""
    control = MultiCheckbox(styles).setLabel("F: ").setBits(4)
    control.setRect(0, 0, 20, 1)
    return control


@pytest.fixture
def set_focus_calls():
    """Fixture providing a setFocus callable that records its arguments."""
    calls = []

    def set_focus(primitive):
        calls.append(primitive)

    set_focus.calls = calls
    return set_focus
