"""
Services - Toolkit backends.

The frame only talks to IToolkit; QtToolkit drives PyQt5 and
MockToolkit keeps everything in memory for tests.
"""

from .interfaces import IToolkit
from .qt_toolkit import QtToolkit, FrameWindow, build_layout
from .mock_toolkit import MockToolkit, MockWidget, MockWindow

__all__ = [
    # Interfaces
    "IToolkit",
    # Services
    "QtToolkit",
    "FrameWindow",
    "build_layout",
    # Mocks for testing
    "MockToolkit",
    "MockWidget",
    "MockWindow",
]
