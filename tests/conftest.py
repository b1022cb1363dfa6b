"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Qt widgets must not need a display during tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))


@pytest.fixture(autouse=True)
def restore_facade_logging():
    """Undo logger changes made by create_frame(debug_logging) or main()."""
    yield
    from qtfacade.logging import reset_logging
    reset_logging()


@pytest.fixture
def mock_toolkit():
    """Create a headless toolkit that records native calls."""
    from qtfacade.services.mock_toolkit import MockToolkit
    return MockToolkit()


@pytest.fixture
def frame(mock_toolkit):
    """Create a frame backed by the mock toolkit."""
    from qtfacade.views.frame import create_frame
    return create_frame(toolkit=mock_toolkit)


@pytest.fixture
def main_frame(frame):
    """Frame with a 'main' view already added and shown."""
    return frame.add_view("main", "vertical").show_view("main")
