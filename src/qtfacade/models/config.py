"""
Window defaults for a new frame.
"""

from dataclasses import dataclass


DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600

# Fixed height of list widgets, in pixels
DEFAULT_LIST_HEIGHT = 70


@dataclass
class FrameConfig:
    """Window defaults applied by create_frame(). Held in memory only."""
    title: str = ""
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    resizable: bool = False

    # Layout kind name of the window root ("flow", "vertical", ...)
    root_layout: str = "flow"

    list_height: int = DEFAULT_LIST_HEIGHT
    debug_logging: bool = False
