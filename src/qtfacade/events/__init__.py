"""
Event stream delivered from the window to the application loop.
"""

from .event_channel import EventChannel, CLOSED, EMPTY

__all__ = ["EventChannel", "CLOSED", "EMPTY"]
