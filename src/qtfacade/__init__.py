"""
qtfacade - Declarative, name-addressed facade over a PyQt5 window.

Build a window by registering named views, panels and widgets, then pull
user interactions from a single blocking stream of string tokens.
"""

from .errors import EntityKind, InvariantViolation, Rule
from .events import EventChannel, CLOSED, EMPTY
from .logging import logger, configure_logging, reset_logging, set_debug_enabled, is_debug_enabled
from .models import LayoutSpec, LayoutKind, Constraints, FrameConfig
from .views import Frame, create_frame
from .declarative import FrameDefinitionLoader, FrameDefinitionError, apply_definition

__all__ = [
    "create_frame",
    "Frame",
    "EventChannel",
    "CLOSED",
    "EMPTY",
    "EntityKind",
    "InvariantViolation",
    "Rule",
    "LayoutSpec",
    "LayoutKind",
    "Constraints",
    "FrameConfig",
    "FrameDefinitionLoader",
    "FrameDefinitionError",
    "apply_definition",
    "logger",
    "configure_logging",
    "reset_logging",
    "set_debug_enabled",
    "is_debug_enabled",
]
