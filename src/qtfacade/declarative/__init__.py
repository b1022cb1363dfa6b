"""
Declarative frame definitions loaded from YAML.
"""

from .schema import (
    FrameDefinition,
    ViewDefinition,
    WidgetDefinition,
    WidgetType,
    WindowDefinition,
)
from .loader import FrameDefinitionLoader, FrameDefinitionError, apply_definition

__all__ = [
    "FrameDefinition",
    "ViewDefinition",
    "WidgetDefinition",
    "WidgetType",
    "WindowDefinition",
    "FrameDefinitionLoader",
    "FrameDefinitionError",
    "apply_definition",
]
