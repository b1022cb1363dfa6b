"""
Frame Definition Schema

Dataclass models describing a window built from a YAML document.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from ..models.layout import LayoutSpec


class WidgetType(str, Enum):
    """Child entries a view or panel may contain."""
    PANEL = "panel"
    BUTTON = "button"
    LABEL = "label"
    INPUT = "input"
    COMBO_BOX = "combo_box"
    LIST = "list"
    SPACER = "spacer"


@dataclass
class WindowDefinition:
    """Window-level settings; unset fields keep the frame's defaults."""
    title: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None


@dataclass
class WidgetDefinition:
    """A single child of a view or panel."""
    type: WidgetType
    name: str = ""
    text: str = ""
    columns: int = 0
    items: List[str] = field(default_factory=list)  # combo options or list contents
    width: int = 0
    height: int = 0
    layout: Optional[LayoutSpec] = None  # PANEL only
    constraints: Any = None
    children: List["WidgetDefinition"] = field(default_factory=list)  # PANEL only


@dataclass
class ViewDefinition:
    """A top-level view and its children."""
    name: str
    layout: LayoutSpec = field(default_factory=LayoutSpec)
    children: List[WidgetDefinition] = field(default_factory=list)


@dataclass
class FrameDefinition:
    """Root of a frame definition document."""
    window: WindowDefinition = field(default_factory=WindowDefinition)
    views: List[ViewDefinition] = field(default_factory=list)
    show_view: Optional[str] = None

    def view_names(self) -> List[str]:
        return [view.name for view in self.views]
