"""
Frame Definition Loader

Loads YAML frame definitions and replays them as builder calls on a Frame.
"""

from pathlib import Path
from typing import Any, List, Optional, Union

import yaml

from ..logging import logger
from ..models.layout import Constraints, LayoutSpec
from .schema import (
    FrameDefinition,
    ViewDefinition,
    WidgetDefinition,
    WidgetType,
    WindowDefinition,
)


class FrameDefinitionError(Exception):
    """Exception raised when a frame definition cannot be parsed."""

    def __init__(self, message: str, path: Optional[str] = None, line: Optional[int] = None):
        self.path = path
        self.line = line
        location = ""
        if path:
            location = f" in {path}"
        if line:
            location += f" at line {line}"
        super().__init__(f"{message}{location}")


class FrameDefinitionLoader:
    """
    Parser for YAML frame definitions.

    Example document:

        window: {title: Bank, width: 400, height: 300}
        views:
          - name: main
            layout: vertical
            children:
              - {type: label, name: balance, text: "0"}
              - {type: button, name: deposit, text: Deposit}
        show_view: main
    """

    @classmethod
    def load(cls, path: Union[str, Path]) -> FrameDefinition:
        """
        Load and parse a YAML frame definition file.

        Raises:
            FrameDefinitionError: If reading, parsing or validation fails
        """
        path = Path(path)
        if not path.exists():
            raise FrameDefinitionError(f"File not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FrameDefinitionError(f"Cannot read definition: {e}", str(path))

        return cls.loads(content, str(path))

    @classmethod
    def loads(cls, yaml_str: str, source: str = "<string>") -> FrameDefinition:
        """Parse a YAML string."""
        try:
            data = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            mark = getattr(e, "problem_mark", None)
            line = mark.line + 1 if mark is not None else None
            raise FrameDefinitionError(f"Invalid YAML syntax: {e}", source, line)

        if data is None:
            raise FrameDefinitionError("Empty YAML content", source)

        return cls.parse(data, source)

    @classmethod
    def parse(cls, data: Any, source: str = "<dict>") -> FrameDefinition:
        """Parse a dictionary into a FrameDefinition."""
        parser = cls(source)
        return parser._parse_root(data)

    def __init__(self, source: str = "<unknown>"):
        self.source = source

    def _error(self, message: str) -> FrameDefinitionError:
        """Create a parse error with source context."""
        return FrameDefinitionError(message, self.source)

    def _require(self, data: dict, key: str, context: str = "") -> Any:
        """Require a key to be present in a dictionary."""
        if key not in data:
            ctx = f" in {context}" if context else ""
            raise self._error(f"Missing required field '{key}'{ctx}")
        return data[key]

    def _expect_mapping(self, data: Any, context: str) -> dict:
        if not isinstance(data, dict):
            raise self._error(f"Expected a mapping for {context}, got {type(data).__name__}")
        return data

    def _expect_list(self, data: Any, context: str) -> list:
        if not isinstance(data, list):
            raise self._error(f"Expected a list for {context}, got {type(data).__name__}")
        return data

    def _parse_root(self, data: Any) -> FrameDefinition:
        data = self._expect_mapping(data, "root")

        window = WindowDefinition()
        if "window" in data:
            window = self._parse_window(data["window"])

        views = [
            self._parse_view(view_data)
            for view_data in self._expect_list(data.get("views", []), "views")
        ]

        show_view = data.get("show_view")
        names = [view.name for view in views]
        if show_view is not None and show_view not in names:
            raise self._error(f"show_view '{show_view}' is not one of the defined views {names}")

        return FrameDefinition(window=window, views=views, show_view=show_view)

    def _parse_window(self, data: Any) -> WindowDefinition:
        data = self._expect_mapping(data, "window")
        if ("width" in data) != ("height" in data):
            raise self._error("Window needs both 'width' and 'height', or neither")

        window = WindowDefinition()
        if "title" in data:
            window.title = str(data["title"])
        if "width" in data:
            window.width = self._int(data["width"], "width", "window")
            window.height = self._int(data["height"], "height", "window")
        return window

    def _parse_layout(self, value: Any, context: str) -> LayoutSpec:
        if isinstance(value, dict):
            kind = self._require(value, "kind", f"{context} layout")
            margins = value.get("margins")
            try:
                return LayoutSpec(
                    kind=LayoutSpec.coerce(kind).kind,
                    spacing=value.get("spacing"),
                    margins=tuple(margins) if margins is not None else None,
                    columns=value.get("columns"),
                )
            except (ValueError, TypeError) as e:
                raise self._error(f"Invalid layout for {context}: {e}")
        try:
            return LayoutSpec.coerce(value)
        except (ValueError, TypeError) as e:
            raise self._error(f"Invalid layout for {context}: {e}")

    def _parse_constraints(self, value: Any, context: str) -> Constraints:
        try:
            return Constraints.coerce(value)
        except (ValueError, TypeError) as e:
            raise self._error(f"Invalid constraints for {context}: {e}")

    def _parse_view(self, data: Any) -> ViewDefinition:
        data = self._expect_mapping(data, "view")
        name = str(self._require(data, "name", "view"))
        return ViewDefinition(
            name=name,
            layout=self._parse_layout(data.get("layout"), f"view '{name}'"),
            children=self._parse_children(data.get("children", []), f"view '{name}'"),
        )

    def _parse_children(self, data: Any, context: str) -> List[WidgetDefinition]:
        return [
            self._parse_widget(child, context)
            for child in self._expect_list(data, f"children of {context}")
        ]

    def _int(self, value: Any, key: str, context: str) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            raise self._error(f"Field '{key}' of {context} must be an integer, got {value!r}")

    def _parse_items(self, data: dict, key: str, context: str) -> List[str]:
        return [str(item) for item in self._expect_list(data.get(key, []), f"{key} of {context}")]

    def _parse_widget(self, data: Any, parent_context: str) -> WidgetDefinition:
        data = self._expect_mapping(data, f"child of {parent_context}")
        type_str = self._require(data, "type", f"child of {parent_context}")
        try:
            widget_type = WidgetType(type_str)
        except ValueError:
            raise self._error(
                f"Invalid widget type '{type_str}'. "
                f"Valid types: {[t.value for t in WidgetType]}"
            )

        if widget_type == WidgetType.SPACER:
            return WidgetDefinition(
                type=widget_type,
                width=self._int(self._require(data, "width", "spacer"), "width", "spacer"),
                height=self._int(self._require(data, "height", "spacer"), "height", "spacer"),
                constraints=self._parse_constraints(data.get("constraints"), "spacer"),
            )

        name = str(self._require(data, "name", widget_type.value))
        context = f"{widget_type.value} '{name}'"
        widget = WidgetDefinition(
            type=widget_type,
            name=name,
            constraints=self._parse_constraints(data.get("constraints"), context),
        )

        if widget_type == WidgetType.PANEL:
            widget.layout = self._parse_layout(data.get("layout"), context)
            widget.children = self._parse_children(data.get("children", []), context)
        elif widget_type in (WidgetType.BUTTON, WidgetType.LABEL):
            widget.text = str(data.get("text", name if widget_type == WidgetType.BUTTON else ""))
        elif widget_type == WidgetType.INPUT:
            widget.columns = self._int(data.get("columns", 0), "columns", context)
        elif widget_type == WidgetType.COMBO_BOX:
            widget.items = self._parse_items(data, "options", context)
        elif widget_type == WidgetType.LIST:
            widget.items = self._parse_items(data, "contents", context)

        return widget


def apply_definition(frame, definition: FrameDefinition):
    """
    Replay a frame definition as builder calls.

    Invariant violations (duplicate names) propagate from the frame
    unchanged; entities created before the failing call stay registered.

    Returns:
        The frame, for chaining
    """
    window = definition.window
    if window.title is not None:
        frame.set_title(window.title)
    if window.width is not None and window.height is not None:
        frame.set_size(window.width, window.height)

    for view in definition.views:
        frame.add_view(view.name, view.layout)
        _add_children(frame, view.name, view.children)

    if definition.show_view is not None:
        frame.show_view(definition.show_view)

    logger.debug(f"Applied frame definition with views {definition.view_names()}")
    return frame


def _add_children(frame, panel: str, children: List[WidgetDefinition]) -> None:
    for child in children:
        if child.type == WidgetType.PANEL:
            frame.add_panel(child.name, child.layout, panel, child.constraints)
            _add_children(frame, child.name, child.children)
        elif child.type == WidgetType.BUTTON:
            frame.add_button(child.name, child.text, panel, child.constraints)
        elif child.type == WidgetType.LABEL:
            frame.add_label(child.name, child.text, panel, child.constraints)
        elif child.type == WidgetType.INPUT:
            frame.add_input(child.name, child.columns, panel, child.constraints)
        elif child.type == WidgetType.COMBO_BOX:
            frame.add_combo_box(child.name, child.items, panel, child.constraints)
        elif child.type == WidgetType.LIST:
            frame.add_list(child.name, child.items, panel, child.constraints)
        elif child.type == WidgetType.SPACER:
            frame.add_spacer(child.width, child.height, panel, child.constraints)
