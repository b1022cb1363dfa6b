"""
MockToolkit - Headless IToolkit for testing.

Records every native call and keeps widget state in plain Python
objects, so frames can be exercised without a display.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from ..models.config import FrameConfig
from ..models.layout import Constraints, LayoutSpec


@dataclass(eq=False)
class MockWidget:
    """Stand-in for a native widget."""
    kind: str
    name: str = ""
    text: str = ""
    items: List[str] = field(default_factory=list)
    selected_index: int = -1
    layout: Optional[LayoutSpec] = None
    visible: bool = True
    size: Tuple[int, int] = (0, 0)
    columns: int = 0
    children: List[Tuple["MockWidget", Constraints]] = field(default_factory=list, repr=False)
    parent: Optional["MockWidget"] = field(default=None, repr=False)
    on_activate: Optional[Callable[[], None]] = field(default=None, repr=False)

    def click(self) -> None:
        """Simulate the user activating a button."""
        if self.on_activate is None:
            raise TypeError(f"{self.kind} widget '{self.name}' cannot be activated")
        self.on_activate()

    @property
    def child_widgets(self) -> List["MockWidget"]:
        return [child for child, _ in self.children]


@dataclass
class MockWindow:
    """Stand-in for the top-level window."""
    config: FrameConfig
    on_close: Callable[[], None]
    root: MockWidget = field(default_factory=lambda: MockWidget(kind="root"))
    title: str = ""
    size: Tuple[int, int] = (0, 0)
    shown: bool = False

    def close(self) -> None:
        """Simulate the user asking to close the window."""
        self.on_close()
        self.shown = False


class MockToolkit:
    """
    Mock toolkit for testing.

    Every call is appended to `calls` as (method_name, args...) so tests
    can assert that failed operations never reached the toolkit.
    """

    def __init__(self):
        self.calls: List[tuple] = []
        self.windows: List[MockWindow] = []
        self._event_loop_result = 0

    def _record(self, *call) -> None:
        self.calls.append(call)

    def call_names(self) -> List[str]:
        """Names of recorded calls, in order."""
        return [call[0] for call in self.calls]

    def reset_calls(self) -> None:
        self.calls.clear()

    def set_event_loop_result(self, result: int) -> None:
        """Set the exit code returned by run_event_loop()."""
        self._event_loop_result = result

    # === Window ===

    def create_window(self, config: FrameConfig, on_close: Callable[[], None]) -> MockWindow:
        self._record("create_window", config)
        window = MockWindow(
            config=config,
            on_close=on_close,
            root=MockWidget(kind="root", layout=LayoutSpec.coerce(config.root_layout)),
            title=config.title,
            size=(config.width, config.height),
        )
        self.windows.append(window)
        return window

    def set_window_size(self, window: MockWindow, width: int, height: int) -> None:
        self._record("set_window_size", width, height)
        window.size = (width, height)

    def set_window_title(self, window: MockWindow, title: str) -> None:
        self._record("set_window_title", title)
        window.title = title

    def show_window(self, window: MockWindow) -> None:
        self._record("show_window")
        window.shown = True

    def attach_to_window(self, window: MockWindow, container: MockWidget) -> None:
        self._record("attach_to_window", container.name)
        container.parent = window.root
        window.root.children.append((container, Constraints()))

    # === Containers ===

    def create_container(self, name: str, layout: LayoutSpec, visible: bool = True) -> MockWidget:
        self._record("create_container", name, layout, visible)
        return MockWidget(kind="container", name=name, layout=layout, visible=visible)

    def attach(self, parent: MockWidget, child: MockWidget, constraints: Constraints) -> None:
        self._record("attach", parent.name, child.name or child.kind, constraints)
        child.parent = parent
        parent.children.append((child, constraints))

    def set_visible(self, widget: MockWidget, visible: bool) -> None:
        self._record("set_visible", widget.name, visible)
        widget.visible = visible

    def is_visible(self, widget: MockWidget) -> bool:
        return widget.visible

    # === Leaf widgets ===

    def create_button(self, name: str, text: str, on_activate: Callable[[], None]) -> MockWidget:
        self._record("create_button", name, text)
        return MockWidget(kind="button", name=name, text=text, on_activate=on_activate)

    def create_label(self, name: str, text: str) -> MockWidget:
        self._record("create_label", name, text)
        return MockWidget(kind="label", name=name, text=text)

    def set_label_text(self, label: MockWidget, text: str) -> None:
        self._record("set_label_text", label.name, text)
        label.text = text

    def get_label_text(self, label: MockWidget) -> str:
        return label.text

    def create_input(self, name: str, columns: int) -> MockWidget:
        self._record("create_input", name, columns)
        return MockWidget(kind="input", name=name, columns=columns)

    def get_input_text(self, field: MockWidget) -> str:
        return field.text

    def set_input_text(self, field: MockWidget, text: str) -> None:
        self._record("set_input_text", field.name, text)
        field.text = text

    def create_combo_box(self, name: str, options: Sequence[str]) -> MockWidget:
        self._record("create_combo_box", name, list(options))
        items = list(options)
        return MockWidget(kind="combo_box", name=name, items=items, selected_index=0 if items else -1)

    def get_combo_box_selection(self, combo: MockWidget) -> Optional[str]:
        if combo.selected_index < 0:
            return None
        return combo.items[combo.selected_index]

    def set_combo_box_options(self, combo: MockWidget, options: Sequence[str]) -> None:
        self._record("set_combo_box_options", combo.name, list(options))
        combo.items = list(options)
        combo.selected_index = 0 if combo.items else -1

    def create_list(self, name: str, contents: Sequence[str], height: int) -> MockWidget:
        self._record("create_list", name, list(contents), height)
        return MockWidget(kind="list", name=name, items=list(contents), size=(0, height))

    def set_list_contents(self, list_widget: MockWidget, contents: Sequence[str]) -> None:
        self._record("set_list_contents", list_widget.name, list(contents))
        list_widget.items = list(contents)
        list_widget.selected_index = -1

    def get_list_contents(self, list_widget: MockWidget) -> List[str]:
        return list(list_widget.items)

    def get_list_selection(self, list_widget: MockWidget) -> Optional[str]:
        if list_widget.selected_index < 0:
            return None
        return list_widget.items[list_widget.selected_index]

    def create_spacer(self, width: int, height: int) -> MockWidget:
        self._record("create_spacer", width, height)
        return MockWidget(kind="spacer", size=(width, height))

    # === Simulation helpers ===

    def select(self, widget: MockWidget, index: int) -> None:
        """Simulate the user selecting an item (-1 clears the selection)."""
        if index >= len(widget.items) or index < -1:
            raise IndexError(f"No item {index} in '{widget.name}'")
        widget.selected_index = index

    # === Threading ===

    def invoke(self, fn: Callable[[], None]) -> None:
        fn()

    def run_event_loop(self) -> int:
        self._record("run_event_loop")
        return self._event_loop_result
