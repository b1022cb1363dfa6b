"""
Service interfaces (Protocols) for dependency injection and testing.

IToolkit is the capability set the frame drives: create widgets, attach
them to containers, listen for interaction and mutate displayed state.
Widget handles are opaque to the frame; only the toolkit that created a
handle may be given it back.
"""

from typing import Protocol, Any, Callable, List, Optional, Sequence

from ..models.config import FrameConfig
from ..models.layout import LayoutSpec, Constraints


class IToolkit(Protocol):
    """Interface for the native windowing toolkit."""

    # === Window ===

    def create_window(self, config: FrameConfig, on_close: Callable[[], None]) -> Any:
        """
        Create the top-level window with an empty root container.

        Args:
            config: Title, size, resizability and root layout
            on_close: Called on the UI thread each time the user asks to
                      close the window

        Returns:
            Window handle
        """
        ...

    def set_window_size(self, window: Any, width: int, height: int) -> None:
        ...

    def set_window_title(self, window: Any, title: str) -> None:
        ...

    def show_window(self, window: Any) -> None:
        ...

    def attach_to_window(self, window: Any, container: Any) -> None:
        """Add a container to the window's root layout."""
        ...

    # === Containers ===

    def create_container(self, name: str, layout: LayoutSpec, visible: bool = True) -> Any:
        """Create a container with a fresh native layout built from the spec."""
        ...

    def attach(self, parent: Any, child: Any, constraints: Constraints) -> None:
        """Add a child widget to a container using placement constraints."""
        ...

    def set_visible(self, widget: Any, visible: bool) -> None:
        ...

    def is_visible(self, widget: Any) -> bool:
        """Whether the widget itself is not hidden (ignores ancestors)."""
        ...

    # === Leaf widgets ===

    def create_button(self, name: str, text: str, on_activate: Callable[[], None]) -> Any:
        ...

    def create_label(self, name: str, text: str) -> Any:
        ...

    def set_label_text(self, label: Any, text: str) -> None:
        ...

    def get_label_text(self, label: Any) -> str:
        ...

    def create_input(self, name: str, columns: int) -> Any:
        ...

    def get_input_text(self, field: Any) -> str:
        ...

    def set_input_text(self, field: Any, text: str) -> None:
        ...

    def create_combo_box(self, name: str, options: Sequence[str]) -> Any:
        ...

    def get_combo_box_selection(self, combo: Any) -> Optional[str]:
        """Selected option, or None when nothing is selected."""
        ...

    def set_combo_box_options(self, combo: Any, options: Sequence[str]) -> None:
        """Replace all options."""
        ...

    def create_list(self, name: str, contents: Sequence[str], height: int) -> Any:
        ...

    def set_list_contents(self, list_widget: Any, contents: Sequence[str]) -> None:
        """Replace all items."""
        ...

    def get_list_contents(self, list_widget: Any) -> List[str]:
        ...

    def get_list_selection(self, list_widget: Any) -> Optional[str]:
        ...

    def create_spacer(self, width: int, height: int) -> Any:
        ...

    # === Threading ===

    def invoke(self, fn: Callable[[], None]) -> None:
        """Run fn on the UI thread (queued if called from another thread)."""
        ...

    def run_event_loop(self) -> int:
        """Run the UI event loop until the application quits."""
        ...
