"""
Frame - Name-addressed facade over a single toolkit window.

Callers register views, panels and widgets by name and address them by
name afterwards. Every builder call returns the frame so calls can be
chained:

    frame = (
        create_frame()
        .set_size(300, 200)
        .add_view("main", LayoutSpec.vertical())
        .add_label("balance", "0", "main")
        .add_button("deposit", "Deposit", "main")
        .show_view("main")
        .show()
    )

Button activations and the window close request arrive on frame.events()
as string tokens. Registry calls must run on the UI thread; the event
channel may be drained from any thread.
"""

import functools
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..errors import EntityKind, InvariantViolation, Rule
from ..events.event_channel import CLOSED, EventChannel
from ..logging import logger, set_debug_enabled
from ..models.config import FrameConfig
from ..models.layout import Constraints, LayoutSpec
from ..services.interfaces import IToolkit
from ..services.qt_toolkit import QtToolkit


def _as_items(values: Sequence[str], what: str) -> List[str]:
    """Copy a sequence of display strings, rejecting a bare string."""
    if isinstance(values, str):
        raise TypeError(f"{what} must be a sequence of strings, not a single string")
    return [str(value) for value in values]


class Frame:
    """
    Registry of named views, panels and widgets inside one window.

    Names are unique per kind: a button and a label may share a name,
    two buttons may not. Views and panels share one namespace, since a
    view is also a panel that widgets can be attached to.

    All checks run before the toolkit is touched, so a call that raises
    InvariantViolation leaves the window exactly as it was.
    """

    CLOSED = CLOSED

    def __init__(self, toolkit: IToolkit, config: Optional[FrameConfig] = None):
        """
        Initialize the frame and create its window.

        Args:
            toolkit: Native toolkit backend
            config: Window defaults; FrameConfig() if None
        """
        self._toolkit = toolkit
        self._config = config or FrameConfig()
        self._channel = EventChannel()

        self._views: Dict[str, Any] = {}
        self._panels: Dict[str, Any] = {}
        self._buttons: Dict[str, Any] = {}
        self._labels: Dict[str, Any] = {}
        self._inputs: Dict[str, Any] = {}
        self._combo_boxes: Dict[str, Any] = {}
        self._lists: Dict[str, Any] = {}
        self._current_view = ""

        self._registries: Dict[EntityKind, Dict[str, Any]] = {
            EntityKind.VIEW: self._views,
            EntityKind.PANEL: self._panels,
            EntityKind.BUTTON: self._buttons,
            EntityKind.LABEL: self._labels,
            EntityKind.INPUT: self._inputs,
            EntityKind.COMBO_BOX: self._combo_boxes,
            EntityKind.LIST: self._lists,
        }

        self._window = toolkit.create_window(self._config, self._on_close_requested)

    # === Validation ===

    def _fail(self, rule: Rule, kind: EntityKind, name: str) -> InvariantViolation:
        if rule is Rule.COLLISION:
            error = InvariantViolation.collision(kind, name)
        else:
            error = InvariantViolation.unknown(kind, name)
        logger.warning(str(error))
        return error

    def _require_absent(self, kind: EntityKind, name: str) -> None:
        # Views collide with panels too, since every view is registered as a panel
        registry = self._panels if kind is EntityKind.VIEW else self._registries[kind]
        if name in registry:
            raise self._fail(Rule.COLLISION, kind, name)

    def _lookup(self, kind: EntityKind, name: str) -> Any:
        registry = self._registries[kind]
        if name not in registry:
            raise self._fail(Rule.UNKNOWN, kind, name)
        return registry[name]

    def _add_widget(
        self,
        kind: EntityKind,
        name: str,
        panel: str,
        constraints: Any,
        create: Callable[[], Any],
    ) -> "Frame":
        """Validate, create and attach a leaf widget, then register it."""
        self._require_absent(kind, name)
        parent = self._lookup(EntityKind.PANEL, panel)
        placement = Constraints.coerce(constraints)

        widget = create()
        self._toolkit.attach(parent, widget, placement)
        self._registries[kind][name] = widget
        logger.debug(f"Added {kind.value} '{name}' to '{panel}'")
        return self

    def _on_close_requested(self) -> None:
        logger.debug("Window close requested")
        self._channel.put(CLOSED)

    # === Window lifecycle ===

    def set_size(self, width: int, height: int) -> "Frame":
        """Resize the window."""
        self._toolkit.set_window_size(self._window, width, height)
        return self

    def set_title(self, title: str) -> "Frame":
        """Set the window title."""
        self._toolkit.set_window_title(self._window, title)
        return self

    def show(self) -> "Frame":
        """Make the window visible."""
        self._toolkit.show_window(self._window)
        return self

    def native_window(self) -> Any:
        """Get the underlying toolkit window."""
        return self._window

    def native_widget(self, kind: EntityKind, name: str) -> Any:
        """
        Get the toolkit object registered under a name.

        Raises:
            InvariantViolation: If no entity of that kind has that name
        """
        return self._lookup(EntityKind(kind), name)

    def has(self, kind: EntityKind, name: str) -> bool:
        """Check whether a name is registered under a kind."""
        return name in self._registries[EntityKind(kind)]

    def events(self) -> EventChannel:
        """
        Get the event channel.

        Calling the returned channel blocks until the next token (a button
        name or CLOSED) is available.
        """
        return self._channel

    def invoke_later(self, fn: Callable[..., Any], *args, **kwargs) -> None:
        """Run fn on the UI thread. May be called from any thread."""
        self._toolkit.invoke(functools.partial(fn, *args, **kwargs))

    def exec(self) -> int:
        """Run the toolkit event loop until the application quits."""
        return self._toolkit.run_event_loop()

    @property
    def config(self) -> FrameConfig:
        return self._config

    @property
    def current_view(self) -> str:
        """Name of the visible view, or an empty string if none was shown."""
        return self._current_view

    # === Views and panels ===

    def add_view(self, name: str, layout: Any = None) -> "Frame":
        """
        Add a hidden top-level view to the window.

        The view is also registered as a panel so widgets can be added
        directly to it.

        Args:
            name: Name of the view
            layout: LayoutSpec, LayoutKind or kind name (flow if None)
        """
        self._require_absent(EntityKind.VIEW, name)
        spec = LayoutSpec.coerce(layout)

        container = self._toolkit.create_container(name, spec, visible=False)
        self._toolkit.attach_to_window(self._window, container)
        self._views[name] = container
        self._panels[name] = container
        logger.debug(f"Added view '{name}' ({spec.kind.value})")
        return self

    def show_view(self, name: str) -> "Frame":
        """
        Display a view, hiding the previously displayed one.

        Showing the view that is already current changes nothing.
        """
        view = self._lookup(EntityKind.VIEW, name)
        if name == self._current_view:
            return self

        if self._current_view:
            self._toolkit.set_visible(self._views[self._current_view], False)
        self._current_view = name
        self._toolkit.set_visible(view, True)
        logger.debug(f"Showing view '{name}'")
        return self

    def add_panel(
        self,
        name: str,
        layout: Any,
        panel: str,
        constraints: Any = None,
    ) -> "Frame":
        """
        Add a panel inside another panel or view.

        Args:
            name: Name of the panel
            layout: LayoutSpec, LayoutKind or kind name (flow if None)
            panel: Container in which the panel is inserted
            constraints: Placement inside the container
        """
        self._require_absent(EntityKind.PANEL, name)
        parent = self._lookup(EntityKind.PANEL, panel)
        spec = LayoutSpec.coerce(layout)
        placement = Constraints.coerce(constraints)

        container = self._toolkit.create_container(name, spec)
        self._toolkit.attach(parent, container, placement)
        self._toolkit.set_visible(container, True)
        self._panels[name] = container
        logger.debug(f"Added panel '{name}' to '{panel}'")
        return self

    def add_spacer(self, width: int, height: int, panel: str, constraints: Any = None) -> "Frame":
        """Insert a fixed-size, non-interactive filler into a panel."""
        parent = self._lookup(EntityKind.PANEL, panel)
        placement = Constraints.coerce(constraints)

        self._toolkit.attach(parent, self._toolkit.create_spacer(width, height), placement)
        return self

    # === Buttons ===

    def add_button(self, name: str, text: str, panel: str, constraints: Any = None) -> "Frame":
        """
        Add a button to a panel.

        Each activation pushes the button's name onto the event channel.
        """
        return self._add_widget(
            EntityKind.BUTTON,
            name,
            panel,
            constraints,
            lambda: self._toolkit.create_button(name, text, lambda: self._channel.put(name)),
        )

    # === Labels ===

    def add_label(self, name: str, text: str, panel: str, constraints: Any = None) -> "Frame":
        """Add a text label to a panel."""
        return self._add_widget(
            EntityKind.LABEL,
            name,
            panel,
            constraints,
            lambda: self._toolkit.create_label(name, text),
        )

    def change_label(self, name: str, text: str) -> "Frame":
        """Replace the text of a label."""
        self._toolkit.set_label_text(self._lookup(EntityKind.LABEL, name), text)
        return self

    def get_label_text(self, name: str) -> str:
        """Get the text of a label."""
        return self._toolkit.get_label_text(self._lookup(EntityKind.LABEL, name))

    # === Inputs ===

    def add_input(self, name: str, columns: int, panel: str, constraints: Any = None) -> "Frame":
        """
        Add an empty single-line text input to a panel.

        Args:
            columns: Width of the input in character columns
        """
        return self._add_widget(
            EntityKind.INPUT,
            name,
            panel,
            constraints,
            lambda: self._toolkit.create_input(name, columns),
        )

    def get_input_text(self, name: str) -> str:
        return self._toolkit.get_input_text(self._lookup(EntityKind.INPUT, name))

    def set_input_text(self, name: str, text: str) -> "Frame":
        self._toolkit.set_input_text(self._lookup(EntityKind.INPUT, name), text)
        return self

    # === Combo boxes ===

    def add_combo_box(
        self,
        name: str,
        options: Sequence[str],
        panel: str,
        constraints: Any = None,
    ) -> "Frame":
        """Add a combo box to a panel; the first option starts selected."""
        items = _as_items(options, "Combo box options")
        return self._add_widget(
            EntityKind.COMBO_BOX,
            name,
            panel,
            constraints,
            lambda: self._toolkit.create_combo_box(name, items),
        )

    def get_combo_box_selection(self, name: str) -> Optional[str]:
        """Get the selected option, or None when nothing is selected."""
        return self._toolkit.get_combo_box_selection(self._lookup(EntityKind.COMBO_BOX, name))

    def update_combo_box(self, name: str, options: Sequence[str]) -> "Frame":
        """Replace all options of a combo box."""
        combo = self._lookup(EntityKind.COMBO_BOX, name)
        self._toolkit.set_combo_box_options(combo, _as_items(options, "Combo box options"))
        return self

    # === Lists ===

    def add_list(
        self,
        name: str,
        contents: Sequence[str],
        panel: str,
        constraints: Any = None,
    ) -> "Frame":
        """Add a scrollable list to a panel."""
        items = _as_items(contents, "List contents")
        return self._add_widget(
            EntityKind.LIST,
            name,
            panel,
            constraints,
            lambda: self._toolkit.create_list(name, items, self._config.list_height),
        )

    def update_list(self, name: str, contents: Sequence[str]) -> "Frame":
        """Replace all items of a list."""
        list_widget = self._lookup(EntityKind.LIST, name)
        self._toolkit.set_list_contents(list_widget, _as_items(contents, "List contents"))
        return self

    def get_list_contents(self, name: str) -> List[str]:
        return self._toolkit.get_list_contents(self._lookup(EntityKind.LIST, name))

    def get_list_selection(self, name: str) -> Optional[str]:
        return self._toolkit.get_list_selection(self._lookup(EntityKind.LIST, name))

    # camelCase aliases
    setSize = set_size
    addView = add_view
    showView = show_view
    addPanel = add_panel
    addButton = add_button
    addLabel = add_label
    changeLabel = change_label
    addInput = add_input
    getInputText = get_input_text
    setInputText = set_input_text
    addComboBox = add_combo_box
    getComboBoxSelection = get_combo_box_selection
    updateComboBox = update_combo_box
    addList = add_list
    updateList = update_list
    addSpacer = add_spacer


def create_frame(
    config: Optional[FrameConfig] = None,
    toolkit: Optional[IToolkit] = None,
) -> Frame:
    """
    Create a frame with an empty, non-resizable window.

    Args:
        config: Window defaults; FrameConfig() if None
        toolkit: Backend; a QtToolkit (creating the QApplication if needed) if None

    Returns:
        New Frame with no views and an empty event channel
    """
    config = config or FrameConfig()
    if config.debug_logging:
        set_debug_enabled(True)

    if toolkit is None:
        toolkit = QtToolkit()

    return Frame(toolkit, config)
