"""
QtToolkit - IToolkit implementation backed by PyQt5 widgets.

All methods except invoke() must be called on the Qt GUI thread.
"""

import sys
from typing import Callable, Dict, List, Optional, Sequence

from PyQt5.QtCore import QObject, Qt, pyqtSignal, pyqtSlot
from PyQt5.QtGui import QCloseEvent
from PyQt5.QtWidgets import (
    QApplication,
    QBoxLayout,
    QComboBox,
    QFormLayout,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLayout,
    QLineEdit,
    QListWidget,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
    QWIDGETSIZE_MAX,
)

from ..logging import logger
from ..models.config import FrameConfig
from ..models.layout import Constraints, LayoutKind, LayoutSpec


_ALIGNMENT_FLAGS: Dict[str, Qt.Alignment] = {
    "left": Qt.AlignLeft,
    "right": Qt.AlignRight,
    "center": Qt.AlignCenter,
    "top": Qt.AlignTop,
    "bottom": Qt.AlignBottom,
}


class FrameWindow(QMainWindow):
    """
    Top-level window that reports close requests.

    Signals:
        close_requested: Emitted every time the user asks to close the window
    """

    close_requested = pyqtSignal()

    def __init__(self, root_layout: QLayout, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._root = QWidget(self)
        self._root.setLayout(root_layout)
        self.setCentralWidget(self._root)
        self._resizable = True

    @property
    def root(self) -> QWidget:
        return self._root

    @property
    def resizable(self) -> bool:
        return self._resizable

    def set_resizable(self, resizable: bool) -> None:
        self._resizable = resizable
        if resizable:
            self.setMinimumSize(0, 0)
            self.setMaximumSize(QWIDGETSIZE_MAX, QWIDGETSIZE_MAX)
        else:
            self.setFixedSize(self.size())

    def closeEvent(self, event: QCloseEvent) -> None:
        self.close_requested.emit()
        super().closeEvent(event)


class AutoGridLayout(QGridLayout):
    """Grid layout that places unconstrained children in the next free cell."""

    def __init__(self, columns: int, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.columns = columns
        self._next_index = 0

    def next_cell(self) -> tuple:
        """First cell at or after the cursor not covered by an existing item."""
        while True:
            row, column = divmod(self._next_index, self.columns)
            self._next_index += 1
            if self.itemAtPosition(row, column) is None:
                return row, column


class _Invoker(QObject):
    """Lives on the GUI thread; queued signal delivery runs callables there."""

    requested = pyqtSignal(object)

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.requested.connect(self._run)

    @pyqtSlot(object)
    def _run(self, fn: Callable[[], None]) -> None:
        fn()


def build_layout(spec: LayoutSpec) -> QLayout:
    """
    Build a fresh native layout from a LayoutSpec.

    FLOW lays children out left to right, centered at the top, the way a
    flow layout does for a single row.
    """
    if spec.kind == LayoutKind.FLOW:
        layout: QLayout = QHBoxLayout()
        layout.setAlignment(Qt.AlignHCenter | Qt.AlignTop)
    elif spec.kind == LayoutKind.HORIZONTAL:
        layout = QHBoxLayout()
    elif spec.kind == LayoutKind.VERTICAL:
        layout = QVBoxLayout()
    elif spec.kind == LayoutKind.GRID:
        layout = AutoGridLayout(spec.grid_columns)
    elif spec.kind == LayoutKind.FORM:
        layout = QFormLayout()
    else:
        raise ValueError(f"Unsupported layout kind: {spec.kind}")

    if spec.spacing is not None:
        layout.setSpacing(spec.spacing)
    if spec.margins is not None:
        layout.setContentsMargins(*spec.margins)
    return layout


def _alignment(constraints: Constraints) -> Qt.Alignment:
    if constraints.alignment is None:
        return Qt.Alignment()
    return Qt.Alignment(_ALIGNMENT_FLAGS[constraints.alignment])


class QtToolkit:
    """
    Drives PyQt5 on behalf of a Frame.

    Creates the QApplication on first use if the process has none.
    """

    def __init__(self, app: Optional[QApplication] = None):
        self._app = app or QApplication.instance() or QApplication(sys.argv)
        self._invoker = _Invoker()

    @property
    def app(self) -> QApplication:
        return self._app

    # === Window ===

    def create_window(self, config: FrameConfig, on_close: Callable[[], None]) -> FrameWindow:
        window = FrameWindow(build_layout(LayoutSpec.coerce(config.root_layout)))
        if config.title:
            window.setWindowTitle(config.title)
        window.resize(config.width, config.height)
        window.set_resizable(config.resizable)
        window.close_requested.connect(on_close)
        return window

    def set_window_size(self, window: FrameWindow, width: int, height: int) -> None:
        if window.resizable:
            window.resize(width, height)
        else:
            window.setFixedSize(width, height)

    def set_window_title(self, window: FrameWindow, title: str) -> None:
        window.setWindowTitle(title)

    def show_window(self, window: FrameWindow) -> None:
        window.show()

    def attach_to_window(self, window: FrameWindow, container: QWidget) -> None:
        self.attach(window.root, container, Constraints())

    # === Containers ===

    def create_container(self, name: str, layout: LayoutSpec, visible: bool = True) -> QWidget:
        container = QWidget()
        container.setObjectName(name)
        container.setLayout(build_layout(layout))
        if not visible:
            container.setVisible(False)
        return container

    def attach(self, parent: QWidget, child: QWidget, constraints: Constraints) -> None:
        layout = parent.layout()
        alignment = _alignment(constraints)

        if isinstance(layout, QGridLayout):
            if constraints.has_cell:
                row, column = constraints.row, constraints.column
            elif isinstance(layout, AutoGridLayout):
                row, column = layout.next_cell()
            else:
                row, column = layout.rowCount(), 0
            layout.addWidget(
                child,
                row,
                column,
                constraints.row_span,
                constraints.column_span,
                alignment,
            )
        elif isinstance(layout, QFormLayout):
            layout.addRow(child)
        elif isinstance(layout, QBoxLayout):
            layout.addWidget(child, constraints.stretch, alignment)
        else:
            layout.addWidget(child)

    def set_visible(self, widget: QWidget, visible: bool) -> None:
        widget.setVisible(visible)

    def is_visible(self, widget: QWidget) -> bool:
        return not widget.isHidden()

    # === Leaf widgets ===

    def create_button(self, name: str, text: str, on_activate: Callable[[], None]) -> QPushButton:
        button = QPushButton(text)
        button.setObjectName(name)
        button.clicked.connect(lambda _checked=False: on_activate())
        return button

    def create_label(self, name: str, text: str) -> QLabel:
        label = QLabel(text)
        label.setObjectName(name)
        return label

    def set_label_text(self, label: QLabel, text: str) -> None:
        label.setText(text)

    def get_label_text(self, label: QLabel) -> str:
        return label.text()

    def create_input(self, name: str, columns: int) -> QLineEdit:
        field = QLineEdit("")
        field.setObjectName(name)
        if columns > 0:
            metrics = field.fontMetrics()
            margins = field.textMargins()
            width = metrics.horizontalAdvance("m") * columns + margins.left() + margins.right() + 8
            field.setFixedWidth(width)
        return field

    def get_input_text(self, field: QLineEdit) -> str:
        return field.text()

    def set_input_text(self, field: QLineEdit, text: str) -> None:
        field.setText(text)

    def create_combo_box(self, name: str, options: Sequence[str]) -> QComboBox:
        combo = QComboBox()
        combo.setObjectName(name)
        combo.addItems(list(options))
        return combo

    def get_combo_box_selection(self, combo: QComboBox) -> Optional[str]:
        if combo.currentIndex() < 0:
            return None
        return combo.currentText()

    def set_combo_box_options(self, combo: QComboBox, options: Sequence[str]) -> None:
        combo.clear()
        combo.addItems(list(options))

    def create_list(self, name: str, contents: Sequence[str], height: int) -> QListWidget:
        list_widget = QListWidget()
        list_widget.setObjectName(name)
        list_widget.addItems(list(contents))
        list_widget.setFixedHeight(height)
        return list_widget

    def set_list_contents(self, list_widget: QListWidget, contents: Sequence[str]) -> None:
        list_widget.clear()
        list_widget.addItems(list(contents))

    def get_list_contents(self, list_widget: QListWidget) -> List[str]:
        return [list_widget.item(i).text() for i in range(list_widget.count())]

    def get_list_selection(self, list_widget: QListWidget) -> Optional[str]:
        selected = list_widget.selectedItems()
        if not selected:
            return None
        return selected[0].text()

    def create_spacer(self, width: int, height: int) -> QWidget:
        spacer = QWidget()
        spacer.setFixedSize(width, height)
        spacer.setFocusPolicy(Qt.NoFocus)
        return spacer

    # === Threading ===

    def invoke(self, fn: Callable[[], None]) -> None:
        self._invoker.requested.emit(fn)

    def run_event_loop(self) -> int:
        logger.debug("Entering Qt event loop")
        return self._app.exec_()
