"""
Unit tests for YAML frame definitions.
"""

import pytest

from qtfacade.declarative.loader import (
    FrameDefinitionLoader,
    FrameDefinitionError,
    apply_definition,
)
from qtfacade.declarative.schema import WidgetType
from qtfacade.errors import EntityKind, InvariantViolation
from qtfacade.models.layout import Constraints, LayoutKind


BANK_YAML = """
window:
  title: Bank
  width: 400
  height: 300
views:
  - name: login
    layout: vertical
    children:
      - {type: label, name: prompt, text: "User"}
      - {type: input, name: user, columns: 12}
      - {type: button, name: login, text: Login}
  - name: main
    layout: {kind: grid, columns: 2, spacing: 4}
    children:
      - {type: label, name: balance, text: "0", constraints: [0, 0]}
      - type: panel
        name: actions
        layout: horizontal
        constraints: {row: 1, column: 0, column_span: 2}
        children:
          - {type: button, name: deposit}
          - {type: spacer, width: 8, height: 8}
          - {type: combo_box, name: ccy, options: [EUR, USD]}
      - {type: list, name: history, contents: ["+10", "-5"]}
show_view: login
"""


class TestFrameDefinitionLoader:
    """Tests for parsing."""

    def test_parse_bank_definition(self):
        definition = FrameDefinitionLoader.loads(BANK_YAML)

        assert definition.window.title == "Bank"
        assert definition.view_names() == ["login", "main"]
        assert definition.show_view == "login"

        main = definition.views[1]
        assert main.layout.kind == LayoutKind.GRID
        assert main.layout.columns == 2
        assert main.layout.spacing == 4
        assert main.children[0].constraints == Constraints(row=0, column=0)

        actions = main.children[1]
        assert actions.type == WidgetType.PANEL
        assert actions.constraints.column_span == 2
        assert [c.type for c in actions.children] == [
            WidgetType.BUTTON,
            WidgetType.SPACER,
            WidgetType.COMBO_BOX,
        ]
        assert actions.children[2].items == ["EUR", "USD"]

    def test_button_text_defaults_to_name(self):
        definition = FrameDefinitionLoader.loads(BANK_YAML)
        deposit = definition.views[1].children[1].children[0]

        assert deposit.text == "deposit"

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "bank.yaml"
        path.write_text(BANK_YAML, encoding="utf-8")

        definition = FrameDefinitionLoader.load(path)
        assert definition.window.width == 400

    def test_missing_file(self, tmp_path):
        with pytest.raises(FrameDefinitionError, match="File not found"):
            FrameDefinitionLoader.load(tmp_path / "missing.yaml")

    def test_directory_is_not_a_definition(self, tmp_path):
        with pytest.raises(FrameDefinitionError, match="Cannot read definition") as exc_info:
            FrameDefinitionLoader.load(tmp_path)

        assert exc_info.value.path == str(tmp_path)

    def test_undecodable_file(self, tmp_path):
        path = tmp_path / "binary.yaml"
        path.write_bytes(b"\xff\xfe\x00window")

        with pytest.raises(FrameDefinitionError, match="Cannot read definition"):
            FrameDefinitionLoader.load(path)

    def test_window_size_must_be_integers(self):
        with pytest.raises(FrameDefinitionError, match="Field 'width' of window must be an integer"):
            FrameDefinitionLoader.loads("window: {width: wide, height: 300}\n")

    @pytest.mark.parametrize("window", ["{width: 400}", "{height: 300}", "{title: T, width: 400}"])
    def test_window_size_needs_both_dimensions(self, window):
        with pytest.raises(FrameDefinitionError, match="both 'width' and 'height'"):
            FrameDefinitionLoader.loads(f"window: {window}\n")

    def test_window_title_only(self):
        definition = FrameDefinitionLoader.loads("window: {title: Bank}\n")

        assert definition.window.title == "Bank"
        assert definition.window.width is None
        assert definition.window.height is None

    @pytest.mark.parametrize(
        "layout",
        [
            "{kind: vertical, margins: [1, 2, 3]}",
            "{kind: vertical, margins: [a, b, c, d]}",
            "{kind: vertical, spacing: wide}",
            "{kind: grid, columns: two}",
        ],
    )
    def test_malformed_layout_mapping(self, layout):
        with pytest.raises(FrameDefinitionError, match="Invalid layout for view 'v'"):
            FrameDefinitionLoader.loads(f"views:\n  - {{name: v, layout: {layout}}}\n")

    def test_empty_content(self):
        with pytest.raises(FrameDefinitionError, match="Empty YAML content"):
            FrameDefinitionLoader.loads("")

    def test_syntax_error_reports_line(self):
        with pytest.raises(FrameDefinitionError) as exc_info:
            FrameDefinitionLoader.loads("views:\n  - name: [unclosed\n", "bad.yaml")

        assert exc_info.value.path == "bad.yaml"
        assert exc_info.value.line is not None

    def test_missing_view_name(self):
        with pytest.raises(FrameDefinitionError, match="Missing required field 'name' in view"):
            FrameDefinitionLoader.loads("views:\n  - layout: flow\n")

    def test_unknown_widget_type(self):
        yaml_str = "views:\n  - name: v\n    children:\n      - {type: slider, name: s}\n"
        with pytest.raises(FrameDefinitionError, match="Invalid widget type 'slider'"):
            FrameDefinitionLoader.loads(yaml_str)

    def test_unknown_layout(self):
        with pytest.raises(FrameDefinitionError, match="Invalid layout"):
            FrameDefinitionLoader.loads("views:\n  - {name: v, layout: border}\n")

    def test_bad_constraints(self):
        yaml_str = "views:\n  - name: v\n    children:\n      - {type: label, name: l, constraints: [1, 2, 3]}\n"
        with pytest.raises(FrameDefinitionError, match="Invalid constraints"):
            FrameDefinitionLoader.loads(yaml_str)

    def test_non_integer_columns(self):
        yaml_str = "views:\n  - name: v\n    children:\n      - {type: input, name: i, columns: wide}\n"
        with pytest.raises(FrameDefinitionError, match="must be an integer"):
            FrameDefinitionLoader.loads(yaml_str)

    def test_show_view_must_be_defined(self):
        with pytest.raises(FrameDefinitionError, match="show_view 'other'"):
            FrameDefinitionLoader.loads("views:\n  - {name: v}\nshow_view: other\n")

    def test_root_must_be_mapping(self):
        with pytest.raises(FrameDefinitionError, match="Expected a mapping for root"):
            FrameDefinitionLoader.loads("- a\n- b\n")


class TestApplyDefinition:
    """Tests for replaying a definition onto a frame."""

    def test_apply_builds_registry(self, frame):
        definition = FrameDefinitionLoader.loads(BANK_YAML)

        assert apply_definition(frame, definition) is frame

        assert frame.current_view == "login"
        assert frame.native_window().title == "Bank"
        assert frame.native_window().size == (400, 300)
        assert frame.has(EntityKind.VIEW, "main")
        assert frame.has(EntityKind.PANEL, "actions")
        assert frame.has(EntityKind.BUTTON, "login")
        assert frame.has(EntityKind.BUTTON, "deposit")
        assert frame.get_combo_box_selection("ccy") == "EUR"
        assert frame.get_list_contents("history") == ["+10", "-5"]

    def test_applied_buttons_emit_tokens(self, frame):
        apply_definition(frame, FrameDefinitionLoader.loads(BANK_YAML))

        frame.native_widget(EntityKind.BUTTON, "deposit").click()
        assert frame.events()() == "deposit"

    def test_duplicate_names_propagate_invariant_violation(self, frame):
        yaml_str = (
            "views:\n"
            "  - name: v\n"
            "    children:\n"
            "      - {type: button, name: b}\n"
            "      - {type: button, name: b}\n"
        )
        with pytest.raises(InvariantViolation):
            apply_definition(frame, FrameDefinitionLoader.loads(yaml_str))


class TestKindSpelling:
    """Widget types in documents use the registry's kind names."""

    @pytest.mark.parametrize(
        "kind",
        [k for k in EntityKind if k is not EntityKind.VIEW],
    )
    def test_named_kinds_share_spelling(self, kind):
        assert WidgetType(kind.value).value == kind.value

    def test_combo_box_spelling(self):
        assert EntityKind.COMBO_BOX.value == WidgetType.COMBO_BOX.value == "combo_box"
