"""
Unit tests for model classes.
"""

import pytest

from qtfacade.errors import EntityKind, InvariantViolation, Rule
from qtfacade.models.layout import Constraints, LayoutKind, LayoutSpec
from qtfacade.models.config import FrameConfig


class TestLayoutSpec:
    """Tests for layout descriptions."""

    def test_default_is_flow(self):
        assert LayoutSpec.coerce(None).kind == LayoutKind.FLOW

    def test_coerce_from_name_is_case_insensitive(self):
        assert LayoutSpec.coerce("Vertical") == LayoutSpec.vertical()

    def test_coerce_from_kind(self):
        assert LayoutSpec.coerce(LayoutKind.FORM).kind == LayoutKind.FORM

    def test_coerce_keeps_spec(self):
        spec = LayoutSpec.grid(columns=4, spacing=2)
        assert LayoutSpec.coerce(spec) is spec

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown layout 'border'"):
            LayoutSpec.coerce("border")

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            LayoutSpec.coerce(3.5)

    def test_grid_columns(self):
        assert LayoutSpec.grid().grid_columns == 2
        assert LayoutSpec.grid(columns=5).grid_columns == 5

    def test_grid_columns_must_be_positive(self):
        with pytest.raises(ValueError):
            LayoutSpec.grid(columns=0)

    def test_margins_need_four_items(self):
        with pytest.raises(ValueError, match="need 4 items"):
            LayoutSpec.vertical(margins=(1, 2, 3))

    def test_margins_must_be_integers(self):
        with pytest.raises(TypeError):
            LayoutSpec.vertical(margins=("a", "b", "c", "d"))

    def test_spacing_must_be_integer(self):
        with pytest.raises(TypeError):
            LayoutSpec.vertical(spacing="wide")

    def test_valid_margins(self):
        assert LayoutSpec.vertical(margins=(1, 2, 3, 4)).margins == (1, 2, 3, 4)


class TestConstraints:
    """Tests for placement constraints."""

    def test_none_appends(self):
        constraints = Constraints.coerce(None)
        assert constraints == Constraints()
        assert constraints.has_cell is False

    def test_int_is_stretch(self):
        assert Constraints.coerce(2).stretch == 2

    def test_cell_tuple(self):
        constraints = Constraints.coerce((1, 3))
        assert (constraints.row, constraints.column) == (1, 3)
        assert constraints.has_cell is True

    def test_span_tuple(self):
        constraints = Constraints.coerce([0, 0, 2, 3])
        assert (constraints.row_span, constraints.column_span) == (2, 3)

    def test_mapping(self):
        constraints = Constraints.coerce({"alignment": "right", "stretch": 1})
        assert constraints.alignment == "right"
        assert constraints.stretch == 1

    def test_mapping_with_unknown_field(self):
        with pytest.raises(ValueError, match="Unknown constraint fields"):
            Constraints.coerce({"weight": 1})

    def test_bad_tuple_length(self):
        with pytest.raises(ValueError):
            Constraints.coerce((1, 2, 3))

    def test_bad_alignment(self):
        with pytest.raises(ValueError):
            Constraints(alignment="middle")

    def test_bool_rejected(self):
        with pytest.raises(TypeError):
            Constraints.coerce(True)


class TestFrameConfig:
    """Tests for the window defaults."""

    def test_defaults(self):
        config = FrameConfig()
        assert config.width == 800
        assert config.height == 600
        assert config.resizable is False
        assert config.root_layout == "flow"
        assert config.list_height == 70
        assert config.debug_logging is False


class TestInvariantViolation:
    """Tests for error messages and attributes."""

    def test_is_value_error(self):
        assert issubclass(InvariantViolation, ValueError)

    @pytest.mark.parametrize(
        "kind,expected",
        [
            (EntityKind.BUTTON, "A button with name x already exists."),
            (EntityKind.LABEL, "A label with name x already exists."),
            (EntityKind.INPUT, "An input with name x already exists."),
            (EntityKind.COMBO_BOX, "A combobox with name x already exists."),
            (EntityKind.LIST, "A list with name x already exists."),
            (EntityKind.PANEL, "A panel with name x already exists."),
            (EntityKind.VIEW, "A view or panel with name x already exists."),
        ],
    )
    def test_collision_messages(self, kind, expected):
        error = InvariantViolation.collision(kind, "x")
        assert str(error) == expected
        assert error.rule is Rule.COLLISION
        assert error.kind is kind
        assert error.name == "x"

    def test_unknown_message(self):
        error = InvariantViolation.unknown(EntityKind.PANEL, "side")
        assert str(error) == "A panel with name side does not exist."
        assert error.rule is Rule.UNKNOWN
