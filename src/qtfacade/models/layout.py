"""
Layout and placement descriptions.

Native layouts belong to exactly one container, so callers describe a
layout instead of passing one; the toolkit builds a fresh native layout
for every container from the description.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping, Optional, Tuple, Union


class LayoutKind(str, Enum):
    """Supported container layouts."""
    FLOW = "flow"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    GRID = "grid"
    FORM = "form"


ALIGNMENTS = ("left", "right", "center", "top", "bottom")


@dataclass(frozen=True)
class LayoutSpec:
    """Description of a container layout."""
    kind: LayoutKind = LayoutKind.FLOW
    spacing: Optional[int] = None
    margins: Optional[Tuple[int, int, int, int]] = None  # left, top, right, bottom
    columns: Optional[int] = None  # GRID only: cells per row when auto-placing

    def __post_init__(self):
        if self.spacing is not None and not isinstance(self.spacing, int):
            raise TypeError(f"Layout spacing must be an integer, got {self.spacing!r}")
        if self.margins is not None:
            if len(self.margins) != 4:
                raise ValueError(
                    f"Layout margins need 4 items (left, top, right, bottom), got {len(self.margins)}"
                )
            if not all(isinstance(margin, int) for margin in self.margins):
                raise TypeError(f"Layout margins must be integers, got {self.margins!r}")
        if self.columns is not None:
            if not isinstance(self.columns, int):
                raise TypeError(f"Grid column count must be an integer, got {self.columns!r}")
            if self.columns < 1:
                raise ValueError(f"Grid column count must be positive, got {self.columns}")

    @classmethod
    def flow(cls, **kwargs) -> "LayoutSpec":
        return cls(LayoutKind.FLOW, **kwargs)

    @classmethod
    def horizontal(cls, **kwargs) -> "LayoutSpec":
        return cls(LayoutKind.HORIZONTAL, **kwargs)

    @classmethod
    def vertical(cls, **kwargs) -> "LayoutSpec":
        return cls(LayoutKind.VERTICAL, **kwargs)

    @classmethod
    def grid(cls, columns: int = 2, **kwargs) -> "LayoutSpec":
        return cls(LayoutKind.GRID, columns=columns, **kwargs)

    @classmethod
    def form(cls, **kwargs) -> "LayoutSpec":
        return cls(LayoutKind.FORM, **kwargs)

    @classmethod
    def coerce(cls, value: Union["LayoutSpec", LayoutKind, str, None]) -> "LayoutSpec":
        """
        Normalize a layout argument.

        Args:
            value: LayoutSpec, LayoutKind, kind name ("vertical") or None for flow

        Returns:
            LayoutSpec instance

        Raises:
            ValueError: If the kind name is not recognised
        """
        if value is None:
            return cls()
        if isinstance(value, LayoutSpec):
            return value
        if isinstance(value, LayoutKind):
            return cls(value)
        if isinstance(value, str):
            try:
                kind = LayoutKind(value.lower())
            except ValueError:
                raise ValueError(
                    f"Unknown layout '{value}'. "
                    f"Valid layouts: {[k.value for k in LayoutKind]}"
                )
            return cls(kind)
        raise TypeError(f"Cannot use {type(value).__name__} as a layout")

    @property
    def grid_columns(self) -> int:
        return self.columns or 2


@dataclass(frozen=True)
class Constraints:
    """
    Placement of a child inside its parent's layout.

    row/column are honoured by GRID layouts; stretch by box layouts;
    alignment by all layouts that support it. Unset fields fall back to
    appending at the end.
    """
    row: Optional[int] = None
    column: Optional[int] = None
    row_span: int = 1
    column_span: int = 1
    stretch: int = 0
    alignment: Optional[str] = None

    def __post_init__(self):
        if self.alignment is not None and self.alignment not in ALIGNMENTS:
            raise ValueError(
                f"Unknown alignment '{self.alignment}'. Valid alignments: {list(ALIGNMENTS)}"
            )
        if self.row_span < 1 or self.column_span < 1:
            raise ValueError("Row and column spans must be positive")

    @property
    def has_cell(self) -> bool:
        return self.row is not None and self.column is not None

    @classmethod
    def coerce(cls, value: Any) -> "Constraints":
        """
        Normalize a constraints argument.

        Accepts None, Constraints, an int stretch factor, a (row, column)
        or (row, column, row_span, column_span) tuple, or a mapping of
        field names.
        """
        if value is None:
            return cls()
        if isinstance(value, Constraints):
            return value
        if isinstance(value, bool):
            raise TypeError("Cannot use bool as placement constraints")
        if isinstance(value, int):
            return cls(stretch=value)
        if isinstance(value, (tuple, list)):
            if len(value) == 2:
                return cls(row=value[0], column=value[1])
            if len(value) == 4:
                return cls(
                    row=value[0],
                    column=value[1],
                    row_span=value[2],
                    column_span=value[3],
                )
            raise ValueError(
                f"Constraint tuples need 2 or 4 items (row, column[, row_span, column_span]), got {len(value)}"
            )
        if isinstance(value, Mapping):
            known = {f.name for f in fields(cls)}
            unknown = set(value) - known
            if unknown:
                raise ValueError(f"Unknown constraint fields: {sorted(unknown)}")
            return cls(**value)
        raise TypeError(f"Cannot use {type(value).__name__} as placement constraints")
