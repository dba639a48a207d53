"""Lay widgets out in a grid, optionally stretching columns and rows."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence

from ebui.geometry import Insets, Rectangle
from ebui.rowlayout import LayoutWidget


class GridLayoutPosition(Enum):
    """Anchoring of a widget inside its grid cell."""

    START = 0
    CENTER = 1
    END = 2


@dataclass(frozen=True)
class GridLayoutData:
    """Per-widget settings understood by GridLayout."""

    max_width: int = 0
    max_height: int = 0
    horizontal_position: GridLayoutPosition = GridLayoutPosition.START
    vertical_position: GridLayoutPosition = GridLayoutPosition.START


def _half(n: int) -> int:
    """Halve n, truncating toward zero."""
    return n // 2 if n >= 0 else -((-n) // 2)


def _apply_max_size(ld: GridLayoutData, ww: int, wh: int) -> tuple[int, int]:
    if ld.max_width > 0 and ww > ld.max_width:
        ww = ld.max_width
    if ld.max_height > 0 and wh > ld.max_height:
        wh = ld.max_height
    return ww, wh


@dataclass
class GridLayout:
    """Places widgets row by row into a fixed number of columns.

    The stretch sequences, when given, must have one entry per column and per row.
    """

    columns: int = 1
    padding: Insets = field(default_factory=Insets)
    column_spacing: int = 0
    row_spacing: int = 0
    column_stretch: Optional[Sequence[bool]] = None
    row_stretch: Optional[Sequence[bool]] = None

    def __post_init__(self) -> None:
        if self.columns < 1:
            raise ValueError(f"grid layout needs at least one column, got {self.columns}")

    def preferred_size(self, widgets: Sequence[LayoutWidget]) -> tuple[int, int]:
        col_widths, row_heights = self._preferred_cells(widgets)
        return (
            self.padding.dx()
            + self.column_spacing * (len(col_widths) - 1)
            + sum(col_widths),
            self.padding.dy()
            + self.row_spacing * (len(row_heights) - 1)
            + sum(row_heights),
        )

    def layout(self, widgets: Sequence[LayoutWidget], rect: Rectangle) -> None:
        rect = self.padding.apply(rect)
        col_widths, row_heights = self._preferred_cells(widgets)
        col_w, row_h, first_col_w, first_row_h = self._stretched_cell_sizes(
            col_widths, row_heights, rect
        )

        c = r = x = y = 0
        first_col = first_row = True
        for w in widgets:
            cw = col_widths[c]
            if self._column_stretched(c):
                cw = first_col_w if first_col else col_w
                first_col = False

            ch = row_heights[r]
            if self._row_stretched(r):
                ch = first_row_h if first_row else row_h
                first_row = False

            wx, wy, ww, wh = x, y, cw, ch
            ld = w.widget.layout_data
            if isinstance(ld, GridLayoutData):
                wx, wy, ww, wh = self._apply_layout_data(ld, wx, wy, ww, wh, x, y, cw, ch)

            w.set_location(
                Rectangle(
                    rect.min_x + wx,
                    rect.min_y + wy,
                    rect.min_x + wx + ww,
                    rect.min_y + wy + wh,
                )
            )

            c += 1
            x += cw + self.column_spacing
            if c >= self.columns:
                c = 0
                r += 1
                x = 0
                y += ch + self.row_spacing
                first_col = True

    def _stretched_cell_sizes(
        self, col_widths: list[int], row_heights: list[int], rect: Rectangle
    ) -> tuple[int, int, int, int]:
        remaining_width = rect.dx() - self.column_spacing * (len(col_widths) - 1)
        remaining_height = rect.dy() - self.row_spacing * (len(row_heights) - 1)
        stretched_cols = stretched_rows = 0

        for c, cw in enumerate(col_widths):
            if self._column_stretched(c):
                stretched_cols += 1
            else:
                remaining_width -= cw

        for r, rh in enumerate(row_heights):
            if self._row_stretched(r):
                stretched_rows += 1
            else:
                remaining_height -= rh

        col_w = remaining_width // stretched_cols if stretched_cols else 0
        row_h = remaining_height // stretched_rows if stretched_rows else 0
        first_col_w = col_w + (remaining_width - col_w * stretched_cols)
        first_row_h = row_h + (remaining_height - row_h * stretched_rows)
        return col_w, row_h, first_col_w, first_row_h

    def _column_stretched(self, c: int) -> bool:
        return self.column_stretch is not None and bool(self.column_stretch[c])

    def _row_stretched(self, r: int) -> bool:
        return self.row_stretch is not None and bool(self.row_stretch[r])

    def _preferred_cells(self, widgets: Sequence[LayoutWidget]) -> tuple[list[int], list[int]]:
        col_widths = [0] * self.columns
        row_heights = [0] * -(-len(widgets) // self.columns)
        for i, w in enumerate(widgets):
            c, r = i % self.columns, i // self.columns
            ww, wh = w.preferred_size()
            ld = w.widget.layout_data
            if isinstance(ld, GridLayoutData):
                ww, wh = _apply_max_size(ld, ww, wh)
            col_widths[c] = max(col_widths[c], ww)
            row_heights[r] = max(row_heights[r], wh)
        return col_widths, row_heights

    @staticmethod
    def _apply_layout_data(
        ld: GridLayoutData,
        wx: int,
        wy: int,
        ww: int,
        wh: int,
        x: int,
        y: int,
        cw: int,
        ch: int,
    ) -> tuple[int, int, int, int]:
        ww, wh = _apply_max_size(ld, ww, wh)

        if ld.horizontal_position == GridLayoutPosition.CENTER:
            wx = x + _half(cw - ww)
        elif ld.horizontal_position == GridLayoutPosition.END:
            wx = x + cw - ww

        # Vertical centring is offset from the cell's x position, as it always has been.
        if ld.vertical_position == GridLayoutPosition.CENTER:
            wy = x + _half(ch - wh)
        elif ld.vertical_position == GridLayoutPosition.END:
            wy = y + ch - wh

        return wx, wy, ww, wh