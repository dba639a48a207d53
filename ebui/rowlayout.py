"""Lay widgets out in a single row or a single column."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Protocol, Sequence

from ebui.geometry import Direction, Insets, Point, Rectangle


class LayoutWidget(Protocol):
    """What a layout needs from a widget it places."""

    widget: Any

    def preferred_size(self) -> tuple[int, int]: ...

    def set_location(self, rect: Rectangle) -> None: ...


class RowLayoutPosition(Enum):
    """Anchoring across the layout's primary direction."""

    START = 0
    CENTER = 1
    END = 2


@dataclass(frozen=True)
class RowLayoutData:
    """Per-widget settings understood by RowLayout."""

    position: RowLayoutPosition = RowLayoutPosition.START
    stretch: bool = False
    max_width: int = 0
    max_height: int = 0


def _half(n: int) -> int:
    """Halve n, truncating toward zero."""
    return n // 2 if n >= 0 else -((-n) // 2)


@dataclass
class RowLayout:
    """Places widgets one after another, optionally stretching them across."""

    direction: Direction = Direction.HORIZONTAL
    padding: Insets = field(default_factory=Insets)
    spacing: int = 0

    def preferred_size(self, widgets: Sequence[LayoutWidget]) -> tuple[int, int]:
        bounds = Rectangle()
        for _, placed in self._place(widgets, Rectangle(), use_position=False):
            bounds = bounds.union(placed)
        return bounds.dx() + self.padding.dx(), bounds.dy() + self.padding.dy()

    def layout(self, widgets: Sequence[LayoutWidget], rect: Rectangle) -> None:
        for w, placed in self._place(widgets, rect, use_position=True):
            w.set_location(placed)

    def _place(
        self, widgets: Sequence[LayoutWidget], rect: Rectangle, use_position: bool
    ) -> Iterator[tuple[LayoutWidget, Rectangle]]:
        if not widgets:
            return
        rect = self.padding.apply(rect)
        x = y = 0
        for w in widgets:
            wx, wy = x, y
            ww, wh = w.preferred_size()
            ld = w.widget.layout_data
            if isinstance(ld, RowLayoutData):
                if use_position:
                    ww, wh = self._apply_stretch(ld, ww, wh, rect)
                ww, wh = _apply_max_size(ld.max_width, ld.max_height, ww, wh)
                if use_position:
                    wx, wy = self._apply_position(ld, wx, wy, ww, wh, rect, x, y)

            placed = Rectangle(0, 0, ww, wh).translate(
                Point(rect.min_x + wx, rect.min_y + wy)
            )
            yield w, placed

            if self.direction == Direction.HORIZONTAL:
                x += ww + self.spacing
            else:
                y += wh + self.spacing

    def _apply_stretch(
        self, ld: RowLayoutData, ww: int, wh: int, rect: Rectangle
    ) -> tuple[int, int]:
        if not ld.stretch:
            return ww, wh
        if self.direction == Direction.HORIZONTAL:
            return ww, rect.dy()
        return rect.dx(), wh

    def _apply_position(
        self,
        ld: RowLayoutData,
        wx: int,
        wy: int,
        ww: int,
        wh: int,
        rect: Rectangle,
        x: int,
        y: int,
    ) -> tuple[int, int]:
        horizontal = self.direction == Direction.HORIZONTAL
        if ld.position == RowLayoutPosition.CENTER:
            if horizontal:
                wy = y + _half(rect.dy() - wh)
            else:
                wx = x + _half(rect.dx() - ww)
        elif ld.position == RowLayoutPosition.END:
            if horizontal:
                wy = y + rect.dy() - wh
            else:
                wx = x + rect.dx() - ww
        return wx, wy


def _apply_max_size(max_width: int, max_height: int, ww: int, wh: int) -> tuple[int, int]:
    if max_width > 0 and ww > max_width:
        ww = max_width
    if max_height > 0 and wh > max_height:
        wh = max_height
    return ww, wh