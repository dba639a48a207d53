"""A text label whose colour follows the widget's disabled state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ebui.geometry import Rectangle
from ebui.text import Face, Text, TextPosition
from ebui.widget import DeferFunc, Widget


@dataclass(frozen=True)
class LabelColor:
    idle: Any = None
    disabled: Any = None


class Label:
    """Text drawn in the idle or disabled colour.

    Changes to label take effect on the next render.
    """

    def __init__(
        self,
        label: str = "",
        face: Optional[Face] = None,
        color: Optional[LabelColor] = None,
        *,
        horizontal_position: TextPosition = TextPosition.START,
        vertical_position: TextPosition = TextPosition.START,
        widget: Optional[Widget] = None,
    ) -> None:
        self.label = label
        self.color = color if color is not None else LabelColor()
        self.text = Text(
            label,
            face,
            self.color.idle,
            horizontal_position=horizontal_position,
            vertical_position=vertical_position,
            widget=widget,
        )

    @property
    def widget(self) -> Widget:
        return self.text.widget

    def set_location(self, rect: Rectangle) -> None:
        self.text.set_location(rect)

    def preferred_size(self) -> tuple[int, int]:
        return self.text.preferred_size()

    def render(self, screen: Any, defer: DeferFunc) -> None:
        self.text.label = self.label
        self.text.color = self.color.disabled if self.widget.disabled else self.color.idle
        self.text.render(screen, defer)