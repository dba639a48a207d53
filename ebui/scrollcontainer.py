"""A container showing a scrollable view onto a single content widget."""

from __future__ import annotations

import math
from typing import Any, Optional

from ebui.geometry import Insets, Point, Rectangle
from ebui.widget import DeferFunc, Widget


def _round(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class ScrollContainer:
    """Shows content offset by scroll_left and scroll_top, both fractions in [0, 1].

    The content is any object with a widget attribute; it is positioned when it has
    set_location, sized from preferred_size when it has one, and drawn when it has
    render. The image, if given, has idle and disabled attributes and is drawn with
    screen.draw_image(image, rect, alpha).
    """

    def __init__(
        self,
        content: Any = None,
        *,
        image: Any = None,
        padding: Optional[Insets] = None,
        stretch_content_width: bool = False,
        widget: Optional[Widget] = None,
    ) -> None:
        self.content = content
        self.image = image
        self.padding = padding if padding is not None else Insets()
        self.stretch_content_width = stretch_content_width
        self.widget = widget if widget is not None else Widget()
        self.scroll_left = 0.0
        self.scroll_top = 0.0

    def set_location(self, rect: Rectangle) -> None:
        self.widget.rect = rect

    def preferred_size(self) -> tuple[int, int]:
        if self.content is None or not hasattr(self.content, "preferred_size"):
            return 50, 50
        w, h = self.content.preferred_size()
        return w + self.padding.dx(), h + self.padding.dy()

    def content_rect(self) -> Rectangle:
        """The part of the widget's rectangle the content is shown in."""
        return self.padding.apply(self.widget.rect)

    def render(self, screen: Any, defer: DeferFunc) -> None:
        self._clamp_scroll()
        if self.content is not None:
            self.content.widget.disabled = self.widget.disabled
        self.widget.render(screen, defer)
        self._draw(screen)
        self._render_content(screen, defer)

    def _clamp_scroll(self) -> None:
        self.scroll_top = min(max(self.scroll_top, 0.0), 1.0)
        self.scroll_left = min(max(self.scroll_left, 0.0), 1.0)

    def _draw(self, screen: Any) -> None:
        if self.image is None or screen is None:
            return
        img = self.image.idle
        faded = False
        if self.widget.disabled:
            if self.image.disabled is not None:
                img = self.image.disabled
            else:
                faded = True
        if img is not None:
            screen.draw_image(img, self.widget.rect, 0.35 if faded else 1.0)

    def _render_content(self, screen: Any, defer: DeferFunc) -> None:
        content = self.content
        if content is None or not hasattr(content, "render"):
            return

        if hasattr(content, "set_location"):
            cw, ch = 50, 50
            if hasattr(content, "preferred_size"):
                cw, ch = content.preferred_size()

            crect = self.content_rect()
            if self.stretch_content_width and cw < crect.dx():
                cw = crect.dx()

            rect = Rectangle(0, 0, cw, ch).translate(
                Point(
                    self.widget.rect.min_x + self.padding.left,
                    self.widget.rect.min_y + self.padding.top,
                )
            )
            rect = rect.translate(
                Point(
                    -_round((cw - crect.dx()) * self.scroll_left),
                    -_round((ch - crect.dy()) * self.scroll_top),
                )
            )

            if rect != content.widget.rect:
                content.set_location(rect)
                if hasattr(content, "request_relayout"):
                    content.request_relayout()

        content.render(screen, defer)