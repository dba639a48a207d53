"""Tool tips that appear over the widget under the cursor."""

from __future__ import annotations

import time
from typing import Any, Callable, Optional, Tuple

from ebui.geometry import Point, Rectangle
from ebui.widget import DEFAULT_INPUT, DeferFunc, InputState, MouseButton

_State = Callable[[Any, DeferFunc], Tuple[Optional["_State"], bool]]


class ToolTip:
    """Shows a tip widget next to the cursor while it rests on a widget.

    The container provides widget_at(x, y), returning the widget under that
    position or None. The contents creater provides create(widget), returning a
    tip widget (with preferred_size, set_location and render) or None; if it also
    has update(widget), that is called on every frame the tip is shown. The delay
    is in seconds; a delay of zero or less shows the tip at once.
    """

    def __init__(
        self,
        container: Any,
        contents_creater: Any,
        *,
        offset: Point = Point(0, 20),
        sticky: bool = False,
        delay: float = 0.0,
        input_state: Optional[InputState] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.container = container
        self.contents_creater = contents_creater
        self.offset = offset
        self.sticky = sticky
        self.delay = delay
        self.input_state = input_state if input_state is not None else DEFAULT_INPUT
        self._clock = clock
        self._state: _State = self._idle_state()

    def render(self, screen: Any, defer: DeferFunc) -> None:
        while True:
            new_state, rerun = self._state(screen, defer)
            if new_state is not None:
                self._state = new_state
            if not rerun:
                break

    def _any_button_pressed(self) -> bool:
        return any(self.input_state.is_pressed(b) for b in MouseButton)

    def _cursor(self) -> tuple[int, int]:
        return self.input_state.cursor_x, self.input_state.cursor_y

    def _idle_state(self) -> _State:
        def state(screen: Any, defer: DeferFunc) -> tuple[Optional[_State], bool]:
            if self._any_button_pressed():
                return None, False
            x, y = self._cursor()
            w = self.container.widget_at(x, y)
            if w is None:
                return None, False
            if self.delay <= 0:
                return self._showing_state(w, x, y, None), True
            return self._armed_state(w, x, y, None), True

        return state

    def _armed_state(
        self, src: Any, src_x: int, src_y: int, deadline: Optional[float]
    ) -> _State:
        def state(screen: Any, defer: DeferFunc) -> tuple[Optional[_State], bool]:
            x, y = self._cursor()
            w = self.container.widget_at(x, y)
            if self._any_button_pressed() or w is not src:
                return self._idle_state(), False
            if deadline is not None and self._clock() >= deadline:
                return self._showing_state(src, x, y, None), True
            if deadline is None:
                return self._armed_state(src, src_x, src_y, self._clock() + self.delay), False
            return None, False

        return state

    def _showing_state(self, src: Any, src_x: int, src_y: int, tip: Any) -> _State:
        def state(screen: Any, defer: DeferFunc) -> tuple[Optional[_State], bool]:
            x, y = self._cursor()
            w = self.container.widget_at(x, y)
            if self._any_button_pressed() or w is not src:
                return self._idle_state(), False

            shown = tip
            if shown is None:
                shown = self.contents_creater.create(src)
                if shown is None:
                    return self._idle_state(), False

            update = getattr(self.contents_creater, "update", None)
            if update is not None:
                update(src)

            sx, sy = (src_x, src_y) if self.sticky else (x, y)

            width, height = shown.preferred_size()
            rect = Rectangle(0, 0, width, height).translate(Point(sx, sy)).translate(self.offset)
            shown.set_location(rect)
            if hasattr(shown, "request_relayout"):
                shown.request_relayout()
            shown.render(screen, defer)

            return self._showing_state(src, sx, sy, shown), False

        return state