"""Single-line text entry with caret, key repeat and optional masking."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

from ebui.geometry import Insets, Point, Rectangle
from ebui.text import Face, Text
from ebui.widget import DeferFunc, Key, MouseButton, Widget

_State = Callable[[], Tuple[Optional["_State"], bool]]


@dataclass(frozen=True)
class TextInputColor:
    idle: Any = None
    disabled: Any = None
    caret: Any = None
    disabled_caret: Any = None


@dataclass
class TextInputChangedEventArgs:
    text_input: TextInput
    input_text: str


def _round(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def font_advance(text: str, face: Face) -> int:
    """Width in whole pixels of text drawn in face."""
    return _round(face.measure(text))


def font_string_index(text: str, face: Face, x: int) -> int:
    """Index into text closest to pixel position x, where x == 0 is before text[0]."""
    start, end = 0, len(text)
    while True:
        p = start + (end - start) // 2
        a = font_advance(text[:p], face)
        if x > a:
            if p == start:
                break
            start = p
        elif x < a:
            if end == p:
                break
            end = p
        else:
            return p

    if text:
        a1 = font_advance(text[:p], face)
        a2 = font_advance(text[: p + 1], face)
        if abs(x - a2) < abs(x - a1):
            p += 1
    return p


class TextInput:
    """An editable line of text.

    Rendering draws onto a screen that provides draw_text(text, face, x, y, color),
    draw_rect(rect, color) for the caret and, when a background image is set,
    draw_image(image, rect, alpha). A screen of None draws nothing. The image, if
    given, is any object with idle and disabled attributes.
    """

    def __init__(
        self,
        face: Face,
        *,
        color: Optional[TextInputColor] = None,
        padding: Optional[Insets] = None,
        placeholder: str = "",
        secure: bool = False,
        validation: Optional[Callable[[str], bool]] = None,
        repeat_delay: float = 0.3,
        repeat_interval: float = 0.035,
        caret_width: int = 1,
        image: Any = None,
        widget: Optional[Widget] = None,
        on_changed: Optional[Callable[[TextInputChangedEventArgs], None]] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        from ebui.widget import Event

        self.face = face
        self.color = color if color is not None else TextInputColor()
        self.padding = padding if padding is not None else Insets()
        self.placeholder = placeholder
        self.secure = secure
        self.validation = validation
        self.repeat_delay = repeat_delay
        self.repeat_interval = repeat_interval
        self.caret_width = caret_width
        self.image = image
        self.widget = widget if widget is not None else Widget()
        self.changed_event = Event()
        if on_changed is not None:
            self.changed_event.add_handler(on_changed)
        self._clock = clock

        self.input_text = ""
        self.cursor_position = 0
        self.focused = False
        self._last_input_text = ""
        self._secure_text = ""
        self._scroll_offset = 0
        self._caret_rect = Rectangle()
        self._text = Text("", face, self.color.idle, widget=Widget(parent=self.widget))
        self._commands: dict[Key, Callable[[], None]] = {
            Key.LEFT: self.go_left,
            Key.RIGHT: self.go_right,
            Key.HOME: self.go_start,
            Key.END: self.go_end,
            Key.BACKSPACE: self.backspace,
            Key.DELETE: self.delete,
        }
        self._state: _State = self._idle_state(True)

    @property
    def caret_height(self) -> int:
        m = self.face.metrics()
        return math.ceil(m.ascent + m.descent)

    def set_location(self, rect: Rectangle) -> None:
        self.widget.rect = rect

    def preferred_size(self) -> tuple[int, int]:
        return 50, self.caret_height + self.padding.top + self.padding.bottom

    def focus(self, focused: bool) -> None:
        self.widget.fire_focus_event(focused)
        self.focused = focused

    def render(self, screen: Any, defer: DeferFunc) -> None:
        self._text.widget.disabled = self.widget.disabled
        self.cursor_position = min(self.cursor_position, len(self.input_text))

        while True:
            new_state, rerun = self._state()
            if new_state is not None:
                self._state = new_state
            if not rerun:
                break

        try:
            if self.input_text != self._last_input_text:
                self.changed_event.fire(
                    TextInputChangedEventArgs(text_input=self, input_text=self.input_text)
                )
                if self.secure:
                    self._secure_text = "*" * len(self.input_text)

            self.widget.render(screen, defer)
            self._draw_image(screen)
            self._draw_text_and_caret(screen, defer)
        finally:
            self._last_input_text = self.input_text

    # Editing commands

    def insert(self, chars: str) -> None:
        """Insert chars at the cursor unless the validation function rejects the result."""
        pos = self.cursor_position
        new_text = self.input_text[:pos] + chars + self.input_text[pos:]
        if self.validation is not None and not self.validation(new_text):
            return
        self.input_text = new_text
        self.cursor_position += len(chars)

    def backspace(self) -> None:
        if not self.widget.disabled and self.cursor_position > 0:
            pos = self.cursor_position - 1
            self.input_text = self.input_text[:pos] + self.input_text[pos + 1 :]
            self.cursor_position -= 1

    def delete(self) -> None:
        if not self.widget.disabled and self.cursor_position < len(self.input_text):
            pos = self.cursor_position
            self.input_text = self.input_text[:pos] + self.input_text[pos + 1 :]

    def go_left(self) -> None:
        if self.cursor_position > 0:
            self.cursor_position -= 1

    def go_right(self) -> None:
        if self.cursor_position < len(self.input_text):
            self.cursor_position += 1

    def go_start(self) -> None:
        self.cursor_position = 0

    def go_end(self) -> None:
        self.cursor_position = len(self.input_text)

    def go_xy(self, x: int, y: int) -> None:
        """Move the cursor to the character nearest screen position (x, y)."""
        if not Point(x, y).inside(self.widget.rect):
            return
        tr = self.padding.apply(self.widget.rect)
        x = min(max(x, tr.min_x), tr.max_x)
        self.cursor_position = font_string_index(
            self.input_text, self.face, x - self._scroll_offset - tr.min_x
        )

    # Input state machine

    def _idle_state(self, new_key: bool) -> _State:
        def state() -> tuple[Optional[_State], bool]:
            if not self.focused:
                return self._idle_state(True), False

            inp = self.widget.effective_input
            if inp.chars:
                return self._chars_state("".join(inp.chars)), True

            for key in self._commands:
                if inp.is_pressed(key):
                    delay = self.repeat_delay if new_key else self.repeat_interval
                    return self._command_state(key, delay, None), True

            if inp.just_pressed(MouseButton.LEFT):
                self.go_xy(inp.cursor_x, inp.cursor_y)

            return self._idle_state(True), False

        return state

    def _chars_state(self, chars: str) -> _State:
        def state() -> tuple[Optional[_State], bool]:
            if not self.widget.disabled:
                self.insert(chars)
            return self._idle_state(True), False

        return state

    def _command_state(self, key: Key, delay: float, deadline: Optional[float]) -> _State:
        def state() -> tuple[Optional[_State], bool]:
            if not self.widget.effective_input.is_pressed(key):
                return self._idle_state(True), True
            if deadline is not None and self._clock() >= deadline:
                return self._idle_state(False), True
            if deadline is None:
                self._commands[key]()
                return self._command_state(key, delay, self._clock() + delay), False
            return None, False

        return state

    # Drawing

    def _draw_image(self, screen: Any) -> None:
        if self.image is None or screen is None:
            return
        img = self.image.idle
        if self.widget.disabled and self.image.disabled is not None:
            img = self.image.disabled
        if img is not None:
            screen.draw_image(img, self.widget.rect, 1.0)

    def _draw_text_and_caret(self, screen: Any, defer: DeferFunc) -> None:
        rect = self.widget.rect
        tr = rect.translate(Point(self.padding.left, self.padding.top))
        shown = self._secure_text if self.secure else self.input_text

        cx = 0
        if self.focused:
            cx = font_advance(shown[: self.cursor_position], self.face)
            dx = (
                tr.min_x + self._scroll_offset + cx + self.caret_width
                + self.padding.right - rect.max_x
            )
            if dx > 0:
                self._scroll_offset -= dx
            dx = tr.min_x + self._scroll_offset + cx - self.padding.left - rect.min_x
            if dx < 0:
                self._scroll_offset -= dx

        tr = tr.translate(Point(self._scroll_offset, 0))
        self._text.set_location(tr)
        self._text.label = shown if self.input_text else self.placeholder
        if self.widget.disabled or not self.input_text:
            self._text.color = self.color.disabled
        else:
            self._text.color = self.color.idle
        self._text.render(screen, defer)

        if self.focused:
            caret_color = self.color.disabled_caret if self.widget.disabled else self.color.caret
            self._caret_rect = Rectangle(
                tr.min_x + cx,
                tr.min_y,
                tr.min_x + cx + self.caret_width,
                tr.min_y + self.caret_height,
            )
            if screen is not None:
                screen.draw_rect(self._caret_rect, caret_color)