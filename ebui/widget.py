"""The base widget, its events, input state and deferred rendering."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable, Optional, Protocol, Union

from ebui.geometry import Point, Rectangle

Handler = Callable[[Any], None]
RenderFunc = Callable[[Any, Callable[["RenderFunc"], None]], None]
DeferFunc = Callable[[RenderFunc], None]


class Event:
    """A list of handlers called, in order, with the arguments of each firing."""

    def __init__(self) -> None:
        self._handlers: list[Handler] = []

    def add_handler(self, handler: Handler) -> None:
        self._handlers.append(handler)

    def fire(self, args: Any) -> None:
        for handler in list(self._handlers):
            handler(args)


class MouseButton(Enum):
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class Key(Enum):
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    BACKSPACE = "backspace"
    DELETE = "delete"


Pressable = Union[MouseButton, Key]


class InputState:
    """Mouse, keyboard and wheel state for the current frame."""

    def __init__(self) -> None:
        self.cursor_x = 0
        self.cursor_y = 0
        self.wheel_x = 0.0
        self.wheel_y = 0.0
        self.chars: list[str] = []
        self._pressed: set[Pressable] = set()
        self._just_pressed: set[Pressable] = set()

    def press(self, button: Pressable) -> None:
        if button not in self._pressed:
            self._pressed.add(button)
            self._just_pressed.add(button)

    def release(self, button: Pressable) -> None:
        self._pressed.discard(button)
        self._just_pressed.discard(button)

    def move_cursor(self, x: int, y: int) -> None:
        self.cursor_x = x
        self.cursor_y = y

    def scroll(self, dx: float, dy: float) -> None:
        self.wheel_x += dx
        self.wheel_y += dy

    def type_chars(self, chars: Iterable[str]) -> None:
        self.chars.extend(chars)

    def just_pressed(self, button: Pressable) -> bool:
        return button in self._just_pressed

    def is_pressed(self, button: Pressable) -> bool:
        return button in self._pressed

    def end_frame(self) -> None:
        """Forget per-frame input: new presses, wheel movement and typed characters."""
        self._just_pressed.clear()
        self.wheel_x = 0.0
        self.wheel_y = 0.0
        self.chars.clear()


DEFAULT_INPUT = InputState()


@dataclass
class WidgetCursorEnterEventArgs:
    widget: Widget


@dataclass
class WidgetCursorExitEventArgs:
    widget: Widget


@dataclass
class WidgetMouseButtonPressedEventArgs:
    widget: Widget
    button: MouseButton
    offset_x: int = 0
    offset_y: int = 0


@dataclass
class WidgetMouseButtonReleasedEventArgs:
    widget: Widget
    button: MouseButton
    inside: bool = False
    offset_x: int = 0
    offset_y: int = 0


@dataclass
class WidgetScrolledEventArgs:
    widget: Widget
    x: float = 0.0
    y: float = 0.0


@dataclass
class WidgetFocusEventArgs:
    widget: Widget
    focused: bool


class Renderer(Protocol):
    def render(self, screen: Any, defer: DeferFunc) -> None: ...


@dataclass(eq=False)
class Widget:
    """State and events shared by every concrete widget."""

    rect: Rectangle = field(default_factory=Rectangle)
    layout_data: Any = None
    disabled: bool = False
    parent: Optional[Widget] = None
    input_state: Optional[InputState] = None
    on_cursor_enter: Optional[Handler] = None
    on_cursor_exit: Optional[Handler] = None
    on_mouse_button_pressed: Optional[Handler] = None
    on_mouse_button_released: Optional[Handler] = None
    on_scrolled: Optional[Handler] = None

    cursor_enter_event: Event = field(default_factory=Event, init=False)
    cursor_exit_event: Event = field(default_factory=Event, init=False)
    mouse_button_pressed_event: Event = field(default_factory=Event, init=False)
    mouse_button_released_event: Event = field(default_factory=Event, init=False)
    scrolled_event: Event = field(default_factory=Event, init=False)
    focus_event: Event = field(default_factory=Event, init=False)

    _cursor_entered: bool = field(default=False, init=False, repr=False)
    _mouse_left_pressed: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        for event, handler in (
            (self.cursor_enter_event, self.on_cursor_enter),
            (self.cursor_exit_event, self.on_cursor_exit),
            (self.mouse_button_pressed_event, self.on_mouse_button_pressed),
            (self.mouse_button_released_event, self.on_mouse_button_released),
            (self.scrolled_event, self.on_scrolled),
        ):
            if handler is not None:
                event.add_handler(handler)

    @property
    def effective_input(self) -> InputState:
        """This widget's input state, else its parent's, else the shared default."""
        if self.input_state is not None:
            return self.input_state
        if self.parent is not None:
            return self.parent.effective_input
        return DEFAULT_INPUT

    def set_location(self, rect: Rectangle) -> None:
        self.rect = rect

    def render(self, screen: Any, defer: DeferFunc) -> None:
        """Fire input events; concrete widgets call this before drawing themselves."""
        self._fire_events()

    def fire_focus_event(self, focused: bool) -> None:
        self.focus_event.fire(WidgetFocusEventArgs(widget=self, focused=focused))

    def _fire_events(self) -> None:
        state = self.effective_input
        p = Point(state.cursor_x, state.cursor_y)
        inside = p.inside(self.rect)
        offset = p.sub(Point(self.rect.min_x, self.rect.min_y))

        if inside != self._cursor_entered:
            if inside:
                self.cursor_enter_event.fire(WidgetCursorEnterEventArgs(widget=self))
            else:
                self.cursor_exit_event.fire(WidgetCursorExitEventArgs(widget=self))
            self._cursor_entered = inside

        if inside and state.just_pressed(MouseButton.LEFT):
            self._mouse_left_pressed = True
            self.mouse_button_pressed_event.fire(
                WidgetMouseButtonPressedEventArgs(
                    widget=self,
                    button=MouseButton.LEFT,
                    offset_x=offset.x,
                    offset_y=offset.y,
                )
            )

        if self._mouse_left_pressed and not state.is_pressed(MouseButton.LEFT):
            self._mouse_left_pressed = False
            self.mouse_button_released_event.fire(
                WidgetMouseButtonReleasedEventArgs(
                    widget=self,
                    button=MouseButton.LEFT,
                    inside=inside,
                    offset_x=offset.x,
                    offset_y=offset.y,
                )
            )

        if inside and (state.wheel_x != 0 or state.wheel_y != 0):
            self.scrolled_event.fire(
                WidgetScrolledEventArgs(widget=self, x=state.wheel_x, y=state.wheel_y)
            )


def render_with_deferred(screen: Any, renderers: Iterable[Renderer]) -> None:
    """Render each renderer, then everything deferred, in first-in first-out order."""
    queue: deque[RenderFunc] = deque(r.render for r in renderers)
    while queue:
        queue.popleft()(screen, queue.append)