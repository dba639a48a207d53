from ebui.geometry import Rectangle
from ebui.widget import (
    Event,
    InputState,
    Key,
    MouseButton,
    Widget,
    WidgetCursorEnterEventArgs,
    WidgetCursorExitEventArgs,
    render_with_deferred,
)


def make_widget(**kwargs):
    state = InputState()
    w = Widget(rect=Rectangle(10, 20, 60, 80), input_state=state, **kwargs)
    return w, state


def test_event_calls_handlers_in_order():
    e = Event()
    got = []
    e.add_handler(lambda a: got.append(("first", a)))
    e.add_handler(lambda a: got.append(("second", a)))
    e.fire("x")
    assert got == [("first", "x"), ("second", "x")]


def test_input_just_pressed_cleared_by_end_frame():
    s = InputState()
    s.press(MouseButton.LEFT)
    assert s.just_pressed(MouseButton.LEFT)
    assert s.is_pressed(MouseButton.LEFT)
    s.end_frame()
    assert not s.just_pressed(MouseButton.LEFT)
    assert s.is_pressed(MouseButton.LEFT)
    s.release(MouseButton.LEFT)
    assert not s.is_pressed(MouseButton.LEFT)


def test_input_keys_and_chars():
    s = InputState()
    s.press(Key.BACKSPACE)
    s.type_chars("ab")
    s.type_chars(["c"])
    assert s.is_pressed(Key.BACKSPACE)
    assert s.chars == ["a", "b", "c"]
    s.scroll(1.5, -2.0)
    s.end_frame()
    assert s.chars == []
    assert (s.wheel_x, s.wheel_y) == (0.0, 0.0)


def test_cursor_enter_and_exit():
    entered, exited = [], []
    w, s = make_widget(on_cursor_enter=entered.append, on_cursor_exit=exited.append)

    s.move_cursor(15, 25)
    w.render(None, lambda r: None)
    assert entered == [WidgetCursorEnterEventArgs(widget=w)]

    w.render(None, lambda r: None)
    assert len(entered) == 1

    s.move_cursor(0, 0)
    w.render(None, lambda r: None)
    assert exited == [WidgetCursorExitEventArgs(widget=w)]


def test_press_and_release_inside():
    pressed, released = [], []
    w, s = make_widget(
        on_mouse_button_pressed=pressed.append,
        on_mouse_button_released=released.append,
    )
    s.move_cursor(15, 27)
    s.press(MouseButton.LEFT)
    w.render(None, lambda r: None)

    assert len(pressed) == 1
    assert pressed[0].button is MouseButton.LEFT
    assert (pressed[0].offset_x, pressed[0].offset_y) == (15 - 10, 27 - 20)
    assert released == []

    s.end_frame()
    s.release(MouseButton.LEFT)
    w.render(None, lambda r: None)
    assert len(released) == 1
    assert released[0].inside is True


def test_release_outside_reports_not_inside():
    released = []
    w, s = make_widget(on_mouse_button_released=released.append)
    s.move_cursor(15, 25)
    s.press(MouseButton.LEFT)
    w.render(None, lambda r: None)
    s.end_frame()
    s.move_cursor(500, 500)
    s.release(MouseButton.LEFT)
    w.render(None, lambda r: None)
    assert [a.inside for a in released] == [False]


def test_press_outside_fires_nothing():
    pressed = []
    w, s = make_widget(on_mouse_button_pressed=pressed.append)
    s.move_cursor(500, 500)
    s.press(MouseButton.LEFT)
    w.render(None, lambda r: None)
    assert pressed == []


def test_scrolled_event_carries_wheel():
    scrolled = []
    w, s = make_widget(on_scrolled=scrolled.append)
    s.move_cursor(15, 25)
    s.scroll(0.5, -1.5)
    w.render(None, lambda r: None)
    assert [(a.x, a.y) for a in scrolled] == [(0.5, -1.5)]


def test_focus_event():
    got = []
    w = Widget()
    w.focus_event.add_handler(got.append)
    w.fire_focus_event(True)
    assert got[0].widget is w
    assert got[0].focused is True


def test_set_location():
    w = Widget()
    r = Rectangle(1, 2, 3, 4)
    w.set_location(r)
    assert w.rect == r


def test_child_uses_parent_input():
    s = InputState()
    parent = Widget(input_state=s)
    child = Widget(parent=parent)
    assert child.effective_input is s


class _Recorder:
    def __init__(self, name, log, deferred=None):
        self.name = name
        self.log = log
        self.deferred = deferred

    def render(self, screen, defer):
        self.log.append(self.name)
        if self.deferred is not None:
            defer(lambda scr, d: self.log.append(self.deferred))


def test_render_with_deferred_order():
    log = []
    render_with_deferred(
        None, [_Recorder("a", log, "a-late"), _Recorder("b", log)]
    )
    assert log == ["a", "b", "a-late"]


def test_render_with_deferred_passes_screen():
    seen = []

    class R:
        def render(self, screen, defer):
            seen.append(screen)

    screen = object()
    render_with_deferred(screen, [R()])
    assert seen == [screen]