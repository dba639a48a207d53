from ebui.geometry import Rectangle
from ebui.widget import render_with_deferred
from ebui.window import Window


class _Contents:
    def __init__(self):
        self.rect = None
        self.relayouts = 0
        self.rendered = []

    def set_location(self, rect):
        self.rect = rect

    def request_relayout(self):
        self.relayouts += 1

    def render(self, screen, defer):
        self.rendered.append(screen)


def test_set_location_passes_rect_to_contents():
    contents = _Contents()
    w = Window(contents)
    rect = Rectangle(1, 2, 30, 40)
    w.set_location(rect)
    assert contents.rect == rect


def test_request_relayout_reaches_contents():
    contents = _Contents()
    w = Window(contents)
    w.request_relayout()
    w.request_relayout()
    assert contents.relayouts == 2


def test_render_draws_contents_on_screen():
    contents = _Contents()
    w = Window(contents, modal=True)
    screen = object()
    render_with_deferred(screen, [w])
    assert contents.rendered == [screen]
    assert w.modal is True


def test_window_is_not_modal_by_default():
    w = Window(_Contents())
    assert w.modal is False