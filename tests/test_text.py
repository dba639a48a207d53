import math

import pytest

from ebui.geometry import Rectangle
from ebui.text import Face, FontMetrics, Text, TextPosition
from ebui.widget import render_with_deferred

FACE = Face(advance=10, ascent=12, descent=4, height=20)


class RecordingScreen:
    def __init__(self):
        self.calls = []

    def draw_text(self, text, face, x, y, color):
        self.calls.append((text, x, y, color))


def test_face_metrics_reflect_fields():
    assert FACE.metrics() == FontMetrics(ascent=12, descent=4, height=20)


def test_single_line_size_follows_face():
    width, height = Text("abc", FACE).preferred_size()
    assert width == math.ceil(FACE.measure("abc"))
    assert height == FACE.ascent + FACE.descent


def test_each_extra_line_adds_line_height():
    _, one = Text("abc", FACE).preferred_size()
    _, two = Text("abc\ndef", FACE).preferred_size()
    assert two - one == FACE.height


def test_width_is_widest_line():
    assert Text("a\nabcd\nab", FACE).preferred_size()[0] == Text("abcd", FACE).preferred_size()[0]


def test_trailing_newline_and_crlf_do_not_add_lines():
    plain = Text("ab\ncd", FACE).preferred_size()
    assert Text("ab\ncd\n", FACE).preferred_size() == plain
    assert Text("ab\r\ncd\r\n", FACE).preferred_size() == plain


def test_unconfigured_text_has_zero_size():
    assert Text().preferred_size() == (0, 0)


def test_text_without_face_raises():
    with pytest.raises(ValueError):
        Text("hello").preferred_size()


def test_measurement_follows_label_changes():
    text = Text("a", FACE)
    before = text.preferred_size()
    text.label = "abcdef"
    after = text.preferred_size()
    assert after[0] > before[0]
    assert after[1] == before[1]


def test_start_position_draws_at_origin_baseline():
    screen = RecordingScreen()
    text = Text("hi", FACE, color="white")
    text.set_location(Rectangle(0, 0, 100, 50))
    render_with_deferred(screen, [text])
    assert screen.calls == [("hi", 0, 12, "white")]


def test_lines_advance_by_line_height():
    screen = RecordingScreen()
    text = Text("one\ntwo", FACE)
    text.set_location(Rectangle(0, 0, 100, 100))
    render_with_deferred(screen, [text])
    assert [call[0] for call in screen.calls] == ["one", "two"]
    assert screen.calls[1][2] - screen.calls[0][2] == FACE.height


def test_end_position_aligns_right_edge():
    screen = RecordingScreen()
    text = Text("abc", FACE, horizontal_position=TextPosition.END)
    rect = Rectangle(5, 0, 105, 50)
    text.set_location(rect)
    render_with_deferred(screen, [text])
    _, x, _, _ = screen.calls[0]
    assert x + FACE.measure("abc") == rect.max_x


def test_center_position_balances_gaps():
    screen = RecordingScreen()
    text = Text("ab", FACE, horizontal_position=TextPosition.CENTER)
    rect = Rectangle(0, 0, 100, 50)
    text.set_location(rect)
    render_with_deferred(screen, [text])
    _, x, _, _ = screen.calls[0]
    assert x - rect.min_x == rect.max_x - (x + FACE.measure("ab"))


def test_vertical_end_keeps_text_inside_bottom():
    screen = RecordingScreen()
    text = Text("ab", FACE, vertical_position=TextPosition.END)
    rect = Rectangle(0, 0, 100, 50)
    text.set_location(rect)
    render_with_deferred(screen, [text])
    _, _, y, _ = screen.calls[0]
    assert y + FACE.descent == rect.max_y