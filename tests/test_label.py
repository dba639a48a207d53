from ebui.geometry import Rectangle
from ebui.label import Label, LabelColor
from ebui.text import Face
from ebui.widget import render_with_deferred

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


def new_label():
    label = Label("", Face(), LabelColor(idle=WHITE, disabled=BLACK))
    render_with_deferred(None, [label])
    return label


def test_set_label():
    label = new_label()
    label.label = "foo"
    render_with_deferred(None, [label])
    assert label.text.label == "foo"


def test_set_disabled_color():
    label = new_label()
    label.widget.disabled = True
    render_with_deferred(None, [label])
    assert label.text.color == BLACK


def test_reenabled_returns_to_idle_color():
    label = new_label()
    label.widget.disabled = True
    render_with_deferred(None, [label])
    label.widget.disabled = False
    render_with_deferred(None, [label])
    assert label.text.color == WHITE


def test_preferred_size_matches_text():
    label = Label("hello", Face(), LabelColor(idle=WHITE))
    assert label.preferred_size() == label.text.preferred_size()
    assert label.preferred_size()[0] > 0


def test_set_location_moves_text_widget():
    label = new_label()
    rect = Rectangle(1, 2, 30, 40)
    label.set_location(rect)
    assert label.text.widget.rect == rect
    assert label.widget is label.text.widget