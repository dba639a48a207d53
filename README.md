# ebui

Widgets for game-style user interfaces that are redrawn every frame.
Layouts place widgets inside rectangles. Widgets read the current mouse and
keyboard state from an `InputState` and turn it into events. Drawing goes to a
"screen" object that you supply.

The package has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
python -m pytest
```

## Modules

- `ebui.geometry`: `Point`, `Rectangle` (max edges exclusive), `Insets`, `insets_simple` and `Direction`.
- `ebui.multionce`: `MultiOnce`. It runs the callables added with `append` exactly once, the first time `do()` is called.
- `ebui.widget`: the base `Widget`, the `Event` type, `MouseButton`, `Key` and `InputState`. It also holds the event argument classes and `render_with_deferred`.
- `ebui.rowlayout`: `RowLayout`, `RowLayoutData` and `RowLayoutPosition`. Lays widgets out in one row or one column.
- `ebui.gridlayout`: `GridLayout`, `GridLayoutData` and `GridLayoutPosition`. Lays widgets out in a grid. Chosen columns and rows can be stretched.
- `ebui.text`: `Text`, which draws one or more lines of text anchored in its rectangle. `Face` is a monospaced font face, and `FontMetrics` holds its vertical metrics.
- `ebui.label`: `Label`, which is text drawn in an idle colour or a disabled colour (`LabelColor`).
- `ebui.textinput`: `TextInput`, a single-line editor, with `TextInputColor` and `TextInputChangedEventArgs`. It also has the measuring helpers `font_advance` and `font_string_index`.
- `ebui.scrollcontainer`: `ScrollContainer`, a viewport onto a single content widget.
- `ebui.tooltip`: `ToolTip`, which shows a tip widget near the cursor.
- `ebui.radiogroup`: `RadioGroup`, `RadioGroupChangedEventArgs` and `CheckboxState`.
- `ebui.window`: `Window`, which places and renders its contents.

## Layouts

Any object can be passed to a layout if it has these three things:

- `preferred_size()`
- `set_location(rect)`
- a `widget` attribute that holds a `Widget`

The `layout_data` of that `Widget` may hold a `RowLayoutData` or a `GridLayoutData`. Use the one that matches the layout. Any other value is ignored.

```python
from ebui.geometry import Insets, Rectangle
from ebui.rowlayout import RowLayout, RowLayoutData, RowLayoutPosition
from ebui.widget import Widget


class Box:
    def __init__(self, width, height, layout_data=None):
        self.size = (width, height)
        self.widget = Widget(layout_data=layout_data)

    def preferred_size(self):
        return self.size

    def set_location(self, rect):
        self.widget.set_location(rect)


boxes = [Box(10, 10), Box(20, 20, RowLayoutData(position=RowLayoutPosition.CENTER))]
layout = RowLayout(padding=Insets(top=10, left=20, right=30, bottom=40), spacing=7)

layout.preferred_size(boxes)                  # (87, 60)
layout.layout(boxes, Rectangle(25, 25, 200, 200))
boxes[0].widget.rect                          # Rectangle(45, 35, 55, 45)
boxes[1].widget.rect                          # Rectangle(62, 87, 82, 107)
```

`RowLayoutData` can stretch a widget across the layout's primary direction, anchor it at `START`, `CENTER` or `END`, and cap it with `max_width` and `max_height`.

`GridLayout(columns=...)` fills its cells row by row. The spacing between cells is set with `column_spacing` and `row_spacing`. When `column_stretch` or `row_stretch` is given, it needs one entry per column or per row. Stretched columns or rows share the space that is left over, and the first stretched one also gets any remainder. `GridLayoutData` caps the size of a widget and anchors it inside its cell. A grid with fewer than one column raises `ValueError`.

## Input and events

An `Event` calls its handlers in order each time `fire(args)` is called:

```python
from ebui.widget import Event

changed = Event()
changed.add_handler(lambda args: print(args))
changed.fire("value")
```

`InputState` holds the state of one frame. This is the cursor position, pressed mouse buttons and keys, presses new in this frame, wheel movement, and typed characters. Feed it with `press`, `release`, `move_cursor`, `scroll` and `type_chars`. Call `end_frame()` after each frame to clear new presses, wheel movement and typed characters. A widget uses its own `input_state` if it has one. Otherwise it uses its parent's, and if there is no parent it uses the shared `ebui.widget.DEFAULT_INPUT`.

`Widget.render` fires these events on the widget:

- cursor enter and cursor exit
- left mouse button pressed inside the widget, and the matching release
- wheel scrolling inside the widget

Handlers can be given to the constructor (`on_cursor_enter` and the like) or added to the `*_event` attributes. `fire_focus_event(focused)` fires `focus_event`.

`render_with_deferred(screen, renderers)` renders each renderer. It then runs everything the renderers passed to their `defer` callback, first in, first out.

## Screens

Widgets draw by calling methods on the `screen` argument of `render`:

- `draw_text(text, face, x, y, color)`: `y` is the baseline.
- `draw_rect(rect, color)`: used for the text input caret.
- `draw_image(image, rect, alpha)`: used for background images. These are objects with `idle` and `disabled` attributes.

Passing `None` as the screen runs all widget logic and events but draws nothing.

## Text and labels

`Text(label, face, color)` splits its label into lines and measures them with the face. `preferred_size()` returns the size of the bounding box. Measuring without a face raises `ValueError`. `Label` copies its `label` into its text on each render, and picks the idle or disabled colour from `widget.disabled`.

## Text input

`TextInput(face, ...)` reads input only while it is focused (`focus(True)`). On each render it does the following:

- Inserts typed characters, unless the widget is disabled.
- Runs the command for a held arrow, Home, End, Backspace or Delete key. A held key repeats after `repeat_delay` seconds, then every `repeat_interval` seconds.
- Moves the cursor to a left click.
- Fires `changed_event` when the text has changed since the last render.

You can also call the editing methods directly: `insert`, `backspace`, `delete`, `go_left`, `go_right`, `go_start`, `go_end` and `go_xy`. A `validation` callable can reject an insertion. `placeholder` is shown while the text is empty. With `secure=True` the text is shown as asterisks.

## Scroll containers, tool tips, radio groups and windows

- **ScrollContainer.** `scroll_left` and `scroll_top` are fractions, clamped to `[0, 1]` on render. The content is placed inside `content_rect()` and offset by those fractions. With `stretch_content_width`, narrow content is widened to fill the view.
- **ToolTip.** It asks its container for `widget_at(x, y)` and its contents creater for `create(widget)`. The tip is shown at the cursor plus `offset`, after `delay` seconds. A delay of zero or less shows it at once. With `sticky` the tip stays where it first appeared. Pressing any mouse button, or moving off the widget, hides it.
- **RadioGroup.** Takes checkbox-like objects that have `set_state` and a `changed_event`, and keeps exactly one of them `CheckboxState.CHECKED`. The first one is made active on construction, and `changed_event` fires whenever the active checkbox changes. An empty group raises `ValueError`.
- **Window.** Passes `set_location`, `request_relayout` and `render` on to its contents. Its `modal` flag is stored but has no effect on input.

## What this package does not do

- It opens no window and draws no pixels itself. You supply the screen object and the drawing.
- It loads no fonts. `Face` is a simple monospaced model.
- It has no buttons, checkboxes, lists, combo boxes, tab books or general containers. `RadioGroup`, `ScrollContainer`, `ToolTip` and `Window` work with objects of your own that provide the methods described above.
- There is no stack of input layers, so a modal `Window` does not block input to widgets beneath it.