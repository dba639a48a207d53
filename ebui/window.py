"""A window wrapping a container of widgets."""

from __future__ import annotations

from typing import Any

from ebui.geometry import Rectangle
from ebui.widget import DeferFunc


class Window:
    """Places and renders its contents; a modal window blocks input to what lies below.

    The contents provide set_location, request_relayout and render.
    """

    def __init__(self, contents: Any, *, modal: bool = False) -> None:
        self.contents = contents
        self.modal = modal

    def set_location(self, rect: Rectangle) -> None:
        self.contents.set_location(rect)

    def request_relayout(self) -> None:
        self.contents.request_relayout()

    def render(self, screen: Any, defer: DeferFunc) -> None:
        self.contents.render(screen, defer)