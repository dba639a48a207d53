"""Multi-line text widget and the font face abstraction it measures with."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from ebui.geometry import Rectangle
from ebui.widget import DeferFunc, Widget


@dataclass(frozen=True)
class FontMetrics:
    """Vertical metrics of a face, in pixels."""

    ascent: float
    descent: float
    height: float


@dataclass(frozen=True)
class Face:
    """A monospaced font face: every character advances by the same width."""

    advance: float = 8.0
    ascent: float = 12.0
    descent: float = 4.0
    height: float = 16.0

    def metrics(self) -> FontMetrics:
        return FontMetrics(ascent=self.ascent, descent=self.descent, height=self.height)

    def measure(self, text: str) -> float:
        """Width of text drawn in this face."""
        return self.advance * len(text)


class TextPosition(Enum):
    START = 0
    CENTER = 1
    END = 2


def _round(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass
class _Measurements:
    lines: list[str] = field(default_factory=list)
    line_widths: list[float] = field(default_factory=list)
    line_height: float = 0.0
    ascent: float = 0.0
    width: float = 0.0
    height: float = 0.0


class Text:
    """A block of text lines anchored inside the widget's rectangle.

    Rendering draws onto a screen that provides draw_text(text, face, x, y, color),
    where y is the baseline; a screen of None draws nothing.
    """

    def __init__(
        self,
        label: str = "",
        face: Optional[Face] = None,
        color: Any = None,
        *,
        horizontal_position: TextPosition = TextPosition.START,
        vertical_position: TextPosition = TextPosition.START,
        widget: Optional[Widget] = None,
    ) -> None:
        self.label = label
        self.face = face
        self.color = color
        self.horizontal_position = horizontal_position
        self.vertical_position = vertical_position
        self.widget = widget if widget is not None else Widget()
        self._measured_for: tuple[str, Optional[Face]] = ("", None)
        self._measurements = _Measurements()

    def set_location(self, rect: Rectangle) -> None:
        self.widget.rect = rect

    def preferred_size(self) -> tuple[int, int]:
        m = self._measure()
        return math.ceil(m.width), math.ceil(m.height)

    def render(self, screen: Any, defer: DeferFunc) -> None:
        self.widget.render(screen, defer)
        self._draw(screen)

    def _draw(self, screen: Any) -> None:
        m = self._measure()
        if screen is None:
            return

        r = self.widget.rect
        w = r.dx()
        px, py = r.min_x, r.min_y
        if self.vertical_position == TextPosition.CENTER:
            py += int((r.dy() - m.height) / 2)
        elif self.vertical_position == TextPosition.END:
            py += int(r.dy() - m.height)

        for i, (line, line_width) in enumerate(zip(m.lines, m.line_widths)):
            lx = px
            if self.horizontal_position == TextPosition.CENTER:
                lx += _round((w - line_width) / 2)
            elif self.horizontal_position == TextPosition.END:
                lx += math.ceil(w - line_width)
            ly = _round(py + m.line_height * i + m.ascent)
            screen.draw_text(line, self.face, lx, ly, self.color)

    def _measure(self) -> _Measurements:
        key = (self.label, self.face)
        if key == self._measured_for:
            return self._measurements
        if self.face is None:
            raise ValueError("text cannot be measured without a font face")

        metrics = self.face.metrics()
        m = _Measurements(ascent=metrics.ascent, line_height=metrics.height)
        leading = m.line_height - (metrics.ascent + metrics.descent)
        for line in _split_lines(self.label):
            line_width = self.face.measure(line)
            m.lines.append(line)
            m.line_widths.append(line_width)
            m.width = max(m.width, line_width)
        m.height = len(m.lines) * m.line_height - leading

        self._measured_for = key
        self._measurements = m
        return m