"""Points, rectangles and insets used for widget placement."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Point:
    """An integer position on screen."""

    x: int = 0
    y: int = 0

    def add(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def sub(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def inside(self, rect: Rectangle) -> bool:
        """Whether the point lies in rect; the max edges are exclusive."""
        return (
            rect.min_x <= self.x < rect.max_x
            and rect.min_y <= self.y < rect.max_y
        )


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle; the max edges are exclusive."""

    min_x: int = 0
    min_y: int = 0
    max_x: int = 0
    max_y: int = 0

    def dx(self) -> int:
        return self.max_x - self.min_x

    def dy(self) -> int:
        return self.max_y - self.min_y

    def empty(self) -> bool:
        return self.min_x >= self.max_x or self.min_y >= self.max_y

    def translate(self, point: Point) -> Rectangle:
        return Rectangle(
            self.min_x + point.x,
            self.min_y + point.y,
            self.max_x + point.x,
            self.max_y + point.y,
        )

    def union(self, other: Rectangle) -> Rectangle:
        """The smallest rectangle containing both; empty rectangles are ignored."""
        if self.empty():
            return other
        if other.empty():
            return self
        return Rectangle(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )


@dataclass(frozen=True)
class Insets:
    """Space to leave free on each side of a rectangle."""

    top: int = 0
    left: int = 0
    right: int = 0
    bottom: int = 0

    def apply(self, rect: Rectangle) -> Rectangle:
        return Rectangle(
            rect.min_x + self.left,
            rect.min_y + self.top,
            rect.max_x - self.right,
            rect.max_y - self.bottom,
        )

    def dx(self) -> int:
        return self.left + self.right

    def dy(self) -> int:
        return self.top + self.bottom


def insets_simple(width_height: int) -> Insets:
    """Insets with the same value on all four sides."""
    return Insets(
        top=width_height, left=width_height, right=width_height, bottom=width_height
    )


class Direction(Enum):
    HORIZONTAL = 0
    VERTICAL = 1