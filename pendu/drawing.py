"""Geometry of the gallows and of the hanged figure."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

HEAD_SIZE = 30
MAX_PARTS = 8


@dataclass(frozen=True)
class Line:
    """A segment from (x1, y1) to (x2, y2)."""

    x1: int
    y1: int
    x2: int
    y2: int


@dataclass(frozen=True)
class Oval:
    """An ellipse inscribed in the box at (x, y) of the given size."""

    x: int
    y: int
    width: int
    height: int


Shape = Union[Line, Oval]


def gallows_lines(width: int, height: int) -> list[Line]:
    """Segments of the empty gallows for a drawing area of the given size."""
    base_x = width // 4
    top = height // 6
    bottom = height - 5
    middle = width // 2
    return [
        Line(base_x - 40, bottom, base_x + 40, bottom),
        Line(base_x, bottom, base_x, top),
        Line(base_x, top, middle, top),
        Line(base_x + 20, bottom, base_x, bottom - 50),
        Line(middle, top, middle, height // 3),
    ]


def figure_shapes(errors: int, width: int, height: int) -> list[Shape]:
    """Parts of the hanged figure drawn after *errors* wrong guesses.

    One part is added per error, up to eight: head, body, arms, legs, eyes.
    """
    cx = width // 2
    y = height // 3
    parts: list[Shape] = [
        Oval(cx - 15, y, HEAD_SIZE, HEAD_SIZE),
        Line(cx, y + 30, cx, y + 100),
        Line(cx, y + 50, cx - 30, y + 80),
        Line(cx, y + 50, cx + 30, y + 80),
        Line(cx, y + 100, cx - 30, y + 130),
        Line(cx, y + 100, cx + 30, y + 130),
        Line(cx - 7, y + 10, cx - 3, y + 10),
        Line(cx + 3, y + 10, cx + 7, y + 10),
    ]
    return parts[: max(0, min(errors, MAX_PARTS))]