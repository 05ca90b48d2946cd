"""Rectangles and a small constraint-based splitter for screen layouts."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union


class Direction(Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


@dataclass(frozen=True)
class Length:
    """An exact size."""

    value: int


@dataclass(frozen=True)
class Min:
    """At least this size; takes up any space left over."""

    value: int


@dataclass(frozen=True)
class Percentage:
    """A share of the space being split."""

    value: int


Constraint = Union[Length, Min, Percentage]


@dataclass(frozen=True)
class Rect:
    """A rectangular screen area in cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def inner(self) -> "Rect":
        """Return the area inside a one-cell border."""
        return Rect(
            self.x + 1,
            self.y + 1,
            max(self.width - 2, 0),
            max(self.height - 2, 0),
        )


def _preferred(constraint: Constraint, total: int) -> int:
    if isinstance(constraint, Length) or isinstance(constraint, Min):
        return max(constraint.value, 0)
    if isinstance(constraint, Percentage):
        return max(math.floor(total * constraint.value / 100 + 0.5), 0)
    raise TypeError(f"unknown constraint: {constraint!r}")


def split(area: Rect, direction: Direction, constraints: Sequence[Constraint]) -> list[Rect]:
    """Split ``area`` along ``direction`` into one rectangle per constraint.

    Spare space goes to ``Min`` constraints (shared evenly), or to the last
    segment if there are none. When space runs short, segments are filled in
    order and later ones shrink.
    """
    if not constraints:
        return []
    total = area.height if direction is Direction.VERTICAL else area.width
    sizes = [_preferred(c, total) for c in constraints]
    used = sum(sizes)

    if used <= total:
        excess = total - used
        growable = [i for i, c in enumerate(constraints) if isinstance(c, Min)]
        if not growable:
            growable = [len(sizes) - 1]
        share, remainder = divmod(excess, len(growable))
        for rank, i in enumerate(growable):
            sizes[i] += share + (1 if rank < remainder else 0)
    else:
        remaining = total
        fitted = []
        for size in sizes:
            take = min(size, remaining)
            fitted.append(take)
            remaining -= take
        sizes = fitted

    rects = []
    offset = 0
    for size in sizes:
        if direction is Direction.VERTICAL:
            rects.append(Rect(area.x, area.y + offset, area.width, size))
        else:
            rects.append(Rect(area.x + offset, area.y, size, area.height))
        offset += size
    return rects


def main_layout(area: Rect) -> list[Rect]:
    """Title, preview, style selector, main content and help, top to bottom."""
    return split(
        area,
        Direction.VERTICAL,
        [Length(3), Length(3), Length(3), Min(10), Length(3)],
    )


def content_layout(area: Rect) -> list[Rect]:
    """Segment list beside the settings panel."""
    return split(area, Direction.HORIZONTAL, [Percentage(30), Percentage(70)])


def centered_rect(percent_x: int, percent_y: int, area: Rect) -> Rect:
    """Return a rectangle of the given percentages centred in ``area``."""
    rows = split(
        area,
        Direction.VERTICAL,
        [
            Percentage((100 - percent_y) // 2),
            Percentage(percent_y),
            Percentage((100 - percent_y) // 2),
        ],
    )
    return split(
        rows[1],
        Direction.HORIZONTAL,
        [
            Percentage((100 - percent_x) // 2),
            Percentage(percent_x),
            Percentage((100 - percent_x) // 2),
        ],
    )[1]