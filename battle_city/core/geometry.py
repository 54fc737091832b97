"""Axis-aligned rectangle helpers used by movement and combat."""

from __future__ import annotations

from typing import Tuple

Rect = Tuple[float, float, float, float]


def rectangles_overlap(
    ax: float,
    ay: float,
    aw: float,
    ah: float,
    bx: float,
    by: float,
    bw: float,
    bh: float,
) -> bool:
    """Return True when two boxes share interior area.

    Boxes that only touch along an edge or a corner do not overlap.
    """

    return bx < ax + aw and bx + bw > ax and by < ay + ah and by + bh > ay


def rects_overlap(a: Rect, b: Rect) -> bool:
    return rectangles_overlap(*a, *b)


def inset(rect: Rect, margin: float) -> Rect:
    x, y, w, h = rect
    return (x + margin, y + margin, w - margin * 2, h - margin * 2)


__all__ = ["Rect", "inset", "rectangles_overlap", "rects_overlap"]
