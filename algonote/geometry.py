"""Planar points and the counter-clockwise orientation test."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Pos:
    """A lattice point ``(x, y)`` with a direction ``(p, q)`` used for angular sorting.

    Points order by the angle of ``(p, q)`` counter-clockwise, then by ``y``,
    then by ``x``.
    """

    x: int
    y: int
    p: int = 0
    q: int = 0

    def __lt__(self, other: Pos) -> bool:
        if self.p * other.q != self.q * other.p:
            return self.p * other.q > self.q * other.p
        if self.y != other.y:
            return self.y < other.y
        return self.x < other.x


def ccw(p1: Pos, p2: Pos, p3: Pos) -> int:
    """Return 1 if ``p1 -> p2 -> p3`` turns left, -1 if it turns right, 0 if collinear."""
    cross = (p2.x - p1.x) * (p3.y - p2.y) - (p3.x - p2.x) * (p2.y - p1.y)
    if cross > 0:
        return 1
    if cross == 0:
        return 0
    return -1