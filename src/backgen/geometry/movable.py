"""Shape templates that can be stamped at any anchor."""
from __future__ import annotations

from typing import List, Sequence, Tuple

from .pos import Pos
from ..svg import Path

__all__ = ["Movable"]


class Movable:
    """A polygon expressed as vertex offsets from its anchor."""

    def __init__(self, pts: Sequence[Pos]):
        if len(pts) < 3:
            raise ValueError(f"a movable shape needs at least 3 vertices, got {len(pts)}")
        self.pts: List[Pos] = list(pts)

    def render(self, reference: Pos) -> Tuple[Pos, Path]:
        return reference, Path([reference + p for p in self.pts])

    @classmethod
    def hexagon(cls, size: float, rot: float) -> "Movable":
        return cls([Pos.polar(rot + 60 * i, size) for i in range(6)])

    @classmethod
    def triangle(cls, size: float, rot: float) -> "Movable":
        return cls([Pos.polar(rot + 120 * i, size) for i in range(3)])

    @classmethod
    def square(cls, size: float, rot: float) -> "Movable":
        return cls([Pos.polar(rot + 45 + 90 * i, size) for i in range(4)])

    @classmethod
    def rhombus(cls, ldiag: float, sdiag: float, rot: float) -> "Movable":
        return cls([
            Pos.polar(rot, ldiag),
            Pos.polar(rot + 90, sdiag),
            Pos.polar(rot + 180, ldiag),
            Pos.polar(rot + 270, sdiag),
        ])

    @classmethod
    def from_points(cls, pts: Sequence[Pos], center: Pos | None = None) -> "Movable":
        """Build from absolute vertices, re-expressed around ``center``.

        ``center`` defaults to the vertex average.
        """
        if center is None:
            n = float(len(pts))
            center = Pos(sum(p.x for p in pts) / n, sum(p.y for p in pts) / n)
        return cls([p - center for p in pts])

    def vertex(self, idx: int) -> Pos:
        return self.pts[idx % len(self.pts)]

    def side(self, idx: int) -> Pos:
        return self.vertex(idx + 1) - self.vertex(idx)

    def radius(self) -> float:
        """Distance from the anchor to the farthest vertex."""
        return max(p.norm() for p in self.pts)

    def __len__(self) -> int:
        return len(self.pts)
