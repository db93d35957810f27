"""Axis-aligned drawing frame."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from .pos import Pos

__all__ = ["Frame"]


@dataclass(frozen=True)
class Frame:
    """Rectangle ``{x, y, w, h}`` in drawing units; ``w`` and ``h`` are positive."""

    x: float
    y: float
    w: float
    h: float

    def __post_init__(self):
        if self.x < 0 or self.y < 0:
            raise ValueError(f"frame origin must be non-negative, got ({self.x}, {self.y})")
        if self.w <= 0 or self.h <= 0:
            raise ValueError(f"frame size must be positive, got {self.w}x{self.h}")

    def into_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.w, self.h)

    def center(self) -> Pos:
        return Pos(self.x + self.w / 2.0, self.y + self.h / 2.0)

    def diagonal(self) -> float:
        return math.hypot(self.w, self.h)

    def inflate(self, margin: float) -> Tuple[float, float, float, float]:
        """Bounds ``(x0, y0, x1, y1)`` of the frame grown by ``margin``.

        The result may have a negative origin, so it is not a :class:`Frame`.
        """
        return (self.x - margin, self.y - margin, self.x + self.w + margin, self.y + self.h + margin)

    def corners(self, margin: float = 0.0) -> Tuple[Pos, Pos, Pos, Pos]:
        """Corners of the frame grown by ``margin`` on every side."""
        x0, y0, x1, y1 = self.inflate(margin)
        return (Pos(x0, y0), Pos(x1, y0), Pos(x1, y1), Pos(x0, y1))

    def contains(self, p: Pos, margin: float = 0.0) -> bool:
        x0, y0, x1, y1 = self.inflate(margin)
        return x0 <= p.x <= x1 and y0 <= p.y <= y1
