"""RGB colors."""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

__all__ = ["Color"]


@dataclass(frozen=True)
class Color:
    """RGB triple.

    Channels are plain integers and may leave ``[0, 255]`` while a color is
    being computed; :meth:`validate` (and therefore ``str``) clamps them.
    """

    r: int
    g: int
    b: int

    @classmethod
    def random(cls, rng: np.random.Generator) -> "Color":
        r, g, b = (int(c) for c in rng.integers(0, 255, size=3))
        return cls(r, g, b)

    def validate(self) -> "Color":
        return Color(*(min(max(int(c), 0), 255) for c in (self.r, self.g, self.b)))

    def variate(self, rng: np.random.Generator, amount: int) -> "Color":
        """Add independent noise in ``[-amount, amount)`` to each channel.

        Channels pushed below zero are set to zero.
        """
        amount = int(amount)
        if amount <= 0:
            return self
        dr, dg, db = (int(d) for d in rng.integers(-amount, amount, size=3))
        return Color(max(self.r + dr, 0), max(self.g + dg, 0), max(self.b + db, 0))

    def meanpoint(self, other: "Color", distance: int) -> "Color":
        """Weighted mix: ``distance`` percent of ``self``, the rest of ``other``."""
        d = min(max(int(distance), 0), 100)
        return Color(
            (self.r * d + other.r * (100 - d)) // 100,
            (self.g * d + other.g * (100 - d)) // 100,
            (self.b * d + other.b * (100 - d)) // 100,
        )

    def into_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __str__(self) -> str:
        c = self.validate()
        return f"rgb({c.r},{c.g},{c.b})"
