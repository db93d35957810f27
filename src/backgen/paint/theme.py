"""Theme entries and the per-element color recipe."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from .color import Color
from .salt import Salt

__all__ = ["ThemeItem", "ColorItem"]


@dataclass(frozen=True)
class ThemeItem:
    """A theme color with optional deviation/distance overrides."""

    color: Color
    deviation: Optional[int] = None
    distance: Optional[int] = None
    salt: Salt = field(default_factory=Salt.none)


@dataclass(frozen=True)
class ColorItem:
    """Fully resolved color recipe of one decorative element."""

    shade: Color
    deviation: int
    distance: int
    theme: Color
    salt: Salt

    def sample(self, rng: np.random.Generator) -> Color:
        """Blend, jitter, then salt.

        ``distance`` is the weight of the theme color: 0 keeps the random
        shade, 100 gives the theme color itself.
        """
        c = self.theme.meanpoint(self.shade, self.distance).variate(rng, self.deviation)
        salted = self.salt.sample(rng)
        return c if salted is None else salted
