"""Probabilistic color replacement ("salt")."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from .color import Color

__all__ = ["Salt", "SaltItem"]


@dataclass(frozen=True)
class SaltItem:
    color: Color
    likeliness: float = 1.0
    variability: int = 0


@dataclass
class Salt:
    """Ordered list of :class:`SaltItem`; the empty list means "no salt"."""

    items: List[SaltItem] = field(default_factory=list)

    @classmethod
    def none(cls) -> "Salt":
        return cls()

    def push(self, item: SaltItem) -> None:
        self.items.append(item)

    def is_none(self) -> bool:
        return not self.items

    def sample(self, rng: np.random.Generator) -> Optional[Color]:
        """Return a replacement color, or ``None`` to keep the computed one.

        Entries are tried in order; each fires with probability
        ``likeliness`` and yields its color jittered by ``variability``.
        """
        for item in self.items:
            if float(rng.random()) < item.likeliness:
                return item.color.variate(rng, item.variability)
        return None
