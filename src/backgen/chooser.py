"""Weighted random selection."""
from __future__ import annotations

from typing import Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

import numpy as np

__all__ = ["Chooser"]

T = TypeVar("T")


class Chooser(Generic[T]):
    """Ordered collection of ``(item, weight)`` pairs.

    ``choose`` picks an item with probability ``weight / total``.  Insertion
    order is significant: it fixes which item a given random draw maps to, so
    two choosers built in a different order are not interchangeable even when
    they hold the same pairs.
    """

    def __init__(self, items: Iterable[Tuple[T, float]] = ()):
        self._items: List[Tuple[T, float]] = []
        self._total = 0.0
        for item, w in items:
            self.push(item, w)

    def push(self, item: T, weight: float) -> None:
        if weight < 0:
            raise ValueError(f"weight must be non-negative, got {weight}")
        self._items.append((item, weight))
        self._total += weight

    def append(self, items: Iterable[Tuple[T, float]]) -> None:
        for item, w in items:
            self.push(item, w)

    def extract(self) -> List[Tuple[T, float]]:
        """Copy of the pairs, suitable for :meth:`append` on another chooser."""
        return list(self._items)

    def choose(self, rng: np.random.Generator) -> Optional[T]:
        """Draw one item, or ``None`` if nothing has positive weight.

        No random number is consumed when the chooser is empty or weightless.
        """
        if not self._items or self._total <= 0:
            return None
        target = float(rng.random()) * self._total
        for item, w in self._items:
            if target < w:
                return item
            target -= w
        # Rounding can leave ``target`` a hair above the last weight.
        for item, w in reversed(self._items):
            if w > 0:
                return item
        return None  # pragma: no cover

    @property
    def total_weight(self) -> float:
        return self._total

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Tuple[T, float]]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Chooser({self._items!r})"
