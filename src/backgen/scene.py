"""Color assignment over a tiling."""
from __future__ import annotations

from typing import List

import numpy as np

from .config.resolve import SceneCfg
from .geometry.pos import Pos
from .paint.color import Color
from .paint.theme import ColorItem
from .patterns.regions import Region

__all__ = ["Scene"]


class Scene:
    """Background color recipe plus one recipe per pattern region.

    Building a scene consumes random draws in this order: the background
    recipe, the regions, then one recipe per region.
    """

    def __init__(self, cfg: SceneCfg, rng: np.random.Generator):
        self.bg: ColorItem = cfg.choose_color(rng)
        self.regions: List[Region] = cfg.create_items(rng)
        self.items: List[ColorItem] = [cfg.choose_color(rng) for _ in self.regions]

    def item_at(self, pos: Pos) -> ColorItem:
        """Recipe of the first region containing ``pos``, else the background."""
        for region, item in zip(self.regions, self.items):
            if region.contains(pos):
                return item
        return self.bg

    def color(self, pos: Pos, rng: np.random.Generator) -> Color:
        return self.item_at(pos).sample(rng)
