"""Random triangulation of the frame."""
from __future__ import annotations

from typing import List

import numpy as np
from scipy.spatial import Delaunay

from ..geometry.frame import Frame
from ..geometry.pos import Pos
from ..svg import Path
from .lattice import Tile

__all__ = ["delaunay"]


def delaunay(frame: Frame, rng: np.random.Generator, nb: int) -> List[Tile]:
    """Delaunay triangulation of ``nb`` random points.

    The corners of the frame grown by a tenth of its size are added so the
    convex hull, and therefore the union of the triangles, covers the frame.
    Each triangle is anchored at its centroid.
    """
    pts = [Pos.random(frame, rng) for _ in range(nb)]
    x0, y0 = frame.x - frame.w / 10, frame.y - frame.h / 10
    x1, y1 = frame.x + frame.w * 1.1, frame.y + frame.h * 1.1
    pts.extend([Pos(x0, y0), Pos(x1, y0), Pos(x1, y1), Pos(x0, y1)])

    tri = Delaunay(np.array([p.into_tuple() for p in pts], dtype=float))
    tiles: List[Tile] = []
    for simplex in tri.simplices:
        a, b, c = (pts[int(k)] for k in simplex)
        centroid = Pos((a.x + b.x + c.x) / 3.0, (a.y + b.y + c.y) / 3.0)
        tiles.append((centroid, Path([a, b, c])))
    return tiles
