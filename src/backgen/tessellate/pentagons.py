"""Six families of pentagonal tilings.

Each family is built unrotated around the origin as a list of pentagons
(absolute vertices) for one lattice cell, then rotated as a whole.

1. hexagons halved through the midpoints of two opposite edges
2. hexagons halved by a skewed cut through two opposite edges
3. Cairo tiling
4. "houses": a row of upright houses whose roofs interlock with a row of
   upside-down houses
5. squares cut in two by a chevron
6. herringbone: as 5 with the chevron direction alternating per column
"""
from __future__ import annotations

import math
from typing import Callable, Dict, List, Sequence, Tuple

from ..geometry.frame import Frame
from ..geometry.movable import Movable
from ..geometry.pos import Pos
from .lattice import Tile, tessellate, rotate

__all__ = ["pentagons", "PENTAGON_TYPES"]

Polygon = List[Pos]
Cell = Tuple[List[Polygon], Pos, Pos]

# position of the skewed cut along the hexagon edge
_SKEW = 0.3
_SQRT3 = math.sqrt(3.0)


def _lerp(a: Pos, b: Pos, t: float) -> Pos:
    return a + (b - a) * t


def _halved_hexagon(size: float, t: float) -> Cell:
    v = [Pos.polar(60 * k, size) for k in range(6)]
    p = _lerp(v[0], v[1], t)
    q = _lerp(v[3], v[4], t)
    halves = [[p, v[1], v[2], v[3], q], [q, v[4], v[5], v[0], p]]
    return halves, Pos.polar(30, _SQRT3 * size), Pos.polar(90, _SQRT3 * size)


def _type1(size: float) -> Cell:
    return _halved_hexagon(size, 0.5)


def _type2(size: float) -> Cell:
    return _halved_hexagon(size, _SKEW)


def _type3(size: float) -> Cell:
    edge = size / (_SQRT3 / 2 - 0.5)
    top, bottom = Pos(0.0, size), Pos(0.0, -size)
    b = top + Pos.polar(30, edge)
    b_ = Pos(b.x, -b.y)
    r = Pos.intersect((b, 300.0), (Pos.zero(), 0.0))
    # four copies around the right-angled corner ``b``
    base = [p - b for p in (top, b, r, b_, bottom)]
    cluster = [[rotate(p, 90 * k) for p in base] for k in range(4)]
    d = _SQRT3 * edge
    return cluster, Pos(d, d), Pos(d, -d)


def _type4(size: float) -> Cell:
    a = 1.2 * size
    h, r = 0.6 * a, 0.5 * a
    upright = [Pos(0.0, 0.0), Pos(a, 0.0), Pos(a, h), Pos(a / 2, h + r), Pos(0.0, h)]
    upside_down = [
        Pos(a, h),
        Pos(1.5 * a, h + r),
        Pos(1.5 * a, 2 * h + r),
        Pos(a / 2, 2 * h + r),
        Pos(a / 2, h + r),
    ]
    return [upright, upside_down], Pos(a, 0.0), Pos(a / 2, 2 * h + r)


def _chevron_square(x0: float, a: float, bend: float) -> List[Polygon]:
    ab, cd = Pos(x0 + a / 2, 0.0), Pos(x0 + a / 2, a)
    x = Pos(x0 + a / 2 + bend * a, a / 2)
    return [
        [ab, Pos(x0 + a, 0.0), Pos(x0 + a, a), cd, x],
        [Pos(x0, 0.0), ab, x, cd, Pos(x0, a)],
    ]


def _type5(size: float) -> Cell:
    a = size * math.sqrt(2.0)
    return _chevron_square(0.0, a, 0.25), Pos(a, 0.0), Pos(0.0, a)


def _type6(size: float) -> Cell:
    a = size * math.sqrt(2.0)
    cells = _chevron_square(0.0, a, 0.25) + _chevron_square(a, a, -0.25)
    return cells, Pos(2 * a, 0.0), Pos(0.0, a)


PENTAGON_TYPES: Dict[int, Callable[[float], Cell]] = {
    1: _type1,
    2: _type2,
    3: _type3,
    4: _type4,
    5: _type5,
    6: _type6,
}


def _motif(polygons: Sequence[Polygon], rot: float) -> List[Tuple[Pos, Movable]]:
    motif = []
    for poly in polygons:
        pts = [rotate(p, rot) for p in poly]
        n = float(len(pts))
        center = Pos(sum(p.x for p in pts) / n, sum(p.y for p in pts) / n)
        motif.append((center, Movable.from_points(pts, center)))
    return motif


def pentagons(frame: Frame, size: float, rot: float, kind: int) -> List[Tile]:
    """Pentagonal tiling of type ``kind`` (1 to 6) at scale ``size``."""
    if kind not in PENTAGON_TYPES:
        raise ValueError(f"unknown pentagon tiling type {kind}")
    polygons, u, v = PENTAGON_TYPES[kind](size)
    return tessellate(frame, _motif(polygons, rot), rotate(u, rot), rotate(v, rot))
