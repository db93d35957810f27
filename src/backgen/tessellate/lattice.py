"""Periodic tilings: a motif of shapes repeated over a 2D lattice."""
from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from ..geometry.frame import Frame
from ..geometry.movable import Movable
from ..geometry.pos import Pos
from ..svg import Path

__all__ = ["Motif", "Tile", "tessellate", "rotate"]

Motif = Sequence[Tuple[Pos, Movable]]
Tile = Tuple[Pos, Path]


def rotate(p: Pos, rot: float) -> Pos:
    """Rotate ``p`` by ``rot`` degrees around the origin."""
    return Pos.polar(p.angle() + rot, p.norm()) if p.dot_self() > 0 else p


def _cell_range(frame: Frame, origin: Pos, u: Pos, v: Pos, reach: float) -> Tuple[range, range]:
    det = u.x * v.y - u.y * v.x
    if abs(det) < 1e-9:
        raise ValueError("lattice vectors are collinear")
    ii, jj = [], []
    for c in frame.corners(reach):
        d = c - origin
        ii.append((d.x * v.y - d.y * v.x) / det)
        jj.append((u.x * d.y - u.y * d.x) / det)
    return (
        range(math.floor(min(ii)) - 1, math.ceil(max(ii)) + 2),
        range(math.floor(min(jj)) - 1, math.ceil(max(jj)) + 2),
    )


def tessellate(frame: Frame, motif: Motif, u: Pos, v: Pos) -> List[Tile]:
    """Repeat ``motif`` at every lattice point ``center + i*u + j*v``.

    ``motif`` lists ``(offset, shape)`` pairs for one lattice cell.  A tile is
    kept when its anchor lies within the frame grown by the largest shape
    radius, which is enough for every tile touching the frame.  Tiles whose
    anchor was already emitted are dropped.
    """
    margin = max(m.radius() for _, m in motif) + 1.0
    reach = margin + max(off.norm() for off, _ in motif)
    origin = frame.center()
    irange, jrange = _cell_range(frame, origin, u, v, reach)

    seen = set()
    tiles: List[Tile] = []
    for i in irange:
        for j in jrange:
            base = origin + u * i + v * j
            for off, shape in motif:
                anchor = base + off
                if anchor in seen or not frame.contains(anchor, margin):
                    continue
                seen.add(anchor)
                tiles.append(shape.render(anchor))
    return tiles
