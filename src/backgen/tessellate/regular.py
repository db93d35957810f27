"""Tilings by regular polygons and by rhombi."""
from __future__ import annotations

import math
from typing import List

from ..geometry.frame import Frame
from ..geometry.movable import Movable
from ..geometry.pos import Pos
from .lattice import Tile, tessellate, rotate

__all__ = ["hexagons", "triangles", "hexagons_and_triangles", "squares_and_triangles", "rhombus"]

_SQRT3 = math.sqrt(3.0)


def hexagons(frame: Frame, size: float, rot: float) -> List[Tile]:
    """Hexagons of circumradius ``size``."""
    motif = [(Pos.zero(), Movable.hexagon(size, rot))]
    return tessellate(frame, motif, Pos.polar(rot + 30, _SQRT3 * size), Pos.polar(rot + 90, _SQRT3 * size))


def triangles(frame: Frame, size: float, rot: float) -> List[Tile]:
    """Equilateral triangles of circumradius ``size``, alternately flipped."""
    motif = [
        (Pos.zero(), Movable.triangle(size, rot)),
        (Pos.polar(rot + 180, size), Movable.triangle(size, rot + 60)),
    ]
    return tessellate(frame, motif, Pos.polar(rot + 90, _SQRT3 * size), Pos.polar(rot + 30, _SQRT3 * size))


def hexagons_and_triangles(frame: Frame, size: float, rot: float) -> List[Tile]:
    """Trihexagonal tiling (3.6.3.6) with side ``size``."""
    r_tri = size / _SQRT3
    motif = [
        (Pos.zero(), Movable.hexagon(size, rot)),
        (Pos.polar(rot + 30, 2 * r_tri), Movable.triangle(r_tri, rot + 30)),
        (Pos.polar(rot + 90, 2 * r_tri), Movable.triangle(r_tri, rot + 90)),
    ]
    return tessellate(frame, motif, Pos.polar(rot, 2 * size), Pos.polar(rot + 60, 2 * size))


def squares_and_triangles(frame: Frame, size: float, rot: float) -> List[Tile]:
    """Rows of squares (circumradius ``size``) separated by rows of triangles.

    This is the elongated triangular tiling (3.3.3.4.4).
    """
    a = size * math.sqrt(2.0)
    h = a * _SQRT3 / 2.0
    r_tri = a / _SQRT3
    motif = [
        (Pos.zero(), Movable.square(size, rot)),
        (rotate(Pos(0.0, a / 2 + h / 3), rot), Movable.triangle(r_tri, rot + 90)),
        (rotate(Pos(a / 2, a / 2 + 2 * h / 3), rot), Movable.triangle(r_tri, rot + 30)),
    ]
    return tessellate(frame, motif, rotate(Pos(a, 0.0), rot), rotate(Pos(a / 2, a + h), rot))


def rhombus(frame: Frame, ldiag: float, sdiag: float, rot: float) -> List[Tile]:
    """Rhombi with half-diagonals ``ldiag`` and ``sdiag``."""
    long_, short = Pos.polar(rot, ldiag), Pos.polar(rot + 90, sdiag)
    motif = [(Pos.zero(), Movable.rhombus(ldiag, sdiag, rot))]
    return tessellate(frame, motif, long_ + short, long_ - short)
