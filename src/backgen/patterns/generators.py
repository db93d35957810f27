"""Pattern generators.

Each generator returns regions in priority order: when regions overlap, the
first one containing a point decides its color.
"""
from __future__ import annotations

import math
from typing import List, Tuple

import numpy as np

from ..geometry.frame import Frame
from ..geometry.pos import Pos
from .regions import Disc, Ring, Sawtooth, Spiral, Stripe, Triangle, Wave

__all__ = [
    "free_circles",
    "free_triangles",
    "free_stripes",
    "free_spirals",
    "concentric_circles",
    "parallel_stripes",
    "crossed_stripes",
    "parallel_waves",
    "parallel_sawteeth",
]


def _span(frame: Frame) -> float:
    return float(min(frame.w, frame.h))


def _extent(frame: Frame, origin: Pos, direction: Pos) -> Tuple[float, float]:
    """Range of ``(p - origin) . direction`` over the frame corners."""
    proj = [(c - origin).dot(direction) for c in frame.corners()]
    return min(proj), max(proj)


def _bounds(lo: float, hi: float, nb: int, jitter: float, rng: np.random.Generator) -> List[float]:
    """``nb + 1`` increasing band limits from ``lo`` to ``hi``.

    Inner limits move by up to ``jitter`` times the band spacing, at most half
    of it so that they never cross.  The outer ones are pushed one unit past
    the range.
    """
    step = (hi - lo) / nb
    jitter = min(jitter, 0.5)
    inner = [lo + k * step + (2.0 * float(rng.random()) - 1.0) * jitter * step for k in range(1, nb)]
    return [lo - 1.0] + inner + [hi + 1.0]


def free_circles(frame: Frame, rng: np.random.Generator, nb: int) -> List[Disc]:
    discs = []
    for _ in range(nb):
        center = Pos.random(frame, rng)
        discs.append(Disc(center, (0.1 + 0.4 * float(rng.random())) * _span(frame)))
    return sorted(discs, key=lambda d: d.radius)


def free_triangles(frame: Frame, rng: np.random.Generator, nb: int) -> List[Triangle]:
    sized = []
    for _ in range(nb):
        center = Pos.random(frame, rng)
        size = (0.15 + 0.35 * float(rng.random())) * _span(frame)
        rot = int(rng.integers(0, 360))
        a, b, c = (center + Pos.polar(rot + 120 * k, size) for k in range(3))
        sized.append((size, Triangle(a, b, c)))
    sized.sort(key=lambda st: st[0])
    return [t for _, t in sized]


def free_stripes(frame: Frame, rng: np.random.Generator, nb: int, width: float) -> List[Stripe]:
    """Stripes of random direction through random points.

    Their thickness varies between half and one and a half times
    ``width * min(w, h)``.  Thinner stripes are listed first.
    """
    stripes = []
    for _ in range(nb):
        origin = Pos.random(frame, rng)
        normal = Pos.polar(int(rng.integers(0, 360)), 1.0)
        half = width * _span(frame) * (0.5 + float(rng.random())) / 2.0
        stripes.append(Stripe(origin, normal, -half, half))
    return sorted(stripes, key=lambda s: s.hi)


def free_spirals(
    frame: Frame, rng: np.random.Generator, nb: int, width: float, tightness: float
) -> List[Spiral]:
    spirals = []
    for _ in range(nb):
        center = Pos.random(frame, rng)
        pitch = tightness * _span(frame) * (0.25 + 0.25 * float(rng.random()))
        phase = float(rng.random()) * 360.0
        spirals.append(Spiral(center, pitch, width, phase))
    return spirals


def concentric_circles(frame: Frame, rng: np.random.Generator, nb: int) -> List[Ring]:
    """``nb`` rings around a random point, the last one reaching every corner."""
    if nb <= 0:
        return []
    center = Pos.random(frame, rng)
    reach = max(center.dist(c) for c in frame.corners())
    limits = _bounds(0.0, reach, nb, 0.25, rng)
    limits[0] = 0.0
    return [Ring(center, limits[k], limits[k + 1]) for k in range(nb)]


def _parallel(frame: Frame, rng: np.random.Generator, nb: int, var: int, angle: float) -> List[Stripe]:
    normal = Pos.polar(angle, 1.0)
    origin = frame.center()
    lo, hi = _extent(frame, origin, normal)
    limits = _bounds(lo, hi, nb, var / 100.0, rng)
    return [Stripe(origin, normal, limits[k], limits[k + 1]) for k in range(nb)]


def parallel_stripes(frame: Frame, rng: np.random.Generator, nb: int, var: int) -> List[Stripe]:
    """``nb`` adjacent bands across the frame; ``var`` is the jitter in percent."""
    if nb <= 0:
        return []
    angle = int(rng.integers(0, 360))
    return _parallel(frame, rng, nb, var, angle)


def crossed_stripes(frame: Frame, rng: np.random.Generator, nb: int, var: int) -> List[Stripe]:
    """Every other band of one direction woven over the bands of the perpendicular one."""
    if nb <= 0:
        return []
    angle = int(rng.integers(0, 360))
    first = _parallel(frame, rng, nb, var, angle)
    second = _parallel(frame, rng, nb, var, angle + 90)
    return first[::2] + second


def _waves(frame: Frame, rng: np.random.Generator, nb: int, width: float, kind: type) -> list:
    if nb <= 0:
        return []
    angle = int(rng.integers(0, 360))
    normal, tangent = Pos.polar(angle, 1.0), Pos.polar(angle + 90, 1.0)
    origin = frame.center()
    lo, hi = _extent(frame, origin, normal)
    spacing = (hi - lo) / nb
    amplitude = width * spacing
    wavelength = (2.0 + 2.0 * float(rng.random())) * spacing
    phase = float(rng.random())
    limits = [lo + k * spacing for k in range(nb + 1)]
    limits[0] -= amplitude + 1.0
    limits[-1] += amplitude + 1.0
    return [
        kind(origin, normal, tangent, limits[k], limits[k + 1], amplitude, wavelength, phase)
        for k in range(nb)
    ]


def parallel_waves(frame: Frame, rng: np.random.Generator, nb: int, width: float) -> List[Wave]:
    return _waves(frame, rng, nb, width, Wave)


def parallel_sawteeth(frame: Frame, rng: np.random.Generator, nb: int, width: float) -> List[Sawtooth]:
    return _waves(frame, rng, nb, width, Sawtooth)
