"""Region variants; each answers whether it contains a point."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from ..geometry.pos import Pos, crossprod_sign

__all__ = ["Region", "Disc", "Ring", "Triangle", "Stripe", "Spiral", "Wave", "Sawtooth"]


@dataclass(frozen=True)
class Disc:
    center: Pos
    radius: float

    def contains(self, p: Pos) -> bool:
        return self.center.dist(p) <= self.radius


@dataclass(frozen=True)
class Ring:
    """Points with ``inner <= distance < outer`` from ``center``."""

    center: Pos
    inner: float
    outer: float

    def contains(self, p: Pos) -> bool:
        return self.inner <= self.center.dist(p) < self.outer


@dataclass(frozen=True)
class Triangle:
    a: Pos
    b: Pos
    c: Pos

    def contains(self, p: Pos) -> bool:
        s1 = crossprod_sign(p, self.a, self.b)
        s2 = crossprod_sign(p, self.b, self.c)
        s3 = crossprod_sign(p, self.c, self.a)
        return s1 == s2 == s3


@dataclass(frozen=True)
class Stripe:
    """Band ``lo <= (p - origin) . normal < hi``; ``normal`` is a unit vector."""

    origin: Pos
    normal: Pos
    lo: float
    hi: float

    def contains(self, p: Pos) -> bool:
        return self.lo <= (p - self.origin).dot(self.normal) < self.hi


@dataclass(frozen=True)
class Spiral:
    """Archimedean spiral arm.

    ``pitch`` is the radial distance between two turns, ``width`` the
    fraction of it covered by the arm and ``phase`` a rotation in degrees.
    """

    center: Pos
    pitch: float
    width: float
    phase: float

    def contains(self, p: Pos) -> bool:
        d = p - self.center
        turn = ((d.angle() + self.phase) % 360.0) / 360.0
        return (d.norm() / self.pitch - turn) % 1.0 < self.width


def _sine(t: float) -> float:
    return math.sin(2 * math.pi * t)


def _saw(t: float) -> float:
    return 2.0 * (t % 1.0) - 1.0


@dataclass(frozen=True)
class Wave:
    """Band between two sine curves that share amplitude and phase."""

    origin: Pos
    normal: Pos
    tangent: Pos
    lo: float
    hi: float
    amplitude: float
    wavelength: float
    phase: float

    def _profile(self, t: float) -> float:
        return _sine(t)

    def contains(self, p: Pos) -> bool:
        d = p - self.origin
        t = d.dot(self.tangent) / self.wavelength + self.phase
        offset = d.dot(self.normal) - self.amplitude * self._profile(t)
        return self.lo <= offset < self.hi


@dataclass(frozen=True)
class Sawtooth(Wave):
    """As :class:`Wave` with a sawtooth profile."""

    def _profile(self, t: float) -> float:
        return _saw(t)


Region = Union[Disc, Ring, Triangle, Stripe, Spiral, Wave, Sawtooth]
