"""2D point/vector type."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple, Union

import numpy as np

if TYPE_CHECKING:
    from .frame import Frame

__all__ = ["Pos", "MalformedIntersectionError", "crossprod_sign", "radians"]

# Determinant magnitude below which two lines count as parallel.
_EPS_PARALLEL = 0.01


class MalformedIntersectionError(ArithmeticError):
    """Two construction lines are (nearly) parallel."""


def radians(a: float) -> float:
    return float(a) * math.pi / 180.0


@dataclass(frozen=True, eq=False)
class Pos:
    """A point (or vector) of the drawing plane.

    Equality and hashing are defined on coordinates rounded to the nearest
    hundredth of a unit, so vertices computed along different paths of a
    tiling compare equal.
    """

    x: float
    y: float

    # --- construction -------------------------------------------------
    @classmethod
    def zero(cls) -> "Pos":
        return cls(0.0, 0.0)

    @classmethod
    def polar(cls, a: float, r: float) -> "Pos":
        """Point at angle ``a`` (degrees) and distance ``r`` from the origin."""
        theta = radians(a)
        return cls(r * math.cos(theta), r * math.sin(theta))

    @classmethod
    def random(cls, f: "Frame", rng: np.random.Generator) -> "Pos":
        """Uniform point over ``f`` inflated by a tenth of its size on each side."""
        errx = f.w / 10.0
        erry = f.h / 10.0
        x = f.x - errx + float(rng.random()) * f.w * 1.2
        y = f.y - erry + float(rng.random()) * f.h * 1.2
        return cls(x, y)

    @classmethod
    def intersect(cls, line1: Tuple["Pos", float], line2: Tuple["Pos", float]) -> "Pos":
        """Intersection of two lines, each given as ``(point, angle_degrees)``.

        Raises
        ------
        MalformedIntersectionError
            If the lines are parallel or nearly so.
        """
        pos1, rot1 = line1
        pos2, rot2 = line2
        pos1b = pos1 + cls.polar(rot1, 1.0)
        pos2b = pos2 + cls.polar(rot2, 1.0)

        dx = cls(pos1.x - pos1b.x, pos2.x - pos2b.x)
        dy = cls(pos1.y - pos1b.y, pos2.y - pos2b.y)

        div = _det(dx, dy)
        if abs(div) < _EPS_PARALLEL:
            raise MalformedIntersectionError(
                f"lines through {pos1} at {rot1} deg and {pos2} at {rot2} deg do not intersect"
            )
        inv = 1.0 / div

        d = cls(_det(pos1, pos1b), _det(pos2, pos2b))
        return cls(_det(d, dx) * inv, _det(d, dy) * inv)

    # --- metrics ------------------------------------------------------
    def into_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def round(self) -> Tuple[int, int]:
        return (int(round(self.x * 100.0)), int(round(self.y * 100.0)))

    def dot_self(self) -> float:
        return self.x * self.x + self.y * self.y

    def dot(self, other: "Pos") -> float:
        return self.x * other.x + self.y * other.y

    def norm(self) -> float:
        return math.sqrt(self.dot_self())

    def unit(self) -> "Pos":
        return self * (1.0 / self.norm())

    def dist(self, other: "Pos") -> float:
        return (self - other).norm()

    def project(self, other: "Pos") -> "Pos":
        """Orthogonal projection of ``self`` onto the direction of ``other``."""
        u = other.unit()
        return u * self.dot(u)

    def angle(self) -> float:
        """Polar angle in degrees, in ``[0, 360)``."""
        return math.degrees(math.atan2(self.y, self.x)) % 360.0

    # --- arithmetic ---------------------------------------------------
    def __add__(self, other: Union["Pos", Tuple[float, float]]) -> "Pos":
        if isinstance(other, Pos):
            return Pos(self.x + other.x, self.y + other.y)
        ox, oy = other
        return Pos(self.x + ox, self.y + oy)

    def __sub__(self, other: "Pos") -> "Pos":
        return Pos(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> "Pos":
        return Pos(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __neg__(self) -> "Pos":
        return Pos(-self.x, -self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pos):
            return NotImplemented
        return self.round() == other.round()

    def __hash__(self) -> int:
        return hash(self.round())

    def __iter__(self):
        yield self.x
        yield self.y


def _det(a: Pos, b: Pos) -> float:
    return a.x * b.y - a.y * b.x


def crossprod_sign(a: Pos, b: Pos, c: Pos) -> bool:
    """Side of ``c`` relative to the oriented line ``a -> b``."""
    return (a.x - c.x) * (b.y - c.y) - (b.x - c.x) * (a.y - c.y) > 0.0
