"""Plane geometry primitives shared by tilings and patterns."""

from .pos import Pos, MalformedIntersectionError, crossprod_sign, radians
from .frame import Frame
from .movable import Movable

__all__ = [
    "Pos",
    "Frame",
    "Movable",
    "MalformedIntersectionError",
    "crossprod_sign",
    "radians",
]
