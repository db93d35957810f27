"""Decorative regions laid over a tiling."""

from .regions import Region, Disc, Ring, Triangle, Stripe, Spiral, Wave, Sawtooth
from .generators import (
    free_circles,
    free_triangles,
    free_stripes,
    free_spirals,
    concentric_circles,
    parallel_stripes,
    crossed_stripes,
    parallel_waves,
    parallel_sawteeth,
)

__all__ = [
    "Region",
    "Disc",
    "Ring",
    "Triangle",
    "Stripe",
    "Spiral",
    "Wave",
    "Sawtooth",
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
