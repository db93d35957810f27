"""Hard-coded fallbacks used when a configuration value is absent."""
from __future__ import annotations

from dataclasses import dataclass

from ..paint.color import Color

__all__ = ["Defaults", "DEFAULTS"]


@dataclass(frozen=True)
class Defaults:
    deviation: int = 20
    distance: int = 40
    size: float = 15.0
    width: int = 1000
    height: int = 600

    nb_free_circles: int = 10
    nb_free_triangles: int = 15
    nb_free_stripes: int = 7
    nb_free_spirals: int = 3
    nb_concentric_circles: int = 5
    nb_parallel_stripes: int = 15
    nb_crossed_stripes: int = 10
    nb_parallel_waves: int = 15
    nb_parallel_sawteeth: int = 15

    var_parallel_stripes: int = 15
    var_crossed_stripes: int = 10

    width_spiral: float = 0.3
    width_stripe: float = 0.1
    width_wave: float = 0.3
    width_sawtooth: float = 0.3
    tightness_spiral: float = 0.5

    nb_delaunay: int = 1000

    line_width: float = 1.0
    line_color: Color = Color(0, 0, 0)

    # weight of themes, shapes and time-span entries when none is given
    weight: int = 10


DEFAULTS = Defaults()
