"""Tiling and pattern families and their configuration tokens."""
from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Union

import numpy as np

__all__ = ["Tiling", "Pattern", "Shape", "parse_shape"]


class Tiling(Enum):
    HEXAGONS = "hex"
    TRIANGLES = "tri"
    HEXAGONS_AND_TRIANGLES = "hex_and_tri"
    SQUARES_AND_TRIANGLES = "squ_and_tri"
    RHOMBUS = "rho"
    DELAUNAY = "del"
    PENTAGONS = "pen"
    PENTAGONS_1 = "pen1"
    PENTAGONS_2 = "pen2"
    PENTAGONS_3 = "pen3"
    PENTAGONS_4 = "pen4"
    PENTAGONS_5 = "pen5"
    PENTAGONS_6 = "pen6"

    @property
    def pentagon_type(self) -> Optional[int]:
        """``0`` for the generic family, ``1..6`` for a fixed sub-type."""
        if not self.value.startswith("pen"):
            return None
        suffix = self.value[3:]
        return int(suffix) if suffix else 0

    @property
    def config_key(self) -> str:
        """Prefix of the ``lines.*`` and ``data.tilings.size_*`` keys."""
        return "pen" if self.pentagon_type is not None else self.value

    @classmethod
    def choose(cls, rng: np.random.Generator) -> "Tiling":
        """Uniform pick among the seven base families."""
        return _BASE_TILINGS[int(rng.integers(0, len(_BASE_TILINGS)))]


_BASE_TILINGS = (
    Tiling.HEXAGONS,
    Tiling.TRIANGLES,
    Tiling.HEXAGONS_AND_TRIANGLES,
    Tiling.SQUARES_AND_TRIANGLES,
    Tiling.RHOMBUS,
    Tiling.DELAUNAY,
    Tiling.PENTAGONS,
)


class Pattern(Enum):
    FREE_CIRCLES = "free_circles"
    FREE_TRIANGLES = "free_triangles"
    FREE_STRIPES = "free_stripes"
    FREE_SPIRALS = "free_spirals"
    CONCENTRIC_CIRCLES = "concentric_circles"
    PARALLEL_STRIPES = "parallel_stripes"
    CROSSED_STRIPES = "crossed_stripes"
    PARALLEL_WAVES = "parallel_waves"
    PARALLEL_SAWTEETH = "parallel_sawteeth"

    @classmethod
    def choose(cls, rng: np.random.Generator) -> "Pattern":
        members = list(cls)
        return members[int(rng.integers(0, len(members)))]


Shape = Union[Tiling, Pattern]


def _tokens() -> Dict[str, Shape]:
    table: Dict[str, Shape] = {}

    def alias(shape: Shape, *names: str) -> None:
        for n in names:
            table[n] = shape

    alias(Tiling.HEXAGONS, "H", "hex.", "hexagons")
    alias(Tiling.TRIANGLES, "T", "tri.", "triangles")
    alias(Tiling.HEXAGONS_AND_TRIANGLES, "H&T", "hex.&tri.", "hexagons&triangles")
    alias(Tiling.SQUARES_AND_TRIANGLES, "S&T", "squ.&tri.", "squares&triangles")
    alias(Tiling.RHOMBUS, "R", "rho.", "rhombus")
    alias(Tiling.DELAUNAY, "D", "del.", "delaunay")
    alias(Tiling.PENTAGONS, "P", "pen.", "pentagons")
    for i in range(1, 7):
        alias(Tiling(f"pen{i}"), f"P{i}", f"pen.{i}", f"pentagons-{i}")
    alias(Pattern.FREE_CIRCLES, "FC", "f-cir.", "free-circles")
    alias(Pattern.FREE_TRIANGLES, "FT", "f-tri.", "free-triangles")
    alias(Pattern.FREE_STRIPES, "FR", "f-str.", "free-stripes")
    alias(Pattern.FREE_SPIRALS, "FP", "f-spi.", "free-spirals")
    alias(Pattern.CONCENTRIC_CIRCLES, "CC", "c-cir.", "concentric-circles")
    alias(Pattern.PARALLEL_STRIPES, "PS", "p-str.", "parallel-stripes")
    alias(Pattern.CROSSED_STRIPES, "CS", "c-str.", "crossed-stripes")
    alias(Pattern.PARALLEL_WAVES, "PW", "p-wav.", "parallel-waves")
    alias(Pattern.PARALLEL_SAWTEETH, "PT", "p-saw.", "parallel-sawteeth")
    return table


SHAPE_TOKENS: Dict[str, Shape] = _tokens()


def parse_shape(token: str) -> Optional[Shape]:
    """Map a shape token (short, abbreviated or long form) to its family."""
    return SHAPE_TOKENS.get(token.strip())
