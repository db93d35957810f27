"""Edge-to-edge tilings of a frame.

Every generator returns ``[(anchor, Path), ...]``; tiles are not clipped, so
the union of the paths covers the frame with some overflow on the borders.
"""

from .lattice import tessellate
from .regular import hexagons, triangles, hexagons_and_triangles, squares_and_triangles, rhombus
from .pentagons import pentagons, PENTAGON_TYPES
from .delaunay import delaunay

__all__ = [
    "tessellate",
    "hexagons",
    "triangles",
    "hexagons_and_triangles",
    "squares_and_triangles",
    "rhombus",
    "pentagons",
    "PENTAGON_TYPES",
    "delaunay",
]
