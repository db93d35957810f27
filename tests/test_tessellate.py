import math

import numpy as np
import pytest

from backgen.geometry import Frame
from backgen.tessellate import (
    PENTAGON_TYPES,
    delaunay,
    hexagons,
    hexagons_and_triangles,
    pentagons,
    rhombus,
    squares_and_triangles,
    triangles,
)
from _util_geom import cover_counts


REGULAR = [
    (hexagons, 6),
    (triangles, 3),
    (squares_and_triangles, None),
    (hexagons_and_triangles, None),
]


@pytest.mark.parametrize("tiling,sides", REGULAR)
@pytest.mark.parametrize("rot", [0, 17, 245])
def test_regular_tilings_cover_frame_once(frame, tiling, sides, rot):
    tiles = tiling(frame, 9.0, rot)
    assert tiles
    assert all(c == 1 for c in cover_counts(frame, tiles))
    if sides is not None:
        assert all(len(path.points) == sides for _, path in tiles)


def test_squares_and_triangles_mix():
    tiles = squares_and_triangles(Frame(0, 0, 120, 80), 9.0, 0)
    sizes = {len(path.points) for _, path in tiles}
    assert sizes == {3, 4}


def test_hexagons_and_triangles_side_length(frame):
    for _, path in hexagons_and_triangles(frame, 9.0, 33):
        pts = path.points
        for a, b in zip(pts, pts[1:] + pts[:1]):
            assert a.dist(b) == pytest.approx(9.0)


@pytest.mark.parametrize("factor", [0.4, 0.7, 1.0])
def test_rhombus_covers_frame_once(frame, factor):
    tiles = rhombus(frame, 10.0, 10.0 * factor, 71)
    assert all(c == 1 for c in cover_counts(frame, tiles))


@pytest.mark.parametrize("kind", sorted(PENTAGON_TYPES))
@pytest.mark.parametrize("rot", [0, 123])
def test_pentagon_tilings_cover_frame_once(frame, kind, rot):
    tiles = pentagons(frame, 6.0, rot, kind)
    assert tiles
    assert all(len(path.points) == 5 for _, path in tiles)
    assert all(c == 1 for c in cover_counts(frame, tiles))


def test_unknown_pentagon_type(frame):
    with pytest.raises(ValueError):
        pentagons(frame, 6.0, 0, 7)


def test_cairo_pentagon_angles(frame):
    _, path = pentagons(frame, 6.0, 0, 3)[0]
    pts = path.points
    angles = []
    for i in range(5):
        a, b, c = pts[i - 1], pts[i], pts[(i + 1) % 5]
        u, v = a - b, c - b
        angles.append(math.degrees(math.acos(u.dot(v) / (u.norm() * v.norm()))))
    assert sorted(round(a) for a in angles) == [90, 90, 120, 120, 120]


def test_anchors_are_unique(frame):
    tiles = hexagons(frame, 9.0, 10)
    anchors = [a for a, _ in tiles]
    assert len(anchors) == len(set(anchors))


def test_tiles_reach_past_frame_edges(frame):
    tiles = hexagons(frame, 9.0, 0)
    xs = [p.x for _, path in tiles for p in path.points]
    ys = [p.y for _, path in tiles for p in path.points]
    assert min(xs) < frame.x and max(xs) > frame.x + frame.w
    assert min(ys) < frame.y and max(ys) > frame.y + frame.h


def test_delaunay_covers_frame_once(frame, rng):
    tiles = delaunay(frame, rng, 60)
    assert all(len(path.points) == 3 for _, path in tiles)
    assert all(c == 1 for c in cover_counts(frame, tiles))
    # 64 points in general position: 2n - 2 - hull triangles
    assert len(tiles) >= 64


def test_delaunay_is_deterministic(frame):
    t1 = delaunay(frame, np.random.default_rng(9), 40)
    t2 = delaunay(frame, np.random.default_rng(9), 40)
    assert [a for a, _ in t1] == [a for a, _ in t2]
