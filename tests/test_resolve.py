import logging

import numpy as np
import pytest

from backgen.config import DEFAULTS, MetaConfig, Pattern, Tiling, from_string, pick_cfg, project_time
from backgen.config.resolve import cascade, choose_entry
from backgen.config.schema import EntrySection
from backgen.geometry import Frame
from backgen.paint import Color, ThemeItem

BASE_TILINGS = {
    Tiling.HEXAGONS,
    Tiling.TRIANGLES,
    Tiling.HEXAGONS_AND_TRIANGLES,
    Tiling.SQUARES_AND_TRIANGLES,
    Tiling.RHOMBUS,
    Tiling.DELAUNAY,
    Tiling.PENTAGONS,
}


def _cfg(text="", seed=1430, time=None):
    rng = np.random.default_rng(seed)
    return pick_cfg(from_string(text), rng, project_time(seed) if time is None else time)


def test_cascade():
    assert cascade(None, 0, 5) == 0
    assert cascade(None, None) is None


def test_project_time():
    assert project_time(1430) == 1430
    assert project_time(0) == 0
    assert project_time(75) == 115
    assert project_time(2400) == 1600
    assert 0 <= project_time(2**63 + 17) < 2400


def test_defaults_without_config():
    cfg = _cfg()
    assert cfg.deviation == 20
    assert cfg.distance == 40
    assert cfg.frame == Frame(0, 0, 1000, 600)
    assert cfg.tiling in BASE_TILINGS
    assert isinstance(cfg.pattern, Pattern)
    assert cfg.line_width == 1.0
    assert cfg.line_color == Color(0, 0, 0)
    assert len(cfg.theme) == 1


def test_defaults_per_family():
    for seed in range(40):
        cfg = _cfg(seed=seed)
        if cfg.tiling is Tiling.DELAUNAY:
            assert cfg.nb_delaunay == DEFAULTS.nb_delaunay and cfg.size_tiling == 0
        else:
            assert cfg.size_tiling == DEFAULTS.size and cfg.nb_delaunay == 0
        if cfg.pattern is Pattern.FREE_CIRCLES:
            assert cfg.nb_pattern == 10
        if cfg.pattern is Pattern.PARALLEL_STRIPES:
            assert cfg.var_stripes == 15


def test_named_color_theme():
    cfg = _cfg('[colors]\nA = "#FF0000"\n[themes]\nT = ["A x5"]\n')
    assert list(cfg.theme) == [(ThemeItem(Color(255, 0, 0)), 5)]


def test_default_theme_uses_named_colors():
    for seed in range(10):
        cfg = _cfg('[colors]\nA = "#FF0000"\nB = "#00FF00"\n', seed=seed)
        (item, weight), = list(cfg.theme)
        assert item.color in (Color(255, 0, 0), Color(0, 255, 0))
        assert weight == 10


def test_shape_combination_fixes_families():
    text = '[shapes]\nS = [["H", 3], ["FC", 1]]\n[[entry]]\nshapes = ["S"]\n'
    for seed in range(20):
        cfg = _cfg(text, seed=seed)
        assert cfg.tiling is Tiling.HEXAGONS
        assert cfg.pattern is Pattern.FREE_CIRCLES


def test_combination_without_patterns_draws_any_pattern():
    text = '[shapes]\nS = ["P3"]\n[[entry]]\nshapes = ["S"]\n'
    cfg = _cfg(text)
    assert cfg.tiling is Tiling.PENTAGONS_3
    assert isinstance(cfg.pattern, Pattern)


def test_fully_specified():
    text = """
[global]
deviation = 5
distance = 60
size = 25
width = 400
height = 300

[lines]
width = 2.5
color = "#00FF00"
hex_width = 0.5

[data.tilings]
size_hex = 12

[data.patterns]
nb_free_circles = 4

[colors]
ink = "#010203"

[themes]
main = ["ink !90 ~2"]

[shapes]
only = ["H", "FC"]

[[entry]]
span = "0-2400"
themes = ["main"]
shapes = ["only"]
"""
    cfg = _cfg(text)
    assert (cfg.deviation, cfg.distance) == (5, 60)
    assert cfg.frame == Frame(0, 0, 400, 300)
    assert cfg.tiling is Tiling.HEXAGONS and cfg.size_tiling == 12
    assert cfg.pattern is Pattern.FREE_CIRCLES and cfg.nb_pattern == 4
    assert cfg.line_width == 0.5
    assert cfg.line_color == Color(0, 255, 0)
    assert list(cfg.theme) == [(ThemeItem(Color(1, 2, 3), 2, 90), 10)]


def test_unspecified_family_falls_back_to_global_size():
    cfg = _cfg('[global]\nsize = 33\n[data.tilings]\nsize_hex = 12\n[shapes]\ns = ["T"]\n[[entry]]\nshapes = ["s"]\n')
    assert cfg.tiling is Tiling.TRIANGLES and cfg.size_tiling == 33


def test_legacy_weight_alias():
    assert _cfg("[global]\nweight = 70\n").distance == 70
    assert _cfg("[global]\nweight = 70\ndistance = 20\n").distance == 20


def test_entry_line_color_override():
    text = '[colors]\nink = "#112233"\n[lines]\ncolor = "#FFFFFF"\n[[entry]]\nline_color = "ink"\n'
    assert _cfg(text).line_color == Color(0x11, 0x22, 0x33)


def test_bad_line_color_falls_back(caplog):
    caplog.set_level(logging.WARNING, logger="backgen")
    cfg = _cfg('[lines]\ncolor = "teal"\n[[entry]]\nline_color = "also-bad"\n')
    assert cfg.line_color == DEFAULTS.line_color
    assert len(caplog.records) == 2


def test_span_selection():
    text = """
[themes]
Morning = "#000001"
Evening = "#000002"

[[entry]]
span = "0-1200"
themes = ["Morning"]

[[entry]]
span = "1201-2400"
themes = ["Evening"]
"""
    morning = _cfg(text, time=800)
    evening = _cfg(text, time=1800)
    assert list(morning.theme)[0][0].color == Color(0, 0, 1)
    assert list(evening.theme)[0][0].color == Color(0, 0, 2)


def test_choose_entry(rng):
    entries = [
        EntrySection(span="0-1200", themes=["a"], shapes=["s"], line_color="#000000"),
        EntrySection(span="1300-1400", themes=["b"]),
        EntrySection(span="abc-xyz", themes=["c"], distance=0),
    ]
    assert choose_entry(entries, rng, 800) == ("a", "s", "#000000")
    assert choose_entry(entries, rng, 1350) == ("b", "", "")
    assert choose_entry(entries, rng, 1250) == ("", "", "")
    assert choose_entry(None, rng, 1250) == ("", "", "")


def test_unknown_theme_name_picks_defined_theme(caplog):
    caplog.set_level(logging.WARNING, logger="backgen")
    cfg = _cfg('[themes]\nonly = "#0000FF"\n[[entry]]\nthemes = ["missing"]\n')
    assert list(cfg.theme)[0][0].color == Color(0, 0, 255)
    assert any("missing" in r.getMessage() for r in caplog.records)


def test_same_seed_same_choices():
    a, b = _cfg(seed=99), _cfg(seed=99)
    assert (a.tiling, a.pattern, list(a.theme)) == (b.tiling, b.pattern, list(b.theme))


@pytest.mark.parametrize("tiling", [Tiling.PENTAGONS, Tiling.RHOMBUS, Tiling.DELAUNAY, Tiling.TRIANGLES])
def test_make_tiling_dispatch(tiling):
    cfg = _cfg("[global]\nwidth = 120\nheight = 80\n")
    cfg.tiling = tiling
    cfg.size_tiling = 0.0 if tiling is Tiling.DELAUNAY else 8.0
    cfg.nb_delaunay = 30
    tiles = cfg.make_tiling(np.random.default_rng(4))
    assert tiles
    if tiling is Tiling.DELAUNAY:
        assert all(len(p.points) == 3 for _, p in tiles)
    if tiling is Tiling.PENTAGONS:
        assert all(len(p.points) == 5 for _, p in tiles)


def test_create_items_dispatch():
    cfg = _cfg()
    for pattern in Pattern:
        cfg.pattern = pattern
        cfg.nb_pattern, cfg.width_pattern, cfg.var_stripes, cfg.tightness_spiral = 4, 0.3, 10, 0.5
        regions = cfg.create_items(np.random.default_rng(2))
        assert regions
        assert all(hasattr(r, "contains") for r in regions)


def test_choose_color_uses_theme_overrides():
    cfg = _cfg('[themes]\nt = ["#FF0000 ~3 !77"]\n[global]\ndeviation = 9\n')
    item = cfg.choose_color(np.random.default_rng(0))
    assert item.theme == Color(255, 0, 0)
    assert (item.deviation, item.distance) == (3, 77)
    cfg = _cfg('[themes]\nt = ["#FF0000"]\n[global]\ndeviation = 9\n')
    item = cfg.choose_color(np.random.default_rng(0))
    assert (item.deviation, item.distance) == (9, 40)


def test_bare_string_theme_with_weight():
    cfg = _cfg('[colors]\nA = "#FF0000"\n[themes]\nT = "A x5"\n')
    assert list(cfg.theme) == [(ThemeItem(Color(255, 0, 0)), 5)]


def test_non_finite_theme_numbers_do_not_escape():
    text = (
        '[themes]\nt = [{color = "#FF0000", variability = nan, weight = inf, '
        'salt = [{color = "#000000", variability = inf}]}]\n'
    )
    ((item, weight),) = list(_cfg(text).theme)
    assert item.color == Color(255, 0, 0) and item.deviation is None
    assert weight == 10


TILING_DOC = """
[global]
size = 9

[lines]
width = 1.5
color = "#000001"
hex_width = 2
hex_color = "#000002"
tri_width = 3
tri_color = "#000003"
hex_and_tri_width = 4
hex_and_tri_color = "#000004"
squ_and_tri_width = 5
squ_and_tri_color = "#000005"
rho_width = 6
rho_color = "#000006"
del_width = 7
del_color = "#000007"
pen_width = 8
pen_color = "#000008"

[data.tilings]
size_hex = 11
size_tri = 12
size_hex_and_tri = 13
size_squ_and_tri = 14
size_rho = 15
size_pen = 16
nb_delaunay = 77

[colors]
ink = "#0A0B0C"

[shapes]
s = ["{token}", "FC"]
"""


@pytest.mark.parametrize(
    "token,tiling,size,nb_delaunay,line",
    [
        ("H", Tiling.HEXAGONS, 11, 0, 2),
        ("T", Tiling.TRIANGLES, 12, 0, 3),
        ("H&T", Tiling.HEXAGONS_AND_TRIANGLES, 13, 0, 4),
        ("S&T", Tiling.SQUARES_AND_TRIANGLES, 14, 0, 5),
        ("R", Tiling.RHOMBUS, 15, 0, 6),
        ("D", Tiling.DELAUNAY, 0, 77, 7),
        ("P", Tiling.PENTAGONS, 16, 0, 8),
        ("P3", Tiling.PENTAGONS_3, 16, 0, 8),
    ],
)
def test_tiling_settings_fully_specified(token, tiling, size, nb_delaunay, line):
    doc = TILING_DOC.replace("{token}", token)
    cfg = _cfg(doc + '[[entry]]\nshapes = ["s"]\n')
    assert cfg.tiling is tiling
    assert (cfg.size_tiling, cfg.nb_delaunay) == (size, nb_delaunay)
    assert cfg.line_width == line
    assert cfg.line_color == Color(0, 0, line)
    cfg = _cfg(doc + '[[entry]]\nshapes = ["s"]\nline_color = "ink"\n')
    assert cfg.line_width == line
    assert cfg.line_color == Color(10, 11, 12)


PATTERN_DOC = """
[data.patterns]
nb_free_circles = 1
nb_free_triangles = 2
nb_free_stripes = 3
nb_free_spirals = 4
nb_concentric_circles = 5
nb_parallel_stripes = 6
nb_crossed_stripes = 7
nb_parallel_waves = 8
nb_parallel_sawteeth = 9
var_parallel_stripes = 33
var_crossed_stripes = 44
width_spiral = 0.21
width_stripe = 0.22
width_wave = 0.23
width_sawtooth = 0.24
tightness_spiral = 0.7

[shapes]
s = ["H", "{token}"]

[[entry]]
shapes = ["s"]
"""


@pytest.mark.parametrize(
    "token,pattern,nb,width,var,tightness",
    [
        ("FC", Pattern.FREE_CIRCLES, 1, 0, 0, 0),
        ("FT", Pattern.FREE_TRIANGLES, 2, 0, 0, 0),
        ("FR", Pattern.FREE_STRIPES, 3, 0.22, 0, 0),
        ("FP", Pattern.FREE_SPIRALS, 4, 0.21, 0, 0.7),
        ("CC", Pattern.CONCENTRIC_CIRCLES, 5, 0, 0, 0),
        ("PS", Pattern.PARALLEL_STRIPES, 6, 0, 33, 0),
        ("CS", Pattern.CROSSED_STRIPES, 7, 0, 44, 0),
        ("PW", Pattern.PARALLEL_WAVES, 8, 0.23, 0, 0),
        ("PT", Pattern.PARALLEL_SAWTEETH, 9, 0.24, 0, 0),
    ],
)
def test_pattern_settings_fully_specified(token, pattern, nb, width, var, tightness):
    cfg = _cfg(PATTERN_DOC.replace("{token}", token))
    assert cfg.pattern is pattern
    assert cfg.nb_pattern == nb
    assert cfg.width_pattern == pytest.approx(width)
    assert cfg.var_stripes == var
    assert cfg.tightness_spiral == pytest.approx(tightness)
