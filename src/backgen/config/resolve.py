"""Resolution of a :class:`MetaConfig` into one concrete :class:`SceneCfg`.

Every value is looked up from the most specific source to the least one
(time-span entry, per-family table, global table, :class:`Defaults`).  The
random stream is consumed in a fixed order:

1. time-span entry, then its theme name, then its shape-combination name
2. tiling family, then pattern family
3. default theme color, when no theme is defined
4. theme, when the entry did not name a known one

Configuration defects are logged and replaced; they never escape.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np

from ..chooser import Chooser
from ..geometry.frame import Frame
from ..geometry.pos import Pos
from ..paint.color import Color
from ..paint.salt import Salt
from ..paint.theme import ColorItem, ThemeItem
from ..patterns import generators as gen
from ..patterns.regions import Region
from ..svg import Path
from ..tessellate import (
    delaunay,
    hexagons,
    hexagons_and_triangles,
    pentagons,
    rhombus,
    squares_and_triangles,
    triangles,
)
from ..utils.logging import logger
from .defaults import DEFAULTS, Defaults
from .parse import (
    ColorTable,
    ShapeTable,
    ThemeTable,
    parse_color,
    parse_colors,
    parse_shape_combinations,
    parse_themes,
)
from .schema import EntrySection, LinesSection, MetaConfig, PatternsSection, TilingsSection
from .shapes import Pattern, Tiling

__all__ = ["SceneCfg", "pick_cfg", "cascade", "project_time", "choose_entry"]

DEFAULT_THEME = "-default-"


def cascade(*values: Any) -> Any:
    """First value that is not ``None`` (``None`` if there is none)."""
    for v in values:
        if v is not None:
            return v
    return None


def project_time(seed: int) -> int:
    """Time of day (``hhmm``) associated with ``seed``.

    Seeds that already read as a valid ``hhmm`` are kept; others are folded
    into the minutes of a day.
    """
    if 0 <= seed < 2400 and seed % 100 < 60:
        return int(seed)
    minutes = seed % 1440
    return (minutes // 60) * 100 + minutes % 60


@dataclass
class SceneCfg:
    """Everything needed to draw one image; all fields are concrete."""

    deviation: int
    distance: int
    frame: Frame
    theme: Chooser[ThemeItem]
    tiling: Tiling
    size_tiling: float
    nb_delaunay: int
    pattern: Pattern
    nb_pattern: int
    var_stripes: int
    width_pattern: float
    tightness_spiral: float
    line_width: float
    line_color: Color

    def choose_color(self, rng: np.random.Generator) -> ColorItem:
        """Draw a theme item, then a random shade to blend it with."""
        item = self.theme.choose(rng)
        if item is None:
            item = ThemeItem(Color(0, 0, 0), salt=Salt.none())
        shade = Color.random(rng)
        return ColorItem(
            shade=shade,
            deviation=cascade(item.deviation, self.deviation),
            distance=cascade(item.distance, self.distance),
            theme=item.color,
            salt=item.salt,
        )

    def create_items(self, rng: np.random.Generator) -> List[Region]:
        f, nb = self.frame, self.nb_pattern
        p = self.pattern
        if p is Pattern.FREE_CIRCLES:
            return gen.free_circles(f, rng, nb)
        if p is Pattern.FREE_TRIANGLES:
            return gen.free_triangles(f, rng, nb)
        if p is Pattern.FREE_STRIPES:
            return gen.free_stripes(f, rng, nb, self.width_pattern)
        if p is Pattern.FREE_SPIRALS:
            return gen.free_spirals(f, rng, nb, self.width_pattern, self.tightness_spiral)
        if p is Pattern.CONCENTRIC_CIRCLES:
            return gen.concentric_circles(f, rng, nb)
        if p is Pattern.PARALLEL_STRIPES:
            return gen.parallel_stripes(f, rng, nb, self.var_stripes)
        if p is Pattern.CROSSED_STRIPES:
            return gen.crossed_stripes(f, rng, nb, self.var_stripes)
        if p is Pattern.PARALLEL_WAVES:
            return gen.parallel_waves(f, rng, nb, self.width_pattern)
        if p is Pattern.PARALLEL_SAWTEETH:
            return gen.parallel_sawteeth(f, rng, nb, self.width_pattern)
        raise ValueError(f"unsupported pattern {p}")

    def make_tiling(self, rng: np.random.Generator) -> List[Tuple[Pos, Path]]:
        f, size, t = self.frame, self.size_tiling, self.tiling
        if t is Tiling.DELAUNAY:
            return delaunay(f, rng, self.nb_delaunay)
        if t is Tiling.RHOMBUS:
            sdiag = (float(rng.random()) * 0.6 + 0.4) * size
            return rhombus(f, size, sdiag, int(rng.integers(0, 360)))
        kind = t.pentagon_type
        if kind is not None:
            if kind == 0:
                kind = int(rng.integers(1, 7))
            logger.debug("pentagon tiling type %d", kind)
            return pentagons(f, size, int(rng.integers(0, 360)), kind)
        regular: Dict[Tiling, Callable[[Frame, float, float], List[Tuple[Pos, Path]]]] = {
            Tiling.HEXAGONS: hexagons,
            Tiling.TRIANGLES: triangles,
            Tiling.HEXAGONS_AND_TRIANGLES: hexagons_and_triangles,
            Tiling.SQUARES_AND_TRIANGLES: squares_and_triangles,
        }
        return regular[t](f, size, int(rng.integers(0, 360)))


# ---------------------------------------------------------------------------
# resolution steps
# ---------------------------------------------------------------------------


def _parse_span(span: Optional[str]) -> Tuple[int, int]:
    markers = (span if span is not None else "-").split("-")

    def bound(idx: int, default: int) -> int:
        try:
            return int(markers[idx])
        except (IndexError, ValueError):
            return default

    return bound(0, 0), bound(1, 2400)


def _pick_name(names: Optional[Sequence[str]], rng: np.random.Generator) -> str:
    if not names:
        return ""
    return names[int(rng.integers(0, len(names)))]


def choose_entry(
    entries: Optional[Sequence[EntrySection]], rng: np.random.Generator, time: int, defaults: Defaults = DEFAULTS
) -> Tuple[str, str, str]:
    """``(theme name, shape-combination name, line color)`` for ``time``.

    Empty strings stand for "not specified".
    """
    if not entries:
        return "", "", ""
    valid: Chooser[EntrySection] = Chooser()
    for e in entries:
        start, end = _parse_span(e.span)
        if start <= time <= end:
            valid.push(e, cascade(e.distance, defaults.weight))
    chosen = valid.choose(rng)
    if chosen is None:
        logger.debug("no configuration entry matches time %04d", time)
        return "", "", ""
    theme = _pick_name(chosen.themes, rng)
    shapes = _pick_name(chosen.shapes, rng)
    return theme, shapes, chosen.line_color or ""


def _choose_families(shapes: ShapeTable, name: str, rng: np.random.Generator) -> Tuple[Tiling, Pattern]:
    combination = shapes.get(name)
    if combination is None:
        return Tiling.choose(rng), Pattern.choose(rng)
    tilings, patterns = combination
    tiling = tilings.choose(rng) or Tiling.choose(rng)
    pattern = patterns.choose(rng) or Pattern.choose(rng)
    return tiling, pattern


# pattern -> (count key, width key, variation key, tightness key)
_PATTERN_KEYS: Dict[Pattern, Tuple[str, Optional[str], Optional[str], Optional[str]]] = {
    Pattern.FREE_CIRCLES: ("nb_free_circles", None, None, None),
    Pattern.FREE_TRIANGLES: ("nb_free_triangles", None, None, None),
    Pattern.FREE_STRIPES: ("nb_free_stripes", "width_stripe", None, None),
    Pattern.FREE_SPIRALS: ("nb_free_spirals", "width_spiral", None, "tightness_spiral"),
    Pattern.CONCENTRIC_CIRCLES: ("nb_concentric_circles", None, None, None),
    Pattern.PARALLEL_STRIPES: ("nb_parallel_stripes", None, "var_parallel_stripes", None),
    Pattern.CROSSED_STRIPES: ("nb_crossed_stripes", None, "var_crossed_stripes", None),
    Pattern.PARALLEL_WAVES: ("nb_parallel_waves", "width_wave", None, None),
    Pattern.PARALLEL_SAWTEETH: ("nb_parallel_sawteeth", "width_sawtooth", None, None),
}


def _pattern_params(
    pattern: Pattern, section: Optional[PatternsSection], defaults: Defaults
) -> Tuple[int, float, int, float]:
    """``(nb, width, var, tightness)``; keys that do not apply to ``pattern`` give 0."""

    def lookup(key: Optional[str]) -> Any:
        if key is None:
            return 0
        return cascade(getattr(section, key, None), getattr(defaults, key))

    nb_key, width_key, var_key, tight_key = _PATTERN_KEYS[pattern]
    return lookup(nb_key), float(lookup(width_key)), int(lookup(var_key)), float(lookup(tight_key))


def _tiling_params(
    tiling: Tiling, section: Optional[TilingsSection], size: float, defaults: Defaults
) -> Tuple[float, int]:
    """``(size, nb_delaunay)``; the one not used by ``tiling`` is 0."""
    if tiling is Tiling.DELAUNAY:
        return 0.0, cascade(getattr(section, "nb_delaunay", None), defaults.nb_delaunay)
    return cascade(getattr(section, f"size_{tiling.config_key}", None), size), 0


def _line_settings(
    lines: Optional[LinesSection], tiling: Tiling, colors: ColorTable, defaults: Defaults
) -> Tuple[float, Color]:
    if lines is None:
        return defaults.line_width, defaults.line_color
    width, color = lines.settings_for(tiling.config_key)
    resolved = None
    for candidate in (color, lines.color):
        if candidate is None:
            continue
        resolved = parse_color(candidate, colors)
        if resolved is not None:
            break
        logger.warning("line color %r is not a valid color", candidate)
    return cascade(width, lines.width, defaults.line_width), cascade(resolved, defaults.line_color)


def _ensure_theme(themes: ThemeTable, colors: ColorTable, rng: np.random.Generator, defaults: Defaults) -> None:
    if themes:
        return
    if colors:
        names = list(colors)
        color = colors[names[int(rng.integers(0, len(names)))]]
    else:
        color = Color.random(rng)
    themes[DEFAULT_THEME] = Chooser([(ThemeItem(color), defaults.weight)])


def _choose_theme(themes: ThemeTable, name: str, rng: np.random.Generator) -> Tuple[str, Chooser[ThemeItem]]:
    if name in themes:
        return name, themes[name]
    if name:
        logger.warning("theme %r is not defined", name)
    names = list(themes)
    picked = names[int(rng.integers(0, len(names)))]
    return picked, themes[picked]


def pick_cfg(
    meta: MetaConfig, rng: np.random.Generator, time: int, defaults: Defaults = DEFAULTS
) -> SceneCfg:
    """Resolve ``meta`` for the time of day ``time`` (``hhmm``)."""
    g = meta.global_
    deviation = cascade(getattr(g, "deviation", None), defaults.deviation)
    distance = cascade(getattr(g, "distance", None), getattr(g, "weight", None), defaults.distance)
    size = cascade(getattr(g, "size", None), defaults.size)
    width = cascade(getattr(g, "width", None), defaults.width)
    height = cascade(getattr(g, "height", None), defaults.height)

    colors = parse_colors(meta.colors)
    themes = parse_themes(meta.themes, colors)
    shapes = parse_shape_combinations(meta.shapes)

    theme_name, shapes_name, line_color_override = choose_entry(meta.entry, rng, time, defaults)
    if shapes_name and shapes_name not in shapes:
        logger.warning("shape combination %r is not defined", shapes_name)
    tiling, pattern = _choose_families(shapes, shapes_name, rng)

    data = meta.data
    nb_pattern, width_pattern, var_stripes, tightness = _pattern_params(
        pattern, getattr(data, "patterns", None), defaults
    )
    size_tiling, nb_delaunay = _tiling_params(tiling, getattr(data, "tilings", None), size, defaults)

    _ensure_theme(themes, colors, rng, defaults)
    line_width, line_color = _line_settings(meta.lines, tiling, colors, defaults)
    if line_color_override:
        override = parse_color(line_color_override, colors)
        if override is None:
            logger.warning("entry line color %r is not a valid color", line_color_override)
        else:
            line_color = override

    theme_name, theme = _choose_theme(themes, theme_name, rng)
    logger.debug(
        "time %04d: theme=%s tiling=%s pattern=%s", time, theme_name, tiling.name, pattern.name
    )

    return SceneCfg(
        deviation=deviation,
        distance=distance,
        frame=Frame(0, 0, width, height),
        theme=theme,
        tiling=tiling,
        size_tiling=float(size_tiling),
        nb_delaunay=int(nb_delaunay),
        pattern=pattern,
        nb_pattern=int(nb_pattern),
        var_stripes=var_stripes,
        width_pattern=width_pattern,
        tightness_spiral=tightness,
        line_width=float(line_width),
        line_color=line_color,
    )
