"""Interpretation of the free-form ``colors``, ``themes`` and ``shapes`` tables.

Each entry may reference entries defined before it in the same table.  Bad
entries are logged and skipped; nothing here raises.
"""
from __future__ import annotations

import math
import string
from typing import Any, Dict, Mapping, Optional, Tuple

from ..chooser import Chooser
from ..paint.color import Color
from ..paint.salt import Salt, SaltItem
from ..paint.theme import ThemeItem
from ..utils.logging import logger
from .defaults import DEFAULTS
from .shapes import Pattern, Tiling, parse_shape

__all__ = [
    "ColorTable",
    "ThemeTable",
    "ShapeTable",
    "ShapeCombination",
    "parse_color",
    "parse_colors",
    "parse_theme_item",
    "parse_theme",
    "parse_themes",
    "parse_shape_combination",
    "parse_shape_combinations",
]

ColorTable = Dict[str, Color]
ThemeTable = Dict[str, Chooser[ThemeItem]]
ShapeCombination = Tuple[Chooser[Tiling], Chooser[Pattern]]
ShapeTable = Dict[str, ShapeCombination]

_BLACK = Color(0, 0, 0)


def parse_color(value: Any, colors: Mapping[str, Color]) -> Optional[Color]:
    """``"#RRGGBB"``, ``[r, g, b]`` or the name of a known color."""
    if isinstance(value, str):
        if value in colors:
            return colors[value]
        if len(value) == 7 and value.startswith("#") and all(c in string.hexdigits for c in value[1:]):
            return Color(int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16))
        return None
    if isinstance(value, (list, tuple)) and len(value) == 3:
        if all(isinstance(c, int) and not isinstance(c, bool) for c in value):
            return Color(*value)
    return None


def parse_colors(raw: Optional[Mapping[str, Any]]) -> ColorTable:
    colors: ColorTable = {}
    for name, value in (raw or {}).items():
        c = parse_color(value, colors)
        if c is None:
            logger.warning("color %r: %r is not a valid color, use [0, 0, 255] or \"#0000FF\"", name, value)
            continue
        colors[name] = c
    return colors


def _as_int(v: Any) -> Optional[int]:
    if isinstance(v, bool):
        return None
    if isinstance(v, int):
        return v
    if isinstance(v, float) and math.isfinite(v):
        return int(round(v))
    return None


def _parse_token_int(token: str) -> Optional[int]:
    try:
        n = int(token)
    except ValueError:
        return None
    return n if n >= 0 else None


def _theme_item_from_str(s: str, colors: Mapping[str, Color]) -> Tuple[ThemeItem, int]:
    color, weight = _BLACK, DEFAULTS.weight
    deviation: Optional[int] = None
    distance: Optional[int] = None
    for token in s.split():
        head, rest = token[0], token[1:]
        if head == "x":
            n = _parse_token_int(rest)
            weight = DEFAULTS.weight if n is None else n
        elif head == "~":
            deviation = _parse_token_int(rest)
        elif head == "!":
            distance = _parse_token_int(rest)
        else:
            c = parse_color(token, colors)
            if c is None:
                logger.warning("theme item %r: unknown color %r", s, token)
            else:
                color = c
    return ThemeItem(color, deviation, distance, Salt.none()), weight


def _salt_from_list(raw: Any, colors: Mapping[str, Color]) -> Salt:
    salt = Salt()
    if not isinstance(raw, list):
        logger.warning("salt must be an array of tables, got %r", raw)
        return salt
    for entry in raw:
        if not isinstance(entry, Mapping):
            logger.warning("salt entry %r is not a table", entry)
            continue
        color = parse_color(entry.get("color"), colors) or _BLACK
        likeliness = entry.get("likeliness", 1.0)
        if isinstance(likeliness, bool) or not isinstance(likeliness, (int, float)):
            likeliness = 1.0
        elif not math.isfinite(likeliness):
            likeliness = 1.0
        variability = max(_as_int(entry.get("variability")) or 0, 0)
        salt.push(SaltItem(color, float(likeliness), variability))
    return salt


def _theme_item_from_table(tbl: Mapping[str, Any], colors: Mapping[str, Color]) -> Tuple[ThemeItem, int]:
    color = _BLACK
    if "color" in tbl:
        c = parse_color(tbl["color"], colors)
        if c is None:
            logger.warning("theme item: %r is not a valid color", tbl["color"])
        else:
            color = c
    deviation = _as_int(tbl.get("variability"))
    distance = _as_int(tbl.get("distance"))
    weight = _as_int(tbl.get("weight"))
    salt = _salt_from_list(tbl["salt"], colors) if "salt" in tbl else Salt.none()
    return (
        ThemeItem(
            color,
            None if deviation is None else max(deviation, 0),
            None if distance is None else max(distance, 0),
            salt,
        ),
        DEFAULTS.weight if weight is None else max(weight, 0),
    )


def parse_theme_item(value: Any, colors: Mapping[str, Color]) -> Optional[Tuple[ThemeItem, int]]:
    """One weighted theme item from a token string or a table."""
    if isinstance(value, str):
        return _theme_item_from_str(value, colors)
    if isinstance(value, Mapping):
        return _theme_item_from_table(value, colors)
    logger.warning("%r is not a valid theme item", value)
    return None


def parse_theme(value: Any, colors: Mapping[str, Color], themes: ThemeTable) -> Optional[Chooser[ThemeItem]]:
    """A theme is one item, the name of a known theme, or an array mixing both.

    Theme names inside an array are expanded in place.
    """
    if isinstance(value, str) and value in themes:
        return Chooser(themes[value].extract())
    if isinstance(value, list):
        chooser: Chooser[ThemeItem] = Chooser()
        for x in value:
            if isinstance(x, str) and x in themes:
                chooser.append(themes[x].extract())
                continue
            item = parse_theme_item(x, colors)
            if item is not None:
                chooser.push(*item)
        return chooser
    item = parse_theme_item(value, colors)
    if item is None:
        return None
    return Chooser([item])


def parse_themes(raw: Optional[Mapping[str, Any]], colors: Mapping[str, Color]) -> ThemeTable:
    themes: ThemeTable = {}
    for name, value in (raw or {}).items():
        theme = parse_theme(value, colors, themes)
        if theme is None:
            logger.warning("theme %r skipped: provide a theme item or an array of theme items", name)
            continue
        if theme.total_weight <= 0:
            logger.warning("theme %r skipped: no item with a positive weight", name)
            continue
        themes[name] = theme
    return themes


def _add_shape(token: str, weight: int, tilings: Chooser[Tiling], patterns: Chooser[Pattern]) -> None:
    shape = parse_shape(token)
    if shape is None:
        logger.warning("%r is not recognized as a shape", token)
    elif isinstance(shape, Tiling):
        tilings.push(shape, weight)
    else:
        patterns.push(shape, weight)


def parse_shape_combination(value: Any, shapes: ShapeTable) -> ShapeCombination:
    """Tokens, ``[token, weight]`` pairs and names of earlier combinations."""
    tilings: Chooser[Tiling] = Chooser()
    patterns: Chooser[Pattern] = Chooser()
    if not isinstance(value, list):
        logger.warning("%r is not an array of shapes", value)
        return tilings, patterns
    for x in value:
        if isinstance(x, str):
            if x in shapes:
                t, p = shapes[x]
                tilings.append(t.extract())
                patterns.append(p.extract())
            else:
                _add_shape(x, DEFAULTS.weight, tilings, patterns)
        elif (
            isinstance(x, list)
            and len(x) == 2
            and isinstance(x[0], str)
            and isinstance(x[1], int)
            and not isinstance(x[1], bool)
            and x[1] > 0
        ):
            _add_shape(x[0], x[1], tilings, patterns)
        else:
            logger.warning("%r is not a valid shape", x)
    return tilings, patterns


def parse_shape_combinations(raw: Optional[Mapping[str, Any]]) -> ShapeTable:
    shapes: ShapeTable = {}
    for name, value in (raw or {}).items():
        shapes[name] = parse_shape_combination(value, shapes)
    return shapes
