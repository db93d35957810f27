"""Minimal SVG document model: filled polygons inside a frame."""
from __future__ import annotations

from pathlib import Path as FsPath
from typing import TYPE_CHECKING, List, Sequence

from .paint.color import Color
from .utils.logging import logger

if TYPE_CHECKING:
    from .geometry.frame import Frame
    from .geometry.pos import Pos

__all__ = ["Path", "Document", "UnsupportedFormatError", "svg_to_png"]

_SVG_SUFFIXES = (".svg", ".svg.tmp")
_PNG_SUFFIXES = (".png", ".png.tmp")


class UnsupportedFormatError(ValueError):
    """Destination extension is neither SVG nor PNG."""


def _fmt(v: float) -> str:
    return f"{v:.3f}".rstrip("0").rstrip(".")


class Path:
    """Closed polygon with fill and stroke attributes."""

    def __init__(
        self,
        points: Sequence[Pos],
        fill_color: Color = Color(255, 255, 255),
        stroke_color: Color = Color(0, 0, 0),
        stroke_width: float = 0.0,
    ):
        self.points: List[Pos] = list(points)
        self.fill_color = fill_color
        self.stroke_color = stroke_color
        self.stroke_width = float(stroke_width)

    def with_fill_color(self, color: Color) -> "Path":
        self.fill_color = color
        return self

    def with_stroke_color(self, color: Color) -> "Path":
        self.stroke_color = color
        return self

    def with_stroke_width(self, width: float) -> "Path":
        self.stroke_width = float(width)
        return self

    def d(self) -> str:
        head, *tail = self.points
        parts = [f"M {_fmt(head.x)},{_fmt(head.y)}"]
        parts.extend(f"L {_fmt(p.x)},{_fmt(p.y)}" for p in tail)
        parts.append("z")
        return " ".join(parts)

    def __str__(self) -> str:
        return (
            f'<path d="{self.d()}" fill="{self.fill_color}" '
            f'stroke="{self.stroke_color}" stroke-width="{_fmt(self.stroke_width)}" />'
        )


class Document:
    """Ordered list of :class:`Path` drawn over ``frame``."""

    def __init__(self, frame: Frame):
        self.frame = frame
        self.items: List[Path] = []

    def add(self, path: Path) -> None:
        self.items.append(path)

    def __len__(self) -> int:
        return len(self.items)

    def to_svg(self) -> str:
        x, y, w, h = self.frame.into_tuple()
        lines = [
            f'<svg viewBox="{_fmt(x)} {_fmt(y)} {_fmt(w)} {_fmt(h)}" '
            f'width="{_fmt(w)}" height="{_fmt(h)}" xmlns="http://www.w3.org/2000/svg">'
        ]
        lines.extend(str(p) for p in self.items)
        lines.append("</svg>")
        return "\n".join(lines) + "\n"

    __str__ = to_svg

    def to_png(self) -> bytes:
        return svg_to_png(self.to_svg())

    def save(self, dest: str | FsPath) -> None:
        """Write the document, format chosen by the extension of ``dest``.

        ``.svg`` writes the markup, ``.png`` the rasterized image; a trailing
        ``.tmp`` is accepted after either.
        """
        name = str(dest).lower()
        if name.endswith(_SVG_SUFFIXES):
            FsPath(dest).write_text(self.to_svg(), encoding="utf-8")
        elif name.endswith(_PNG_SUFFIXES):
            FsPath(dest).write_bytes(self.to_png())
        else:
            raise UnsupportedFormatError(f"cannot save {dest}: expected .svg or .png")
        logger.debug("saved %d paths to %s", len(self.items), dest)


def svg_to_png(markup: str) -> bytes:
    """Rasterize SVG markup to PNG bytes with cairosvg."""
    import cairosvg  # needs the native cairo library

    return cairosvg.svg2png(bytestring=markup.encode("utf-8"))
