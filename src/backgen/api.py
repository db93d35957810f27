"""High-level entry points: seed in, image and blurhash out."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import numpy as np
from PIL import UnidentifiedImageError

from .config.resolve import pick_cfg, project_time
from .config.schema import MetaConfig
from .digest import decode_preview, encode_image, open_raster
from .scene import Scene
from .svg import Document, UnsupportedFormatError
from .utils.logging import logger

__all__ = [
    "GenImageError",
    "CantSaveGeneratedImage",
    "CantOpenImage",
    "build_document",
    "generate_images",
    "random_seed",
]

# stroke widths below this draw the outline in the fill color
_HAIRLINE = 1e-4
_MIN_STROKE = 0.1


class GenImageError(Exception):
    """Base class of image generation failures."""


class CantSaveGeneratedImage(GenImageError):
    """The artifact could not be produced or written."""


class CantOpenImage(GenImageError):
    """The rasterized artifact could not be read back."""


def random_seed() -> int:
    return int(np.random.default_rng().integers(0, 2**64, dtype=np.uint64))


def build_document(seed: int, meta: Optional[MetaConfig] = None, time: Optional[int] = None) -> Document:
    """Deterministically draw the document for ``seed``.

    ``time`` (``hhmm``) selects the configuration entries; it defaults to
    :func:`~backgen.config.resolve.project_time` of the seed.
    """
    meta = meta if meta is not None else MetaConfig()
    time = time if time is not None else project_time(seed)
    rng = np.random.default_rng(seed)

    cfg = pick_cfg(meta, rng, time)
    scene = Scene(cfg, rng)
    stroke_like_fill = cfg.line_width < _HAIRLINE
    stroke_width = max(cfg.line_width, _MIN_STROKE)

    document = Document(cfg.frame)
    for pos, path in cfg.make_tiling(rng):
        fill = scene.color(pos, rng)
        document.add(
            path.with_fill_color(fill)
            .with_stroke_color(fill if stroke_like_fill else cfg.line_color)
            .with_stroke_width(stroke_width)
        )
    logger.info(
        "seed %d: %s tiling (%d tiles) with %s pattern",
        seed,
        cfg.tiling.name.lower(),
        len(document),
        cfg.pattern.name.lower(),
    )
    return document


def generate_images(
    seed: Optional[int],
    gen_dest: str | Path,
    blur_dest: str | Path,
    meta: Optional[MetaConfig] = None,
    time: Optional[int] = None,
) -> str:
    """Write the image for ``seed`` and its blurred preview; return the blurhash.

    ``gen_dest`` may be an SVG or a PNG file.  ``blur_dest`` always receives
    an RGBA PNG of the same size as the image.

    Raises
    ------
    CantSaveGeneratedImage
        If the image or the preview cannot be written.
    CantOpenImage
        If the rasterized image cannot be decoded.
    """
    if seed is None:
        seed = random_seed()
    document = build_document(seed, meta, time)

    try:
        document.save(gen_dest)
    except (UnsupportedFormatError, OSError) as e:
        raise CantSaveGeneratedImage(f"cannot save {gen_dest}: {e}") from e

    is_png = str(gen_dest).lower().endswith((".png", ".png.tmp"))
    try:
        raster = open_raster(Path(gen_dest) if is_png else document.to_png())
    except (UnidentifiedImageError, OSError, ValueError) as e:
        raise CantOpenImage(f"cannot open rasterized image: {e}") from e

    hash_ = encode_image(raster)
    preview = decode_preview(hash_, *raster.size)
    try:
        preview.save(blur_dest, format="PNG")
    except (OSError, ValueError) as e:
        raise CantSaveGeneratedImage(f"cannot save {blur_dest}: {e}") from e
    logger.debug("blurhash %s written to %s", hash_, blur_dest)
    return hash_
