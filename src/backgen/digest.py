"""Blurhash digest of a rendered image."""
from __future__ import annotations

import io
from pathlib import Path
from typing import Optional, Tuple

import blurhash
import numpy as np
from PIL import Image

__all__ = ["COMPONENTS", "PUNCH", "encode_image", "decode_preview", "open_raster"]

# horizontal and vertical blurhash components
COMPONENTS: Tuple[int, int] = (4, 3)
PUNCH = 1.2


def open_raster(data: bytes | str | Path) -> Image.Image:
    """Open PNG bytes or a PNG file as an RGBA image."""
    src = io.BytesIO(data) if isinstance(data, bytes) else data
    with Image.open(src) as img:
        return img.convert("RGBA")


def encode_image(img: Image.Image, max_size: Optional[int] = None) -> str:
    """Blurhash of ``img`` at its pixel size.

    With ``max_size`` the image is first shrunk to fit a ``max_size`` square.
    This is much faster on large images but gives a slightly different hash.
    """
    img = img.convert("RGBA")
    if max_size is not None:
        img.thumbnail((max_size, max_size))
    cx, cy = COMPONENTS
    return blurhash.encode(np.asarray(img), components_x=cx, components_y=cy)


def decode_preview(hash_: str, width: int, height: int) -> Image.Image:
    """RGBA preview of ``hash_`` at ``width`` x ``height``."""
    pixels = np.asarray(blurhash.decode(hash_, width, height, punch=PUNCH), dtype=float)
    return Image.fromarray(np.clip(pixels[..., :3], 0, 255).astype(np.uint8)).convert("RGBA")
