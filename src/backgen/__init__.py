"""backgen top-level API.

External users can simply ``from backgen import generate_images``.
"""

from .api import (
    CantOpenImage,
    CantSaveGeneratedImage,
    GenImageError,
    build_document,
    generate_images,
)
from .config import MetaConfig, from_string, load_meta_config

__all__ = [
    "build_document",
    "generate_images",
    "GenImageError",
    "CantSaveGeneratedImage",
    "CantOpenImage",
    "MetaConfig",
    "from_string",
    "load_meta_config",
]
