"""Read configuration documents into :class:`MetaConfig`.

Loading never raises on bad input: a document that cannot be parsed or that
violates the schema is replaced by an empty one and a warning is logged.
"""
from __future__ import annotations

import copy
import tomllib
from pathlib import Path
from typing import Any, Dict, Literal, Mapping

import yaml
from pydantic import ValidationError

from ..utils.logging import logger
from .schema import MetaConfig

__all__ = ["from_string", "from_mapping", "load_meta_config", "merge_documents"]

Format = Literal["toml", "yaml"]


def _parse(text: str, fmt: Format) -> Dict[str, Any]:
    if fmt == "yaml":
        data = yaml.safe_load(text) or {}
    else:
        data = tomllib.loads(text)
    if not isinstance(data, dict):
        raise TypeError("top-level configuration must be a mapping")
    return data


def merge_documents(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Copy of ``base`` with ``override`` laid over it table by table.

    Lists (such as ``entry``) and scalars replace the earlier value.
    """
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = merge_documents(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _format_of(path: Path) -> Format:
    return "yaml" if path.suffix.lower() in (".yaml", ".yml") else "toml"


def from_mapping(raw: Dict[str, Any]) -> MetaConfig:
    try:
        return MetaConfig.model_validate(raw)
    except ValidationError as e:
        logger.warning("invalid configuration, using defaults: %s", e)
        return MetaConfig()


def from_string(text: str, fmt: Format = "toml") -> MetaConfig:
    """Parse one document; an empty string gives an empty configuration."""
    try:
        raw = _parse(text, fmt)
    except (tomllib.TOMLDecodeError, yaml.YAMLError, TypeError) as e:
        logger.warning("unreadable %s configuration, using defaults: %s", fmt, e)
        return MetaConfig()
    return from_mapping(raw)


def load_meta_config(*paths: str | Path) -> MetaConfig:
    """Load and layer configuration files.

    Later files override earlier ones table by table (see
    :func:`merge_documents`).  Missing or unreadable
    files are skipped with a warning.
    """
    merged: Dict[str, Any] = {}
    for p in map(Path, paths):
        try:
            text = p.read_text(encoding="utf-8")
        except OSError as e:
            logger.warning("cannot read configuration %s: %s", p, e)
            continue
        fmt = _format_of(p)
        try:
            raw = _parse(text, fmt)
        except (tomllib.TOMLDecodeError, yaml.YAMLError, TypeError) as e:
            logger.warning("unreadable %s configuration %s, skipped: %s", fmt, p, e)
            continue
        merged = merge_documents(merged, raw)
        logger.debug("loaded configuration %s", p)
    return from_mapping(merged)
