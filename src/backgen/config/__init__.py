"""Configuration: raw document models, loading and resolution."""

from .defaults import Defaults, DEFAULTS
from .loader import from_string, from_mapping, load_meta_config
from .resolve import SceneCfg, cascade, pick_cfg, project_time
from .schema import MetaConfig
from .shapes import Pattern, Tiling, parse_shape

__all__ = [
    "Defaults",
    "DEFAULTS",
    "MetaConfig",
    "SceneCfg",
    "Pattern",
    "Tiling",
    "cascade",
    "from_mapping",
    "from_string",
    "load_meta_config",
    "parse_shape",
    "pick_cfg",
    "project_time",
]
