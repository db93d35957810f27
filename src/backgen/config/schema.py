"""Pydantic models of the raw configuration document."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "GlobalSection",
    "LinesSection",
    "PatternsSection",
    "TilingsSection",
    "DataSection",
    "EntrySection",
    "MetaConfig",
]


class GlobalSection(BaseModel):
    deviation: Optional[int] = Field(default=None, ge=0)
    # former name of ``distance``
    weight: Optional[int] = Field(default=None, ge=0)
    distance: Optional[int] = Field(default=None, ge=0)
    size: Optional[float] = Field(default=None, gt=0)
    width: Optional[int] = Field(default=None, gt=0)
    height: Optional[int] = Field(default=None, gt=0)

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)


class LinesSection(BaseModel):
    width: Optional[float] = None
    color: Optional[str] = None
    del_width: Optional[float] = None
    del_color: Optional[str] = None
    hex_width: Optional[float] = None
    hex_color: Optional[str] = None
    tri_width: Optional[float] = None
    tri_color: Optional[str] = None
    rho_width: Optional[float] = None
    rho_color: Optional[str] = None
    hex_and_tri_width: Optional[float] = None
    hex_and_tri_color: Optional[str] = None
    squ_and_tri_width: Optional[float] = None
    squ_and_tri_color: Optional[str] = None
    pen_width: Optional[float] = None
    pen_color: Optional[str] = None

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    def settings_for(self, key: str) -> tuple[Optional[float], Optional[str]]:
        """``(width, color)`` specific to the tiling whose config key is ``key``."""
        return getattr(self, f"{key}_width", None), getattr(self, f"{key}_color", None)


class PatternsSection(BaseModel):
    nb_free_circles: Optional[int] = Field(default=None, ge=0)
    nb_free_triangles: Optional[int] = Field(default=None, ge=0)
    nb_free_stripes: Optional[int] = Field(default=None, ge=0)
    nb_free_spirals: Optional[int] = Field(default=None, ge=0)
    nb_concentric_circles: Optional[int] = Field(default=None, ge=0)
    nb_parallel_stripes: Optional[int] = Field(default=None, ge=0)
    nb_crossed_stripes: Optional[int] = Field(default=None, ge=0)
    nb_parallel_waves: Optional[int] = Field(default=None, ge=0)
    nb_parallel_sawteeth: Optional[int] = Field(default=None, ge=0)
    var_parallel_stripes: Optional[int] = Field(default=None, ge=0)
    var_crossed_stripes: Optional[int] = Field(default=None, ge=0)
    width_spiral: Optional[float] = Field(default=None, ge=0)
    width_stripe: Optional[float] = Field(default=None, ge=0)
    width_wave: Optional[float] = Field(default=None, ge=0)
    width_sawtooth: Optional[float] = Field(default=None, ge=0)
    tightness_spiral: Optional[float] = Field(default=None, gt=0)

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)


class TilingsSection(BaseModel):
    size_hex: Optional[float] = Field(default=None, gt=0)
    size_tri: Optional[float] = Field(default=None, gt=0)
    size_hex_and_tri: Optional[float] = Field(default=None, gt=0)
    size_squ_and_tri: Optional[float] = Field(default=None, gt=0)
    size_rho: Optional[float] = Field(default=None, gt=0)
    size_pen: Optional[float] = Field(default=None, gt=0)
    nb_delaunay: Optional[int] = Field(default=None, ge=0)

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)


class DataSection(BaseModel):
    patterns: Optional[PatternsSection] = None
    tilings: Optional[TilingsSection] = None

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)


class EntrySection(BaseModel):
    span: Optional[str] = None
    distance: Optional[int] = Field(default=None, ge=0)
    themes: Optional[List[str]] = None
    shapes: Optional[List[str]] = None
    line_color: Optional[str] = None

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)


class MetaConfig(BaseModel):
    """Whole configuration document; every section is optional.

    ``colors``, ``themes`` and ``shapes`` keep their raw values: they admit
    several spellings and are interpreted entry by entry during resolution,
    so one bad entry does not invalidate the document.
    """

    global_: Optional[GlobalSection] = Field(default=None, alias="global")
    lines: Optional[LinesSection] = None
    colors: Optional[Dict[str, Any]] = None
    themes: Optional[Dict[str, Any]] = None
    shapes: Optional[Dict[str, Any]] = None
    data: Optional[DataSection] = None
    entry: Optional[List[EntrySection]] = None

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False, populate_by_name=True)
