"""Pydantic models for treemap configuration."""
from __future__ import annotations

import math
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ColourConfig(BaseModel):
    mutation: float = Field(default=0.2, ge=0, le=1)
    seed: Optional[int] = None
    colour_level: int = Field(default=1, ge=0)
    hue_offset: float = 0.0

    model_config = ConfigDict(extra="forbid")

    @field_validator("hue_offset")
    @classmethod
    def _check_hue(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("hue_offset must be finite")
        return v


class LoggingConfig(BaseModel):
    level: Literal["none", "info", "debug"] = "none"
    format: Literal["text", "json"] = "text"

    model_config = ConfigDict(extra="forbid")


class VizConfig(BaseModel):
    background: str = "#FFFFFF"
    border_color: str = "#404040"
    border_width: float = Field(default=0.5, ge=0)
    dummy_fill: str = "#F0F0F0"
    show_labels: bool = True
    label_fontsize: float = Field(default=8.0, gt=0)
    invert_y: bool = True
    dpi: int = Field(default=100, ge=1)
    backend: str = "Agg"

    model_config = ConfigDict(extra="forbid")


class TreeMapConfig(BaseModel):
    colour: ColourConfig = ColourConfig()
    logging: LoggingConfig = LoggingConfig()
    viz: VizConfig = VizConfig()

    model_config = ConfigDict(extra="forbid")
