"""Hex grid configuration schema."""

import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .base import AxialCoord, HexBounds, Orientation


class HexGridConfig(BaseModel):
    """Orientation and size of a hex grid.

    Orientation and hex size together define the linear transform from
    axial to world coordinates. The origin is an anchor for consumers and
    is not applied by the transform.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    orientation: Orientation = Orientation.POINTY
    hex_size: float = Field(alias="hexSize")
    origin: AxialCoord = Field(default_factory=AxialCoord)
    bounds: Optional[HexBounds] = None
    resolution_tag: Optional[str] = Field(default=None, alias="resolutionTag")

    @field_validator("hex_size")
    @classmethod
    def validate_hex_size(cls, v: float) -> float:
        if not math.isfinite(v) or v <= 0:
            raise ValueError(f"hexSize must be a positive number, got {v}")
        return v
