"""Base types and enums for hexboard schemas."""

from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class Orientation(str, Enum):
    POINTY = "pointy"
    FLAT = "flat"


class Point(NamedTuple):
    """A position in world space."""
    x: float
    y: float


class WorldBounds(NamedTuple):
    """Axis-aligned world-space box."""
    min_x: float
    min_y: float
    width: float
    height: float

    @property
    def max_x(self) -> float:
        return self.min_x + self.width

    @property
    def max_y(self) -> float:
        return self.min_y + self.height


class AxialCoord(BaseModel):
    """Axial hex coordinates."""

    model_config = ConfigDict(frozen=True)

    q: int = 0
    r: int = 0


class HexBounds(BaseModel):
    """Axial extent of a map."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    min_q: int = Field(alias="minQ")
    max_q: int = Field(alias="maxQ")
    min_r: int = Field(alias="minR")
    max_r: int = Field(alias="maxR")
