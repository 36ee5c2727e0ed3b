"""Pydantic schemas for hexboard."""

from .base import Orientation, Point, WorldBounds, AxialCoord, HexBounds
from .grid import HexGridConfig
from .map import AxialHex, Territory, MapDefinition
from .positioned import PositionedHex, Chunk

__all__ = [
    # base
    "Orientation",
    "Point",
    "WorldBounds",
    "AxialCoord",
    "HexBounds",
    # grid
    "HexGridConfig",
    # map
    "AxialHex",
    "Territory",
    "MapDefinition",
    # derived
    "PositionedHex",
    "Chunk",
]
