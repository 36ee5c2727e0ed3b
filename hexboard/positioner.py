"""Place a map's hexes in world space."""

import math

from hexboard import config
from hexboard.errors import InvalidConfigError
from hexboard.hex_coords import axial_to_world, coords_to_key, hex_corners
from hexboard.schemas import AxialHex, HexGridConfig, MapDefinition, Point, PositionedHex


def require_chunk_size(chunk_size: float) -> float:
    if (
        isinstance(chunk_size, bool)
        or not isinstance(chunk_size, (int, float))
        or not math.isfinite(chunk_size)
        or chunk_size <= 0
    ):
        raise InvalidConfigError(f"chunk_size must be a positive number, got {chunk_size!r}")
    return float(chunk_size)


def chunk_key_for(center: Point, chunk_size: float = config.CHUNK_WORLD_SIZE) -> str:
    """Key of the chunk cell containing a world point, e.g. "1_0"."""
    chunk_size = require_chunk_size(chunk_size)
    return f"{math.floor(center.x / chunk_size)}_{math.floor(center.y / chunk_size)}"


def build_positioned_hex(
    hex: AxialHex,
    grid: HexGridConfig,
    chunk_size: float = config.CHUNK_WORLD_SIZE,
) -> PositionedHex:
    """World center, corners and chunk key for a single hex."""
    center = axial_to_world(hex.q, hex.r, grid)
    return PositionedHex(
        id=coords_to_key(hex.q, hex.r),
        q=hex.q,
        r=hex.r,
        s=hex.s,
        territory_id=hex.territory_id,
        center=center,
        corners=hex_corners(center, grid.hex_size, grid.orientation),
        chunk_key=chunk_key_for(center, chunk_size),
    )


def position_map(
    map_definition: MapDefinition,
    chunk_size: float = config.CHUNK_WORLD_SIZE,
) -> list[PositionedHex]:
    """Position every hex of a map, in map order.

    Output depends only on the map's hexes and grid, so positioning the
    same map twice gives identical results.
    """
    chunk_size = require_chunk_size(chunk_size)
    grid = map_definition.grid
    return [build_positioned_hex(h, grid, chunk_size) for h in map_definition.hexes]
