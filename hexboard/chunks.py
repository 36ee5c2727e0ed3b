"""Spatial chunk index over positioned hexes."""

import math
from typing import Iterable

from hexboard import config
from hexboard.positioner import require_chunk_size
from hexboard.schemas import Chunk, PositionedHex


def build_chunks(positioned_hexes: Iterable[PositionedHex]) -> dict[str, list[str]]:
    """Map each chunk key to the ids of the hexes whose centers fall in it.

    Keys and ids keep first-appearance order. A hex id seen twice is
    listed once.
    """
    chunks: dict[str, list[str]] = {}
    seen: set[str] = set()
    for h in positioned_hexes:
        if h.id in seen:
            continue
        seen.add(h.id)
        chunks.setdefault(h.chunk_key, []).append(h.id)
    return chunks


def build_chunk_index(positioned_hexes: Iterable[PositionedHex]) -> dict[str, Chunk]:
    """Same grouping as build_chunks, as immutable Chunk records."""
    return {
        key: Chunk(id=key, hex_ids=tuple(hex_ids))
        for key, hex_ids in build_chunks(positioned_hexes).items()
    }


def chunk_keys_in_rect(
    min_x: float,
    min_y: float,
    max_x: float,
    max_y: float,
    chunk_size: float = config.CHUNK_WORLD_SIZE,
) -> list[str]:
    """Keys of every chunk cell a world rectangle touches, row by row.

    Hexes straddle cell borders, so callers culling a viewport should
    grow the rectangle by one hex size first.
    """
    chunk_size = require_chunk_size(chunk_size)
    if max_x < min_x or max_y < min_y:
        return []
    x0, x1 = math.floor(min_x / chunk_size), math.floor(max_x / chunk_size)
    y0, y1 = math.floor(min_y / chunk_size), math.floor(max_y / chunk_size)
    return [f"{cx}_{cy}" for cy in range(y0, y1 + 1) for cx in range(x0, x1 + 1)]
