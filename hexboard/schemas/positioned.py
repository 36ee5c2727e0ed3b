"""Derived, read-only views produced from a map definition."""

from dataclasses import dataclass
from typing import Optional

from .base import Point


@dataclass(frozen=True)
class PositionedHex:
    """A hex with its world center, corner polygon and chunk key."""
    id: str
    q: int
    r: int
    s: int
    territory_id: Optional[str]
    center: Point
    corners: tuple[Point, ...]
    chunk_key: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "q": self.q,
            "r": self.r,
            "s": self.s,
            "territoryId": self.territory_id,
            "center": {"x": self.center.x, "y": self.center.y},
            "corners": [{"x": p.x, "y": p.y} for p in self.corners],
            "chunkKey": self.chunk_key,
        }


@dataclass(frozen=True)
class Chunk:
    """Hex ids whose centers fall in one world-space chunk cell."""
    id: str
    hex_ids: tuple[str, ...]

    def __contains__(self, hex_id: object) -> bool:
        return hex_id in self.hex_ids

    def __len__(self) -> int:
        return len(self.hex_ids)
