"""Read-only query surface over a positioned map."""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from hexboard import config
from hexboard.adjacency import resolve_adjacency
from hexboard.chunks import build_chunk_index, chunk_keys_in_rect
from hexboard.hex_coords import compute_bounds
from hexboard.map_loader import MapDisplayConfig, load_map, resolve_display_config
from hexboard.positioner import position_map
from hexboard.schemas import Chunk, MapDefinition, PositionedHex, Territory, WorldBounds

logger = logging.getLogger(__name__)


class HexBoard:
    """Positioned hexes, chunk index and territory adjacency for one map.

    Everything is derived once from the map definition and chunk size;
    a different map or grid needs a new board.
    """

    def __init__(self, map_definition: MapDefinition, chunk_size: float = config.CHUNK_WORLD_SIZE):
        self.map_definition = map_definition
        self.chunk_size = chunk_size

        self._positioned = tuple(position_map(map_definition, chunk_size))
        self._hexes_by_id: Mapping[str, PositionedHex] = MappingProxyType(
            {h.id: h for h in self._positioned}
        )
        self._chunks: Mapping[str, Chunk] = MappingProxyType(build_chunk_index(self._positioned))
        self._neighbors: Mapping[str, frozenset[str]] = MappingProxyType({
            tid: frozenset(ids) for tid, ids in resolve_adjacency(map_definition.hexes).items()
        })
        self._territories: Mapping[str, Territory] = MappingProxyType(
            {t.id: t for t in map_definition.territories}
        )
        self.bounds: WorldBounds = compute_bounds(map_definition.hexes, map_definition.grid)
        self.display_config: MapDisplayConfig = resolve_display_config(map_definition.metadata)

        logger.debug(
            "Board %s: %d hexes in %d chunks",
            map_definition.id,
            len(self._positioned),
            len(self._chunks),
        )

    @classmethod
    def from_file(cls, path: str | Path, chunk_size: float = config.CHUNK_WORLD_SIZE) -> "HexBoard":
        return cls(load_map(path), chunk_size)

    def get_positioned_hexes(self) -> tuple[PositionedHex, ...]:
        return self._positioned

    def get_hex(self, hex_id: str) -> Optional[PositionedHex]:
        return self._hexes_by_id.get(hex_id)

    @property
    def chunks(self) -> Mapping[str, Chunk]:
        return self._chunks

    def get_chunk(self, chunk_key: str) -> Optional[Chunk]:
        return self._chunks.get(chunk_key)

    def get_chunks_in_rect(self, min_x: float, min_y: float, max_x: float, max_y: float) -> list[Chunk]:
        """Non-empty chunks touched by a world rectangle."""
        keys = chunk_keys_in_rect(min_x, min_y, max_x, max_y, self.chunk_size)
        return [self._chunks[key] for key in keys if key in self._chunks]

    def get_territory(self, territory_id: str) -> Optional[Territory]:
        return self._territories.get(territory_id)

    def get_territory_neighbors(self, territory_id: str) -> frozenset[str]:
        """Territories sharing at least one hex edge with `territory_id`."""
        return self._neighbors.get(territory_id, frozenset())
