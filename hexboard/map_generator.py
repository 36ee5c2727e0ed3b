"""Procedural hex map generation by spiral ring traversal."""

import math
from typing import Iterator, Optional, Sequence

from hexboard import config
from hexboard.adjacency import adjacency_lists, resolve_adjacency
from hexboard.hex_coords import hex_ring, require_hex_size
from hexboard.schemas import AxialHex, HexGridConfig, MapDefinition, Orientation
from hexboard.territories import build_territories


def territory_noise(q: int, r: int, scale: float = config.NOISE_SCALE) -> float:
    """Smooth pseudo-noise in roughly [-3, 3]; lower scale gives larger blobs."""
    return math.sin(q * scale) + math.cos(r * scale * 0.8) + math.sin((q + r) * scale * 0.5)


def resolve_territory(
    q: int,
    r: int,
    territory_ids: Sequence[str],
    scale: float = config.NOISE_SCALE,
) -> str:
    """Pick a territory id for (q, r) from the noise value at that position."""
    normalized = (territory_noise(q, r, scale) + 3) / 6
    normalized = max(0.0, min(1.0, normalized))
    index = math.floor(normalized * len(territory_ids))
    return territory_ids[max(0, min(len(territory_ids) - 1, index))]


def spiral_coords(hex_count: int) -> Iterator[tuple[int, int]]:
    """Yield exactly `hex_count` axial coords, center first, then ring by ring.

    Rings come from `hex_ring` in walk order; the last ring is cut off
    wherever the count runs out.
    """
    if hex_count < 1:
        return
    emitted = 0
    radius = 0
    while True:
        for coord in hex_ring(0, 0, radius):
            yield coord
            emitted += 1
            if emitted == hex_count:
                return
        radius += 1


class ProceduralMapGenerator:
    """Generates reproducible hex maps of a requested size."""

    def __init__(
        self,
        territory_ids: Optional[Sequence[str]] = None,
        noise_scale: float = config.NOISE_SCALE,
        palette: Sequence[str] = config.TERRITORY_PALETTE,
    ):
        self.territory_ids = tuple(
            config.GENERATED_TERRITORY_IDS if territory_ids is None else territory_ids
        )
        if not self.territory_ids:
            raise ValueError("territory_ids must not be empty")
        self.noise_scale = noise_scale
        self.palette = tuple(palette)

    def generate_hexes(self, hex_count: int) -> list[AxialHex]:
        """Hexes in spiral order, each labeled by the noise field."""
        return [
            AxialHex(
                q=q,
                r=r,
                s=-q - r,
                territory_id=resolve_territory(q, r, self.territory_ids, self.noise_scale),
            )
            for q, r in spiral_coords(hex_count)
        ]

    def generate(self, hex_count: int, hex_size: float = config.DEFAULT_HEX_SIZE) -> MapDefinition:
        """Generate a map of exactly `hex_count` hexes.

        Args:
            hex_count: Number of hexes, at least 1
            hex_size: Hex radius in world units

        Returns:
            MapDefinition with id "generated-<hex_count>"
        """
        if isinstance(hex_count, bool) or not isinstance(hex_count, int) or hex_count < 1:
            raise ValueError(f"hex_count must be an integer >= 1, got {hex_count!r}")
        hex_size = require_hex_size(hex_size)

        hexes = self.generate_hexes(hex_count)

        # Territories and adjacency are derived from the labeled hexes
        territories = build_territories(hexes, self.territory_ids, self.palette)
        adjacency = resolve_adjacency(hexes)

        return MapDefinition(
            id=f"generated-{hex_count}",
            name=f"Generated {hex_count}",
            grid=HexGridConfig(orientation=Orientation.POINTY, hex_size=hex_size),
            hexes=hexes,
            territories=territories,
            adjacencies=adjacency_lists(adjacency, [t.id for t in territories]),
        )


def generate_map(hex_count: int, hex_size: float = config.DEFAULT_HEX_SIZE) -> MapDefinition:
    """Generate a map with the default territory ids and noise scale."""
    return ProceduralMapGenerator().generate(hex_count, hex_size)
