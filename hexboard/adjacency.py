"""Territory adjacency derived from shared hex edges."""

from typing import Iterable, Optional, Protocol

from hexboard.hex_coords import coords_to_key, neighbor_deltas
from hexboard.schemas import MapDefinition


class LabeledHex(Protocol):
    q: int
    r: int
    territory_id: Optional[str]


def resolve_adjacency(hexes: Iterable[LabeledHex]) -> dict[str, set[str]]:
    """Map each territory id to the ids of territories sharing an edge with it.

    Void hexes (no territory) never produce edges. Every territory that
    labels at least one hex is a key, possibly with an empty set. The
    relation is symmetric and never contains self-edges.
    """
    hexes = list(hexes)
    lookup = {coords_to_key(h.q, h.r): h for h in hexes}
    deltas = neighbor_deltas()

    adjacency: dict[str, set[str]] = {}
    for h in hexes:
        territory = h.territory_id
        if territory is None:
            continue
        neighbours = adjacency.setdefault(territory, set())

        for offset in deltas:
            other = lookup.get(coords_to_key(h.q + offset.dq, h.r + offset.dr))
            if other is None:
                continue
            other_territory = other.territory_id
            if other_territory is None or other_territory == territory:
                continue
            neighbours.add(other_territory)
            adjacency.setdefault(other_territory, set()).add(territory)

    return adjacency


def adjacency_lists(
    adjacency: dict[str, set[str]],
    territory_ids: Iterable[str] = (),
) -> dict[str, list[str]]:
    """Persisted form of an adjacency map: sorted lists keyed by territory.

    Every id in `territory_ids` becomes a key even if it touches nothing.
    """
    result = {tid: [] for tid in territory_ids}
    for tid, neighbours in adjacency.items():
        result[tid] = sorted(neighbours)
    return result


def is_symmetric(adjacency: dict[str, Iterable[str]]) -> bool:
    """True if every edge appears in both directions and none is a self-edge."""
    for tid, neighbours in adjacency.items():
        for other in neighbours:
            if other == tid:
                return False
            if tid not in adjacency.get(other, ()):
                return False
    return True


def with_recomputed_adjacency(map_definition: MapDefinition) -> MapDefinition:
    """Return a copy of the map whose adjacencies are derived from its hexes."""
    adjacency = resolve_adjacency(map_definition.hexes)
    # model_copy does not validate; store tuples directly
    persisted = adjacency_lists(adjacency, map_definition.territory_ids())
    return map_definition.model_copy(
        update={"adjacencies": {tid: tuple(ids) for tid, ids in persisted.items()}}
    )
