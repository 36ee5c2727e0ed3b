"""Territory grouping and outline geometry."""

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from hexboard import config
from hexboard.hex_coords import bounds_of_points
from hexboard.schemas import AxialHex, MapDefinition, Point, PositionedHex, Territory, WorldBounds

EPSILON = 1e-6


@dataclass(frozen=True)
class TerritoryShape:
    """World-space footprint of one territory."""
    id: str
    name: str
    display_color: str
    outline: list[list[Point]]
    primary_loop: list[Point]
    bounds: WorldBounds
    label_position: Point
    hex_count: int


def build_territories(
    hexes: Iterable[AxialHex],
    territory_ids: Sequence[str],
    palette: Sequence[str] = config.TERRITORY_PALETTE,
) -> list[Territory]:
    """Group hex ids by label into territories.

    Territories are listed in `territory_ids` order; ids that label no hex
    are left out. Colors are taken from `palette` by the id's position.
    """
    hex_ids: dict[str, list[str]] = {tid: [] for tid in territory_ids}
    for h in hexes:
        if h.territory_id in hex_ids:
            hex_ids[h.territory_id].append(h.id)

    territories = []
    for index, tid in enumerate(territory_ids):
        if not hex_ids[tid]:
            continue
        color = palette[index % len(palette)] if palette else config.VOID_COLOR
        territories.append(Territory(
            id=tid,
            name=f"Territory {tid}",
            display_color=color,
            hex_ids=hex_ids[tid],
        ))
    return territories


def hexes_by_territory(positioned: Iterable[PositionedHex]) -> dict[str, list[PositionedHex]]:
    """Positioned hexes grouped by territory id; void hexes are skipped."""
    groups: dict[str, list[PositionedHex]] = {}
    for h in positioned:
        if h.territory_id is None:
            continue
        groups.setdefault(h.territory_id, []).append(h)
    return groups


def _point_key(point: Point) -> tuple[float, float]:
    # Neighbouring hexes compute shared corners independently
    return (round(point.x, 5), round(point.y, 5))


def territory_outline(hexes: Sequence[PositionedHex]) -> list[list[Point]]:
    """Boundary loops of a set of hexes.

    Edges shared by two hexes of the set cancel out; the remaining edges
    are chained into closed loops (one per island or hole).
    """
    edges: dict[frozenset, tuple[Point, Point]] = {}
    for h in hexes:
        corners = h.corners
        for i, start in enumerate(corners):
            end = corners[(i + 1) % len(corners)]
            key = frozenset((_point_key(start), _point_key(end)))
            if key in edges:
                del edges[key]
            else:
                edges[key] = (start, end)

    # Endpoint -> unused edges touching it
    touching: dict[tuple[float, float], list[tuple[Point, Point]]] = {}
    for edge in edges.values():
        for end in edge:
            touching.setdefault(_point_key(end), []).append(edge)

    unused = dict.fromkeys(edges.values())
    loops: list[list[Point]] = []

    while unused:
        first = next(iter(unused))
        del unused[first]

        loop = [first[0], first[1]]
        start_key = _point_key(first[0])
        current_key = _point_key(first[1])

        while current_key != start_key:
            following = next((e for e in touching[current_key] if e in unused), None)
            if following is None:
                break
            del unused[following]
            nxt = following[1] if _point_key(following[0]) == current_key else following[0]
            loop.append(nxt)
            current_key = _point_key(nxt)

        if len(loop) > 1 and _point_key(loop[-1]) == start_key:
            loop.pop()
        if len(loop) > 2:
            loops.append(loop)

    return loops


def polygon_area(points: Sequence[Point]) -> float:
    """Absolute shoelace area."""
    if len(points) < 3:
        return 0.0
    area = 0.0
    for i, current in enumerate(points):
        following = points[(i + 1) % len(points)]
        area += current.x * following.y - following.x * current.y
    return abs(area / 2)


def _polygon_centroid(loop: Sequence[Point]) -> Optional[Point]:
    if len(loop) < 3:
        return None
    area = cx = cy = 0.0
    for i, current in enumerate(loop):
        following = loop[(i + 1) % len(loop)]
        cross = current.x * following.y - following.x * current.y
        area += cross
        cx += (current.x + following.x) * cross
        cy += (current.y + following.y) * cross
    area *= 0.5
    if abs(area) < EPSILON:
        return None
    return Point(cx / (6 * area), cy / (6 * area))


def territory_label_position(hexes: Sequence[PositionedHex], loop: Sequence[Point]) -> Point:
    """Centroid of the loop, or the mean hex center when the loop is degenerate."""
    centroid = _polygon_centroid(loop)
    if centroid is not None:
        return centroid
    if not hexes:
        return Point(0.0, 0.0)
    return Point(
        sum(h.center.x for h in hexes) / len(hexes),
        sum(h.center.y for h in hexes) / len(hexes),
    )


def territory_bounds(hexes: Sequence[PositionedHex]) -> WorldBounds:
    """Bounding box of every corner of the given hexes."""
    return bounds_of_points(p for h in hexes for p in h.corners)


def compute_territory_shapes(
    map_definition: MapDefinition,
    positioned: Sequence[PositionedHex],
) -> list[TerritoryShape]:
    """Outline, bounds and label anchor for each territory that has hexes."""
    groups = hexes_by_territory(positioned)
    shapes = []
    for territory in map_definition.territories:
        members = groups.get(territory.id)
        if not members:
            continue
        outline = territory_outline(members)
        primary = max(outline, key=polygon_area, default=[])
        shapes.append(TerritoryShape(
            id=territory.id,
            name=territory.name,
            display_color=territory.display_color,
            outline=outline,
            primary_loop=primary,
            bounds=territory_bounds(members),
            label_position=territory_label_position(members, primary),
            hex_count=len(members),
        ))
    return shapes
