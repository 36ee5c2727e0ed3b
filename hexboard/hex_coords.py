"""Axial hex coordinate utilities.

Hex edge numbering (clockwise from East):
    Edge 0: E   (+1,  0)
    Edge 1: NE  (+1, -1)
    Edge 2: NW  ( 0, -1)
    Edge 3: W   (-1,  0)
    Edge 4: SW  (-1, +1)
    Edge 5: SE  ( 0, +1)

World space is y-down: pointy-top hexes step along +x for edge 0 and
+y for edge 5.
"""

import math
from typing import Iterable, NamedTuple, Protocol, Union

from hexboard.errors import InvalidConfigError
from hexboard.schemas.base import Orientation, Point, WorldBounds

SQRT_3 = math.sqrt(3)


class HexOffset(NamedTuple):
    """Offset for hex neighbor lookup."""
    dq: int
    dr: int


class GridLike(Protocol):
    orientation: Union[Orientation, str]
    hex_size: float


class AxialLike(Protocol):
    q: int
    r: int


# Neighbor offsets indexed by edge number (clockwise from E)
HEX_NEIGHBOR_OFFSETS: list[HexOffset] = [
    HexOffset(+1,  0),  # Edge 0: E
    HexOffset(+1, -1),  # Edge 1: NE
    HexOffset( 0, -1),  # Edge 2: NW
    HexOffset(-1,  0),  # Edge 3: W
    HexOffset(-1, +1),  # Edge 4: SW
    HexOffset( 0, +1),  # Edge 5: SE
]

# Direction names for readability
HEX_DIRECTIONS: dict[str, int] = {
    "E": 0,
    "NE": 1,
    "NW": 2,
    "W": 3,
    "SW": 4,
    "SE": 5,
}

# Ring walks begin this many steps out along this direction
RING_START_DIRECTION = HEX_DIRECTIONS["SW"]


def resolve_orientation(orientation: Union[Orientation, str]) -> Orientation:
    """Coerce an orientation value, raising InvalidConfigError if unknown."""
    try:
        return Orientation(orientation)
    except ValueError:
        raise InvalidConfigError(f"Unknown orientation: {orientation!r}") from None


def require_hex_size(hex_size: float) -> float:
    """Reject sizes that cannot produce a polygon."""
    if (
        isinstance(hex_size, bool)
        or not isinstance(hex_size, (int, float))
        or not math.isfinite(hex_size)
        or hex_size <= 0
    ):
        raise InvalidConfigError(f"hex_size must be a positive number, got {hex_size!r}")
    return float(hex_size)


def neighbor_deltas(orientation: Union[Orientation, str] = Orientation.POINTY) -> list[HexOffset]:
    """The six unit steps in cube space, in edge order.

    The steps are the same for both orientations; only their on-screen
    direction changes. Index 4 is the ring-walk start direction.
    """
    resolve_orientation(orientation)
    return list(HEX_NEIGHBOR_OFFSETS)


def get_all_neighbors(q: int, r: int) -> list[tuple[int, int, int]]:
    """Get all 6 neighbors with their connecting edge.

    Returns:
        List of (neighbor_q, neighbor_r, edge_from_center)
    """
    return [
        (q + offset.dq, r + offset.dr, edge)
        for edge, offset in enumerate(HEX_NEIGHBOR_OFFSETS)
    ]


def hex_ring(q: int, r: int, radius: int) -> list[tuple[int, int]]:
    """Hexes at exactly `radius` from (q, r), in ring-walk order.

    The walk starts `radius` steps along the start direction and then
    steps before emitting, so the starting hex is emitted last.
    """
    if radius == 0:
        return [(q, r)]
    start = HEX_NEIGHBOR_OFFSETS[RING_START_DIRECTION]
    cq, cr = q + start.dq * radius, r + start.dr * radius
    results = []
    for offset in HEX_NEIGHBOR_OFFSETS:
        for _ in range(radius):
            cq, cr = cq + offset.dq, cr + offset.dr
            results.append((cq, cr))
    return results


def coords_to_key(q: int, r: int) -> str:
    """Convert coordinates to string key for dict lookups."""
    return f"{q},{r}"


def key_to_coords(key: str) -> tuple[int, int]:
    """Convert string key back to coordinates."""
    q, r = key.split(",")
    return (int(q), int(r))


def axial_to_world(q: float, r: float, grid: GridLike) -> Point:
    """World-space center of hex (q, r)."""
    size = require_hex_size(grid.hex_size)

    if resolve_orientation(grid.orientation) is Orientation.POINTY:
        x = size * (SQRT_3 * q + (SQRT_3 / 2) * r)
        y = size * ((3 / 2) * r)
        return Point(x, y)

    x = size * ((3 / 2) * q)
    y = size * (SQRT_3 * r + (SQRT_3 / 2) * q)
    return Point(x, y)


def axial_round(q: float, r: float) -> tuple[int, int, int]:
    """Round fractional axial coordinates to the containing hex."""
    s = -q - r

    rq = round(q)
    rr = round(r)
    rs = round(s)

    q_diff = abs(rq - q)
    r_diff = abs(rr - r)
    s_diff = abs(rs - s)

    if q_diff > r_diff and q_diff > s_diff:
        rq = -rr - rs
    elif r_diff > s_diff:
        rr = -rq - rs
    else:
        rs = -rq - rr

    return (rq, rr, rs)


def world_to_axial(x: float, y: float, grid: GridLike) -> tuple[int, int, int]:
    """Hex (q, r, s) containing world point (x, y)."""
    size = require_hex_size(grid.hex_size)

    if resolve_orientation(grid.orientation) is Orientation.POINTY:
        q = ((SQRT_3 / 3) * x - (1 / 3) * y) / size
        r = ((2 / 3) * y) / size
    else:
        q = ((2 / 3) * x) / size
        r = ((-1 / 3) * x + (SQRT_3 / 3) * y) / size

    return axial_round(q, r)


def hex_corners(
    center: Point,
    hex_size: float,
    orientation: Union[Orientation, str],
) -> tuple[Point, ...]:
    """Six corners of a hex around `center`.

    Corner i sits at 60*i degrees plus 30 for pointy-top (0 for flat-top).
    Increasing angle is clockwise in y-down world space, so every hex
    has the same winding.
    """
    size = require_hex_size(hex_size)
    offset = math.pi / 6 if resolve_orientation(orientation) is Orientation.POINTY else 0.0

    corners = []
    for i in range(6):
        angle = offset + i * math.pi / 3
        corners.append(Point(
            center.x + size * math.cos(angle),
            center.y + size * math.sin(angle),
        ))
    return tuple(corners)


def compute_bounds(hexes: Iterable[AxialLike], grid: GridLike) -> WorldBounds:
    """Bounding box of every hex's full corner polygon, without padding."""
    min_x = min_y = math.inf
    max_x = max_y = -math.inf

    for h in hexes:
        center = axial_to_world(h.q, h.r, grid)
        for x, y in hex_corners(center, grid.hex_size, grid.orientation):
            min_x = min(min_x, x)
            min_y = min(min_y, y)
            max_x = max(max_x, x)
            max_y = max(max_y, y)

    if min_x == math.inf:
        return WorldBounds(0.0, 0.0, 0.0, 0.0)
    return WorldBounds(min_x, min_y, max_x - min_x, max_y - min_y)


def bounds_of_points(points: Iterable[Point]) -> WorldBounds:
    """Bounding box of a set of world points."""
    xs: list[float] = []
    ys: list[float] = []
    for x, y in points:
        xs.append(x)
        ys.append(y)
    if not xs:
        return WorldBounds(0.0, 0.0, 0.0, 0.0)
    return WorldBounds(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))
