"""Tests for territory grouping and outlines."""
import pytest
from hexboard.hex_coords import compute_bounds, hex_ring
from hexboard.map_generator import generate_map
from hexboard.positioner import build_positioned_hex, position_map
from hexboard.schemas import AxialHex, HexGridConfig
from hexboard.territories import (
    build_territories,
    compute_territory_shapes,
    hexes_by_territory,
    polygon_area,
    territory_bounds,
    territory_label_position,
    territory_outline,
)


@pytest.fixture
def grid():
    return HexGridConfig(orientation="pointy", hex_size=10)


def positioned(coords, grid, territory="A"):
    return [build_positioned_hex(AxialHex(q=q, r=r, territory_id=territory), grid) for q, r in coords]


class TestBuildTerritories:
    def test_groups_and_orders(self):
        hexes = [
            AxialHex(q=0, r=0, territory_id="B"),
            AxialHex(q=1, r=0, territory_id="A"),
            AxialHex(q=2, r=0, territory_id="B"),
            AxialHex(q=3, r=0),
        ]
        territories = build_territories(hexes, ["A", "B", "C"], palette=["#1", "#2", "#3"])
        assert [t.id for t in territories] == ["A", "B"]
        assert territories[1].hex_ids == ("0,0", "2,0")
        assert territories[1].display_color == "#2"
        assert territories[0].name == "Territory A"


class TestHexesByTerritory:
    def test_skips_void(self, grid):
        hexes = positioned([(0, 0)], grid) + positioned([(1, 0)], grid, territory=None)
        groups = hexes_by_territory(hexes)
        assert list(groups) == ["A"]
        assert len(groups["A"]) == 1

    def test_empty_string_label_kept(self, grid):
        hexes = positioned([(0, 0)], grid, territory="") + positioned([(1, 0)], grid, territory=None)
        assert list(hexes_by_territory(hexes)) == [""]


class TestTerritoryOutline:
    def test_single_hex(self, grid):
        loops = territory_outline(positioned([(0, 0)], grid))
        assert len(loops) == 1
        assert len(loops[0]) == 6

    def test_two_hexes_share_an_edge(self, grid):
        loops = territory_outline(positioned([(0, 0), (1, 0)], grid))
        assert len(loops) == 1
        assert len(loops[0]) == 10

    def test_ring_has_a_hole(self, grid):
        loops = territory_outline(positioned(hex_ring(0, 0, 1), grid))
        assert sorted(len(loop) for loop in loops) == [6, 18]

    def test_separate_islands(self, grid):
        loops = territory_outline(positioned([(0, 0), (5, 0)], grid))
        assert len(loops) == 2

    def test_empty(self):
        assert territory_outline([]) == []


class TestTerritoryMetrics:
    def test_bounds_match_compute_bounds(self, grid):
        coords = [(0, 0), (1, 0), (0, 1)]
        expected = compute_bounds([AxialHex(q=q, r=r) for q, r in coords], grid)
        assert tuple(territory_bounds(positioned(coords, grid))) == pytest.approx(tuple(expected))

    def test_label_at_single_hex_center(self, grid):
        hexes = positioned([(2, -1)], grid)
        loop = territory_outline(hexes)[0]
        label = territory_label_position(hexes, loop)
        assert label.x == pytest.approx(hexes[0].center.x)
        assert label.y == pytest.approx(hexes[0].center.y)

    def test_label_falls_back_to_mean_center(self, grid):
        hexes = positioned([(0, 0), (2, 0)], grid)
        label = territory_label_position(hexes, [])
        assert label.x == pytest.approx((hexes[0].center.x + hexes[1].center.x) / 2)

    def test_hex_area(self, grid):
        loop = territory_outline(positioned([(0, 0)], grid))[0]
        # Regular hexagon area: 3 * sqrt(3) / 2 * size^2
        assert polygon_area(loop) == pytest.approx(3 * 3 ** 0.5 / 2 * 100)


class TestComputeTerritoryShapes:
    def test_shapes_for_generated_map(self):
        map_definition = generate_map(120, 20)
        shapes = compute_territory_shapes(map_definition, position_map(map_definition))
        assert [s.id for s in shapes] == map_definition.territory_ids()
        assert sum(s.hex_count for s in shapes) == 120
        for shape in shapes:
            assert shape.primary_loop in shape.outline
            assert shape.bounds.width > 0
