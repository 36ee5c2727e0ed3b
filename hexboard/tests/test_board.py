"""Tests for the board query surface."""
import pytest
from hexboard.board import HexBoard
from hexboard.chunks import build_chunks
from hexboard.hex_coords import compute_bounds
from hexboard.map_generator import generate_map
from hexboard.map_loader import save_map
from hexboard.positioner import position_map
from hexboard.schemas import AxialHex, HexGridConfig, MapDefinition, Point, Territory


@pytest.fixture
def generated():
    return generate_map(150, 40)


@pytest.fixture
def board(generated):
    return HexBoard(generated)


class TestHexBoard:
    def test_positioned_hexes(self, board, generated):
        assert list(board.get_positioned_hexes()) == position_map(generated)

    def test_get_hex(self, board):
        center = board.get_hex("0,0")
        assert center is not None
        assert center.center == Point(0.0, 0.0)
        assert board.get_hex("99,99") is None

    def test_get_chunk(self, board):
        expected = build_chunks(board.get_positioned_hexes())
        for key, hex_ids in expected.items():
            assert list(board.get_chunk(key).hex_ids) == hex_ids
        assert board.get_chunk("999_999") is None

    def test_chunks_in_rect(self, board):
        found = board.get_chunks_in_rect(-1, -1, 1, 1)
        assert any("0,0" in chunk for chunk in found)

    def test_territory_neighbors_symmetric(self, board, generated):
        for territory in generated.territories:
            for other in board.get_territory_neighbors(territory.id):
                assert territory.id in board.get_territory_neighbors(other)
            assert territory.id not in board.get_territory_neighbors(territory.id)

    def test_unknown_territory(self, board):
        assert board.get_territory_neighbors("nowhere") == frozenset()
        assert board.get_territory("nowhere") is None

    def test_get_territory(self, board, generated):
        first = generated.territories[0]
        assert board.get_territory(first.id) == first

    def test_bounds(self, board, generated):
        assert board.bounds == compute_bounds(generated.hexes, generated.grid)

    def test_views_are_read_only(self, board):
        with pytest.raises(TypeError):
            board.chunks["new"] = None

    def test_display_config(self):
        map_definition = MapDefinition(
            id="m",
            grid=HexGridConfig(hex_size=10),
            hexes=[AxialHex(q=0, r=0, territory_id="A"), AxialHex(q=1, r=0, territory_id="B")],
            territories=[Territory(id="A"), Territory(id="B")],
            metadata={"showTerritoryLabels": False},
        )
        board = HexBoard(map_definition)
        assert board.display_config.show_territory_labels is False
        assert board.get_territory_neighbors("A") == frozenset({"B"})

    def test_empty_map(self):
        empty = MapDefinition(id="empty", grid=HexGridConfig(hex_size=10), hexes=[], territories=[])
        board = HexBoard(empty)
        assert board.get_positioned_hexes() == ()
        assert dict(board.chunks) == {}
        assert tuple(board.bounds) == (0, 0, 0, 0)

    def test_from_file(self, tmp_path, generated):
        path = tmp_path / "board.json"
        save_map(generated, path)
        board = HexBoard.from_file(path, chunk_size=500)
        assert board.chunk_size == 500
        assert len(board.get_positioned_hexes()) == 150
