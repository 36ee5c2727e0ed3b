"""Tests for map loading and display metadata."""
import json

import pytest
from hexboard.errors import InvalidConfigError, MalformedMapDataError
from hexboard.map_generator import generate_map
from hexboard.map_loader import (
    MapDisplayConfig,
    load_map,
    normalize_map_payload,
    parse_map_definition,
    resolve_display_config,
    save_map,
)


@pytest.fixture
def legacy_payload():
    """A map file from the older schema: `states` and `stateId`."""
    return {
        "id": "legacy",
        "name": "Legacy Map",
        "version": "0.3",
        "grid": {"orientation": "pointy", "hexSize": 32, "origin": {"q": 0, "r": 0}},
        "hexes": [
            {"q": 0, "r": 0, "s": 0, "stateId": "north"},
            {"q": 1, "r": 0, "s": -1, "stateId": "south"},
            {"q": 2, "r": 0, "s": -2, "stateId": None},
        ],
        "states": [
            {"id": "north", "name": "North", "displayColor": "#112233", "hexIds": ["0,0"]},
            {"id": "south", "name": "South", "displayColor": "#445566", "hexIds": ["1,0"]},
        ],
        "adjacencies": {"north": ["south"], "south": ["north"]},
        "metadata": {"display": {"showTerritoryLabels": False}},
    }


class TestNormalizeMapPayload:
    def test_states_renamed(self, legacy_payload):
        normalized = normalize_map_payload(legacy_payload)
        assert "states" not in normalized
        assert [t["id"] for t in normalized["territories"]] == ["north", "south"]

    def test_input_not_modified(self, legacy_payload):
        normalize_map_payload(legacy_payload)
        assert "states" in legacy_payload
        assert "territories" not in legacy_payload

    def test_territories_win_over_states(self):
        normalized = normalize_map_payload({"territories": [], "states": [{"id": "x"}]})
        assert normalized["territories"] == []

    def test_non_object_rejected(self):
        with pytest.raises(MalformedMapDataError):
            normalize_map_payload([1, 2, 3])


class TestParseMapDefinition:
    def test_legacy_payload(self, legacy_payload):
        map_definition = parse_map_definition(legacy_payload)
        assert map_definition.id == "legacy"
        assert map_definition.territory_ids() == ["north", "south"]
        assert [h.territory_id for h in map_definition.hexes] == ["north", "south", None]

    def test_missing_hexes(self, legacy_payload):
        del legacy_payload["hexes"]
        with pytest.raises(MalformedMapDataError, match="hexes"):
            parse_map_definition(legacy_payload)

    def test_missing_territories(self, legacy_payload):
        del legacy_payload["states"]
        with pytest.raises(MalformedMapDataError, match="territories"):
            parse_map_definition(legacy_payload)

    def test_broken_cube_invariant(self, legacy_payload):
        legacy_payload["hexes"][1]["s"] = 4
        with pytest.raises(MalformedMapDataError):
            parse_map_definition(legacy_payload)

    def test_non_positive_hex_size(self, legacy_payload):
        legacy_payload["grid"]["hexSize"] = 0
        with pytest.raises(InvalidConfigError):
            parse_map_definition(legacy_payload)

    def test_unknown_orientation(self, legacy_payload):
        legacy_payload["grid"]["orientation"] = "hexagonal"
        with pytest.raises(InvalidConfigError):
            parse_map_definition(legacy_payload)

    def test_missing_grid(self, legacy_payload):
        del legacy_payload["grid"]
        with pytest.raises(InvalidConfigError):
            parse_map_definition(legacy_payload)

    def test_errors_are_value_errors(self, legacy_payload):
        del legacy_payload["hexes"]
        with pytest.raises(ValueError):
            parse_map_definition(legacy_payload)


class TestLoadSave:
    def test_round_trip(self, tmp_path):
        original = generate_map(40, 25)
        path = tmp_path / "maps" / "generated.json"
        save_map(original, path)

        data = json.loads(path.read_text())
        assert "territories" in data
        assert data["grid"]["hexSize"] == 25
        assert "territoryId" in data["hexes"][0]

        assert load_map(path) == original

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "tiny.yaml"
        path.write_text(
            "id: tiny\n"
            "grid:\n"
            "  orientation: flat\n"
            "  hexSize: 12\n"
            "hexes:\n"
            "  - {q: 0, r: 0, territoryId: A}\n"
            "  - {q: 0, r: 1, territoryId: B}\n"
            "states:\n"
            "  - {id: A, displayColor: '#000000', hexIds: ['0,0']}\n"
            "  - {id: B, displayColor: '#ffffff', hexIds: ['0,1']}\n"
        )
        map_definition = load_map(path)
        assert map_definition.grid.hex_size == 12
        assert map_definition.hexes[1].s == -1
        assert map_definition.territory_ids() == ["A", "B"]

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(MalformedMapDataError):
            load_map(path)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "binary.json"
        path.write_bytes(b'{"id": "\xff\xfe"}')
        with pytest.raises(MalformedMapDataError):
            load_map(path)

    def test_invalid_utf8_yaml(self, tmp_path):
        path = tmp_path / "binary.yaml"
        path.write_bytes(b"id: \xff\xfe\n")
        with pytest.raises(MalformedMapDataError):
            load_map(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_map(tmp_path / "nope.json")


class TestResolveDisplayConfig:
    def test_defaults(self):
        assert resolve_display_config(None) == MapDisplayConfig(show_territory_labels=True)

    def test_nested(self):
        config = resolve_display_config({"display": {"showTerritoryLabels": False}})
        assert config.show_territory_labels is False

    def test_flat_fallback(self):
        config = resolve_display_config({"showTerritoryLabels": False})
        assert config.show_territory_labels is False

    def test_nested_wins(self):
        config = resolve_display_config({
            "display": {"showTerritoryLabels": True},
            "showTerritoryLabels": False,
        })
        assert config.show_territory_labels is True

    def test_non_boolean_ignored(self):
        config = resolve_display_config({"display": {"showTerritoryLabels": "no"}})
        assert config.show_territory_labels is True
