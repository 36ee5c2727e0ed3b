"""Load and save map definition files."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from hexboard.errors import InvalidConfigError, MalformedMapDataError
from hexboard.schemas import HexGridConfig, MapDefinition

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


@dataclass(frozen=True)
class MapDisplayConfig:
    """Display switches carried in a map's metadata block."""
    show_territory_labels: bool = True


DEFAULT_MAP_DISPLAY_CONFIG = MapDisplayConfig()


def resolve_display_config(metadata: Optional[dict[str, Any]]) -> MapDisplayConfig:
    """Read display switches from metadata.

    `display.showTerritoryLabels` wins over a flat `showTerritoryLabels`;
    non-boolean values are ignored.
    """
    if not isinstance(metadata, dict):
        return DEFAULT_MAP_DISPLAY_CONFIG

    display = metadata.get("display")
    if isinstance(display, dict) and isinstance(display.get("showTerritoryLabels"), bool):
        return MapDisplayConfig(show_territory_labels=display["showTerritoryLabels"])

    flat = metadata.get("showTerritoryLabels")
    if isinstance(flat, bool):
        return MapDisplayConfig(show_territory_labels=flat)

    return DEFAULT_MAP_DISPLAY_CONFIG


def normalize_map_payload(data: Any) -> dict[str, Any]:
    """Return a copy of a raw map payload using current field names.

    Older files name the territories list `states`.
    """
    if not isinstance(data, dict):
        raise MalformedMapDataError(f"Map payload must be an object, got {type(data).__name__}")

    normalized = dict(data)
    if not isinstance(normalized.get("territories"), list) and isinstance(normalized.get("states"), list):
        normalized["territories"] = normalized.pop("states")
    return normalized


def parse_map_definition(data: Any) -> MapDefinition:
    """Validate a raw payload into a MapDefinition.

    Raises:
        InvalidConfigError: the grid block is missing or invalid
        MalformedMapDataError: anything else does not match the schema
    """
    payload = normalize_map_payload(data)

    for required in ("hexes", "territories"):
        if not isinstance(payload.get(required), list):
            raise MalformedMapDataError(f"Map payload is missing the '{required}' array")

    try:
        HexGridConfig.model_validate(payload.get("grid"))
    except ValidationError as e:
        raise InvalidConfigError(f"Invalid grid config: {e}") from e

    try:
        return MapDefinition.model_validate(payload)
    except ValidationError as e:
        raise MalformedMapDataError(f"Invalid map definition: {e}") from e


def load_map(path: str | Path) -> MapDefinition:
    """Load a map definition from a JSON or YAML file."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
        raise MalformedMapDataError(f"Could not parse {path}: {e}") from e

    map_definition = parse_map_definition(data)
    logger.info(
        "Loaded map %s from %s (%d hexes, %d territories)",
        map_definition.id,
        path,
        map_definition.hex_count,
        len(map_definition.territories),
    )
    return map_definition


def save_map(map_definition: MapDefinition, output_path: str | Path) -> None:
    """Save a map definition as JSON using the file schema's field names."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(map_definition.model_dump_json(by_alias=True, indent=2))
    logger.info("Saved map %s to %s", map_definition.id, output_path)
