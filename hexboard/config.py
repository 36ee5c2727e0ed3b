"""Configuration for hexboard."""

import os
from pathlib import Path

# Paths
HEXBOARD_ROOT = Path(__file__).parent
OUTPUT_DIR = Path(os.environ.get("HEXBOARD_OUTPUT_DIR", "output"))
MAPS_DIR = OUTPUT_DIR / "maps"

# Grid
DEFAULT_HEX_SIZE = float(os.environ.get("HEXBOARD_HEX_SIZE", "20"))
DEFAULT_ORIENTATION = "pointy"

# Chunk edge length in world units
CHUNK_WORLD_SIZE = float(os.environ.get("HEXBOARD_CHUNK_WORLD_SIZE", "300"))

# Procedural generation
GENERATED_TERRITORY_IDS = ("A", "B", "C", "D", "E", "F", "G", "H")
NOISE_SCALE = 0.15

# Display colors for generated territories, same order as the ids
TERRITORY_PALETTE = (
    "#e6194b",
    "#3cb44b",
    "#ffe119",
    "#4363d8",
    "#f58231",
    "#911eb4",
    "#46f0f0",
    "#f032e6",
)
VOID_COLOR = "#424242"
