"""CLI interface for hexboard."""

import json
import logging
from pathlib import Path
from typing import Optional

import click

from hexboard import config
from hexboard.adjacency import adjacency_lists, resolve_adjacency
from hexboard.board import HexBoard
from hexboard.errors import HexboardError
from hexboard.map_generator import generate_map
from hexboard.map_loader import load_map, save_map
from hexboard.validator import MapValidator

logger = logging.getLogger(__name__)


def _load_or_fail(path: str):
    try:
        return load_map(path)
    except HexboardError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Hex board map tools"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


@cli.command()
@click.option("--count", default=91, help="Number of hexes")
@click.option("--hex-size", default=config.DEFAULT_HEX_SIZE, help="Hex radius in world units")
@click.option("--output", default=None, help="Output file")
def generate(count: int, hex_size: float, output: Optional[str]):
    """Generate a procedural map."""
    try:
        map_definition = generate_map(count, hex_size)
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    output_path = Path(output) if output else config.MAPS_DIR / f"{map_definition.id}.json"
    save_map(map_definition, output_path)

    click.echo(f"Generated map {map_definition.id} with {map_definition.hex_count} hexes")
    click.echo(f"  Territories: {len(map_definition.territories)}")
    click.echo(f"Saved to {output_path}")


@cli.command()
@click.argument("map_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--chunk-size", default=config.CHUNK_WORLD_SIZE, help="Chunk edge length")
def inspect(map_path: str, chunk_size: float):
    """Show map statistics."""
    map_definition = _load_or_fail(map_path)
    try:
        board = HexBoard(map_definition, chunk_size)
    except HexboardError as e:
        raise click.ClickException(str(e)) from e

    bounds = board.bounds
    click.echo(f"Map: {map_definition.id} ({map_definition.name or 'unnamed'})")
    click.echo(f"  Hexes: {map_definition.hex_count}")
    click.echo(f"  Territories: {len(map_definition.territories)}")
    click.echo(f"  Chunks: {len(board.chunks)}")
    click.echo(
        f"  Bounds: x={bounds.min_x:.2f} y={bounds.min_y:.2f} "
        f"w={bounds.width:.2f} h={bounds.height:.2f}"
    )


@cli.command()
@click.argument("map_path", type=click.Path(exists=True, dir_okay=False))
def validate(map_path: str):
    """Check a map for consistency problems."""
    map_definition = _load_or_fail(map_path)
    result = MapValidator().validate(map_definition)

    for error in result.errors:
        click.echo(f"ERROR: {error}")
    for warning in result.warnings:
        click.echo(f"WARNING: {warning}")

    if not result.valid:
        raise SystemExit(1)
    click.echo("Map is valid")


@cli.command()
@click.argument("map_path", type=click.Path(exists=True, dir_okay=False))
def adjacency(map_path: str):
    """Print territory adjacency derived from hex edges."""
    map_definition = _load_or_fail(map_path)
    resolved = adjacency_lists(resolve_adjacency(map_definition.hexes), map_definition.territory_ids())
    click.echo(json.dumps(resolved, indent=2, sort_keys=True))


@cli.command()
@click.argument("map_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", required=True, help="Output file")
@click.option("--chunk-size", default=config.CHUNK_WORLD_SIZE, help="Chunk edge length")
def position(map_path: str, output: str, chunk_size: float):
    """Write positioned hexes and the chunk index as JSON."""
    map_definition = _load_or_fail(map_path)
    try:
        board = HexBoard(map_definition, chunk_size)
    except HexboardError as e:
        raise click.ClickException(str(e)) from e

    payload = {
        "mapId": map_definition.id,
        "chunkSize": chunk_size,
        "hexes": [h.to_dict() for h in board.get_positioned_hexes()],
        "chunks": {key: list(chunk.hex_ids) for key, chunk in board.chunks.items()},
    }

    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(payload, f, indent=2)

    logger.info("Wrote %d positioned hexes to %s", len(payload["hexes"]), output_path)
    click.echo(f"Positioned {len(payload['hexes'])} hexes in {len(payload['chunks'])} chunks")
    click.echo(f"Saved to {output_path}")


if __name__ == "__main__":
    cli()
