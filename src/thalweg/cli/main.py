"""Typer CLI for generating thalwegs from sounding files."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from thalweg.core.config import ThalwegConfig, get_config
from thalweg.core.errors import UnreachableError
from thalweg.core.geodesy import Coordinate, Location, get_metric
from thalweg.core.logging import setup_logging
from thalweg.io import format as fmt
from thalweg.io.read import read_data_directory, read_points
from thalweg.routing.graph import Graph

logger = logging.getLogger(__name__)

EXIT_USAGE = 1
EXIT_MISSING = 2
EXIT_WRONG_TYPE = 3
EXIT_NO_PATH = 4

app = typer.Typer(help="Generate the thalweg of an inlet from depth soundings")


def _check_dir(path: Path) -> None:
    if not path.exists():
        typer.echo(f"{path} does not seem to exist", err=True)
        raise typer.Exit(EXIT_MISSING)
    if not path.is_dir():
        typer.echo(f"{path} is not a directory", err=True)
        raise typer.Exit(EXIT_WRONG_TYPE)


def _check_file(path: Path) -> None:
    if not path.exists():
        typer.echo(f"{path} does not seem to exist", err=True)
        raise typer.Exit(EXIT_MISSING)
    if not path.is_file():
        typer.echo(f"{path} is not a regular file", err=True)
        raise typer.Exit(EXIT_WRONG_TYPE)


def _load_config(config: Optional[Path], verbose: bool) -> ThalwegConfig:
    cfg = get_config(config)
    setup_logging("DEBUG" if verbose else cfg.logging.level, force=True)
    return cfg


def _load_inputs(points: Path, data: Path, cfg: ThalwegConfig) -> tuple[List[Coordinate], List[Location]]:
    _check_dir(data)
    _check_file(points)
    soundings = read_data_directory(data, pattern=cfg.input.pattern, min_depth=cfg.input.min_depth)
    corners = read_points(points)
    return corners, soundings


@app.command()
def generate(
    points: Path = typer.Argument(..., help="File containing the points of interest along the inlet"),
    data: Path = typer.Argument(..., help="Directory containing LAT LON DEPTH sounding files"),
    prefix: Path = typer.Option(Path("."), "--prefix", "-p", help="Directory to write the resulting path to"),
    output_format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: dms or geojson"),
    resolution: Optional[float] = typer.Option(None, "--resolution", "-r", help="Maximum distance between connected soundings"),
    metric: Optional[str] = typer.Option(None, "--metric", "-m", help="Distance metric: planar (degrees) or rhumb (metres)"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML configuration file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Generate a thalweg through every point of interest, in order."""
    cfg = _load_config(config, verbose)
    corners, soundings = _load_inputs(points, data, cfg)
    if len(corners) < 2:
        typer.echo(f"{points} must contain at least two points, found {len(corners)}", err=True)
        raise typer.Exit(EXIT_USAGE)
    if not soundings:
        typer.echo(f"no soundings found in {data}", err=True)
        raise typer.Exit(EXIT_USAGE)

    try:
        out_format = fmt.OutputFormat.parse(output_format or cfg.output.format)
        graph = Graph(
            soundings,
            resolution if resolution is not None else cfg.graph.resolution,
            metric=get_metric(metric or cfg.graph.metric),
            use_index=cfg.graph.use_index,
            round_priorities=cfg.graph.round_priorities,
        )
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(EXIT_USAGE)
    logger.info("Searching %d soundings through %d points", len(graph), len(corners))

    try:
        path = graph.thalweg(corners)
    except UnreachableError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(EXIT_NO_PATH)

    prefix.mkdir(parents=True, exist_ok=True)
    output_file = prefix / f"{cfg.output.filename}.{fmt.extension(out_format)}"
    output_file.write_text(fmt.convert(out_format, path), encoding="utf-8")
    typer.echo(f"path contains {len(path)} points")
    typer.echo(f"Saved thalweg to {output_file}")


@app.command()
def info(
    points: Path = typer.Argument(..., help="File containing the points of interest along the inlet"),
    data: Path = typer.Argument(..., help="Directory containing LAT LON DEPTH sounding files"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML configuration file"),
) -> None:
    """Report how many soundings and points were read."""
    cfg = _load_config(config, verbose=False)
    corners, soundings = _load_inputs(points, data, cfg)
    typer.echo(f"Read {len(soundings)} data points and {len(corners)} corners")


if __name__ == "__main__":
    app()
