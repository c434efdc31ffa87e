from __future__ import annotations

import json
import logging
from typing import NoReturn, Optional

import typer

from geohash.codec import Geohash
from geohash.config import get_settings
from geohash.errors import GeohashError

logger = logging.getLogger(__name__)

app = typer.Typer(help="Encode, decode and walk geohash cells.")


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, help="Logging level (defaults to GEOHASH_LOG_LEVEL)."
    ),
):
    level = log_level or get_settings().log_level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def _fail(exc: Exception) -> NoReturn:
    logger.debug("command failed", exc_info=exc)
    typer.echo(f"error: {exc}", err=True)
    raise typer.Exit(code=1)


@app.command()
def encode(
    lon: float = typer.Option(..., help="Longitude in degrees, -180 to 180."),
    lat: float = typer.Option(..., help="Latitude in degrees, -90 to 90."),
    precision: Optional[int] = typer.Option(
        None, "--precision", "-p", help="Hash length (defaults to GEOHASH_DEFAULT_PRECISION)."
    ),
):
    """Encode a coordinate into a geohash."""
    try:
        typer.echo(Geohash(precision).encode(lon, lat))
    except ValueError as exc:
        _fail(exc)


@app.command()
def decode(geohash: str = typer.Argument(..., help="Geohash to decode.")):
    """Print the center of a geohash and its longitude/latitude error."""
    try:
        center, lon_err, lat_err = Geohash().decode(geohash)
    except GeohashError as exc:
        _fail(exc)
    typer.echo(f"lon={center.x!r} lat={center.y!r} lon_err={lon_err!r} lat_err={lat_err!r}")


@app.command()
def bbox(geohash: str = typer.Argument(..., help="Geohash to decode.")):
    """Print the bounding box of a geohash."""
    try:
        rect = Geohash().decode_bbox(geohash)
    except GeohashError as exc:
        _fail(exc)
    typer.echo(
        f"min_lon={rect.min.x!r} min_lat={rect.min.y!r} "
        f"max_lon={rect.max.x!r} max_lat={rect.max.y!r}"
    )


@app.command()
def neighbor(
    geohash: str = typer.Argument(..., help="Source geohash."),
    direction: str = typer.Argument(..., help="One of n, ne, e, se, s, sw, w, nw."),
):
    """Print the adjacent geohash in one compass direction."""
    try:
        typer.echo(Geohash().neighbor(geohash, direction))
    except ValueError as exc:
        _fail(exc)


@app.command()
def neighbors(
    geohash: str = typer.Argument(..., help="Source geohash."),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON object."),
):
    """Print all eight neighbors of a geohash."""
    try:
        found = Geohash().get_neighbors(geohash)
    except GeohashError as exc:
        _fail(exc)
    if as_json:
        typer.echo(json.dumps(found))
        return
    for direction, cell in found.items():
        typer.echo(f"{direction}: {cell}")
