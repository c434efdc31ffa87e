from __future__ import annotations

from typing import Optional, Union

from geohash import core
from geohash.config import get_settings
from geohash.types import Coordinate, Direction, Rect


class Geohash:
    """Geohash encoder/decoder bound to a fixed precision."""

    def __init__(self, precision: Optional[int] = None):
        """Initialize Geohash encoder/decoder with given precision."""
        if precision is None:
            precision = get_settings().default_precision
        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 1:
            raise ValueError(f"Precision must be a positive integer, got {precision!r}")
        self.precision = precision

    def encode(self, lon: float, lat: float) -> str:
        """Encode a longitude and latitude into a geohash."""
        return core.encode(Coordinate(x=lon, y=lat), self.precision)

    def decode(self, geohash: str) -> tuple[Coordinate, float, float]:
        """Decode a geohash into (center, longitude error, latitude error)."""
        return core.decode(geohash)

    def decode_bbox(self, geohash: str) -> Rect:
        return core.decode_bbox(geohash)

    def neighbor(self, geohash: str, direction: Union[Direction, str]) -> str:
        return core.neighbor(geohash, _as_direction(direction))

    def get_neighbors(self, geohash: str) -> dict[str, str]:
        """
        Compute the 8 neighboring geohashes (N, S, E, W, NE, NW, SE, SW).
        """
        return core.neighbors(geohash).to_dict()


def _as_direction(direction: Union[Direction, str]) -> Direction:
    if isinstance(direction, Direction):
        return direction
    if not isinstance(direction, str):
        raise ValueError(f"Unknown direction {direction!r}")
    try:
        return Direction[direction.upper()]
    except KeyError:
        raise ValueError(f"Unknown direction {direction!r}") from None
