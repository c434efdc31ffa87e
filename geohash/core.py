import logging

from geohash.base32 import char_of, value_of
from geohash.errors import GeohashError, InvalidCoordinateRange
from geohash.types import Coordinate, Direction, Neighbors, Rect

logger = logging.getLogger(__name__)

MIN_LON, MAX_LON = -180.0, 180.0
MIN_LAT, MAX_LAT = -90.0, 90.0

BITS_PER_CHAR = 5


def encode(coordinate: Coordinate, length: int) -> str:
    """Encode a coordinate into a geohash of exactly ``length`` characters.

    Longitude and latitude bits are interleaved as one continuous stream,
    starting with longitude, so the axis parity carries over between
    characters.

    Raises:
        InvalidCoordinateRange: if the coordinate lies outside the globe.
    """
    lo_lon, hi_lon = MIN_LON, MAX_LON
    lo_lat, hi_lat = MIN_LAT, MAX_LAT

    if not (lo_lon <= coordinate.x <= hi_lon and lo_lat <= coordinate.y <= hi_lat):
        raise InvalidCoordinateRange(coordinate)

    result = []
    bits_total = 0
    while len(result) < length:
        value = 0
        for _ in range(BITS_PER_CHAR):
            if bits_total % 2 == 0:
                mid = (lo_lon + hi_lon) / 2
                if coordinate.x > mid:
                    value = (value << 1) | 1
                    lo_lon = mid
                else:
                    value <<= 1
                    hi_lon = mid
            else:
                mid = (lo_lat + hi_lat) / 2
                if coordinate.y > mid:
                    value = (value << 1) | 1
                    lo_lat = mid
                else:
                    value <<= 1
                    hi_lat = mid
            bits_total += 1
        result.append(char_of(value))

    return "".join(result)


def decode_bbox(geohash: str) -> Rect:
    """Decode a geohash into the box of coordinates it covers.

    Raises:
        InvalidHashCharacter: on any character outside the alphabet.
    """
    lo_lon, hi_lon = MIN_LON, MAX_LON
    lo_lat, hi_lat = MIN_LAT, MAX_LAT
    is_lon = True

    for char in geohash:
        value = value_of(char)
        for i in range(BITS_PER_CHAR):
            bit = (value >> (BITS_PER_CHAR - 1 - i)) & 1
            if is_lon:
                mid = (lo_lon + hi_lon) / 2
                if bit:
                    lo_lon = mid
                else:
                    hi_lon = mid
            else:
                mid = (lo_lat + hi_lat) / 2
                if bit:
                    lo_lat = mid
                else:
                    hi_lat = mid
            is_lon = not is_lon

    return Rect(Coordinate(x=lo_lon, y=lo_lat), Coordinate(x=hi_lon, y=hi_lat))


def decode(geohash: str) -> tuple[Coordinate, float, float]:
    """Decode a geohash into ``(center, longitude_error, latitude_error)``."""
    rect = decode_bbox(geohash)
    return rect.center(), rect.width / 2, rect.height / 2


def neighbor(geohash: str, direction: Direction) -> str:
    """Find the adjacent geohash of the same length in ``direction``.

    There is no wraparound at the antimeridian and no clamping at the poles:
    a cell on the edge of the globe has no neighbor beyond it, and asking for
    one raises InvalidCoordinateRange.
    """
    center, lon_err, lat_err = decode(geohash)
    dlat, dlng = direction.to_tuple()
    probe = Coordinate(
        x=center.x + 2 * abs(lon_err) * dlng,
        y=center.y + 2 * abs(lat_err) * dlat,
    )
    logger.debug("neighbor %s of %r probes %r", direction.name, geohash, probe)
    return encode(probe, len(geohash))


def neighbors(geohash: str) -> Neighbors:
    """Find all eight neighbors of a geohash.

    The first direction that fails aborts the whole call.
    """
    try:
        sw = neighbor(geohash, Direction.SW)
        s = neighbor(geohash, Direction.S)
        se = neighbor(geohash, Direction.SE)
        w = neighbor(geohash, Direction.W)
        e = neighbor(geohash, Direction.E)
        nw = neighbor(geohash, Direction.NW)
        n = neighbor(geohash, Direction.N)
        ne = neighbor(geohash, Direction.NE)
    except GeohashError as exc:
        logger.debug("neighbors of %r failed: %s", geohash, exc)
        raise
    return Neighbors(n=n, ne=ne, e=e, se=se, s=s, sw=sw, w=w, nw=nw)
