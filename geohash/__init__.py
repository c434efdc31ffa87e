from geohash.base32 import BASE32
from geohash.codec import Geohash
from geohash.core import decode, decode_bbox, encode, neighbor, neighbors
from geohash.errors import GeohashError, InvalidCoordinateRange, InvalidHashCharacter
from geohash.types import Coordinate, Direction, Neighbors, Rect

__all__ = [
    "BASE32",
    "Coordinate",
    "Direction",
    "Geohash",
    "GeohashError",
    "InvalidCoordinateRange",
    "InvalidHashCharacter",
    "Neighbors",
    "Rect",
    "decode",
    "decode_bbox",
    "encode",
    "neighbor",
    "neighbors",
]
